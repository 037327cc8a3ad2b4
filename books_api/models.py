"""
API models and schemas for the books service.

Each schema is declared once and used both for request validation and
for the generated OpenAPI document.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.types import PositiveInt


class BookRecord(BaseModel):
    """Book as held by the store, including bookkeeping fields."""
    id: PositiveInt = Field(..., description="Unique book identifier")
    title: str = Field(..., description="The title of the book")
    author: str = Field(..., description="The author of the book")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the book was added to the store"
    )

    model_config = {"frozen": True}


class BookCreate(BaseModel):
    """Payload for adding a new book."""
    title: str = Field(..., min_length=1, description="The title of the book")
    author: str = Field(..., min_length=1, description="The author of the book")

    model_config = {
        "extra": "forbid",
        "json_schema_extra": {
            "examples": [{"title": "Dune", "author": "Frank Herbert"}]
        },
    }


class Book(BaseModel):
    """Book response model, exposing only the public fields."""
    id: int = Field(..., description="Unique book identifier")
    title: str = Field(..., description="The title of the book")
    author: str = Field(..., description="The author of the book")

    model_config = {"from_attributes": True}


class NewBook(Book):
    """Response model for a freshly created book."""


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Additional error details")
    status_code: int = Field(..., description="HTTP status code")
