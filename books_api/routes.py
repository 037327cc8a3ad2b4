"""
Route table for the books API.

Every endpoint is declared once as a RouteSpec: method, path, handler,
documentation text and the response schema. The same declarations drive
request validation, response shaping and the OpenAPI document.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

import structlog
from fastapi import APIRouter, Path, status
from fastapi.responses import PlainTextResponse

from books_api.models import Book, BookCreate, BookRecord, ErrorResponse, NewBook
from books_api.store import BookStore

logger = structlog.get_logger(__name__)

BOOKS_TAG = "books"
NOT_FOUND_MESSAGE = "Book not found"

VALIDATION_ERROR_RESPONSE = {
    status.HTTP_400_BAD_REQUEST: {
        "model": ErrorResponse,
        "description": "Request failed validation",
    }
}


@dataclass(frozen=True)
class RouteSpec:
    """Declarative description of a single endpoint."""
    method: str
    path: str
    endpoint: Callable[..., Any]
    description: str
    response_model: Any = None
    status_code: int = status.HTTP_200_OK
    responses: Dict[int, Dict[str, Any]] = field(default_factory=dict)
    tags: List[str] = field(default_factory=lambda: [BOOKS_TAG])
    name: Optional[str] = None


def build_routes(store: BookStore) -> List[RouteSpec]:
    """
    Build the route table bound to a store.

    Args:
        store: Store the handlers read from and write to

    Returns:
        List of route declarations
    """

    async def list_books() -> List[BookRecord]:
        """Return every book in insertion order."""
        return store.list()

    async def get_book(
        id: int = Path(..., description="The id of the book")
    ):
        """Return a single book, or a plain-text 404 if it does not exist."""
        book = store.get_by_id(id)
        if book is None:
            logger.debug("Book lookup missed", book_id=id)
            return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND)
        return book

    async def create_book(payload: BookCreate) -> BookRecord:
        """Add a book; the store assigns its id."""
        book = store.create(payload.title, payload.author)
        logger.info("Book created", book_id=book.id, title=book.title)
        return book

    return [
        RouteSpec(
            method="GET",
            path="/books",
            endpoint=list_books,
            description="Get all books",
            response_model=List[Book],
            name="list_books",
        ),
        RouteSpec(
            method="GET",
            path="/books/{id}",
            endpoint=get_book,
            description="Get a book by id",
            response_model=Book,
            responses={
                status.HTTP_404_NOT_FOUND: {
                    "description": NOT_FOUND_MESSAGE,
                    "content": {"text/plain": {"schema": {"type": "string"}}},
                },
                **VALIDATION_ERROR_RESPONSE,
            },
            name="get_book",
        ),
        RouteSpec(
            method="POST",
            path="/books",
            endpoint=create_book,
            description="Add a new book",
            response_model=NewBook,
            status_code=status.HTTP_201_CREATED,
            responses=VALIDATION_ERROR_RESPONSE,
            name="create_book",
        ),
    ]


def register_routes(router: APIRouter, routes: List[RouteSpec]) -> APIRouter:
    """Add each declared route to a FastAPI router."""
    for route in routes:
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            response_model=route.response_model,
            status_code=route.status_code,
            responses=dict(route.responses),
            tags=route.tags,
            summary=route.description,
            description=route.description,
            name=route.name,
        )
    return router


def create_books_router(store: BookStore) -> APIRouter:
    """Create the books router bound to a store."""
    return register_routes(APIRouter(), build_routes(store))
