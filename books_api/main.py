"""
FastAPI application for the books API.
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from books_api.config import APIConfig, config as default_config
from books_api.models import ErrorResponse
from books_api.routes import create_books_router
from books_api.store import BookStore

# Setup logging
logger = structlog.get_logger(__name__)

# Documented only; no route checks it.
SECURITY_SCHEMES = {
    "jwt": {
        "type": "apiKey",
        "name": "Authorization",
        "in": "header",
    }
}
SECURITY_REQUIREMENTS = [{"jwt": []}]

VALIDATION_ERROR_DETAIL = "Invalid request input"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting books API", books=len(app.state.store))
    yield
    logger.info("Shutting down books API")


def install_openapi(app: FastAPI, api_config: APIConfig) -> None:
    """Generate the OpenAPI document with the declared security scheme."""

    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema

        schema = get_openapi(
            title=api_config.api_title,
            version=api_config.api_version,
            description=api_config.api_description,
            routes=app.routes,
        )
        schema.setdefault("components", {})["securitySchemes"] = SECURITY_SCHEMES
        schema["security"] = SECURITY_REQUIREMENTS

        app.openapi_schema = schema
        return app.openapi_schema

    app.openapi = custom_openapi


def install_exception_handlers(app: FastAPI, api_config: APIConfig) -> None:
    """Register the error handlers that shape failure responses."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Reject malformed input with a generic 400."""
        logger.debug(
            "Request validation failed",
            path=request.url.path,
            method=request.method,
            errors=len(exc.errors())
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(
                error="Bad Request",
                detail=VALIDATION_ERROR_DETAIL,
                status_code=status.HTTP_400_BAD_REQUEST
            ).model_dump()
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions."""
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error=str(exc.detail),
                status_code=exc.status_code
            ).model_dump(),
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle general exceptions."""
        logger.error(
            "Unhandled exception",
            error=str(exc),
            path=request.url.path,
            exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(
                error="Internal server error",
                detail=str(exc) if api_config.debug else None,
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
            ).model_dump()
        )


def create_app(
    store: Optional[BookStore] = None,
    api_config: Optional[APIConfig] = None
) -> FastAPI:
    """
    Build the FastAPI application around a book store.

    Args:
        store: Store backing the endpoints; a freshly seeded one if omitted
        api_config: Settings; the module-level config if omitted

    Returns:
        Configured FastAPI application
    """
    api_config = api_config or default_config
    store = store if store is not None else BookStore()

    app = FastAPI(
        title=api_config.api_title,
        description=api_config.api_description,
        version=api_config.api_version,
        docs_url=api_config.docs_path,
        openapi_url=api_config.openapi_path,
        redoc_url=None,
        lifespan=lifespan
    )
    app.state.store = store

    app.include_router(create_books_router(store))
    install_exception_handlers(app, api_config)
    install_openapi(app, api_config)

    return app


app = create_app()
