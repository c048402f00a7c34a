"""
Domain exceptions and HTTP error rendering.

The store raises the exceptions defined here; endpoints translate them
into ``HTTPException`` with the status code appropriate for the route.
``register_exception_handlers`` makes every error response share the
``{"message": "..."}`` body shape.
"""

import json
import logging
from typing import Any, Type

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

BOOK_NOT_FOUND = "Book not found."
BOOK_NOT_AVAILABLE = "Book not available."
BOOK_ALREADY_EXISTS = "Book already exists."
MISSING_ID_PARAMETER = "Missing id query parameter."
INVALID_REQUEST_BODY = "Invalid request body."


class BookStoreError(Exception):
    """Base class for errors raised by the book store."""


class BookNotFoundError(BookStoreError, LookupError):
    def __init__(self, book_id: str) -> None:
        super().__init__(BOOK_NOT_FOUND)
        self.book_id = book_id


class BookUnavailableError(BookStoreError, ValueError):
    """Raised when checking out a book with no copies left."""

    def __init__(self, book_id: str) -> None:
        super().__init__(BOOK_NOT_AVAILABLE)
        self.book_id = book_id


class BookAlreadyExistsError(BookStoreError, ValueError):
    def __init__(self, book_id: str) -> None:
        super().__init__(BOOK_ALREADY_EXISTS)
        self.book_id = book_id


class IndentedJSONResponse(JSONResponse):
    """JSON response rendered with a four-space indent."""

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=4,
            separators=(",", ": "),
        ).encode("utf-8")


def register_exception_handlers(app: FastAPI, response_class: Type[JSONResponse] = JSONResponse) -> None:
    """Render HTTP and validation errors as ``{"message": ...}``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return response_class(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return response_class(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": INVALID_REQUEST_BODY},
        )
