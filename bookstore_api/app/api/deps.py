"""Request dependencies shared by the endpoint modules."""

from typing import Optional

from fastapi import Request

from bookstore_api.app.services.book_service import BookStore


def get_book_store(request: Request) -> BookStore:
    """Return the store attached to the running application."""
    return request.app.state.book_store


def get_book_id_param(request: Request) -> Optional[str]:
    """Return the first ``id`` query value, or ``None`` when absent.

    Starlette resolves a repeated parameter to its last value; clients
    of this API expect ``?id=1&id=2`` to mean book ``1``.
    """
    values = request.query_params.getlist("id")
    return values[0] if values else None
