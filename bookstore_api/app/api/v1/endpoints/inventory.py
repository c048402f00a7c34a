"""
Inventory endpoints for API v1.

``PATCH /checkout`` and ``PATCH /return`` take the book id from the
``id`` query parameter (the first one, if repeated).  Every failure,
including an unknown id, is reported as HTTP 400 so existing clients
keep seeing the same status.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from bookstore_api.app.api.deps import get_book_id_param, get_book_store
from bookstore_api.app.core.errors import MISSING_ID_PARAMETER, BookStoreError
from bookstore_api.app.schemas.book import Book, Message
from bookstore_api.app.services.book_service import BookStore

router = APIRouter()


def _require_id(book_id: Optional[str]) -> str:
    if book_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_ID_PARAMETER)
    return book_id


@router.patch("/checkout", response_model=Book, responses={400: {"model": Message}})
async def checkout_book(
    book_id: Optional[str] = Depends(get_book_id_param),
    store: BookStore = Depends(get_book_store),
) -> Book:
    """Decrement the available quantity of a book by one.

    Fails with HTTP 400 when ``id`` is missing, the book does not exist
    or no copies are left.
    """
    book_id = _require_id(book_id)
    try:
        return store.checkout(book_id)
    except BookStoreError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.patch("/return", response_model=Book, responses={400: {"model": Message}})
async def return_book(
    book_id: Optional[str] = Depends(get_book_id_param),
    store: BookStore = Depends(get_book_store),
) -> Book:
    """Increment the available quantity of a book by one."""
    book_id = _require_id(book_id)
    try:
        return store.return_book(book_id)
    except BookStoreError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
