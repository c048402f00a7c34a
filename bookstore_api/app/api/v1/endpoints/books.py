"""
Book catalogue endpoints for API v1.

These routes list, fetch, create and delete book records.  Unknown ids
produce HTTP 404 with ``{"message": "Book not found."}``.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from bookstore_api.app.api.deps import get_book_store
from bookstore_api.app.core.errors import BookAlreadyExistsError, BookNotFoundError
from bookstore_api.app.schemas.book import Book, BookCreate, Message
from bookstore_api.app.services.book_service import BookStore

router = APIRouter()


@router.get("/books", response_model=List[Book])
async def list_books(store: BookStore = Depends(get_book_store)) -> List[Book]:
    """Return every book in insertion order."""
    return store.list_books()


@router.get(
    "/books/{book_id}",
    response_model=Book,
    responses={404: {"model": Message}},
)
async def get_book(
    book_id: str = Path(..., description="ID of the book"),
    store: BookStore = Depends(get_book_store),
) -> Book:
    try:
        return store.get_book(book_id)
    except BookNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post(
    "/books",
    response_model=Book,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": Message}, 409: {"model": Message}},
)
async def create_book(
    book_in: BookCreate,
    store: BookStore = Depends(get_book_store),
) -> Book:
    """Append a new book to the store.

    Missing fields default to empty strings and a zero quantity.  A body
    that is not valid JSON or has wrongly typed fields yields HTTP 400.
    """
    try:
        return store.append(book_in)
    except BookAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.delete(
    "/books/{book_id}",
    response_model=List[Book],
    responses={404: {"model": Message}},
)
async def delete_book(
    book_id: str = Path(..., description="ID of the book"),
    store: BookStore = Depends(get_book_store),
) -> List[Book]:
    """Delete a book and return the books that remain."""
    try:
        return store.delete_book(book_id)
    except BookNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
