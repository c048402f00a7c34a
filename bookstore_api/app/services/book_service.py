"""
In-memory book store.

``BookStore`` owns an ordered list of ``Book`` records.  Lookups are
linear scans that resolve to the first record with a matching id, in
insertion order.  Every operation holds a single store-wide lock, so
concurrent checkouts of the last copy of a book cannot both succeed.

Public read methods hand out copies; ``find_by_id`` is the only method
that returns the stored object itself and is meant for callers that
already hold ``lock``.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional

from bookstore_api.app.core.errors import (
    BookAlreadyExistsError,
    BookNotFoundError,
    BookUnavailableError,
)
from bookstore_api.app.schemas.book import Book, BookCreate

logger = logging.getLogger(__name__)


SEED_BOOKS = (
    Book(id="1", title="Capitães da Areia", author="Jorge Amado", quantity=2),
    Book(id="2", title="Dom Casmurro", author="Machado de Assis", quantity=5),
    Book(id="3", title="A droga da obediência", author="Pedro Bandeira", quantity=6),
)


class BookStore:
    """Ordered, lock-protected collection of books."""

    def __init__(self, books: Optional[Iterable[Book]] = None, *, allow_duplicate_ids: bool = True) -> None:
        self.lock = threading.Lock()
        self.allow_duplicate_ids = allow_duplicate_ids
        self._books: List[Book] = [book.model_copy() for book in books or ()]

    @classmethod
    def with_seed_data(cls, *, allow_duplicate_ids: bool = True) -> "BookStore":
        return cls(SEED_BOOKS, allow_duplicate_ids=allow_duplicate_ids)

    def __len__(self) -> int:
        with self.lock:
            return len(self._books)

    def find_by_id(self, book_id: str) -> Optional[Book]:
        """Return the stored record for ``book_id`` or ``None``.

        The returned object is the one held by the store, so changes to
        it are visible to later reads.  Callers must hold ``lock``.
        """
        for book in self._books:
            if book.id == book_id:
                return book
        return None

    def list_books(self) -> List[Book]:
        with self.lock:
            return [book.model_copy() for book in self._books]

    def get_book(self, book_id: str) -> Book:
        with self.lock:
            book = self.find_by_id(book_id)
            if book is None:
                raise BookNotFoundError(book_id)
            return book.model_copy()

    def append(self, data: BookCreate | Book) -> Book:
        """Add a book to the end of the store and return a copy of it.

        No field is validated.  A colliding id is accepted unless the
        store was created with ``allow_duplicate_ids=False``.
        """
        book = Book(**data.model_dump())
        with self.lock:
            if not self.allow_duplicate_ids and self.find_by_id(book.id) is not None:
                logger.warning("Rejected duplicate book id %r", book.id)
                raise BookAlreadyExistsError(book.id)
            self._books.append(book)
        logger.info("Created book %r", book.id)
        return book.model_copy()

    def _remove_locked(self, book_id: str) -> bool:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                del self._books[index]
                logger.info("Deleted book %r", book_id)
                return True
        return False

    def remove_by_id(self, book_id: str) -> bool:
        """Remove the first book with ``book_id``.

        Returns ``True`` if a record was removed, ``False`` otherwise.
        The relative order of the remaining books is unchanged.
        """
        with self.lock:
            return self._remove_locked(book_id)

    def delete_book(self, book_id: str) -> List[Book]:
        """Remove a book and return copies of the books left.

        The removal and the snapshot happen under one lock acquisition.
        Raises ``BookNotFoundError`` if no book has ``book_id``.
        """
        with self.lock:
            if not self._remove_locked(book_id):
                raise BookNotFoundError(book_id)
            return [book.model_copy() for book in self._books]

    def checkout(self, book_id: str) -> Book:
        """Take one copy of a book out of the store.

        Raises ``BookNotFoundError`` for an unknown id and
        ``BookUnavailableError`` when no copies are left.
        """
        with self.lock:
            book = self.find_by_id(book_id)
            if book is None:
                logger.warning("Checkout of unknown book %r", book_id)
                raise BookNotFoundError(book_id)
            if book.quantity <= 0:
                logger.warning("Checkout of unavailable book %r", book_id)
                raise BookUnavailableError(book_id)
            book.quantity -= 1
            logger.info("Checked out book %r, %d left", book_id, book.quantity)
            return book.model_copy()

    def return_book(self, book_id: str) -> Book:
        """Put one copy of a book back.  The quantity has no upper bound."""
        with self.lock:
            book = self.find_by_id(book_id)
            if book is None:
                logger.warning("Return of unknown book %r", book_id)
                raise BookNotFoundError(book_id)
            book.quantity += 1
            logger.info("Returned book %r, %d available", book_id, book.quantity)
            return book.model_copy()
