"""Bookstore API client.

A thin wrapper around the Bookstore REST API using ``requests``.  The
client exposes one method per endpoint:

* :meth:`BookstoreClient.list_books` – return every book.
* :meth:`BookstoreClient.get_book` – fetch a single book by id.
* :meth:`BookstoreClient.create_book` – add a book.
* :meth:`BookstoreClient.delete_book` – remove a book, returning the rest.
* :meth:`BookstoreClient.checkout_book` – take one copy out.
* :meth:`BookstoreClient.return_book` – put one copy back.

Books are returned as plain dictionaries.  Any non-2xx response raises
:class:`BookstoreAPIError` carrying the status code and the server's
``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests


logger = logging.getLogger(__name__)


class BookstoreAPIError(Exception):
    """Raised when the API answers with an error status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class BookstoreClient:
    """Client for interacting with the Bookstore API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:8080",
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, including any route prefix.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        if response.status_code >= 400:
            try:
                message = response.json().get("message", response.text)
            except ValueError:
                message = response.text
            raise BookstoreAPIError(response.status_code, message)
        return response.json()

    def list_books(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/books")

    def get_book(self, book_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/books/{book_id}")

    def create_book(self, book_id: str, title: str = "", author: str = "", quantity: int = 0) -> Dict[str, Any]:
        payload = {"id": book_id, "title": title, "author": author, "quantity": quantity}
        return self._request("POST", "/books", json=payload)

    def delete_book(self, book_id: str) -> List[Dict[str, Any]]:
        """Delete a book and return the remaining books."""
        return self._request("DELETE", f"/books/{book_id}")

    def checkout_book(self, book_id: str) -> Dict[str, Any]:
        return self._request("PATCH", "/checkout", params={"id": book_id})

    def return_book(self, book_id: str) -> Dict[str, Any]:
        return self._request("PATCH", "/return", params={"id": book_id})
