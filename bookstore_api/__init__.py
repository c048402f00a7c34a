"""
Top‑level package for the Bookstore API.

The service itself lives in the ``app`` subpackage; this package also
ships a small HTTP client in ``bookstore_api.client`` for talking to a
running instance.
"""

__all__ = []
