"""
Top‑level router for version 1 of the API.

The endpoint modules declare their own full paths (``/books``,
``/checkout``, ``/return``), so they are included without a prefix.
"""

from fastapi import APIRouter

from .endpoints import books, inventory

router = APIRouter()

router.include_router(books.router, tags=["books"])
router.include_router(inventory.router, tags=["inventory"])
