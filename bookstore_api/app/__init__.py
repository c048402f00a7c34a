"""
Application package initializer.

The service is split into a configuration/logging core, Pydantic
schemas, the in‑memory book store and versioned routers under
``api/v1``.  ``create_app`` in ``main`` wires them together.
"""

from .main import app, create_app  # noqa: F401
