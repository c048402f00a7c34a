"""
Simple configuration management.

``Settings`` is a dataclass whose defaults are read from environment
variables when this module is imported.  Tests and embedding code can
construct their own ``Settings`` instance and pass it to
``create_app`` instead of relying on the module‑level ``settings``.
"""

import os
from dataclasses import dataclass


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Bookstore API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _as_bool(os.getenv("DEBUG", "false"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path for a log file in addition to the console handler.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "localhost")
    port: int = int(os.getenv("PORT", "8080"))

    # Routes are served from the root by default.  Set e.g.
    # API_PREFIX=/api/v1 to mount them under a versioned prefix.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Load the three sample books when the store is created.
    seed_books: bool = _as_bool(os.getenv("BOOKSTORE_SEED", "true"))

    # When false, POST /books rejects an id that is already stored.
    allow_duplicate_ids: bool = _as_bool(os.getenv("BOOKSTORE_ALLOW_DUPLICATE_IDS", "true"))

    # Pretty-print JSON responses with a four-space indent.
    indent_json: bool = _as_bool(os.getenv("BOOKSTORE_INDENT_JSON", "true"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is imported.
settings = Settings()
