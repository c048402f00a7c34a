"""
Main entrypoint for the Bookstore API.

``create_app`` builds and configures the FastAPI application: logging,
the in-memory book store, error rendering and the v1 routes.  An
instance is created at import time as ``app`` so it can be served
directly, e.g.::

    uvicorn bookstore_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import IndentedJSONResponse, register_exception_handlers
from .core.logging_config import setup_logging
from .services.book_service import BookStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module‑level settings
        read from the environment.

    Returns
    -------
    FastAPI
        A configured application with its own book store.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    response_class = IndentedJSONResponse if settings.indent_json else JSONResponse
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        default_response_class=response_class,
    )

    if settings.seed_books:
        store = BookStore.with_seed_data(allow_duplicate_ids=settings.allow_duplicate_ids)
    else:
        store = BookStore(allow_duplicate_ids=settings.allow_duplicate_ids)
    app.state.settings = settings
    app.state.book_store = store
    logger.info("Book store initialised with %d books", len(store))

    register_exception_handlers(app, response_class)
    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.get("/health")
    async def health() -> dict:
        """Health check endpoint."""
        return {"status": "ok"}

    return app


app = create_app()
