"""Entry point for serving the Bookstore API.

Host and port come from the ``HOST`` and ``PORT`` environment
variables (defaults ``localhost`` and ``8080``).

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from bookstore_api.app.core.config import settings
from bookstore_api.app.main import app


def main() -> None:
    """Serve the application until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Serving on http://%s:%d", settings.host, settings.port)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
