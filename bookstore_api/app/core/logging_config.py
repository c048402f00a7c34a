"""
Logging configuration for the application.

``setup_logging`` is called by every ``create_app``.  The level is
applied on each call, so an app built with ``LOG_LEVEL=WARNING`` logs
at that level even if an earlier app already configured logging.  The
console and file handlers are only attached once.
"""

import logging
from pathlib import Path
from typing import Optional

CONSOLE_HANDLER_NAME = "bookstore_api.console"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    return any(
        isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == path
        for handler in logger.handlers
    )


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to, in addition to the console.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    if not any(handler.get_name() == CONSOLE_HANDLER_NAME for handler in root.handlers):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        if not _has_file_handler(root, log_path):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
