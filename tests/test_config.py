import importlib
import logging

from bookstore_api.app.core import config
from bookstore_api.app.core.logging_config import CONSOLE_HANDLER_NAME, setup_logging
from bookstore_api.app.main import create_app


def test_defaults(monkeypatch):
    for name in ("HOST", "PORT", "BOOKSTORE_SEED", "BOOKSTORE_ALLOW_DUPLICATE_IDS", "API_PREFIX"):
        monkeypatch.delenv(name, raising=False)
    try:
        settings = importlib.reload(config).settings
        assert settings.host == "localhost"
        assert settings.port == 8080
        assert settings.api_prefix == ""
        assert settings.seed_books is True
        assert settings.allow_duplicate_ids is True
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("BOOKSTORE_SEED", "no")
    monkeypatch.setenv("BOOKSTORE_ALLOW_DUPLICATE_IDS", "0")
    monkeypatch.setenv("API_PREFIX", "/api/v1")
    try:
        reloaded = importlib.reload(config)
        assert reloaded.settings.port == 9090
        assert reloaded.settings.seed_books is False
        assert reloaded.settings.allow_duplicate_ids is False
        assert reloaded.settings.api_prefix == "/api/v1"
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_setup_logging_attaches_console_handler_once():
    root = logging.getLogger()
    setup_logging("INFO")
    setup_logging("INFO")
    named = [h for h in root.handlers if h.get_name() == CONSOLE_HANDLER_NAME]
    assert len(named) == 1


def test_setup_logging_applies_level_on_every_call():
    root = logging.getLogger()
    previous = root.level
    try:
        setup_logging("INFO")
        assert root.level == logging.INFO
        setup_logging("WARNING")
        assert root.level == logging.WARNING
        setup_logging("bogus")
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)


def test_create_app_applies_configured_level():
    root = logging.getLogger()
    previous = root.level
    try:
        create_app(config.Settings(log_level="DEBUG"))
        assert root.level == logging.DEBUG
        create_app(config.Settings(log_level="WARNING"))
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)


def test_log_file_handler_added_once(tmp_path):
    root = logging.getLogger()
    log_file = tmp_path / "bookstore.log"
    try:
        setup_logging("INFO", str(log_file))
        setup_logging("INFO", str(log_file))
        file_handlers = [
            h for h in root.handlers
            if isinstance(h, logging.FileHandler) and h.baseFilename == str(log_file.resolve())
        ]
        assert len(file_handlers) == 1
        logging.getLogger("bookstore_api.test").warning("written")
        file_handlers[0].flush()
        assert "written" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(root.handlers):
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == str(log_file.resolve()):
                root.removeHandler(handler)
                handler.close()
