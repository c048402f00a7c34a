import pytest
from fastapi.testclient import TestClient

from bookstore_api.app.core.config import Settings
from bookstore_api.app.main import create_app
from bookstore_api.app.services.book_service import BookStore


@pytest.fixture
def settings():
    return Settings(
        seed_books=True,
        allow_duplicate_ids=True,
        indent_json=True,
        api_prefix="",
        log_level="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store():
    return BookStore.with_seed_data()
