import pytest

from bookstore_api.client import BookstoreAPIError, BookstoreClient


class AppSession:
    """Adapts a FastAPI TestClient to the ``requests.Session.request`` call."""

    def __init__(self, test_client):
        self.test_client = test_client
        self.calls = []

    def request(self, method, url, timeout=None, **kwargs):
        self.calls.append((method, url, timeout))
        return self.test_client.request(method, url, **kwargs)


@pytest.fixture
def api(client):
    session = AppSession(client)
    return BookstoreClient(base_url="http://testserver/", session=session, timeout=2.5)


def test_list_and_get(api):
    books = api.list_books()
    assert [b["id"] for b in books] == ["1", "2", "3"]
    assert api.get_book("2")["title"] == "Dom Casmurro"
    assert api.session.calls[0] == ("GET", "http://testserver/books", 2.5)


def test_create_and_delete(api):
    created = api.create_book("9", title="T", author="A", quantity=3)
    assert created == {"id": "9", "title": "T", "author": "A", "quantity": 3}
    remaining = api.delete_book("9")
    assert [b["id"] for b in remaining] == ["1", "2", "3"]


def test_checkout_and_return(api):
    assert api.checkout_book("1")["quantity"] == 1
    assert api.return_book("1")["quantity"] == 2


def test_error_carries_status_and_message(api):
    with pytest.raises(BookstoreAPIError) as exc:
        api.get_book("99")
    assert exc.value.status_code == 404
    assert exc.value.message == "Book not found."

    api.checkout_book("1")
    api.checkout_book("1")
    with pytest.raises(BookstoreAPIError) as exc:
        api.checkout_book("1")
    assert exc.value.status_code == 400
    assert exc.value.message == "Book not available."
