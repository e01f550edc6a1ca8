import pytest

from web_counter.app import create_app
from web_counter.store import CounterStore


@pytest.fixture
def store():
    return CounterStore()


@pytest.fixture
def app(store):
    return create_app(store)


@pytest.fixture
def client(app):
    return app.test_client()


def count_in(body: bytes) -> int:
    text = body.decode("utf-8")
    start = text.index("<p>Count = ") + len("<p>Count = ")
    return int(text[start:text.index("</p>", start)])
