import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.store import TodoStore


@pytest.fixture
def store():
    return TodoStore()


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as c:
        yield c
