import pytest
from fastapi.testclient import TestClient

import store
from main import app


@pytest.fixture(autouse=True)
def empty_store():
    """Every test starts (and ends) with no sessions."""
    store.sessions.clear()
    yield
    store.sessions.clear()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
