# This project was developed with assistance from AI tools.
"""Fixtures for functional tests.

The real app from ``src.main`` is a module singleton. ``_clean_overrides``
ensures dependency_overrides are cleared after every test so one test's
history store never leaks into the next.
"""

import pytest
from fastapi.testclient import TestClient

from src.main import app as real_app
from src.routes.history import get_history_store
from src.services.history import InMemoryHistoryStore


@pytest.fixture(autouse=True)
def _clean_overrides():
    """Clear app dependency overrides after each test."""
    yield
    real_app.dependency_overrides.clear()


@pytest.fixture
def shared_store():
    """One history store shared by every client a test creates."""
    return InMemoryHistoryStore()


@pytest.fixture
def make_client(shared_store):
    """Factory fixture: return a TestClient acting as ``user_id``."""
    real_app.dependency_overrides[get_history_store] = lambda: shared_store

    def _make(user_id: str | None) -> TestClient:
        headers = {"x-user-id": user_id} if user_id else {}
        return TestClient(real_app, headers=headers)

    return _make
