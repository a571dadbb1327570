# This project was developed with assistance from AI tools.
"""Shared fixtures.

Simulated provider delays are disabled for every test, and the app's
history store is swapped for a fresh in-memory store per client so tests
never need a database.
"""

import pytest
from fastapi.testclient import TestClient

from src.core.config import settings
from src.main import app as real_app
from src.routes.history import get_history_store
from src.services.history import InMemoryHistoryStore


@pytest.fixture(autouse=True)
def _fast_test_settings(monkeypatch):
    monkeypatch.setattr(settings, "MOCK_LATENCY_SCALE", 0.0)
    monkeypatch.setattr(settings, "LLM_PROVIDER_MODE", "mock")
    monkeypatch.setattr(settings, "ENVIRONMENT", "test")
    monkeypatch.setattr(settings, "AUTH_DISABLED", False)


@pytest.fixture
def app():
    yield real_app
    real_app.dependency_overrides.clear()


@pytest.fixture
def history_store():
    return InMemoryHistoryStore()


@pytest.fixture
def client(app, history_store):
    """TestClient with the history store pinned to ``history_store``."""
    app.dependency_overrides[get_history_store] = lambda: history_store
    return TestClient(app)


@pytest.fixture
def user_headers():
    return {"x-user-id": "user-42"}
