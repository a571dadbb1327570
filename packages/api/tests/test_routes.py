# This project was developed with assistance from AI tools.
"""HTTP-level tests: request validation, status mapping and error bodies."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from db.enums import HistoryBackend
from fastapi.testclient import TestClient

from src.core.config import settings
from src.inference.dispatcher import ProviderExecutionError
from src.routes import history as history_routes
from src.routes.history import get_history_store

# -- Service info --


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["version"] == settings.APP_VERSION
    assert body["environment"] == "test"


def test_service_info_lists_endpoints(client):
    body = client.get("/api").json()
    assert body["name"] == settings.APP_NAME
    assert body["endpoints"]["runLLMBatch"] == "POST /api/run/batch"
    assert "Intent Analysis" in body["features"]


# -- Stateless stages --


def test_analyze_intent(client):
    resp = client.post("/api/intent/analyze", json={"text": "Translate this to French"})
    assert resp.status_code == 200
    assert resp.json() == {
        "intentCategory": "translation",
        "tags": ["translation", "language", "multilingual"],
        "confidence": 0.95,
    }


@pytest.mark.parametrize("text", ["", "x" * 10_001])
def test_analyze_intent_rejects_bad_length(client, text):
    resp = client.post("/api/intent/analyze", json={"text": text})
    assert resp.status_code == 422
    body = resp.json()
    assert body["title"] == "Unprocessable Entity"
    assert body["instance"] == "/api/intent/analyze"


def test_recommend_model_with_budget(client):
    resp = client.post(
        "/api/model/recommend",
        json={"intentCategory": "problem_solving", "budget": 0.004},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["modelName"] == "gpt-3.5-turbo"
    assert body["estimatedCost"] == 0.002


def test_recommend_model_rejects_unknown_category(client):
    resp = client.post("/api/model/recommend", json={"intentCategory": "poetry"})
    assert resp.status_code == 422


def test_recommend_model_rejects_negative_budget(client):
    resp = client.post(
        "/api/model/recommend", json={"intentCategory": "other", "budget": -1}
    )
    assert resp.status_code == 422


def test_generate_prompt(client):
    resp = client.post(
        "/api/prompt/generate",
        json={"model": "gpt-4o", "intent": "other", "userInput": "hi"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["rawPrompt"] == "Please help me with: hi"
    assert body["improvements"] == ["Initial prompt generated"]


def test_refine_prompt_rejects_unknown_tone(client):
    resp = client.post(
        "/api/prompt/refine",
        json={"prompt": "p", "tone": "sarcastic", "complexity": "simple"},
    )
    assert resp.status_code == 422


# -- Execution --


def test_run_llm_mock(client):
    resp = client.post("/api/run/llm", json={"model": "llama-3.1-8b", "prompt": "Hello"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["output"].startswith("[Local Model Response] Hello...")
    assert body["usage"]["promptTokens"] == 2
    assert body["latency"] >= 0


@pytest.mark.parametrize(
    "payload",
    [
        {"model": "gpt-5", "prompt": "x"},
        {"model": "gpt-4o", "prompt": "x", "temperature": 2.5},
        {"model": "gpt-4o", "prompt": "x", "maxTokens": 0},
    ],
)
def test_run_llm_validation(client, payload):
    assert client.post("/api/run/llm", json=payload).status_code == 422


def test_run_llm_provider_failure_is_502(client):
    with patch(
        "src.routes.run.execute",
        new=AsyncMock(side_effect=ProviderExecutionError("LLM execution failed after 3ms: x", 3)),
    ):
        resp = client.post("/api/run/llm", json={"model": "gpt-4o", "prompt": "x"})
    assert resp.status_code == 502
    assert resp.json()["detail"] == "LLM execution failed after 3ms: x"


def test_run_batch_preserves_order(client):
    payload = [
        {"model": "gpt-4o", "prompt": "first"},
        {"model": "claude-3-haiku", "prompt": "second"},
    ]
    resp = client.post("/api/run/batch", json=payload)
    assert resp.status_code == 200
    outputs = [item["output"] for item in resp.json()]
    assert outputs[0].startswith("[OpenAI Response] first")
    assert outputs[1].startswith("[Claude Response] second")


def test_run_batch_failure_is_502_with_index(client):
    async def _handler(model, prompt, options):
        if prompt == "bad":
            raise RuntimeError("quota exceeded")
        return "fine"

    with patch("src.inference.dispatcher.get_provider_handler", return_value=_handler):
        resp = client.post(
            "/api/run/batch",
            json=[{"model": "gpt-4o", "prompt": "ok"}, {"model": "gpt-4o", "prompt": "bad"}],
        )
    assert resp.status_code == 502
    detail = resp.json()["detail"]
    assert detail.startswith("Batch request 1 failed: LLM execution failed after")
    assert detail.endswith("quota exceeded")


def test_server_errors_hidden_in_production(client, monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    with patch(
        "src.routes.run.execute",
        new=AsyncMock(side_effect=ProviderExecutionError("upstream secret", 1)),
    ):
        resp = client.post("/api/run/llm", json={"model": "gpt-4o", "prompt": "x"})
    assert resp.status_code == 502
    assert "secret" not in resp.json()["detail"]


def test_unhandled_exception_is_500(app):
    with patch("src.routes.intent.classify_intent", side_effect=RuntimeError("kaboom")):
        resp = TestClient(app, raise_server_exceptions=False).post(
            "/api/intent/analyze", json={"text": "hi"}
        )
    assert resp.status_code == 500
    body = resp.json()
    assert body["title"] == "Internal Server Error"
    assert body["detail"] == "kaboom"


def test_request_id_is_echoed(client):
    resp = client.post("/api/intent/analyze", json={"text": ""}, headers={"x-request-id": "req-1"})
    assert resp.json()["request_id"] == "req-1"


# -- History --


def test_history_requires_user(client):
    for resp in (
        client.get("/api/history"),
        client.get("/api/history/analytics"),
        client.post(
            "/api/history/log", json={"model": "gpt-4o", "prompt": "p", "result": "r"}
        ),
    ):
        assert resp.status_code == 401
        assert resp.json()["detail"] == "User ID required"


def test_log_and_read_history(client, user_headers):
    resp = client.post(
        "/api/history/log",
        json={
            "model": "gpt-4o",
            "prompt": "p",
            "result": "r",
            "metadata": {"intentCategory": "brainstorming", "tags": ["ideas"]},
        },
        headers=user_headers,
    )
    assert resp.status_code == 200
    assert resp.json() == {"success": True}

    records = client.get("/api/history", headers=user_headers).json()
    assert len(records) == 1
    assert records[0]["userId"] == "user-42"
    assert records[0]["metadata"]["intentCategory"] == "brainstorming"

    assert client.get("/api/history", headers={"x-user-id": "other"}).json() == []


@pytest.mark.parametrize("limit", [0, 101])
def test_history_limit_bounds(client, user_headers, limit):
    resp = client.get(f"/api/history?limit={limit}", headers=user_headers)
    assert resp.status_code == 422


def test_history_limit_applies(client, user_headers):
    for i in range(5):
        client.post(
            "/api/history/log",
            json={"model": "gpt-4o", "prompt": f"p{i}", "result": "r"},
            headers=user_headers,
        )
    records = client.get("/api/history?limit=3", headers=user_headers).json()
    assert [r["prompt"] for r in records] == ["p4", "p3", "p2"]


def test_empty_analytics(client, user_headers):
    resp = client.get("/api/history/analytics", headers=user_headers)
    assert resp.json() == {
        "totalInteractions": 0,
        "modelUsage": {},
        "intentDistribution": {},
        "lastInteraction": None,
    }


def test_store_failure_is_503(app, user_headers):
    class _BrokenStore:
        async def append(self, log):
            raise OSError("disk full")

        async def list_for_user(self, user_id, limit=None):
            raise OSError("disk full")

    app.dependency_overrides[get_history_store] = lambda: _BrokenStore()
    resp = TestClient(app).get("/api/history/analytics", headers=user_headers)
    assert resp.status_code == 503
    assert resp.json()["detail"] == "Failed to fetch analytics"


def _sql_session_service(session: AsyncMock) -> MagicMock:
    ctx = MagicMock()
    ctx.__aenter__ = AsyncMock(return_value=session)
    ctx.__aexit__ = AsyncMock(return_value=False)
    service = MagicMock()
    service.session.return_value = ctx
    return service


def test_failed_sql_commit_is_503_not_success(app, user_headers, monkeypatch):
    """The commit happens before the response, so its failure reaches the caller."""
    session = AsyncMock()
    session.add = MagicMock()
    session.commit.side_effect = RuntimeError("commit lost")
    monkeypatch.setattr(settings, "HISTORY_BACKEND", HistoryBackend.SQL)
    monkeypatch.setattr(
        history_routes, "get_db_service", lambda: _sql_session_service(session)
    )

    resp = TestClient(app).post(
        "/api/history/log",
        json={"model": "gpt-4o", "prompt": "p", "result": "r"},
        headers=user_headers,
    )

    assert resp.status_code == 503
    assert resp.json()["detail"] == "Failed to log interaction"
    session.commit.assert_awaited_once()
    session.rollback.assert_awaited_once()


def test_sql_log_commits_before_responding(app, user_headers, monkeypatch):
    session = AsyncMock()
    session.add = MagicMock()

    async def _refresh(row):
        row.id = 1
        row.timestamp = datetime(2024, 5, 1, tzinfo=UTC)

    session.refresh.side_effect = _refresh
    monkeypatch.setattr(settings, "HISTORY_BACKEND", HistoryBackend.SQL)
    monkeypatch.setattr(
        history_routes, "get_db_service", lambda: _sql_session_service(session)
    )

    resp = TestClient(app).post(
        "/api/history/log",
        json={"model": "gpt-4o", "prompt": "p", "result": "r"},
        headers=user_headers,
    )

    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    session.commit.assert_awaited_once()
    session.rollback.assert_not_awaited()
