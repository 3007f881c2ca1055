# tests/test_routes/test_ai_routes.py
import json

import httpx
import pytest

from arm_backend.main import app
from arm_backend.routes.ai import get_ai_transport


def _stream_body(*chunks):
    lines = [f"data: {json.dumps({'choices': [{'delta': {'content': c}}]})}" for c in chunks]
    lines += [": keep-alive", "data: [DONE]"]
    return "\n\n".join(lines).encode()


@pytest.fixture
def ai_key(settings, monkeypatch):
    monkeypatch.setattr(settings, "AI_API_KEY", "test-key")


@pytest.fixture
def provider(client):
    """Route the assistant's HTTP calls to a handler set by the test."""
    calls = []
    state = {"handler": None}

    def handler(request: httpx.Request):
        calls.append(request)
        return state["handler"](request)

    app.dependency_overrides[get_ai_transport] = lambda: httpx.MockTransport(handler)
    state["calls"] = calls
    return state


def test_not_configured(client):
    response = client.post("/api/ai/chat", json={"message": "Bonjour"})
    assert response.status_code == 503
    assert response.json() == {"error": "AI assistant is not configured"}


def test_empty_message(client):
    assert client.post("/api/ai/chat", json={"message": ""}).status_code == 400


def test_streams_text_events(client, ai_key, provider, auth_headers):
    client.post("/api/leadership", json={"name": "Lassine Diakité", "position": "Président"}, headers=auth_headers)
    provider["handler"] = lambda request: httpx.Response(200, content=_stream_body("Bonjour", ", je suis l'assistant."))

    response = client.post("/api/ai/chat", json={"message": "Qui dirige le parti ?", "context": "mobile"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/event-stream")
    assert response.text == (
        'data: {"text": "Bonjour"}\n\n'
        'data: {"text": ", je suis l\'assistant."}\n\n'
    )

    sent = json.loads(provider["calls"][0].content)
    assert provider["calls"][0].headers["Authorization"] == "Bearer test-key"
    assert sent["stream"] is True
    assert sent["messages"][1] == {"role": "user", "content": "Qui dirige le parti ?"}
    assert "Président: Lassine Diakité" in sent["messages"][0]["content"]
    assert sent["messages"][0]["content"].endswith("Additional context: mobile")


def test_provider_error(client, ai_key, provider):
    provider["handler"] = lambda request: httpx.Response(500, json={"error": "boom"})

    response = client.post("/api/ai/chat", json={"message": "Bonjour"})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate response"}


def test_provider_unreachable(client, ai_key, provider):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)
    provider["handler"] = refuse

    response = client.post("/api/ai/chat", json={"message": "Bonjour"})
    assert response.status_code == 500
