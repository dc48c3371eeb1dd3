from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from arena_providers.base.errors import ErrorCode, UpstreamError
from arena_providers.base.factory import ProviderFactory
from arena_providers.orchestration import CredentialGate, Orchestrator
from arena_providers.service.app import get_app

GEMINI = "gemini-1.5-flash"
DEEPSEEK = "deepseek/deepseek-chat"


@pytest.fixture()
def gate(fake_builder):
    builder, _ = fake_builder
    g = CredentialGate(adapter_builder=builder)
    g.set_credential("openrouter", "o")
    return g


@pytest.fixture()
def client(gate):
    orch = Orchestrator(gate, sleep=lambda _s: None)
    with TestClient(get_app(orch)) as c:
        yield c


def test_health_ok(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_models_lists_catalog_with_availability(client):
    models = client.get("/api/models").json()["models"]
    assert [(m["id"], m["available"]) for m in models] == [(GEMINI, False), (DEEPSEEK, True)]
    available = client.get("/api/models/available").json()["models"]
    assert [m["id"] for m in available] == [DEEPSEEK]
    assert client.get("/api/models/best").json()["model_id"] == DEEPSEEK


def test_chat_success(client):
    r = client.post(
        "/api/chat",
        json={"model_id": DEEPSEEK, "messages": [{"role": "user", "content": "hi"}]},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert body["response"]["content"] == "pong"
    assert body["response"]["usage"]["total_tokens"] == 3


def test_chat_unconfigured_model_is_409(client):
    r = client.post("/api/chat", json={"model_id": GEMINI, "messages": [{"role": "user", "content": "hi"}]})
    assert r.status_code == 409
    assert r.json()["detail"]["type"] == "NotConfiguredError"


def test_chat_unknown_model_is_404(client):
    r = client.post("/api/chat", json={"model_id": "nope", "messages": [{"role": "user", "content": "hi"}]})
    assert r.status_code == 404


def test_chat_invalid_role_is_422(client):
    r = client.post("/api/chat", json={"model_id": DEEPSEEK, "messages": [{"role": "tool", "content": "x"}]})
    assert r.status_code == 422


def test_chat_upstream_failure_is_502(client, gate):
    gate.resolve(DEEPSEEK).error = UpstreamError(
        code=ErrorCode.AUTH, message="bad key", provider="openrouter", status_code=401, body="denied"
    )
    r = client.post("/api/chat", json={"model_id": DEEPSEEK, "messages": [{"role": "user", "content": "hi"}]})
    assert r.status_code == 502
    detail = r.json()["detail"]
    assert detail["status_code"] == 401
    assert detail["body"] == "denied"


def test_compare_reports_each_model(client):
    r = client.post("/api/compare", json={"model_ids": [GEMINI, DEEPSEEK], "prompt": "ping"})
    assert r.status_code == 200
    results = r.json()["results"]
    assert list(results) == [GEMINI, DEEPSEEK]
    assert results[GEMINI]["ok"] is False
    assert results[GEMINI]["error"]["code"] == "auth"
    assert results[DEEPSEEK]["ok"] is True


def test_keys_registers_and_clears_credentials(client):
    r = client.post("/api/keys", json={"provider": "Google", "api_key": "  g-key  "})
    assert r.status_code == 200
    assert r.json() == {"ok": True, "provider": "google", "available": [GEMINI]}
    assert "g-key" not in r.text
    assert client.get("/api/models/best").json()["model_id"] == GEMINI

    r = client.post("/api/keys", json={"provider": "google", "api_key": "your_google_gemini_api_key_here"})
    assert r.json()["available"] == []


def test_keys_unknown_provider_is_400(client):
    r = client.post("/api/keys", json={"provider": "anthropic", "api_key": "x"})
    assert r.status_code == 400


def test_keys_non_ascii_key_is_400_and_not_registered(client):
    r = client.post("/api/keys", json={"provider": "google", "api_key": "AIza…xyz"})
    assert r.status_code == 400
    assert "AIza" not in r.text
    assert [m["id"] for m in client.get("/api/models/available").json()["models"]] == [DEEPSEEK]


def test_chat_with_unencodable_key_is_502_not_500(make_client):
    http_client, recorder = make_client(lambda r: httpx.Response(200, json={}))

    def _build(provider, secret):
        return ProviderFactory.create(provider, api_key=secret, client=http_client)

    gate = CredentialGate(adapter_builder=_build)
    gate.set_credential("openrouter", "sk-or-…abc")
    with TestClient(get_app(Orchestrator(gate, sleep=lambda _s: None))) as c:
        r = c.post("/api/chat", json={"model_id": DEEPSEEK, "messages": [{"role": "user", "content": "hi"}]})
    assert r.status_code == 502
    assert r.json()["detail"]["code"] == "validation"
    assert recorder.requests == []
