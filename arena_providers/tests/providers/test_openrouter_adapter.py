"""Unit tests for the OpenRouter provider adapter (offline via MockTransport)."""
from __future__ import annotations

import json

import httpx
import pytest

from arena_providers.base.errors import ErrorCode, TransportError, UpstreamError
from arena_providers.base.models import ChatMessage
from arena_providers.openrouter.client import OpenRouterProvider

MODEL = "deepseek/deepseek-chat"


def _ok(content="hi there", usage=None):
    body = {"id": "gen-1", "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}
    if usage is not None:
        body["usage"] = usage
    return httpx.Response(200, json=body)


def test_request_shape_and_headers(make_client):
    client, recorder = make_client(lambda r: _ok())
    provider = OpenRouterProvider(api_key="sk-or-test", client=client, app_referer="http://localhost:5173")

    history = [
        ChatMessage(role="system", content="be brief"),
        ChatMessage(role="user", content="hello"),
        ChatMessage(role="assistant", content="hi"),
        ChatMessage(role="user", content="again"),
    ]
    provider.chat(history, MODEL)

    assert len(recorder.requests) == 1
    req = recorder.requests[0]
    assert str(req.url) == "https://openrouter.ai/api/v1/chat/completions"
    assert req.headers["Authorization"] == "Bearer sk-or-test"
    assert req.headers["X-Title"] == "AI Learning Tool"
    assert req.headers["HTTP-Referer"] == "http://localhost:5173"
    assert json.loads(req.content) == {
        "model": MODEL,
        "messages": [m.to_dict() for m in history],
        "max_tokens": 1000,
        "temperature": 0.7,
    }


def test_referer_header_omitted_when_not_configured(make_client):
    client, recorder = make_client(lambda r: _ok())
    OpenRouterProvider(api_key="k", client=client).chat([ChatMessage(role="user", content="x")], MODEL)
    assert "HTTP-Referer" not in recorder.requests[0].headers


def test_base_url_from_configuration(monkeypatch, make_client):
    monkeypatch.setenv("OPENROUTER_BASE_URL", "https://proxy.example/api/v1/")
    client, recorder = make_client(lambda r: _ok())
    OpenRouterProvider(api_key="k", client=client).chat([ChatMessage(role="user", content="x")], MODEL)
    assert str(recorder.requests[0].url) == "https://proxy.example/api/v1/chat/completions"


def test_usage_passed_through_verbatim(make_client):
    usage = {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 42}
    client, _ = make_client(lambda r: _ok(usage=usage))
    result = OpenRouterProvider(api_key="k", client=client).chat([ChatMessage(role="user", content="x")], MODEL)
    assert result.content == "hi there"
    assert result.model_id == MODEL
    assert result.usage.total_tokens == 42
    assert result.usage.prompt_tokens == 10


def test_absent_usage_and_content_fallback(make_client):
    client, _ = make_client(lambda r: httpx.Response(200, json={"choices": []}))
    result = OpenRouterProvider(api_key="k", client=client).chat([ChatMessage(role="user", content="x")], MODEL)
    assert result.content == "No response"
    assert result.usage is None


def test_null_content_falls_back(make_client):
    client, _ = make_client(lambda r: _ok(content=None))
    result = OpenRouterProvider(api_key="k", client=client).chat([ChatMessage(role="user", content="x")], MODEL)
    assert result.content == "No response"


def test_http_error_carries_status_and_body(make_client):
    client, recorder = make_client(lambda r: httpx.Response(429, text="rate limited"))
    with pytest.raises(UpstreamError) as ei:
        OpenRouterProvider(api_key="k", client=client).chat([ChatMessage(role="user", content="x")], MODEL)
    err = ei.value
    assert err.code is ErrorCode.RATE_LIMIT
    assert err.status_code == 429
    assert err.status_text == "Too Many Requests"
    assert err.body == "rate limited"
    assert err.message == "OpenRouter API error: 429 Too Many Requests - rate limited"
    assert len(recorder.requests) == 1


def test_timeout_is_transport_error(make_client):
    def _slow(request):
        raise httpx.ReadTimeout("timed out", request=request)

    client, recorder = make_client(_slow)
    with pytest.raises(TransportError) as ei:
        OpenRouterProvider(api_key="k", client=client).chat([ChatMessage(role="user", content="x")], MODEL)
    assert ei.value.code is ErrorCode.TIMEOUT
    assert len(recorder.requests) == 1


def test_non_ascii_key_fails_before_sending(make_client):
    client, recorder = make_client(lambda r: _ok())
    provider = OpenRouterProvider(api_key="sk-or-…abc", client=client)
    with pytest.raises(TransportError) as ei:
        provider.chat([ChatMessage(role="user", content="x")], MODEL)
    assert ei.value.code is ErrorCode.VALIDATION
    assert ei.value.provider == "openrouter"
    assert "sk-or-" not in ei.value.message
    assert recorder.requests == []
