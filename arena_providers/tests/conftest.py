"""Pytest configuration for the arena_providers test suite.

Every test runs with credential-related environment variables removed, the
``.env`` loader pointed at a missing file and the config caches reset, so the
developer's real keys never leak into a test or a request.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterator, List, Optional, Sequence

import httpx
import pytest

from arena_providers.base.http import close_all_clients
from arena_providers.base.models import ChatMessage, ChatResult, TokenUsage
from arena_providers.config import reset_config_cache

_ENV_VARS = (
    "GOOGLE_API_KEY",
    "GEMINI_API_KEY",
    "VITE_GOOGLE_API_KEY",
    "OPENROUTER_API_KEY",
    "VITE_OPENROUTER_API_KEY",
    "GOOGLE_BASE_URL",
    "OPENROUTER_BASE_URL",
    "OPENROUTER_APP_TITLE",
    "OPENROUTER_APP_REFERER",
    "ARENA_CONFIG_FILE",
    "ARENA_HTTP_TIMEOUT_SECONDS",
)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()
    close_all_clients()


class FakeAdapter:
    """In-memory ``ChatAdapter`` recording every call.

    Set ``error`` to make every call raise that exception.
    """

    def __init__(self, provider: str = "fake", error: Optional[Exception] = None, reply: str = "pong") -> None:
        self._provider = provider
        self.error = error
        self.reply = reply
        self.calls: List[tuple] = []

    @property
    def provider_name(self) -> str:
        return self._provider

    def chat(self, history: Sequence[ChatMessage], model_id: str) -> ChatResult:
        self.calls.append((list(history), model_id))
        if self.error is not None:
            raise self.error
        return ChatResult(
            content=self.reply,
            model_id=model_id,
            usage=TokenUsage(prompt_tokens=1, completion_tokens=2, total_tokens=3),
            provider_name=self._provider,
        )


@pytest.fixture()
def fake_builder() -> tuple[Callable[[str, str], FakeAdapter], Dict[str, List[FakeAdapter]]]:
    """Return ``(builder, built)`` where ``built`` maps provider → adapters built."""
    built: Dict[str, List[FakeAdapter]] = {}

    def _build(provider: str, secret: str) -> FakeAdapter:
        adapter = FakeAdapter(provider=provider)
        adapter.secret = secret  # type: ignore[attr-defined]
        built.setdefault(provider, []).append(adapter)
        return adapter

    return _build, built


class RecordingTransport:
    """``httpx.MockTransport`` handler that records requests."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]) -> None:
        self._responder = responder
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)


@pytest.fixture()
def make_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], tuple]:
    """Return a factory building ``(httpx.Client, RecordingTransport)`` pairs."""
    clients: List[httpx.Client] = []

    def _make(responder: Callable[[httpx.Request], httpx.Response]):
        recorder = RecordingTransport(responder)
        client = httpx.Client(transport=httpx.MockTransport(recorder))
        clients.append(client)
        return client, recorder

    yield _make
    for c in clients:
        c.close()


@pytest.fixture()
def fake_adapter_cls() -> type:
    return FakeAdapter
