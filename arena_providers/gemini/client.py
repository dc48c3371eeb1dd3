"""GeminiProvider adapter.

Talks to the Google Generative Language REST API (``generateContent``) over
``httpx``. The protocol has no system role: system messages are folded into
the text of the first remaining message.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import httpx

from ..base.constants import MAX_OUTPUT_TOKENS, NO_RESPONSE_FALLBACK, TEMPERATURE
from ..base.errors import ProviderError
from ..base.http import get_httpx_client, post_chat_json
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ChatMessage, ChatResult
from ..base.tokens import extract_gemini_usage
from ..config.defaults import GEMINI_DEFAULT_BASE_URL


def to_gemini_contents(history: Sequence[ChatMessage]) -> List[Dict[str, Any]]:
    """Translate a chat history into Gemini ``contents``.

    ``assistant`` becomes ``model`` and ``user`` stays ``user``. System
    messages are removed; their text (joined by a blank line when there are
    several) is prepended to the first remaining message, separated by a blank
    line. With no remaining message the system text is dropped.
    """
    system_texts = [m.content for m in history if m.role == "system"]
    contents: List[Dict[str, Any]] = [
        {"role": "model" if m.role == "assistant" else "user", "parts": [{"text": m.content}]}
        for m in history
        if m.role != "system"
    ]
    if system_texts and contents:
        first = contents[0]["parts"][0]
        first["text"] = "\n\n".join(system_texts) + "\n\n" + first["text"]
    return contents


def extract_gemini_text(body: Any) -> Optional[str]:
    """Return ``candidates[0].content.parts[0].text`` or ``None`` when absent."""
    try:
        text = body["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None


class GeminiProvider:
    """Gemini chat adapter bound to a single API key.

    Parameters:
        api_key: Credential sent as the ``key`` query parameter.
        base_url: API base URL; defaults to the public ``v1beta`` endpoint.
        client: Optional ``httpx.Client``; the shared pool is used otherwise.
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = (base_url or GEMINI_DEFAULT_BASE_URL).rstrip("/")
        self._client = client
        self._logger = get_logger("providers.gemini")

    @property
    def provider_name(self) -> str:
        return "google"

    def __repr__(self) -> str:
        return f"GeminiProvider(base_url={self._base_url!r})"

    def build_payload(self, history: Sequence[ChatMessage]) -> Dict[str, Any]:
        """Return the ``generateContent`` JSON body for ``history``."""
        return {
            "contents": to_gemini_contents(history),
            "generationConfig": {
                "maxOutputTokens": MAX_OUTPUT_TOKENS,
                "temperature": TEMPERATURE,
            },
        }

    def chat(self, history: Sequence[ChatMessage], model_id: str) -> ChatResult:
        """Generate a reply for ``history`` with ``model_id``.

        Raises:
            UpstreamError: Non-2xx response (status, reason and body attached).
            TransportError: The request could not be completed.
            ProviderError: The 2xx body was not JSON.
        """
        ctx = LogContext(provider=self.provider_name, model=model_id)
        normalized_log_event(
            self._logger,
            "chat.start",
            ctx,
            phase="start",
            messages=len(history),
            max_tokens=MAX_OUTPUT_TOKENS,
            temperature=TEMPERATURE,
        )
        client = self._client or get_httpx_client(self._base_url, purpose="gemini.chat")
        try:
            body, latency_ms = post_chat_json(
                client,
                f"{self._base_url}/models/{model_id}:generateContent",
                provider=self.provider_name,
                model=model_id,
                label="Gemini",
                payload=self.build_payload(history),
                params={"key": self._api_key},
            )
        except ProviderError as e:
            normalized_log_event(
                self._logger,
                "chat.error",
                ctx,
                phase="finalize",
                error_code=e.code.value,
                status_code=e.status_code,
            )
            raise

        text = extract_gemini_text(body)
        usage = extract_gemini_usage(body)
        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            emitted=bool(text),
            tokens=usage,
            latency_ms=latency_ms,
            fallback_used=not text,
        )
        return ChatResult(
            content=text or NO_RESPONSE_FALLBACK,
            model_id=model_id,
            usage=usage,
            provider_name=self.provider_name,
            latency_ms=latency_ms,
        )


__all__ = ["GeminiProvider", "to_gemini_contents", "extract_gemini_text"]
