"""OpenRouter provider adapter (OpenAI-style over HTTP).

Summary:
- Non-stream chat via ``httpx`` against ``{base_url}/chat/completions``
- Bearer authentication plus the ``HTTP-Referer``/``X-Title`` attribution
  headers OpenRouter uses to identify the calling application
- ``usage`` is passed through verbatim when present

Errors & Observability:
- Transport and HTTP failures are raised as ``TransportError``/``UpstreamError``
- Emits structured start/finalize events; the credential is never logged
"""

from __future__ import annotations

from typing import Optional, Sequence

import httpx

from ..base.constants import MAX_OUTPUT_TOKENS, NO_RESPONSE_FALLBACK, TEMPERATURE
from ..base.errors import ProviderError
from ..base.http import get_httpx_client, post_chat_json
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ChatMessage, ChatResult
from ..base.tokens import extract_openai_usage
from ..config import get_provider_config
from ..config.defaults import OPENROUTER_DEFAULT_BASE_URL
from .helpers import OpenRouterCommonMixin, extract_openrouter_text


class OpenRouterProvider(OpenRouterCommonMixin):
    """OpenRouter chat adapter bound to a single API key.

    Parameters:
        api_key: Credential sent as ``Authorization: Bearer``.
        base_url: API base URL; if not provided, resolved from provider config
            (defaults to ``"https://openrouter.ai/api/v1"``).
        client: Optional ``httpx.Client``; the shared pool is used otherwise.
        app_title: ``X-Title`` attribution; resolved from provider config when
            omitted.
        app_referer: ``HTTP-Referer`` attribution; resolved from provider
            config when omitted and only sent when set.

    Side effects:
        - Reads provider-level configuration via ``get_provider_config("openrouter")``.
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        client: Optional[httpx.Client] = None,
        app_title: Optional[str] = None,
        app_referer: Optional[str] = None,
    ) -> None:
        cfg = get_provider_config("openrouter")
        self._api_key = api_key
        self._base_url = (base_url or cfg.get("base_url") or OPENROUTER_DEFAULT_BASE_URL).rstrip("/")
        self._client = client
        self._app_title = app_title if app_title is not None else cfg.get("app_title")
        self._app_referer = app_referer if app_referer is not None else cfg.get("app_referer")
        self._logger = get_logger("providers.openrouter")

    @property
    def provider_name(self) -> str:
        """Return the canonical provider slug used in logs and configuration."""
        return "openrouter"

    def __repr__(self) -> str:
        return f"OpenRouterProvider(base_url={self._base_url!r})"

    def chat(self, history: Sequence[ChatMessage], model_id: str) -> ChatResult:
        """Perform a non-streaming chat completion.

        Parameters:
            history: Full conversation, oldest first.
            model_id: OpenRouter model slug (e.g. ``"deepseek/deepseek-chat"``).

        Returns:
            A ``ChatResult`` with the first choice's content (or the
            ``"No response"`` fallback) and the upstream ``usage`` block.

        Failure modes:
            - Non-2xx status raises ``UpstreamError``.
            - Connection/timeout problems raise ``TransportError``.
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
        client = self._client or get_httpx_client(self._base_url, purpose="openrouter.chat")
        try:
            body, latency_ms = post_chat_json(
                client,
                f"{self._base_url}/chat/completions",
                provider=self.provider_name,
                model=model_id,
                label="OpenRouter",
                payload=self._build_payload(model_id, history),
                headers=self._build_headers(),
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

        text = extract_openrouter_text(body)
        usage = extract_openai_usage(body)
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


__all__ = ["OpenRouterProvider"]
