"""Common helpers for the OpenRouter provider.

Purpose:
    Keep payload, header and response extraction builders out of the main
    adapter module so the chat path reads as a straight line.

Notes:
    These helpers assume the consumer is an instance that provides attributes:
    ``_api_key`` (str), ``_app_title`` (str|None) and ``_app_referer``
    (str|None).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from ..base.constants import MAX_OUTPUT_TOKENS, TEMPERATURE
from ..base.models import ChatMessage


def extract_openrouter_text(body: Any) -> Optional[str]:
    """Return ``choices[0].message.content`` or ``None`` when absent."""
    try:
        text = body["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None


class OpenRouterCommonMixin:
    """Mixin offering payload/header builders for OpenRouter."""

    def _build_messages(self, history: Sequence[ChatMessage]) -> List[Dict[str, str]]:
        """Translate the history to OpenAI-style message dicts.

        OpenRouter supports the ``system`` role natively, so roles pass
        through unchanged and order is preserved.
        """
        return [m.to_dict() for m in history]

    def _build_payload(self, model: str, history: Sequence[ChatMessage]) -> Dict[str, Any]:
        """Assemble the JSON payload for chat/completions."""
        return {
            "model": model,
            "messages": self._build_messages(history),
            "max_tokens": MAX_OUTPUT_TOKENS,
            "temperature": TEMPERATURE,
        }

    def _build_headers(self) -> Dict[str, str]:
        """Build HTTP headers: bearer auth plus optional attribution headers."""
        headers: Dict[str, str] = {"Authorization": f"Bearer {self._api_key}"}
        referer = getattr(self, "_app_referer", None)
        if referer:
            headers["HTTP-Referer"] = referer
        title = getattr(self, "_app_title", None)
        if title:
            headers["X-Title"] = title
        return headers


__all__ = ["OpenRouterCommonMixin", "extract_openrouter_text"]
