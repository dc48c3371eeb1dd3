"""Token usage extraction helpers.

Maps the usage blocks providers attach to their JSON bodies onto
:class:`TokenUsage`. Values are copied verbatim: a missing field stays
``None`` and ``total_tokens`` is never derived from the other two.

Supported shapes
----------------
OpenAI-style (OpenRouter):
    ``{"usage": {"prompt_tokens", "completion_tokens", "total_tokens"}}``
Gemini:
    ``{"usageMetadata": {"promptTokenCount", "candidatesTokenCount", "totalTokenCount"}}``

Both helpers return ``None`` when the body carries no usage mapping at all.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..models import TokenUsage


def _as_count(value: Any) -> Optional[int]:
    """Return ``value`` when it is a non-negative int, else ``None``."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value >= 0 else None


def extract_openai_usage(body: Any) -> Optional[TokenUsage]:
    """Extract OpenAI-style ``usage`` from a decoded JSON body."""
    if not isinstance(body, Mapping):
        return None
    usage = body.get("usage")
    if not isinstance(usage, Mapping):
        return None
    return TokenUsage(
        prompt_tokens=_as_count(usage.get("prompt_tokens")),
        completion_tokens=_as_count(usage.get("completion_tokens")),
        total_tokens=_as_count(usage.get("total_tokens")),
    )


def extract_gemini_usage(body: Any) -> Optional[TokenUsage]:
    """Extract Gemini ``usageMetadata`` from a decoded JSON body."""
    if not isinstance(body, Mapping):
        return None
    usage = body.get("usageMetadata")
    if not isinstance(usage, Mapping):
        return None
    return TokenUsage(
        prompt_tokens=_as_count(usage.get("promptTokenCount")),
        completion_tokens=_as_count(usage.get("candidatesTokenCount")),
        total_tokens=_as_count(usage.get("totalTokenCount")),
    )


__all__ = ["extract_openai_usage", "extract_gemini_usage"]
