"""
ChatResult DTO representing a normalized successful provider response.

A `ChatResult` is produced once per successful adapter call and never mutated
afterwards. Token usage is carried verbatim from the upstream body when the
provider reports it; nothing in this package recomputes counts.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class TokenUsage:
    """Token accounting reported by the provider.

    Attributes:
        prompt_tokens: Tokens consumed by the prompt.
        completion_tokens: Tokens produced in the completion.
        total_tokens: Total reported by the provider (not derived locally).
    """

    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None


@dataclass(frozen=True)
class ChatResult:
    """Provider-agnostic result of a successful chat invocation.

    Attributes:
        content: Text of the first candidate, or the ``"No response"`` fallback
            when the upstream body lacked the expected path.
        model_id: Model identifier the request was issued for.
        usage: Optional token accounting passed through from the provider.
        provider_name: Canonical provider key that served the call.
        latency_ms: Wall-clock duration of the HTTP round trip.
    """

    content: str
    model_id: str
    usage: Optional[TokenUsage] = None
    provider_name: Optional[str] = None
    latency_ms: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation."""
        return asdict(self)


__all__ = ["ChatResult", "TokenUsage"]
