"""ChatAdapter Protocol (single-class module).

Defines the minimal chat interface every provider adapter implements. The
credential gate stores adapters behind this protocol and the orchestrator only
ever calls ``chat``.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from ..models import ChatMessage, ChatResult


@runtime_checkable
class ChatAdapter(Protocol):
    """Minimal interface for chat providers.

    Implementations translate the history into their wire format, perform
    exactly one HTTP request and return a :class:`ChatResult`, raising a
    ``ProviderError`` subclass on failure.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider key, e.g. ``"google"`` or ``"openrouter"``."""
        ...

    def chat(self, history: Sequence[ChatMessage], model_id: str) -> ChatResult:
        """Execute a single chat completion for ``model_id``."""
        ...
