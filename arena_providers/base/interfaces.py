"""Provider interface contracts public surface."""

from .interfaces_parts.chat_adapter import ChatAdapter

__all__ = ["ChatAdapter"]
