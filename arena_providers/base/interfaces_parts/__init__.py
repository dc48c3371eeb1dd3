"""Interface parts package (one protocol per module)."""

from .chat_adapter import ChatAdapter

__all__ = ["ChatAdapter"]
