"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`arena_providers.base.models_parts` if needed, while `arena_providers.base.models`
remains the primary stable import path.
"""

from .message import ChatMessage, Role, ROLES
from .chat_result import ChatResult, TokenUsage
from .model_descriptor import ModelDescriptor

__all__ = [
    "ChatMessage",
    "Role",
    "ROLES",
    "ChatResult",
    "TokenUsage",
    "ModelDescriptor",
]
