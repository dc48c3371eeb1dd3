"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``arena_providers.base.models_parts``.
"""

from .models_parts.message import ChatMessage, Role, ROLES
from .models_parts.chat_result import ChatResult, TokenUsage
from .models_parts.model_descriptor import ModelDescriptor

__all__ = [
    "ChatMessage",
    "Role",
    "ROLES",
    "ChatResult",
    "TokenUsage",
    "ModelDescriptor",
]
