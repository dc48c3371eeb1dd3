"""
Providers Base Package

Exports provider-agnostic contracts, DTOs, the error taxonomy, the static model
registry and the provider factory used by the orchestration layer.
"""

from .errors import (
    ErrorCode,
    NotConfiguredError,
    ProviderError,
    TransportError,
    UpstreamError,
    classify_exception,
)
from .factory import ProviderFactory, UnknownProviderError
from .interfaces import ChatAdapter
from .models import ChatMessage, ChatResult, ModelDescriptor, Role, TokenUsage
from .registry import MODEL_CATALOG, ModelRegistry

__all__ = [
    # Models
    "Role",
    "ChatMessage",
    "ChatResult",
    "TokenUsage",
    "ModelDescriptor",
    # Errors
    "ErrorCode",
    "ProviderError",
    "NotConfiguredError",
    "UpstreamError",
    "TransportError",
    "classify_exception",
    # Interfaces
    "ChatAdapter",
    # Registry
    "MODEL_CATALOG",
    "ModelRegistry",
    # Factory
    "ProviderFactory",
    "UnknownProviderError",
]
