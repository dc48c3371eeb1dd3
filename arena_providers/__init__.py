"""arena_providers package

Provider abstraction and multi-model orchestration for hosted chat APIs.

Purpose:
    Send a prompt to one model (full history supplied by the caller) or to
    several models in a sequential comparison batch, and get back normalized
    results. Collaborators (UI, HTTP service, CLI) only need the names
    re-exported here.

Public API (re-exported):
    - Version: ``__version__``
    - Entry points: :class:`Orchestrator`, :func:`create_orchestrator`,
      :class:`CredentialGate`
    - DTOs: :class:`ChatMessage`, :class:`ChatResult`, :class:`ModelDescriptor`
    - Errors: :class:`ProviderError`, :class:`NotConfiguredError`,
      :class:`UpstreamError`, :class:`TransportError`, :class:`ErrorCode`
"""

from .base.errors import (
    ErrorCode,
    NotConfiguredError,
    ProviderError,
    TransportError,
    UpstreamError,
)
from .base.models import ChatMessage, ChatResult, ModelDescriptor, TokenUsage
from .base.registry import MODEL_CATALOG, ModelRegistry
from .orchestration import CredentialGate, Orchestrator, create_orchestrator

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Orchestrator",
    "create_orchestrator",
    "CredentialGate",
    "ModelRegistry",
    "MODEL_CATALOG",
    "ChatMessage",
    "ChatResult",
    "TokenUsage",
    "ModelDescriptor",
    "ErrorCode",
    "ProviderError",
    "NotConfiguredError",
    "UpstreamError",
    "TransportError",
]
