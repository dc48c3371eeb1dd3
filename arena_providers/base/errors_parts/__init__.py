"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `arena_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import NotConfiguredError, ProviderError, TransportError, UpstreamError
from .classification import classify_exception, code_for_status

__all__ = [
    "ErrorCode",
    "ProviderError",
    "NotConfiguredError",
    "UpstreamError",
    "TransportError",
    "classify_exception",
    "code_for_status",
]
