"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``arena_providers.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import (
    NotConfiguredError,
    ProviderError,
    TransportError,
    UpstreamError,
)
from .errors_parts.classification import classify_exception, code_for_status

__all__ = [
    "ErrorCode",
    "ProviderError",
    "NotConfiguredError",
    "UpstreamError",
    "TransportError",
    "classify_exception",
    "code_for_status",
]
