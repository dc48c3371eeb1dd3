"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Implements status-to-code mapping for HTTP responses, plus timeout and
transport detection for failures raised by ``httpx``.
"""
from __future__ import annotations

from typing import Dict

import httpx

from .error_code import ErrorCode
from .provider_error import ProviderError


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


def code_for_status(status: int) -> ErrorCode:
    """Map an HTTP status to an :class:`ErrorCode`.

    Unlisted 5xx statuses collapse to ``SERVER_ERROR``; anything else unlisted
    is ``UNKNOWN``.
    """
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    if 500 <= status < 600:
        return ErrorCode.SERVER_ERROR
    return ErrorCode.UNKNOWN


def classify_exception(exc: Exception) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ProviderError passthrough.
        2. Timeout exceptions (builtin and ``httpx``).
        3. Other ``httpx`` transport errors (``TRANSIENT``).
        4. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, (TimeoutError, httpx.TimeoutException)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, httpx.TransportError):
        return ErrorCode.TRANSIENT
    return ErrorCode.UNKNOWN


__all__ = [
    "classify_exception",
    "code_for_status",
    "_HTTP_STATUS_MAP",
]
