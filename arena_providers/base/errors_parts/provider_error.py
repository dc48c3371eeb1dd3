"""
Structured provider error exception types.

`ProviderError` wraps every failure an adapter or the credential gate can
surface with a normalized `ErrorCode`. The three subclasses mirror the failure
taxonomy callers branch on:

- `NotConfiguredError`: no usable credential for the requested model; raised
  locally before any network I/O.
- `UpstreamError`: the provider answered with a non-2xx status. Carries the
  status code, status text and the fully-read response body.
- `TransportError`: the request could not be sent or completed (DNS, connect,
  read timeout, ...). No status code is available.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for display and logs.
        provider: Provider key where the error originated (e.g., ``"google"``).
        model: Optional model id associated with the failure.
        status_code: Upstream HTTP status code when one was received.
        status_text: Upstream HTTP reason phrase when one was received.
        body: Raw upstream response body text when one was received.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    status_code: Optional[int] = None
    status_text: Optional[str] = None
    body: Optional[str] = None
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, model, code, and message."""
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable view without the raw exception."""
        return {
            "type": type(self).__name__,
            "code": self.code.value,
            "message": self.message,
            "provider": self.provider,
            "model": self.model,
            "status_code": self.status_code,
            "status_text": self.status_text,
            "body": self.body,
        }


class NotConfiguredError(ProviderError):
    """No credential is registered for the requested model id."""


class UpstreamError(ProviderError):
    """The provider returned a non-success HTTP status."""


class TransportError(ProviderError):
    """The HTTP request could not be sent or no response was received."""


__all__ = ["ProviderError", "NotConfiguredError", "UpstreamError", "TransportError"]
