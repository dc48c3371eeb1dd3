"""HTTP timeout resolution for the shared client pool.

The pooled ``httpx.Client`` instances take their timeout from
:func:`get_http_timeout` once, at creation. Adapters never pass a per-request
timeout.

Environment
-----------
ARENA_HTTP_TIMEOUT_SECONDS
    Optional positive float overriding ``DEFAULT_HTTP_TIMEOUT``. Empty,
    non-numeric and non-positive values fall back to the default.

Chat completions routinely take tens of seconds, so the default is well above
``httpx``'s own 5 second default.
"""
from __future__ import annotations

import os
from typing import Optional

from .constants import DEFAULT_HTTP_TIMEOUT

HTTP_TIMEOUT_ENV = "ARENA_HTTP_TIMEOUT_SECONDS"


def _parse_env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_http_timeout(default: Optional[float] = None) -> float:
    """Return the HTTP client timeout in seconds (env override, then default)."""
    return _parse_env_float(HTTP_TIMEOUT_ENV, DEFAULT_HTTP_TIMEOUT if default is None else default)


__all__ = ["HTTP_TIMEOUT_ENV", "get_http_timeout"]
