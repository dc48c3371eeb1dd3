"""Shared HTTP client pool for providers.

Purpose:
    Provide a centralized, thread-safe pool of reusable ``httpx.Client``
    instances so adapters do not allocate a client per call. Each client gets
    its timeout from ``base.timeouts.get_http_timeout`` when it is created
    (``ARENA_HTTP_TIMEOUT_SECONDS``, default ``DEFAULT_HTTP_TIMEOUT``); adapters
    never override it per request.

Lifecycle & cleanup:
    - Clients are cached by ``(base_url, purpose)``. Purposes keep pools for
      distinct providers apart even when they share a base URL.
    - All clients are closed at interpreter exit via ``atexit``. Tests may call
      :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..timeouts import get_http_timeout

_CLIENTS: Dict[Tuple[Optional[str], str], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL and purpose.

    Parameters:
        base_url: Optional API base URL set on the client so adapters can issue
            relative requests. ``None`` groups clients under a shared key.
        purpose: Short string discriminating separate pools (e.g.
            ``"gemini.chat"``). Keep stable to maximize reuse.

    Returns:
        A reusable ``httpx.Client`` instance.
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        timeout = get_http_timeout()
        if base_url:
            client = httpx.Client(base_url=base_url, timeout=timeout)
        else:
            client = httpx.Client(timeout=timeout)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            try:
                c.close()
            except Exception:  # nosec B110 - best-effort shutdown
                pass
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
