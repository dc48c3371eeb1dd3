"""Single-shot JSON POST shared by the provider adapters.

Purpose
-------
Issue exactly one HTTP request and turn every failure into the provider error
taxonomy so adapters only deal with payload and response translation.

Failure modes
-------------
- The request could not be sent or no response arrived: ``TransportError``
  (code ``timeout`` for timeouts, ``transient`` otherwise). A request that
  cannot even be encoded (non-ASCII header value such as a pasted key, bad
  URL) is a ``TransportError`` with code ``validation`` and is never sent.
- Non-2xx status: ``UpstreamError`` carrying status code, reason phrase and
  the fully-read body text.
- 2xx status whose body is not JSON: ``ProviderError`` with code
  ``validation``.

No retries are attempted and the client's own timeout is used unchanged.
"""

from __future__ import annotations

import time
from typing import Any, Mapping, Optional, Tuple

import httpx

from ..errors import (
    ErrorCode,
    ProviderError,
    TransportError,
    UpstreamError,
    classify_exception,
    code_for_status,
)


def post_chat_json(
    client: httpx.Client,
    url: str,
    *,
    provider: str,
    model: str,
    label: str,
    payload: Mapping[str, Any],
    headers: Optional[Mapping[str, str]] = None,
    params: Optional[Mapping[str, str]] = None,
) -> Tuple[Any, float]:
    """POST ``payload`` to ``url`` and return the decoded body with latency.

    Parameters:
        client: HTTP client used for the request (pooled or injected).
        url: Absolute endpoint URL.
        provider: Provider key recorded on raised errors.
        model: Model id recorded on raised errors.
        label: Human-readable provider label used in error messages
            (e.g. ``"Gemini"``).
        payload: JSON body.
        headers: Optional extra headers.
        params: Optional query parameters.

    Returns:
        ``(body, latency_ms)`` where ``body`` is the decoded JSON value.
    """
    t0 = time.perf_counter()
    try:
        request = client.build_request(
            "POST", url, json=dict(payload), headers=dict(headers or {}), params=dict(params or {})
        )
        resp = client.send(request)
    except (UnicodeEncodeError, httpx.InvalidURL) as exc:
        # Header or URL encoding failed before sending. The exception text can
        # quote the credential and never goes into the message.
        raise TransportError(
            code=ErrorCode.VALIDATION,
            message=f"{label} request could not be encoded ({type(exc).__name__})",
            provider=provider,
            model=model,
            raw=exc,
        ) from exc
    except httpx.HTTPError as exc:
        raise TransportError(
            code=classify_exception(exc),
            message=f"{label} request failed: {exc}",
            provider=provider,
            model=model,
            raw=exc,
        ) from exc
    latency_ms = (time.perf_counter() - t0) * 1000.0

    if not resp.is_success:
        error_text = resp.text
        raise UpstreamError(
            code=code_for_status(resp.status_code),
            message=f"{label} API error: {resp.status_code} {resp.reason_phrase} - {error_text}",
            provider=provider,
            model=model,
            status_code=resp.status_code,
            status_text=resp.reason_phrase,
            body=error_text,
        )

    try:
        body = resp.json()
    except ValueError as exc:
        raise ProviderError(
            code=ErrorCode.VALIDATION,
            message=f"{label} API returned a non-JSON body",
            provider=provider,
            model=model,
            status_code=resp.status_code,
            status_text=resp.reason_phrase,
            body=resp.text,
            raw=exc,
        ) from exc
    return body, latency_ms


__all__ = ["post_chat_json"]
