"""Typed parameter object for provider adapter initialization.

Purpose
-------
Carry the constructor inputs shared by every adapter (credential, base URL and
an optional injected HTTP client) across the factory boundary as one validated
object instead of loose keyword arguments.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and `.model_dump()` convenience.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class AdapterParams(BaseModel):
    """Common provider adapter initialization parameters.

    Attributes
    ----------
    provider:
        Canonical provider key (``"google"`` or ``"openrouter"``). Optional;
        the factory strips it before calling the adapter constructor.
    api_key:
        Credential bound to the adapter instance for its whole lifetime.
    base_url:
        Optional override for the API base URL (proxies, test servers).
    client:
        Optional pre-built ``httpx.Client``; when absent the adapter uses the
        shared pool from ``arena_providers.base.http``.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    provider: Optional[str] = None
    api_key: Optional[str] = Field(default=None, repr=False)
    base_url: Optional[str] = None
    client: Optional[Any] = None

    def constructor_kwargs(self) -> Dict[str, Any]:
        """Return the non-``None`` fields as adapter constructor kwargs."""
        data = {k: getattr(self, k) for k in type(self).model_fields}
        data.pop("provider", None)
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["AdapterParams"]
