"""arena_providers.config.env
==========================

Environment variable mapping and helpers for provider credentials.

Purpose
-------
- Single source of truth mapping provider keys to their environment variable
  names (canonical first, then accepted aliases).
- Exact placeholder detection: a credential equal to the provider's
  documentation sentinel is treated as absent. No "looks like a key"
  heuristics are applied; anything else non-empty is a credential.

Failure Modes
-------------
Helpers never raise on unknown providers or unset variables; they return
``None`` and callers decide how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Mapping, Optional, Tuple

from .defaults import GOOGLE_API_KEY_PLACEHOLDER, OPENROUTER_API_KEY_PLACEHOLDER

# Canonical provider → env var mapping
ENV_MAP: Dict[str, str] = {
    "google": "GOOGLE_API_KEY",
    "openrouter": "OPENROUTER_API_KEY",
}

# Provider → ordered tuple of acceptable env var names (canonical first).
# The VITE_* names are what the browser front-end's .env file uses.
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "google": ("GOOGLE_API_KEY", "GEMINI_API_KEY", "VITE_GOOGLE_API_KEY"),
    "openrouter": ("OPENROUTER_API_KEY", "VITE_OPENROUTER_API_KEY"),
}

PLACEHOLDERS: Dict[str, str] = {
    "google": GOOGLE_API_KEY_PLACEHOLDER,
    "openrouter": OPENROUTER_API_KEY_PLACEHOLDER,
}


def is_placeholder(provider: str, val: Optional[str]) -> bool:
    """Return True if ``val`` equals the provider's placeholder literal."""
    sentinel = PLACEHOLDERS.get((provider or "").lower().strip())
    return sentinel is not None and val == sentinel


def is_usable_credential(provider: str, val: Optional[str]) -> bool:
    """Return True when ``val`` is non-empty and not the placeholder."""
    return bool(val) and not is_placeholder(provider, val)


def get_env_var_name(provider: str) -> Optional[str]:
    """Return the canonical environment variable name for a provider."""
    return ENV_MAP.get(provider.lower().strip()) if provider else None


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield acceptable environment variable names, canonical first."""
    p = (provider or "").lower().strip()
    canonical = ENV_MAP.get(p)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(p, ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(
    provider: str, environ: Optional[Mapping[str, str]] = None
) -> Tuple[Optional[str], Optional[str]]:
    """Resolve a credential for a provider from the environment.

    Returns the first non-empty value among the candidate variable names
    together with the name it came from, or ``(None, None)``.
    """
    env = os.environ if environ is None else environ
    for name in get_env_var_candidates(provider):
        if val := env.get(name):
            return val, name
    return None, None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "PLACEHOLDERS",
    "is_placeholder",
    "is_usable_credential",
    "get_env_var_name",
    "get_env_var_candidates",
    "resolve_provider_key",
]
