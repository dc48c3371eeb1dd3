"""Unified configuration layer for providers.

Goals
-----
* Centralize defaults (base URLs, OpenRouter attribution values).
* Merge sources in a predictable order:
    1. Built-in defaults
    2. Optional external JSON config file pointed to by ARENA_CONFIG_FILE
    3. Environment variables (``.env`` file loaded once beforehand)
    4. In-code overrides passed to helper
* Provide a single call site: ``get_provider_config(provider: str)``.

Environment Variable Conventions
--------------------------------
<PROVIDER>_API_KEY, <PROVIDER>_BASE_URL, <PROVIDER>_APP_TITLE,
<PROVIDER>_APP_REFERER, e.g. GOOGLE_API_KEY, OPENROUTER_BASE_URL. Credential
aliases from ``config.env.ENV_ALIASES`` (``GEMINI_API_KEY``,
``VITE_GOOGLE_API_KEY``, ``VITE_OPENROUTER_API_KEY``) are honored when the
canonical variable is unset.

External Config File (Optional)
-------------------------------
If ARENA_CONFIG_FILE is set to a path, it is parsed as JSON. Structure example:

```
{
  "google": {"base_url": "https://generativelanguage.googleapis.com/v1beta"},
  "openrouter": {"app_title": "AI Learning Tool"}
}
```

Public API
----------
* get_provider_config(provider: str, overrides: dict | None = None) -> dict
* reset_config_cache() -> None
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
import json
import os

from .env import PLACEHOLDERS, resolve_provider_key
from .defaults import (
    GEMINI_DEFAULT_BASE_URL,
    OPENROUTER_DEFAULT_APP_REFERER,
    OPENROUTER_DEFAULT_APP_TITLE,
    OPENROUTER_DEFAULT_BASE_URL,
)


# -------------------- Defaults --------------------

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "google": {"base_url": GEMINI_DEFAULT_BASE_URL},
    "openrouter": {
        "base_url": OPENROUTER_DEFAULT_BASE_URL,
        "app_title": OPENROUTER_DEFAULT_APP_TITLE,
        "app_referer": OPENROUTER_DEFAULT_APP_REFERER,
    },
}


ENV_FIELD_MAP = {
    "api_key": "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    "base_url": "BASE_URL",
    "app_title": "APP_TITLE",
    "app_referer": "APP_REFERER",
}


_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Lightweight .env loader (no external dependency).

    Parses KEY=VALUE lines, ignoring comments and blank lines. Safe to call
    multiple times. Existing environment variables win unless their current
    value is one of the credential placeholders.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv("DOTENV_FILE", ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    sentinels = set(PLACEHOLDERS.values())
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or os.environ.get(k) in sentinels):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv("ARENA_CONFIG_FILE")
    if not path:
        _FILE_CACHE = {}
        return _FILE_CACHE
    p = Path(path)
    if not p.exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except ValueError:
        data = {}
    if not isinstance(data, dict):
        data = {}
    _FILE_CACHE = data
    return data


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val is not None:
            out[field] = val
    if not out.get("api_key"):
        key, _source = resolve_provider_key(provider)
        if key:
            out["api_key"] = key
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    The returned ``api_key`` is the raw configured value; placeholder filtering
    is the credential gate's decision.
    """
    _load_dotenv_once()
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}

    # 1. Defaults
    cfg |= DEFAULTS.get(name, {})

    # 2. External config file section
    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    # 3. Env overrides
    cfg |= _env_overrides(name)

    # 4. Explicit overrides arg
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


def reset_config_cache() -> None:
    """Forget the cached config file and allow the ``.env`` file to be re-read."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


__all__ = [
    "get_provider_config",
    "reset_config_cache",
    "DEFAULTS",
]
