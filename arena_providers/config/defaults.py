"""arena_providers.config.defaults
===============================

Central place for small, stable default values used across the package and
the service layer. Values can be overridden through environment variables or
the external config file (see ``arena_providers.config``).

Only plain constants live here; this module imports nothing from the rest of
the package to avoid circular imports.
"""

from __future__ import annotations

# ---- Provider endpoints ----
GEMINI_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
OPENROUTER_DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"

# OpenRouter attribution headers (``HTTP-Referer`` is only sent when configured).
OPENROUTER_DEFAULT_APP_TITLE = "AI Learning Tool"
OPENROUTER_DEFAULT_APP_REFERER = None

# ---- Credential placeholders ----
# Documentation sentinels shipped in the sample env file. A configured value
# equal to one of these is treated exactly like a missing credential.
GOOGLE_API_KEY_PLACEHOLDER = "your_google_gemini_api_key_here"  # pragma: allowlist secret - sentinel, not a secret
OPENROUTER_API_KEY_PLACEHOLDER = "your_openrouter_api_key_here"  # pragma: allowlist secret - sentinel, not a secret

# ---- Service / HTTP layer ----
ARENA_SERVICE_DEFAULT_HOST = "127.0.0.1"
ARENA_SERVICE_DEFAULT_PORT = 8091
ARENA_SERVICE_CORS_DEFAULT_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


__all__ = [
    "GEMINI_DEFAULT_BASE_URL",
    "OPENROUTER_DEFAULT_BASE_URL",
    "OPENROUTER_DEFAULT_APP_TITLE",
    "OPENROUTER_DEFAULT_APP_REFERER",
    "GOOGLE_API_KEY_PLACEHOLDER",
    "OPENROUTER_API_KEY_PLACEHOLDER",
    "ARENA_SERVICE_DEFAULT_HOST",
    "ARENA_SERVICE_DEFAULT_PORT",
    "ARENA_SERVICE_CORS_DEFAULT_ORIGINS",
]
