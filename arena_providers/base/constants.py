"""Base shared constants for provider adapters and orchestration.

Central location to avoid scattering magic strings and default numbers.
Generation parameters are fixed for every provider call and are deliberately
not exposed as caller-configurable knobs.
"""
from __future__ import annotations

# Fixed generation parameters sent with every chat request.
MAX_OUTPUT_TOKENS = 1000
TEMPERATURE = 0.7

# Content substituted when a successful response lacks the expected text path.
NO_RESPONSE_FALLBACK = "No response"

# Pause between consecutive calls of a comparison batch (seconds).
COMPARE_PAUSE_SECONDS = 0.5

# Default timeout of pooled HTTP clients (seconds); see base.timeouts for the override.
DEFAULT_HTTP_TIMEOUT = 60.0

__all__ = [
    "MAX_OUTPUT_TOKENS",
    "TEMPERATURE",
    "NO_RESPONSE_FALLBACK",
    "COMPARE_PAUSE_SECONDS",
    "DEFAULT_HTTP_TIMEOUT",
]
