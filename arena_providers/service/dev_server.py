from __future__ import annotations

import os
import uvicorn

from arena_providers.config.defaults import (
    ARENA_SERVICE_DEFAULT_HOST,
    ARENA_SERVICE_DEFAULT_PORT,
)


def _parse_port(value: str | None, default: int) -> int:
    """Best-effort parse of a port from string, falling back to a sane default."""
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def main() -> None:
    """Start the development server for the arena FastAPI app.

    Host/port and reload behavior are controlled via environment variables:

    - ARENA_SERVICE_HOST: interface to bind (default "127.0.0.1")
    - ARENA_SERVICE_PORT: port to bind (default 8091)
    - ARENA_SERVICE_RELOAD: "true"/"false" to toggle auto-reload (default True)
    """
    host = os.getenv("ARENA_SERVICE_HOST", ARENA_SERVICE_DEFAULT_HOST)
    port = _parse_port(os.getenv("ARENA_SERVICE_PORT"), ARENA_SERVICE_DEFAULT_PORT)

    reload_env = os.getenv("ARENA_SERVICE_RELOAD")
    reload_enabled = True if reload_env is None else reload_env.lower() == "true"

    uvicorn.run(
        "arena_providers.service.app:app",
        host=host,
        port=port,
        reload=reload_enabled,
    )


if __name__ == "__main__":
    main()
