"""Repository-level test configuration.

Removes credential environment variables and points the ``.env`` loader at a
missing file so adapter tests never pick up a developer's real keys.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from arena_providers.base.http import close_all_clients
from arena_providers.config import reset_config_cache


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    for name in ("GOOGLE_API_KEY", "GEMINI_API_KEY", "VITE_GOOGLE_API_KEY", "GOOGLE_BASE_URL", "ARENA_CONFIG_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()
    close_all_clients()
