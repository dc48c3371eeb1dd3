"""Focused tests for arena_providers.base.logging.

Covers:
- _parse_level string parsing
- normalized_log_event emits phase, emitted and tokens
- child loggers propagate to the shared ``arena`` logger
"""
from __future__ import annotations

import json
import logging

from arena_providers.base.logging import (
    BASE_LOGGER_NAME,
    _parse_level,  # type: ignore[attr-defined]
    get_logger,
    normalized_log_event,
)
from arena_providers.base.log_support import JsonFormatter, LogContext
from arena_providers.base.models import TokenUsage


class _ListHandler(logging.Handler):
    """Capture log records into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


def test_parse_level_variants():
    assert _parse_level(None) == logging.INFO
    assert _parse_level("debug") == logging.DEBUG
    assert _parse_level("WARN") == logging.WARNING
    assert _parse_level("unknown", default=logging.ERROR) == logging.ERROR


def test_normalized_log_event_emits_phase_and_tokens():
    logger = get_logger("tests.logging", json_mode=False)
    handler = _ListHandler()
    logger.handlers[:] = [handler]
    logger.propagate = False

    normalized_log_event(
        logger,
        "chat.end",
        LogContext(provider="google", model="gemini-1.5-flash"),
        phase="finalize",
        emitted=True,
        tokens=TokenUsage(prompt_tokens=1, completion_tokens=2, total_tokens=3),
        latency_ms=12.5,
    )
    payload = json.loads(handler.messages[-1])
    assert payload["phase"] == "finalize"
    assert payload["emitted"] is True
    assert "error_code" not in payload
    assert payload["event"] == "chat.end"
    assert payload["provider"] == "google"
    assert payload["tokens"] == {"prompt_tokens": 1, "completion_tokens": 2, "total_tokens": 3}


def test_child_logger_propagates_to_base():
    child = get_logger("providers.gemini")
    assert child.name == f"{BASE_LOGGER_NAME}.providers.gemini"
    assert child.propagate is True
    assert not child.handlers
    assert logging.getLogger(BASE_LOGGER_NAME).propagate is False


def test_json_formatter_hoists_event_fields():
    record = logging.LogRecord("arena", logging.INFO, __file__, 1, json.dumps({"event": "x", "a": 1}), None, None)
    out = json.loads(JsonFormatter().format(record))
    assert out["event"] == "x"
    assert out["a"] == 1
    assert out["level"] == "INFO"
