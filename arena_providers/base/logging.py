"""Base structured logging utilities for the provider layer.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid sprinkling ad-hoc logger setup across adapters and the orchestrator.

All events go through ``normalized_log_event`` which guarantees a stable key
set (``phase``, ``emitted``, ``tokens``, ``error_code`` when present) so that
chat and comparison events can be aggregated the same way regardless of the
provider that produced them.

Credentials and request URLs (which may embed a key as a query parameter) must
never be passed to these helpers.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from typing import Any, Dict, Mapping

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "arena"

_BASE_LOGGER_ATTR = "_arena_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_arena_console_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level string into an integer constant.

    Accepts common names (DEBUG, INFO, WARNING, ERROR, CRITICAL) case-insensitively.
    Falls back to ``default`` on unknown values.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _make_console_handler(json_mode: bool, level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize (once) and return the shared ``arena`` logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    desired_level = _parse_level(os.getenv("ARENA_LOG_LEVEL"), default=level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        if logger.level != desired_level:
            logger.setLevel(desired_level)
            for existing in logger.handlers:
                existing.setLevel(desired_level)
        return logger

    logger.setLevel(desired_level)
    logger.handlers[:] = [_make_console_handler(json_mode, desired_level)]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return a logger under the shared ``arena`` hierarchy.

    Child loggers (``arena.gemini``, ``arena.orchestrator``, ...) carry no
    handlers of their own and propagate to the configured base logger.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        if getattr(handler, _CONSOLE_HANDLER_ATTR, False):
            logger.removeHandler(handler)
            with contextlib.suppress(Exception):
                handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON line.

    Parameters
    ----------
    logger: logging.Logger
        Logger instance obtained from ``get_logger``.
    event: str
        Event name (e.g. ``chat.start``).
    ctx: LogContext | None
        Provider/model context; merged shallowly.
    keep_none: bool
        When ``True``, preserve keys whose values are ``None``; otherwise drop them.
    **fields: Any
        Arbitrary serializable key/value pairs.
    """
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.info(json.dumps(payload, ensure_ascii=False, default=str))


def _coerce_tokens(tokens: Any) -> Any:
    """Coerce token usage info into a JSON-friendly mapping (or ``None``)."""
    if tokens is None:
        return None
    if isinstance(tokens, Mapping):
        return dict(tokens.items())
    if hasattr(tokens, "__dataclass_fields__"):
        return {k: getattr(tokens, k) for k in tokens.__dataclass_fields__}
    return {"value": repr(tokens)}


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    error_code: str | None = None,
    emitted: bool | None = None,
    tokens: Any = None,
    **extra_fields: Any,
) -> None:
    """Emit a normalized structured log event with required keys.

    ``phase``, ``emitted`` and ``tokens`` are always present (possibly
    ``null``); ``error_code`` is omitted when ``None`` to reflect "no error".
    Extra fields never overwrite the normalized values.
    """
    base_fields: Dict[str, Any] = {
        "phase": phase,
        "emitted": emitted,
        "tokens": _coerce_tokens(tokens),
    }
    if error_code is not None:
        base_fields["error_code"] = error_code
    for k, v in extra_fields.items():
        if v is None or k in base_fields:
            continue
        base_fields[k] = v
    log_event(logger, event, ctx, keep_none=True, **base_fields)


__all__ = [
    "LogContext",
    "get_logger",
    "log_event",
    "normalized_log_event",
    "BASE_LOGGER_NAME",
]
