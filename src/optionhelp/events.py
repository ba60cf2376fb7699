"""Structured debug event logging."""

from __future__ import annotations

import json
import logging
from typing import Any

logger = logging.getLogger("optionhelp")


def _to_log_safe(value: Any) -> Any:
    """Convert values to JSON-serializable, log-safe representations."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, dict):
        return {str(k): _to_log_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_to_log_safe(v) for v in value]
    return str(value)


def log_event(event: str, level: int = logging.DEBUG, **fields: Any) -> None:
    """Emit a structured log event on the package logger.

    The payload is skipped entirely when the level is disabled, so callers
    can log from tight loops without paying for serialization.
    """
    if not logger.isEnabledFor(level):
        return
    payload: dict[str, Any] = {"event": event}
    for key, value in fields.items():
        payload[key] = _to_log_safe(value)
    logger.log(level, json.dumps(payload, ensure_ascii=False, separators=(",", ":")))
