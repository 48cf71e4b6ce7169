"""Structured logging helpers for menu rendering."""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

__all__ = ["log_event", "safe_json", "trace"]


def safe_json(value: Any) -> Any:
    """Return ``value`` converted into a JSON-serialisable structure."""

    if value is None or isinstance(value, (str, int, float, bool)):
        return value

    if isinstance(value, (list, tuple, set, frozenset)):
        return [safe_json(item) for item in value]

    if isinstance(value, dict):
        return {str(key): safe_json(val) for key, val in value.items()}

    if hasattr(value, "to_dict") and callable(getattr(value, "to_dict")):
        return value.to_dict()

    if hasattr(value, "model_dump") and callable(getattr(value, "model_dump")):
        return value.model_dump()

    return repr(value)


def log_event(
    logger: logging.Logger,
    level: int,
    event: str,
    *,
    exc_info: bool | BaseException | None = None,
    **fields: Any,
) -> None:
    """Emit ``event`` and its ``fields`` as a single JSON encoded log line."""

    if not logger.isEnabledFor(level):
        return
    payload: Dict[str, Any] = {"event": event}
    payload.update({key: safe_json(value) for key, value in fields.items() if value is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, sort_keys=True), exc_info=exc_info)


@contextmanager
def trace(name: str, *, logger: Optional[logging.Logger] = None, **fields: Any) -> Iterator[Dict[str, Any]]:
    """Log ``<name>.start`` and ``<name>.end`` (or ``<name>.error``) with the duration.

    The yielded dictionary may be filled with extra fields that are attached
    to the closing event.
    """

    logger = logger or logging.getLogger("navwalker.trace")
    start_time = time.perf_counter()
    extra: Dict[str, Any] = {}
    log_event(logger, logging.DEBUG, f"{name}.start", **fields)
    try:
        yield extra
    except Exception as exc:
        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
        log_event(
            logger,
            logging.ERROR,
            f"{name}.error",
            exc_info=True,
            duration_ms=duration_ms,
            error=repr(exc),
            **fields,
        )
        raise
    duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
    closing = dict(fields)
    closing.update(extra)
    closing["duration_ms"] = duration_ms
    log_event(logger, logging.INFO, f"{name}.end", **closing)
