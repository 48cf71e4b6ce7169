"""Logging setup for the navbar renderer and its command line tools."""

from __future__ import annotations

import logging
import sys
from typing import Optional


_LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
)


def resolve_level(level: int | str) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{level}'")
    return resolved


def configure_logging(level: int | str = logging.INFO, stream: Optional[logging.Handler] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level:
        Logging level, either numeric or a level name.
    stream:
        Optional handler. When omitted a handler writing to ``sys.stderr`` is
        used so that rendered markup on stdout stays clean.
    """

    root_logger = logging.getLogger()
    handler: logging.Handler = stream if stream is not None else logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    # Repeated calls (tests, CLI re-entry) must not stack handlers.
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)

    root_logger.setLevel(resolve_level(level))
    root_logger.addHandler(handler)


__all__ = ["configure_logging", "resolve_level"]
