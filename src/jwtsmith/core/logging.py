from __future__ import annotations

import logging
import os
from typing import IO

LOGGER_NAME = "jwtsmith"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}

_handler: logging.Handler | None = None


def install_null_handler() -> None:
    """Keep ``jwtsmith`` records off the last-resort handler until an application configures logging."""
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(handler, logging.NullHandler) for handler in logger.handlers):
        logger.addHandler(logging.NullHandler())


def resolve_log_level(level: str | int | None = None) -> int:
    if isinstance(level, int):
        return level
    raw = (os.getenv("LOG_LEVEL", "INFO") if level is None else level).strip().upper()
    if raw in _LEVELS:
        return getattr(logging, raw)
    return logging.INFO


def configure_logging(level: str | int | None = None, stream: IO[str] | None = None) -> logging.Handler:
    """Route ``jwtsmith`` records to a stream at ``level`` (``LOG_LEVEL`` when omitted).

    Repeated calls adjust the level of the existing handler instead of adding another one.
    """
    global _handler
    resolved = resolve_log_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    if _handler is None:
        _handler = logging.StreamHandler(stream)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_handler)
    _handler.setLevel(resolved)
    logger.setLevel(resolved)
    return _handler
