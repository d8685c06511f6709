"""Logging helpers for dsugraph.

Every module obtains its logger through :func:`get_logger`, which namespaces
it under ``dsugraph.`` and attaches a single stderr handler. The initial level
comes from the ``DSUGRAPH_LOG_LEVEL`` environment variable (default WARNING).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Optional

_LOG_LEVEL_ENV_VAR = "DSUGRAPH_LOG_LEVEL"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_loggers: dict[str, logging.Logger] = {}


def _resolve_level(level: int | str | None) -> int:
    """Turn a level name or number into a logging level (WARNING on junk)."""
    if level is None:
        return logging.WARNING
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        return resolved if isinstance(resolved, int) else logging.WARNING
    return int(level)


_current_level: int = _resolve_level(os.getenv(_LOG_LEVEL_ENV_VAR))


def _make_handler(
    level: int, stream: Optional[IO[str]] = None, format_string: Optional[str] = None
) -> logging.Handler:
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the cached ``dsugraph`` logger for ``name``.

    Args:
        name: Usually ``__name__`` of the calling module. Names outside the
            ``dsugraph`` namespace are prefixed with it; ``None`` returns the
            package logger.

    Returns:
        A logger that writes to stderr and does not propagate to the root
        logger.

    Example:
        >>> from dsugraph.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("linking roots %s and %s", 0, 1)
    """
    if name is None or name == "dsugraph":
        logger_name = "dsugraph"
    elif name.startswith("dsugraph."):
        logger_name = name
    else:
        logger_name = f"dsugraph.{name}"

    cached = _loggers.get(logger_name)
    if cached is not None:
        return cached

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        logger.setLevel(_current_level)
        logger.addHandler(_make_handler(_current_level))
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every dsugraph logger, existing and future.

    Args:
        level: A ``logging`` constant or its name (``"DEBUG"``, ``"info"``...).
    """
    global _current_level
    _current_level = _resolve_level(level)

    for logger in _loggers.values():
        logger.setLevel(_current_level)
        for handler in logger.handlers:
            handler.setLevel(_current_level)


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """Replace the handlers of every cached logger.

    Args:
        level: Logging level (default WARNING).
        format_string: Record format; defaults to ``[LEVEL] name: message``.
        stream: Output stream; defaults to ``sys.stderr``.
    """
    global _current_level
    _current_level = _resolve_level(level)

    for logger in _loggers.values():
        logger.setLevel(_current_level)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.addHandler(_make_handler(_current_level, stream, format_string))
