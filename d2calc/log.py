"""Level-filtered logging for the calculator."""

from __future__ import annotations

import logging
from enum import IntEnum


class LogLevel(IntEnum):
    """Verbosity levels, from least to most verbose."""

    ERROR = 0
    WARNING = 1
    INFO = 2
    DEBUG = 3


_PY_LEVELS = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}

_logger = logging.getLogger("d2calc")
_current_level = LogLevel.WARNING


def set_log_level(level: int | LogLevel) -> None:
    """Set the most verbose level that is still emitted; raise ValueError on bad levels."""
    global _current_level
    _current_level = LogLevel(level)


def get_log_level() -> LogLevel:
    """Return the current log level."""
    return _current_level


def log(message: str, level: int | LogLevel) -> bool:
    """Emit ``message`` if ``level`` is not more verbose than the current level.

    Returns whether the message was emitted.
    """
    level = LogLevel(level)
    if level > _current_level:
        return False
    _logger.log(_PY_LEVELS[level], "%s", message)
    return True