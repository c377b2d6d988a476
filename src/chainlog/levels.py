"""
Severity levels.
"""

from __future__ import annotations

from enum import IntEnum


class LogLevel(IntEnum):
    """Ordered event severity. Lower values are less severe."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4
    PANIC = 5

    @property
    def text(self) -> str:
        """Canonical lowercase name used in machine-readable output."""
        return _NAMES[self]

    @property
    def tag(self) -> str:
        """Three-letter tag used in human-readable output."""
        return _TAGS[self]

    @classmethod
    def from_name(cls, name: str) -> LogLevel:
        """Strict lookup of a level by canonical name (case-insensitive)."""
        try:
            return _BY_NAME[name.strip().lower()]
        except KeyError:
            raise ValueError(f"unknown log level {name!r}") from None

    def __str__(self) -> str:
        return self.text


_NAMES = {
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warn",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "fatal",
    LogLevel.PANIC: "panic",
}

_TAGS = {
    LogLevel.DEBUG: "DBG",
    LogLevel.INFO: "INF",
    LogLevel.WARN: "WRN",
    LogLevel.ERROR: "ERR",
    LogLevel.FATAL: "FTL",
    LogLevel.PANIC: "PNC",
}

_BY_NAME = {text: level for level, text in _NAMES.items()}
