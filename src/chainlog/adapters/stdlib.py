"""
Bridges between chainlog and the standard library ``logging`` module.

- ``StdlibLogger``: chainlog API on top of a ``logging.Logger``.
- ``ChainlogHandler``: ``logging.Handler`` that re-emits records through a
  chainlog ``Logger``.
"""

from __future__ import annotations

import logging
from typing import Any

from ..core import LogBuilder, Logger
from ..levels import LogLevel
from ..nop import NOP_BUILDER
from .base import FieldsLogBuilder

_TO_STDLIB = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
    LogLevel.PANIC: logging.CRITICAL,
}

# Frames between the stdlib call and the caller of emit(): _dispatch, emit.
# send() adds one more. Through a MultiLogger the record points at the fan-out.
_STACKLEVEL = 3


def to_stdlib_level(level: LogLevel) -> int:
    return _TO_STDLIB[level]


def from_stdlib_level(levelno: int) -> LogLevel:
    if levelno >= logging.CRITICAL:
        return LogLevel.FATAL
    if levelno >= logging.ERROR:
        return LogLevel.ERROR
    if levelno >= logging.WARNING:
        return LogLevel.WARN
    if levelno >= logging.INFO:
        return LogLevel.INFO
    return LogLevel.DEBUG


class StdlibLogBuilder(FieldsLogBuilder):
    def __init__(self, target: logging.Logger, level: LogLevel, msg: str, *, no_exit: bool, no_panic: bool):
        super().__init__(level, msg, no_exit=no_exit, no_panic=no_panic)
        self._target = target
        self._stacklevel = _STACKLEVEL

    def _dispatch(self) -> None:
        self._target.log(
            to_stdlib_level(self._level),
            self._msg,
            extra={"fields": dict(self._fields)},
            stacklevel=self._stacklevel,
        )

    def send(self) -> None:
        self._stacklevel = _STACKLEVEL + 1
        self.emit().execute()


class StdlibLogger(Logger):
    """chainlog ``Logger`` writing through a standard library logger.

    Fields travel on the record as ``record.fields``. Level filtering is the
    wrapped logger's: ``set_level`` calls ``setLevel`` on it.
    """

    def __init__(self, target: logging.Logger | None = None):
        self.target = target or logging.getLogger()
        self._no_exit = False
        self._no_panic = False

    def no_exit(self) -> None:
        self._no_exit = True

    def no_panic(self) -> None:
        self._no_panic = True

    def set_level(self, level: LogLevel) -> None:
        self.target.setLevel(to_stdlib_level(LogLevel(level)))

    def log(self, level: LogLevel, msg: str) -> LogBuilder:
        if not self.target.isEnabledFor(to_stdlib_level(level)):
            return NOP_BUILDER
        return StdlibLogBuilder(self.target, level, msg, no_exit=self._no_exit, no_panic=self._no_panic)


class ChainlogHandler(logging.Handler):
    """
    Redirect standard library logging records to a chainlog logger.

    Each record becomes one event with a ``logger`` field holding the record
    name, followed by any ``record.fields`` and, when present, ``exc_info``.
    CRITICAL records are written as fatal events but never terminate the
    process.
    """

    def __init__(self, target: Logger, level: int = logging.NOTSET):
        super().__init__(level)
        self.target = target

    def emit(self, record: logging.LogRecord) -> None:
        try:
            # Our own diagnostics must not loop back into the target
            if record.name.startswith("chainlog"):
                return

            lb = self.target.log(from_stdlib_level(record.levelno), record.getMessage())
            lb.str("logger", record.name)

            fields: Any = getattr(record, "fields", None)
            if isinstance(fields, dict):
                for key, value in fields.items():
                    lb.any(str(key), value)

            if record.exc_info:
                lb.str("exc_info", logging.Formatter().formatException(record.exc_info))

            lb.emit()
        except Exception:
            self.handleError(record)
