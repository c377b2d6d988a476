"""
chainlog API on top of a structlog logger.
"""

from __future__ import annotations

from typing import Any

import structlog

from ..core import LogBuilder, Logger
from ..levels import LogLevel
from ..nop import NOP_BUILDER
from .base import FieldsLogBuilder

_METHODS = {
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warning",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "critical",
    LogLevel.PANIC: "critical",
}


class StructlogLogBuilder(FieldsLogBuilder):
    def __init__(self, target: Any, level: LogLevel, msg: str, *, no_exit: bool, no_panic: bool):
        super().__init__(level, msg, no_exit=no_exit, no_panic=no_panic)
        self._target = target

    def _dispatch(self) -> None:
        getattr(self._target, _METHODS[self._level])(self._msg, **self._fields)


class StructlogLogger(Logger):
    """chainlog ``Logger`` writing through a structlog bound logger.

    structlog's own filtering (``make_filtering_bound_logger``) is fixed when
    the wrapper class is built, so ``set_level`` can only raise the level:
    a request for a lower level than the current one is ignored.

    Args:
        target: A structlog logger; defaults to ``structlog.get_logger()``.
        level: Initial minimum level applied before structlog's own filter.
    """

    def __init__(self, target: Any = None, *, level: LogLevel = LogLevel.DEBUG):
        self.target = target if target is not None else structlog.get_logger()
        self.level = LogLevel(level)
        self._no_exit = False
        self._no_panic = False

    def no_exit(self) -> None:
        self._no_exit = True

    def no_panic(self) -> None:
        self._no_panic = True

    def set_level(self, level: LogLevel) -> None:
        level = LogLevel(level)
        if level > self.level:
            self.level = level

    def log(self, level: LogLevel, msg: str) -> LogBuilder:
        if level < self.level:
            return NOP_BUILDER
        return StructlogLogBuilder(self.target, level, msg, no_exit=self._no_exit, no_panic=self._no_panic)
