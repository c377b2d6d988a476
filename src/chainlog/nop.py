"""
No-op logger and builder.

Filtered-out events and events aimed at ``DISCARD`` get the shared
:data:`NOP_BUILDER`, so dropping an event costs no allocation.
"""

from __future__ import annotations

from typing import Any

from .core import LogBuilder, Logger
from .levels import LogLevel
from .termination import CONTINUE, TerminationAction


class NopLogBuilder(LogBuilder):
    """Builder whose every call does nothing and returns itself."""

    __slots__ = ()

    def int(self, key, val):
        return self

    def int8(self, key, val):
        return self

    def int16(self, key, val):
        return self

    def int32(self, key, val):
        return self

    def int64(self, key, val):
        return self

    def uint(self, key, val):
        return self

    def uint8(self, key, val):
        return self

    def uint16(self, key, val):
        return self

    def uint32(self, key, val):
        return self

    def uint64(self, key, val):
        return self

    def float32(self, key, val):
        return self

    def float64(self, key, val):
        return self

    def bool(self, key, val):
        return self

    def str(self, key, val):
        return self

    def bytes(self, key, val):
        return self

    def stringer(self, key, val):
        return self

    def any(self, key, val):
        return self

    def timestamp(self):
        return self

    def err(self, err):
        return self

    def emit(self) -> TerminationAction:
        return CONTINUE

    def send(self) -> None:
        pass

    def __repr__(self) -> str:
        return "NOP_BUILDER"


NOP_BUILDER = NopLogBuilder()


class NopLogger(Logger):
    """Logger that never writes anything."""

    def no_exit(self) -> None:
        pass

    def no_panic(self) -> None:
        pass

    def set_level(self, level: LogLevel) -> None:
        pass

    def log(self, level: LogLevel, msg: str) -> LogBuilder:
        return NOP_BUILDER

    def logf(self, level: LogLevel, template: str, *args: Any) -> LogBuilder:
        return NOP_BUILDER
