"""
Field collection shared by the adapters.

Adapters hand a finished event to another logging library, so they keep
fields as Python values in an ordered dict instead of encoding them.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Dict

from .. import clock
from ..core import LogBuilder
from ..encoding import format_int
from ..levels import LogLevel
from ..termination import TerminationAction, resolve_termination


class FieldsLogBuilder(LogBuilder):
    """Builder that collects fields and dispatches them on ``emit()``.

    A repeated key keeps its last value.
    """

    def __init__(self, level: LogLevel, msg: str, *, no_exit: bool, no_panic: bool):
        self._level = level
        self._msg = msg
        self._no_exit = no_exit
        self._no_panic = no_panic
        self._fields: Dict[str, Any] = {}

    @abstractmethod
    def _dispatch(self) -> None:
        """Hand the message and fields to the wrapped library."""

    def _int(self, key: str, val: Any, bits: int, signed: bool) -> FieldsLogBuilder:
        format_int(key, val, bits, signed)
        self._fields[key] = val
        return self

    def int(self, key, val):
        return self._int(key, val, 64, True)

    def int8(self, key, val):
        return self._int(key, val, 8, True)

    def int16(self, key, val):
        return self._int(key, val, 16, True)

    def int32(self, key, val):
        return self._int(key, val, 32, True)

    def int64(self, key, val):
        return self._int(key, val, 64, True)

    def uint(self, key, val):
        return self._int(key, val, 64, False)

    def uint8(self, key, val):
        return self._int(key, val, 8, False)

    def uint16(self, key, val):
        return self._int(key, val, 16, False)

    def uint32(self, key, val):
        return self._int(key, val, 32, False)

    def uint64(self, key, val):
        return self._int(key, val, 64, False)

    def float32(self, key, val):
        self._fields[key] = float(val)
        return self

    def float64(self, key, val):
        self._fields[key] = float(val)
        return self

    def bool(self, key, val):
        self._fields[key] = val
        return self

    def str(self, key, val):
        self._fields[key] = val
        return self

    def bytes(self, key, val):
        self._fields[key] = val
        return self

    def stringer(self, key, val):
        self._fields[key] = f"{val}"
        return self

    def any(self, key, val):
        self._fields[key] = val
        return self

    def timestamp(self):
        self._fields["timestamp"] = clock.timestamp()
        return self

    def err(self, err):
        self._fields["error"] = f"{err}"
        return self

    def emit(self) -> TerminationAction:
        self._dispatch()
        return resolve_termination(
            self._level,
            no_exit=self._no_exit,
            no_panic=self._no_panic,
            message=self._msg,
        )
