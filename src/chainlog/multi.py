"""
Fan-out of one logical event to several loggers.

Members are built with their own termination disabled; the fan-out decides
once, after every member has received the event.
"""

from __future__ import annotations

from typing import List

from .core import LogBuilder, Logger
from .diagnostics import get_logger
from .errors import FanOutError
from .levels import LogLevel
from .termination import Continue, TerminationAction, resolve_termination

logger = get_logger(__name__)


class MultiLogger(Logger):
    """Logger that forwards every call to each wrapped logger in order.

    Construction calls ``no_exit()`` and ``no_panic()`` on every member.
    """

    def __init__(self, *loggers: Logger):
        for member in loggers:
            member.no_panic()
            member.no_exit()
        self.loggers: List[Logger] = list(loggers)
        self._no_exit = False
        self._no_panic = False

    def no_exit(self) -> None:
        self._no_exit = True

    def no_panic(self) -> None:
        self._no_panic = True

    def set_level(self, level: LogLevel) -> None:
        for member in self.loggers:
            member.set_level(level)

    def log(self, level: LogLevel, msg: str) -> LogBuilder:
        builders = [member.log(level, msg) for member in self.loggers]
        return MultiLogBuilder(self, builders, level, msg)


class MultiLogBuilder(LogBuilder):
    """Builder that replays each call on every member builder."""

    def __init__(self, owner: MultiLogger, builders: List[LogBuilder], level: LogLevel, msg: str):
        self._no_exit = owner._no_exit
        self._no_panic = owner._no_panic
        self._builders = builders
        self._level = level
        self._msg = msg

    def int(self, key, val):
        for lb in self._builders:
            lb.int(key, val)
        return self

    def int8(self, key, val):
        for lb in self._builders:
            lb.int8(key, val)
        return self

    def int16(self, key, val):
        for lb in self._builders:
            lb.int16(key, val)
        return self

    def int32(self, key, val):
        for lb in self._builders:
            lb.int32(key, val)
        return self

    def int64(self, key, val):
        for lb in self._builders:
            lb.int64(key, val)
        return self

    def uint(self, key, val):
        for lb in self._builders:
            lb.uint(key, val)
        return self

    def uint8(self, key, val):
        for lb in self._builders:
            lb.uint8(key, val)
        return self

    def uint16(self, key, val):
        for lb in self._builders:
            lb.uint16(key, val)
        return self

    def uint32(self, key, val):
        for lb in self._builders:
            lb.uint32(key, val)
        return self

    def uint64(self, key, val):
        for lb in self._builders:
            lb.uint64(key, val)
        return self

    def float32(self, key, val):
        for lb in self._builders:
            lb.float32(key, val)
        return self

    def float64(self, key, val):
        for lb in self._builders:
            lb.float64(key, val)
        return self

    def bool(self, key, val):
        for lb in self._builders:
            lb.bool(key, val)
        return self

    def str(self, key, val):
        for lb in self._builders:
            lb.str(key, val)
        return self

    def bytes(self, key, val):
        for lb in self._builders:
            lb.bytes(key, val)
        return self

    def stringer(self, key, val):
        for lb in self._builders:
            lb.stringer(key, val)
        return self

    def any(self, key, val):
        for lb in self._builders:
            lb.any(key, val)
        return self

    def timestamp(self):
        for lb in self._builders:
            lb.timestamp()
        return self

    def err(self, err):
        for lb in self._builders:
            lb.err(err)
        return self

    def emit(self) -> TerminationAction:
        """Send on every member, then resolve the fan-out's own action.

        A member whose ``send()`` fails does not stop the others; members
        never terminate, so any exception from one is a delivery failure. If
        any failed and the event does not terminate, ``FanOutError`` is raised
        after all members were tried.
        """
        failures: List[BaseException] = []
        for index, lb in enumerate(self._builders):
            try:
                lb.send()
            except Exception as exc:
                logger.warning(
                    "fanout_member_failed",
                    member=index,
                    builder=type(lb).__name__,
                    error=str(exc),
                )
                failures.append(exc)

        action = resolve_termination(
            self._level,
            no_exit=self._no_exit,
            no_panic=self._no_panic,
            message=self._msg,
        )
        if failures and isinstance(action, Continue):
            raise FanOutError(failures)
        return action
