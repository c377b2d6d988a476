"""
Termination policy for fatal and panic events.

``resolve_termination`` decides what should happen after an event has been
flushed; the returned action is executed by ``send()`` or handed back to the
caller by ``emit()``.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Union

from .errors import LogPanic
from .levels import LogLevel


@dataclass(frozen=True)
class Continue:
    """Return normally."""

    def execute(self) -> None:
        return None


@dataclass(frozen=True)
class ExitProcess:
    """Terminate the process with a non-zero status."""

    code: int = 1

    def execute(self) -> None:
        sys.exit(self.code)


@dataclass(frozen=True)
class RaiseAbnormal:
    """Unwind the caller with :class:`LogPanic`."""

    message: str = ""

    def execute(self) -> None:
        raise LogPanic(self.message)


TerminationAction = Union[Continue, ExitProcess, RaiseAbnormal]

CONTINUE = Continue()


def resolve_termination(level: LogLevel, *, no_exit: bool, no_panic: bool, message: str = "") -> TerminationAction:
    """Map a sent event's level and the owning logger's flags to an action."""
    if level == LogLevel.FATAL and not no_exit:
        return ExitProcess(1)
    if level == LogLevel.PANIC and not no_panic:
        return RaiseAbnormal(message)
    return CONTINUE
