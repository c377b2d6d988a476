"""
Logger and builder contracts, plus the buffered base shared by encoders.

Design Pattern: Builder (fluent field accumulation) behind a Strategy-style
logger abstraction. The builder variants are JSON, console, no-op, fan-out and
the adapters; all honour the same chaining and termination semantics.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from . import clock
from .diagnostics import get_logger
from .encoding import encode_any, format_float, format_int, quote
from .levels import LogLevel
from .termination import Continue, TerminationAction, resolve_termination
from .writer import DISCARD, BufferedWriter

logger = get_logger(__name__)

# =============================================================================
# Configuration
# =============================================================================


@dataclass
class LoggerConfig:
    """Per-logger state read by every event the logger creates.

    Mutated only through the logger's setters; shared by reference with all
    live builders. Builders capture ``no_exit``/``no_panic`` when created.
    """

    out: Any
    level: LogLevel = LogLevel.INFO
    no_exit: bool = False
    no_panic: bool = False


# =============================================================================
# Builder Contract
# =============================================================================


class LogBuilder(ABC):
    """Single-use accumulator for one event.

    Every appender returns the builder so calls can be chained. After
    ``send()`` or ``emit()`` the builder must not be used again.
    """

    __slots__ = ()

    @abstractmethod
    def int(self, key: str, val: int) -> LogBuilder: ...

    @abstractmethod
    def int8(self, key: str, val: int) -> LogBuilder: ...

    @abstractmethod
    def int16(self, key: str, val: int) -> LogBuilder: ...

    @abstractmethod
    def int32(self, key: str, val: int) -> LogBuilder: ...

    @abstractmethod
    def int64(self, key: str, val: int) -> LogBuilder: ...

    @abstractmethod
    def uint(self, key: str, val: int) -> LogBuilder: ...

    @abstractmethod
    def uint8(self, key: str, val: int) -> LogBuilder: ...

    @abstractmethod
    def uint16(self, key: str, val: int) -> LogBuilder: ...

    @abstractmethod
    def uint32(self, key: str, val: int) -> LogBuilder: ...

    @abstractmethod
    def uint64(self, key: str, val: int) -> LogBuilder: ...

    @abstractmethod
    def float32(self, key: str, val: float) -> LogBuilder: ...

    @abstractmethod
    def float64(self, key: str, val: float) -> LogBuilder: ...

    @abstractmethod
    def bool(self, key: str, val: bool) -> LogBuilder: ...

    @abstractmethod
    def str(self, key: str, val: str) -> LogBuilder: ...

    @abstractmethod
    def bytes(self, key: str, val: bytes) -> LogBuilder: ...

    @abstractmethod
    def stringer(self, key: str, val: Any) -> LogBuilder:
        """Add ``str(val)`` as a string field."""

    @abstractmethod
    def any(self, key: str, val: Any) -> LogBuilder:
        """Add an arbitrary value through the generic JSON encoding pass.

        Much slower than the typed appenders. Raises ``EncodingError`` when
        the value cannot be represented.
        """

    @abstractmethod
    def timestamp(self) -> LogBuilder:
        """Add the current time (RFC 3339, nanoseconds) under ``timestamp``."""

    @abstractmethod
    def err(self, err: BaseException) -> LogBuilder:
        """Add an error's description."""

    @abstractmethod
    def emit(self) -> TerminationAction:
        """Deliver the event and return the termination action without running it."""

    def send(self) -> None:
        """Deliver the event, then exit or raise for fatal/panic events."""
        self.emit().execute()


# =============================================================================
# Logger Contract
# =============================================================================


def _render(template: str, args: tuple) -> str:
    return template % args if args else template


class Logger(ABC):
    """Level-gated factory of :class:`LogBuilder` instances."""

    @abstractmethod
    def no_exit(self) -> None:
        """Prevent fatal events from terminating the process."""

    @abstractmethod
    def no_panic(self) -> None:
        """Prevent panic events from raising ``LogPanic``."""

    @abstractmethod
    def set_level(self, level: LogLevel) -> None:
        """Change the minimum level of emitted events."""

    @abstractmethod
    def log(self, level: LogLevel, msg: str) -> LogBuilder:
        """Create an event of the given level."""

    def logf(self, level: LogLevel, template: str, *args: Any) -> LogBuilder:
        """Create an event whose message is ``template % args``.

        The message is rendered before the level check.
        """
        return self.log(level, _render(template, args))

    def debug(self, msg: str) -> LogBuilder:
        return self.log(LogLevel.DEBUG, msg)

    def debugf(self, template: str, *args: Any) -> LogBuilder:
        return self.logf(LogLevel.DEBUG, template, *args)

    def info(self, msg: str) -> LogBuilder:
        return self.log(LogLevel.INFO, msg)

    def infof(self, template: str, *args: Any) -> LogBuilder:
        return self.logf(LogLevel.INFO, template, *args)

    def warn(self, msg: str) -> LogBuilder:
        return self.log(LogLevel.WARN, msg)

    def warnf(self, template: str, *args: Any) -> LogBuilder:
        return self.logf(LogLevel.WARN, template, *args)

    def error(self, msg: str) -> LogBuilder:
        return self.log(LogLevel.ERROR, msg)

    def errorf(self, template: str, *args: Any) -> LogBuilder:
        return self.logf(LogLevel.ERROR, template, *args)

    def fatal(self, msg: str) -> LogBuilder:
        """Create a fatal event; sending it exits the process with status 1."""
        return self.log(LogLevel.FATAL, msg)

    def fatalf(self, template: str, *args: Any) -> LogBuilder:
        return self.logf(LogLevel.FATAL, template, *args)

    def panic(self, msg: str) -> LogBuilder:
        """Create a panic event; sending it raises ``LogPanic``."""
        return self.log(LogLevel.PANIC, msg)

    def panicf(self, template: str, *args: Any) -> LogBuilder:
        return self.logf(LogLevel.PANIC, template, *args)


# =============================================================================
# Buffered Encoders
# =============================================================================


class BufferedLogBuilder(LogBuilder):
    """Builder that encodes fields straight into a :class:`BufferedWriter`.

    Subclasses define the key layout, byte encoding, error rendering and the
    record terminator.
    """

    TERMINATOR = ""

    def __init__(self, config: LoggerConfig, level: LogLevel, msg: str):
        self._config = config
        self._level = level
        self._msg = msg
        # Suppression applies to events created after the call
        self._no_exit = config.no_exit
        self._no_panic = config.no_panic
        self._out = BufferedWriter(config.out)

    @abstractmethod
    def _write_key(self, key: str) -> None: ...

    @abstractmethod
    def _encode_bytes(self, val: bytes) -> str: ...

    def _field(self, key: str, text: str) -> BufferedLogBuilder:
        self._write_key(key)
        self._out.write(text)
        return self

    def int(self, key, val):
        return self._field(key, format_int(key, val, 64, True))

    def int8(self, key, val):
        return self._field(key, format_int(key, val, 8, True))

    def int16(self, key, val):
        return self._field(key, format_int(key, val, 16, True))

    def int32(self, key, val):
        return self._field(key, format_int(key, val, 32, True))

    def int64(self, key, val):
        return self._field(key, format_int(key, val, 64, True))

    def uint(self, key, val):
        return self._field(key, format_int(key, val, 64, False))

    def uint8(self, key, val):
        return self._field(key, format_int(key, val, 8, False))

    def uint16(self, key, val):
        return self._field(key, format_int(key, val, 16, False))

    def uint32(self, key, val):
        return self._field(key, format_int(key, val, 32, False))

    def uint64(self, key, val):
        return self._field(key, format_int(key, val, 64, False))

    def float32(self, key, val):
        return self._field(key, format_float(val, 32))

    def float64(self, key, val):
        return self._field(key, format_float(val, 64))

    def bool(self, key, val):
        return self._field(key, "true" if val else "false")

    def str(self, key, val):
        return self._field(key, quote(val))

    def bytes(self, key, val):
        return self.str(key, self._encode_bytes(val))

    def stringer(self, key, val):
        return self.str(key, f"{val}")

    def any(self, key, val):
        data = encode_any(key, val)
        self._write_key(key)
        self._out.write_bytes(data)
        return self

    def timestamp(self):
        return self.str("timestamp", clock.timestamp())

    def emit(self) -> TerminationAction:
        action = resolve_termination(
            self._level,
            no_exit=self._no_exit,
            no_panic=self._no_panic,
            message=self._msg,
        )
        self._out.write(self.TERMINATOR)
        try:
            self._out.flush()
        except Exception as exc:
            if isinstance(action, Continue):
                raise
            # Termination still has to happen; keep a trace of the lost event.
            logger.warning("flush_failed", level=self._level.text, error=str(exc))
        return action


class BaseLogger(Logger):
    """Logger backed by a :class:`LoggerConfig` and one builder class."""

    config: LoggerConfig

    def no_exit(self) -> None:
        self.config.no_exit = True

    def no_panic(self) -> None:
        self.config.no_panic = True

    def set_level(self, level: LogLevel) -> None:
        self.config.level = LogLevel(level)

    @property
    def level(self) -> LogLevel:
        return self.config.level

    @property
    def out(self) -> Any:
        return self.config.out

    @abstractmethod
    def _new_builder(self, level: LogLevel, msg: str) -> LogBuilder: ...

    def log(self, level: LogLevel, msg: str) -> LogBuilder:
        # Imported here: nop builds on the contracts defined in this module
        from .nop import NOP_BUILDER

        if self.config.out is DISCARD or level < self.config.level:
            return NOP_BUILDER
        return self._new_builder(level, msg)
