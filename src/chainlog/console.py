"""
Human-readable encoders.

Two presentations share one builder:

- ``PrettyLogger``: ``<time> <TAG> <message>[ key=value]*``
- ``CLILogger``:    ``<glyph> <message>[ key=value]*`` (``[DBG]``, ``-->``, `` ->``)

Colors are applied only when enabled; with color off the layout is identical,
just without escape sequences.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Any

from . import clock
from .colors import Palette, colorize, supports_color
from .core import BaseLogger, BufferedLogBuilder, LogBuilder, LoggerConfig
from .encoding import quote
from .levels import LogLevel

DEFAULT_TIME_FORMAT = "%H:%M:%S"

CLI_GLYPHS = {
    LogLevel.DEBUG: "[DBG]",
    LogLevel.INFO: "-->",
    LogLevel.WARN: " ->",
    LogLevel.ERROR: " ->",
    LogLevel.FATAL: " ->",
    LogLevel.PANIC: " ->",
}


@dataclass
class ConsoleConfig(LoggerConfig):
    """Logger state plus presentation settings for console output."""

    use_color: bool = False
    palette: Palette = field(default_factory=Palette)
    time_format: str = DEFAULT_TIME_FORMAT


class ConsoleLogBuilder(BufferedLogBuilder):
    """Writes one ``key=value`` line into its buffer."""

    TERMINATOR = "\n"

    _config: ConsoleConfig

    def write_color(self, color: str, text: str) -> None:
        if self._config.use_color:
            self._out.write(colorize(text, color))
        else:
            self._out.write(text)

    def write(self, text: str) -> None:
        self._out.write(text)

    def _write_key(self, key: str) -> None:
        self._out.write(" ")
        self.write_color(self._config.palette.key, key)
        self._out.write("=")

    def _encode_bytes(self, val: bytes) -> str:
        return val.hex()

    def err(self, err):
        color = self._config.palette.error
        self._out.write(" ")
        self.write_color(color, "error=")
        self.write_color(color, quote(f"{err}"))
        return self


class ConsoleLogger(BaseLogger):
    """Shared base of the human-readable loggers.

    Args:
        out: Destination stream, or ``DISCARD``.
        level: Minimum level of emitted events.
        use_color: Force color on or off. ``None`` probes ``out.isatty()``.
        palette: Colors for each part of the line.
    """

    config: ConsoleConfig

    def __init__(
        self,
        out: Any,
        *,
        level: LogLevel = LogLevel.INFO,
        use_color: bool | None = None,
        palette: Palette | None = None,
        time_format: str = DEFAULT_TIME_FORMAT,
    ):
        if use_color is None:
            use_color = supports_color(out)
        self.config = ConsoleConfig(
            out=out,
            level=LogLevel(level),
            use_color=use_color,
            palette=palette or Palette(),
            time_format=time_format,
        )

    @abstractmethod
    def _write_marker(self, lb: ConsoleLogBuilder, level: LogLevel) -> None:
        """Write everything that precedes the message."""

    def _new_builder(self, level: LogLevel, msg: str) -> LogBuilder:
        lb = ConsoleLogBuilder(self.config, level, msg)
        self._write_marker(lb, level)
        lb.write_color(self.config.palette.message, msg)
        return lb


class PrettyLogger(ConsoleLogger):
    """Colorized console output led by the time of day and a level tag."""

    def _write_marker(self, lb: ConsoleLogBuilder, level: LogLevel) -> None:
        palette = self.config.palette
        lb.write_color(palette.time, clock.now().strftime(self.config.time_format))
        lb.write(" ")
        lb.write_color(palette.for_level(level), level.tag)
        lb.write(" ")


class CLILogger(ConsoleLogger):
    """Banner-style console output for command-line tools."""

    def _write_marker(self, lb: ConsoleLogBuilder, level: LogLevel) -> None:
        lb.write_color(self.config.palette.for_level(level), CLI_GLYPHS[level])
        lb.write(" ")
