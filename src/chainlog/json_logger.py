"""
Machine-readable encoder: one JSON object per event.

Record layout: ``{"msg":"...","level":"...","key":value,...}`` with fields in
append order and no trailing newline. Duplicate keys are kept as written.
"""

from __future__ import annotations

import base64
from typing import Any

from .core import BaseLogger, BufferedLogBuilder, LogBuilder, LoggerConfig
from .encoding import quote
from .levels import LogLevel


class JSONLogBuilder(BufferedLogBuilder):
    """Writes one JSON record into its buffer."""

    TERMINATOR = "}"

    def __init__(self, config: LoggerConfig, level: LogLevel, msg: str):
        super().__init__(config, level, msg)
        self._out.write('{"msg":')
        self._out.write(quote(msg))
        self._out.write(',"level":"')
        self._out.write(level.text)
        self._out.write('"')

    def _write_key(self, key: str) -> None:
        self._out.write(",")
        self._out.write(quote(key))
        self._out.write(":")

    def _encode_bytes(self, val: bytes) -> str:
        return base64.b64encode(val).decode("ascii")

    def err(self, err):
        return self.str("error", f"{err}")


class JSONLogger(BaseLogger):
    """Logger producing JSON records.

    Args:
        out: Destination stream, or ``DISCARD``.
        level: Minimum level of emitted events.
    """

    def __init__(self, out: Any, *, level: LogLevel = LogLevel.INFO):
        self.config = LoggerConfig(out=out, level=LogLevel(level))

    def _new_builder(self, level: LogLevel, msg: str) -> LogBuilder:
        return JSONLogBuilder(self.config, level, msg)
