"""
chainlog: leveled, field-tagged event logging with pluggable encodings.

Provides a fluent event builder over several backends:
- JSONLogger: one JSON record per event
- PrettyLogger / CLILogger: human-readable, optionally colorized lines
- MultiLogger: fan-out of one event to several loggers
- NopLogger: discards everything

Usage:
    logger = JSONLogger(sys.stderr)
    logger.info("request served").int("status", 200).str("path", "/").send()

Library: orjson for value encoding, pydantic-settings for configuration,
structlog for chainlog's own diagnostics.
"""

from .colors import Palette
from .console import CLILogger, ConsoleConfig, PrettyLogger
from .core import LogBuilder, Logger, LoggerConfig
from .errors import ChainlogError, EncodingError, FanOutError, FieldRangeError, LogPanic
from .factory import build_logger
from .json_logger import JSONLogger
from .levels import LogLevel
from .multi import MultiLogger
from .nop import NOP_BUILDER, NopLogger
from .settings import LogFormat, LoggingSettings
from .termination import Continue, ExitProcess, RaiseAbnormal, TerminationAction
from .writer import DISCARD, BufferedWriter

__all__ = [
    "BufferedWriter",
    "ChainlogError",
    "CLILogger",
    "ConsoleConfig",
    "Continue",
    "DISCARD",
    "EncodingError",
    "ExitProcess",
    "FanOutError",
    "FieldRangeError",
    "JSONLogger",
    "LogBuilder",
    "LogFormat",
    "LogLevel",
    "LogPanic",
    "Logger",
    "LoggerConfig",
    "LoggingSettings",
    "MultiLogger",
    "NOP_BUILDER",
    "NopLogger",
    "Palette",
    "PrettyLogger",
    "RaiseAbnormal",
    "TerminationAction",
    "build_logger",
]
