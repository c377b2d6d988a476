"""
Process-wide convenience logger.

Optional thin wrapper: a default ``JSONLogger`` writing to stderr plus free
functions that delegate to it. Replace it once at startup with
:func:`set_logger`; nothing else in chainlog reads this module.
"""

from __future__ import annotations

import sys
from typing import Any

from .core import LogBuilder, Logger
from .json_logger import JSONLogger

_logger: Logger = JSONLogger(sys.stderr)


def get_logger() -> Logger:
    """Return the process-wide logger."""
    return _logger


def set_logger(logger: Logger) -> None:
    """Replace the process-wide logger."""
    global _logger
    _logger = logger


def no_panic() -> None:
    """Prevent the process-wide logger from raising on panic events."""
    _logger.no_panic()


def no_exit() -> None:
    """Prevent the process-wide logger from exiting on fatal events."""
    _logger.no_exit()


def debug(msg: str) -> LogBuilder:
    return _logger.debug(msg)


def debugf(template: str, *args: Any) -> LogBuilder:
    return _logger.debugf(template, *args)


def info(msg: str) -> LogBuilder:
    return _logger.info(msg)


def infof(template: str, *args: Any) -> LogBuilder:
    return _logger.infof(template, *args)


def warn(msg: str) -> LogBuilder:
    return _logger.warn(msg)


def warnf(template: str, *args: Any) -> LogBuilder:
    return _logger.warnf(template, *args)


def error(msg: str) -> LogBuilder:
    return _logger.error(msg)


def errorf(template: str, *args: Any) -> LogBuilder:
    return _logger.errorf(template, *args)


def fatal(msg: str) -> LogBuilder:
    return _logger.fatal(msg)


def fatalf(template: str, *args: Any) -> LogBuilder:
    return _logger.fatalf(template, *args)


def panic(msg: str) -> LogBuilder:
    return _logger.panic(msg)


def panicf(template: str, *args: Any) -> LogBuilder:
    return _logger.panicf(template, *args)
