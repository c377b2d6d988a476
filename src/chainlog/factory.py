"""
Build loggers from :class:`LoggingSettings`.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from .console import CLILogger, PrettyLogger
from .core import Logger
from .diagnostics import get_logger
from .json_logger import JSONLogger
from .multi import MultiLogger
from .settings import LogFormat, LoggingSettings
from .writer import DISCARD

logger = get_logger(__name__)


def _open_output(name: str, settings: LoggingSettings) -> Any:
    if name == "stderr":
        return sys.stderr
    if name == "stdout":
        return sys.stdout
    if name == "discard":
        return DISCARD

    path = Path(settings.file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return open(path, "ab")


def _build_one(out: Any, settings: LoggingSettings) -> Logger:
    if settings.format == LogFormat.JSON:
        return JSONLogger(out, level=settings.level)

    cls = PrettyLogger if settings.format == LogFormat.PRETTY else CLILogger
    return cls(
        out,
        level=settings.level,
        use_color=settings.use_color,
        palette=settings.palette,
        time_format=settings.time_format,
    )


def build_logger(settings: LoggingSettings | None = None) -> Logger:
    """
    Create a logger for the configured outputs.

    One output yields a single encoder logger; several outputs are combined
    in a :class:`MultiLogger`. Files opened for the ``file`` output stay open
    for the lifetime of the logger.

    Args:
        settings: Explicit settings. Defaults to ``LoggingSettings()`` (environment).
    """
    settings = settings or LoggingSettings()

    members = [_build_one(_open_output(name, settings), settings) for name in settings.output_names]
    result: Logger = members[0] if len(members) == 1 else MultiLogger(*members)

    if settings.no_exit:
        result.no_exit()
    if settings.no_panic:
        result.no_panic()

    logger.debug(
        "logger_built",
        format=settings.format.value,
        outputs=settings.output_names,
        level=settings.level.text,
    )
    return result
