"""
ANSI colors and console palettes.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from .levels import LogLevel

COLORS = {
    "reset": "\033[0m",
    "normal": "\033[39m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "gray": "\033[90m",
    "light_red": "\033[91m",
    "bold_red": "\033[1;31m",
}

ColorName = Literal[
    "normal",
    "bold",
    "dim",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "gray",
    "light_red",
    "bold_red",
]


def colorize(text: str, color: str) -> str:
    """Apply ANSI color to text."""
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"


def supports_color(stream: Any) -> bool:
    """Whether ``stream`` is an interactive terminal."""
    try:
        return bool(getattr(stream, "isatty", lambda: False)())
    except ValueError:
        # isatty() on a closed file
        return False


class Palette(BaseModel):
    """Colors used by the console encoders."""

    model_config = ConfigDict(frozen=True)

    time: ColorName = "gray"
    message: ColorName = "normal"
    key: ColorName = "cyan"

    debug: ColorName = "yellow"
    info: ColorName = "green"
    warn: ColorName = "red"
    error: ColorName = "light_red"
    fatal: ColorName = "bold_red"
    panic: ColorName = "bold_red"

    def for_level(self, level: LogLevel) -> str:
        return getattr(self, level.text)
