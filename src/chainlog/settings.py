"""
Logging Configuration.
"""

from enum import Enum
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .colors import Palette
from .console import DEFAULT_TIME_FORMAT
from .levels import LogLevel

OUTPUT_NAMES = ("stderr", "stdout", "file", "discard")


class LogFormat(str, Enum):
    JSON = "json"
    PRETTY = "pretty"
    CLI = "cli"


class LoggingSettings(BaseSettings):
    """Logger construction settings, read from ``CHAINLOG_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="CHAINLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        frozen=True,
    )

    level: LogLevel = Field(default=LogLevel.INFO, description="Minimum level (debug, info, warn, error, fatal, panic)")
    format: LogFormat = Field(default=LogFormat.JSON, description="Encoder for every output")
    outputs: str = Field(default="stderr", description="Comma-separated outputs (stderr, stdout, file, discard)")
    file_path: str = Field(default="logs/chainlog.log", description="Path for the file output")
    no_exit: bool = Field(default=False, description="Do not exit the process on fatal events")
    no_panic: bool = Field(default=False, description="Do not raise LogPanic on panic events")
    use_color: Optional[bool] = Field(default=None, description="Force console colors; unset probes the terminal")
    time_format: str = Field(default=DEFAULT_TIME_FORMAT, description="Console time marker format")
    palette: Palette = Field(default_factory=Palette, description="Console colors")

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value):
        if isinstance(value, str) and not value.isdigit():
            return LogLevel.from_name(value)
        return value

    @field_validator("outputs")
    @classmethod
    def _check_outputs(cls, value: str) -> str:
        names = [name.strip().lower() for name in value.split(",") if name.strip()]
        if not names:
            raise ValueError("at least one output is required")
        unknown = [name for name in names if name not in OUTPUT_NAMES]
        if unknown:
            raise ValueError(f"unknown output(s) {unknown}; expected any of {list(OUTPUT_NAMES)}")
        return ",".join(names)

    @property
    def output_names(self) -> list[str]:
        return self.outputs.split(",")
