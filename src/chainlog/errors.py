"""
Exception hierarchy for chainlog.

Encoding failures abort event construction, destination failures surface
from ``send()``, and panic-level events raise :class:`LogPanic`.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class ChainlogError(Exception):
    """Base class for every error raised by chainlog."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class EncodingError(ChainlogError):
    """A value passed to ``any()`` cannot be serialized.

    The event is abandoned; nothing is written for it.
    """

    def __init__(self, *, key: str, value_type: str, reason: str) -> None:
        super().__init__(
            f"cannot encode field {key!r} of type {value_type}: {reason}",
            code="ENCODING_FAILED",
            details={"key": key, "value_type": value_type, "reason": reason},
        )


class FieldRangeError(ChainlogError, OverflowError):
    """An integer does not fit the width of the appender it was passed to."""

    def __init__(self, *, key: str, value: int, kind: str) -> None:
        super().__init__(
            f"value {value} for field {key!r} is out of range for {kind}",
            code="FIELD_OUT_OF_RANGE",
            details={"key": key, "value": value, "kind": kind},
        )


class FanOutError(ChainlogError):
    """One or more members of a fan-out failed to deliver an event."""

    def __init__(self, errors: List[BaseException]) -> None:
        super().__init__(
            f"{len(errors)} fan-out member(s) failed to send",
            code="FANOUT_SEND_FAILED",
            details={"errors": [str(e) for e in errors]},
        )
        self.errors = errors


class LogPanic(ChainlogError, RuntimeError):
    """Raised after a panic-level event has been written."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message, code="LOG_PANIC", details={"message": message})
