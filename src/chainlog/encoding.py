"""
Value encoding shared by the JSON and console builders.

Library: orjson for string quoting and the generic ``any`` pass.
"""

from __future__ import annotations

import math
import operator
import struct
from decimal import Decimal
from typing import Any

import orjson
from pydantic import BaseModel

from .errors import EncodingError, FieldRangeError

ORJSON_OPTIONS = orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC | orjson.OPT_NON_STR_KEYS

# (bits, signed) -> (min, max)
_INT_BOUNDS = {
    (8, True): (-(1 << 7), (1 << 7) - 1),
    (16, True): (-(1 << 15), (1 << 15) - 1),
    (32, True): (-(1 << 31), (1 << 31) - 1),
    (64, True): (-(1 << 63), (1 << 63) - 1),
    (8, False): (0, (1 << 8) - 1),
    (16, False): (0, (1 << 16) - 1),
    (32, False): (0, (1 << 32) - 1),
    (64, False): (0, (1 << 64) - 1),
}


def _orjson_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    raise TypeError(f"Type is not JSON serializable: {type(value).__name__}")


def quote(text: str) -> str:
    """Render ``text`` as a double-quoted, JSON-escaped string."""
    return orjson.dumps(text).decode()


def format_int(key: str, value: Any, bits: int, signed: bool) -> str:
    """Decimal text for ``value`` after checking it fits the integer width."""
    number = operator.index(value)
    low, high = _INT_BOUNDS[(bits, signed)]
    if not low <= number <= high:
        kind = f"{'int' if signed else 'uint'}{bits}"
        raise FieldRangeError(key=key, value=number, kind=kind)
    return str(number)


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _shortest_float32(value: float) -> str:
    target = _to_float32(value)
    for precision in range(1, 10):
        text = f"{target:.{precision}g}"
        if _to_float32(float(text)) == target:
            return text
    return repr(target)


def format_float(value: float, bits: int = 64) -> str:
    """Shortest round-trip decimal text, never in exponent notation."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    text = _shortest_float32(value) if bits == 32 else repr(value)
    return format(Decimal(text).normalize(), "f")


def encode_any(key: str, value: Any) -> bytes:
    """Serialize an arbitrary value with orjson.

    Raises:
        EncodingError: orjson cannot represent the value.
    """
    try:
        return orjson.dumps(value, default=_orjson_default, option=ORJSON_OPTIONS)
    except (orjson.JSONEncodeError, TypeError) as exc:
        raise EncodingError(key=key, value_type=type(value).__name__, reason=str(exc)) from exc
