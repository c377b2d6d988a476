"""
Wall-clock access and timestamp formatting.

Encoders read the time through this module so tests can pin it.
"""

from __future__ import annotations

import time as _time
from datetime import datetime, timezone


def now() -> datetime:
    """Current local time (used for the console time marker)."""
    return datetime.now()


def time_ns() -> int:
    """Current time as nanoseconds since the epoch."""
    return _time.time_ns()


def format_rfc3339_nano(ns: int) -> str:
    """Format epoch nanoseconds as local RFC 3339 with trimmed fractional seconds.

    Example: ``2024-05-01T09:30:00.123456789+02:00`` or ``...:00Z`` in UTC.
    """
    seconds, frac = divmod(ns, 1_000_000_000)
    dt = datetime.fromtimestamp(seconds, tz=timezone.utc).astimezone()

    fraction = f"{frac:09d}".rstrip("0")
    if fraction:
        fraction = "." + fraction

    offset = dt.utcoffset()
    if not offset:
        zone = "Z"
    else:
        total = int(offset.total_seconds())
        sign = "+" if total >= 0 else "-"
        hours, minutes = divmod(abs(total) // 60, 60)
        zone = f"{sign}{hours:02d}:{minutes:02d}"

    return dt.strftime("%Y-%m-%dT%H:%M:%S") + fraction + zone


def timestamp() -> str:
    """Current time formatted by :func:`format_rfc3339_nano`."""
    return format_rfc3339_nano(time_ns())
