import io
import time
from datetime import datetime

import pytest

from chainlog import clock

FIXED_NS = 1_714_575_845_123_456_789  # 2024-05-01T15:04:05.123456789Z


class FailingStream:
    """Destination whose writes always fail."""

    def write(self, data):
        raise OSError("disk full")


@pytest.fixture
def buf() -> io.BytesIO:
    return io.BytesIO()


@pytest.fixture
def fixed_clock(monkeypatch):
    """Pin both the console time marker and ``timestamp()``."""
    moment = datetime(2024, 5, 1, 15, 4, 5)
    monkeypatch.setattr(clock, "now", lambda: moment)
    monkeypatch.setattr(clock, "time_ns", lambda: FIXED_NS)
    return moment


@pytest.fixture
def local_tz(monkeypatch):
    """Switch the process time zone; call with a POSIX TZ string."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")

    def _set(tz: str) -> None:
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def failing_stream() -> FailingStream:
    return FailingStream()
