"""
chainlog API on top of structlog.
"""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from chainlog import NOP_BUILDER, LogLevel, LogPanic
from chainlog.adapters import StructlogLogger


class TestStructlogLogger:
    def test_fields_become_event_dict(self) -> None:
        with capture_logs() as logs:
            StructlogLogger().warn("w").int("n", 1).bool("ok", True).send()
        assert logs == [{"n": 1, "ok": True, "event": "w", "log_level": "warning"}]

    def test_repeated_key_keeps_last_value(self) -> None:
        with capture_logs() as logs:
            StructlogLogger().info("i").str("k", "a").str("k", "b").send()
        assert logs[0]["k"] == "b"

    def test_err_and_stringer(self) -> None:
        with capture_logs() as logs:
            StructlogLogger().error("e").err(KeyError("k")).stringer("n", 7).send()
        assert logs == [{"error": "'k'", "n": "7", "event": "e", "log_level": "error"}]

    def test_fatal_exits(self) -> None:
        with capture_logs() as logs, pytest.raises(SystemExit):
            StructlogLogger().fatal("bye").send()
        assert logs[0]["log_level"] == "critical"

    def test_panic_raises_unless_suppressed(self) -> None:
        logger = StructlogLogger()
        with capture_logs(), pytest.raises(LogPanic, match="boom"):
            logger.panic("boom").send()

        logger.no_panic()
        with capture_logs() as logs:
            logger.panic("boom").send()
        assert logs[0]["event"] == "boom"

    def test_set_level_only_raises(self) -> None:
        logger = StructlogLogger(level=LogLevel.INFO)
        assert logger.debug("x") is NOP_BUILDER

        logger.set_level(LogLevel.DEBUG)
        assert logger.level == LogLevel.INFO

        logger.set_level(LogLevel.ERROR)
        assert logger.warn("x") is NOP_BUILDER
        assert logger.error("x") is not NOP_BUILDER
