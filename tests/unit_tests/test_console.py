"""
Human-readable encoders (pretty and CLI variants).
"""

from __future__ import annotations

import io

import pytest

from chainlog import CLILogger, JSONLogger, LogLevel, NOP_BUILDER, Palette, PrettyLogger
from chainlog.colors import colorize, supports_color


class Duration:
    def __str__(self) -> str:
        return "1s"


class FakeTTY(io.BytesIO):
    def isatty(self) -> bool:
        return True


def output(buf: io.BytesIO) -> str:
    return buf.getvalue().decode()


class TestPrettyLayout:
    def test_empty_message(self, buf: io.BytesIO, fixed_clock) -> None:
        PrettyLogger(buf).info("").send()
        assert output(buf) == "15:04:05 INF \n"

    def test_one_field(self, buf: io.BytesIO, fixed_clock) -> None:
        PrettyLogger(buf).info("Test").int("n", 1234).send()
        assert output(buf) == "15:04:05 INF Test n=1234\n"

    def test_two_fields(self, buf: io.BytesIO, fixed_clock) -> None:
        PrettyLogger(buf).info("Test").int("n", 1234).float32("pi", 3.14).send()
        assert output(buf) == "15:04:05 INF Test n=1234 pi=3.14\n"

    def test_any_none(self, buf: io.BytesIO, fixed_clock) -> None:
        PrettyLogger(buf).info("Test").any("any", None).send()
        assert output(buf) == "15:04:05 INF Test any=null\n"

    def test_all_field_types(self, buf: io.BytesIO, fixed_clock) -> None:
        (
            PrettyLogger(buf)
            .info("All")
            .int("int", -1)
            .int8("int8", -1)
            .int16("int16", -1)
            .int32("int32", -1)
            .int64("int64", -1)
            .uint("uint", 1)
            .uint8("uint8", 1)
            .uint16("uint16", 1)
            .uint32("uint32", 1)
            .uint64("uint64", 1)
            .float32("float32", 3.14)
            .float64("float64", 6.28)
            .bool("bool", True)
            .str("string", "")
            .bytes("[]byte", bytes([0x12, 0x34, 0x56]))
            .stringer("stringer", Duration())
            .any("any", None)
            .err(ValueError("err"))
            .send()
        )
        assert output(buf) == (
            "15:04:05 INF All int=-1 int8=-1 int16=-1 int32=-1 int64=-1 uint=1 uint8=1 uint16=1"
            " uint32=1 uint64=1 float32=3.14 float64=6.28 bool=true string=\"\" []byte=\"123456\""
            ' stringer="1s" any=null error="err"\n'
        )

    @pytest.mark.parametrize("level", list(LogLevel))
    def test_level_tags(self, buf: io.BytesIO, fixed_clock, level: LogLevel) -> None:
        logger = PrettyLogger(buf, level=LogLevel.DEBUG)
        logger.no_exit()
        logger.no_panic()
        logger.log(level, "m").send()
        assert output(buf) == f"15:04:05 {level.tag} m\n"

    def test_custom_time_format(self, buf: io.BytesIO, fixed_clock) -> None:
        PrettyLogger(buf, time_format="%Y-%m-%d %H:%M").warn("w").send()
        assert output(buf) == "2024-05-01 15:04 WRN w\n"

    def test_quoted_values_are_escaped(self, buf: io.BytesIO, fixed_clock) -> None:
        PrettyLogger(buf).info("q").str("s", 'a "b"').send()
        assert output(buf) == '15:04:05 INF q s="a \\"b\\""\n'

    def test_below_threshold_is_nop(self, buf: io.BytesIO) -> None:
        assert PrettyLogger(buf, level=LogLevel.WARN).info("x") is NOP_BUILDER


class TestCLILayout:
    @pytest.mark.parametrize(
        ("level", "glyph"),
        [
            (LogLevel.DEBUG, "[DBG]"),
            (LogLevel.INFO, "-->"),
            (LogLevel.WARN, " ->"),
            (LogLevel.ERROR, " ->"),
            (LogLevel.FATAL, " ->"),
            (LogLevel.PANIC, " ->"),
        ],
    )
    def test_glyphs(self, buf: io.BytesIO, level: LogLevel, glyph: str) -> None:
        logger = CLILogger(buf, level=LogLevel.DEBUG)
        logger.no_exit()
        logger.no_panic()
        logger.log(level, "Building").str("pkg", "core").send()
        assert output(buf) == f'{glyph} Building pkg="core"\n'

    def test_error_field(self, buf: io.BytesIO) -> None:
        CLILogger(buf).error("failed").err(RuntimeError("boom")).send()
        assert output(buf) == ' -> failed error="boom"\n'


class TestColor:
    def test_color_wraps_each_part(self, buf: io.BytesIO, fixed_clock) -> None:
        PrettyLogger(buf, use_color=True).info("Test").int("n", 1).send()
        expected = (
            colorize("15:04:05", "gray")
            + " "
            + colorize("INF", "green")
            + " "
            + colorize("Test", "normal")
            + " "
            + colorize("n", "cyan")
            + "=1\n"
        )
        assert output(buf) == expected

    def test_err_uses_error_color_regardless_of_key_color(self, buf: io.BytesIO) -> None:
        palette = Palette(key="blue", error="magenta")
        CLILogger(buf, use_color=True, palette=palette).info("x").err(ValueError("boom")).send()
        assert output(buf).endswith(" " + colorize("error=", "magenta") + colorize('"boom"', "magenta") + "\n")

    def test_no_color_output_is_identical_whether_probed_or_forced(self, fixed_clock) -> None:
        probed, forced = io.BytesIO(), io.BytesIO()
        PrettyLogger(probed).info("Test").int("n", 1).err(ValueError("e")).send()
        PrettyLogger(forced, use_color=False).info("Test").int("n", 1).err(ValueError("e")).send()
        assert probed.getvalue() == forced.getvalue() == b'15:04:05 INF Test n=1 error="e"\n'

    def test_terminal_destination_enables_color(self) -> None:
        tty = FakeTTY()
        assert supports_color(tty)
        assert PrettyLogger(tty).config.use_color is True
        assert not supports_color(io.BytesIO())
        assert not supports_color(object())


class TestByteEncodingAsymmetry:
    def test_hex_in_console_base64_in_json(self, buf: io.BytesIO, fixed_clock) -> None:
        data = b"\x00\xffhi"
        json_buf = io.BytesIO()
        PrettyLogger(buf).info("b").bytes("data", data).send()
        JSONLogger(json_buf).info("b").bytes("data", data).send()
        assert output(buf) == '15:04:05 INF b data="00ff6869"\n'
        assert json_buf.getvalue() == b'{"msg":"b","level":"info","data":"AP9oaQ=="}'
