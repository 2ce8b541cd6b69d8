"""
Tests for the console primitives (con.out / con.in lowerings)
"""

import io
import sys

import pytest

from rono import config
from rono.stdlib import console


def feed_stdin(monkeypatch, text):
    monkeypatch.setattr(sys, 'stdin', io.StringIO(text))


class TestConsoleOutput:
    """Output primitives write exactly one line each"""

    def test_print_int(self, capsys):
        console.print_int(-42)
        assert capsys.readouterr().out == "-42\n"

    def test_print_float_uses_six_decimals(self, capsys):
        console.print_float(3.5)
        console.print_float(-0.125)
        assert capsys.readouterr().out == "3.500000\n-0.125000\n"

    def test_print_bool(self, capsys):
        console.print_bool(True)
        console.print_bool(False)
        assert capsys.readouterr().out == "true\nfalse\n"

    def test_print_string(self, capsys):
        console.print_string("hello")
        assert capsys.readouterr().out == "hello\n"

    def test_print_absent_string(self, capsys):
        console.print_string(None)
        assert capsys.readouterr().out == "(null)\n"

    def test_every_marker_gets_the_same_value(self, capsys):
        console.print_interpolated("x={} y={}", 5)
        assert capsys.readouterr().out == "x=5 y=5\n"

    def test_interpolation_passes_other_braces_through(self):
        assert console.format_interpolated("{{}} {", 7) == "{7} {"
        assert console.format_interpolated("no markers", 7) == "no markers"
        assert console.format_interpolated("{}{}", -3) == "-3-3"

    def test_format_int_without_template(self, capsys):
        console.print_format_int(None, 99)
        assert capsys.readouterr().out == "99\n"

    def test_format_int_with_template(self, capsys):
        console.print_format_int("Value: {}", 99)
        assert capsys.readouterr().out == "Value: 99\n"

    def test_closed_stdout_is_not_reported(self, monkeypatch):
        closed = io.StringIO()
        closed.close()
        monkeypatch.setattr(sys, 'stdout', closed)

        console.print_int(1)
        console.print_string("still fine")


class TestConsoleInput:
    """Input primitives never raise, they fall back to zero values"""

    def test_lines_are_read_in_order(self, monkeypatch):
        feed_stdin(monkeypatch, "hello\nworld\n")

        assert console.input_string() == "hello"
        assert console.input_string() == "world"
        assert console.input_string() is None

    def test_last_line_without_newline(self, monkeypatch):
        feed_stdin(monkeypatch, "tail")
        assert console.input_string() == "tail"

    def test_empty_line_is_not_end_of_input(self, monkeypatch):
        feed_stdin(monkeypatch, "\n")
        assert console.input_string() == ""
        assert console.input_string() is None

    def test_only_one_newline_is_stripped(self, monkeypatch):
        feed_stdin(monkeypatch, "text\r\n")
        assert console.input_string() == "text\r"

    def test_long_line_is_split_at_buffer_size(self, monkeypatch):
        limit = config.INPUT_BUFFER_SIZE - 1
        feed_stdin(monkeypatch, "x" * 2000 + "\n")

        first = console.input_string()
        second = console.input_string()

        assert len(first) == limit
        assert len(second) == 2000 - limit

    def test_buffer_limit_counts_characters(self, monkeypatch):
        limit = config.INPUT_BUFFER_SIZE - 1
        feed_stdin(monkeypatch, "\u00e9" * (limit + 5) + "\n")

        assert console.input_string() == "\u00e9" * limit
        assert console.input_string() == "\u00e9" * 5

    def test_missing_stdin(self, monkeypatch):
        monkeypatch.setattr(sys, 'stdin', None)
        assert console.input_string() is None
        assert console.input_int() == 0

    @pytest.mark.parametrize("value", [0, 7, -1, 123456789, config.INT64_MAX, config.INT64_MIN])
    def test_print_then_read_integer_round_trip(self, value, capsys, monkeypatch):
        console.print_int(value)
        feed_stdin(monkeypatch, capsys.readouterr().out)
        assert console.input_int() == value

    @pytest.mark.parametrize("text,expected", [
        ("42", 42),
        ("  -17", -17),
        ("+8", 8),
        ("42abc", 42),
        ("12 34", 12),
        ("abc", 0),
        ("", 0),
        ("99999999999999999999", config.INT64_MAX),
        ("-99999999999999999999", config.INT64_MIN),
    ])
    def test_read_integer(self, text, expected, monkeypatch):
        feed_stdin(monkeypatch, text + "\n")
        assert console.input_int() == expected

    def test_read_integer_at_end_of_input(self, monkeypatch):
        feed_stdin(monkeypatch, "")
        assert console.input_int() == 0

    @pytest.mark.parametrize("text,expected", [
        ("3.25", 3.25),
        ("3.25xyz", 3.25),
        ("  -2", -2.0),
        ("1e3", 1000.0),
        ("1e", 1.0),
        (".5", 0.5),
        ("5.", 5.0),
        ("0x1p3", 8.0),
        ("junk", 0.0),
    ])
    def test_read_float(self, text, expected, monkeypatch):
        feed_stdin(monkeypatch, text + "\n")
        assert console.input_float() == expected

    def test_read_float_infinity(self, monkeypatch):
        feed_stdin(monkeypatch, "-Infinity\n")
        assert console.input_float() == float('-inf')

    def test_read_float_at_end_of_input(self, monkeypatch):
        feed_stdin(monkeypatch, "")
        assert console.input_float() == 0.0

    @pytest.mark.parametrize("text", ["true", "1"])
    def test_read_boolean_true(self, text, monkeypatch):
        feed_stdin(monkeypatch, text + "\n")
        assert console.input_bool() is True

    @pytest.mark.parametrize("text", ["false", "0", "maybe", "TRUE", " true", ""])
    def test_read_boolean_false(self, text, monkeypatch):
        feed_stdin(monkeypatch, text + "\n")
        assert console.input_bool() is False

    def test_read_boolean_at_end_of_input(self, monkeypatch):
        feed_stdin(monkeypatch, "")
        assert console.input_bool() is False
