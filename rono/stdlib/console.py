#!/usr/bin/env python3
"""
Console primitives for compiled Rono programs.

Output functions write one line to standard output and never report failure.
Input functions read one bounded line from standard input and coerce it
best-effort: malformed or missing input turns into a zero value, never an
exception.
"""

import logging
import re
import sys
from typing import Optional

from .. import config

logger = logging.getLogger(__name__)

_C_SPACE = '[ \\t\\n\\v\\f\\r]*'
_INT_RE = re.compile(_C_SPACE + r'([+-]?[0-9]+)')
_HEX_FLOAT_RE = re.compile(
    _C_SPACE + r'([+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?)'
)
_FLOAT_RE = re.compile(
    _C_SPACE + r'([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan))',
    re.IGNORECASE,
)

TRUE_TOKENS = ("true", "1")


def _write_line(text: str):
    try:
        print(text)
    except (OSError, ValueError) as e:
        # Closed or broken stdout
        logger.debug(f"Dropped console output: {e}")


# --- Output ---

def print_int(value: int):
    _write_line('%d' % value)


def print_float(value: float):
    _write_line(config.FLOAT_FORMAT.format(value))


def print_bool(value: bool):
    _write_line("true" if value else "false")


def print_string(text: Optional[str]):
    _write_line(config.NULL_TEXT if text is None else text)


def format_interpolated(template: str, value: int) -> str:
    """Replace every `{}` marker in template with the decimal text of value"""
    return template.replace(config.INTERPOLATION_MARKER, '%d' % value)


def print_interpolated(template: str, value: int):
    _write_line(format_interpolated(template, value))


def print_format_int(template: Optional[str], value: int):
    """con.out with an optional format string"""
    if template is None:
        print_int(value)
    else:
        print_interpolated(template, value)


# --- Parsing helpers (strtoll / strtod semantics) ---

def parse_int(text: Optional[str]) -> int:
    """Parse a leading decimal integer, saturating to the 64-bit range. 0 if none."""
    if text is None:
        return 0
    match = _INT_RE.match(text)
    if not match:
        return 0
    value = int(match.group(1))
    return max(config.INT64_MIN, min(config.INT64_MAX, value))


def parse_float(text: Optional[str]) -> float:
    """Parse a leading floating point number. 0.0 if none."""
    if text is None:
        return 0.0
    match = _HEX_FLOAT_RE.match(text)
    if match:
        literal = match.group(1)
        try:
            return float.fromhex(literal)
        except OverflowError:
            return float('-inf') if literal.startswith('-') else float('inf')
    match = _FLOAT_RE.match(text)
    if match:
        return float(match.group(1))
    return 0.0


def parse_bool(text: Optional[str]) -> bool:
    return text in TRUE_TOKENS


# --- Input ---

def input_string() -> Optional[str]:
    """Read one line (at most INPUT_BUFFER_SIZE - 1 characters) without its newline.

    Returns None at end of stream or when stdin is unavailable. A line longer
    than the buffer is handed back in pieces on successive calls.
    """
    stream = sys.stdin
    if stream is None:
        return None
    try:
        line = stream.readline(config.INPUT_BUFFER_SIZE - 1)
    except (OSError, ValueError) as e:
        logger.debug(f"Console input failed: {e}")
        return None
    if not line:
        return None
    if line.endswith("\n"):
        line = line[:-1]
    return line


def input_int() -> int:
    return parse_int(input_string())


def input_float() -> float:
    return parse_float(input_string())


def input_bool() -> bool:
    return parse_bool(input_string())
