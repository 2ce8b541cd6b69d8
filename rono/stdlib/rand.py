#!/usr/bin/env python3
"""Pseudo-random helpers behind randi / randf / rands"""

import logging
import random
import time
from typing import Optional

from .. import config
from ..utils.once import Once

logger = logging.getLogger(__name__)

# Process-wide source, seeded from the wall clock on first use
_rng = random.Random()
_seeded = Once("random-seed")


def _seed_from_clock():
    seed = int(time.time())
    _rng.seed(seed)
    logger.debug(f"Random source seeded with {seed}")


def ensure_seeded():
    _seeded.run(_seed_from_clock)


def get_rng() -> random.Random:
    """Get the shared random source, seeding it first if needed"""
    ensure_seeded()
    return _rng


def _draw(span: int) -> int:
    # Modulo reduction over a 64-bit draw; the bias for spans that do not
    # divide 2**64 is accepted.
    return _rng.getrandbits(config.RANDOM_DRAW_BITS) % span


def rand_int(minimum: int, maximum: int) -> int:
    """Random integer in the inclusive range, bounds in either order"""
    ensure_seeded()
    if minimum > maximum:
        minimum, maximum = maximum, minimum
    if minimum == maximum:
        return minimum
    return minimum + _draw(maximum - minimum + 1)


def rand_float(minimum: float, maximum: float) -> float:
    """Random float in [min, max), bounds in either order"""
    ensure_seeded()
    if minimum > maximum:
        minimum, maximum = maximum, minimum
    if minimum == maximum:
        return minimum
    return minimum + _rng.random() * (maximum - minimum)


def rand_string(length: int) -> str:
    ensure_seeded()
    if length <= 0:
        return ""
    alphabet = config.ALPHANUMERIC
    return "".join(alphabet[_draw(len(alphabet))] for _ in range(length))


def rand_char_range(start: Optional[str], end: Optional[str]) -> str:
    """One random character between the first characters of start and end.

    Missing or empty bounds give the fallback character "a".
    """
    ensure_seeded()
    if not start or not end:
        return config.FALLBACK_CHAR
    low, high = ord(start[0]), ord(end[0])
    if low > high:
        low, high = high, low
    return chr(low + _draw(high - low + 1))
