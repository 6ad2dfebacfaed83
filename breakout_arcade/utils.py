"""Numeric and string helpers shared by the game code."""

from __future__ import annotations

from dataclasses import dataclass

EPSILON = 0.0001
PI = 3.14159
TWO_PI = 2.0 * PI


@dataclass
class Size:
    """Width and height of something drawn on screen, in pixels."""

    width: int = 0
    height: int = 0


def is_equal(x: float, y: float) -> bool:
    """True when the two values differ by less than EPSILON."""
    return abs(x - y) < EPSILON


def is_greater_than_or_equal(x: float, y: float) -> bool:
    return x > y or is_equal(x, y)


def is_less_than_or_equal(x: float, y: float) -> bool:
    return x < y or is_equal(x, y)


def milliseconds_to_seconds(milliseconds: int) -> float:
    return milliseconds / 1000.0


def get_index(width: int, r: int, c: int) -> int:
    """Index of row ``r``, column ``c`` in a row-major grid of the given width."""
    return r * width + c


def string_compare(a: str, b: str) -> bool:
    """Case-insensitive string equality."""
    return len(a) == len(b) and a.lower() == b.lower()


def clamp(val: float, min_val: float, max_val: float) -> float:
    if val > max_val:
        return max_val
    if val < min_val:
        return min_val
    return val