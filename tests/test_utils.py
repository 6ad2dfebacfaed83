import pytest

from breakout_arcade.utils import (
    EPSILON,
    clamp,
    get_index,
    is_equal,
    is_greater_than_or_equal,
    is_less_than_or_equal,
    milliseconds_to_seconds,
    string_compare,
)


def test_is_equal_within_epsilon():
    assert is_equal(1.0, 1.0 + EPSILON / 2)


def test_is_equal_outside_epsilon():
    assert not is_equal(1.0, 1.0 + EPSILON * 2)


def test_greater_than_or_equal():
    assert is_greater_than_or_equal(2.0, 1.0)
    assert is_greater_than_or_equal(1.0, 1.0 + EPSILON / 2)
    assert not is_greater_than_or_equal(1.0, 2.0)


def test_less_than_or_equal():
    assert is_less_than_or_equal(1.0, 2.0)
    assert is_less_than_or_equal(1.0 + EPSILON / 2, 1.0)
    assert not is_less_than_or_equal(2.0, 1.0)


def test_milliseconds_to_seconds():
    assert milliseconds_to_seconds(1000) == pytest.approx(1.0)
    assert milliseconds_to_seconds(0) == 0.0


@pytest.mark.parametrize("width,r,c", [(10, 2, 3), (512, 100, 511), (1, 7, 0)])
def test_get_index_round_trip(width, r, c):
    assert divmod(get_index(width, r, c), width) == (r, c)


def test_string_compare_ignores_case():
    assert string_compare("Hello", "hELLO")


def test_string_compare_rejects_different_strings():
    assert not string_compare("abc", "abcd")
    assert not string_compare("abc", "abd")


def test_clamp():
    assert clamp(-5.0, 0.0, 1.0) == 0.0
    assert clamp(5.0, 0.0, 1.0) == 1.0
    assert clamp(0.25, 0.0, 1.0) == 0.25