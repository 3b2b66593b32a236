"""Tests for 32-bit truncation and IEEE division helpers."""

import math

from ringops.arith.int32 import ieee_div, to_int32
from ringops.config import INT32_MAX, INT32_MIN


def test_to_int32_in_range():
    assert to_int32(0) == 0
    assert to_int32(-5) == -5
    assert to_int32(INT32_MAX) == INT32_MAX
    assert to_int32(INT32_MIN) == INT32_MIN


def test_to_int32_truncates_toward_zero():
    assert to_int32(3.9) == 3
    assert to_int32(-3.9) == -3
    assert to_int32(-0.5) == 0


def test_to_int32_wraps():
    assert to_int32(INT32_MAX + 1) == INT32_MIN
    assert to_int32(2**32) == 0
    assert to_int32(2**32 + 7) == 7
    assert to_int32(-(2**31) - 1) == INT32_MAX


def test_to_int32_non_finite():
    assert to_int32(math.inf) == 0
    assert to_int32(-math.inf) == 0
    assert to_int32(math.nan) == 0


def test_ieee_div_plain():
    assert ieee_div(7, 2) == 3.5
    assert ieee_div(-1.0, 4.0) == -0.25


def test_ieee_div_zero_divisor():
    assert ieee_div(1.0, 0.0) == math.inf
    assert ieee_div(-1.0, 0.0) == -math.inf
    assert ieee_div(1.0, -0.0) == -math.inf
    assert ieee_div(-1.0, -0.0) == math.inf
    assert math.isnan(ieee_div(0.0, 0.0))
    assert math.isnan(ieee_div(math.nan, 0.0))


def test_ieee_div_integer_zero():
    assert ieee_div(3, 0) == math.inf
    assert ieee_div(-3, 0) == -math.inf
