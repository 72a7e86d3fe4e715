"""Tests for format_result()."""

import math

import pytest

from scicalc.formatter import format_result


def test_precision_rounding():
    assert format_result(1 / 3, 4) == "0.3333"


def test_default_precision():
    assert format_result(2 / 3) == "0.666666666667"
    assert format_result(0.1 + 0.2) == "0.3"


def test_special_values():
    assert format_result(math.nan) == "Not a number"
    assert format_result(math.inf) == "Infinity"
    assert format_result(-math.inf) == "-Infinity"


def test_integers_have_no_trailing_point():
    assert format_result(14.0) == "14"
    assert format_result(-2.5) == "-2.5"
    assert format_result(-0.0) == "0"


def test_large_values_keep_plain_notation_until_1e21():
    assert format_result(123456789012345.0) == "123456789012000"
    assert format_result(1e20) == "100000000000000000000"
    assert format_result(1e21) == "1e+21"
    assert format_result(-2.5e30) == "-2.5e+30"


def test_small_values():
    assert format_result(1e-6) == "0.000001"
    assert format_result(1.5e-7) == "1.5e-7"


def test_precision_must_be_positive():
    with pytest.raises(ValueError):
        format_result(1.0, 0)
