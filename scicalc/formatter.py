"""Display formatting for evaluation results."""

from __future__ import annotations

import math
from decimal import Decimal

DEFAULT_PRECISION = 12

# Decimal-point positions outside (-6, 21] switch to exponential notation
_MAX_FIXED_POSITION = 21
_MIN_FIXED_POSITION = -6


def shortest_repr(value: float) -> str:
    """Render a finite float with its shortest round-trip digits.

    Uses plain notation for moderate magnitudes and "1.5e+21" / "1e-7"
    style exponents otherwise. Negative zero renders as "0".
    """
    if value == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = k + exponent  # position of the decimal point relative to the digits
    prefix = "-" if sign else ""

    if k <= n <= _MAX_FIXED_POSITION:
        body = digits + "0" * (n - k)
    elif 0 < n <= _MAX_FIXED_POSITION:
        body = f"{digits[:n]}.{digits[n:]}"
    elif _MIN_FIXED_POSITION < n <= 0:
        body = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits[0] + (f".{digits[1:]}" if k > 1 else "")
        body = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return prefix + body


def format_result(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Format a number for the calculator display.

    NaN becomes "Not a number", infinities become "Infinity"/"-Infinity".
    Finite values are rounded to `precision` significant digits and printed
    without trailing zeros, e.g. format_result(1 / 3, 4) == "0.3333".
    """
    if precision < 1:
        raise ValueError(f"precision must be at least 1, got {precision}")
    if math.isnan(value):
        return "Not a number"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    rounded = float(f"{value:.{precision}g}")
    return shortest_repr(rounded)
