"""Four-function calculator helpers.

Operands arrive as display strings and results go back out as display
strings, so a keypad front end can chain operations without holding floats.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Optional, Union

from scicalc.formatter import shortest_repr

PRECISION = 12
MAX_DECIMALS = 8
ERROR = "Error"

# Magnitudes outside [1e-4, 1e9) are shown in exponential form
_EXP_UPPER = 1e9
_EXP_LOWER = 1e-4


class Operator(str, Enum):
    """Binary keypad operations."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


def _to_number(text: str) -> Optional[float]:
    """Parse a display string; blank counts as zero, garbage as None.

    Only "Infinity" is accepted as a spelled-out value; digit separators and
    the "inf"/"nan" spellings float() allows are rejected.
    """
    stripped = text.strip()
    if not stripped:
        return 0.0
    word = stripped.lstrip("+-")
    if "_" in stripped or (word.isalpha() and word != "Infinity"):
        return None
    try:
        value = float(stripped)
    except ValueError:
        return None
    return None if math.isnan(value) else value


def _sanitize(value: float) -> float:
    cleaned = float(f"{value:.{PRECISION}g}")
    return 0.0 if cleaned == 0 else cleaned


def format_number(value: float) -> str:
    """Format a keypad result.

    Non-finite values show as "Error". Very large or very small magnitudes
    use a compact exponent ("1.5e9", "1e-5"); everything else keeps at most
    MAX_DECIMALS fractional digits with trailing zeros dropped.
    """
    if not math.isfinite(value):
        return ERROR

    sanitized = _sanitize(value)
    magnitude = abs(sanitized)

    if magnitude != 0 and (magnitude >= _EXP_UPPER or magnitude < _EXP_LOWER):
        mantissa, exponent = f"{sanitized:.6e}".split("e")
        mantissa = mantissa.rstrip("0").rstrip(".")
        return f"{mantissa}e{int(exponent)}"

    text = shortest_repr(sanitized)
    if "." not in text:
        return text
    integer, decimals = text.split(".", 1)
    decimals = decimals[:MAX_DECIMALS].rstrip("0")
    return f"{integer}.{decimals}" if decimals else integer


def apply_operation(previous: str, current: str, operator: Union[Operator, str]) -> str:
    """Apply `operator` to two display strings and format the result.

    Unparseable operands yield "0"; dividing by zero yields "Error".
    """
    op = Operator(operator)
    a = _to_number(previous)
    b = _to_number(current)
    if a is None or b is None:
        return "0"

    if op is Operator.DIVIDE and b == 0:
        return ERROR

    if op is Operator.ADD:
        result = a + b
    elif op is Operator.SUBTRACT:
        result = a - b
    elif op is Operator.MULTIPLY:
        result = a * b
    else:
        result = a / b
    return format_number(result)


def to_percent(value: str) -> str:
    """Divide a display value by 100."""
    number = _to_number(value)
    if number is None:
        return "0"
    return format_number(number / 100)


def toggle_sign(value: str) -> str:
    """Flip the sign of a display value, leaving "0" and "Error" alone."""
    if value in ("0", ERROR):
        return value
    return value[1:] if value.startswith("-") else f"-{value}"
