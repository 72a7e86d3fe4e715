"""Operator, function and constant tables for the expression engine.

All tables are read-only mappings built once at import time. The evaluator,
tokenizer and CLI only ever look things up here; nothing mutates them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping

from scicalc.models import AngleMode, CalculatorError, ErrorKind


class Associativity(str, Enum):
    """Operator associativity used by the shunting-yard tie-break."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class OperatorDef:
    """Precedence, associativity and arity for one operator key."""

    symbol: str
    precedence: int
    associativity: Associativity
    arity: int
    apply: Callable[..., float]

    @property
    def left_associative(self) -> bool:
        return self.associativity is Associativity.LEFT


@dataclass(frozen=True)
class FunctionDef:
    """A named single-argument function; `apply` receives the angle mode."""

    name: str
    apply: Callable[[float, AngleMode], float]
    description: str = ""
    arity: int = 1


# ---------------------------------------------------------------------------
# Angle conversion
# ---------------------------------------------------------------------------

def to_radians(value: float, mode: AngleMode) -> float:
    """Convert an angle expressed in `mode` to radians."""
    return value * math.pi / 180 if mode is AngleMode.DEG else value


def from_radians(value: float, mode: AngleMode) -> float:
    """Convert a radian angle to `mode`."""
    return value * 180 / math.pi if mode is AngleMode.DEG else value


# ---------------------------------------------------------------------------
# Float helpers
#
# The math module raises where IEEE arithmetic yields inf/nan. These helpers
# keep the IEEE results so only the documented domain checks raise.
# ---------------------------------------------------------------------------

def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and float(x).is_integer() and int(x) % 2 == 1


def _ieee(fn: Callable[[float], float], value: float) -> float:
    try:
        return fn(value)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan


def power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return -math.inf if base < 0 and _is_odd_integer(exponent) else math.inf
    except ValueError:
        if base == 0:
            # 0 ** negative
            return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
        return math.nan


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise CalculatorError("Division by zero", ErrorKind.DIVISION_BY_ZERO)
    return a / b


def _log10(value: float, mode: AngleMode) -> float:
    if value <= 0:
        raise CalculatorError("Logarithm domain error", ErrorKind.DOMAIN_ERROR, detail="log")
    return math.log10(value)


def _ln(value: float, mode: AngleMode) -> float:
    if value <= 0:
        raise CalculatorError("Natural log domain error", ErrorKind.DOMAIN_ERROR, detail="ln")
    return math.log(value)


def _sqrt(value: float, mode: AngleMode) -> float:
    if value < 0:
        raise CalculatorError("Square root domain error", ErrorKind.DOMAIN_ERROR, detail="sqrt")
    return math.sqrt(value)


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

NEGATE = "neg"

OPERATORS: Mapping[str, OperatorDef] = MappingProxyType({
    "+": OperatorDef("+", 2, Associativity.LEFT, 2, lambda a, b: a + b),
    "-": OperatorDef("-", 2, Associativity.LEFT, 2, lambda a, b: a - b),
    "*": OperatorDef("*", 3, Associativity.LEFT, 2, lambda a, b: a * b),
    "/": OperatorDef("/", 3, Associativity.LEFT, 2, _divide),
    "^": OperatorDef("^", 4, Associativity.RIGHT, 2, power),
    # Prefix negation; see to_postfix for how it yields to "^"
    NEGATE: OperatorDef(NEGATE, 5, Associativity.RIGHT, 1, lambda a: -a),
})

FUNCTIONS: Mapping[str, FunctionDef] = MappingProxyType({
    "sin": FunctionDef("sin", lambda v, m: _ieee(math.sin, to_radians(v, m)), "Sine"),
    "cos": FunctionDef("cos", lambda v, m: _ieee(math.cos, to_radians(v, m)), "Cosine"),
    "tan": FunctionDef("tan", lambda v, m: _ieee(math.tan, to_radians(v, m)), "Tangent"),
    "asin": FunctionDef("asin", lambda v, m: from_radians(_ieee(math.asin, v), m), "Inverse sine"),
    "acos": FunctionDef("acos", lambda v, m: from_radians(_ieee(math.acos, v), m), "Inverse cosine"),
    "atan": FunctionDef("atan", lambda v, m: from_radians(math.atan(v), m), "Inverse tangent"),
    "log": FunctionDef("log", _log10, "Base-10 logarithm"),
    "ln": FunctionDef("ln", _ln, "Natural logarithm"),
    "sqrt": FunctionDef("sqrt", _sqrt, "Square root"),
    "abs": FunctionDef("abs", lambda v, m: abs(v), "Absolute value"),
    "exp": FunctionDef("exp", lambda v, m: _ieee(math.exp, v), "e raised to the argument"),
})

CONSTANTS: Mapping[str, float] = MappingProxyType({
    "pi": math.pi,
    "π": math.pi,
    "tau": math.tau,
    "τ": math.tau,
    "e": math.e,
})

GREEK_SYMBOLS = frozenset("πτ")
SQRT_GLYPH = "√"
