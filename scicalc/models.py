"""Data models for the scicalc expression engine.

AngleMode, TokenType, Token, ErrorKind, CalculatorError: the typed
structures that flow through tokenizer → postfix → evaluator → formatter.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class AngleMode(str, Enum):
    """How trigonometric arguments and results are interpreted."""

    DEG = "DEG"
    RAD = "RAD"

    @classmethod
    def parse(cls, value: Union[str, AngleMode, None]) -> AngleMode:
        """Resolve a user-supplied mode (case-insensitive); None means RAD."""
        if value is None:
            return DEFAULT_ANGLE_MODE
        if isinstance(value, AngleMode):
            return value
        return cls(value.strip().upper())


DEFAULT_ANGLE_MODE = AngleMode.RAD


class TokenType(str, Enum):
    """Token categories produced by the tokenizer."""

    NUMBER = "number"
    OPERATOR = "operator"
    FUNCTION = "function"
    PAREN = "paren"


@dataclass(frozen=True)
class Token:
    """A single lexical unit.

    `value` holds the float for NUMBER tokens, the operator key for OPERATOR
    tokens ("+", "-", "*", "/", "^" or "neg"), the function name for FUNCTION
    tokens and "(" / ")" for PAREN tokens.
    """

    type: TokenType
    value: Union[float, str]

    @classmethod
    def number(cls, value: float) -> Token:
        return cls(TokenType.NUMBER, float(value))

    @classmethod
    def operator(cls, symbol: str) -> Token:
        return cls(TokenType.OPERATOR, symbol)

    @classmethod
    def function(cls, name: str) -> Token:
        return cls(TokenType.FUNCTION, name)

    @classmethod
    def paren(cls, symbol: str) -> Token:
        return cls(TokenType.PAREN, symbol)

    @property
    def is_unary_negation(self) -> bool:
        return self.type is TokenType.OPERATOR and self.value == "neg"

    @property
    def is_open_paren(self) -> bool:
        return self.type is TokenType.PAREN and self.value == "("

    def __str__(self) -> str:
        if self.type is TokenType.NUMBER:
            return repr(self.value)
        return str(self.value)


class ErrorKind(str, Enum):
    """Failure classes surfaced by the engine."""

    EMPTY_INPUT = "empty-input"
    UNSUPPORTED_CHARACTER = "unsupported-character"
    INVALID_NUMBER = "invalid-number"
    UNKNOWN_IDENTIFIER = "unknown-identifier"
    MISMATCHED_PARENTHESES = "mismatched-parentheses"
    MALFORMED_EXPRESSION = "malformed-expression"
    DIVISION_BY_ZERO = "division-by-zero"
    DOMAIN_ERROR = "domain-error"


class CalculatorError(Exception):
    """Raised for any parse or evaluation failure.

    Carries a display message plus an ErrorKind so callers can branch on the
    failure class without matching message text.
    """

    def __init__(self, message: str, kind: ErrorKind, detail: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.detail = detail

    def __repr__(self) -> str:
        return f"CalculatorError({self.message!r}, kind={self.kind.value})"
