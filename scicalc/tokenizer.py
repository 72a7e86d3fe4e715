"""Tokenizer: turns a raw expression string into a list of Tokens.

Handles numbers, operators, parentheses, named functions, constants (with
their Greek aliases) and the square-root glyph. The only context-sensitive
decision is whether "-" is unary negation or binary subtraction, which looks
back at the previously emitted token.
"""

from __future__ import annotations

import logging
import string
from typing import Optional

from scicalc.models import CalculatorError, ErrorKind, Token, TokenType
from scicalc.tables import CONSTANTS, FUNCTIONS, GREEK_SYMBOLS, NEGATE, SQRT_GLYPH

logger = logging.getLogger(__name__)

_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)
_SINGLE_CHAR_OPERATORS = frozenset("+*/^")


def _is_digit(ch: Optional[str]) -> bool:
    return ch is not None and ch in _DIGITS


def _is_identifier_start(ch: str) -> bool:
    return ch in _LETTERS or ch in GREEK_SYMBOLS


def _is_identifier_char(ch: str) -> bool:
    return ch in _LETTERS or ch in _DIGITS or ch in GREEK_SYMBOLS


def _exponent_end(expression: str, start: int) -> int:
    """Index past an "e"/"E" exponent suffix at `start`, or `start` if none.

    Matches the "1e+21" / "1.5e-7" form that format_result prints.
    """
    if start >= len(expression) or expression[start] not in "eE":
        return start
    end = start + 1
    if end < len(expression) and expression[end] in "+-":
        end += 1
    if end >= len(expression) or expression[end] not in _DIGITS:
        return start
    while end < len(expression) and expression[end] in _DIGITS:
        end += 1
    return end


def _read_number(expression: str, start: int) -> tuple[Token, int]:
    """Read a digit run with at most one decimal point and an optional exponent.

    Returns (token, next_index).
    """
    end = start
    seen_point = False
    while end < len(expression):
        ch = expression[end]
        if ch == ".":
            if seen_point:
                raise CalculatorError("Invalid number", ErrorKind.INVALID_NUMBER,
                                      detail=expression[start:end + 1])
            seen_point = True
        elif ch not in _DIGITS:
            break
        end += 1

    end = _exponent_end(expression, end)
    return Token.number(float(expression[start:end])), end


def _read_identifier(expression: str, start: int) -> tuple[str, int]:
    """Read letters, digits and Greek symbols greedily."""
    end = start
    while end < len(expression) and _is_identifier_char(expression[end]):
        end += 1
    return expression[start:end], end


def _resolve_identifier(name: str) -> Token:
    """Constants win over functions; lookups are case-insensitive."""
    normalized = name.lower()
    if normalized in CONSTANTS:
        return Token.number(CONSTANTS[normalized])
    if normalized in FUNCTIONS:
        return Token.function(normalized)
    raise CalculatorError(f'Unknown identifier "{name}"', ErrorKind.UNKNOWN_IDENTIFIER, detail=name)


def _minus_is_unary(previous: Optional[Token]) -> bool:
    """A "-" is negation at the start, after an operator or after "("."""
    if previous is None:
        return True
    return previous.type is TokenType.OPERATOR or previous.is_open_paren


def tokenize(expression: str) -> list[Token]:
    """Split an infix expression into tokens.

    Raises:
        CalculatorError: on an unsupported character, a malformed number
            literal or an unknown identifier.
    """
    tokens: list[Token] = []
    previous: Optional[Token] = None
    index = 0

    while index < len(expression):
        ch = expression[index]

        if ch.isspace():
            index += 1
            continue

        nxt = expression[index + 1] if index + 1 < len(expression) else None
        if _is_digit(ch) or (ch == "." and _is_digit(nxt)):
            token, index = _read_number(expression, index)
        elif ch in "()":
            token = Token.paren(ch)
            index += 1
        elif ch in _SINGLE_CHAR_OPERATORS:
            token = Token.operator(ch)
            index += 1
        elif ch == "-":
            token = Token.operator(NEGATE if _minus_is_unary(previous) else "-")
            index += 1
        elif ch == SQRT_GLYPH:
            token = Token.function("sqrt")
            index += 1
        elif _is_identifier_start(ch):
            name, index = _read_identifier(expression, index)
            token = _resolve_identifier(name)
        else:
            raise CalculatorError(f'Unsupported character "{ch}"', ErrorKind.UNSUPPORTED_CHARACTER, detail=ch)

        tokens.append(token)
        previous = token

    logger.debug("tokenized %r into %d tokens", expression, len(tokens))
    return tokens
