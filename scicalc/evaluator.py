"""RPN evaluator and the top-level evaluate() entry point.

Data flow per call:
1. Reject empty / whitespace-only input
2. tokenize() the trimmed expression
3. to_postfix() the token list
4. Run the postfix list against a value stack
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from scicalc.models import DEFAULT_ANGLE_MODE, AngleMode, CalculatorError, ErrorKind, Token, TokenType
from scicalc.postfix import to_postfix
from scicalc.tables import FUNCTIONS, OPERATORS
from scicalc.tokenizer import tokenize

logger = logging.getLogger(__name__)


def _malformed() -> CalculatorError:
    return CalculatorError("Malformed expression", ErrorKind.MALFORMED_EXPRESSION)


def _pop_operands(stack: list[float], count: int) -> list[float]:
    """Remove the top `count` values, returned in the order they were pushed."""
    if len(stack) < count:
        raise _malformed()
    values = stack[-count:]
    del stack[-count:]
    return values


def evaluate_postfix(postfix: list[Token], angle_mode: AngleMode = DEFAULT_ANGLE_MODE) -> float:
    """Execute a postfix token list.

    Raises:
        CalculatorError: on an operand-count mismatch, division by zero or a
            sqrt/log domain violation.
    """
    stack: list[float] = []

    for token in postfix:
        if token.type is TokenType.NUMBER:
            stack.append(token.value)
        elif token.type is TokenType.OPERATOR:
            op = OPERATORS.get(token.value)
            if op is None:
                raise CalculatorError(f'Unsupported operator "{token.value}"', ErrorKind.MALFORMED_EXPRESSION)
            stack.append(op.apply(*_pop_operands(stack, op.arity)))
        elif token.type is TokenType.FUNCTION:
            fn = FUNCTIONS.get(token.value)
            if fn is None:
                raise CalculatorError(f'Unsupported function "{token.value}"', ErrorKind.MALFORMED_EXPRESSION)
            (arg,) = _pop_operands(stack, fn.arity)
            stack.append(fn.apply(arg, angle_mode))
        else:
            # Parentheses never survive to_postfix
            raise _malformed()

    if len(stack) != 1:
        raise _malformed()
    return stack[0]


def evaluate(expression: str, angle_mode: Union[AngleMode, str, None] = None) -> float:
    """Evaluate an infix expression string.

    Args:
        expression: e.g. "2 + 3 * 4", "sin(30) + cos(60)", "√2 * π".
        angle_mode: "DEG" or "RAD" (or an AngleMode). Defaults to RAD and
            only affects the trigonometric functions.

    Returns:
        The numeric result, which may be inf or nan.

    Raises:
        CalculatorError: for any parse or evaluation failure, including an
            empty expression ("Enter an expression").
    """
    trimmed = expression.strip()
    if not trimmed:
        raise CalculatorError("Enter an expression", ErrorKind.EMPTY_INPUT)

    mode = AngleMode.parse(angle_mode)
    tokens = tokenize(trimmed)
    result = evaluate_postfix(to_postfix(tokens), mode)
    logger.debug("evaluate(%r, %s) = %r", trimmed, mode.value, result)
    return result
