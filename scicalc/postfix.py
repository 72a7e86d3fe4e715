"""Shunting-yard conversion from infix tokens to postfix (RPN) order."""

from __future__ import annotations

import logging

from scicalc.models import CalculatorError, ErrorKind, Token, TokenType
from scicalc.tables import OPERATORS

logger = logging.getLogger(__name__)


def _mismatched() -> CalculatorError:
    return CalculatorError("Mismatched parentheses", ErrorKind.MISMATCHED_PARENTHESES)


def _should_pop(top: Token, incoming: Token) -> bool:
    """Decide whether the stack top goes to output before `incoming` is pushed.

    Functions always pop. Operators pop when strictly tighter, or equal and
    the incoming operator is left-associative. A pending prefix operator is
    left in place for an incoming right-associative binary operator, so
    -2^2 evaluates as -(2^2).
    """
    if top.type is TokenType.FUNCTION:
        return True
    if top.type is not TokenType.OPERATOR:
        return False

    current = OPERATORS[incoming.value]
    pending = OPERATORS[top.value]
    if pending.arity == 1 and current.arity == 2 and not current.left_associative:
        return False
    if pending.precedence > current.precedence:
        return True
    return pending.precedence == current.precedence and current.left_associative


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Reorder infix tokens into postfix.

    Raises:
        CalculatorError: when parentheses are unbalanced.
    """
    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        if token.type is TokenType.NUMBER:
            output.append(token)
        elif token.type is TokenType.FUNCTION:
            stack.append(token)
        elif token.type is TokenType.OPERATOR:
            while stack and _should_pop(stack[-1], token):
                output.append(stack.pop())
            stack.append(token)
        elif token.is_open_paren:
            stack.append(token)
        else:
            while stack and stack[-1].type is not TokenType.PAREN:
                output.append(stack.pop())
            if not stack:
                raise _mismatched()
            stack.pop()
            # Bind a function to its completed argument list
            if stack and stack[-1].type is TokenType.FUNCTION:
                output.append(stack.pop())

    while stack:
        token = stack.pop()
        if token.type is TokenType.PAREN:
            raise _mismatched()
        output.append(token)

    logger.debug("postfix: %s", " ".join(str(t) for t in output))
    return output
