"""Tests for the static operator, function and constant tables."""

import pytest

from scicalc.tables import CONSTANTS, FUNCTIONS, OPERATORS


@pytest.mark.parametrize("table", [OPERATORS, FUNCTIONS, CONSTANTS])
def test_tables_are_read_only(table):
    key = next(iter(table))
    with pytest.raises(TypeError):
        table[key] = None
    with pytest.raises(TypeError):
        table["added"] = None
    assert "added" not in table


def test_every_function_takes_one_argument():
    assert all(fn.arity == 1 for fn in FUNCTIONS.values())


def test_negation_is_unary_and_right_associative():
    neg = OPERATORS["neg"]
    assert neg.arity == 1
    assert not neg.left_associative
    assert neg.precedence > OPERATORS["^"].precedence
