"""Tests for the headless calculator session."""

import pytest

from scicalc.models import AngleMode, CalculatorError


# --- Evaluation ---

def test_evaluate_stores_formatted_result(session):
    session.append("2+3")
    assert session.evaluate() == 5
    assert session.last_result == "5"
    assert session.expression == "5"


def test_empty_expression_reuses_last_result(session):
    assert session.evaluate() == 0
    session.append("4*2")
    session.evaluate()
    session.clear()
    assert session.evaluate() == 8


def test_error_is_recorded_and_reraised(session):
    session.append("1/0")
    with pytest.raises(CalculatorError):
        session.evaluate()
    assert session.error == "Division by zero"
    assert session.expression == "1/0"
    session.append("")
    assert session.error is None


def test_angle_mode(deg_session):
    deg_session.append("sin(90)")
    assert deg_session.evaluate() == pytest.approx(1)
    deg_session.set_angle_mode("rad")
    assert deg_session.angle_mode is AngleMode.RAD


# --- Editing ---

def test_typing_after_result_starts_fresh(session):
    session.append("1+1")
    session.evaluate()
    session.append("7")
    assert session.expression == "7"


def test_insert_ans(session):
    session.append("2+3")
    session.evaluate()
    session.insert_ans()
    session.append("*2")
    assert session.expression == "5*2"
    assert session.evaluate() == 10


def test_delete(session):
    session.append("123")
    session.delete()
    assert session.expression == "12"
    session.evaluate()
    session.delete()
    assert session.expression == ""


# --- Preview ---

def test_preview(session):
    assert session.preview() == "0"
    session.append("2*")
    assert session.preview() == ""
    session.append("3")
    assert session.preview() == "6"


def test_preview_uses_precision():
    from scicalc.session import Session

    s = Session(precision=4)
    s.append("1/3")
    assert s.preview() == "0.3333"


# --- Instant operations ---

def test_square(session):
    session.append("3")
    assert session.square() == 9
    assert session.last_result == "9"
    assert session.expression == "9"


def test_cube(session):
    session.append("-2")
    assert session.cube() == -8
    assert session.last_result == "-8"


def test_square_overflow_is_infinity(session):
    session.append("10^200")
    session.square()
    assert session.last_result == "Infinity"


def test_square_after_exponent_result(session):
    session.append("10^21")
    session.evaluate()
    assert session.expression == "1e+21"
    assert session.square() == pytest.approx(1e42)
    assert session.last_result == "1e+42"
