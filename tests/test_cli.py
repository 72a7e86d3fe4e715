"""Tests for the typer CLI."""

import pytest
from typer.testing import CliRunner

from scicalc.__main__ import app


@pytest.fixture
def cli_runner(monkeypatch):
    """Return a CLI test runner with no SCICALC_* overrides."""
    for key in ("SCICALC_ANGLE_MODE", "SCICALC_PRECISION", "SCICALC_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    return CliRunner()


# --- eval ---

def test_eval(cli_runner):
    result = cli_runner.invoke(app, ["eval", "2 + 3 * 4"])
    assert result.exit_code == 0
    assert result.output.strip() == "14"


def test_eval_degrees(cli_runner):
    result = cli_runner.invoke(app, ["eval", "sin(30) + cos(60)", "--angle", "DEG"])
    assert result.exit_code == 0
    assert result.output.strip() == "1"


def test_eval_angle_from_environment(cli_runner, monkeypatch):
    monkeypatch.setenv("SCICALC_ANGLE_MODE", "DEG")
    result = cli_runner.invoke(app, ["eval", "asin(1)"])
    assert result.exit_code == 0
    assert result.output.strip() == "90"


def test_eval_leading_minus(cli_runner):
    result = cli_runner.invoke(app, ["eval", "--", "-2^2"])
    assert result.exit_code == 0
    assert result.output.strip() == "-4"


def test_eval_precision(cli_runner):
    result = cli_runner.invoke(app, ["eval", "1/3", "-p", "4"])
    assert result.output.strip() == "0.3333"


def test_eval_raw(cli_runner):
    result = cli_runner.invoke(app, ["eval", "2", "--raw"])
    assert result.output.strip() == "2.0"


def test_eval_error(cli_runner):
    result = cli_runner.invoke(app, ["eval", "1/0"])
    assert result.exit_code == 1
    assert "Division by zero" in result.output


def test_eval_invalid_angle(cli_runner):
    result = cli_runner.invoke(app, ["eval", "1", "--angle", "GRAD"])
    assert result.exit_code == 1
    assert "Invalid angle mode" in result.output


# --- repl ---

def test_repl_session(cli_runner):
    script = "2+3\n:sq\n:ans\n:deg\nsin(90)\n1/0\n:bogus\n:q\n"
    result = cli_runner.invoke(app, ["repl"], input=script)
    assert result.exit_code == 0
    assert "5" in result.output
    assert "25" in result.output
    assert "Angle mode: DEG" in result.output
    assert "Division by zero" in result.output
    assert "Unknown command: :bogus" in result.output


def test_repl_stops_at_end_of_input(cli_runner):
    result = cli_runner.invoke(app, ["repl"], input="7*6\n")
    assert result.exit_code == 0
    assert "42" in result.output


# --- functions / basic ---

def test_functions_lists_tables(cli_runner):
    result = cli_runner.invoke(app, ["functions"])
    assert result.exit_code == 0
    for text in ("Operators", "Functions", "Constants", "sqrt", "atan", "tau"):
        assert text in result.output


def test_basic(cli_runner):
    result = cli_runner.invoke(app, ["basic", "1", "divide", "3"])
    assert result.exit_code == 0
    assert result.output.strip() == "0.33333333"


def test_basic_invalid_operator(cli_runner):
    result = cli_runner.invoke(app, ["basic", "1", "modulo", "2"])
    assert result.exit_code == 1
    assert "Invalid operator" in result.output


def test_verbose_flag(cli_runner):
    result = cli_runner.invoke(app, ["--verbose", "eval", "1+1"])
    assert result.exit_code == 0
    assert "2" in result.output


def test_settings_load_once_per_invocation(cli_runner, monkeypatch):
    import scicalc.__main__ as cli

    real_load = cli.load_settings
    calls = []

    def counting_load(*args, **kwargs):
        calls.append(1)
        return real_load(*args, **kwargs)

    monkeypatch.setattr(cli, "load_settings", counting_load)
    monkeypatch.setenv("SCICALC_PRECISION", "99")
    result = cli_runner.invoke(app, ["eval", "1/3"])
    assert result.exit_code == 0
    assert "0.333333333333" in result.output
    assert len(calls) == 1
