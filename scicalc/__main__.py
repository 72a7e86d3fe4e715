"""CLI for the scicalc expression engine.

Usage:
    python -m scicalc eval "2 + 3 * 4"                   # 14
    python -m scicalc eval "sin(30) + cos(60)" -a DEG    # 1
    python -m scicalc eval -- "-2^2"                     # leading minus needs --
    python -m scicalc repl                               # Interactive session
    python -m scicalc functions                          # Operators, functions, constants
    python -m scicalc basic 1 divide 3                   # Four-function keypad math
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from scicalc.basic import Operator, apply_operation
from scicalc.config import MAX_PRECISION, Settings, load_settings
from scicalc.evaluator import evaluate
from scicalc.formatter import format_result
from scicalc.models import AngleMode, CalculatorError
from scicalc.session import Session
from scicalc.tables import CONSTANTS, FUNCTIONS, NEGATE, OPERATORS, SQRT_GLYPH

app = typer.Typer(
    name="scicalc",
    help="Scientific expression calculator",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console()

_REPL_HELP = ":deg / :rad switch angle mode, :ans shows Ans, :sq / :cube apply to Ans, :q quits"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _settings(ctx: typer.Context) -> Settings:
    """Settings loaded once by the app callback."""
    if not isinstance(ctx.obj, Settings):
        ctx.obj = load_settings()
    return ctx.obj


def _resolve_angle(angle: Optional[str], settings: Settings) -> AngleMode:
    if angle is None:
        return settings.angle_mode
    try:
        return AngleMode.parse(angle)
    except ValueError:
        console.print(f"[red]Invalid angle mode: {angle}[/red]. Choose: DEG, RAD")
        raise typer.Exit(1)


def _resolve_precision(precision: Optional[int], settings: Settings) -> int:
    return settings.precision if precision is None else precision


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log tokenizer and evaluator steps"),
) -> None:
    """Scientific expression calculator."""
    settings = load_settings()
    ctx.obj = settings
    _configure_logging("DEBUG" if verbose else settings.log_level)


@app.command("eval")
def cmd_eval(
    ctx: typer.Context,
    expression: str = typer.Argument(help="Expression, e.g. '2 + 3 * 4' or 'sqrt(2) * pi'"),
    angle: Optional[str] = typer.Option(None, "--angle", "-a", help="Angle mode: DEG or RAD"),
    precision: Optional[int] = typer.Option(
        None, "--precision", "-p", min=1, max=MAX_PRECISION, help="Significant digits to display",
    ),
    raw: bool = typer.Option(False, "--raw", help="Print the unrounded float"),
) -> None:
    """Evaluate a single expression."""
    settings = _settings(ctx)
    mode = _resolve_angle(angle, settings)
    try:
        value = evaluate(expression, mode)
    except CalculatorError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)

    text = repr(value) if raw else format_result(value, _resolve_precision(precision, settings))
    out.print(text, highlight=False)


@app.command("repl")
def cmd_repl(
    ctx: typer.Context,
    angle: Optional[str] = typer.Option(None, "--angle", "-a", help="Starting angle mode: DEG or RAD"),
    precision: Optional[int] = typer.Option(
        None, "--precision", "-p", min=1, max=MAX_PRECISION, help="Significant digits to display",
    ),
) -> None:
    """Interactive calculator session."""
    settings = _settings(ctx)
    session = Session(_resolve_angle(angle, settings), _resolve_precision(precision, settings))
    console.print(f"[dim]{_REPL_HELP}[/dim]")

    while True:
        try:
            line = console.input(f"[bold]{session.angle_mode.value}>[/bold] ").strip()
        except (EOFError, KeyboardInterrupt):
            break

        if line in (":q", ":quit"):
            break
        if line in (":deg", ":rad"):
            session.set_angle_mode(line[1:])
            console.print(f"[dim]Angle mode: {session.angle_mode.value}[/dim]")
            continue
        if line == ":ans":
            out.print(session.last_result, highlight=False)
            continue

        session.clear()
        try:
            if line == ":sq":
                session.square()
            elif line == ":cube":
                session.cube()
            elif line.startswith(":"):
                console.print(f"[yellow]Unknown command: {line}[/yellow]  {_REPL_HELP}")
                continue
            else:
                session.append(line)
                session.evaluate()
        except CalculatorError as e:
            console.print(f"[red]Error:[/red] {e.message}")
            continue
        out.print(session.last_result, highlight=False)


@app.command("functions")
def cmd_functions() -> None:
    """Show supported operators, functions and constants."""
    ops = Table(title="Operators", show_header=True, header_style="bold")
    ops.add_column("Symbol", style="green")
    ops.add_column("Precedence", justify="right")
    ops.add_column("Associativity")
    ops.add_column("Arity", justify="right")
    for key, op in OPERATORS.items():
        symbol = "- (unary)" if key == NEGATE else key
        ops.add_row(symbol, str(op.precedence), op.associativity.value, str(op.arity))

    fns = Table(title="Functions", show_header=True, header_style="bold")
    fns.add_column("Name", style="green")
    fns.add_column("Description")
    for name, fn in FUNCTIONS.items():
        label = f"{name} / {SQRT_GLYPH}" if name == "sqrt" else name
        fns.add_row(label, fn.description)

    consts = Table(title="Constants", show_header=True, header_style="bold")
    consts.add_column("Name", style="green")
    consts.add_column("Value", justify="right")
    for name, value in CONSTANTS.items():
        consts.add_row(name, repr(value))

    for table in (ops, fns, consts):
        out.print()
        out.print(table)
    out.print()


@app.command("basic")
def cmd_basic(
    previous: str = typer.Argument(help="Left operand"),
    operator: str = typer.Argument(help="Operator: add, subtract, multiply, divide"),
    current: str = typer.Argument(help="Right operand"),
) -> None:
    """Four-function keypad arithmetic on display strings."""
    try:
        op = Operator(operator.lower())
    except ValueError:
        console.print(f"[red]Invalid operator: {operator}[/red]. Choose: add, subtract, multiply, divide")
        raise typer.Exit(1)
    out.print(apply_operation(previous, current, op), highlight=False)


if __name__ == "__main__":
    app()
