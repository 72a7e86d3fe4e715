"""Headless scientific calculator session.

Tracks the expression being typed, the last formatted result ("Ans"), the
angle mode and the last error, the way a keypad front end would. Evaluation
is delegated to scicalc.evaluator; this module only manages state.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Union

from scicalc.evaluator import evaluate
from scicalc.formatter import DEFAULT_PRECISION, format_result
from scicalc.models import DEFAULT_ANGLE_MODE, AngleMode, CalculatorError
from scicalc.tables import power

logger = logging.getLogger(__name__)


class Session:
    """Mutable calculator state for one user."""

    def __init__(
        self,
        angle_mode: Union[AngleMode, str] = DEFAULT_ANGLE_MODE,
        precision: int = DEFAULT_PRECISION,
    ) -> None:
        self.angle_mode = AngleMode.parse(angle_mode)
        self.precision = precision
        self.expression = ""
        self.last_result = "0"
        self.error: Optional[str] = None
        # Set after a result is shown; the next keystroke starts a new expression
        self._overwrite = False

    # --- Editing ---

    def append(self, text: str) -> None:
        base = "" if self._overwrite else self.expression
        self.expression = base + text
        self._overwrite = False
        self.error = None

    def insert_ans(self) -> None:
        self.append(self.last_result)

    def clear(self) -> None:
        self.expression = ""
        self.error = None
        self._overwrite = False

    def delete(self) -> None:
        """Backspace. Right after a result this clears the whole line."""
        if self._overwrite:
            self.expression = ""
            self._overwrite = False
            return
        self.expression = self.expression[:-1]

    def set_angle_mode(self, mode: Union[AngleMode, str]) -> None:
        self.angle_mode = AngleMode.parse(mode)

    # --- Evaluation ---

    def preview(self) -> str:
        """Live value of the current expression, "" if it does not evaluate yet."""
        if not self.expression.strip():
            return self.last_result
        try:
            return format_result(evaluate(self.expression, self.angle_mode), self.precision)
        except CalculatorError:
            return ""

    def _store(self, value: float) -> None:
        formatted = format_result(value, self.precision)
        self.last_result = formatted
        self.expression = formatted
        self._overwrite = True
        self.error = None

    def evaluate(self) -> float:
        """Evaluate the expression (or Ans when empty) and show the result.

        Raises:
            CalculatorError: after recording its message in `error`.
        """
        candidate = self.expression.strip() or self.last_result
        try:
            value = evaluate(candidate, self.angle_mode)
        except CalculatorError as e:
            self.error = e.message
            logger.debug("session evaluation failed: %r", e)
            raise
        self._store(value)
        return value

    def _apply_instant(self, operation: Callable[[float], float]) -> float:
        updated = operation(self.evaluate())
        self._store(updated)
        return updated

    def square(self) -> float:
        return self._apply_instant(lambda v: power(v, 2.0))

    def cube(self) -> float:
        return self._apply_instant(lambda v: power(v, 3.0))
