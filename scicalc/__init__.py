"""scicalc — Scientific expression calculator engine.

Parses free-form arithmetic and scientific-function strings (trigonometry,
logarithms, powers, constants, parentheses, unary minus), converts them to
postfix with a shunting-yard pass and evaluates them with angle-mode-aware
trigonometry.

Usage:
    from scicalc import evaluate, format_result
    format_result(evaluate("sin(30) + cos(60)", "DEG"))  # '1'

    python -m scicalc eval "2 + 3 * 4"   # CLI
"""

from scicalc.evaluator import evaluate
from scicalc.formatter import format_result
from scicalc.models import AngleMode, CalculatorError, ErrorKind

__all__ = ["AngleMode", "CalculatorError", "ErrorKind", "evaluate", "format_result"]
