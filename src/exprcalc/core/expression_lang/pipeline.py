"""
End-to-end pipeline: text → tokens → AST → number → display string.
"""

from __future__ import annotations

import logging
import math

from exprcalc.core.expression_lang.evaluator import evaluate
from exprcalc.core.expression_lang.parser import parse
from exprcalc.core.expression_lang.tokenizer import tokenize
from exprcalc.core.result import Failure, Result

logger = logging.getLogger(__name__)

# Whole numbers at or above this magnitude keep float formatting
INTEGER_DISPLAY_LIMIT = 1e15


def calculate(source: str | None) -> Result[float]:
    """Tokenize, parse and evaluate ``source``, stopping at the first failure."""
    result = tokenize(source).bind(parse).bind(evaluate)
    if isinstance(result, Failure):
        logger.debug("Expression %r failed: %s", source, result.message)
    return result


def format_number(value: float) -> str:
    """Render a result the way the REPL prints it.

    Finite whole numbers below 1e15 in magnitude print as integers
    (``14``, ``-6``); everything else uses Python's float repr
    (``0.5``, ``inf``, ``1e+15``).
    """
    if math.isfinite(value) and value == math.floor(value) and abs(value) < INTEGER_DISPLAY_LIMIT:
        return str(int(value))
    return repr(value)


def format_result(result: Result[float]) -> str:
    return result.match(format_number, lambda message: f"Error: {message}")


def evaluate_text(source: str | None) -> str:
    """Evaluate ``source`` and return the line a REPL would print."""
    return format_result(calculate(source))
