"""
exprcalc - arithmetic expression calculator.

A lexer → parser → evaluator pipeline for +, -, *, / with parentheses and
unary minus, reporting malformed input as Result failures rather than
exceptions.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

from .core.calculator import Calculator
from .core.errors import ConfigError, ExpressionInvariantError, ExprCalcError, ResultUnwrapError
from .core.expression_lang import calculate, evaluate, evaluate_text, parse, tokenize
from .core.result import Failure, Result, Success

try:
    __version__ = _metadata_version("exprcalc")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "Calculator",
    "Result",
    "Success",
    "Failure",
    "tokenize",
    "parse",
    "evaluate",
    "calculate",
    "evaluate_text",
    "ExprCalcError",
    "ExpressionInvariantError",
    "ResultUnwrapError",
    "ConfigError",
]
