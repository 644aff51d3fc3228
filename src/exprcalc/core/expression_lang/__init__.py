"""
exprcalc arithmetic expression language.

Tokenizer, parser and evaluator for +, -, *, / with parentheses and unary
minus. Each stage returns a Result instead of raising on bad input.

Usage:
    from exprcalc.core.expression_lang import calculate, format_result

    result = calculate("2 + 3 * 4")
    # result == Success(14.0)
    format_result(result)
    # "14"
"""

from exprcalc.core.expression_lang.evaluator import evaluate
from exprcalc.core.expression_lang.parser import Parser, parse
from exprcalc.core.expression_lang.pipeline import (
    calculate,
    evaluate_text,
    format_number,
    format_result,
)
from exprcalc.core.expression_lang.tokenizer import Lexer, tokenize

__all__ = [
    "Lexer",
    "Parser",
    "calculate",
    "evaluate",
    "evaluate_text",
    "format_number",
    "format_result",
    "parse",
    "tokenize",
]
