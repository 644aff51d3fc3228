"""
Expression evaluator for the exprcalc expression language.

Pure tree walk over the AST: no I/O, no shared state, no use of Python's
eval(). Arithmetic follows IEEE-754 doubles, so overflow yields infinity
rather than an error. The only runtime check is division by zero.
"""

from __future__ import annotations

import logging

from exprcalc.core.errors import ExpressionInvariantError
from exprcalc.core.ir.expressions import BinaryExpr, Expr, NumberLiteral, UnaryExpr
from exprcalc.core.ir.tokens import TokenKind
from exprcalc.core.result import Failure, Result, Success

logger = logging.getLogger(__name__)


def evaluate(expr: Expr) -> Result[float]:
    """Evaluate an expression tree to a number.

    Binary nodes evaluate left before right; when both sides fail, the
    left failure is the one reported.

    Args:
        expr: Parsed expression AST.

    Returns:
        Success with the value, or Failure("Division by zero").

    Raises:
        ExpressionInvariantError: If the tree contains a node or operator the
            parser never produces.
    """
    if isinstance(expr, NumberLiteral):
        return Success(expr.value)

    if isinstance(expr, UnaryExpr):
        return _evaluate_unary(expr)

    if isinstance(expr, BinaryExpr):
        return _evaluate_binary(expr)

    raise ExpressionInvariantError(f"Unknown expression type: {type(expr).__name__}")


def _evaluate_unary(expr: UnaryExpr) -> Result[float]:
    if expr.op != TokenKind.MINUS:
        raise ExpressionInvariantError(f"Unknown unary op: {expr.op}")
    return evaluate(expr.operand).map(lambda v: -v)


def _evaluate_binary(expr: BinaryExpr) -> Result[float]:
    left = evaluate(expr.left)
    if isinstance(left, Failure):
        return left
    right = evaluate(expr.right)
    if isinstance(right, Failure):
        return right

    a, b = left.value, right.value

    if expr.op == TokenKind.PLUS:
        return Success(a + b)
    if expr.op == TokenKind.MINUS:
        return Success(a - b)
    if expr.op == TokenKind.STAR:
        return Success(a * b)
    if expr.op == TokenKind.SLASH:
        # -0.0 == 0 as well
        if b == 0:
            logger.debug("Rejected division of %r by zero", a)
            return Failure("Division by zero")
        return Success(a / b)

    raise ExpressionInvariantError(f"Unknown binary op: {expr.op}")
