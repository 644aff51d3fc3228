"""Shared pytest fixtures for exprcalc tests."""

import pytest

from exprcalc.core.calculator import Calculator
from exprcalc.core.ir import BinaryExpr, NumberLiteral, TokenKind


@pytest.fixture
def calculator() -> Calculator:
    """Return a fresh four-function calculator."""
    return Calculator()


@pytest.fixture
def division_by_zero_tree() -> BinaryExpr:
    """Return the AST for ``1 / 0``."""
    return BinaryExpr(left=NumberLiteral(value=1), op=TokenKind.SLASH, right=NumberLiteral(value=0))
