"""
exprcalc Intermediate Representation (IR) types.

Token types produced by the tokenizer and the expression AST produced by
the parser. All types are re-exported from this package.
"""

from .expressions import (
    BINARY_OPERATORS,
    OPERATOR_SYMBOLS,
    UNARY_OPERATORS,
    BinaryExpr,
    Expr,
    NumberLiteral,
    UnaryExpr,
)
from .tokens import Token, TokenKind

__all__ = [
    # Tokens
    "Token",
    "TokenKind",
    # Expressions
    "Expr",
    "NumberLiteral",
    "UnaryExpr",
    "BinaryExpr",
    "UNARY_OPERATORS",
    "BINARY_OPERATORS",
    "OPERATOR_SYMBOLS",
]
