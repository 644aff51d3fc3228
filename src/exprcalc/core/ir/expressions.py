"""
Expression AST for exprcalc.

A closed union of three node shapes:
- Number literals: 2, 3.5, .5
- Unary minus: -x
- Binary arithmetic: +, -, *, /

Nodes are frozen; each parse builds a fresh tree bottom-up and every child
is owned by exactly one parent.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from exprcalc.core.ir.tokens import TokenKind

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------

UNARY_OPERATORS = frozenset({TokenKind.MINUS})
BINARY_OPERATORS = frozenset({TokenKind.PLUS, TokenKind.MINUS, TokenKind.STAR, TokenKind.SLASH})

OPERATOR_SYMBOLS: dict[TokenKind, str] = {
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.STAR: "*",
    TokenKind.SLASH: "/",
}


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class NumberLiteral(BaseModel):
    """A numeric literal."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return repr(self.value)


class UnaryExpr(BaseModel):
    """Unary operation: op operand. The operator is always MINUS."""

    op: TokenKind
    operand: Expr

    model_config = ConfigDict(frozen=True)

    @field_validator("op")
    @classmethod
    def _check_op(cls, v: TokenKind) -> TokenKind:
        if v not in UNARY_OPERATORS:
            raise ValueError(f"Not a unary operator: {v}")
        return v

    def __str__(self) -> str:
        return f"-({self.operand})"


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    left: Expr
    op: TokenKind
    right: Expr

    model_config = ConfigDict(frozen=True)

    @field_validator("op")
    @classmethod
    def _check_op(cls, v: TokenKind) -> TokenKind:
        if v not in BINARY_OPERATORS:
            raise ValueError(f"Not a binary operator: {v}")
        return v

    def __str__(self) -> str:
        return f"({self.left} {OPERATOR_SYMBOLS[self.op]} {self.right})"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = NumberLiteral | UnaryExpr | BinaryExpr

# Rebuild models for recursive forward references
UnaryExpr.model_rebuild()
BinaryExpr.model_rebuild()
