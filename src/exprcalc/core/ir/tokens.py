"""
Lexical types shared by the tokenizer, the parser and the AST.
"""

from __future__ import annotations

from enum import StrEnum, auto


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Literals
    NUMBER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()

    # End of input
    EOF = auto()


class Token:
    """A single token from the expression tokenizer."""

    __slots__ = ("kind", "lexeme", "pos")

    kind: TokenKind
    lexeme: str
    pos: int

    def __init__(self, kind: TokenKind, lexeme: str, pos: int) -> None:
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "lexeme", lexeme)
        object.__setattr__(self, "pos", pos)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Token is immutable; cannot set {name!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (self.kind, self.lexeme, self.pos) == (other.kind, other.lexeme, other.pos)

    def __hash__(self) -> int:
        return hash((self.kind, self.lexeme, self.pos))

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.lexeme!r}, pos={self.pos})"

    @property
    def numeric_value(self) -> float | None:
        """Parsed value of a NUMBER token, None for every other kind."""
        if self.kind != TokenKind.NUMBER:
            return None
        return float(self.lexeme)
