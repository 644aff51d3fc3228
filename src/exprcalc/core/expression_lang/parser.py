"""
Recursive descent parser for the exprcalc expression language.

Grammar (precedence low to high):
    expression  → term (("+" | "-") term)*
    term        → unary (("*" | "/") unary)*
    unary       → "-" unary | primary
    primary     → NUMBER | "(" expression ")"

Binary operators are left-associative: each loop iteration folds the tree
built so far into the left side of a new node. Unary minus recurses into
itself, so it is right-associative and binds tighter than any binary op.

Every rule returns a Result; the first Failure is handed straight back up
without building a partial tree.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from exprcalc.core.ir.expressions import BinaryExpr, Expr, NumberLiteral, UnaryExpr
from exprcalc.core.ir.tokens import Token, TokenKind
from exprcalc.core.result import Failure, Result, Success

logger = logging.getLogger(__name__)

_ADDITIVE = (TokenKind.PLUS, TokenKind.MINUS)
_MULTIPLICATIVE = (TokenKind.STAR, TokenKind.SLASH)


class Parser:
    """Parses one token sequence into one expression tree."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        if tokens is None:
            raise TypeError("tokens must be a sequence of Token, not None")
        self.tokens = list(tokens)
        self.pos = 0

    # -- Cursor helpers --

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def previous(self) -> Token:
        return self.tokens[self.pos - 1]

    def at_end(self) -> bool:
        return self.current.kind == TokenKind.EOF

    def check(self, kind: TokenKind) -> bool:
        if self.at_end():
            return False
        return self.current.kind == kind

    def advance(self) -> Token:
        if not self.at_end():
            self.pos += 1
        return self.previous()

    def match(self, *kinds: TokenKind) -> Token | None:
        for kind in kinds:
            if self.check(kind):
                return self.advance()
        return None

    # -- Entry point --

    def parse(self) -> Result[Expr]:
        """Parse the whole token sequence; trailing tokens are an error."""
        if not self.tokens:
            return Failure("Empty expression: no tokens to parse")
        if self.tokens[-1].kind != TokenKind.EOF:
            # Caller-built sequences without the terminator still parse.
            self.tokens.append(Token(TokenKind.EOF, "", _end_position(self.tokens)))
        if len(self.tokens) == 1:
            return Failure("Empty expression: expected a number or '('")

        result = self.parse_expression()
        if isinstance(result, Failure):
            logger.debug("Parse failed: %s", result.message)
            return result

        if not self.at_end():
            tok = self.current
            return Failure(f"Unexpected token '{tok.lexeme}' at position {tok.pos}")

        return result

    # -- Grammar rules --

    def parse_expression(self) -> Result[Expr]:
        """term (('+' | '-') term)*"""
        left = self.parse_term()
        if isinstance(left, Failure):
            return left
        tree = left.value

        while op := self.match(*_ADDITIVE):
            right = self.parse_term()
            if isinstance(right, Failure):
                return right
            tree = BinaryExpr(left=tree, op=op.kind, right=right.value)

        return Success(tree)

    def parse_term(self) -> Result[Expr]:
        """unary (('*' | '/') unary)*"""
        left = self.parse_unary()
        if isinstance(left, Failure):
            return left
        tree = left.value

        while op := self.match(*_MULTIPLICATIVE):
            right = self.parse_unary()
            if isinstance(right, Failure):
                return right
            tree = BinaryExpr(left=tree, op=op.kind, right=right.value)

        return Success(tree)

    def parse_unary(self) -> Result[Expr]:
        """'-' unary | primary"""
        if op := self.match(TokenKind.MINUS):
            return self.parse_unary().map(lambda operand: UnaryExpr(op=op.kind, operand=operand))
        return self.parse_primary()

    def parse_primary(self) -> Result[Expr]:
        """NUMBER | '(' expression ')'"""
        if tok := self.match(TokenKind.NUMBER):
            return Success(NumberLiteral(value=tok.numeric_value))

        if open_paren := self.match(TokenKind.LPAREN):
            if self.check(TokenKind.RPAREN):
                return Failure(f"Empty parentheses at position {open_paren.pos}")

            inner = self.parse_expression()
            if isinstance(inner, Failure):
                return inner

            if not self.match(TokenKind.RPAREN):
                return Failure(
                    f"Mismatched parentheses: missing ')' for '(' at position {open_paren.pos}"
                )
            return inner

        if self.check(TokenKind.RPAREN):
            return Failure(
                f"Mismatched parentheses: unexpected ')' at position {self.current.pos}"
            )

        if self.at_end():
            return Failure("Unexpected end of input: expected a number or '('")

        tok = self.current
        return Failure(f"Unexpected token '{tok.lexeme}' at position {tok.pos}")


def _end_position(tokens: list[Token]) -> int:
    last = tokens[-1]
    return last.pos + len(last.lexeme)


def parse(tokens: Sequence[Token]) -> Result[Expr]:
    """Parse a token sequence into an expression AST.

    Args:
        tokens: Output of ``tokenize``, normally ending in an EOF token.

    Returns:
        Success with the expression tree, or Failure describing the first
        syntax error.
    """
    return Parser(tokens).parse()
