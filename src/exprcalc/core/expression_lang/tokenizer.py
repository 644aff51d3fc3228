"""
Tokenizer for the exprcalc expression language.

Converts an expression string into a sequence of typed tokens, terminated
by an EOF token.
"""

from __future__ import annotations

import logging
import re

from exprcalc.core.errors import ExpressionInvariantError
from exprcalc.core.ir.tokens import Token, TokenKind
from exprcalc.core.result import Failure, Result, Success

logger = logging.getLogger(__name__)


_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

_WHITESPACE = " \t\n\r"

# Optional integer part, then an optional fraction that needs at least one digit
_NUMBER_RE = re.compile(r"[0-9]*(?:\.[0-9]+)?")


class Lexer:
    """Scans a source string into tokens."""

    def __init__(self, source: str | None) -> None:
        self.source = source or ""
        self.pos = 0

    def scan_tokens(self) -> Result[list[Token]]:
        tokens: list[Token] = []
        source = self.source
        n = len(source)

        while self.pos < n:
            c = source[self.pos]

            if c in _WHITESPACE:
                self.pos += 1
                continue

            if c in _SINGLE_CHAR:
                tokens.append(Token(_SINGLE_CHAR[c], c, self.pos))
                self.pos += 1
                continue

            if self._digit_at(self.pos) or (c == "." and self._digit_at(self.pos + 1)):
                result = self._scan_number()
                if isinstance(result, Failure):
                    return result
                tokens.append(result.value)
                continue

            logger.debug("Lexing stopped at %r (position %d)", c, self.pos)
            return Failure(f"Unexpected character '{c}' at position {self.pos}")

        tokens.append(Token(TokenKind.EOF, "", self.pos))
        return Success(tokens)

    def _digit_at(self, index: int) -> bool:
        return index < len(self.source) and self.source[index] in "0123456789"

    def _scan_number(self) -> Result[Token]:
        start = self.pos
        m = _NUMBER_RE.match(self.source, start)
        if m.end() == start:
            raise ExpressionInvariantError(f"Number scan made no progress at position {start}")
        lexeme = m.group(0)
        self.pos = m.end()

        try:
            float(lexeme)
        except ValueError:
            return Failure(f"Invalid number '{lexeme}' at position {start}")
        return Success(Token(TokenKind.NUMBER, lexeme, start))


def tokenize(source: str | None) -> Result[list[Token]]:
    """Tokenize an expression string into a list of tokens.

    Args:
        source: Expression text; None is treated as empty.

    Returns:
        Success with the tokens (always ending in EOF), or Failure naming the
        first unexpected character and its position.
    """
    return Lexer(source).scan_tokens()
