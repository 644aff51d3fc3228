"""
Four-function calculator over plain numbers.

Unrelated to the expression grammar: no parsing happens here. Each
operation takes already-parsed operands and returns a Result so that
invalid operations (divide by zero, square root of a negative) are
reported the same way the expression pipeline reports its errors.
"""

from __future__ import annotations

import math

from exprcalc.core.result import Failure, Result, Success


class Calculator:
    """Arithmetic operations returning Result values."""

    def add(self, a: float, b: float) -> Result[float]:
        return Success(a + b)

    def subtract(self, a: float, b: float) -> Result[float]:
        return Success(a - b)

    def multiply(self, a: float, b: float) -> Result[float]:
        return Success(a * b)

    def divide(self, a: float, b: float) -> Result[float]:
        if b == 0:
            return Failure("Cannot divide by zero.")
        return Success(a / b)

    def square_root(self, n: float) -> Result[float]:
        if n < 0:
            return Failure("Cannot calculate square root of a negative number.")
        return Success(math.sqrt(n))

    def power(self, base: float, exponent: float) -> Result[float]:
        """``base ** exponent`` as a float.

        math.pow raises where IEEE-754 would produce nan or infinity; those
        cases come back as a Failure instead.
        """
        try:
            return Success(math.pow(base, exponent))
        except OverflowError:
            return Failure("Result is too large to represent.")
        except ValueError:
            return Failure(f"Cannot raise {base} to the power {exponent}.")

    def modulo(self, a: float, b: float) -> Result[float]:
        """Remainder with the sign of the dividend; nan for an infinite dividend."""
        if b == 0:
            return Failure("Cannot perform modulo by zero.")
        if math.isinf(a):
            return Success(math.nan)
        return Success(math.fmod(a, b))
