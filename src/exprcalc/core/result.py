"""
Result type threading success or failure through the expression pipeline.

Every stage (tokenize, parse, evaluate) returns a ``Result`` instead of
raising on malformed input:

    result = tokenize("2 + 3").bind(parse).bind(evaluate)
    match result:
        case Success(value):
            print(value)
        case Failure(message):
            print(f"Error: {message}")
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

from exprcalc.core.errors import ResultUnwrapError

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """A successful outcome carrying ``value``."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> Result[U]:
        """Transform the success value."""
        return Success(fn(self.value))

    def bind(self, fn: Callable[[T], Result[U]]) -> Result[U]:
        """Chain the next fallible step."""
        return fn(self.value)

    and_then = bind

    def match(self, on_success: Callable[[T], R], on_failure: Callable[[str], R]) -> R:
        return on_success(self.value)

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Failure:
    """A failed outcome carrying a human-readable ``message``."""

    message: str

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def map(self, fn: Callable[[object], object]) -> Failure:
        """Failures pass through ``map`` unchanged."""
        return self

    def bind(self, fn: Callable[[object], object]) -> Failure:
        """Failures short-circuit ``bind``; ``fn`` is never called."""
        return self

    and_then = bind

    def match(self, on_success: Callable[[object], R], on_failure: Callable[[str], R]) -> R:
        return on_failure(self.message)

    def unwrap(self) -> NoReturn:
        raise ResultUnwrapError(f"Called unwrap on a failure: {self.message}")


# Type alias for Result union
Result = Success[T] | Failure
