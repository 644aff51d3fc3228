"""
Error types for exprcalc.

Malformed user input never raises: it travels through the pipeline as a
``Failure`` result. The exceptions below are reserved for programming
defects and environment problems.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class ExprCalcError(Exception):
    """Base exception for all exprcalc errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ExpressionInvariantError(ExprCalcError):
    """
    Raised when an AST violates an internal invariant.

    Examples:
    - Node of an unrecognised type handed to the evaluator
    - Binary node carrying a non-arithmetic operator
    """

    pass


class ResultUnwrapError(ExprCalcError):
    """Raised when ``unwrap()`` is called on a Failure."""

    pass


class ConfigError(ExprCalcError):
    """
    Raised when a configuration file cannot be loaded.

    Examples:
    - Invalid TOML syntax
    - Unknown logging level
    - Wrong value types
    """

    pass


@dataclass
class ErrorContext:
    """
    Location of a configuration error.

    Attributes:
        file: Path to the file being loaded
        section: Optional TOML table the error belongs to
    """

    file: Path
    section: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "exprcalc.toml [repl]"
        """
        if self.section:
            return f"{self.file} [{self.section}]"
        return str(self.file)


def make_config_error(
    message: str,
    file: Path,
    section: str | None = None,
) -> ConfigError:
    """
    Helper to create a ConfigError with context.

    Args:
        message: Error description
        file: Configuration file path
        section: Optional TOML table name

    Returns:
        ConfigError with context attached
    """
    return ConfigError(message, ErrorContext(file=file, section=section))
