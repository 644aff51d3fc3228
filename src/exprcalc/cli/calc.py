"""
Four-function calculator CLI command.

Runs one Calculator operation on numbers given as arguments:

    exprcalc calc add 5 3
    exprcalc calc sqrt 16
    exprcalc calc pow 2 10
"""

from __future__ import annotations

from dataclasses import dataclass

import typer

from exprcalc.cli.utils import print_line
from exprcalc.core.calculator import Calculator
from exprcalc.core.expression_lang import format_result
from exprcalc.core.result import Failure, Result


@dataclass(frozen=True)
class Operation:
    """A calculator operation reachable from the command line."""

    method: str
    arity: int
    usage: str


_OPERATIONS: dict[str, Operation] = {
    "add": Operation("add", 2, "add <a> <b>"),
    "sub": Operation("subtract", 2, "sub <a> <b>"),
    "mul": Operation("multiply", 2, "mul <a> <b>"),
    "div": Operation("divide", 2, "div <a> <b>"),
    "sqrt": Operation("square_root", 1, "sqrt <n>"),
    "pow": Operation("power", 2, "pow <base> <exp>"),
    "mod": Operation("modulo", 2, "mod <a> <b>"),
}

_ALIASES = {
    "subtract": "sub",
    "multiply": "mul",
    "divide": "div",
    "power": "pow",
    "modulo": "mod",
}


def run_operation(
    name: str, operands: list[str], calculator: Calculator | None = None
) -> Result[float]:
    """Resolve ``name``, check arity, parse operands and run the operation."""
    key = name.lower()
    key = _ALIASES.get(key, key)
    op = _OPERATIONS.get(key)
    if op is None:
        return Failure(f"Unknown command '{name}'. Available: {', '.join(_OPERATIONS)}")
    if len(operands) != op.arity:
        return Failure(f"Invalid number of arguments. Usage: {op.usage}")

    try:
        numbers = [float(v) for v in operands]
    except ValueError:
        return Failure("Invalid number format. Please enter valid numbers.")

    calculator = calculator or Calculator()
    return getattr(calculator, op.method)(*numbers)


def calc_command(
    operation: str = typer.Argument(..., help="One of: add, sub, mul, div, sqrt, pow, mod"),
    operands: list[str] | None = typer.Argument(
        None, help="Operands (one for sqrt, two otherwise)"
    ),
) -> None:
    """Run a single four-function calculator operation."""
    result = run_operation(operation, operands or [])
    print_line(format_result(result), error=result.is_failure)
    if result.is_failure:
        raise typer.Exit(code=1)
