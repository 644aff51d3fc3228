"""
Expression CLI commands.

- eval: evaluate one expression given on the command line
- repl: read-eval-print loop over expressions
"""

from __future__ import annotations

import logging

import typer

from exprcalc.cli.utils import console, print_line
from exprcalc.core.config import ExprCalcConfig
from exprcalc.core.expression_lang import calculate, format_result

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Commands:
  <expression>  Evaluate a mathematical expression
  help          Show this help message
  clear         Clear the screen
  exit          Exit the calculator"""

WELCOME_TEXT = """\
Expression Calculator
Type 'help' for commands, 'exit' to quit.
"""

EXIT_COMMANDS = frozenset({"exit", "quit"})


def eval_command(
    expression: list[str] = typer.Argument(
        ..., help="Expression to evaluate, e.g. '2 + 3 * 4'. Use -- before a leading '-'."
    ),
) -> None:
    """Evaluate an arithmetic expression and print the result."""
    source = " ".join(expression)
    result = calculate(source)
    print_line(format_result(result), error=result.is_failure)
    if result.is_failure:
        raise typer.Exit(code=1)


def repl_command(ctx: typer.Context) -> None:
    """Start an interactive expression calculator."""
    config: ExprCalcConfig = ctx.obj or ExprCalcConfig()
    run_repl(config)


def run_repl(config: ExprCalcConfig) -> None:
    """Read lines until ``exit`` or end of input, evaluating each one.

    A failing expression prints ``Error: <message>`` and the loop carries on.
    """
    if config.repl.banner:
        print_line(WELCOME_TEXT)

    while True:
        try:
            line = console.input(config.repl.prompt, markup=False)
        except EOFError:
            console.print()
            break
        except KeyboardInterrupt:
            console.print()
            continue

        line = line.strip()
        if not line:
            continue

        command = line.lower()
        if command in EXIT_COMMANDS:
            break
        if command == "help":
            print_line(HELP_TEXT)
            continue
        if command == "clear":
            console.clear()
            continue

        result = calculate(line)
        print_line(format_result(result), error=result.is_failure)

    logger.debug("REPL session ended")
    print_line("Goodbye!")
