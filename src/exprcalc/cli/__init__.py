"""
exprcalc CLI Package.

- repl.py: eval and repl commands over the expression pipeline
- calc.py: four-function calculator command
- utils.py: shared console, logging and version helpers
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer

from exprcalc.cli.calc import calc_command
from exprcalc.cli.repl import eval_command, repl_command
from exprcalc.cli.utils import console, setup_logging, version_callback
from exprcalc.core.config import load_config
from exprcalc.core.errors import ConfigError

app = typer.Typer(
    help="""exprcalc – arithmetic expression calculator

Commands:
  • eval: evaluate one expression
  • repl: interactive loop (help, clear, exit)
  • calc: add, sub, mul, div, sqrt, pow, mod on plain numbers
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to exprcalc.toml (default: $EXPRCALC_CONFIG or ./exprcalc.toml)",
    ),
) -> None:
    """Load configuration and set up logging for every command."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        console.print(f"Configuration error: {e}", style="red", markup=False, highlight=False)
        raise typer.Exit(code=2) from e
    setup_logging(config)
    ctx.obj = config


app.command(name="eval")(eval_command)
app.command(name="repl")(repl_command)
app.command(name="calc", context_settings={"ignore_unknown_options": True})(calc_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main"]


if __name__ == "__main__":
    main(sys.argv[1:])
