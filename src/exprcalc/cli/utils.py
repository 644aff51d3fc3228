"""
exprcalc CLI Utilities.

Shared helpers used across CLI modules.
"""

import logging
import platform
import sys

import typer
from rich.console import Console

from exprcalc import __version__
from exprcalc.core.config import ExprCalcConfig

console = Console()

LOG_FORMAT = "[%(asctime)s] %(name)s - %(levelname)s - %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        console.print(f"exprcalc {__version__}", highlight=False)
        console.print(
            f"Python {platform.python_version()} ({platform.python_implementation()})",
            highlight=False,
        )
        raise typer.Exit()


def setup_logging(config: ExprCalcConfig) -> None:
    """Send log records to stderr at the configured level."""
    logging.basicConfig(
        level=getattr(logging, config.logging.level.value, logging.WARNING),
        stream=sys.stderr,
        format=LOG_FORMAT,
        force=True,
    )


def print_line(text: str, *, error: bool = False) -> None:
    """Print a result line verbatim (no markup, no highlighting)."""
    console.print(
        text, markup=False, highlight=False, soft_wrap=True, style="red" if error else None
    )
