#!/usr/bin/env python3
"""
pace - pace, distance and time calculator

A terminal-native CLI for working out running paces.

Usage:
    pace                                  # Show the default 5 km at 5:00/km
    pace calc -d 10 -t 0:45:00            # Pace for 10 km in 45 minutes
    pace calc -r marathon -p 4:30         # Marathon time at 4:30/km
    pace step faster -n 5 -u mi           # Five presses of "go faster"
    pace races -p 5:15                    # Race finish times at 5:15/km
"""

import logging

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from cli import __version__, display
from cli.commands import calc, step
from pacecalc.config import get_settings
from pacecalc.models import QuantityModel

# Create the main app
app = typer.Typer(
    name="pace",
    help="Work out running pace, distance and time from the terminal.",
    no_args_is_help=False,
    add_completion=True,
)

# Console for output
console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"pace version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", callback=version_callback, help="Show version"
    ),
) -> None:
    """
    pace - Work out running pace, distance and time.

    Run without arguments to see the default distance, pace and time.
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        display.display_error(f"Invalid PACE_ settings: {escape(str(e))}")
        raise typer.Exit(code=1) from e
    logging.basicConfig(level=settings.log_level.upper())

    if ctx.invoked_subcommand is None:
        # Default action: show defaults
        display.display_quantities(QuantityModel.from_settings(settings))


# Register commands directly on the app
app.command(name="calc")(calc.calc)
app.command(name="races")(calc.races)
app.command(name="step")(step.step)


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
