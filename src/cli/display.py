"""Display utilities for the pace CLI with Rich formatting."""

from rich.console import Console
from rich.table import Table

from pacecalc.models import (
    QuantityModel,
    RaceDistance,
    format_distance,
    format_duration,
    format_pace_clock,
)

console = Console()


def display_quantities(model: QuantityModel) -> None:
    """Display distance, pace and time for the current model."""
    shown = model.display()

    table = Table(title="Pace Calculator", show_header=True, border_style="cyan")
    table.add_column("Quantity", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_column("Entry", style="dim", justify="right")

    table.add_row("Distance", f"{shown.distance} {shown.distance_unit}", shown.distance)
    table.add_row("Pace", str(shown.pace), shown.pace_text)
    table.add_row("Time", str(shown.duration), shown.duration_text)

    console.print(table)


def display_steps(model: QuantityModel, rows: list[tuple[int, float]]) -> None:
    """Display the pace and time reached after each press of the step control."""
    table = Table(
        title=f"Steps over {format_distance(model.distance, model.unit)} {model.unit.value}",
        show_header=True,
        border_style="cyan",
    )
    table.add_column("Press", justify="right", style="cyan")
    table.add_column("Pace", justify="right", style="yellow")
    table.add_column("Time", justify="right", style="green")

    for press, pace in rows:
        table.add_row(
            str(press),
            str(format_pace_clock(pace, model.unit)),
            str(format_duration(pace * model.distance)),
        )

    console.print(table)


def display_races(model: QuantityModel) -> None:
    """Display race distance marks with finish times at the current pace."""
    table = Table(
        title=f"Race Times at {format_pace_clock(model.pace, model.unit)}",
        show_header=True,
        border_style="cyan",
    )
    table.add_column("Race", style="cyan")
    table.add_column("Distance", justify="right", style="green")
    table.add_column("Time", justify="right", style="yellow")

    for race in RaceDistance:
        table.add_row(
            race.label,
            f"{format_distance(race.km, model.unit)} {model.unit.value}",
            str(format_duration(model.pace * race.km)),
        )

    console.print(table)


def display_error(message: str) -> None:
    """Display error message."""
    console.print(f"[red]✗[/red] {message}")


def display_warning(message: str) -> None:
    """Display warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def display_info(message: str) -> None:
    """Display info message."""
    console.print(f"[dim]ℹ[/dim] {message}")
