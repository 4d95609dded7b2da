"""Step commands for the pace CLI."""

import json

import typer

from cli import display
from cli.commands.calc import build_model
from pacecalc.models import DisplayUnit, RaceDistance, StepDirection


def step(
    direction: StepDirection = typer.Argument(..., help="faster or slower"),
    count: int = typer.Option(1, "--count", "-n", min=1, help="Number of presses"),
    distance: str | None = typer.Option(
        None, "--distance", "-d", help="Distance in the display unit, e.g. 10 or 13.1"
    ),
    race: RaceDistance | None = typer.Option(None, "--race", "-r", help="Race distance"),
    pace: str | None = typer.Option(None, "--pace", "-p", help="Pace per unit as MM:SS"),
    time: str | None = typer.Option(None, "--time", "-t", help="Total time as HH:MM:SS"),
    unit: DisplayUnit | None = typer.Option(None, "--unit", "-u", help="Display unit"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Nudge the pace to the next round value, one press at a time."""
    model = build_model(distance=distance, race=race, pace=pace, time=time, unit=unit)
    if model.distance == 0:
        display.display_info("No distance set, steps follow whole seconds of pace only")

    rows: list[tuple[int, float]] = [(0, model.pace)]
    for press in range(1, count + 1):
        if not model.step(direction):
            display.display_warning(f"Pace cannot go any {direction.value}")
            break
        rows.append((press, model.pace))

    if json_output:
        data = [
            {"press": press, "pace": pace_value, "duration": pace_value * model.distance}
            for press, pace_value in rows
        ]
        print(json.dumps(data, indent=2))
    else:
        display.display_steps(model, rows)
