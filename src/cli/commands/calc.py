"""Calculation commands for the pace CLI."""

import json
import logging
import re

import typer

from cli import display
from pacecalc.config import get_settings
from pacecalc.models import (
    DisplayUnit,
    QuantityModel,
    RaceDistance,
    parse_distance,
    parse_duration_text,
    parse_pace_text,
)

logger = logging.getLogger(__name__)

_DISTANCE_TEXT = re.compile(r"\d*\.?\d*")
_CLOCK_TEXT = re.compile(r"[\d.:]*")


def check_option(value: str, option: str, pattern: re.Pattern[str], example: str) -> str:
    """
    Reject option text the lenient field parsers would quietly read as zero.

    Raises:
        typer.Exit: When the text contains anything but digits and separators
    """
    text = value.strip()
    if not text or not any(ch.isdigit() for ch in text) or not pattern.fullmatch(text):
        display.display_error(f"Invalid {option} {value!r}, expected something like {example}")
        raise typer.Exit(code=1)
    return text


def build_model(
    distance: str | None = None,
    race: RaceDistance | None = None,
    pace: str | None = None,
    time: str | None = None,
    unit: DisplayUnit | None = None,
) -> QuantityModel:
    """
    Build a model from command-line input.

    Applies the unit first so distance and pace are read in it, then the
    distance (or race), then pace, then time. Time is reached by changing
    pace over the chosen distance.

    Raises:
        typer.Exit: On conflicting or unusable input
    """
    settings = get_settings()
    model = QuantityModel.from_settings(settings)

    if unit is not None:
        model.set_unit(unit)

    if race is not None and distance is not None:
        display.display_error("Use either --distance or --race, not both")
        raise typer.Exit(code=1)
    if race is not None:
        model.set_distance(race.km)
    elif distance is not None:
        text = check_option(distance, "--distance", _DISTANCE_TEXT, "10 or 13.1")
        model.set_distance(parse_distance(text, model.unit))

    if model.distance not in settings.distance_bounds:
        display.display_warning(
            f"Distance is outside the usual {settings.min_distance:g}-"
            f"{settings.max_distance:g} km range"
        )

    if pace is not None:
        text = check_option(pace, "--pace", _CLOCK_TEXT, "5:30")
        model.set_pace(parse_pace_text(text, model.unit))

    if time is not None:
        text = check_option(time, "--time", _CLOCK_TEXT, "1:45:00")
        if model.distance == 0:
            display.display_error("A time needs a distance greater than zero")
            raise typer.Exit(code=1)
        if not model.set_duration(parse_duration_text(text)):
            display.display_error(f"Cannot reach a time of {time} over this distance")
            raise typer.Exit(code=1)
        if model.duration not in settings.time_bounds:
            display.display_warning("Time is outside the range of the time control")

    if model.pace == 0:
        display.display_error("Pace must be greater than zero")
        raise typer.Exit(code=1)

    logger.info(f"Built model: {model.snapshot()}")
    return model


def print_json(model: QuantityModel) -> None:
    """Print the model's values and their renderings as JSON."""
    data = {
        "quantities": model.snapshot().model_dump(mode="json"),
        "display": model.display().model_dump(mode="json"),
    }
    print(json.dumps(data, indent=2))


def calc(
    distance: str | None = typer.Option(
        None, "--distance", "-d", help="Distance in the display unit, e.g. 10 or 13.1"
    ),
    race: RaceDistance | None = typer.Option(None, "--race", "-r", help="Race distance"),
    pace: str | None = typer.Option(None, "--pace", "-p", help="Pace per unit as MM:SS"),
    time: str | None = typer.Option(None, "--time", "-t", help="Total time as HH:MM:SS"),
    unit: DisplayUnit | None = typer.Option(None, "--unit", "-u", help="Display unit"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Work out the missing one of distance, pace and time."""
    model = build_model(distance=distance, race=race, pace=pace, time=time, unit=unit)

    if json_output:
        print_json(model)
    else:
        display.display_quantities(model)


def races(
    pace: str | None = typer.Option(None, "--pace", "-p", help="Pace per unit as MM:SS"),
    unit: DisplayUnit | None = typer.Option(None, "--unit", "-u", help="Display unit"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Show finish times for common races at a pace."""
    model = build_model(pace=pace, unit=unit)

    if json_output:
        data = [
            {
                "race": race.value,
                "label": race.label,
                "distance_km": race.km,
                "duration": model.pace * race.km,
            }
            for race in RaceDistance
        ]
        print(json.dumps(data, indent=2))
    else:
        display.display_races(model)
