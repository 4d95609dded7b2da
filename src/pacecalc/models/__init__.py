"""Data models and conversions for the pace calculator."""

from .clock import (
    DurationClock,
    PaceClock,
    format_duration,
    format_duration_text,
    format_pace_clock,
    format_pace_text,
    parse_duration,
    parse_duration_text,
    parse_pace_clock,
    parse_pace_text,
)
from .enums import RaceDistance, StepDirection
from .quantities import Bounds, Quantities, QuantityDisplay, QuantityModel
from .stepper import next_pace, snap_duration, snap_pace, time_step_for
from .units import (
    DisplayUnit,
    format_distance,
    km_to_miles,
    miles_to_km,
    pace_from_unit,
    pace_to_unit,
    parse_distance,
    parse_number,
)

__all__ = [
    # Main model
    "QuantityModel",
    "Quantities",
    "QuantityDisplay",
    "Bounds",
    # Clock fields
    "PaceClock",
    "DurationClock",
    "format_pace_clock",
    "parse_pace_clock",
    "format_duration",
    "parse_duration",
    "format_pace_text",
    "parse_pace_text",
    "format_duration_text",
    "parse_duration_text",
    # Enums
    "RaceDistance",
    "StepDirection",
    # Stepper
    "next_pace",
    "snap_pace",
    "snap_duration",
    "time_step_for",
    # Units
    "DisplayUnit",
    "km_to_miles",
    "miles_to_km",
    "pace_to_unit",
    "pace_from_unit",
    "format_distance",
    "parse_distance",
    "parse_number",
]
