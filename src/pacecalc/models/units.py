"""Unit conversion utilities for distance."""

import logging
import math
from enum import Enum

logger = logging.getLogger(__name__)


class DisplayUnit(str, Enum):
    """Distance unit used for presentation and parsing."""

    KILOMETERS = "km"
    MILES = "mi"

    @property
    def pace_label(self) -> str:
        """Label shown next to a pace in this unit."""
        return f"min/{self.value}"


# Conversion constants
MILES_TO_KM = 1.609344


def km_to_miles(km: float) -> float:
    """
    Convert kilometers to miles.

    Args:
        km: Distance in kilometers

    Returns:
        Distance in miles
    """
    return km / MILES_TO_KM


def miles_to_km(miles: float) -> float:
    """
    Convert miles to kilometers.

    Args:
        miles: Distance in miles

    Returns:
        Distance in kilometers
    """
    return miles * MILES_TO_KM


def pace_to_unit(pace_sec_per_km: float, unit: DisplayUnit) -> float:
    """Convert a per-km pace into seconds per displayed unit."""
    if unit == DisplayUnit.MILES:
        return pace_sec_per_km * MILES_TO_KM
    return pace_sec_per_km


def pace_from_unit(pace_sec_per_unit: float, unit: DisplayUnit) -> float:
    """Convert seconds per displayed unit back into a per-km pace."""
    if unit == DisplayUnit.MILES:
        return pace_sec_per_unit / MILES_TO_KM
    return pace_sec_per_unit


def parse_number(text: str | None) -> float:
    """
    Parse a (possibly partial) numeric input field.

    Empty, malformed, negative and non-finite input all parse as 0, so a
    half-typed masked field never fails.

    Args:
        text: Raw field content, e.g. "05", "5.", "" or "_5"

    Returns:
        Non-negative finite number
    """
    if text is None:
        return 0.0
    cleaned = text.strip().replace("_", "0")
    if not cleaned:
        return 0.0
    try:
        value = float(cleaned)
    except ValueError:
        logger.debug(f"Treating unparsable field {text!r} as 0")
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def format_distance(distance_km: float, unit: DisplayUnit = DisplayUnit.KILOMETERS) -> str:
    """
    Format a distance in the requested unit.

    Args:
        distance_km: Distance in kilometers
        unit: Unit to display the distance in

    Returns:
        Two-decimal distance zero-padded to five characters (e.g., "05.00")
    """
    value = km_to_miles(distance_km) if unit == DisplayUnit.MILES else distance_km
    return f"{value:.2f}".zfill(5)


def parse_distance(text: str | None, unit: DisplayUnit = DisplayUnit.KILOMETERS) -> float:
    """
    Parse a distance typed in the displayed unit.

    Args:
        text: Decimal distance, e.g. "03.10"; empty parses as 0
        unit: Unit the distance was typed in

    Returns:
        Distance in kilometers
    """
    value = parse_number(text)
    if unit == DisplayUnit.MILES:
        return miles_to_km(value)
    return value
