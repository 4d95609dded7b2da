"""
Nice-step quantizer for the go faster / go slower control.

A press moves pace to the nearest round value in the requested direction.
Two boundaries compete: the next whole second of displayed pace, and the
next multiple of a distance-dependent time step for the total duration.
The step stops at whichever boundary is reached first, so neither the pace
nor the time display lands on an awkward number.
"""

import logging
import math

from .enums import StepDirection
from .units import DisplayUnit, pace_from_unit, pace_to_unit

logger = logging.getLogger(__name__)

# Absorbs float noise so a value sitting on a boundary counts as on it
_SNAP_DIGITS = 6


def time_step_for(distance_km: float) -> int:
    """
    Get the duration quantum used for a distance.

    Args:
        distance_km: Distance in kilometers

    Returns:
        5 seconds below 10 km, 10 seconds below 25 km, else 30 seconds
    """
    if distance_km < 10:
        return 5
    if distance_km < 25:
        return 10
    return 30


def _next_whole(value: float, direction: StepDirection) -> int:
    if direction == StepDirection.SLOWER:
        return math.floor(value) + 1
    return math.ceil(value) - 1


def snap_pace(
    pace_sec_per_km: float,
    direction: StepDirection,
    unit: DisplayUnit = DisplayUnit.KILOMETERS,
) -> float:
    """
    Move pace to the next whole second per displayed unit.

    Miles paces are rounded to hundredths before snapping, matching what
    the pace display shows.

    Returns:
        Candidate pace in seconds per km, never negative
    """
    if unit == DisplayUnit.MILES:
        shown = round(pace_to_unit(pace_sec_per_km, unit), 2)
    else:
        shown = round(pace_sec_per_km, _SNAP_DIGITS)
    if not math.isfinite(shown):
        logger.debug(f"Pace {pace_sec_per_km} s/km too large to step")
        return pace_sec_per_km
    candidate = max(_next_whole(shown, direction), 0)
    return pace_from_unit(candidate, unit)


def snap_duration(duration_sec: float, distance_km: float, direction: StepDirection) -> float:
    """
    Move a duration to the next multiple of the time step for the distance.

    Returns:
        Candidate duration in seconds, never negative
    """
    step = time_step_for(distance_km)
    ticks = round(duration_sec / step, _SNAP_DIGITS)
    return max(_next_whole(ticks, direction), 0) * float(step)


def next_pace(
    pace_sec_per_km: float,
    distance_km: float,
    direction: StepDirection,
    unit: DisplayUnit = DisplayUnit.KILOMETERS,
) -> float:
    """
    Compute the pace one nudge away from the current one.

    Args:
        pace_sec_per_km: Current pace in seconds per km
        distance_km: Current distance in kilometers
        direction: FASTER lowers pace, SLOWER raises it
        unit: Displayed unit, which decides where whole-second paces fall

    Returns:
        New pace in seconds per km; finite and non-negative
    """
    by_pace = snap_pace(pace_sec_per_km, direction, unit)
    if distance_km <= 0:
        logger.debug("No distance set, stepping on pace alone")
        return by_pace

    duration = pace_sec_per_km * distance_km
    if not math.isfinite(duration):
        logger.debug("Time too large to quantize, stepping on pace alone")
        return by_pace
    by_time = snap_duration(duration, distance_km, direction) / distance_km
    if not math.isfinite(by_time):
        return by_pace

    # Smallest move wins
    if direction == StepDirection.FASTER:
        chosen = max(by_pace, by_time)
    else:
        chosen = min(by_pace, by_time)
    logger.debug(
        f"Step {direction.value}: pace candidate {by_pace:.2f}, "
        f"time candidate {by_time:.2f}, chose {chosen:.2f} s/km"
    )
    return chosen
