"""Pace, distance and duration kept consistent under edits."""

import logging
import math
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, computed_field, model_validator

from .clock import (
    DurationClock,
    PaceClock,
    format_duration,
    format_duration_text,
    format_pace_clock,
    format_pace_text,
)
from .enums import StepDirection
from .stepper import next_pace
from .units import DisplayUnit, format_distance

if TYPE_CHECKING:
    from ..config import Settings

logger = logging.getLogger(__name__)

DEFAULT_PACE = 5 * 60  # seconds per km
DEFAULT_DISTANCE = 5.0  # km
DEFAULT_UNIT = DisplayUnit.KILOMETERS


class Bounds(BaseModel):
    """Closed range a control may take, e.g. the pace slider."""

    low: float = Field(description="Smallest allowed value")
    high: float = Field(description="Largest allowed value")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_order(self) -> "Bounds":
        """Ensure the range is not inverted."""
        if self.low > self.high:
            raise ValueError(f"low ({self.low}) must not exceed high ({self.high})")
        return self

    def clamp(self, value: float) -> float:
        """Clamp a value into the range."""
        return min(max(value, self.low), self.high)

    def __contains__(self, value: float) -> bool:
        return self.low <= value <= self.high


class Quantities(BaseModel):
    """Immutable snapshot of the current triple in canonical units."""

    distance: float = Field(description="Distance in kilometers")
    pace: float = Field(description="Pace in seconds per kilometer")
    duration: float = Field(description="Total time in seconds")
    unit: DisplayUnit = Field(description="Display unit at snapshot time")

    model_config = {"frozen": True}


class QuantityDisplay(BaseModel):
    """Every user-facing rendering of the current triple."""

    distance: str = Field(description='Distance in the display unit, e.g. "05.00"')
    distance_unit: str = Field(description='"km" or "mi"')
    pace: PaceClock
    pace_text: str = Field(description='Masked pace, e.g. "05:00"')
    duration: DurationClock
    duration_text: str = Field(description='Masked time, e.g. "00:25:00"')

    model_config = {"frozen": True}


class QuantityModel(BaseModel):
    """
    Holds the pace/distance pair a runner is exploring.

    Duration is never stored: it is always pace multiplied by distance, so
    the three quantities cannot drift apart. Pace is stored per kilometer
    whatever the display unit; switching units only changes formatting.

    All mutators are total. They coerce negative input to 0, ignore
    non-finite input, and return whether the state changed as requested.
    """

    pace: float = Field(
        default=DEFAULT_PACE,
        description="Pace in seconds per kilometer",
        ge=0,
        allow_inf_nan=False,
    )
    distance: float = Field(
        default=DEFAULT_DISTANCE,
        description="Distance in kilometers; 0 while the input is cleared",
        ge=0,
        allow_inf_nan=False,
    )
    unit: DisplayUnit = Field(
        default=DEFAULT_UNIT,
        description="Unit used to show and parse distance and pace",
    )
    pace_bounds: Bounds | None = Field(
        default=None,
        description="Fastest and slowest pace the step control may reach",
        exclude=True,
    )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "QuantityModel":
        """Build a model using configured defaults and pace bounds."""
        return cls(
            pace=settings.default_pace,
            distance=settings.default_distance,
            unit=settings.default_unit,
            pace_bounds=settings.pace_bounds,
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def duration(self) -> float:
        """Total time in seconds."""
        return self.pace * self.distance

    def set_distance(self, distance_km: float) -> bool:
        """Replace distance, keeping pace. Duration follows."""
        value = _coerce(distance_km, "distance")
        if value is None:
            return False
        if not math.isfinite(self.pace * value):
            logger.warning(f"Ignoring distance {value} km, time would overflow")
            return False
        self.distance = value
        logger.debug(f"Distance set to {value} km")
        return True

    def set_pace(self, pace_sec_per_km: float) -> bool:
        """Replace pace, keeping distance. Duration follows."""
        value = _coerce(pace_sec_per_km, "pace")
        if value is None:
            return False
        if not math.isfinite(value * self.distance):
            logger.warning(f"Ignoring pace {value} s/km, time would overflow")
            return False
        self.pace = value
        logger.debug(f"Pace set to {value} s/km")
        return True

    def set_duration(self, duration_sec: float) -> bool:
        """
        Hit a total time by changing pace over the current distance.

        Rejected, leaving pace unchanged, while distance is 0 or when the
        resulting pace would not be finite.
        """
        value = _coerce(duration_sec, "duration")
        if value is None:
            return False
        if self.distance == 0:
            logger.warning("Cannot derive pace from a duration with no distance set")
            return False
        pace = value / self.distance
        if not math.isfinite(pace):
            logger.warning(f"Cannot derive a finite pace from {value} s over {self.distance} km")
            return False
        self.pace = pace
        logger.debug(f"Duration set to {value} s, pace now {self.pace} s/km")
        return True

    def set_unit(self, unit: DisplayUnit | str) -> bool:
        """Switch the display unit. Stored pace and distance are untouched."""
        try:
            self.unit = DisplayUnit(unit)
        except ValueError:
            logger.warning(f"Ignoring unknown display unit {unit!r}")
            return False
        logger.debug(f"Display unit set to {self.unit.value}")
        return True

    def step(self, direction: StepDirection) -> bool:
        """
        Nudge pace to the next round value in a direction.

        Never passes the configured pace bounds. A pace already outside the
        bounds is left where it is rather than pulled back across them.
        """
        candidate = next_pace(self.pace, self.distance, direction, self.unit)
        if self.pace_bounds is not None:
            if direction == StepDirection.FASTER:
                candidate = max(candidate, min(self.pace_bounds.low, self.pace))
            else:
                candidate = min(candidate, max(self.pace_bounds.high, self.pace))
        if candidate == self.pace:
            logger.debug(f"Pace {self.pace} s/km already at its {direction.value} limit")
            return False
        self.pace = candidate
        return True

    def go_faster(self) -> bool:
        """Lower pace by one nice step."""
        return self.step(StepDirection.FASTER)

    def go_slower(self) -> bool:
        """Raise pace by one nice step."""
        return self.step(StepDirection.SLOWER)

    def snapshot(self) -> Quantities:
        """Get the current triple as an immutable value."""
        return Quantities(
            distance=self.distance,
            pace=self.pace,
            duration=self.duration,
            unit=self.unit,
        )

    def display(self) -> QuantityDisplay:
        """Format the current triple for the display unit."""
        return QuantityDisplay(
            distance=format_distance(self.distance, self.unit),
            distance_unit=self.unit.value,
            pace=format_pace_clock(self.pace, self.unit),
            pace_text=format_pace_text(self.pace, self.unit),
            duration=format_duration(self.duration),
            duration_text=format_duration_text(self.duration),
        )


def _coerce(value: float, name: str) -> float | None:
    """Return a usable non-negative value, or None for non-finite input."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric {name} {value!r}")
        return None
    if not math.isfinite(number):
        logger.warning(f"Ignoring non-finite {name} {value!r}")
        return None
    return max(number, 0.0)
