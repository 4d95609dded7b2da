"""Clock-style (de)serialization of paces and durations."""

import math

from pydantic import BaseModel, Field

from .units import DisplayUnit, pace_from_unit, pace_to_unit, parse_number


class PaceClock(BaseModel):
    """A pace broken into clock fields for one displayed unit."""

    minutes: str = Field(description="Whole minutes, unpadded")
    seconds: str = Field(description="Whole seconds 00-59")
    centiseconds: str = Field(description="Hundredths of a second 00-99")
    unit_label: str = Field(description='"min/km" or "min/mi"')

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.minutes}:{self.seconds}.{self.centiseconds} {self.unit_label}"


class DurationClock(BaseModel):
    """A total time broken into clock fields."""

    hours: str = Field(description="Whole hours, unpadded")
    minutes: str = Field(description="Minutes, two-digit only when hours are shown")
    seconds: str = Field(description="Seconds 00-59")

    model_config = {"frozen": True}

    @property
    def show_hours(self) -> bool:
        """Hours are only displayed when nonzero."""
        return self.hours != "0"

    def __str__(self) -> str:
        if self.show_hours:
            return f"{self.hours}:{self.minutes}:{self.seconds}"
        return f"{self.minutes}:{self.seconds}"


def _round_half_up(value: float) -> int:
    if not math.isfinite(value) or value <= 0:
        return 0
    return int(math.floor(value + 0.5))


def format_pace_clock(
    pace_sec_per_km: float, unit: DisplayUnit = DisplayUnit.KILOMETERS
) -> PaceClock:
    """
    Split a stored per-km pace into clock fields for the displayed unit.

    Args:
        pace_sec_per_km: Pace in seconds per kilometer
        unit: Unit the pace is shown per

    Returns:
        PaceClock, e.g. 300 s/km -> 5:00.00 min/km
    """
    hundredths = _round_half_up(pace_to_unit(pace_sec_per_km, unit) * 100)
    whole_seconds, centiseconds = divmod(hundredths, 100)
    minutes, seconds = divmod(whole_seconds, 60)
    return PaceClock(
        minutes=str(minutes),
        seconds=f"{seconds:02d}",
        centiseconds=f"{centiseconds:02d}",
        unit_label=unit.pace_label,
    )


def parse_pace_clock(
    minutes: str | None,
    seconds: str | None,
    unit: DisplayUnit = DisplayUnit.KILOMETERS,
    centiseconds: str | None = None,
) -> float:
    """
    Combine pace clock fields typed in the displayed unit into seconds per km.

    Empty or malformed fields count as zero.
    """
    per_unit = parse_number(minutes) * 60 + parse_number(seconds) + parse_number(centiseconds) / 100
    return pace_from_unit(per_unit, unit)


def format_duration(total_seconds: float) -> DurationClock:
    """
    Split a total time into hours, minutes and seconds.

    The value is rounded to the nearest second first.

    Args:
        total_seconds: Duration in seconds

    Returns:
        DurationClock, e.g. 3661 -> 1:01:01 and 59 -> 0:59
    """
    total = _round_half_up(total_seconds)
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    return DurationClock(
        hours=str(hours),
        minutes=f"{minutes:02d}" if hours > 0 else str(minutes),
        seconds=f"{seconds:02d}",
    )


def parse_duration(hours: str | None, minutes: str | None, seconds: str | None) -> float:
    """Combine duration fields into total seconds. Empty fields count as zero."""
    return parse_number(hours) * 3600 + parse_number(minutes) * 60 + parse_number(seconds)


# Masked text forms ("05:00" for pace, "00:25:00" for time)


def format_pace_text(pace_sec_per_km: float, unit: DisplayUnit = DisplayUnit.KILOMETERS) -> str:
    """Format a pace as a zero-padded "mm:ss" string in the displayed unit."""
    minutes, seconds = divmod(_round_half_up(pace_to_unit(pace_sec_per_km, unit)), 60)
    return f"{minutes:02d}:{seconds:02d}"


def parse_pace_text(text: str | None, unit: DisplayUnit = DisplayUnit.KILOMETERS) -> float:
    """
    Parse a "mm:ss" pace typed in the displayed unit into seconds per km.

    A bare number is read as minutes ("5" is 5:00).
    """
    parts = (text or "").split(":")
    minutes = parts[0]
    seconds = parts[1] if len(parts) > 1 else None
    return parse_pace_clock(minutes, seconds, unit)


def format_duration_text(total_seconds: float) -> str:
    """Format a duration as a zero-padded "hh:mm:ss" string."""
    total = _round_half_up(total_seconds)
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def parse_duration_text(text: str | None) -> float:
    """
    Parse an "hh:mm:ss" duration into total seconds.

    Shorter input fills from the right: "25:00" is 25 minutes and "90" is
    90 seconds.
    """
    parts = (text or "").split(":")[-3:]
    padded = [None] * (3 - len(parts)) + parts
    return parse_duration(*padded)
