"""Enumeration types for the pace calculator."""

from enum import Enum


class StepDirection(str, Enum):
    """Direction of a nudge on the pace control. Lower pace is faster."""

    FASTER = "faster"
    SLOWER = "slower"


class RaceDistance(str, Enum):
    """Common race distances marked on the distance control."""

    FIVE_K = "5k"
    TEN_K = "10k"
    HALF_MARATHON = "half"
    MARATHON = "marathon"

    @property
    def km(self) -> float:
        """Race distance in kilometers."""
        return _RACE_KM[self]

    @property
    def label(self) -> str:
        """Human readable name."""
        return _RACE_LABELS[self]


_RACE_KM = {
    RaceDistance.FIVE_K: 5.0,
    RaceDistance.TEN_K: 10.0,
    RaceDistance.HALF_MARATHON: 21.1,
    RaceDistance.MARATHON: 42.2,
}

_RACE_LABELS = {
    RaceDistance.FIVE_K: "5k",
    RaceDistance.TEN_K: "10k",
    RaceDistance.HALF_MARATHON: "1/2 marathon",
    RaceDistance.MARATHON: "marathon",
}
