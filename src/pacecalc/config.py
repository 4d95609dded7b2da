"""Configuration management for the pace calculator."""

import logging
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.quantities import DEFAULT_DISTANCE, DEFAULT_PACE, DEFAULT_UNIT, Bounds
from .models.units import DisplayUnit

logger = logging.getLogger(__name__)


def find_env_file() -> Path | None:
    """Find .env file at git root (project root)."""
    # Search up for git root and use .env there
    current = Path.cwd()
    for parent in [current, *current.parents]:
        if (parent / ".git").exists():
            env_file = parent / ".env"
            if env_file.exists():
                return env_file
            break
    # Fallback to current directory
    local_env = Path.cwd() / ".env"
    if local_env.exists():
        return local_env
    return None


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every setting can be overridden with a PACE_-prefixed variable, e.g.
    PACE_DEFAULT_UNIT=mi, either in the environment or in a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="PACE_",
        env_file=find_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Starting values
    default_pace: float = Field(
        default=DEFAULT_PACE,
        description="Starting pace in seconds per kilometer",
        ge=0,
    )
    default_distance: float = Field(
        default=DEFAULT_DISTANCE,
        description="Starting distance in kilometers",
        ge=0,
    )
    default_unit: DisplayUnit = Field(
        default=DEFAULT_UNIT,
        description="Starting display unit: km or mi",
    )

    # Control ranges
    fastest_pace: float = Field(
        default=2 * 60,
        description="Fastest pace the controls allow, seconds per kilometer",
        ge=0,
    )
    slowest_pace: float = Field(
        default=10 * 60,
        description="Slowest pace the controls allow, seconds per kilometer",
        gt=0,
    )
    min_distance: float = Field(
        default=1,
        description="Shortest distance on the distance control, kilometers",
        ge=0,
    )
    max_distance: float = Field(
        default=50,
        description="Longest distance on the distance control, kilometers",
        gt=0,
    )
    min_time: float = Field(
        default=60,
        description="Shortest total time on the time control, seconds",
        ge=0,
    )
    max_time: float = Field(
        default=10 * 60 * 60,
        description="Longest total time on the time control, seconds",
        gt=0,
    )

    # Application Settings
    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )

    @model_validator(mode="after")
    def validate_ranges(self) -> "Settings":
        """Ensure no control range is inverted."""
        for low, high in (
            ("fastest_pace", "slowest_pace"),
            ("min_distance", "max_distance"),
            ("min_time", "max_time"),
        ):
            if getattr(self, low) > getattr(self, high):
                raise ValueError(f"{low} must not exceed {high}")
        return self

    @property
    def pace_bounds(self) -> Bounds:
        """Range of the pace control."""
        return Bounds(low=self.fastest_pace, high=self.slowest_pace)

    @property
    def distance_bounds(self) -> Bounds:
        """Range of the distance control."""
        return Bounds(low=self.min_distance, high=self.max_distance)

    @property
    def time_bounds(self) -> Bounds:
        """Range of the time control."""
        return Bounds(low=self.min_time, high=self.max_time)


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern).

    Returns:
        Settings instance with all configuration
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        logger.debug(f"Loaded settings: {_settings.model_dump()}")
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call reloads them."""
    global _settings
    _settings = None
