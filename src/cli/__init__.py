"""pace - a terminal pace, distance and time calculator."""

from pacecalc import __version__

__all__ = ["__version__"]
