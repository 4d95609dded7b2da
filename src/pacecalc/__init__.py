"""Pace, distance and time calculator for runners."""

__version__ = "0.1.0"
