"""Shared fixtures for the test suite."""

import os

import pytest

from pacecalc.config import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test against default settings."""
    for key in list(os.environ):
        if key.upper().startswith("PACE_"):
            monkeypatch.delenv(key)
    reset_settings()
    yield
    reset_settings()
