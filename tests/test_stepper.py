"""Tests for the go faster / go slower quantizer."""

import math

import pytest

from pacecalc.models import (
    Bounds,
    DisplayUnit,
    QuantityModel,
    StepDirection,
    format_pace_clock,
    next_pace,
    snap_duration,
    snap_pace,
    time_step_for,
)

FASTER = StepDirection.FASTER
SLOWER = StepDirection.SLOWER


@pytest.mark.parametrize(
    ("distance", "step"),
    [(1, 5), (5, 5), (9.99, 5), (10, 10), (21.1, 10), (24.9, 10), (25, 30), (42.2, 30)],
)
def test_time_step_for(distance, step):
    """Test the duration quantum grows with distance."""
    assert time_step_for(distance) == step


def test_snap_pace_metric():
    """Test pace snaps to the next whole second per km."""
    assert snap_pace(300, SLOWER) == 301
    assert snap_pace(300, FASTER) == 299
    assert snap_pace(300.4, SLOWER) == 301
    assert snap_pace(300.4, FASTER) == 300


def test_snap_pace_imperial():
    """Test pace snaps to the next whole second per mile."""
    # 300 s/km shows as 482.80 s/mi
    assert snap_pace(300, SLOWER, DisplayUnit.MILES) == pytest.approx(483 / 1.609344)
    assert snap_pace(300, FASTER, DisplayUnit.MILES) == pytest.approx(482 / 1.609344)


def test_snap_pace_never_negative():
    """Test pace cannot be stepped below zero."""
    assert snap_pace(0, FASTER) == 0
    assert snap_pace(0.5, FASTER) == 0


def test_snap_duration():
    """Test duration snaps to the next multiple of the time step."""
    assert snap_duration(1500, 5, SLOWER) == 1505
    assert snap_duration(1500, 5, FASTER) == 1495
    assert snap_duration(1502, 5, SLOWER) == 1505
    assert snap_duration(1502, 5, FASTER) == 1500
    assert snap_duration(12660, 42.2, SLOWER) == 12690
    assert snap_duration(3, 5, FASTER) == 0


def test_short_race_whole_seconds_and_round_times_agree():
    """Test 5 km at 5:00/km steps by one second either way."""
    assert next_pace(300, 5, SLOWER) == 301
    assert next_pace(300, 5, FASTER) == 299


def test_marathon_stops_at_round_time():
    """Test a long race stops at the next 30 second time first."""
    slower = next_pace(300, 42.2, SLOWER)
    assert slower == pytest.approx(12690 / 42.2)
    assert 300 < slower < 301

    faster = next_pace(300, 42.2, FASTER)
    assert faster == pytest.approx(12630 / 42.2)
    assert 299 < faster < 300


def test_imperial_stops_at_whole_mile_second():
    """Test a mile pace stops at the next whole second per mile first."""
    pace = next_pace(300, 5, SLOWER, DisplayUnit.MILES)
    assert pace == pytest.approx(483 / 1.609344)
    clock = format_pace_clock(pace, DisplayUnit.MILES)
    assert (clock.minutes, clock.seconds, clock.centiseconds) == ("8", "03", "00")


def test_zero_distance_steps_on_pace_alone():
    """Test stepping with no distance uses the pace boundary only."""
    assert next_pace(300, 0, SLOWER) == 301
    assert next_pace(300.5, 0, FASTER) == 300


STATES = [
    (pace, distance, unit)
    for pace in (121, 240, 287.3, 300, 355.55, 599)
    for distance in (0, 1, 5, 9.7, 10, 21.1, 42.2, 50)
    for unit in DisplayUnit
]


@pytest.mark.parametrize(("pace", "distance", "unit"), STATES)
def test_step_is_monotonic(pace, distance, unit):
    """Test faster always lowers pace and slower always raises it."""
    faster = next_pace(pace, distance, FASTER, unit)
    slower = next_pace(pace, distance, SLOWER, unit)
    assert math.isfinite(faster) and faster >= 0
    assert faster < pace < slower


@pytest.mark.parametrize(("pace", "distance", "unit"), STATES)
def test_faster_then_slower_stays_within_one_step(pace, distance, unit):
    """Test a press each way never moves pace further than one step."""
    faster = next_pace(pace, distance, FASTER, unit)
    back = next_pace(faster, distance, SLOWER, unit)
    assert faster < back <= next_pace(pace, distance, SLOWER, unit)


def test_repeated_presses_land_on_round_times():
    """Test each press on a 10k lands on a 10 second multiple."""
    model = QuantityModel(pace=287.3, distance=10)
    for _ in range(5):
        assert model.go_slower()
        assert model.duration / 10 == pytest.approx(round(model.duration / 10), abs=1e-6)


def test_model_steps_respect_bounds():
    """Test the model stops at the fastest and slowest allowed paces."""
    bounds = Bounds(low=120, high=600)

    model = QuantityModel(pace=121, pace_bounds=bounds)
    assert model.go_faster()
    assert model.pace == 120
    assert not model.go_faster()
    assert model.pace == 120

    model = QuantityModel(pace=600, pace_bounds=bounds)
    assert not model.go_slower()
    assert model.pace == 600


def test_model_steps_never_pull_back_across_bounds():
    """Test a pace already outside the bounds is not moved the wrong way."""
    bounds = Bounds(low=120, high=600)

    model = QuantityModel(pace=700, pace_bounds=bounds)
    assert not model.go_slower()
    assert model.pace == 700
    assert model.go_faster()
    assert model.pace < 700

    model = QuantityModel(pace=100, pace_bounds=bounds)
    assert not model.go_faster()
    assert model.pace == 100


def test_model_steps_without_bounds():
    """Test an unbounded model steps down to zero and stops."""
    model = QuantityModel(pace=2, distance=1)
    assert model.go_faster()
    assert model.go_faster()
    assert model.pace == 0
    assert not model.go_faster()


def test_huge_pace_steps_on_pace_alone():
    """Test a pace whose total time overflows still steps to a finite pace."""
    model = QuantityModel(pace=1e307, distance=50)
    assert model.go_slower()
    assert math.isfinite(model.pace)
    assert model.pace > 1e307
    assert model.go_faster()
    assert math.isfinite(model.pace)


def test_pace_too_large_to_show_is_left_alone():
    """Test a pace that overflows per mile is returned unchanged."""
    assert next_pace(1e308, 50, SLOWER, DisplayUnit.MILES) == 1e308
    model = QuantityModel(pace=1e308, distance=50, unit=DisplayUnit.MILES)
    assert not model.go_slower()
    assert model.pace == 1e308


def test_pace_near_float_limit_stays_finite():
    """Test stepping the largest representable paces gives finite results."""
    for direction in StepDirection:
        pace = next_pace(1.7e308, 1, direction)
        assert math.isfinite(pace)
        assert pace == pytest.approx(1.7e308)
