# tests/test_instant.py
"""
Test the simulated-instant builder: host-clock datetimes that name the right
absolute moment for a wall-clock time at the target location.
"""

import datetime as dt
from zoneinfo import ZoneInfo

import pytest

from sunlight_engine.instant import (
    build_simulated_instant,
    clamp_day_of_year,
    clamp_minute_of_day,
    offset_difference_minutes,
    simulated_instants,
)
from sunlight_engine.model import Location

UTC = dt.timezone.utc
WARSAW = Location(50.06, 19.94, "Europe/Warsaw")
JUL_15 = 196
JAN_15 = 15


def test_noon_in_warsaw_summer_from_utc_host():
    """
    Host on UTC, target Warsaw in July (UTC+2):
    offset difference = 120, so noon in Warsaw is 10:00 on the host clock.
    """
    instant = build_simulated_instant(JUL_15, 720, WARSAW, year=2025, host_time_zone="UTC")
    assert instant == dt.datetime(2025, 7, 15, 10, 0, tzinfo=UTC)


def test_noon_in_warsaw_winter_from_utc_host():
    instant = build_simulated_instant(JAN_15, 720, WARSAW, year=2025, host_time_zone="UTC")
    assert instant == dt.datetime(2025, 1, 15, 11, 0, tzinfo=UTC)


@pytest.mark.parametrize("host", ["UTC", "America/New_York", "Asia/Tokyo", "Europe/Warsaw"])
@pytest.mark.parametrize("doy", [JAN_15, JUL_15])
def test_wall_clock_at_target_is_independent_of_host(host, doy):
    """
    Whatever clock the host runs on, the instant reads as 12:00 on the
    target location's wall clock.
    """
    instant = build_simulated_instant(doy, 720, WARSAW, year=2025, host_time_zone=host)
    local = instant.astimezone(ZoneInfo("Europe/Warsaw"))
    assert (local.hour, local.minute) == (12, 0)
    assert local.date() == dt.date(2025, 1 if doy == JAN_15 else 7, 15)


def test_result_is_expressed_in_host_clock():
    """New York host, Warsaw target, July: difference 360 → 06:00 host time."""
    instant = build_simulated_instant(JUL_15, 720, WARSAW, year=2025,
                                      host_time_zone="America/New_York")
    assert (instant.hour, instant.minute) == (6, 0)
    assert instant.astimezone(UTC) == dt.datetime(2025, 7, 15, 10, 0, tzinfo=UTC)


MAR_9 = 68   # New York springs forward at 02:00
NOV_2 = 306  # New York falls back at 02:00


@pytest.mark.parametrize("doy", [MAR_9, NOV_2])
@pytest.mark.parametrize("target, utc_hour", [
    (Location(0.0, 0.0, "UTC"), 12),
    (WARSAW, 11),
])
def test_host_dst_switch_does_not_shift_the_instant(doy, target, utc_hour):
    """
    New York changes clocks at 02:00 on these days. Noon at the target must
    still be noon there, not an hour early or late.
    """
    instant = build_simulated_instant(doy, 720, target, year=2025,
                                      host_time_zone="America/New_York")
    month, day = (3, 9) if doy == MAR_9 else (11, 2)
    assert instant.astimezone(UTC) == dt.datetime(2025, month, day, utc_hour, 0, tzinfo=UTC)

    local = instant.astimezone(ZoneInfo(target.time_zone))
    assert (local.hour, local.minute) == (12, 0)


def test_samples_stay_evenly_spaced_across_host_dst_switch():
    target = Location(0.0, 0.0, "UTC")
    instants = simulated_instants(MAR_9, range(0, 1441, 60), target, year=2025,
                                  host_time_zone="America/New_York")
    absolute = [t.astimezone(UTC) for t in instants]
    gaps = {b - a for a, b in zip(absolute, absolute[1:])}
    assert gaps == {dt.timedelta(hours=1)}
    assert instants[-1].astimezone(UTC) == dt.datetime(2025, 3, 10, 0, 0, tzinfo=UTC)


def test_rollover_to_previous_day():
    """
    Minute 0 in Kolkata (+330) from a UTC host lands on the previous
    evening; it must roll back, not clamp to 00:00.
    """
    kolkata = Location(22.57, 88.36, "Asia/Kolkata")
    instant = build_simulated_instant(100, 0, kolkata, year=2025, host_time_zone="UTC")
    assert instant == dt.datetime(2025, 4, 9, 18, 30, tzinfo=UTC)


def test_rollover_across_year_boundaries():
    back = build_simulated_instant(1, 0, WARSAW, year=2025, host_time_zone="UTC")
    assert back == dt.datetime(2024, 12, 31, 23, 0, tzinfo=UTC)

    los_angeles = Location(34.05, -118.24, "America/Los_Angeles")
    forward = build_simulated_instant(365, 1439, los_angeles, year=2025, host_time_zone="UTC")
    assert forward == dt.datetime(2026, 1, 1, 7, 59, tzinfo=UTC)


def test_offset_difference_changes_with_day():
    """Warsaw switches to summer time on 2025-03-30 (day 89)."""
    assert offset_difference_minutes(88, "Europe/Warsaw", 2025, "UTC") == 60
    assert offset_difference_minutes(90, "Europe/Warsaw", 2025, "UTC") == 120
    # Same zone on both sides → no correction
    assert offset_difference_minutes(90, "Europe/Warsaw", 2025, "Europe/Warsaw") == 0


def test_invalid_target_zone_behaves_like_utc():
    nowhere = Location(0.0, 0.0, "Nowhere/Land")
    utc = Location(0.0, 0.0, "UTC")
    assert (build_simulated_instant(JUL_15, 600, nowhere, year=2025, host_time_zone="UTC")
            == build_simulated_instant(JUL_15, 600, utc, year=2025, host_time_zone="UTC"))


def test_out_of_range_inputs_are_clamped():
    assert clamp_day_of_year(0) == 1
    assert clamp_day_of_year(400) == 365
    assert clamp_minute_of_day(-5) == 0
    assert clamp_minute_of_day(2000) == 1439

    instant = build_simulated_instant(0, 2000, Location(0.0, 0.0, "UTC"),
                                      year=2025, host_time_zone="UTC")
    assert instant == dt.datetime(2025, 1, 1, 23, 59, tzinfo=UTC)


def test_non_leap_calendar_in_leap_year():
    """Day 60 is always March 1, even in 2024."""
    instant = build_simulated_instant(60, 0, Location(0.0, 0.0, "UTC"),
                                      year=2024, host_time_zone="UTC")
    assert instant.date() == dt.date(2024, 3, 1)


def test_simulated_instants_reach_next_midnight():
    instants = simulated_instants(JUL_15, [0, 1440], WARSAW, year=2025, host_time_zone="UTC")
    assert instants[1] - instants[0] == dt.timedelta(days=1)
