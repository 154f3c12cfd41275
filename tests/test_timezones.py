# tests/test_timezones.py
"""
Test UTC offset resolution for IANA zones, including DST switches and bad input.
"""

import datetime as dt

import pytest

from sunlight_engine.timezones import is_valid_time_zone, resolve_offset_minutes, zone_or_utc

UTC = dt.timezone.utc


@pytest.mark.parametrize("instant", [
    dt.datetime(2025, 1, 1, tzinfo=UTC),
    dt.datetime(2025, 7, 1, 12, 30, tzinfo=UTC),
    dt.datetime(1999, 12, 31, 23, 59),
])
def test_utc_is_always_zero(instant):
    assert resolve_offset_minutes("UTC", instant) == 0


def test_offset_follows_dst():
    """
    Same zone, different seasons: the offset must come from the instant,
    not from a fixed table.
    """
    winter = dt.datetime(2025, 1, 15, 12, tzinfo=UTC)
    summer = dt.datetime(2025, 7, 15, 12, tzinfo=UTC)

    assert resolve_offset_minutes("Europe/Warsaw", winter) == 60
    assert resolve_offset_minutes("Europe/Warsaw", summer) == 120
    assert resolve_offset_minutes("America/New_York", winter) == -300
    assert resolve_offset_minutes("America/New_York", summer) == -240
    print("✓ Offsets track DST")


def test_offset_flips_at_the_transition_instant():
    """
    Warsaw springs forward at 01:00 UTC on 2025-03-30.
    Naive references are read as UTC.
    """
    before = dt.datetime(2025, 3, 30, 0, 59)
    after = dt.datetime(2025, 3, 30, 1, 0)

    assert resolve_offset_minutes("Europe/Warsaw", before) == 60
    assert resolve_offset_minutes("Europe/Warsaw", after) == 120


def test_non_hour_offsets():
    when = dt.datetime(2025, 6, 1, tzinfo=UTC)
    assert resolve_offset_minutes("Asia/Kolkata", when) == 330
    assert resolve_offset_minutes("Asia/Kathmandu", when) == 345


@pytest.mark.parametrize("bad", ["Not/AZone", "", "../etc/passwd", "Europe/"])
def test_invalid_zone_degrades_to_utc(bad):
    """Bad identifiers never raise; they resolve to offset 0."""
    when = dt.datetime(2025, 7, 15, tzinfo=UTC)
    assert resolve_offset_minutes(bad, when) == 0
    assert not is_valid_time_zone(bad)
    assert zone_or_utc(bad) is UTC


def test_is_valid_time_zone():
    assert is_valid_time_zone("Europe/Warsaw")
    assert is_valid_time_zone("UTC")
    assert not is_valid_time_zone(None)
