# tests/test_solar.py
"""
SOLAR DIRECTION TESTS
=====================

Checks the scene-frame sun vector:
- always unit length
- y = sin(altitude)
- -Z is north, +X is east
- seasons and the equinox behave as expected
"""

import datetime as dt
import math

import numpy as np
import pytest

from sunlight_engine.instant import build_simulated_instant
from sunlight_engine.model import Location
from sunlight_engine.solar import (
    altitude_from_direction,
    direction_from_angles,
    solar_altitude,
    solar_direction,
    solar_position,
)

KRAKOW = Location(50.06, 19.94, "Europe/Warsaw")
EQUATOR = Location(0.0, 0.0, "UTC")


def _instant(doy, minute, location):
    return build_simulated_instant(doy, minute, location, year=2025, host_time_zone="UTC")


@pytest.mark.parametrize("location", [
    KRAKOW,
    EQUATOR,
    Location(-33.87, 151.21, "Australia/Sydney"),
    Location(78.22, 15.65, "Arctic/Longyearbyen"),
    Location(-89.9, 0.0, "UTC"),
])
def test_direction_is_unit_length(location):
    for doy in (1, 80, 172, 266, 355):
        for minute in range(0, 1440, 90):
            v = solar_direction(_instant(doy, minute, location), location)
            assert v.shape == (3,)
            np.testing.assert_allclose(np.linalg.norm(v), 1.0, atol=1e-12)


def test_y_is_sine_of_altitude():
    instant = _instant(172, 9 * 60, KRAKOW)
    altitude, _ = solar_position(instant, KRAKOW)
    v = solar_direction(instant, KRAKOW)

    assert v[1] == pytest.approx(math.sin(altitude), abs=1e-12)
    assert altitude_from_direction(v) == pytest.approx(altitude, abs=1e-9)
    assert solar_altitude(instant, KRAKOW) == pytest.approx(altitude)


def test_frame_convention():
    """
    South-origin clockwise azimuth:
    S=0 → +Z, W=90° → -X, N=180° → -Z, E=270° → +X.
    """
    alt = math.radians(30)
    c = math.cos(alt)
    np.testing.assert_allclose(direction_from_angles(alt, 0.0), [0, math.sin(alt), c], atol=1e-12)
    np.testing.assert_allclose(direction_from_angles(alt, math.pi / 2), [-c, math.sin(alt), 0], atol=1e-12)
    np.testing.assert_allclose(direction_from_angles(alt, math.pi), [0, math.sin(alt), -c], atol=1e-12)
    np.testing.assert_allclose(direction_from_angles(alt, 3 * math.pi / 2), [c, math.sin(alt), 0], atol=1e-12)


def test_sun_rises_east_and_sets_west_in_krakow():
    morning = solar_direction(_instant(172, 6 * 60, KRAKOW), KRAKOW)
    noon = solar_direction(_instant(172, 12 * 60, KRAKOW), KRAKOW)
    evening = solar_direction(_instant(172, 18 * 60, KRAKOW), KRAKOW)

    assert morning[0] > 0, "morning sun should be east (+X)"
    assert evening[0] < 0, "evening sun should be west (-X)"
    assert noon[2] > 0, "midday sun at 50°N should be south (+Z)"
    assert noon[1] > morning[1] and noon[1] > evening[1]


@pytest.mark.parametrize("doy", [80, 266])
def test_equinox_noon_at_equator_is_near_zenith(doy):
    instant = _instant(doy, 720, EQUATOR)
    altitude = math.degrees(solar_altitude(instant, EQUATOR))
    assert altitude > 85.0
    print(f"✓ Equinox (day {doy}) noon altitude at the equator: {altitude:.2f}°")


def test_krakow_summer_noon_higher_than_winter():
    june = solar_altitude(_instant(172, 720, KRAKOW), KRAKOW)
    december = solar_altitude(_instant(355, 720, KRAKOW), KRAKOW)

    assert june > 0
    assert december > 0
    assert june > december
    # Roughly 63° vs 16° at solar noon
    assert math.degrees(june) > 55
    assert math.degrees(december) < 20


def test_naive_instant_read_as_utc():
    aware = dt.datetime(2025, 6, 21, 10, 0, tzinfo=dt.timezone.utc)
    naive = dt.datetime(2025, 6, 21, 10, 0)
    np.testing.assert_allclose(solar_direction(aware, KRAKOW), solar_direction(naive, KRAKOW))
