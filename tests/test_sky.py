# tests/test_sky.py
"""
Test the sky color gradient: night floor, anchor colors and continuity.
"""

import math

import numpy as np
import pytest

from sunlight_engine.sky import ALTITUDE_THRESHOLDS, SKY_COLORS, SkyColor, sky_color

EPS = 1e-9


def _close(a: SkyColor, b: SkyColor, tol=1e-6):
    np.testing.assert_allclose(a.as_tuple(), b.as_tuple(), atol=tol)


@pytest.mark.parametrize("deg", [-6, -6.5, -18, -90])
def test_night_at_or_below_minus_six(deg):
    assert sky_color(math.radians(deg)) == SKY_COLORS['night']


@pytest.mark.parametrize("name", ['civil_twilight', 'sunrise', 'golden_hour', 'day', 'zenith'])
def test_continuous_at_breakpoints(name):
    """Approaching a breakpoint from either side gives the same color."""
    altitude = ALTITUDE_THRESHOLDS[name]
    _close(sky_color(altitude - EPS), sky_color(altitude + EPS))


def test_anchor_colors():
    _close(sky_color(0.0), SKY_COLORS['sunrise'])
    _close(sky_color(math.radians(6)), SKY_COLORS['golden_hour'])
    _close(sky_color(math.radians(15)), SKY_COLORS['day'])
    _close(sky_color(math.radians(90)), SKY_COLORS['zenith'])


def test_no_extrapolation_past_zenith():
    _close(sky_color(math.radians(120)), SKY_COLORS['zenith'])


def test_linear_inside_a_band():
    mid = sky_color(math.radians(3))
    expected = np.mean([SKY_COLORS['sunrise'].as_tuple(), SKY_COLORS['golden_hour'].as_tuple()], axis=0)
    np.testing.assert_allclose(mid.as_tuple(), expected, atol=1e-9)


def test_twilight_passes_through_civil_twilight_color():
    """Halfway through twilight the blend is weighted 1/4, 1/2, 1/4."""
    mid = sky_color(math.radians(-3))
    c = SKY_COLORS
    expected = (0.25 * np.array(c['night'].as_tuple())
                + 0.5 * np.array(c['civil_twilight'].as_tuple())
                + 0.25 * np.array(c['sunrise'].as_tuple()))
    np.testing.assert_allclose(mid.as_tuple(), expected, atol=1e-9)


def test_hex_conversion():
    assert SkyColor.from_hex('#87CEEB').to_hex() == '#87ceeb'
    assert SkyColor(1.0, 0.0, 0.0).to_hex() == '#ff0000'
