# sunlight_engine/sky.py
"""
SKY COLOR: BACKGROUND GRADIENT FROM SOLAR ALTITUDE
==================================================

Six named anchor colors, pinned to altitude breakpoints (degrees):

    night          at or below -6°
    civil twilight  blended through between -6° and 0°
    sunrise        0°
    golden hour    6°
    day            15°
    zenith         90°

Every band above the horizon interpolates linearly in RGB. The twilight band
(-6° to 0°) is the ONLY non-linear one: a quadratic blend night → civil
twilight → sunrise. Pure night at -6° and no jump at -6° cannot both hold
with a straight night → civil twilight lerp, so keep it quadratic. Above 90° the
factor is clamped (no extrapolation past the zenith color).
"""

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass(frozen=True)
class SkyColor:
    """RGB color, channels in [0, 1]."""
    r: float
    g: float
    b: float

    @classmethod
    def from_hex(cls, value: str) -> "SkyColor":
        value = value.lstrip('#')
        r, g, b = (int(value[i:i + 2], 16) / 255.0 for i in (0, 2, 4))
        return cls(r, g, b)

    def to_hex(self) -> str:
        channels = (int(round(min(max(c, 0.0), 1.0) * 255)) for c in self.as_tuple())
        return '#' + ''.join(f"{c:02x}" for c in channels)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def lerp(self, other: "SkyColor", t: float) -> "SkyColor":
        a = np.array(self.as_tuple())
        b = np.array(other.as_tuple())
        return SkyColor(*(a + (b - a) * t))


SKY_COLORS = {
    'night': SkyColor.from_hex('#000010'),
    'civil_twilight': SkyColor.from_hex('#2E4482'),  # dark blue/purple
    'sunrise': SkyColor.from_hex('#FF8C00'),         # dark orange
    'golden_hour': SkyColor.from_hex('#FFD700'),     # gold
    'day': SkyColor.from_hex('#87CEEB'),             # sky blue
    'zenith': SkyColor.from_hex('#4682B4'),          # deeper blue
}

ALTITUDE_THRESHOLDS = {
    'civil_twilight': math.radians(-6),
    'sunrise': math.radians(0),
    'golden_hour': math.radians(6),
    'day': math.radians(15),
    'zenith': math.radians(90),
}


def _band_factor(altitude: float, lower: str, upper: str) -> float:
    lo = ALTITUDE_THRESHOLDS[lower]
    hi = ALTITUDE_THRESHOLDS[upper]
    return (altitude - lo) / (hi - lo)


def sky_color(altitude: float) -> SkyColor:
    """
    Sky color for a solar altitude.

    Args:
        altitude: Solar altitude in radians

    Returns:
        Interpolated SkyColor.
    """
    c = SKY_COLORS
    if altitude <= ALTITUDE_THRESHOLDS['civil_twilight']:
        return c['night']

    if altitude < ALTITUDE_THRESHOLDS['sunrise']:
        t = _band_factor(altitude, 'civil_twilight', 'sunrise')
        # de Casteljau: night → civil twilight → sunrise
        return c['night'].lerp(c['civil_twilight'], t).lerp(
            c['civil_twilight'].lerp(c['sunrise'], t), t)

    if altitude < ALTITUDE_THRESHOLDS['golden_hour']:
        return c['sunrise'].lerp(c['golden_hour'], _band_factor(altitude, 'sunrise', 'golden_hour'))

    if altitude < ALTITUDE_THRESHOLDS['day']:
        return c['golden_hour'].lerp(c['day'], _band_factor(altitude, 'golden_hour', 'day'))

    t = min(1.0, _band_factor(altitude, 'day', 'zenith'))
    return c['day'].lerp(c['zenith'], t)
