# sunlight_engine/lighting.py
"""
Scene lighting derived from the sun: light levels per weather, twilight fade,
and where to put the directional light.

The fade band (-6°..+2°) is perceptual and deliberately differs from the
geometric horizon used by sunpath.py.
"""

import math
from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np

from .config import CONFIG
from .model import Weather


@dataclass(frozen=True)
class LightLevels:
    directional: float
    ambient: float


def twilight_factor(altitude: float) -> float:
    """
    Time-based intensity modifier in [0, 1].

    0 below -6° (civil twilight), 1 from +2° up, linear in between.
    """
    lower = math.radians(CONFIG.fade_lower_deg)
    upper = math.radians(CONFIG.fade_upper_deg)
    if altitude >= upper:
        return 1.0
    if altitude < lower:
        return 0.0
    return max(0.0, min(1.0, (altitude - lower) / (upper - lower)))


def light_levels(altitude: float, weather: Union[Weather, str] = Weather.SUNNY) -> LightLevels:
    """Directional and ambient light intensities for an altitude and weather."""
    try:
        key = Weather(weather).value
    except ValueError:
        key = Weather.SUNNY.value
    directional_base, ambient_base = CONFIG.weather_light_bases[key]
    return LightLevels(directional=directional_base * twilight_factor(altitude),
                       ambient=ambient_base)


def render_sun_direction(direction: Sequence[float]) -> np.ndarray:
    """
    Direction to place the light along.

    Below the horizon the light comes from the horizon instead: y is clamped
    to 0 and the horizontal part renormalised. A sun at the exact nadir has no
    horizontal part and yields the zero vector.
    """
    v = np.array(direction, dtype=float)
    if v[1] < 0:
        v[1] = 0.0
        horizontal = math.hypot(v[0], v[2])
        if horizontal > 0:
            v[0] /= horizontal
            v[2] /= horizontal
    return v


def light_position(direction: Sequence[float], target: Sequence[float] = (0.0, 0.0, 0.0),
                   distance: float = None) -> np.ndarray:
    """World position for the directional light, `distance` along the render direction from `target`."""
    distance = CONFIG.light_distance if distance is None else distance
    return np.asarray(target, dtype=float) + render_sun_direction(direction) * distance
