# sunlight_engine/solar.py
"""
SOLAR POSITION: WHERE IS THE SUN IN THE SCENE?
==============================================

PURPOSE:
--------
Turn an absolute instant and a latitude/longitude into a unit vector pointing
at the sun, in the scene's coordinate frame.

EPHEMERIS:
----------
Altitude and azimuth come from astral's NOAA solar position routines, with
atmospheric refraction turned off so that altitude 0 is the geometric horizon.
That is the "standard approximation" level of accuracy (well under a degree),
which is all a lighting preview needs.

COORDINATE FRAME:
-----------------
Right-handed, Y-up:

    +Y  = up (zenith)
    -Z  = geographic north
    +X  = geographic east

Azimuth is first expressed from SOUTH, clockwise (S=0, W=90°, N=180°, E=270°),
then converted with this fixed transform:

    x = -cos(alt) · sin(az)
    y =  sin(alt)
    z =  cos(alt) · cos(az)

Check:  sun due north (az=180°) → z = -cos(alt)  → toward -Z ✓
        sun due east  (az=270°) → x = +cos(alt)  → toward +X ✓

Seen from the south looking north (toward -Z), east is on the right, same as
a map. Because y = sin(alt), altitude comes back with asin(y).
"""

import datetime as dt
import math
from typing import Sequence, Tuple

import numpy as np
from astral import Observer
from astral.sun import azimuth as sun_azimuth
from astral.sun import elevation as sun_elevation

from .model import Location


def _observer(location: Location) -> Observer:
    return Observer(latitude=location.latitude, longitude=location.longitude, elevation=0.0)


def _as_aware(instant: dt.datetime) -> dt.datetime:
    # Naive instants are read as UTC
    if instant.tzinfo is None:
        return instant.replace(tzinfo=dt.timezone.utc)
    return instant


def solar_position(instant: dt.datetime, location: Location) -> Tuple[float, float]:
    """
    Solar altitude and azimuth at an instant.

    Returns:
        (altitude, azimuth) in radians. Altitude is negative below the
        horizon; azimuth is measured from south, clockwise.
    """
    observer = _observer(location)
    when = _as_aware(instant)
    altitude_deg = sun_elevation(observer, when, with_refraction=False)
    azimuth_north_deg = sun_azimuth(observer, when)
    # astral measures azimuth from north; shift the origin to south
    azimuth_south_deg = (azimuth_north_deg - 180.0) % 360.0
    return math.radians(altitude_deg), math.radians(azimuth_south_deg)


def direction_from_angles(altitude: float, azimuth: float) -> np.ndarray:
    """Scene-frame unit vector for an altitude/south-origin azimuth pair (radians)."""
    x = -math.cos(altitude) * math.sin(azimuth)
    y = math.sin(altitude)
    z = math.cos(altitude) * math.cos(azimuth)
    return np.array([x, y, z], dtype=float)


def solar_direction(instant: dt.datetime, location: Location) -> np.ndarray:
    """
    Unit vector from the scene origin toward the sun.

    Args:
        instant: Absolute moment (aware datetime; naive is read as UTC)
        location: Only latitude/longitude are used

    Returns:
        np.ndarray of shape (3,), magnitude 1.
    """
    altitude, azimuth = solar_position(instant, location)
    return direction_from_angles(altitude, azimuth)


def solar_directions(instants: Sequence[dt.datetime], location: Location) -> np.ndarray:
    """Stack of solar_direction() results, shape (n, 3)."""
    if not instants:
        return np.empty((0, 3), dtype=float)
    return np.vstack([solar_direction(t, location) for t in instants])


def solar_altitude(instant: dt.datetime, location: Location) -> float:
    """Solar altitude in radians."""
    return solar_position(instant, location)[0]


def altitude_from_direction(direction: Sequence[float]) -> float:
    """Recover altitude (radians) from a scene-frame unit vector."""
    return math.asin(max(-1.0, min(1.0, float(direction[1]))))
