# sunlight_engine/illuminance.py
"""
DAILY ILLUMINANCE: A CLEAR-SKY LUX CURVE
========================================

PURPOSE:
--------
Give the sunlight chart 24 numbers: how bright is it at each wall-clock hour
(0-23) at the target location on a given day?

THE MODEL:
----------
    lux = round(100000 · sin(altitude))   if altitude > 0
    lux = 0                               otherwise

This is a simplified clear-sky PROXY, not a physical irradiance model. It
ignores air mass, turbidity, clouds and terrain; 100 000 lux is roughly direct
midday sun, and sin(altitude) captures the "lower sun, weaker light" trend.

Weather is NOT applied here. Callers scale the curve afterwards
(apply_weather), so the theoretical curve can be cached per (day, location)
while the weather toggle changes freely.
"""

from typing import List, Sequence, Union

import numpy as np
import pandas as pd

from .config import CONFIG
from .instant import simulated_instants
from .model import Location, Weather
from .solar import solar_altitude

HOURS_PER_DAY = 24


def daily_illuminance(day_of_year: int, location: Location, **instant_kwargs) -> List[int]:
    """
    Theoretical lux for each hour 0-23 of the target location's wall clock.

    Args:
        day_of_year: 1-365
        location: Target location
        **instant_kwargs: year / host_time_zone, forwarded to the instant builder

    Returns:
        24 non-negative integers.
    """
    instants = simulated_instants(
        day_of_year, [hour * 60 for hour in range(HOURS_PER_DAY)], location, **instant_kwargs)

    hourly_lux = []
    for instant in instants:
        altitude = solar_altitude(instant, location)
        lux = CONFIG.max_lux * np.sin(altitude) if altitude > 0 else 0.0
        hourly_lux.append(int(round(lux)))
    return hourly_lux


def weather_multiplier(weather: Union[Weather, str]) -> float:
    """Lux scale factor for a weather option (unknown options count as sunny)."""
    try:
        key = Weather(weather).value
    except ValueError:
        return 1.0
    return CONFIG.weather_lux_multipliers.get(key, 1.0)


def apply_weather(hourly_lux: Sequence[float], weather: Union[Weather, str]) -> List[int]:
    """Scale a theoretical curve by the weather multiplier, rounding each hour."""
    multiplier = weather_multiplier(weather)
    return [int(round(lux * multiplier)) for lux in hourly_lux]


def illuminance_table(hourly_lux: Sequence[float]) -> pd.DataFrame:
    """
    Chart-ready table with columns `hour` and `lux`.

    A row for hour 24 repeats hour 0, so an area chart spans the whole day
    without a gap at the right edge.
    """
    df = pd.DataFrame({'hour': range(len(hourly_lux)), 'lux': list(hourly_lux)})
    if len(df) > 0:
        closing = pd.DataFrame({'hour': [len(hourly_lux)], 'lux': [hourly_lux[0]]})
        df = pd.concat([df, closing], ignore_index=True)
    return df
