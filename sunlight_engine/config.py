# sunlight_engine/config.py
"""
Engine configuration and defaults.
"""

import os
from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass
class EngineConfig:
    """Global engine configuration."""

    # Metadata
    app_name: str = "Sunlight Visualizer"
    version: str = "0.1.0"

    # Default location (Kraków)
    default_latitude: float = 50.06
    default_longitude: float = 19.94
    default_time_zone: str = "Europe/Warsaw"
    default_location_name: str = "Kraków"

    # Timezone the host clock runs in. Simulated instants are expressed in it.
    host_time_zone: str = None

    # Calendar / sampling
    days_in_year: int = 365
    minutes_in_day: int = 1440
    default_minute_of_day: int = 12 * 60
    sun_path_step_minutes: int = 15

    # Clear-sky proxy: lux at the zenith
    max_lux: float = 100000.0

    # Perceptual light fade (degrees): dark below lower, full above upper
    fade_lower_deg: float = -6.0
    fade_upper_deg: float = 2.0
    light_distance: float = 500.0

    # Weather tables
    weather_lux_multipliers: Dict[str, float] = None
    weather_light_bases: Dict[str, Tuple[float, float]] = None  # (directional, ambient)

    def __post_init__(self):
        if self.host_time_zone is None:
            self.host_time_zone = os.environ.get("SUNLIGHT_HOST_TZ", "UTC")
        if self.weather_lux_multipliers is None:
            self.weather_lux_multipliers = {'Sunny': 1.0, 'Cloudy': 0.2, 'Rainy': 0.05}
        if self.weather_light_bases is None:
            self.weather_light_bases = {
                'Sunny': (5.0, 0.5),
                'Cloudy': (1.5, 1.0),
                'Rainy': (0.5, 1.2),
            }


# Global config instance
CONFIG = EngineConfig()
