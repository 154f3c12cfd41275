# sunlight_engine - Sunlight simulation core
"""
SUNLIGHT ENGINE: Time, Sun and Edit History for a 3D Sunlight Viewer
====================================================================

This package provides:
- DST-aware timezone offsets and simulated instants
- Solar direction vectors in the scene frame
- Sky color, lighting levels, daily lux curve and day/night sun path
- Transform undo/redo history and a single-owner simulation controller

ARCHITECTURE:
-------------
    timezones.py    UTC offset of an IANA zone at an instant
    instant.py      (day, minute, location) → host-clock datetime
    solar.py        Sun altitude/azimuth → unit scene vector
    sky.py          Sky color from altitude
    illuminance.py  Hourly clear-sky lux, weather scaling, chart table
    sunpath.py      Day/night sun path polylines
    lighting.py     Twilight fade, weather light levels, light placement
    dates.py        Non-leap calendar helpers and labels

    edit/           Transform snapshots and undo/redo history
    state/          SimulationController + persisted state codec
"""

from .model import Location, Weather, TransformMode
from .timezones import resolve_offset_minutes, is_valid_time_zone
from .instant import build_simulated_instant, simulated_instants
from .solar import solar_direction, solar_position, altitude_from_direction
from .sky import SkyColor, sky_color
from .illuminance import daily_illuminance, apply_weather, illuminance_table
from .sunpath import SunPath, PathSegment, sun_path_segments
from .lighting import LightLevels, light_levels, twilight_factor, render_sun_direction
from .edit import TransformSnapshot, RotationOrder, TransformHistory
from .state import SimulationController, SimulationState

__version__ = "0.1.0"
