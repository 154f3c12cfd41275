# sunlight_engine/model.py
# Location, Weather, TransformMode (value types shared by the engine)

from dataclasses import dataclass, replace
from enum import Enum


@dataclass(frozen=True)
class Location:
    """
    Observer location on Earth.

    latitude/longitude in degrees (north and east positive),
    time_zone an IANA identifier such as "Europe/Warsaw".
    """
    latitude: float
    longitude: float
    time_zone: str

    def moved_to(self, **changes) -> "Location":
        """Return a new Location with the given fields replaced."""
        return replace(self, **changes)


class Weather(str, Enum):
    SUNNY = 'Sunny'
    CLOUDY = 'Cloudy'
    RAINY = 'Rainy'


class TransformMode(str, Enum):
    TRANSLATE = 'translate'
    ROTATE = 'rotate'
    SCALE = 'scale'
