# sunlight_engine/state/persistence.py
"""
Persisted state codec.

The save/restore collaborator (local storage, cloud sync) owns the bytes; this
module owns the SHAPE. Keys are camelCase to stay compatible with existing
saved files:

    date, time, weather, location, locationName, modelData, modelOpacity,
    isEditMode, transformMode, history, historyIndex, showCompassGuide,
    showSunPath

Payloads are validated with pydantic. Anything structurally wrong raises
PersistenceError; an out-of-range historyIndex is NOT an error here, the
history manager clamps it on rehydrate.
"""

import json
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..edit.transform import RotationOrder, TransformSnapshot
from ..model import Location, TransformMode, Weather


class PersistenceError(ValueError):
    """Raised when an external state payload cannot be decoded."""
    pass


class LocationData(BaseModel):
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    timeZone: str

    def to_location(self) -> Location:
        return Location(self.latitude, self.longitude, self.timeZone)

    @classmethod
    def from_location(cls, location: Location) -> "LocationData":
        return cls(latitude=location.latitude, longitude=location.longitude,
                   timeZone=location.time_zone)


class SnapshotData(BaseModel):
    position: Tuple[float, float, float]
    rotation: Tuple[float, float, float, RotationOrder]
    scale: Tuple[float, float, float]

    def to_snapshot(self) -> TransformSnapshot:
        return TransformSnapshot(position=self.position, rotation=self.rotation[:3],
                                 order=self.rotation[3], scale=self.scale)


class PersistedState(BaseModel):
    """
    Serializable subset of the simulation state.

    Every field has a default so partial payloads validate; use
    model_dump(exclude_unset=True) to see which fields were actually sent.
    """
    model_config = ConfigDict(extra='ignore')

    date: int = 1
    time: int = 720
    weather: Weather = Weather.SUNNY
    location: Optional[LocationData] = None
    locationName: str = ''
    modelData: Optional[str] = None
    modelOpacity: float = 1.0
    isEditMode: bool = False
    transformMode: TransformMode = TransformMode.TRANSLATE
    history: List[SnapshotData] = Field(default_factory=list)
    historyIndex: int = -1
    showCompassGuide: bool = True
    showSunPath: bool = True

    def snapshots(self) -> List[TransformSnapshot]:
        return [s.to_snapshot() for s in self.history]


def decode_state(payload: Union[str, bytes, Dict[str, Any]]) -> PersistedState:
    """
    Validate an external payload (JSON text or an already-parsed dict).

    Raises:
        PersistenceError: not JSON, not an object, or fields of the wrong shape
    """
    try:
        if isinstance(payload, (str, bytes)):
            return PersistedState.model_validate_json(payload)
        if not isinstance(payload, dict):
            raise PersistenceError(f"State payload must be an object, got {type(payload).__name__}")
        return PersistedState.model_validate(payload)
    except ValidationError as e:
        raise PersistenceError(f"Invalid state payload: {e.error_count()} error(s)\n{e}") from e


def encode_state(state) -> Dict[str, Any]:
    """Persisted-state dict for a SimulationState."""
    return {
        'date': state.date,
        'time': state.time,
        'weather': Weather(state.weather).value,
        'location': LocationData.from_location(state.location).model_dump(),
        'locationName': state.location_name,
        'modelData': state.model_data,
        'modelOpacity': state.model_opacity,
        'isEditMode': state.is_edit_mode,
        'transformMode': TransformMode(state.transform_mode).value,
        'history': [s.to_dict() for s in state.history],
        'historyIndex': state.history_index,
        'showCompassGuide': state.show_compass_guide,
        'showSunPath': state.show_sun_path,
    }


def dumps_state(state) -> str:
    return json.dumps(encode_state(state))
