# api/main.py
"""
FastAPI backend for the Sunlight Visualizer - exposes sunlight_engine as REST API.
"""

from contextlib import asynccontextmanager
import datetime as dt
import math

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Any
import sys
from pathlib import Path

# Add project root to path to import sunlight_engine
sys.path.insert(0, str(Path(__file__).parent.parent))

from sunlight_engine import Location, Weather
from sunlight_engine.config import CONFIG
from sunlight_engine.dates import format_date, format_time
from sunlight_engine.edit import TransformSnapshot
from sunlight_engine.illuminance import apply_weather, daily_illuminance
from sunlight_engine.instant import build_simulated_instant
from sunlight_engine.lighting import light_levels, render_sun_direction
from sunlight_engine.logging_config import setup_logging
from sunlight_engine.sky import sky_color
from sunlight_engine.solar import altitude_from_direction, solar_direction
from sunlight_engine.state import SimulationController
from sunlight_engine.state.persistence import SnapshotData
from sunlight_engine.sunpath import sun_path_segments
from sunlight_engine.timezones import is_valid_time_zone, resolve_offset_minutes


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    yield


app = FastAPI(
    title="Sunlight Visualizer API",
    description="Sun position, sky and lighting engine with model edit history",
    version=CONFIG.version,
    lifespan=lifespan,
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://127.0.0.1:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# One simulation per API process
controller = SimulationController()


# =============================================================================
# Request/Response Models
# =============================================================================

class LocationParams(BaseModel):
    """Observer location."""
    latitude: float = Field(CONFIG.default_latitude, ge=-90.0, le=90.0)
    longitude: float = Field(CONFIG.default_longitude, ge=-180.0, le=180.0)
    time_zone: str = Field(CONFIG.default_time_zone, description="IANA timezone, e.g. Europe/Warsaw")

    def to_location(self) -> Location:
        return Location(self.latitude, self.longitude, self.time_zone)


class SunParams(BaseModel):
    """Date/time/location inputs of the simulation."""
    date: int = Field(172, ge=1, le=365, description="Day of year (non-leap)")
    time: int = Field(720, ge=0, le=1439, description="Minute of day at the location")
    location: LocationParams = Field(default_factory=LocationParams)
    weather: Weather = Weather.SUNNY


class OffsetParams(BaseModel):
    time_zone: str
    date: int = Field(1, ge=1, le=365)


class OffsetResult(BaseModel):
    time_zone: str
    valid: bool
    offset_minutes: int


class SunResult(BaseModel):
    """Solar view of one instant."""
    label: str
    instant_utc: str
    direction: List[float]
    light_direction: List[float]
    altitude_deg: float
    sky_color: str
    directional_intensity: float
    ambient_intensity: float


class IlluminanceResult(BaseModel):
    theoretical: List[int]
    lux: List[int]
    weather: Weather


class SunPathResult(BaseModel):
    day: List[List[List[float]]]
    night: List[List[List[float]]]
    n_samples: int


class HistoryResult(BaseModel):
    """History pointer as the UI sees it."""
    length: int
    index: int
    can_undo: bool
    can_redo: bool
    pose: Optional[SnapshotData] = None


# =============================================================================
# Helpers
# =============================================================================

def _history_result(pose: Optional[TransformSnapshot] = None) -> HistoryResult:
    state = controller.state
    return HistoryResult(
        length=len(state.history),
        index=state.history_index,
        can_undo=state.can_undo,
        can_redo=state.can_redo,
        pose=SnapshotData(**pose.to_dict()) if pose is not None else None,
    )


def _to_snapshot(data: SnapshotData) -> TransformSnapshot:
    return data.to_snapshot()


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "Sunlight Visualizer API"}


@app.post("/api/offset", response_model=OffsetResult)
async def offset(params: OffsetParams):
    """UTC offset of a zone on a simulation day (midnight UTC)."""
    reference = build_simulated_instant(params.date, 0, Location(0.0, 0.0, "UTC"),
                                        host_time_zone="UTC")
    return OffsetResult(
        time_zone=params.time_zone,
        valid=is_valid_time_zone(params.time_zone),
        offset_minutes=resolve_offset_minutes(params.time_zone, reference),
    )


@app.post("/api/sun", response_model=SunResult)
async def sun(params: SunParams):
    """Sun direction, sky color and light levels for a date/time/location."""
    location = params.location.to_location()
    instant = build_simulated_instant(params.date, params.time, location)
    direction = solar_direction(instant, location)
    altitude = altitude_from_direction(direction)
    levels = light_levels(altitude, params.weather)

    return SunResult(
        label=f"{format_date(params.date)} {format_time(params.time)}",
        instant_utc=instant.astimezone(dt.timezone.utc).isoformat(),
        direction=[round(float(v), 6) for v in direction],
        light_direction=[round(float(v), 6) for v in render_sun_direction(direction)],
        altitude_deg=round(math.degrees(altitude), 4),
        sky_color=sky_color(altitude).to_hex(),
        directional_intensity=levels.directional,
        ambient_intensity=levels.ambient,
    )


@app.post("/api/illuminance", response_model=IlluminanceResult)
async def illuminance(params: SunParams):
    """Hourly lux curve, theoretical and weather-scaled."""
    theoretical = daily_illuminance(params.date, params.location.to_location())
    return IlluminanceResult(
        theoretical=theoretical,
        lux=apply_weather(theoretical, params.weather),
        weather=params.weather,
    )


@app.post("/api/sunpath", response_model=SunPathResult)
async def sunpath(params: SunParams):
    """Day and night sun path polylines."""
    path = sun_path_segments(params.date, params.location.to_location())
    return SunPathResult(
        day=[seg.round(6).tolist() for seg in path.day],
        night=[seg.round(6).tolist() for seg in path.night],
        n_samples=path.n_samples,
    )


@app.get("/api/state")
async def get_state():
    """Persisted-state record for the save collaborator."""
    return controller.to_persisted()


@app.put("/api/state")
async def put_state(payload: Dict[str, Any]):
    """Restore a previously saved state. Degraded loads still succeed."""
    clean = controller.rehydrate(payload)
    return {"clean": clean, "state": controller.to_persisted()}


@app.post("/api/model", response_model=HistoryResult)
async def model_loaded(present: bool = True):
    """The host attached (or removed) a model in the scene."""
    controller.attach_model(present)
    return _history_result()


@app.post("/api/edit/begin", response_model=HistoryResult)
async def edit_begin(pose: Optional[SnapshotData] = None):
    controller.set_edit_mode(True, _to_snapshot(pose) if pose is not None else None)
    return _history_result()


@app.post("/api/edit/end", response_model=HistoryResult)
async def edit_end():
    controller.set_edit_mode(False)
    return _history_result()


@app.post("/api/edit/commit", response_model=HistoryResult)
async def edit_commit(pose: SnapshotData):
    if not controller.commit_edit(_to_snapshot(pose)):
        raise HTTPException(status_code=409, detail="No model to record an edit for.")
    return _history_result()


@app.post("/api/edit/undo", response_model=HistoryResult)
async def edit_undo():
    return _history_result(controller.undo())


@app.post("/api/edit/redo", response_model=HistoryResult)
async def edit_redo():
    return _history_result(controller.redo())


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
