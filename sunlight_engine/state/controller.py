# sunlight_engine/state/controller.py
"""
SIMULATION CONTROLLER: ONE OWNER FOR ALL SIMULATION STATE
=========================================================

PURPOSE:
--------
Hold the date/time/location inputs, display toggles and the edit history in
one explicit, immutable SimulationState, and make the methods on this class
the ONLY way to change it.

Consumers never reach into mutable fields. They either read `controller.state`
(a frozen snapshot) or subscribe:

    controller = SimulationController()
    unsubscribe = controller.subscribe(lambda state: redraw(state))
    controller.set_time(18 * 60)      # → redraw called with the new snapshot

POSES:
------
The rendering host pushes poses in (begin_edit / commit_edit) and is told
which pose to apply after undo/redo, either from the return value or via
`on_pose(listener)`. The controller never holds a scene node.
"""

import datetime as dt
import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np

from ..config import CONFIG
from ..dates import today_day_of_year
from ..edit.history import TransformHistory
from ..edit.transform import TransformSnapshot
from ..illuminance import apply_weather, daily_illuminance
from ..instant import build_simulated_instant, clamp_day_of_year, clamp_minute_of_day
from ..lighting import LightLevels, light_levels, render_sun_direction
from ..model import Location, TransformMode, Weather
from ..sky import SkyColor, sky_color
from ..solar import altitude_from_direction, solar_direction
from ..sunpath import SunPath, sun_path_segments
from .persistence import PersistenceError, decode_state, encode_state

logger = logging.getLogger(__name__)

StateListener = Callable[["SimulationState"], None]
PoseListener = Callable[[TransformSnapshot], None]


def default_location() -> Location:
    return Location(CONFIG.default_latitude, CONFIG.default_longitude, CONFIG.default_time_zone)


@dataclass(frozen=True)
class SimulationState:
    """Immutable snapshot of everything the simulation knows."""
    date: int = field(default_factory=today_day_of_year)
    time: int = CONFIG.default_minute_of_day
    weather: Weather = Weather.SUNNY
    location: Location = field(default_factory=default_location)
    location_name: str = CONFIG.default_location_name
    model_data: Optional[str] = None
    model_present: bool = False
    model_opacity: float = 1.0
    is_edit_mode: bool = False
    transform_mode: TransformMode = TransformMode.TRANSLATE
    history: Tuple[TransformSnapshot, ...] = ()
    history_index: int = -1
    show_compass_guide: bool = True
    show_sun_path: bool = True

    @property
    def can_undo(self) -> bool:
        return self.model_present and self.history_index > 0

    @property
    def can_redo(self) -> bool:
        return self.model_present and self.history_index < len(self.history) - 1


@dataclass(frozen=True)
class SunFrame:
    """Per-frame solar view of the current state."""
    instant: dt.datetime
    direction: np.ndarray
    altitude: float
    sky: SkyColor
    light: LightLevels
    light_direction: np.ndarray


class SimulationController:
    """Single owner and mutation surface of the simulation state."""

    def __init__(self, state: Optional[SimulationState] = None,
                 host_time_zone: Optional[str] = None) -> None:
        self._state = state or SimulationState()
        self.host_time_zone = host_time_zone or CONFIG.host_time_zone
        self._history = TransformHistory()
        self._history.model_present = self._state.model_present
        self._history.rehydrate(self._state.history, self._state.history_index)
        self._state = replace(self._state, history_index=self._history.index)
        self._listeners: List[StateListener] = []
        self._pose_listeners: List[PoseListener] = []

    # ======================================================================
    # Observation
    # ======================================================================

    @property
    def state(self) -> SimulationState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call `listener(state)` after every change. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    def on_pose(self, listener: PoseListener) -> Callable[[], None]:
        """Call `listener(pose)` whenever undo/redo asks the host to apply a pose."""
        self._pose_listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._pose_listeners:
                self._pose_listeners.remove(listener)
        return unsubscribe

    def _publish(self, **changes: Any) -> SimulationState:
        self._state = replace(self._state, **changes)
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def _publish_history(self, **changes: Any) -> SimulationState:
        h = self._history
        return self._publish(history=h.snapshots, history_index=h.index,
                             model_present=h.model_present, **changes)

    # ======================================================================
    # Simulation inputs
    # ======================================================================

    def set_date(self, day_of_year: int) -> None:
        self._publish(date=clamp_day_of_year(day_of_year))

    def set_time(self, minute_of_day: int) -> None:
        self._publish(time=clamp_minute_of_day(minute_of_day))

    def set_weather(self, weather) -> None:
        """Unknown weather names count as Sunny, like the light and lux tables."""
        try:
            weather = Weather(weather)
        except ValueError:
            logger.warning("Unknown weather %r, using %s", weather, Weather.SUNNY.value)
            weather = Weather.SUNNY
        self._publish(weather=weather)

    def set_location(self, location: Location, name: Optional[str] = None) -> None:
        changes: Dict[str, Any] = {'location': location}
        if name is not None:
            changes['location_name'] = name
        self._publish(**changes)

    def set_location_name(self, name: str) -> None:
        self._publish(location_name=name)

    # ======================================================================
    # Display toggles
    # ======================================================================

    def set_model_opacity(self, opacity: float) -> None:
        self._publish(model_opacity=min(max(float(opacity), 0.0), 1.0))

    def set_transform_mode(self, mode) -> None:
        self._publish(transform_mode=TransformMode(mode))

    def set_show_compass_guide(self, show: bool) -> None:
        self._publish(show_compass_guide=bool(show))

    def set_show_sun_path(self, show: bool) -> None:
        self._publish(show_sun_path=bool(show))

    # ======================================================================
    # Model lifecycle
    # ======================================================================

    def load_model(self, model_data: Optional[str]) -> None:
        """A new model was uploaded (or removed with None): history restarts."""
        self._history.reset()
        self._publish_history(model_data=model_data)

    def attach_model(self, present: bool) -> None:
        """The host reports whether a model is live in the scene."""
        self._history.model_present = bool(present)
        if not present:
            self._history.reset()
        self._publish_history()

    def set_edit_mode(self, enabled: bool, pose: Optional[TransformSnapshot] = None) -> bool:
        """
        Enter or leave edit mode.

        Entering switches to translate mode and restarts history from `pose`
        when a model is present. Returns True if history was seeded.
        """
        if not enabled:
            self._publish(is_edit_mode=False)
            return False

        present = self._history.model_present
        seeded = self._history.begin_editing(pose if present else None)
        self._history.model_present = present
        self._publish_history(is_edit_mode=True, transform_mode=TransformMode.TRANSLATE)
        return seeded

    # ======================================================================
    # Edit history
    # ======================================================================

    def commit_edit(self, pose: TransformSnapshot) -> bool:
        """A transform gesture finished; record the resulting pose."""
        if not self._history.commit(pose):
            return False
        self._publish_history()
        return True

    def undo(self) -> Optional[TransformSnapshot]:
        pose = self._history.undo()
        if pose is not None:
            self._publish_history()
            self._apply_pose(pose)
        return pose

    def redo(self) -> Optional[TransformSnapshot]:
        pose = self._history.redo()
        if pose is not None:
            self._publish_history()
            self._apply_pose(pose)
        return pose

    def can_undo(self) -> bool:
        return self._history.can_undo()

    def can_redo(self) -> bool:
        return self._history.can_redo()

    def _apply_pose(self, pose: TransformSnapshot) -> None:
        for listener in list(self._pose_listeners):
            listener(pose)

    # ======================================================================
    # Persistence
    # ======================================================================

    def to_persisted(self) -> Dict[str, Any]:
        return encode_state(self._state)

    def rehydrate(self, payload) -> bool:
        """
        Replace state from an externally saved payload (dict or JSON text).

        Only the fields present in the payload are applied. A corrupt history
        index is clamped; a payload that does not decode leaves the inputs
        untouched and empties the history.

        Returns:
            True for a clean load, False for a degraded one.
        """
        try:
            persisted = decode_state(payload)
        except PersistenceError as e:
            logger.warning("Discarding unreadable saved state: %s", e)
            self._history.reset()
            self._publish_history()
            return False

        sent = persisted.model_dump(exclude_unset=True)
        changes: Dict[str, Any] = {}
        if 'date' in sent:
            changes['date'] = clamp_day_of_year(persisted.date)
        if 'time' in sent:
            changes['time'] = clamp_minute_of_day(persisted.time)
        if 'weather' in sent:
            changes['weather'] = persisted.weather
        if 'location' in sent and persisted.location is not None:
            changes['location'] = persisted.location.to_location()
        if 'locationName' in sent:
            changes['location_name'] = persisted.locationName
        if 'modelData' in sent:
            changes['model_data'] = persisted.modelData
        if 'modelOpacity' in sent:
            changes['model_opacity'] = min(max(persisted.modelOpacity, 0.0), 1.0)
        if 'isEditMode' in sent:
            changes['is_edit_mode'] = persisted.isEditMode
        if 'transformMode' in sent:
            changes['transform_mode'] = persisted.transformMode
        if 'showCompassGuide' in sent:
            changes['show_compass_guide'] = persisted.showCompassGuide
        if 'showSunPath' in sent:
            changes['show_sun_path'] = persisted.showSunPath

        clean = True
        if 'history' in sent or 'historyIndex' in sent:
            snapshots = persisted.snapshots() if 'history' in sent else self._history.snapshots
            index = persisted.historyIndex if 'historyIndex' in sent else self._history.index
            clean = self._history.rehydrate(snapshots, index)

        self._publish_history(**changes)
        return clean

    # ======================================================================
    # Derived views
    # ======================================================================

    def instant(self) -> dt.datetime:
        s = self._state
        return build_simulated_instant(s.date, s.time, s.location,
                                       host_time_zone=self.host_time_zone)

    def frame(self) -> SunFrame:
        """Sun direction, sky color and light levels for the current state."""
        instant = self.instant()
        direction = solar_direction(instant, self._state.location)
        altitude = altitude_from_direction(direction)
        return SunFrame(
            instant=instant,
            direction=direction,
            altitude=altitude,
            sky=sky_color(altitude),
            light=light_levels(altitude, self._state.weather),
            light_direction=render_sun_direction(direction),
        )

    def sunlight_curve(self) -> List[int]:
        """Weather-scaled hourly lux for the current day and location."""
        s = self._state
        theoretical = daily_illuminance(s.date, s.location, host_time_zone=self.host_time_zone)
        return apply_weather(theoretical, s.weather)

    def sun_path(self) -> SunPath:
        s = self._state
        return sun_path_segments(s.date, s.location, host_time_zone=self.host_time_zone)
