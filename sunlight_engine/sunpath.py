# sunlight_engine/sunpath.py
"""
SUN PATH: DAY AND NIGHT ARCS ACROSS THE SKY DOME
================================================

PURPOSE:
--------
Sample the sun's direction through a whole simulated day and split the
trajectory into polylines above the horizon (day) and below it (night), so a
renderer can draw them in different styles.

SAMPLING:
---------
Every 15 minutes of the target location's wall clock, from minute 0 through
minute 1440 inclusive: 97 samples. The last sample is the following midnight,
so the arc closes.

SEGMENTATION:
-------------
Walk the samples in time order with one open "day run" and one open "night
run". Whenever the altitude sign flips, the run that just ended is flushed
and the other kind starts. Whatever is still open at the end is flushed too.

Tie-break: a sample exactly on the horizon (y == 0) counts as DAY (y >= 0).
This is the geometric horizon; the lighting fade band in lighting.py is a
separate, perceptual threshold.
"""

from dataclasses import dataclass, field
from typing import List

import numpy as np

from .config import CONFIG
from .instant import simulated_instants
from .model import Location
from .solar import solar_directions

DAY = 'day'
NIGHT = 'night'


@dataclass
class PathSegment:
    """A contiguous run of sun directions on one side of the horizon."""
    kind: str
    points: np.ndarray  # (n, 3)

    def __len__(self) -> int:
        return len(self.points)


@dataclass
class SunPath:
    """Ordered day/night segments for one day."""
    segments: List[PathSegment] = field(default_factory=list)

    @property
    def day(self) -> List[np.ndarray]:
        return [s.points for s in self.segments if s.kind == DAY]

    @property
    def night(self) -> List[np.ndarray]:
        return [s.points for s in self.segments if s.kind == NIGHT]

    @property
    def n_samples(self) -> int:
        return sum(len(s) for s in self.segments)


def sample_minutes(step: int = None) -> List[int]:
    """Minutes 0..1440 inclusive at the sampling step."""
    step = step or CONFIG.sun_path_step_minutes
    return list(range(0, CONFIG.minutes_in_day + 1, step))


def segment_path(points: np.ndarray) -> SunPath:
    """
    Split an ordered (n, 3) array of sun directions into day/night runs.
    """
    path = SunPath()
    day_run: List[np.ndarray] = []
    night_run: List[np.ndarray] = []

    for point in points:
        if point[1] >= 0:  # sun is up
            if night_run:
                path.segments.append(PathSegment(NIGHT, np.array(night_run)))
                night_run = []
            day_run.append(point)
        else:
            if day_run:
                path.segments.append(PathSegment(DAY, np.array(day_run)))
                day_run = []
            night_run.append(point)

    # At most one of these is non-empty
    if day_run:
        path.segments.append(PathSegment(DAY, np.array(day_run)))
    if night_run:
        path.segments.append(PathSegment(NIGHT, np.array(night_run)))
    return path


def sun_path_segments(day_of_year: int, location: Location, **instant_kwargs) -> SunPath:
    """
    Day/night sun path polylines for a day at a location.

    Args:
        day_of_year: 1-365
        location: Target location
        **instant_kwargs: year / host_time_zone, forwarded to the instant builder

    Returns:
        SunPath whose segments alternate strictly between day and night and
        together hold every sample.
    """
    instants = simulated_instants(day_of_year, sample_minutes(), location, **instant_kwargs)
    return segment_path(solar_directions(instants, location))
