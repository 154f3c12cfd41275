# sunlight_engine/instant.py
"""
SIMULATED INSTANTS: FROM SLIDER VALUES TO ABSOLUTE TIME
=======================================================

PURPOSE:
--------
The UI speaks in the TARGET location's wall clock ("noon in Warsaw on day 172").
Solar position math needs an absolute instant. The host, meanwhile, lives in
its own timezone and expresses datetimes in its own clock.

This module turns (day_of_year, minute_of_day, Location) into a datetime in the
HOST's clock that names the same absolute moment as that wall-clock time at
the target location.

THE CORRECTION:
---------------
    reference         = host-local midnight of (year, day_of_year)
    offset_difference = target_offset(reference) - host_offset(reference)
    wall_clock        = reference + (minute_of_day - offset_difference) minutes

Example: host in UTC, target Europe/Warsaw in July (UTC+2)
    offset_difference = 120 - 0 = 120
    noon in Warsaw    → 12:00 - 120 min = 10:00 host time (10:00 UTC) ✓

The subtraction can leave [0, 1439]: minute 0 with a +10 difference lands on
the previous day at 23:50. The minutes are added to the UTC form of host
midnight, then converted back to the host zone, so days, months and years
roll over and a DST switch on the host clock that day moves nothing.

CACHING:
--------
offset_difference depends on (day_of_year, time_zone, year, host zone) only,
never on minute_of_day or latitude/longitude. It is memoized on exactly those
keys, so a new day or zone always recomputes (DST is date dependent).
"""

import datetime as dt
import logging
from functools import lru_cache
from typing import Iterable, List, Optional

from .config import CONFIG
from .dates import calendar_date
from .model import Location
from .timezones import resolve_offset_minutes, zone_or_utc

logger = logging.getLogger(__name__)


def clamp_day_of_year(day_of_year: int) -> int:
    """Clamp to [1, 365]; out-of-range input is a caller bug, so log it."""
    clamped = min(max(int(day_of_year), 1), CONFIG.days_in_year)
    if clamped != day_of_year:
        logger.warning("day_of_year %s out of range, clamped to %d", day_of_year, clamped)
    return clamped


def clamp_minute_of_day(minute_of_day: int) -> int:
    """Clamp to [0, 1439]."""
    clamped = min(max(int(minute_of_day), 0), CONFIG.minutes_in_day - 1)
    if clamped != minute_of_day:
        logger.warning("minute_of_day %s out of range, clamped to %d", minute_of_day, clamped)
    return clamped


def _midnight(day_of_year: int, year: int) -> dt.datetime:
    return dt.datetime.combine(calendar_date(day_of_year, year), dt.time(0))


@lru_cache(maxsize=1024)
def offset_difference_minutes(
    day_of_year: int,
    time_zone: str,
    year: int,
    host_time_zone: str,
) -> int:
    """
    Target zone offset minus host zone offset, evaluated at host-local
    midnight of the given day.
    """
    reference = _midnight(day_of_year, year).replace(tzinfo=zone_or_utc(host_time_zone))
    target = resolve_offset_minutes(time_zone, reference)
    host = resolve_offset_minutes(host_time_zone, reference)
    return target - host


def simulated_instants(
    day_of_year: int,
    minutes: Iterable[int],
    location: Location,
    year: Optional[int] = None,
    host_time_zone: Optional[str] = None,
) -> List[dt.datetime]:
    """
    Simulated instants for several wall-clock minutes of one day.

    The offset difference is computed once for the day. Minutes are NOT
    clamped here: samplers pass 1440 to reach the next midnight.

    Returns:
        Timezone-aware datetimes in the host zone.
    """
    day_of_year = clamp_day_of_year(day_of_year)
    year = year or dt.date.today().year
    host_time_zone = host_time_zone or CONFIG.host_time_zone

    diff = offset_difference_minutes(day_of_year, location.time_zone, year, host_time_zone)
    midnight = _midnight(day_of_year, year)
    host_zone = zone_or_utc(host_time_zone)

    # Step along the absolute timeline so a host DST switch later in the day
    # does not shift the result
    start = midnight.replace(tzinfo=host_zone).astimezone(dt.timezone.utc)
    return [
        (start + dt.timedelta(minutes=minute - diff)).astimezone(host_zone)
        for minute in minutes
    ]


def build_simulated_instant(
    day_of_year: int,
    minute_of_day: int,
    location: Location,
    year: Optional[int] = None,
    host_time_zone: Optional[str] = None,
) -> dt.datetime:
    """
    The host-clock datetime for `minute_of_day` wall-clock time at `location`.

    Args:
        day_of_year: 1-365 on the non-leap calendar (clamped)
        minute_of_day: 0-1439 (clamped)
        location: Target location; only its time_zone matters here
        year: Calendar year, defaults to the current one
        host_time_zone: IANA id of the host clock, defaults to CONFIG.host_time_zone

    Returns:
        Timezone-aware datetime. `.astimezone(timezone.utc)` gives the
        absolute moment.
    """
    minute_of_day = clamp_minute_of_day(minute_of_day)
    return simulated_instants(day_of_year, [minute_of_day], location, year, host_time_zone)[0]
