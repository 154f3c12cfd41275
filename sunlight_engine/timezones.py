# sunlight_engine/timezones.py
"""
TIMEZONE OFFSETS: DST-AWARE UTC OFFSETS FOR IANA ZONES
======================================================

PURPOSE:
--------
Answer one question: "how many minutes east of UTC is this zone at this instant?"

The answer is NOT a property of the zone alone. "Europe/Warsaw" is +60 in
January and +120 in July, and the switch happens on a different calendar day
every year. So every lookup takes the instant it is asked about.

FAILURE MODE:
-------------
A bad identifier (typo, empty string, garbage from a saved file) must never
take the simulation down. It resolves to UTC (offset 0) and a warning is
logged; the host decides how to surface the degraded state.
"""

import datetime as dt
import logging
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)


@lru_cache(maxsize=128)
def _lookup_zone(time_zone: str) -> Optional[dt.tzinfo]:
    try:
        return ZoneInfo(time_zone)
    except (ZoneInfoNotFoundError, ValueError, TypeError, OSError) as e:
        logger.warning("Invalid timezone '%s' (%s) – falling back to UTC", time_zone, e)
        return None


def is_valid_time_zone(time_zone: str) -> bool:
    """True if the identifier resolves to a zone in the tz database."""
    if not isinstance(time_zone, str) or not time_zone:
        return False
    return _lookup_zone(time_zone) is not None


def zone_or_utc(time_zone: str) -> dt.tzinfo:
    """The tzinfo for an IANA identifier, or UTC if it does not resolve."""
    if not isinstance(time_zone, str) or not time_zone:
        logger.warning("Missing timezone %r – falling back to UTC", time_zone)
        return dt.timezone.utc
    return _lookup_zone(time_zone) or dt.timezone.utc


def resolve_offset_minutes(time_zone: str, reference: dt.datetime) -> int:
    """
    UTC offset of `time_zone` at `reference`, in minutes (positive east of UTC).

    Args:
        time_zone: IANA identifier, e.g. "America/New_York"
        reference: The instant to evaluate. Naive datetimes are read as UTC.

    Returns:
        Signed integer minutes. 0 for "UTC" and for identifiers that do not
        resolve.
    """
    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=dt.timezone.utc)

    offset = reference.astimezone(zone_or_utc(time_zone)).utcoffset()
    return int(offset.total_seconds() // 60)
