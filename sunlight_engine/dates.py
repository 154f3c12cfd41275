# sunlight_engine/dates.py
"""
Calendar helpers for the simulation's fixed 365-day year.

The date slider speaks in day-of-year on a non-leap calendar, so Feb 29 never
exists here, even in leap years. Everything that turns a day-of-year into a
calendar date goes through this module.
"""

import datetime as dt
from typing import Optional, Tuple

MONTH_NAMES = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
               'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']
DAYS_IN_MONTH = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


def day_of_year(month: int, day: int) -> int:
    """Day of year (1-365) for a non-leap year. month is 1-12."""
    return sum(DAYS_IN_MONTH[:month - 1]) + day


def month_and_day(doy: int) -> Tuple[int, int]:
    """
    Inverse of day_of_year().

    Returns (month 1-12, day of month). Days past 365 stay in December,
    which keeps the mapping total for callers that have not clamped.
    """
    month_index = 0
    remaining = doy
    while remaining > DAYS_IN_MONTH[month_index] and month_index < 11:
        remaining -= DAYS_IN_MONTH[month_index]
        month_index += 1
    return month_index + 1, remaining


def calendar_date(doy: int, year: int) -> dt.date:
    """The concrete date for a simulation day in the given year."""
    month, day = month_and_day(doy)
    return dt.date(year, month, day)


def today_day_of_year(today: Optional[dt.date] = None) -> int:
    """Day of year for today's month/day, on the non-leap calendar."""
    today = today or dt.date.today()
    # Feb 29 maps onto Feb 28
    return day_of_year(today.month, min(today.day, DAYS_IN_MONTH[today.month - 1]))


def format_date(doy: int) -> str:
    """'Jun 21' style label."""
    month, day = month_and_day(doy)
    return f"{MONTH_NAMES[month - 1]} {day}"


def format_time(minute_of_day: int) -> str:
    """'HH:MM' label for a minute of the day."""
    hours, minutes = divmod(minute_of_day, 60)
    return f"{hours:02d}:{minutes:02d}"
