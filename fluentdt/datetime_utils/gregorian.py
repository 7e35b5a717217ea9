"""Minimal Gregorian calendar helpers used by the week calculations."""

from datetime import date, datetime
from typing import Union

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

def is_leap_year(year: int) -> bool:
    """Return True if the given Gregorian year has a February 29th."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

def days_in_month(year: int, month: int) -> int:
    """
    Return the number of days in a month.

    Raises:
        ValueError: If the month is not within 1..12
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be within 1..12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]

def day_of_year(value: Union[date, datetime]) -> int:
    """1-based ordinal of the date within its year."""
    return value.timetuple().tm_yday

def day_of_week(value: Union[date, datetime]) -> int:
    """Monday = 0 .. Sunday = 6."""
    return value.weekday()

def iso_day_of_week(value: Union[date, datetime]) -> int:
    """Monday = 1 .. Sunday = 7 (Sunday is 7, not 0)."""
    return value.isoweekday()

def julian_day_number(year: int, month: int, day: int) -> int:
    """
    Julian Day Number of a Gregorian date.

    Uses the usual March-based normalisation so that February is the last
    month of the computational year and leap days need no branching.

    Args:
        year: Gregorian year
        month: Month 1..12
        day: Day of month

    Returns:
        The JDN as an integer (2000-01-01 is 2451545)
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045
