"""
Date and week utilities.

This package provides the calendar arithmetic behind CalendarWeek:
- Gregorian calendar helpers (leap years, day of week, Julian Day Number)
- Date string parsing and normalization
- Week number calculations under the international and German rules
"""

from .gregorian import days_in_month, day_of_week, is_leap_year, julian_day_number
from .parser import parse_date_string, normalize_date_arg
from .calculator import (
    calculate_week,
    first_day_of_iso_week,
    generic_week_of_year,
    german_week_of_year,
    last_day_of_iso_week,
    monday_of,
    sunday_of,
    week_of_year,
    week_of_year_from_culture,
)

__all__ = [
    'days_in_month',
    'day_of_week',
    'is_leap_year',
    'julian_day_number',
    'parse_date_string',
    'normalize_date_arg',
    'calculate_week',
    'first_day_of_iso_week',
    'generic_week_of_year',
    'german_week_of_year',
    'last_day_of_iso_week',
    'monday_of',
    'sunday_of',
    'week_of_year',
    'week_of_year_from_culture',
]
