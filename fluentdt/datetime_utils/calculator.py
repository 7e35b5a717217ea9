"""Calendar week calculations: date to (year, week) and back."""

from datetime import date, datetime, timedelta
from typing import Optional, Tuple, Union

from dateutil.relativedelta import relativedelta, TH

from ..config import FluentConfig
from ..logging import logger
from ..week_rule import WeekNumbering, WeekRule
from .gregorian import day_of_week, day_of_year, iso_day_of_week, julian_day_number

YearWeek = Tuple[int, int]

def _resolve_rule(rule: Optional[WeekRule]) -> WeekRule:
    return rule if rule is not None else FluentConfig.week_rule

def _as_date(value: Union[date, datetime]) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value

def _adjust_year(value: date, week: int) -> int:
    """
    Week-numbering year for a week number computed from `value`.

    Late-December days may already be in week 1 of the next year, early
    January days may still be in the last week of the previous one.
    """
    year = value.year
    if week == 1 and value.month == 12:
        year += 1
    if week >= 52 and value.month == 1:
        year -= 1
    return year

def generic_week_of_year(value: Union[date, datetime], rule: Optional[WeekRule] = None) -> int:
    """
    Raw week number of a date under a week rule.

    This is the locale style computation: weeks start on the rule's first day
    and week 1 is the first week holding at least `min_days_in_first_week`
    days of the year. Days before week 1 belong to the last week of the
    previous year. No ISO correction is applied, so late-December days can
    come out as week 53 (or 54 with a one-day minimum).

    Args:
        value: The date to number
        rule: Week rule, defaults to FluentConfig.week_rule

    Returns:
        The week number
    """
    rule = _resolve_rule(rule)
    value = _as_date(value)

    doy = day_of_year(value) - 1
    jan1 = (day_of_week(value) - doy) % 7
    offset = (rule.first_day_of_week - jan1) % 7
    if offset != 0 and offset >= rule.min_days_in_first_week:
        offset -= 7

    days = doy - offset
    if days >= 0:
        return days // 7 + 1

    # Before week 1: continue counting from December 31st of the previous year
    return generic_week_of_year(value - timedelta(days=doy + 1), rule)

def week_of_year(value: Union[date, datetime], rule: Optional[WeekRule] = None) -> YearWeek:
    """
    International calendar week of a date, corrected towards ISO 8601.

    The generic computation labels the last days of December as week 53 even
    when they already belong to week 1 of the next year (Monday 2007-12-31 is
    such a day). When the raw week is above 52 and the date one week later
    is in week 2, the date is moved to week 1.

    Args:
        value: The date to number
        rule: Week rule, defaults to FluentConfig.week_rule (ISO 8601)

    Returns:
        (year, week) where year is the week-numbering year
    """
    rule = _resolve_rule(rule)
    value = _as_date(value)

    week = generic_week_of_year(value, rule)
    if week > 52:
        if generic_week_of_year(value + timedelta(days=7), rule) == 2:
            logger.debug(f"Week {week} of {value} corrected to week 1 of the next year")
            week = 1

    year = _adjust_year(value, week)
    if year != value.year:
        logger.debug(f"{value} belongs to week {week} of {year}")
    return year, week

def german_week_of_year(value: Union[date, datetime]) -> YearWeek:
    """
    German calendar week of a date.

    Locale independent. Based on the algorithm by Ekkehard Hess
    (borland.public.cppbuilder.language, 1999-07-29): the Julian Day Number
    is folded onto the 400/100/4-year cycles so that the remainder counts the
    days since the Monday of week 1.

    Args:
        value: The date to number

    Returns:
        (year, week) where year is the week-numbering year
    """
    value = _as_date(value)

    jd = julian_day_number(value.year, value.month, value.day)
    d4 = (jd + 31741 - (jd % 7)) % 146097 % 36524 % 1461
    leap = d4 // 1460
    d1 = ((d4 - leap) % 365) + leap
    week = d1 // 7 + 1

    return _adjust_year(value, week), week

def calculate_week(
    value: Union[date, datetime],
    numbering: WeekNumbering = WeekNumbering.INTERNATIONAL,
    rule: Optional[WeekRule] = None
) -> YearWeek:
    """Dispatch to the week algorithm selected by `numbering`."""
    if numbering is WeekNumbering.GERMAN:
        return german_week_of_year(value)
    return week_of_year(value, rule)

def week_of_year_from_culture(
    rule: WeekRule,
    value: Union[date, datetime],
    now: Optional[Union[date, datetime]] = None
) -> YearWeek:
    """
    Calendar week using a week rule as-is, without ISO correction.

    The year is inferred by comparing against the current moment: if the
    week number of `now` is smaller than the computed one, the week is taken
    to belong to the previous year. The result therefore depends on when it
    is computed; pass `now` to pin it.

    Args:
        rule: Week rule to number the date with
        value: The date to number
        now: Reference moment, defaults to today

    Returns:
        (year, week)
    """
    value = _as_date(value)
    now = _as_date(now) if now is not None else date.today()

    week = generic_week_of_year(value, rule)
    year = value.year
    if generic_week_of_year(now, rule) < week:
        logger.debug(f"Week {week} is ahead of {now}, assigning it to {year - 1}")
        year -= 1
    return year, week

def shift_week(monday: date, weeks: int, rule: Optional[WeekRule] = None) -> YearWeek:
    """
    Move a week's Monday by whole weeks and number the result with the generic rule.

    Args:
        monday: Monday of the starting week
        weeks: Number of weeks to move, may be negative
        rule: Week rule, defaults to FluentConfig.week_rule

    Returns:
        (year, week) of the shifted date
    """
    shifted = monday + timedelta(weeks=weeks)
    week = generic_week_of_year(shifted, rule)
    return _adjust_year(shifted, week), week

def monday_of(year: int, week: int) -> date:
    """
    Monday of an ISO week.

    January 4th always lies in week 1, so week 1 starts on the Monday on or
    before it. Week numbers are not validated: week 0 or 54 give the Monday
    before or after the year's week grid.

    Args:
        year: Week-numbering year
        week: Week number

    Returns:
        The Monday as a date
    """
    jan4 = date(year, 1, 4)
    week1_monday = jan4 - timedelta(days=iso_day_of_week(jan4) - 1)
    return week1_monday + timedelta(weeks=week - 1)

def sunday_of(year: int, week: int) -> date:
    """Sunday (last day) of an ISO week."""
    return monday_of(year, week) + timedelta(days=6)

def first_day_of_iso_week(year: int, week: int) -> date:
    """
    First day of an ISO 8601 week, anchored on the year's first Thursday.

    The Thursday on or before January 1st is in week 1 when January 1st is a
    Thursday, otherwise in the last week of the previous year.
    """
    thursday = date(year, 1, 1) + relativedelta(weekday=TH(-1))
    offset = week
    if generic_week_of_year(thursday, WeekRule.ISO_8601) <= 1:
        offset -= 1
    return thursday + relativedelta(weeks=offset, days=-3)

def last_day_of_iso_week(year: int, week: int) -> date:
    """Last day of an ISO 8601 week."""
    return first_day_of_iso_week(year, week) + timedelta(days=6)
