"""Immutable (year, week) value built on the week calculations."""

import re
from datetime import date, datetime, timedelta
from typing import Iterator, List, Optional, Union

from .config import FluentConfig
from .datetime_utils.calculator import (
    calculate_week,
    monday_of,
    shift_week,
    sunday_of,
    week_of_year_from_culture,
)
from .datetime_utils.parser import normalize_date_arg
from .errors import WeekFormatError
from .week_rule import WeekNumbering, WeekRule

TOKEN_LENGTH = 7
_DIGITS = re.compile(r"[0-9]+")
_FORMAT_HINT = "format is either WW/YYYY or YYYY/WW"

DateLike = Union[str, date, datetime]


class CalendarWeek:
    """
    A calendar week identified by its week-numbering year and week number.

    Values are immutable and compare lexicographically on (year, week).
    Comparisons against None never raise: == is False, != is True and the
    ordering operators are False.

    Direct construction does not check the week range. A week such as 54 is
    kept as given and monday() returns whatever date lies that many weeks
    after week 1.
    """

    __slots__ = ('_year', '_week')

    def __init__(self, year: int, week: int):
        object.__setattr__(self, '_year', int(year))
        object.__setattr__(self, '_week', int(week))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def year(self) -> int:
        return self._year

    @property
    def week(self) -> int:
        return self._week

    # construction

    @classmethod
    def from_date(
        cls,
        value: DateLike,
        numbering: Union[WeekNumbering, bool, None] = None,
        rule: Optional[WeekRule] = None
    ) -> 'CalendarWeek':
        """
        Calendar week containing a date.

        Args:
            value: date, datetime or date string
            numbering: WeekNumbering to use. A bool selects the German rule
                when True and the international rule when False. Defaults to
                FluentConfig.numbering.
            rule: Week rule for the international numbering

        Returns:
            CalendarWeek
        """
        if isinstance(numbering, bool):
            numbering = WeekNumbering.GERMAN if numbering else WeekNumbering.INTERNATIONAL
        elif numbering is None:
            numbering = FluentConfig.numbering
        year, week = calculate_week(normalize_date_arg(value), numbering, rule)
        return cls(year, week)

    @classmethod
    def from_culture(cls, rule: WeekRule, value: DateLike, now: Optional[DateLike] = None) -> 'CalendarWeek':
        """Calendar week under a week rule, year inferred against `now` (see week_of_year_from_culture)."""
        if now is not None:
            now = normalize_date_arg(now)
        year, week = week_of_year_from_culture(rule, normalize_date_arg(value), now)
        return cls(year, week)

    @classmethod
    def parse(cls, token: str) -> 'CalendarWeek':
        """
        Parse a 'YYYY/WW' or 'WW/YYYY' token.

        The two fields are told apart by magnitude, not position: the smaller
        number is the week and the larger one the year, so '2018/01' and
        '01/2018' give the same week. Two-digit years are not supported.

        Raises:
            WeekFormatError: If the token is empty, not exactly two '/'
                separated fields of digits, not 7 characters long, or names a
                year below 100
        """
        if token is None or not token.strip():
            raise WeekFormatError("calendar week must not be empty or None")

        parts = token.split('/')
        if len(parts) != 2 or len(token) != TOKEN_LENGTH:
            raise WeekFormatError(_FORMAT_HINT)
        if not all(_DIGITS.fullmatch(part) for part in parts):
            raise WeekFormatError(_FORMAT_HINT)

        first, second = (int(part) for part in parts)
        week, year = (first, second) if first < second else (second, first)
        if year < 100:
            raise WeekFormatError(f"two-digit years are not supported: {token}")
        return cls(year, week)

    @classmethod
    def copy(cls, other: 'CalendarWeek') -> 'CalendarWeek':
        """New instance with the same year and week as `other`."""
        return cls(other.year, other.week)

    def __copy__(self) -> 'CalendarWeek':
        return type(self)(self._year, self._week)

    def __deepcopy__(self, memo) -> 'CalendarWeek':
        return self.__copy__()

    def __reduce__(self):
        return (type(self), (self._year, self._week))

    # dates

    def monday(self) -> date:
        """First day (Monday) of the week."""
        return monday_of(self._year, self._week)

    def sunday(self) -> date:
        """Last day (Sunday) of the week."""
        return sunday_of(self._year, self._week)

    def days(self) -> List[date]:
        monday = self.monday()
        return [monday + timedelta(days=i) for i in range(7)]

    def contains(self, value: DateLike) -> bool:
        """True if the date falls between this week's Monday and Sunday."""
        value = normalize_date_arg(value)
        return self.monday() <= value <= self.sunday()

    def __iter__(self) -> Iterator[date]:
        return iter(self.days())

    # arithmetic

    def add(self, weeks: int, rule: Optional[WeekRule] = None) -> 'CalendarWeek':
        """
        Week that lies `weeks` weeks after this one.

        The Monday is shifted and the result is numbered again with the
        generic week rule (not the ISO corrected one), so crossing a year
        boundary can give a different answer than week + weeks.
        The year of the result goes through the same week-numbering year
        adjustment as week_of_year, not the calendar year of the shifted
        Monday: with a first-full-week rule, Monday 2018-01-01 is reported as
        week 53 of 2017.

        Args:
            weeks: Number of weeks, may be negative
            rule: Week rule for numbering the result, defaults to FluentConfig.week_rule

        Returns:
            CalendarWeek
        """
        year, week = shift_week(self.monday(), weeks, rule)
        return type(self)(year, week)

    def __add__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            return self.add(other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, CalendarWeek):
            return weeks_between(self, other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.add(-other)
        return NotImplemented

    # comparison

    def _key(self):
        return (self._year, self._week)

    def __eq__(self, other):
        if other is None:
            return False
        if not isinstance(other, CalendarWeek):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other):
        if other is None:
            return False
        if not isinstance(other, CalendarWeek):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other):
        if other is None:
            return False
        if not isinstance(other, CalendarWeek):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other):
        if other is None:
            return False
        if not isinstance(other, CalendarWeek):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other):
        if other is None:
            return False
        if not isinstance(other, CalendarWeek):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self):
        return hash(self._key())

    # formatting

    def __str__(self) -> str:
        return f"{self._year:04d}/{self._week:02d}"

    def __repr__(self) -> str:
        return f"CalendarWeek(year={self._year}, week={self._week})"


def weeks_between(first: CalendarWeek, second: CalendarWeek) -> int:
    """
    Signed number of weeks from `second` to `first`.

    Both Mondays sit on the same 7-day grid, so the division is exact.
    """
    return (first.monday() - second.monday()).days // 7

def compare(first: Optional[CalendarWeek], second: Optional[CalendarWeek]) -> Optional[int]:
    """
    Three-way comparison: -1, 0 or 1, or None when either side is None.
    """
    if first is None or second is None:
        return None
    if first == second:
        return 0
    return -1 if first < second else 1
