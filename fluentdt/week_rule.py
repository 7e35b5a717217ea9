"""Week-counting rules and the choice between international and German numbering."""

from dataclasses import dataclass
from enum import Enum

from babel import Locale, UnknownLocaleError

from .errors import WeekRuleError

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)

class WeekNumbering(Enum):
    """
    Defines which algorithm turns a date into a (year, week) pair.

    INTERNATIONAL: generic week-of-year from a WeekRule, corrected towards ISO 8601
    GERMAN: locale-free Julian-day based algorithm
    """
    INTERNATIONAL = "international"
    GERMAN = "german"

    @classmethod
    def from_string(cls, value: str) -> 'WeekNumbering':
        """Convert string to WeekNumbering enum value."""
        try:
            return cls(value.lower())
        except ValueError:
            valid = [m.value for m in cls]
            raise WeekRuleError(f"Invalid week numbering: {value}. Must be one of: {', '.join(valid)}")


@dataclass(frozen=True)
class WeekRule:
    """
    Week-counting convention used by the generic week-of-year computation.

    first_day_of_week: 0 (Monday) .. 6 (Sunday), same numbering as date.weekday()
    min_days_in_first_week: how many days of the first week must fall into the
        new year. 1 counts the week holding January 1st, 4 is ISO 8601, 7 only
        counts full weeks.
    """
    first_day_of_week: int = MONDAY
    min_days_in_first_week: int = 4

    def __post_init__(self):
        if not 0 <= self.first_day_of_week <= 6:
            raise WeekRuleError(f"first_day_of_week must be within 0..6, got {self.first_day_of_week}")
        if not 1 <= self.min_days_in_first_week <= 7:
            raise WeekRuleError(f"min_days_in_first_week must be within 1..7, got {self.min_days_in_first_week}")

    @classmethod
    def from_locale(cls, name: str) -> 'WeekRule':
        """Build a rule from the CLDR week data of a locale (e.g. 'de_DE', 'en_US')."""
        try:
            locale = Locale.parse(name)
        except (UnknownLocaleError, ValueError) as e:
            raise WeekRuleError(f"Unknown locale: {name}") from e
        return cls(locale.first_week_day, locale.min_week_days)

    def __str__(self) -> str:
        return f"first_day={self.first_day_of_week}, min_days={self.min_days_in_first_week}"


WeekRule.ISO_8601 = WeekRule(MONDAY, 4)
WeekRule.US = WeekRule(SUNDAY, 1)
