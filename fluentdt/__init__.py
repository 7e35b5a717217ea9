"""fluentdt - Fluent date/time helpers with ISO 8601 and German calendar weeks."""
from .calendar_week import CalendarWeek, compare, weeks_between
from .config import FluentConfig, set_config
from .errors import (
    FluentDateTimeError,
    WeekFormatError,
    WeekRuleError,
    DateParseError,
)
from .logging import logger, setup_logging
from .week_rule import WeekNumbering, WeekRule
from .datetime_utils.calculator import (
    calculate_week,
    german_week_of_year,
    monday_of,
    week_of_year,
    week_of_year_from_culture,
)

__version__ = "0.1.0"

__all__ = [
    'CalendarWeek',
    'compare',
    'weeks_between',
    'FluentConfig',
    'set_config',
    'FluentDateTimeError',
    'WeekFormatError',
    'WeekRuleError',
    'DateParseError',
    'WeekNumbering',
    'WeekRule',
    'calculate_week',
    'german_week_of_year',
    'monday_of',
    'week_of_year',
    'week_of_year_from_culture',
]

logger.disable("fluentdt")
