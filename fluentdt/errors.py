"""Custom exceptions for the fluent date/time helpers."""

class FluentDateTimeError(Exception):
    """Base class for fluentdt errors."""
    pass

class WeekFormatError(FluentDateTimeError, ValueError):
    """Raised when a calendar week token cannot be parsed."""
    pass

class WeekRuleError(FluentDateTimeError, ValueError):
    """Raised when a week rule, locale or numbering scheme is invalid."""
    pass

class DateParseError(FluentDateTimeError, ValueError):
    """Raised when a date string cannot be parsed."""
    pass
