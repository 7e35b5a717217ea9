"""Date parsing and normalization utilities for week calculations."""

from datetime import date, datetime
from typing import Union

from ..errors import DateParseError

# Tried in order; the first format that fits wins
DATE_FORMATS = (
    '%Y-%m-%d',
    '%d.%m.%Y',
    '%d/%m/%Y',
    '%Y/%m/%d',
)

def parse_date_string(date_str: str) -> date:
    """
    Parse a date string into a date object.

    Args:
        date_str: A string representing a date in one of DATE_FORMATS

    Returns:
        A date object

    Raises:
        DateParseError: If the date string is invalid or in an unsupported format
    """
    text = date_str.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    raise DateParseError(f"Could not parse date string: {date_str}")

def normalize_date_arg(date_arg: Union[str, date, datetime]) -> date:
    """
    Normalize a date argument to a date object.

    Args:
        date_arg: A date argument that can be a string, date, or datetime object

    Returns:
        A date object (time of day and tzinfo are dropped)

    Raises:
        DateParseError: If the argument cannot be converted to a date
    """
    if isinstance(date_arg, datetime):
        return date_arg.date()
    elif isinstance(date_arg, date):
        return date_arg
    elif isinstance(date_arg, str):
        return parse_date_string(date_arg)
    else:
        raise DateParseError(f"Unsupported date argument type: {type(date_arg)}")
