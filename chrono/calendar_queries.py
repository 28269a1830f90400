"""
Calendar Queries

First/last day of week, month and year, plus weekday, day-of-year and
month/weekday label lookups. Weeks run Monday (1) to Sunday (7).
"""
import calendar
from datetime import datetime, timedelta
from typing import Any, Optional, Union

from .casting import end_of_day, parse, start_of_day
from .constants import MONTH_ABBREVIATIONS, UNKNOWN_LABEL, WEEKDAY_NAMES
from .exceptions import InvalidArgument
from .timezones import now


def first_day_of_week(value: Any) -> datetime:
    """Monday 00:00:00 of the week containing ``value``."""
    dt = parse(value)
    return start_of_day(dt - timedelta(days=dt.isoweekday() - 1))


def first_day_of_month(value: Any) -> datetime:
    """The 1st of the month at 00:00:00."""
    return start_of_day(parse(value).replace(day=1))


def first_day_of_year(value: Any) -> datetime:
    """January 1st at 00:00:00."""
    return start_of_day(parse(value).replace(month=1, day=1))


def last_day_of_week(value: Any) -> datetime:
    """Sunday 23:59:59 of the week containing ``value``."""
    dt = parse(value)
    return end_of_day(dt + timedelta(days=7 - dt.isoweekday()))


def last_day_of_month(value: Any) -> datetime:
    """Last calendar day of the month at 23:59:59."""
    dt = parse(value)
    return end_of_day(dt.replace(day=days_in_month(dt.month, dt.year)))


def last_day_of_year(value: Any) -> datetime:
    """December 31st at 23:59:59."""
    return end_of_day(parse(value).replace(month=12, day=31))


def weekday(value: Any) -> int:
    """Weekday number (1=Monday to 7=Sunday)."""
    return parse(value).isoweekday()


def day_of_year(value: Any) -> int:
    """Day of the year (1-366), January 1st being 1."""
    return parse(value).timetuple().tm_yday


def month_day(value: Any) -> int:
    return parse(value).day


def year(value: Any) -> int:
    return parse(value).year


def month_abbrev(month: int) -> str:
    """
    Three-letter uppercase month abbreviation.

    Args:
        month: Month position (1-12)

    Returns:
        'JAN'..'DEC', or 'UNK' for anything outside 1-12
    """
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        return UNKNOWN_LABEL
    return MONTH_ABBREVIATIONS[month - 1]


def month_name(value: Union[int, Any]) -> str:
    """Month abbreviation for a month number or an instant-like value."""
    if isinstance(value, int) and not isinstance(value, bool):
        return month_abbrev(value)
    return month_abbrev(parse(value).month)


def weekday_name(value: Union[int, Any]) -> str:
    """
    Uppercase English weekday name ('MONDAY'..'SUNDAY').

    Integers are read as weekday numbers (1=Monday to 7=Sunday) and give
    'UNK' when out of range; anything else is parsed as a date.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        if not 1 <= value <= 7:
            return UNKNOWN_LABEL
        return WEEKDAY_NAMES[value - 1]
    return WEEKDAY_NAMES[parse(value).isoweekday() - 1]


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def days_in_month(month: int, year: Optional[int] = None) -> int:
    """
    Number of days in a month, leap years included.

    Args:
        month: Month position (1-12)
        year: Defaults to the current year

    Raises:
        InvalidArgument: If the month is outside 1-12
    """
    if not 1 <= month <= 12:
        raise InvalidArgument(f"Invalid month: {month}", details={'month': month})
    if year is None:
        year = now().year
    _, last_day = calendar.monthrange(year, month)
    return last_day
