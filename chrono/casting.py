"""
Casting and Parsing

Turns strings, timestamps and dates into datetime values, and validates date
and time strings.
"""
import re
from datetime import date, datetime
from numbers import Real
from typing import Any, Optional

import dateutil.parser

from .constants import WEEKDAYS
from .exceptions import InvalidArgument, ParseError
from .logger import get_logger
from .relative import parse_relative
from .timezones import TimezoneLike, localize, now, relocalize, resolve_timezone

logger = get_logger(__name__)

# Loose form accepted by set_time_of_day; range checks happen afterwards
_TIME_OF_DAY_RE = re.compile(r'^(\d{1,2}):(\d{2})(?::(\d{2}))?$', re.ASCII)
# Strict zero-padded 24-hour clock
_STRICT_TIME_RE = re.compile(r'^([01]\d|2[0-3]):[0-5]\d(:[0-5]\d)?$', re.ASCII)
_TIMESTAMP_RE = re.compile(r'^@(-?\d+(?:\.\d+)?)$', re.ASCII)
_WEEKDAY_DIGIT_RE = re.compile(r'[1-7]')


def parse(value: Any, tz: TimezoneLike = None, dayfirst: bool = False) -> datetime:
    """
    Coerce an instant-like value into a datetime.

    Accepts:
    - datetime: returned unchanged (datetimes are immutable)
    - date: midnight of that day
    - int/float: UNIX timestamp
    - str: relative expressions ("tomorrow", "3 days ago"), "@<timestamp>",
      or anything python-dateutil understands ("2023-06-15 14:30")

    Args:
        value: The value to convert
        tz: Zone for timestamps, relative expressions and naive strings;
            defaults to the configured zone
        dayfirst: Read ambiguous numeric dates as day/month ("01-02-2020")

    Returns:
        datetime

    Raises:
        ParseError: If the value cannot be interpreted as a date/time
    """
    if isinstance(value, datetime):
        return value

    if isinstance(value, date):
        return _in_zone(datetime(value.year, value.month, value.day), tz)

    if isinstance(value, Real) and not isinstance(value, bool):
        return _from_timestamp(float(value), tz)

    if not isinstance(value, str):
        raise ParseError(
            f"Cannot build a datetime from {type(value).__name__}",
            details={'value': repr(value)}
        )

    text = value.strip()
    if not text:
        raise ParseError("Cannot build a datetime from an empty string")

    match = _TIMESTAMP_RE.match(text)
    if match:
        return _from_timestamp(float(match.group(1)), tz)

    relative = parse_relative(text, now(tz))
    if relative is not None:
        return relative

    try:
        parsed = _parse_text(text, dayfirst)
    except (ValueError, OverflowError) as e:
        logger.warning("unparseable_date", value=text)
        raise ParseError(f"Invalid date/time string: '{text}'", details={'value': text}, cause=e) from e

    return _in_zone(parsed, tz)


def parse_or_none(value: Any, tz: TimezoneLike = None) -> Optional[datetime]:
    """Like ``parse`` but lets None through."""
    if value is None:
        return None
    return parse(value, tz)


def _parse_text(text: str, dayfirst: bool) -> datetime:
    """dateutil parse; ISO 8601 text stays year-month-day even when ``dayfirst`` is set."""
    if dayfirst:
        try:
            return dateutil.parser.isoparse(text)
        except ValueError:
            logger.debug("not_iso_format", value=text)
    return dateutil.parser.parse(text, dayfirst=dayfirst)


def _in_zone(dt: datetime, tz: TimezoneLike) -> datetime:
    """Localise a naive value into the resolved zone; aware values are kept."""
    if dt.tzinfo is not None:
        return dt
    zone = resolve_timezone(tz)
    if zone is None:
        return dt
    return localize(dt, zone)


def _from_timestamp(timestamp: float, tz: TimezoneLike) -> datetime:
    zone = resolve_timezone(tz)
    try:
        return datetime.fromtimestamp(timestamp, zone)
    except (OverflowError, OSError, ValueError) as e:
        raise ParseError(f"Timestamp out of range: {timestamp}", details={'timestamp': timestamp}, cause=e) from e


def timestamp_to_datetime(timestamp: int, tz: TimezoneLike = None) -> Optional[datetime]:
    """
    Convert a non-negative UNIX timestamp.

    Returns:
        datetime, or None for negative or out-of-range timestamps
    """
    if timestamp < 0:
        return None
    try:
        return _from_timestamp(timestamp, tz)
    except ParseError:
        return None


def is_valid_date_string(text: str, fmt: str = "%Y-%m-%d") -> bool:
    """
    Check that ``text`` is a real date written exactly in ``fmt``.

    The string must parse with ``fmt`` and formatting the result with ``fmt``
    must give back the same string, which rejects impossible dates
    ("2023-02-30") as well as unpadded or otherwise non-canonical input.
    """
    if not isinstance(text, str):
        return False
    try:
        parsed = datetime.strptime(text, fmt)
    except ValueError:
        return False
    return parsed.strftime(fmt) == text


def parse_weekday_name(name: str) -> int:
    """
    Get the weekday number for an English day name.

    Args:
        name: Full or 3-letter name in any case ("Monday", "sun"), or a digit 1-7

    Returns:
        Weekday number (1=Monday to 7=Sunday)

    Raises:
        InvalidArgument: If the name is not recognised
    """
    key = str(name).strip().lower()

    if key in WEEKDAYS:
        return WEEKDAYS[key]

    if _WEEKDAY_DIGIT_RE.fullmatch(key):
        return int(key)

    raise InvalidArgument(f"Invalid day: {name}", details={'day': name})


def set_time_of_day(value: Any, time_str: str) -> datetime:
    """
    Return ``value`` with its time of day replaced.

    Args:
        value: Instant-like value
        time_str: "HH:MM" or "HH:MM:SS"

    Raises:
        InvalidArgument: If the time is malformed or out of range
    """
    match = _TIME_OF_DAY_RE.fullmatch(time_str) if isinstance(time_str, str) else None
    if not match:
        raise InvalidArgument(
            'Invalid time format. Expected HH:MM or HH:MM:SS',
            details={'time': time_str}
        )

    hours = int(match.group(1))
    minutes = int(match.group(2))
    seconds = int(match.group(3) or 0)

    if hours > 23 or minutes > 59 or seconds > 59:
        raise InvalidArgument(
            'Invalid time values. Hours: 0-23, Minutes: 0-59, Seconds: 0-59',
            details={'time': time_str}
        )

    dt = parse(value)
    return relocalize(dt.replace(hour=hours, minute=minutes, second=seconds, microsecond=0))


def is_valid_time_string(text: str) -> bool:
    """Strict 24-hour HH:MM or HH:MM:SS, zero padded."""
    if not isinstance(text, str):
        return False
    return _STRICT_TIME_RE.fullmatch(text) is not None


def start_of_day(value: Any) -> datetime:
    """Midnight (00:00:00) of the value's calendar day, zone preserved."""
    dt = parse(value)
    return relocalize(dt.replace(hour=0, minute=0, second=0, microsecond=0))


def end_of_day(value: Any) -> datetime:
    """23:59:59 of the value's calendar day, zone preserved."""
    dt = parse(value)
    return relocalize(dt.replace(hour=23, minute=59, second=59, microsecond=0))
