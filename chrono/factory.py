"""
Datetime construction helpers.
"""
from datetime import datetime
from typing import Any, Optional

from .casting import parse, start_of_day
from .config import ChronoConfig
from .exceptions import ParseError
from .logger import get_logger
from .timezones import TimezoneLike, localize, now, resolve_timezone

logger = get_logger(__name__)


def today(tz: TimezoneLike = None, config: Optional[ChronoConfig] = None) -> datetime:
    """Midnight of the current day in the resolved zone."""
    return start_of_day(now(tz, config))


def create(value: Any, tz: TimezoneLike = None) -> datetime:
    """
    Build a datetime from an instant-like value.

    Args:
        value: datetime, date, timestamp or date string
        tz: When given, aware results are converted to this zone and naive
            results are read as wall-clock time in it

    Returns:
        datetime
    """
    dt = parse(value, tz)
    if tz is None:
        return dt

    zone = resolve_timezone(tz)
    if zone is None:
        return dt
    return localize(dt, zone)


def from_timestamp(timestamp: float, tz: TimezoneLike = None) -> datetime:
    """Datetime for a UNIX timestamp in the resolved zone."""
    return parse(timestamp, tz)


def from_format(fmt: str, text: str, tz: TimezoneLike = None) -> datetime:
    """
    Strictly parse ``text`` with a strftime pattern.

    Raises:
        ParseError: If ``text`` does not match ``fmt``
    """
    try:
        dt = datetime.strptime(text, fmt)
    except (TypeError, ValueError) as e:
        logger.warning("format_mismatch", value=text, format=fmt)
        raise ParseError(
            'Invalid date/time string or format',
            details={'value': text, 'format': fmt},
            cause=e
        ) from e

    if dt.tzinfo is not None:
        # %z supplied an offset
        return dt

    zone = resolve_timezone(tz)
    if zone is None:
        return dt
    return localize(dt, zone)
