"""
Formatting

Renders datetimes with strftime patterns.
"""
from typing import Any, Optional

from .casting import parse
from .config import ChronoConfig, ConfigDefaults, get_config
from .exceptions import ChronoError, InvalidArgument


def format_datetime(
    value: Any,
    pattern: Optional[str] = None,
    config: Optional[ChronoConfig] = None
) -> str:
    """
    Render an instant-like value with a strftime pattern.

    Args:
        value: datetime, date, timestamp or date string
        pattern: strftime pattern, e.g. "%Y-%m-%d"; an empty pattern gives "".
            None uses the configured ``datetime_format``
        config: Optional ChronoConfig supplying the default pattern

    Raises:
        InvalidArgument: If ``value`` cannot be turned into a datetime
    """
    try:
        dt = parse(value)
    except ChronoError as e:
        raise InvalidArgument(
            f"Invalid date format provided: {value}",
            details={'value': repr(value)},
            cause=e
        ) from e

    if pattern is None:
        pattern = (config or get_config()).datetime_format
    if not pattern:
        return ""
    return dt.strftime(pattern)


def format_date(value: Any, pattern: str = ConfigDefaults.DAY_FORMAT_DEFAULT) -> str:
    return format_datetime(value, pattern)


def to_string(value: Any, config: Optional[ChronoConfig] = None) -> str:
    """Rendered with the configured ``datetime_format`` ('YYYY-MM-DD HH:MM:SS' by default)."""
    return format_datetime(value, config=config)


def format_date_day(value: Any) -> str:
    """'DD/MM/YYYY'"""
    return format_datetime(value, ConfigDefaults.DAY_FORMAT_DEFAULT)


def date_as_string(value: Any = 'now') -> str:
    """'HH:MM YYYY-Mon-DD', e.g. '14:30 2023-Jun-15'."""
    return format_datetime(value, ConfigDefaults.DATE_AS_STRING_FORMAT)
