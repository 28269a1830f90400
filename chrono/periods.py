"""
Periods and Ranges

Day enumeration, named period boundaries (today, this week, this month...),
filter interval normalisation and range containment.
"""
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Any, List, NamedTuple, Optional, Union

from dateutil.relativedelta import relativedelta

from .calendar_queries import (
    first_day_of_month,
    first_day_of_week,
    first_day_of_year,
    last_day_of_month,
    last_day_of_week,
    last_day_of_year,
)
from .casting import end_of_day, parse, start_of_day
from .config import ChronoConfig, get_config
from .exceptions import ChronoError, InvalidArgument, ParseError
from .logger import get_logger
from .timezones import align, now, relocalize
from .units import shift

logger = get_logger(__name__)

Span = Union[timedelta, relativedelta]


class DateRange(NamedTuple):
    """Ordered (start, end) pair; start <= end."""
    start: datetime
    end: datetime


class Period(str, Enum):
    """Named periods understood by ``period_bounds``."""
    DAY = "DAY"
    YESTERDAY = "YESTERDAY"
    TOMORROW = "TOMORROW"
    WEEK = "WEEK"
    MONTH = "MONTH"
    YEAR = "YEAR"

    @classmethod
    def from_value(cls, tag: Union["Period", str]) -> "Period":
        """Case-insensitive lookup ('week', 'WEEK', Period.WEEK)."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(str(tag).strip().upper())
        except ValueError as e:
            valid = ", ".join(p.value for p in cls)
            raise InvalidArgument(
                f"Unsupported period type: {tag}. Expected one of: {valid}",
                details={'period': tag},
                cause=e
            ) from e


# ============================================
# DAY ENUMERATION
# ============================================

def enumerate_days(start: Any, end: Any) -> List[datetime]:
    """
    Every calendar day from ``start`` to ``end``, both included.

    Each entry is midnight of its day, in ascending order. Reversed input is
    swapped first, so ``enumerate_days(a, b) == enumerate_days(b, a)``.
    """
    first, last = align(start_of_day(start), start_of_day(end))
    if first > last:
        first, last = last, first

    days = []
    current = first
    while current <= last:
        days.append(current)
        current = shift(current, 1, 'days')
    return days


def date_range(
    start: Any,
    end: Any,
    fmt: Optional[str] = None,
    config: Optional[ChronoConfig] = None
) -> List[str]:
    """Same days as ``enumerate_days``, rendered with ``fmt`` or the configured ``date_format``."""
    if fmt is None:
        fmt = (config or get_config()).date_format
    return [day.strftime(fmt) for day in enumerate_days(start, end)]


def days_between(start: Any, end: Any) -> int:
    """Signed calendar days from ``start`` to ``end`` (times of day ignored)."""
    first, last = align(parse(start), parse(end))
    return (last.date() - first.date()).days


# ============================================
# NAMED PERIODS
# ============================================

def day_bounds(value: Any) -> DateRange:
    """00:00:00 to 23:59:59 of the value's day."""
    return DateRange(start_of_day(value), end_of_day(value))


def period_bounds(tag: Union[Period, str], reference: Optional[Any] = None) -> DateRange:
    """
    Get the boundaries of a named period around ``reference``.

    Args:
        tag: DAY, YESTERDAY, TOMORROW, WEEK, MONTH or YEAR (any case)
        reference: Instant inside the period; defaults to now

    Returns:
        DateRange from 00:00:00 of the first day to 23:59:59 of the last day

    Raises:
        InvalidArgument: If the period is not recognised
    """
    period = Period.from_value(tag)
    ref = parse(reference) if reference is not None else now()

    if period is Period.DAY:
        return day_bounds(ref)

    if period is Period.YESTERDAY:
        return day_bounds(shift(ref, -1, 'days'))

    if period is Period.TOMORROW:
        return day_bounds(shift(ref, 1, 'days'))

    if period is Period.WEEK:
        return DateRange(first_day_of_week(ref), last_day_of_week(ref))

    if period is Period.MONTH:
        return DateRange(first_day_of_month(ref), last_day_of_month(ref))

    return DateRange(first_day_of_year(ref), last_day_of_year(ref))


def today_bounds(reference: Optional[Any] = None) -> DateRange:
    return period_bounds(Period.DAY, reference)


def months_of_year(year: int) -> List[DateRange]:
    """Boundaries of each of the twelve months of ``year``."""
    if not date.min.year <= year <= date.max.year:
        raise InvalidArgument(f"Invalid year: {year}", details={'year': year})
    return [
        DateRange(
            first_day_of_month(datetime(year, month, 1)),
            last_day_of_month(datetime(year, month, 1))
        )
        for month in range(1, 13)
    ]


# ============================================
# FILTER INTERVALS
# ============================================

def normalize_filter_interval(
    start: Optional[Any] = None,
    end: Optional[Any] = None,
    default_span: Optional[Span] = None,
    reference: Optional[Any] = None,
    config: Optional[ChronoConfig] = None
) -> DateRange:
    """
    Turn an optional start/end pair into a usable, ordered interval.

    - Neither given: ``end`` is now (or ``reference``), ``start`` is ``end - span``
    - Only one given: the other is derived by adding/subtracting the span
    - Reversed: swapped
    - Both ends at the same time of day (i.e. no time was specified): the
      interval is widened to 00:00:00 of the start day and 23:59:59 of the
      end day

    Args:
        start: Optional start, any instant-like value
        end: Optional end, any instant-like value
        default_span: timedelta or relativedelta; defaults to the configured
            number of months
        reference: "Now" used when both ends are missing
        config: Optional ChronoConfig supplying the default span

    Returns:
        DateRange with start <= end
    """
    if default_span is None:
        months = (config or get_config()).filter_span_months
        default_span = relativedelta(months=months)

    start_dt = parse(start) if start is not None else None
    end_dt = parse(end) if end is not None else None

    if start_dt is None and end_dt is None:
        end_dt = parse(reference) if reference is not None else now()
        start_dt = relocalize(end_dt - default_span)
    elif end_dt is None:
        end_dt = relocalize(start_dt + default_span)
    elif start_dt is None:
        start_dt = relocalize(end_dt - default_span)

    start_dt, end_dt = align(start_dt, end_dt)

    if start_dt > end_dt:
        start_dt, end_dt = end_dt, start_dt

    if start_dt.time() == end_dt.time():
        start_dt = start_of_day(start_dt)
        end_dt = end_of_day(end_dt)

    return DateRange(start_dt, end_dt)


def is_in_range(value: Any, start: Any, end: Any) -> bool:
    """
    Inclusive check that ``value`` falls between the days of ``start`` and ``end``.

    ``start`` counts from its midnight and ``end`` up to its 23:59:59.
    Unparseable input gives False.
    """
    try:
        dt = parse(value)
        lower = start_of_day(start)
        upper = end_of_day(end)
    except ChronoError:
        return False

    dt, lower = align(dt, lower)
    dt, upper = align(dt, upper)
    return lower <= dt <= upper


def interval_from_string(text: str) -> DateRange:
    """
    Parse "start/end" (e.g. "15-02-2020/17-02-2020") into a DateRange.

    Dates are read day-first. A single date gives that whole day.

    Raises:
        ParseError: If either side cannot be parsed
    """
    if not isinstance(text, str) or not text.strip():
        raise ParseError("Empty interval string", details={'value': text})

    parts = [part.strip() for part in text.split('/')]

    if len(parts) == 1:
        return day_bounds(parse(parts[0], dayfirst=True))

    if len(parts) != 2:
        logger.warning("malformed_interval", value=text)
        raise ParseError(f"Invalid interval: '{text}'. Expected 'start/end'", details={'value': text})

    first, last = align(parse(parts[0], dayfirst=True), parse(parts[1], dayfirst=True))
    if first > last:
        first, last = last, first
    return DateRange(first, last)
