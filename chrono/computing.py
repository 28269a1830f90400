"""
Date Arithmetic

Adding and subtracting units, signed differences and human-readable elapsed
time. Every difference follows one sign convention: the result is positive
when the second argument is later than the first.
"""
from datetime import datetime
from typing import Any, Optional

from dateutil.relativedelta import relativedelta

from .casting import parse
from .logger import get_logger
from .timezones import align, now, same_zone, to_utc
from .units import shift

logger = get_logger(__name__)

JUST_NOW_LABEL = "Just now"

# Largest first; seconds are covered by JUST_NOW_LABEL
_RELATIVE_UNITS = ('years', 'months', 'days', 'hours', 'minutes')


# ============================================
# ADDITION / SUBTRACTION
# ============================================

def add_units(value: Any, amount: int, unit: str) -> datetime:
    """
    Add ``amount`` units to an instant-like value.

    Args:
        value: datetime, date, timestamp or date string
        amount: Units to add; negative values subtract
        unit: seconds, minutes, hours, days, weeks, months or years
            (singular forms accepted)

    Returns:
        A new datetime; the input is never modified

    Raises:
        ParseError: If ``value`` cannot be parsed
        InvalidArgument: If ``unit`` is not supported
    """
    return shift(parse(value), amount, unit)


def add_days(value: Any, days: int = 1) -> datetime:
    return add_units(value, days, 'days')


def add_hours(value: Any, hours: int = 1) -> datetime:
    return add_units(value, hours, 'hours')


def add_minutes(value: Any, minutes: int = 15) -> datetime:
    return add_units(value, minutes, 'minutes')


def add_seconds(value: Any, seconds: int = 1) -> datetime:
    return add_units(value, seconds, 'seconds')


def subtract_days(value: Any, days: int = 1) -> datetime:
    return add_units(value, -days, 'days')


def subtract_hours(value: Any, hours: int = 1) -> datetime:
    return add_units(value, -hours, 'hours')


def subtract_minutes(value: Any, minutes: int = 1) -> datetime:
    return add_units(value, -minutes, 'minutes')


def subtract_seconds(value: Any, seconds: int = 1) -> datetime:
    return add_units(value, -seconds, 'seconds')


def add_time(value: Any, time_value: Any) -> datetime:
    """
    Add the time of day of ``time_value`` (hours, minutes, seconds) to ``value``.

    ``add_time("2023-01-01 10:00", "02:30")`` gives 2023-01-01 12:30.
    """
    dt = parse(value)
    clock = parse(time_value)
    dt = shift(dt, clock.hour, 'hours')
    dt = shift(dt, clock.minute, 'minutes')
    return shift(dt, clock.second, 'seconds')


# ============================================
# DIFFERENCES
# ============================================

def _pair(a: Any, b: Any):
    return align(parse(a), parse(b))


def diff_days(a: Any, b: Any, normalize: bool = False) -> int:
    """
    Signed number of whole days from ``a`` to ``b``.

    Args:
        a: Start instant
        b: End instant
        normalize: Truncate both to midnight first, so only calendar days count

    Returns:
        Positive when ``b`` is after ``a``; partial days are truncated toward zero
    """
    first, second = _pair(a, b)

    if normalize:
        return (second.date() - first.date()).days

    if same_zone(first, second):
        # Calendar difference: a DST change does not eat a day
        delta = second.replace(tzinfo=None) - first.replace(tzinfo=None)
    else:
        delta = to_utc(second) - to_utc(first)

    if delta.total_seconds() < 0:
        return -((-delta).days)
    return delta.days


def diff_seconds(a: Any, b: Any) -> int:
    """Signed seconds from ``a`` to ``b`` (positive when ``b`` is later)."""
    first, second = _pair(a, b)
    return int((to_utc(second) - to_utc(first)).total_seconds())


def diff_minutes(a: Any, b: Any) -> float:
    """Signed minutes from ``a`` to ``b`` (positive when ``b`` is later)."""
    first, second = _pair(a, b)
    return (to_utc(second) - to_utc(first)).total_seconds() / 60


def remaining_days(target: Any, reference: Optional[Any] = None) -> int:
    """
    Calendar days from ``reference`` (default: now) to ``target``.

    Returns:
        Positive for a future target, 0 on the same day, negative for a past one
    """
    target_dt = parse(target)
    reference_dt = parse(reference) if reference is not None else now(target_dt.tzinfo)
    return diff_days(reference_dt, target_dt, normalize=True)


def human_relative_time(value: Any, reference: Optional[Any] = None) -> str:
    """
    Get a human-readable elapsed time between ``value`` and ``reference``.

    Uses the single largest non-zero unit among years, months, days, hours
    and minutes, e.g. '5 minutes', '1 hour', '3 days'. Anything under a
    minute is 'Just now'. Future values are described the same way.

    Args:
        value: The instant to describe
        reference: Defaults to now

    Returns:
        Human-readable time difference
    """
    dt = parse(value)
    reference_dt = parse(reference) if reference is not None else now(dt.tzinfo)
    dt, reference_dt = align(dt, reference_dt)

    if abs((to_utc(reference_dt) - to_utc(dt)).total_seconds()) < 60:
        return JUST_NOW_LABEL

    earlier, later = sorted((dt, reference_dt), key=to_utc)
    if later.tzinfo is not None:
        earlier = earlier.astimezone(later.tzinfo)
    elapsed = relativedelta(later.replace(tzinfo=None), earlier.replace(tzinfo=None))

    for unit in _RELATIVE_UNITS:
        amount = getattr(elapsed, unit)
        if amount:
            label = unit[:-1] if amount == 1 else unit
            return f"{amount} {label}"

    # Sub-minute wall-clock gap across a DST change
    logger.debug("relative_time_below_minute", value=str(dt))
    return JUST_NOW_LABEL


# ============================================
# UNIT CONVERSION
# ============================================

def convert_days_to_minutes(days: int = 1) -> int:
    return days * 24 * 60


def convert_hours_to_minutes(hours: int = 1) -> int:
    return hours * 60


def convert_minutes_to_hours(minutes: int = 1) -> float:
    return minutes / 60
