"""
Unit handling for calendar arithmetic.
"""
from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

from .exceptions import InvalidArgument
from .timezones import relocalize, to_utc

UNIT_ALIASES = {
    'second': 'seconds', 'seconds': 'seconds', 'sec': 'seconds', 'secs': 'seconds',
    'minute': 'minutes', 'minutes': 'minutes', 'min': 'minutes', 'mins': 'minutes',
    'hour': 'hours', 'hours': 'hours',
    'day': 'days', 'days': 'days',
    'week': 'weeks', 'weeks': 'weeks',
    'month': 'months', 'months': 'months',
    'year': 'years', 'years': 'years',
}

# Units added on the wall clock; anything smaller is elapsed time
CALENDAR_UNITS = frozenset({'days', 'weeks', 'months', 'years'})


def normalize_unit(unit: str) -> str:
    """Map a singular, plural or short unit name to its canonical plural."""
    canonical = UNIT_ALIASES.get(str(unit).strip().lower())
    if canonical is None:
        valid = ", ".join(sorted(set(UNIT_ALIASES.values())))
        raise InvalidArgument(
            f"Unsupported unit '{unit}'. Expected one of: {valid}",
            details={'unit': unit}
        )
    return canonical


def shift(dt: datetime, amount: int, unit: str) -> datetime:
    """
    Move ``dt`` by ``amount`` units.

    Days and larger units keep the wall-clock time (months and years clamp to
    the last valid day, so Jan 31 + 1 month is Feb 28/29). Hours, minutes and
    seconds are elapsed time, so crossing a DST change moves the wall clock
    by more or less than the nominal amount.
    """
    unit = normalize_unit(unit)

    if unit in CALENDAR_UNITS:
        if unit in ('months', 'years') and int(amount) != amount:
            raise InvalidArgument(
                f"Non-integer {unit} are ambiguous: {amount}",
                details={'amount': amount, 'unit': unit}
            )
        return relocalize(dt + relativedelta(**{unit: amount}))

    delta = timedelta(**{unit: amount})
    if dt.tzinfo is None:
        return dt + delta
    return (to_utc(dt) + delta).astimezone(dt.tzinfo)
