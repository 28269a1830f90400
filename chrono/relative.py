"""
Relative Date Expressions

Handles inputs like:
- "now", "today", "midnight", "tomorrow", "yesterday"
- "+3 days", "-2 hours", "1 week"
- "in 3 days", "2 weeks ago"
- "monday", "next tuesday", "last friday"
"""
import re
from datetime import datetime, timedelta
from typing import Optional

from .constants import WEEKDAYS
from .logger import get_logger
from .timezones import relocalize
from .units import UNIT_ALIASES, shift

logger = get_logger(__name__)

_UNIT_PATTERN = "|".join(sorted(UNIT_ALIASES, key=len, reverse=True))

_OFFSET_RE = re.compile(rf'^([+-]?\d+)\s*({_UNIT_PATTERN})$')
_AGO_RE = re.compile(rf'^(\d+)\s*({_UNIT_PATTERN})\s+ago$')
_IN_RE = re.compile(rf'^in\s+(\d+)\s*({_UNIT_PATTERN})$')
_WEEKDAY_RE = re.compile(r'^(?:(next|last|this)\s+)?([a-z]+)$')


def days_until_weekday(current_weekday: int, target_weekday: int) -> int:
    """
    Calculate days until target weekday.

    Args:
        current_weekday: Current day (1=Monday, 7=Sunday)
        target_weekday: Target day (1=Monday, 7=Sunday)

    Returns:
        Number of days until target weekday (1-7, never 0)
    """
    days_ahead = (target_weekday - current_weekday) % 7

    if days_ahead == 0:
        # Target is today, go to next week
        days_ahead = 7

    return days_ahead


def _midnight(dt: datetime) -> datetime:
    return relocalize(dt.replace(hour=0, minute=0, second=0, microsecond=0))


def parse_relative(text: str, reference: datetime) -> Optional[datetime]:
    """
    Resolve a relative date expression against ``reference``.

    Day-level keywords and weekday names resolve to midnight; unit offsets
    keep the reference time of day.

    Args:
        text: Expression such as "tomorrow" or "3 days ago"
        reference: The instant the expression is relative to

    Returns:
        datetime, or None when ``text`` is not a relative expression
    """
    query = " ".join(text.lower().split())

    if query == 'now':
        return reference

    if query in ('today', 'midnight'):
        return _midnight(reference)

    if query == 'tomorrow':
        return _midnight(shift(reference, 1, 'days'))

    if query == 'yesterday':
        return _midnight(shift(reference, -1, 'days'))

    match = _OFFSET_RE.match(query)
    if match:
        return shift(reference, int(match.group(1)), match.group(2))

    match = _AGO_RE.match(query)
    if match:
        return shift(reference, -int(match.group(1)), match.group(2))

    match = _IN_RE.match(query)
    if match:
        return shift(reference, int(match.group(1)), match.group(2))

    match = _WEEKDAY_RE.match(query)
    if match and match.group(2) in WEEKDAYS:
        modifier = match.group(1)
        target = WEEKDAYS[match.group(2)]
        current = reference.isoweekday()

        if modifier == 'next':
            days = days_until_weekday(current, target)
        elif modifier == 'last':
            days = -days_until_weekday(target, current)
        else:
            # Bare name or "this": today if it matches, else the coming one
            days = (target - current) % 7

        return _midnight(reference + timedelta(days=days))

    logger.debug("not_a_relative_expression", text=text)
    return None
