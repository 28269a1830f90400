"""
Timezone resolution helpers.

The library never keeps a process-wide "current timezone". Every function that
needs one takes an optional ``tz`` argument and falls back to the configured
value (see ``chrono.config.get_timezone``), where ``"local"`` means naive host
wall-clock time.
"""
from datetime import datetime, timezone, tzinfo
from typing import Optional, Tuple, Union

import pytz

from .config import ChronoConfig, ConfigDefaults, get_config, get_timezone
from .exceptions import InvalidArgument
from .logger import get_logger

logger = get_logger(__name__)

TimezoneLike = Union[str, tzinfo, None]


def resolve_timezone(
    tz: TimezoneLike = None,
    config: Optional[ChronoConfig] = None
) -> Optional[tzinfo]:
    """
    Turn a timezone name or object into a tzinfo.

    Args:
        tz: IANA name, tzinfo instance, or None to use the configured zone
        config: Optional ChronoConfig consulted when ``tz`` is None

    Returns:
        A tzinfo, or None when naive local time should be used

    Raises:
        InvalidArgument: If the name is not a known timezone
    """
    if isinstance(tz, tzinfo):
        return tz

    if tz is None:
        tz = get_timezone(config or get_config())

    if tz.lower() == ConfigDefaults.TIMEZONE_LOCAL:
        return None

    try:
        return pytz.timezone(tz)
    except pytz.UnknownTimeZoneError as e:
        logger.warning("unknown_timezone", timezone=tz)
        raise InvalidArgument(f"Unknown timezone: {tz}", details={'timezone': tz}, cause=e) from e


def localize(dt: datetime, tz: tzinfo) -> datetime:
    """
    Place ``dt`` in ``tz``.

    Naive values are interpreted as wall-clock time in ``tz`` (pytz zones
    need ``localize`` for the correct DST offset); aware values are converted.
    """
    if dt.tzinfo is None:
        if hasattr(tz, 'localize'):
            return tz.localize(dt)
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


def relocalize(dt: datetime) -> datetime:
    """
    Recompute the UTC offset after the wall-clock fields of ``dt`` changed.

    pytz zones pin a fixed offset to each value, so ``replace()`` or
    calendar arithmetic across a DST change leaves a stale offset behind.
    """
    if dt.tzinfo is not None and hasattr(dt.tzinfo, 'localize'):
        return dt.tzinfo.localize(dt.replace(tzinfo=None))
    return dt


def now(tz: TimezoneLike = None, config: Optional[ChronoConfig] = None) -> datetime:
    """Current instant in the resolved zone (naive when the zone is local)."""
    zone = resolve_timezone(tz, config)
    if zone is None:
        return datetime.now()
    return datetime.now(zone)


def align(a: datetime, b: datetime) -> Tuple[datetime, datetime]:
    """
    Make two datetimes comparable.

    When exactly one side is naive it is read as wall-clock time in the
    other side's zone.
    """
    if a.tzinfo is None and b.tzinfo is not None:
        return localize(a, b.tzinfo), b
    if b.tzinfo is None and a.tzinfo is not None:
        return a, localize(b, a.tzinfo)
    return a, b


def zone_name(tz: Optional[tzinfo]) -> Optional[str]:
    """IANA name of a pytz or zoneinfo zone, if it has one."""
    if tz is None:
        return None
    return getattr(tz, 'zone', None) or getattr(tz, 'key', None)


def same_zone(a: datetime, b: datetime) -> bool:
    """True when both values share a zone, so wall-clock differences are meaningful."""
    if a.tzinfo is b.tzinfo:
        return True
    name = zone_name(a.tzinfo)
    return name is not None and name == zone_name(b.tzinfo)


def to_utc(dt: datetime) -> datetime:
    """Aware values converted to UTC; naive values returned unchanged."""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc)
