"""
chrono - Date/time convenience helpers

Free functions for parsing, formatting, arithmetic and range computation over
calendar dates. Every function accepts a datetime, date, UNIX timestamp or
date string and returns new values; inputs are never modified.

All helpers are exported here for consistent access.
"""

# ============================================
# CONFIGURATION & LOGGING
# ============================================
from .config import ChronoConfig, LoggingConfig, load_config, get_config, get_timezone
from .logger import setup_logger, get_logger, configure_logging

# ============================================
# ERRORS
# ============================================
from .exceptions import ChronoError, ParseError, InvalidArgument

# ============================================
# TIMEZONES & CONSTRUCTION
# ============================================
from .timezones import resolve_timezone, localize, now
from .factory import today, create, from_timestamp, from_format

# ============================================
# CASTING / PARSING
# ============================================
from .casting import (
    parse,
    parse_or_none,
    timestamp_to_datetime,
    is_valid_date_string,
    parse_weekday_name,
    set_time_of_day,
    is_valid_time_string,
    start_of_day,
    end_of_day
)
from .relative import parse_relative, days_until_weekday

# ============================================
# CALENDAR QUERIES
# ============================================
from .calendar_queries import (
    first_day_of_week,
    first_day_of_month,
    first_day_of_year,
    last_day_of_week,
    last_day_of_month,
    last_day_of_year,
    weekday,
    day_of_year,
    month_day,
    year,
    month_abbrev,
    month_name,
    weekday_name,
    is_leap_year,
    days_in_month
)

# ============================================
# ARITHMETIC
# ============================================
from .computing import (
    add_units,
    add_days,
    add_hours,
    add_minutes,
    add_seconds,
    subtract_days,
    subtract_hours,
    subtract_minutes,
    subtract_seconds,
    add_time,
    diff_days,
    diff_seconds,
    diff_minutes,
    remaining_days,
    human_relative_time,
    convert_days_to_minutes,
    convert_hours_to_minutes,
    convert_minutes_to_hours
)

# ============================================
# PERIODS & RANGES
# ============================================
from .periods import (
    DateRange,
    Period,
    enumerate_days,
    date_range,
    days_between,
    day_bounds,
    period_bounds,
    today_bounds,
    months_of_year,
    normalize_filter_interval,
    is_in_range,
    interval_from_string
)

# ============================================
# FORMATTING
# ============================================
from .formatting import format_datetime, format_date, to_string, format_date_day, date_as_string

__all__ = [
    # Configuration & logging
    "ChronoConfig",
    "LoggingConfig",
    "load_config",
    "get_config",
    "get_timezone",
    "setup_logger",
    "get_logger",
    "configure_logging",

    # Errors
    "ChronoError",
    "ParseError",
    "InvalidArgument",

    # Timezones & construction
    "resolve_timezone",
    "localize",
    "now",
    "today",
    "create",
    "from_timestamp",
    "from_format",

    # Casting / parsing
    "parse",
    "parse_or_none",
    "timestamp_to_datetime",
    "is_valid_date_string",
    "parse_weekday_name",
    "set_time_of_day",
    "is_valid_time_string",
    "start_of_day",
    "end_of_day",
    "parse_relative",
    "days_until_weekday",

    # Calendar queries
    "first_day_of_week",
    "first_day_of_month",
    "first_day_of_year",
    "last_day_of_week",
    "last_day_of_month",
    "last_day_of_year",
    "weekday",
    "day_of_year",
    "month_day",
    "year",
    "month_abbrev",
    "month_name",
    "weekday_name",
    "is_leap_year",
    "days_in_month",

    # Arithmetic
    "add_units",
    "add_days",
    "add_hours",
    "add_minutes",
    "add_seconds",
    "subtract_days",
    "subtract_hours",
    "subtract_minutes",
    "subtract_seconds",
    "add_time",
    "diff_days",
    "diff_seconds",
    "diff_minutes",
    "remaining_days",
    "human_relative_time",
    "convert_days_to_minutes",
    "convert_hours_to_minutes",
    "convert_minutes_to_hours",

    # Periods & ranges
    "DateRange",
    "Period",
    "enumerate_days",
    "date_range",
    "days_between",
    "day_bounds",
    "period_bounds",
    "today_bounds",
    "months_of_year",
    "normalize_filter_interval",
    "is_in_range",
    "interval_from_string",

    # Formatting
    "format_datetime",
    "format_date",
    "to_string",
    "format_date_day",
    "date_as_string",
]
