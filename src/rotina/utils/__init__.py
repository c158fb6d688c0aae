"""Utility modules.

This package provides shared utilities used across the codebase.
"""

from .day_period import (
    DAY_PERIOD_LABELS,
    ROUTINE_TYPES,
    DayPeriod,
    RoutineType,
    get_current_day_period,
    is_routine_available_now,
)
from .time import (
    assert_civil_date,
    build_date_range,
    calendar_date_of,
    days_ago,
    format_date_label,
    format_date_long,
    format_date_short,
    format_time,
    group_by_date,
    local_now,
    parse_instant,
    streak_length,
    today_string,
    yesterday_string,
)

__all__ = [
    # Calendar dates and clock times
    "assert_civil_date",
    "build_date_range",
    "calendar_date_of",
    "days_ago",
    "format_date_label",
    "format_date_long",
    "format_date_short",
    "format_time",
    "group_by_date",
    "local_now",
    "parse_instant",
    "streak_length",
    "today_string",
    "yesterday_string",
    # Day periods
    "DAY_PERIOD_LABELS",
    "ROUTINE_TYPES",
    "DayPeriod",
    "RoutineType",
    "get_current_day_period",
    "is_routine_available_now",
]
