"""Calendar-date and clock-time helpers for the routine diary.

This module provides a single source of truth for the date handling used by
the diary and progress views:
- Calendar date strings: YYYY-MM-DD, always derived in the host's local timezone
- Instants: ISO 8601 timestamps with a timezone designator (...Z or ...+HH:MM)
- pt-BR rendering of labels and clock times through Babel

Every function reads the current time through `local_now()`, never directly
from `datetime.now()`.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from datetime import date, datetime, timedelta
from typing import Any

from babel import dates as babel_dates

from ..global_config import (
    DATE_LABEL_FORMAT,
    DATE_LONG_FORMAT,
    DATE_SHORT_FORMAT,
    DEFAULT_LOCALE,
    MAX_STREAK_DAYS,
    MS_PER_DAY,
    TIME_FORMAT,
    TODAY_LABEL,
    YESTERDAY_LABEL,
)

logger = logging.getLogger(__name__)

# Clock times used when turning a calendar date back into an instant
LOCAL_MIDNIGHT = "00:00:00"
LOCAL_NOON = "12:00:00"

# Calendar date shape: exactly YYYY-MM-DD
CIVIL_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def local_now() -> datetime:
    """Return the current time as a tz-aware datetime in the local timezone."""
    return datetime.now().astimezone()


def parse_instant(iso_str: str) -> datetime:
    """Parse an ISO 8601 timestamp into a tz-aware datetime.

    Accepts the ``Z`` suffix and any sub-second precision. A naive timestamp
    is interpreted in the local timezone.

    Args:
        iso_str: Timestamp string, e.g. "2024-03-15T14:30:00.000Z".

    Returns:
        Tz-aware datetime (in whatever offset the string carried).

    Raises:
        ValueError: If the string is not an ISO 8601 timestamp.
    """
    dt = datetime.fromisoformat(iso_str)
    if dt.tzinfo is None:
        return dt.astimezone()
    return dt


def _local_datetime_at(date_str: str, clock: str) -> datetime:
    # Naive datetime + astimezone() resolves the offset in effect at that local time
    return datetime.fromisoformat(f"{date_str}T{clock}").astimezone()


def today_string() -> str:
    """Return today's calendar date (YYYY-MM-DD) in the local timezone."""
    return local_now().date().isoformat()


def yesterday_string() -> str:
    """Return yesterday's calendar date (YYYY-MM-DD) in the local timezone.

    Computed by stepping back exactly 24 hours from the current instant and
    reading the local date of the shifted instant. On a day with a DST
    transition the step can land on the wrong calendar day.
    """
    shifted = local_now() - timedelta(milliseconds=MS_PER_DAY)
    return shifted.astimezone().date().isoformat()


def calendar_date_of(iso_str: str) -> str:
    """Return the local calendar date (YYYY-MM-DD) on which an instant falls.

    Args:
        iso_str: ISO 8601 timestamp.

    Returns:
        Calendar date string as observed in the local timezone.

    Raises:
        ValueError: If iso_str cannot be parsed.
    """
    return parse_instant(iso_str).astimezone().date().isoformat()


def format_date_label(date_str: str, *, locale: str = DEFAULT_LOCALE) -> str:
    """Convert a calendar date into a human-readable label.

    - today -> "Hoje"
    - yesterday -> "Ontem"
    - anything else -> "segunda-feira, 15 de jan."

    The date is read at local noon so the rendered day cannot drift across a
    midnight boundary.

    Args:
        date_str: Calendar date string (YYYY-MM-DD).
        locale: Babel locale identifier used for weekday and month names.

    Returns:
        Display label.

    Raises:
        ValueError: If date_str is not a valid calendar date.
    """
    if date_str == today_string():
        return TODAY_LABEL
    if date_str == yesterday_string():
        return YESTERDAY_LABEL
    noon = _local_datetime_at(date_str, LOCAL_NOON)
    return babel_dates.format_date(noon.date(), format=DATE_LABEL_FORMAT, locale=locale)


def format_date_short(date_str: str, *, locale: str = DEFAULT_LOCALE) -> str:
    """Render a calendar date as "dd/MM"."""
    noon = _local_datetime_at(date_str, LOCAL_NOON)
    return babel_dates.format_date(noon.date(), format=DATE_SHORT_FORMAT, locale=locale)


def format_date_long(date_str: str, *, locale: str = DEFAULT_LOCALE) -> str:
    """Render a calendar date as abbreviated weekday plus "dd/MM"."""
    noon = _local_datetime_at(date_str, LOCAL_NOON)
    return babel_dates.format_date(noon.date(), format=DATE_LONG_FORMAT, locale=locale)


def format_time(iso_str: str, *, locale: str = DEFAULT_LOCALE) -> str:
    """Format an ISO timestamp as a local HH:MM clock time.

    Example: "2024-03-15T14:30:00.000Z" -> "11:30" on a host in UTC-3.

    Args:
        iso_str: ISO 8601 timestamp.
        locale: Babel locale identifier.

    Returns:
        Five-character "HH:MM" string, 24-hour clock.

    Raises:
        ValueError: If iso_str cannot be parsed.
    """
    local_dt = parse_instant(iso_str).astimezone()
    return babel_dates.format_time(local_dt, format=TIME_FORMAT, locale=locale)


def days_ago(iso_str: str) -> int:
    """Return how many calendar days ago an instant occurred.

    0 = today, 1 = yesterday, and so on. Both dates are anchored at local
    midnight and the difference is rounded to the nearest whole day, which
    absorbs the 23h/25h days around DST changes. Future instants give a
    negative number.

    Args:
        iso_str: ISO 8601 timestamp.

    Returns:
        Whole number of calendar days between the instant's local date and today.

    Raises:
        ValueError: If iso_str cannot be parsed.
    """
    then = _local_datetime_at(calendar_date_of(iso_str), LOCAL_MIDNIGHT)
    today = _local_datetime_at(today_string(), LOCAL_MIDNIGHT)
    diff_ms = (today - then) / timedelta(milliseconds=1)
    return round(diff_ms / MS_PER_DAY)


def build_date_range(days: int) -> list[str]:
    """Return the last `days` calendar dates, oldest first, ending with today.

    Steps back by calendar day rather than by 24 hours.

    Args:
        days: Number of dates to produce. Zero or negative yields an empty list.

    Returns:
        List of calendar date strings (YYYY-MM-DD).
    """
    today = local_now().date()
    return [(today - timedelta(days=offset)).isoformat() for offset in range(days - 1, -1, -1)]


def group_by_date(
    records: Iterable[Mapping[str, Any]],
    *,
    key: str = "completed_at",
) -> dict[str, list[Mapping[str, Any]]]:
    """Group records by the local calendar date of one of their timestamps.

    Args:
        records: Mappings carrying an ISO 8601 timestamp under `key`.
        key: Name of the timestamp field.

    Returns:
        Dict of calendar date -> records, newest date first. Records keep
        their input order inside each date.

    Raises:
        KeyError: If a record has no `key` field.
        ValueError: If a timestamp cannot be parsed.
    """
    groups: dict[str, list[Mapping[str, Any]]] = {}
    for record in records:
        groups.setdefault(calendar_date_of(record[key]), []).append(record)
    logger.debug("Grouped records into %d date(s)", len(groups))
    return {day: groups[day] for day in sorted(groups, reverse=True)}


def streak_length(dates: Iterable[str]) -> int:
    """Count consecutive calendar days with activity, ending today.

    Walks back from today one calendar day at a time and stops at the first
    date missing from `dates`. Capped at MAX_STREAK_DAYS.

    Args:
        dates: Calendar date strings on which something happened.

    Returns:
        Streak length in days (0 when today has no activity).
    """
    active = set(dates)
    today = local_now().date()
    streak = 0
    for offset in range(MAX_STREAK_DAYS):
        if (today - timedelta(days=offset)).isoformat() not in active:
            break
        streak += 1
    return streak


def assert_civil_date(s: str) -> None:
    """Validate that a string is a calendar date (YYYY-MM-DD).

    Args:
        s: String to validate.

    Raises:
        ValueError: If string is not YYYY-MM-DD format.
    """
    if not isinstance(s, str):
        raise ValueError(f"Expected string, got {type(s).__name__}: {s}")

    if len(s) != 10:
        raise ValueError(
            f"Calendar date must be exactly 10 characters (YYYY-MM-DD), got {len(s)}: {s}"
        )

    if not CIVIL_DATE_PATTERN.match(s):
        raise ValueError(f"Invalid calendar date format (expected YYYY-MM-DD): {s}")

    try:
        date.fromisoformat(s)
    except ValueError as e:
        raise ValueError(f"Invalid calendar date format (expected YYYY-MM-DD): {s}") from e
