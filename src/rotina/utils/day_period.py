"""Day periods that decide when a routine can be started.

A routine of type morning/afternoon/night is only available while the local
clock is inside that period. Custom routines are always available.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal, get_args

from . import time as time_utils

DayPeriod = Literal["morning", "afternoon", "night"]
RoutineType = Literal["morning", "afternoon", "night", "custom"]

ROUTINE_TYPES: tuple[str, ...] = get_args(RoutineType)

# Period boundaries (local hour, inclusive start)
MORNING_START_HOUR = 5
AFTERNOON_START_HOUR = 12
NIGHT_START_HOUR = 18

DAY_PERIOD_LABELS: dict[str, str] = {
    "morning": "Manhã",
    "afternoon": "Tarde",
    "night": "Noite",
}


def get_current_day_period(when: datetime | None = None) -> DayPeriod:
    """Return the day period the given moment falls in.

    Args:
        when: Moment to classify. Aware datetimes are converted to local time;
            naive ones are taken as local already. Defaults to now.

    Returns:
        "morning" for [05:00, 12:00), "afternoon" for [12:00, 18:00),
        "night" otherwise.
    """
    if when is None:
        when = time_utils.local_now()
    elif when.tzinfo is not None:
        when = when.astimezone()

    hour = when.hour
    if MORNING_START_HOUR <= hour < AFTERNOON_START_HOUR:
        return "morning"
    if AFTERNOON_START_HOUR <= hour < NIGHT_START_HOUR:
        return "afternoon"
    return "night"


def is_routine_available_now(routine_type: str, when: datetime | None = None) -> bool:
    """Return whether a routine of the given type may be started at `when`.

    Raises:
        ValueError: If routine_type is not one of ROUTINE_TYPES.
    """
    if routine_type not in ROUTINE_TYPES:
        raise ValueError(
            f"Unknown routine type {routine_type!r}; expected one of {', '.join(ROUTINE_TYPES)}"
        )
    if routine_type == "custom":
        return True
    return routine_type == get_current_day_period(when)
