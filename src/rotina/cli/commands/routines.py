"""CLI commands for day periods and routine availability."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

import typer

from ...utils.day_period import (
    DAY_PERIOD_LABELS,
    ROUTINE_TYPES,
    get_current_day_period,
    is_routine_available_now,
)
from ...utils.time import parse_instant
from ..base import BaseCLI

AtOption = Annotated[
    str | None,
    typer.Option("--at", help="ISO 8601 timestamp to evaluate instead of now"),
]


def _when(at: str | None) -> datetime | None:
    return parse_instant(at) if at else None


def period_command(at: AtOption = None) -> None:
    """Print the current day period (morning, afternoon or night)."""

    def _period() -> str:
        period = get_current_day_period(_when(at))
        return f"{period} ({DAY_PERIOD_LABELS[period]})"

    BaseCLI("routines").handle_cli_operation(operation="period", op_callable=_period, render=str)


def available_command(
    routine_type: Annotated[
        str,
        typer.Argument(help=f"Routine type: {', '.join(ROUTINE_TYPES)}"),
    ],
    at: AtOption = None,
) -> None:
    """Report whether a routine type can be started now.

    Exits with code 1 when the routine is outside its day period.
    """
    available = BaseCLI("routines").handle_cli_operation(
        operation=f"{routine_type} available",
        op_callable=lambda: is_routine_available_now(routine_type, _when(at)),
    )
    if not available:
        raise typer.Exit(1)
