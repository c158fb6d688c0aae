"""CLI commands for calendar dates, labels and clock times."""

from __future__ import annotations

from typing import Annotated

import typer

from ...utils.time import (
    assert_civil_date,
    build_date_range,
    days_ago,
    format_date_label,
    format_time,
    today_string,
    yesterday_string,
)
from ..base import BaseCLI

DEFAULT_RANGE_DAYS = 7


def today_command() -> None:
    """Print today's calendar date (YYYY-MM-DD, local timezone)."""
    BaseCLI("dates").handle_cli_operation(operation="today", op_callable=today_string, render=str)


def yesterday_command() -> None:
    """Print yesterday's calendar date (YYYY-MM-DD, local timezone)."""
    BaseCLI("dates").handle_cli_operation(
        operation="yesterday", op_callable=yesterday_string, render=str
    )


def label_command(
    date: Annotated[str, typer.Argument(help="Calendar date (YYYY-MM-DD)")],
) -> None:
    """Print the display label for a calendar date ("Hoje", "Ontem", or weekday/day/month)."""

    def _label() -> str:
        assert_civil_date(date)
        return format_date_label(date)

    BaseCLI("dates").handle_cli_operation(operation="label", op_callable=_label, render=str)


def time_command(
    instant: Annotated[str, typer.Argument(help="ISO 8601 timestamp, e.g. 2024-03-15T14:30:00Z")],
) -> None:
    """Print the local HH:MM clock time of a timestamp."""
    BaseCLI("dates").handle_cli_operation(
        operation="time", op_callable=lambda: format_time(instant), render=str
    )


def days_ago_command(
    instant: Annotated[str, typer.Argument(help="ISO 8601 timestamp")],
) -> None:
    """Print how many calendar days ago a timestamp occurred (0 = today)."""
    BaseCLI("dates").handle_cli_operation(
        operation="days-ago", op_callable=lambda: days_ago(instant), render=str
    )


def range_command(
    days: Annotated[
        int,
        typer.Option("-d", "--days", min=1, help="Number of days, ending today"),
    ] = DEFAULT_RANGE_DAYS,
) -> None:
    """List the last N calendar dates with their display labels, oldest first."""

    def _range() -> list[str]:
        return [f"{day}  {format_date_label(day)}" for day in build_date_range(days)]

    BaseCLI("dates").handle_cli_operation(operation="range", op_callable=_range)
