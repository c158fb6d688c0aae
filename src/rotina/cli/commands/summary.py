"""CLI command rendering a one-screen overview of the current day."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from ...utils import time as time_utils
from ...utils.day_period import DAY_PERIOD_LABELS, get_current_day_period
from ..base import get_logger, handle_errors

logger = get_logger(__name__)


def build_summary_table() -> Table:
    """Build the overview table: today, yesterday, clock time and day period."""
    now = time_utils.local_now()
    today = time_utils.today_string()
    yesterday = time_utils.yesterday_string()
    period = get_current_day_period(now)

    table = Table(title="rotina", show_header=True, header_style="bold")
    table.add_column("Item")
    table.add_column("Valor")
    table.add_row("Hoje", f"{today} ({time_utils.format_date_long(today)})")
    table.add_row("Ontem", f"{yesterday} ({time_utils.format_date_long(yesterday)})")
    table.add_row("Hora", time_utils.format_time(now.isoformat()))
    table.add_row("Período", DAY_PERIOD_LABELS[period])
    return table


def summary_command() -> None:
    """Show today, yesterday, the local clock time and the current day period."""
    with handle_errors("summary", logger=logger):
        table = build_summary_table()
    Console().print(table)
