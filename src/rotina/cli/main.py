from __future__ import annotations

import logging
from typing import Annotated

import typer

from .base import configure_logging, set_log_level
from .commands.dates import (
    days_ago_command,
    label_command,
    range_command,
    time_command,
    today_command,
    yesterday_command,
)
from .commands.routines import available_command, period_command
from .commands.summary import summary_command

configure_logging()
app = typer.Typer(
    help="Routine diary date helpers (pt-BR)",
    context_settings={"help_option_names": ["-h", "--help"]},
    no_args_is_help=True,
)


@app.callback()
def root(
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Enable debug logging"),
    ] = False,
) -> None:
    """Calendar-date labels, clock times and day periods for the routine diary."""
    if verbose:
        set_log_level(logging.DEBUG)


app.command("today")(today_command)
app.command("yesterday")(yesterday_command)
app.command("label")(label_command)
app.command("time")(time_command)
app.command("days-ago")(days_ago_command)
app.command("range")(range_command)
app.command("period")(period_command)
app.command("available")(available_command)
app.command("summary")(summary_command)


def main() -> None:
    """Main entry point for package CLI.

    Invokes the Typer application, which handles command parsing and
    execution.

    Side Effects:
        - Processes CLI arguments and executes commands.
        - May exit with non-zero code on errors.
    """
    app()


if __name__ == "__main__":
    main()
