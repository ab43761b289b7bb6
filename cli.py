#!/usr/bin/env python3
"""clocktools CLI entry point.

This aggregates subcommands from the clocktools/ package using Typer.

Subcommands:
    - stopwatch: count up until Ctrl+C
    - alarm:     count down to a duration or wall-clock time, then ring
    - pomodoro:  work/break cycles

Examples:
    py cli.py stopwatch                       # 00:00:00.000 and up
    py cli.py stopwatch -c green -s large     # choose color and size preset
    py cli.py alarm 90                        # ring in 90 seconds
    py cli.py alarm 07:30                     # ring at 07:30 (tomorrow if already past)
    py cli.py pomodoro -w 25 -b 5 -r 4        # four 25/5 cycles
"""

from typing import Optional

import typer

from clocktools import TIMER_COMMANDS, __version__
from clocktools._cli_common import new_typer_app


# Root Typer app; expose -h/--help on all levels
app = new_typer_app(
    help="Command-line stopwatch, alarm clock and Pomodoro timer",
    no_args_is_help=True,
)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"clocktools {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "-V", "--version", callback=_print_version, is_eager=True, help="Show the version and exit"
    ),
):
    """Command-line stopwatch, alarm clock and Pomodoro timer."""


# Mount sub-apps under their command names. With invoke_without_command=True,
# running, e.g., `py cli.py stopwatch` executes the stopwatch callback.
for command in TIMER_COMMANDS:
    app.add_typer(
        command.app,
        name=command.name,
        help=command.help,
        invoke_without_command=command.invoke_without_command,
    )


if __name__ == '__main__':
    # Delegate to Typer's CLI runner
    app()
