"""clocktools: terminal stopwatch, alarm and Pomodoro timer with big digits."""

from __future__ import annotations

from dataclasses import dataclass

import typer

from . import alarm, pomodoro, stopwatch

__version__ = "0.1.0"


@dataclass(frozen=True)
class TimerCommand:
    """Declarative CLI registration entry for a timer subcommand."""

    name: str
    app: typer.Typer
    help: str
    invoke_without_command: bool = True


TIMER_COMMANDS: tuple[TimerCommand, ...] = (
    TimerCommand(name="stopwatch", app=stopwatch.app, help="Starts the stopwatch"),
    TimerCommand(name="alarm", app=alarm.app, help="Sets an alarm"),
    TimerCommand(name="pomodoro", app=pomodoro.app, help="Starts a Pomodoro timer with work and break intervals"),
)


__all__ = [
    "stopwatch",
    "alarm",
    "pomodoro",
    "TimerCommand",
    "TIMER_COMMANDS",
    "__version__",
]
