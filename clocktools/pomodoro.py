"""CLI: Pomodoro cycles of work and break countdowns.

Each cycle is a work phase followed by a break phase. The bell rings at the
end of every phase; between cycles a short announcement is shown before the
next work phase starts. Ctrl+C ends the session at any point.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional

import typer

from ._cli_common import color_option, new_typer_app, size_option, timer_session
from ._cli_output import info
from .cancel import CancellationToken
from .loops import COUNTDOWN_INTERVAL, run_countdown
from .notify import Notifier, default_notifier
from .palette import Color
from .timefmt import format_ms


CYCLE_PAUSE = 3.0   # seconds the between-cycle announcement stays up
DONE_MESSAGE = "POMODORO DONE!"


@dataclass(frozen=True)
class PomodoroPlan:
    """Phase lengths in seconds and the number of work/break cycles."""

    work_seconds: float
    break_seconds: float
    repeats: int = 1

    def __post_init__(self) -> None:
        if self.work_seconds <= 0 or self.break_seconds <= 0:
            raise ValueError("Work and break durations must be positive")
        if self.repeats < 1:
            raise ValueError("Repeats must be at least 1")

    @classmethod
    def from_minutes(cls, work: int, brk: int, repeats: int = 1) -> "PomodoroPlan":
        return cls(work_seconds=work * 60, break_seconds=brk * 60, repeats=repeats)


# User can access help message with shortcut -h
app = new_typer_app()


@app.callback(invoke_without_command=True)
def pomodoro(
    work: int = typer.Option(..., "-w", "--work", min=1, help="Work duration in minutes"),
    brk: int = typer.Option(..., "-b", "--break", min=1, help="Break duration in minutes"),
    repeats: int = typer.Option(1, "-r", "--repeats", min=1, help="Number of Pomodoro cycles to repeat"),
    color: Optional[Color] = color_option(),
    size: str = size_option(),
):
    """Run REPEATS cycles of WORK minutes of work followed by BREAK minutes of rest."""
    plan = PomodoroPlan.from_minutes(work, brk, repeats)

    with timer_session(color, size) as (token, display):
        completed = run_pomodoro(plan, display, token, default_notifier(display.console))

    if completed:
        info(f"{DONE_MESSAGE} {plan.repeats} cycle(s) finished")


def run_pomodoro(
    plan: PomodoroPlan,
    display,
    token: CancellationToken,
    notifier: Notifier,
    *,
    interval: float = COUNTDOWN_INTERVAL,
    pause: float = CYCLE_PAUSE,
    clock: Callable[[], float] = time.monotonic,
) -> bool:
    """Run every cycle of ``plan``; return True if all of them completed."""
    phases = (("Work", plan.work_seconds), ("Break", plan.break_seconds))

    for cycle in range(1, plan.repeats + 1):
        for name, seconds in phases:
            label = f"{name} ({cycle}/{plan.repeats})"
            if not run_countdown(seconds, display, token, label=label, formatter=format_ms, interval=interval, clock=clock):
                return False
            notifier.beep()

        if cycle < plan.repeats:
            display.show(format_ms(0), label=f"Cycle {cycle} done, next cycle in {pause:g}s")
            if token.wait(pause):
                return False

    display.show(format_ms(0), label=DONE_MESSAGE)
    # Keep the message up before the full-screen view closes; Ctrl+C skips ahead
    token.wait(pause)
    return True


# Entry point for manual execution: `python -m clocktools.pomodoro`
if __name__ == '__main__':
    app()
