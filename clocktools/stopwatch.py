"""CLI: stopwatch counting up from 00:00:00.000 until interrupted (Ctrl+C)."""

from __future__ import annotations

import time
from typing import Callable, Optional

import typer

from ._cli_common import color_option, new_typer_app, size_option, timer_session
from ._cli_output import info
from .cancel import CancellationToken
from .palette import Color
from .timefmt import format_hms_millis


STOPWATCH_INTERVAL = 0.1    # repaint often enough for the millisecond digits to move


# User can access help message with shortcut -h
app = new_typer_app()


@app.callback(invoke_without_command=True)
def stopwatch(
    color: Optional[Color] = color_option(),
    size: str = size_option(),
):
    """Run a stopwatch that counts up until interrupted (Ctrl+C)."""
    with timer_session(color, size) as (token, display):
        elapsed = run_stopwatch(display, token)

    # The full-screen view is gone once the session closes; leave the result behind
    info(f"Stopped at {format_hms_millis(elapsed)}")


def run_stopwatch(
    display,
    token: CancellationToken,
    *,
    interval: float = STOPWATCH_INTERVAL,
    clock: Callable[[], float] = time.monotonic,
) -> float:
    """Render the elapsed time until ``token`` is stopped; return the final elapsed seconds."""
    start = clock()     # Baseline time origin

    while not token.is_stopped():
        display.show(format_hms_millis(clock() - start))
        token.wait(interval)

    return clock() - start


# Entry point for manual execution: `python -m clocktools.stopwatch`
if __name__ == '__main__':
    app()
