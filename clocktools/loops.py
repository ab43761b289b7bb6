"""Poll loops shared by the alarm and Pomodoro modes."""

from __future__ import annotations

import time
from typing import Callable, Optional

from .cancel import CancellationToken
from .timefmt import format_hms, remaining_seconds


COUNTDOWN_INTERVAL = 0.5    # seconds between countdown repaints
ACK_INTERVAL = 0.1          # seconds between polls while waiting for Ctrl+C


def run_countdown(
    duration: float,
    display,
    token: CancellationToken,
    *,
    label: Optional[str] = None,
    formatter: Callable[[float], str] = format_hms,
    interval: float = COUNTDOWN_INTERVAL,
    clock: Callable[[], float] = time.monotonic,
) -> bool:
    """Render the time left in ``duration`` until it runs out or ``token`` stops.

    Returns True when the countdown reached zero, False when it was cancelled.
    """
    start = clock()

    while not token.is_stopped():
        elapsed = clock() - start
        if elapsed >= duration:
            return True

        display.show(formatter(remaining_seconds(duration, elapsed)), label=label)
        token.wait(interval)

    return False


def wait_until_stopped(token: CancellationToken, interval: float = ACK_INTERVAL) -> None:
    """Block until the token is stopped, polling every ``interval`` seconds."""
    while not token.wait(interval):
        pass
