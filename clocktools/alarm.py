"""CLI: countdown alarm that rings and holds until acknowledged with Ctrl+C.

TIME is either a whole number of seconds (``90``) or a wall-clock target
(``07:30``). A wall-clock target that has already passed today means the same
time tomorrow.
"""

from __future__ import annotations

import re
import time
from datetime import datetime, timedelta
from typing import Callable, Optional

import typer

from ._cli_common import color_option, new_typer_app, size_option, timer_session
from .cancel import CancellationToken
from .loops import ACK_INTERVAL, COUNTDOWN_INTERVAL, run_countdown, wait_until_stopped
from .notify import Notifier, default_notifier
from .palette import Color
from .timefmt import format_hms


ALARM_MESSAGE = "ALARM UP!"
INVALID_TIME_MESSAGE = "Invalid time format. Use seconds or HH:MM."

_SECONDS_RE = re.compile(r"\d+")
_CLOCK_RE = re.compile(r"(?P<hour>\d{1,2}):(?P<minute>\d{1,2})")


# User can access help message with shortcut -h
# Sub-apps are Click groups, which stop parsing options at TIME unless interspersed args are allowed
app = new_typer_app(context_settings={"allow_interspersed_args": True})


@app.callback(invoke_without_command=True)
def alarm(
    when: str = typer.Argument(..., metavar="TIME", help="Seconds until the alarm, or a fixed time HH:MM"),
    color: Optional[Color] = color_option(),
    size: str = size_option(),
):
    """Count down to TIME, then ring and hold until interrupted (Ctrl+C)."""
    # Parse before touching the screen so a bad TIME never starts a timer
    duration = parse_alarm_time(when)

    with timer_session(color, size) as (token, display):
        run_alarm(duration, display, token, default_notifier(display.console))


def parse_alarm_time(value: str, now: Optional[datetime] = None) -> float:
    """Parse TIME into the number of seconds until the alarm fires.

    Rules:
    - Digits only: that many seconds.
    - HH:MM (hour 0-23, minute 0-59): seconds until the next occurrence of that
      wall-clock time, tomorrow if it has already passed today.
    """
    value = value.strip()

    if _SECONDS_RE.fullmatch(value):
        return float(int(value))

    match = _CLOCK_RE.fullmatch(value)
    if match:
        hour, minute = int(match.group("hour")), int(match.group("minute"))
        if hour <= 23 and minute <= 59:
            return seconds_until(hour, minute, now=now)

    raise typer.BadParameter(INVALID_TIME_MESSAGE)


def seconds_until(hour: int, minute: int, now: Optional[datetime] = None) -> float:
    """Seconds from ``now`` to the next HH:MM, wrapping to the following day."""
    now = now or datetime.now()
    target = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if target < now:
        target += timedelta(days=1)
    return (target - now).total_seconds()


def run_alarm(
    duration: float,
    display,
    token: CancellationToken,
    notifier: Notifier,
    *,
    interval: float = COUNTDOWN_INTERVAL,
    ack_interval: float = ACK_INTERVAL,
    clock: Callable[[], float] = time.monotonic,
) -> bool:
    """Count down ``duration`` seconds, then ring and wait for cancellation.

    Returns True if the alarm fired, False if it was cancelled before reaching zero.
    """
    if not run_countdown(duration, display, token, formatter=format_hms, interval=interval, clock=clock):
        return False

    display.show(format_hms(0), label=ALARM_MESSAGE)
    notifier.beep()

    # Hold the message on screen until acknowledged
    wait_until_stopped(token, ack_interval)
    return True


# Entry point for manual execution: `python -m clocktools.alarm`
if __name__ == '__main__':
    app()
