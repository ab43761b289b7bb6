"""Cooperative cancellation shared between the SIGINT handler and a timer loop.

The handler is the only writer and the running loop the only reader. The flag
is a plain attribute: the handler runs on the main thread between bytecodes,
so it must not take any lock the loop might be holding at that moment.
Loops sleep with :meth:`CancellationToken.wait`, which re-checks the flag in
short slices and returns as soon as the token is stopped.
"""

from __future__ import annotations

import signal
import time
from contextlib import contextmanager
from typing import Iterator


WAIT_SLICE = 0.02   # seconds between flag checks inside wait()


class InterruptSetupError(RuntimeError):
    """Raised when the interrupt handler cannot be installed."""


class CancellationToken:
    """One-way stop flag: once stopped, it stays stopped."""

    def __init__(self) -> None:
        self._stopped = False

    def stop(self) -> None:
        # Single assignment, safe to call from a signal handler or another thread
        self._stopped = True

    def is_stopped(self) -> bool:
        return self._stopped

    def should_continue(self) -> bool:
        return not self._stopped

    def wait(self, timeout: float) -> bool:
        """Sleep up to ``timeout`` seconds; return True if stopped meanwhile."""
        deadline = time.monotonic() + max(0.0, timeout)
        while not self._stopped:
            left = deadline - time.monotonic()
            if left <= 0:
                break
            time.sleep(min(WAIT_SLICE, left))
        return self._stopped


@contextmanager
def interrupt_handler(token: CancellationToken, signum: int = signal.SIGINT) -> Iterator[CancellationToken]:
    """Route Ctrl+C to ``token.stop()`` for the duration of the block.

    The previous handler is restored on exit.
    """

    def _on_interrupt(_signum, _frame) -> None:
        token.stop()

    try:
        previous = signal.signal(signum, _on_interrupt)
    except (ValueError, OSError) as exc:
        # signal.signal only works from the main thread of the main interpreter
        raise InterruptSetupError(f"Cannot install interrupt handler: {exc}") from exc

    try:
        yield token
    finally:
        signal.signal(signum, previous)
