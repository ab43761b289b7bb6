"""Audible notification on timer events.

Sounds are cosmetic: every variant swallows its own failures.
"""

from __future__ import annotations

import sys
from typing import Optional, Protocol

from rich.console import Console


class Notifier(Protocol):
    def beep(self) -> None: ...


class TerminalBell:
    """Ring the terminal bell through the Rich console."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def beep(self) -> None:
        try:
            self.console.bell()
        except OSError:
            pass


class WindowsBeep:
    """Play a tone with ``winsound`` (Windows consoles often mute the bell)."""

    def __init__(self, frequency: int = 800, duration_ms: int = 800) -> None:
        self.frequency = frequency
        self.duration_ms = duration_ms

    def beep(self) -> None:
        try:
            import winsound

            winsound.Beep(self.frequency, self.duration_ms)
        except (ImportError, RuntimeError, OSError):
            pass


def default_notifier(console: Optional[Console] = None, platform: Optional[str] = None) -> Notifier:
    """Pick the notifier variant for the current platform."""
    platform = platform or sys.platform
    if platform.startswith("win"):
        return WindowsBeep()
    return TerminalBell(console)
