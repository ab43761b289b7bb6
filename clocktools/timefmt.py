"""Fixed-width time strings for the big-digit display."""

from __future__ import annotations

import math


def _split_hms(total_seconds: int) -> tuple[int, int, int]:
    h = total_seconds // 3600
    m = (total_seconds % 3600) // 60
    s = total_seconds % 60
    return h, m, s


def format_hms(seconds: float) -> str:
    """Return time string HH:MM:SS for a non-negative duration in seconds.

    Hours are zero-padded to at least 2 digits but grow as needed (e.g., 100:00:00).
    Fractions are dropped and negative inputs are clamped to 0.
    """
    total = max(0, int(seconds))
    h, m, s = _split_hms(total)
    return f"{h:02d}:{m:02d}:{s:02d}"


def format_hms_millis(seconds: float) -> str:
    """Return HH:MM:SS.mmm, the stopwatch variant of :func:`format_hms`."""
    total_ms = max(0, int(seconds * 1000))
    total, ms = divmod(total_ms, 1000)
    h, m, s = _split_hms(total)
    return f"{h:02d}:{m:02d}:{s:02d}.{ms:03d}"


def format_ms(seconds: float) -> str:
    """Return MM:SS with unbounded minutes (e.g., 90:00 for a 90 minute phase)."""
    total = max(0, int(seconds))
    m, s = divmod(total, 60)
    return f"{m:02d}:{s:02d}"


def remaining_seconds(duration: float, elapsed: float) -> int:
    """Whole seconds left in a countdown, rounded up and clamped to zero."""
    return max(0, int(math.ceil(duration - elapsed)))
