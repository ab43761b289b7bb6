"""Fixed color palette shared by the CLI options and the big-digit renderer."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Color(str, Enum):
    """Digit colors accepted by ``--color`` (case-sensitive)."""

    red = "red"
    green = "green"
    blue = "blue"
    yellow = "yellow"
    cyan = "cyan"
    magenta = "magenta"
    white = "white"


def color_style(color: Optional[Color], *, bold: bool = True) -> str:
    """Return the Rich style string for a palette color.

    ``None`` keeps the terminal's default foreground.
    """
    parts = ["bold"] if bold else []
    if color is not None:
        parts.append(Color(color).value)
    return " ".join(parts)
