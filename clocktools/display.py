"""Big seven-segment digits rendered full-screen with Rich.

- Uses Rich Live on the alternate screen, repainting on every ``show`` call.
- Renders digits using a simple seven-segment layout built from block characters.
"""

from __future__ import annotations

from typing import Optional

import typer

from rich.align import Align
from rich.console import Console, Group
from rich.live import Live
from rich.text import Text

from .palette import Color, color_style


# Presets controlling both horizontal and vertical segment thickness
SIZE_PRESETS = {
    "small": {"inner": 4, "vthick": 1, "gap": 1},
    "medium": {"inner": 6, "vthick": 2, "gap": 1},
    "large": {"inner": 8, "vthick": 3, "gap": 1},
    "xlarge": {"inner": 10, "vthick": 4, "gap": 1},
    "xxlarge": {"inner": 12, "vthick": 5, "gap": 1},
    "xxxlarge": {"inner": 14, "vthick": 6, "gap": 1},
}

# Seven-segment layout for digits 0-9.
# Segment keys:
#   a: top horizontal
#   b: upper-right vertical
#   c: lower-right vertical
#   d: bottom horizontal
#   e: lower-left vertical
#   f: upper-left vertical
#   g: middle horizontal
SEGMENTS = {
    "0": {"a", "b", "c", "d", "e", "f"},
    "1": {"b", "c"},
    "2": {"a", "b", "g", "e", "d"},
    "3": {"a", "b", "g", "c", "d"},
    "4": {"f", "g", "b", "c"},
    "5": {"a", "f", "g", "c", "d"},
    "6": {"a", "f", "g", "e", "c", "d"},
    "7": {"a", "b", "c"},
    "8": {"a", "b", "c", "d", "e", "f", "g"},
    "9": {"a", "b", "c", "d", "f", "g"},
}


def resolve_size(size: str) -> dict[str, int]:
    """Look up a size preset by name, case-insensitively."""
    key = str(size).lower().strip()
    if key not in SIZE_PRESETS:
        raise typer.BadParameter(
            "Invalid size. Choose from: " + ", ".join(SIZE_PRESETS.keys())
        )
    return SIZE_PRESETS[key]


def _dot_width(inner: int) -> int:
    # Dot width scales mildly with size
    return 1 if inner <= 3 else (2 if inner <= 7 else 3)


def _render_digit(
    segments: set[str], inner: int = 6, vthick: int = 2, vchar: str = "█", hchar: str = "█"
) -> list[str]:
    """Render a single seven-segment digit as a list of ``2 * vthick + 3`` text rows.

    Args:
        segments: Which segment labels (a-g) should be lit for the digit.
        inner: Width of the horizontal bars and the gap between vertical bars.
        vthick: Number of rows each vertical bar spans.
        vchar: Character to draw vertical bars.
        hchar: Character to draw horizontal bars.
    """
    space_inner = " " * inner
    hbar = hchar * inner

    def side(on: bool) -> str:
        return vchar if on else " "

    rows = []
    # a
    rows.append(" " + (hbar if "a" in segments else space_inner) + " ")
    # f, b (repeat for vertical thickness)
    for _ in range(vthick):
        rows.append(f"{side('f' in segments)}{space_inner}{side('b' in segments)}")
    # g
    rows.append(" " + (hbar if "g" in segments else space_inner) + " ")
    # e, c (repeat for vertical thickness)
    for _ in range(vthick):
        rows.append(f"{side('e' in segments)}{space_inner}{side('c' in segments)}")
    # d
    rows.append(" " + (hbar if "d" in segments else space_inner) + " ")
    return rows


def _render_colon(width: int, vthick: int, inner: int) -> list[str]:
    """Render a colon glyph occupying the same height as digits.

    Places two dots centered in width, aligned roughly with the upper and
    lower vertical segment blocks.
    """
    rows_count = 2 * vthick + 3
    rows = [" " * width for _ in range(rows_count)]
    dot_w = _dot_width(inner)
    start = max(0, width // 2 - dot_w // 2)
    end = min(width, start + dot_w)
    dot_row = " " * start + "█" * (end - start) + " " * (width - end)

    rows[1 + (vthick // 2)] = dot_row
    rows[1 + vthick + 1 + (vthick // 2)] = dot_row
    return rows


def _render_point(vthick: int, inner: int) -> list[str]:
    """Render a decimal point: a narrow glyph lit only on the bottom row."""
    dot_w = _dot_width(inner)
    rows = [" " * dot_w for _ in range(2 * vthick + 2)]
    rows.append("█" * dot_w)
    return rows


def render_big_time(timestr: str, inner: int = 6, vthick: int = 2, gap: int = 1) -> str:
    """Render a time string (e.g., "12:34:56.789") as a multi-line banner.

    Digits, ':' and '.' are drawn; any other character is skipped.

    Args:
        timestr: String containing digits, ':' and '.' characters.
        inner: Thickness/spacing parameter passed to each digit.
        vthick: Vertical bar height passed to each digit.
        gap: Spaces between rendered glyphs.
    Returns:
        The multi-line string representing the large time.
    """
    glyphs: list[list[str]] = []
    digit_width = inner + 2
    rows_count = 2 * vthick + 3

    for ch in timestr:
        if ch.isdigit():
            glyphs.append(_render_digit(SEGMENTS[ch], inner=inner, vthick=vthick))
        elif ch == ":":
            glyphs.append(_render_colon(digit_width, vthick=vthick, inner=inner))
        elif ch == ".":
            glyphs.append(_render_point(vthick=vthick, inner=inner))

    if not glyphs:
        return ""

    spacer = " " * gap
    lines = [spacer.join(g[r] for g in glyphs) for r in range(rows_count)]
    return "\n".join(lines)


class BigTextDisplay:
    """Full-screen big-digit display.

    Use as a context manager: entering switches to the alternate screen
    (clearing it), leaving restores the terminal. Each :meth:`show` call
    replaces whatever was drawn before and is written out immediately.
    """

    def __init__(
        self,
        color: Optional[Color] = None,
        size: str = "medium",
        console: Optional[Console] = None,
    ) -> None:
        self.color = color
        self.preset = resolve_size(size)
        self.console = console or Console()
        self._live: Optional[Live] = None

    def __enter__(self) -> "BigTextDisplay":
        self._live = Live(console=self.console, screen=True, auto_refresh=False)
        self._live.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        live, self._live = self._live, None
        if live is not None:
            live.__exit__(exc_type, exc, tb)

    def render(self, text: str, label: Optional[str] = None) -> Align:
        """Build the centered renderable for ``text`` with an optional caption."""
        big = render_big_time(
            text,
            inner=self.preset["inner"],
            vthick=self.preset["vthick"],
            gap=self.preset["gap"],
        )
        style = color_style(self.color)
        parts = []
        if label:
            parts.append(Text(label, style=style, justify="center"))
            parts.append(Text(""))
        parts.append(Text(big, style=style))

        # Center horizontally and vertically to fill the screen
        return Align(
            Group(*parts),
            align="center",
            vertical="middle",
            height=self.console.size.height,
            width=self.console.size.width,
        )

    def show(self, text: str, label: Optional[str] = None) -> None:
        if self._live is None:
            raise RuntimeError("BigTextDisplay.show() called outside its context")
        self._live.update(self.render(text, label), refresh=True)
