"""Shared CLI helpers for the timer commands."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Optional

import typer

from ._cli_output import fatal
from .cancel import CancellationToken, InterruptSetupError, interrupt_handler
from .display import BigTextDisplay
from .palette import Color

HELP_OPTION_NAMES = ("-h", "--help")


def new_typer_app(**kwargs: Any) -> typer.Typer:
    """Create a Typer app with consistent help flag shortcuts."""
    context_settings = dict(kwargs.pop("context_settings", {}) or {})
    context_settings.setdefault("help_option_names", list(HELP_OPTION_NAMES))
    return typer.Typer(context_settings=context_settings, **kwargs)


def color_option() -> Any:
    return typer.Option(None, "-c", "--color", help="Digit color; terminal default when omitted")


def size_option() -> Any:
    return typer.Option("medium", "-s", "--size", help="Digit size preset: small|medium|large|xlarge|xxlarge|xxxlarge")


@contextmanager
def timer_session(color: Optional[Color], size: str) -> Iterator[tuple[CancellationToken, BigTextDisplay]]:
    """Own the terminal for one timer run.

    Installs the Ctrl+C handler, opens the full-screen display and yields both.
    Failing to install the handler or to write to the terminal ends the command.
    """
    display = BigTextDisplay(color=color, size=size)   # bad --size fails before the screen switches
    token = CancellationToken()
    try:
        with interrupt_handler(token), display:
            yield token, display
    except InterruptSetupError as exc:
        fatal(str(exc))
    except OSError as exc:
        fatal(f"Terminal output failed: {exc}")
