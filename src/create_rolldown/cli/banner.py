"""Startup banner.

A Rolldown-orange gradient when the terminal supports colour, the plain
text otherwise.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from create_rolldown.cli.args import is_terminal
from create_rolldown.cli.console import console
from create_rolldown.core.constants import DEFAULT_BANNER
from create_rolldown.settings import Settings

_GRADIENT_START: tuple[int, int, int] = (255, 107, 0)
_GRADIENT_STEP: tuple[int, int, int] = (0, -2, 4)


def supports_color(settings: Settings, stream: TextIO | None = None) -> bool:
    """Return ``True`` when *stream* is a TTY and ``TERM`` is not ``dumb``."""
    out = sys.stdout if stream is None else stream
    return is_terminal(out) and settings.term != "dumb"


def gradient_banner() -> Any:
    """Build the banner as a Rich ``Text`` with a per-letter gradient.

    Spaces do not advance the gradient.
    """
    from rich.text import Text

    text = Text()
    red, green, blue = _GRADIENT_START
    for char in DEFAULT_BANNER:
        if char == " ":
            text.append(char)
            continue
        text.append(char, style=f"rgb({red},{green},{blue})")
        red += _GRADIENT_STEP[0]
        green = max(green + _GRADIENT_STEP[1], 0)
        blue = min(blue + _GRADIENT_STEP[2], 255)
    return text


def print_banner(settings: Settings) -> None:
    """Print the banner surrounded by blank lines."""
    console.print()
    if supports_color(settings):
        try:
            console.print(gradient_banner())
        except ModuleNotFoundError:
            console.print(DEFAULT_BANNER)
    else:
        console.print(DEFAULT_BANNER)
    console.print()
