"""Coloured status lines for the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text

_WARN_EMOJI = "⚠️ "
_WARN_PLAIN = "!"
_SUCCESS_EMOJI = "✅"
_SUCCESS_PLAIN = "✓"


def use_emoji() -> bool:
    """Return True unless the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" not in os.environ


def _announce(emoji: str, plain: str, message: str, style: str) -> str:
    mark = emoji if use_emoji() else plain
    line = f"{mark} {message}"
    console = Console(highlight=False, markup=False, emoji=False)
    console.print(Text(line, style=style), soft_wrap=True)
    return line


def warn(message: str) -> str:
    """Print a red warning line and return its plain text."""
    return _announce(_WARN_EMOJI, _WARN_PLAIN, message, "red")


def success(message: str) -> str:
    """Print a green success line and return its plain text."""
    return _announce(_SUCCESS_EMOJI, _SUCCESS_PLAIN, message, "green")