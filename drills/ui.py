"""Coloured status lines for the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def _emit(symbol: str, fallback: str, message: str, colour: str) -> None:
    mark = fallback if os.environ.get("NO_EMOJI") is not None else symbol
    line = Text.assemble((mark, colour), " ", (message, colour))
    Console(highlight=False, soft_wrap=True).print(line)


def warn(message: str) -> None:
    """Print a red warning line."""
    _emit("⚠️ ", "!", message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    _emit("✅", "✓", message, "green")