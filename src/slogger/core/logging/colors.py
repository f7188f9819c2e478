# src/slogger/core/logging/colors.py
"""
ANSI styling helpers.

Only foreground colors are used:

| Code | Color   |
| ---- | ------- |
| 31   | red     |
| 32   | green   |
| 33   | yellow  |
| 34   | blue    |
| 35   | magenta |
| 36   | cyan    |
"""

import os
from typing import Literal, TextIO

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"

# Clears every attribute so the color does not spill into the rest of the line
RESET = "\033[0m"

ColorMode = Literal["auto", "always", "never"]


def colorize(text: str, color: str, enabled: bool = True) -> str:
    """Wrap `text` in the given ANSI color, or return it untouched when disabled."""
    if not enabled:
        return text
    return f"{color}{text}{RESET}"


def should_use_color(stream: TextIO | None, mode: ColorMode = "auto") -> bool:
    """
    Decide whether output written to `stream` should be colored.

    "always" and "never" are explicit. "auto" disables color when the NO_COLOR
    environment variable is set or when the stream is not a TTY (redirected to
    a file, captured by a test, piped into another program).
    """
    if mode == "always":
        return True
    if mode == "never":
        return False
    if os.environ.get("NO_COLOR") is not None:
        return False
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


__all__ = [
    "RED",
    "GREEN",
    "YELLOW",
    "BLUE",
    "MAGENTA",
    "CYAN",
    "RESET",
    "ColorMode",
    "colorize",
    "should_use_color",
]
