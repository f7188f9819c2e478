# src/slogger/core/logging/levels.py
"""
Severity levels known to the pretty renderer.

The renderer works with four levels, ordered Debug < Info < Warn < Error. They
share their numeric values with the stdlib logging module, so a record's
`levelno` can be compared against them directly.

Records whose level falls between two known levels (or above ERROR, like
logging.CRITICAL) get an offset label relative to the closest lower level,
e.g. 25 -> "INFO+5" and 50 -> "ERROR+10". Such labels are never colored.
"""

import logging
from enum import IntEnum

from .colors import BLUE, MAGENTA, RED, YELLOW


class Level(IntEnum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR


# Color per known level. Info and Warn labels carry a trailing space so the
# column lines up with the five-letter "DEBUG" and "ERROR".
LEVEL_STYLES: dict[Level, tuple[str, str]] = {
    Level.DEBUG: ("DEBUG", MAGENTA),
    Level.INFO: ("INFO ", BLUE),
    Level.WARN: ("WARN ", YELLOW),
    Level.ERROR: ("ERROR", RED),
}


def level_name(levelno: int) -> str:
    """
    Return the display name for a numeric level, without padding.

    Examples:
        level_name(20) -> "INFO"
        level_name(30) -> "WARN"
        level_name(22) -> "INFO+2"
        level_name(5)  -> "DEBUG-5"
    """
    if levelno < Level.INFO:
        base = Level.DEBUG
    elif levelno < Level.WARN:
        base = Level.INFO
    elif levelno < Level.ERROR:
        base = Level.WARN
    else:
        base = Level.ERROR

    offset = levelno - base
    if offset == 0:
        return base.name
    return f"{base.name}{offset:+d}"


def parse_level(value: str | int) -> Level:
    """
    Turn a level name ("debug", "WARNING", ...) or a number into a Level.

    Raises ValueError for anything that is not one of the four levels.
    """
    if isinstance(value, int):
        return Level(value)
    name = value.strip().upper()
    if name == "WARNING":
        name = "WARN"
    try:
        return Level[name]
    except KeyError:
        raise ValueError(f"unknown log level: {value!r}") from None


__all__ = ["Level", "LEVEL_STYLES", "level_name", "parse_level"]
