# src/slogger/core/logging/builder.py
"""
Logging builder: create and apply the dictConfig for the process-wide pretty
logger, and hold that logger behind an accessor.

This module:
 - builds a dictConfig-compatible mapping from Settings (make_dict_config)
 - applies it (setup_logging)
 - performs the one-time, lock-guarded initialization of the process-wide
   logger (make_logger) and exposes it through get_logger()
 - lets tests swap in an isolated logger (set_logger)

Usage:

    from slogger import get_logger

    log = get_logger()
    log.info("started", extra={"port": 8080})

Configuration knobs (on the Settings object, see config/settings.py):
 - LOG_LEVEL, LOG_ADD_SOURCE, LOG_COLOR, LOG_STREAM, LOGGER_NAME
"""

from __future__ import annotations

import logging
import logging.config
import threading
from typing import Optional

from ...config.settings import Settings, get_settings
from .handlers import get_console_handler
from .levels import parse_level

# The process-wide logger and the lock guarding its creation
_LOGGER: Optional[logging.Logger] = None
_LOGGER_LOCK = threading.Lock()


# -----------------------
# dictConfig builder
# -----------------------
def make_dict_config(settings: Settings) -> dict:
    """
    Build the dictConfig mapping using the provided settings.

    The returned mapping includes:
      - handlers: "console" (PrettyHandler on stdout or stderr)
      - loggers: the named logger (settings.LOGGER_NAME), not propagating to root
        so lines are not printed twice by root handlers
    Existing loggers are left enabled.
    """
    level = parse_level(settings.LOG_LEVEL)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "handlers": {
            "console": get_console_handler(settings),
        },
        "loggers": {
            settings.LOGGER_NAME: {
                "handlers": ["console"],
                "level": int(level),
                "propagate": False,
            },
        },
    }


def setup_logging(settings: Settings) -> logging.Logger:
    """
    Apply make_dict_config(settings) and return the configured logger.

    Calling it again reconfigures the logger: dictConfig removes the handlers
    it attached before and attaches fresh ones.
    """
    logging.config.dictConfig(make_dict_config(settings))
    return logging.getLogger(settings.LOGGER_NAME)


# --------------------------
# Process-wide logger
# --------------------------
def make_logger(settings: Settings | None = None) -> logging.Logger:
    """
    Initialize the process-wide logger once and return it.

    The first call configures logging (from `settings`, or get_settings() when
    None). Later calls return the same logger and ignore `settings`. The lock
    makes concurrent first calls safe: exactly one of them configures.
    """
    global _LOGGER

    if _LOGGER is not None:
        return _LOGGER

    with _LOGGER_LOCK:
        if _LOGGER is None:
            _LOGGER = setup_logging(settings or get_settings())
        return _LOGGER


def get_logger() -> logging.Logger:
    """Return the process-wide logger, initializing it on first use."""
    logger = _LOGGER
    if logger is None:
        logger = make_logger()
    return logger


def set_logger(logger: logging.Logger | None) -> logging.Logger | None:
    """
    Replace the process-wide logger and return the previous one.

    Tests use it to install an isolated logger (and restore the old one after).
    Passing None resets the accessor, so the next get_logger() initializes again.
    """
    global _LOGGER

    with _LOGGER_LOCK:
        previous = _LOGGER
        _LOGGER = logger
        return previous


__all__ = ["make_dict_config", "setup_logging", "make_logger", "get_logger", "set_logger"]
