"""
slogger: colorized, human-readable log lines for the stdlib logging module.

    from slogger import get_logger

    log = get_logger()
    log.info("started", extra={"port": 8080})
"""

from .core.logging import (
    Level,
    PrettyFormatter,
    PrettyHandler,
    PrettyHandlerOptions,
    TRACE_ID_KEY,
    TraceIDMiddleware,
    get_logger,
    get_trace_id,
    make_dict_config,
    make_logger,
    new_pretty_handler,
    reset_trace_id,
    set_logger,
    set_trace_id,
    setup_logging,
    trace_context,
)
from .exceptions import FormatError

__all__ = [
    "FormatError",
    "Level",
    "PrettyFormatter",
    "PrettyHandler",
    "PrettyHandlerOptions",
    "TRACE_ID_KEY",
    "TraceIDMiddleware",
    "get_logger",
    "get_trace_id",
    "make_dict_config",
    "make_logger",
    "new_pretty_handler",
    "reset_trace_id",
    "set_logger",
    "set_trace_id",
    "setup_logging",
    "trace_context",
]
