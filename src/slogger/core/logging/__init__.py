# src/slogger/core/logging/
# ├─ __init__.py            # public API
# ├─ levels.py              # Level enum, labels and level colors
# ├─ colors.py              # ANSI codes, colorize(), should_use_color()
# ├─ source.py              # call-site resolution (file, line, function)
# ├─ context.py             # trace-id contextvar + typed accessor
# ├─ formatters.py          # PrettyFormatter (the record renderer)
# ├─ handlers.py            # PrettyHandlerOptions, PrettyHandler, new_pretty_handler
# ├─ builder.py             # make_dict_config / setup_logging + process-wide logger
# └─ middleware.py          # FastAPI/Starlette middleware to set the trace id


from .builder import setup_logging, make_dict_config, make_logger, get_logger, set_logger
from .context import set_trace_id, reset_trace_id, get_trace_id, trace_context, TRACE_ID_KEY
from .formatters import PrettyFormatter
from .handlers import PrettyHandler, PrettyHandlerOptions, new_pretty_handler
from .levels import Level
from .middleware import TraceIDMiddleware

__all__ = [
    "setup_logging", "make_dict_config", "make_logger", "get_logger", "set_logger",
    "set_trace_id", "reset_trace_id", "get_trace_id", "trace_context", "TRACE_ID_KEY",
    "PrettyFormatter", "PrettyHandler", "PrettyHandlerOptions", "new_pretty_handler",
    "Level", "TraceIDMiddleware",
]
