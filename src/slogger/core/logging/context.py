# src/slogger/core/logging/context.py
"""
Trace id (request correlation id) held in the ambient context.

The id lives in a `contextvars.ContextVar` named "trace-id". A ContextVar is
isolated per asyncio task and per thread, and it survives `await`, so every
log call made while handling a request sees that request's id.

The renderer reads the id through `get_trace_id()`, which is typed: it returns
a `uuid.UUID` or None, never some other value that happens to be stored there.

Typical use
-----------
- HTTP services: install TraceIDMiddleware (middleware.py), which sets the id
  for each request.
- Workers / scripts:

    with trace_context(uuid.uuid4()):
        log.info("processing job")
"""

import contextvars
import uuid
from contextlib import contextmanager
from typing import Any, Iterator

TRACE_ID_KEY = "trace-id"

# Default is None to indicate "no trace id set".
_trace_id_ctx: contextvars.ContextVar[Any] = contextvars.ContextVar(
    TRACE_ID_KEY, default=None
)


def set_trace_id(trace_id: uuid.UUID | None) -> contextvars.Token:
    """
    Set the trace id in the current context and return the token to allow reset.
    """
    return _trace_id_ctx.set(trace_id)


def reset_trace_id(token: contextvars.Token) -> None:
    """
    Reset the contextvar to the value it had before set_trace_id() returned `token`.
    """
    _trace_id_ctx.reset(token)


def get_trace_id(context: contextvars.Context | None = None) -> uuid.UUID | None:
    """
    Return the trace id stored in `context`, or in the current context when None.

    Values that are not a `uuid.UUID` are treated as absent.
    """
    if context is None:
        value = _trace_id_ctx.get()
    else:
        value = context.get(_trace_id_ctx)
    if isinstance(value, uuid.UUID):
        return value
    return None


@contextmanager
def trace_context(trace_id: uuid.UUID | None) -> Iterator[uuid.UUID | None]:
    """Set the trace id for the duration of a `with` block."""
    token = set_trace_id(trace_id)
    try:
        yield trace_id
    finally:
        reset_trace_id(token)


__all__ = [
    "TRACE_ID_KEY",
    "set_trace_id",
    "reset_trace_id",
    "get_trace_id",
    "trace_context",
]
