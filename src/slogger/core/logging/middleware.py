# src/slogger/core/logging/middleware.py
"""
Trace ID middleware for FastAPI / Starlette.

Purpose
-------
Associates each incoming HTTP request with a trace id so every line the pretty
renderer prints while the request is handled carries a "trace-id" attribute.
The id is also returned in the `X-Trace-ID` response header so a client can
quote it when reporting a problem.

How it works
------------
1. Read the incoming `X-Trace-ID` header and parse it as a UUID.
   - A valid UUID is reused (end-to-end correlation with an upstream caller).
   - A missing or malformed value is replaced by a fresh uuid4. Malformed input
     is never echoed into logs, which keeps newlines and oversized values out.
2. Store the id with set_trace_id() (a ContextVar, see context.py).
3. Forward the request with `call_next(request)`.
4. Put the id on the response and reset the ContextVar.

Register it early, before routers that log:

    app.add_middleware(TraceIDMiddleware)
"""

import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from .context import reset_trace_id, set_trace_id

TRACE_ID_HEADER = "X-Trace-ID"


def parse_trace_id(value: str | None) -> uuid.UUID | None:
    """Return `value` as a UUID, or None when it is missing or not a UUID."""
    if not value:
        return None
    try:
        return uuid.UUID(value.strip())
    except ValueError:
        return None


class TraceIDMiddleware(BaseHTTPMiddleware):
    """
    Starlette / FastAPI middleware that sets a trace id for each incoming request.
    """

    async def dispatch(self, request: Request, call_next):
        trace_id = parse_trace_id(request.headers.get(TRACE_ID_HEADER)) or uuid.uuid4()

        token = set_trace_id(trace_id)
        try:
            response = await call_next(request)
            response.headers[TRACE_ID_HEADER] = str(trace_id)
            return response
        finally:
            reset_trace_id(token)


__all__ = ["TRACE_ID_HEADER", "TraceIDMiddleware", "parse_trace_id"]
