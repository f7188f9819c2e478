"""
Core pytest configuration for the slogger test suite.

Fixtures shared by the test modules:
- stream / pretty_handler: a PrettyHandler writing to an in-memory stream, colors on
- isolated_process_logger (autouse): the process-wide logger never leaks between tests
- clean_trace_id (autouse): every test starts without a trace id in its context
"""

from __future__ import annotations

import io

import pytest

from slogger.core.logging.builder import set_logger
from slogger.core.logging.context import reset_trace_id, set_trace_id
from slogger.core.logging.handlers import PrettyHandler, PrettyHandlerOptions


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def pretty_handler(stream) -> PrettyHandler:
    """PrettyHandler on a StringIO with colors forced on (StringIO is not a TTY)."""
    return PrettyHandler(stream, PrettyHandlerOptions(color="always"))


@pytest.fixture(autouse=True)
def isolated_process_logger():
    previous = set_logger(None)
    yield
    set_logger(previous)


@pytest.fixture(autouse=True)
def clean_trace_id():
    token = set_trace_id(None)
    yield
    reset_trace_id(token)
