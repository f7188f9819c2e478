# src/slogger/core/logging/source.py
"""
Call-site resolution.

The logging module captures the caller's frame when the record is created
(`record.pathname`, `record.lineno`, `record.funcName`). This module turns that
into the short form printed on each line: the file's base name, the line
number and the function's base name.

Resolution is best effort. When the record has no usable call-site (source
capture disabled, or the logging module could not find the caller's frame)
the result is the empty CallSite: ("", 0, "").
"""

import os
from logging import LogRecord
from typing import NamedTuple

# Placeholders logging.Logger.findCaller() uses when no frame is found
_UNKNOWN_FILE = "(unknown file)"
_UNKNOWN_FUNCTION = "(unknown function)"


class CallSite(NamedTuple):
    file: str
    line: int
    function: str


EMPTY_CALL_SITE = CallSite("", 0, "")


def _base_name(path: str) -> str:
    # Last path component; also strips package-style prefixes written with "/"
    return os.path.basename(path.replace("\\", "/").rstrip("/"))


def resolve_call_site(record: LogRecord, enabled: bool = True) -> CallSite:
    """Return the (file, line, function) triple for `record`, never raising."""
    if not enabled:
        return EMPTY_CALL_SITE

    pathname = getattr(record, "pathname", None) or ""
    lineno = getattr(record, "lineno", None) or 0
    func = getattr(record, "funcName", None) or ""

    if pathname == _UNKNOWN_FILE:
        pathname = ""
    if func == _UNKNOWN_FUNCTION:
        func = ""

    if not pathname and not func:
        return EMPTY_CALL_SITE

    try:
        line = int(lineno)
    except (TypeError, ValueError):
        line = 0

    return CallSite(_base_name(str(pathname)), line, _base_name(str(func)))


__all__ = ["CallSite", "EMPTY_CALL_SITE", "resolve_call_site"]
