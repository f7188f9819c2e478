# src/slogger/core/logging/formatters.py

"""
The pretty record renderer.

PrettyFormatter turns one LogRecord into one human-friendly line:

    <timestamp> | <level> | <message> | <function> | <file>:<line> <attributes>

for example (colors omitted):

    2025-09-27 14:22:43 | INFO  | started | serve | main.py:42 {
      "port": 8080
    }

Pieces of the line:
  - timestamp: local time of `record.created`, "%Y-%m-%d %H:%M:%S", green.
  - level: DEBUG magenta, INFO blue, WARN yellow, ERROR red. INFO and WARN are
    padded with one space so the columns line up.
  - message: `record.getMessage()`, uncolored.
  - function: base name of the calling function, cyan.
  - file:line: base name of the calling file and the line number.
  - attributes: everything passed via `extra={...}`, plus the trace id from the
    ambient context, as two-space indented JSON, keys sorted when they are comparable.

Attribute rules:
  - An "err" attribute holding an exception is rendered as `str(exc)` (its
    message), not as an object.
  - If the ambient context holds a trace id (see context.py), it is added under
    "trace-id" and wins over any caller-supplied "trace-id" attribute.
  - Values JSON cannot represent natively are converted when there is an obvious
    text form (UUID, date/time, pydantic model, dataclass). Anything else makes
    rendering fail with FormatError, and nothing is written for that record.

The renderer never mutates the record. Unlike logging.Formatter.format it does
not set `record.message`, `record.asctime` or cache `record.exc_text`.
"""

import contextvars
import dataclasses
import json
import logging
import uuid
from datetime import date, datetime, time
from logging import LogRecord
from typing import Any

from pydantic import BaseModel

from ...exceptions.base import FormatError
from .colors import CYAN, GREEN, colorize
from .context import TRACE_ID_KEY, get_trace_id
from .levels import LEVEL_STYLES, Level, level_name
from .source import resolve_call_site

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ERR_KEY = "err"

# Attributes every LogRecord has. Whatever else sits in record.__dict__ was
# supplied by the caller through `extra={...}`.
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


def _json_default(value: Any) -> Any:
    """
    Fallback for json.dumps: convert values that have an obvious JSON form.

    Raises TypeError for anything else, which is what json.dumps expects.
    """
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def collect_attributes(record: LogRecord) -> dict[str, Any]:
    """
    Return the caller-supplied attributes of `record` as a new dict.

    An "err" attribute holding an exception is replaced by the exception's message.
    """
    fields: dict[str, Any] = {}
    for key, value in record.__dict__.items():
        if key in _STANDARD_ATTRS:
            continue
        if key == ERR_KEY and isinstance(value, BaseException):
            value = str(value)
        fields[key] = value
    return fields


def _dumps(fields: dict[str, Any], *, sort_keys: bool) -> str:
    return json.dumps(
        fields,
        indent=2,
        sort_keys=sort_keys,
        ensure_ascii=False,
        default=_json_default,
    )


def serialize_attributes(fields: dict[str, Any]) -> str:
    """
    Serialize the attribute mapping as indented JSON.

    Raises:
        FormatError: when a value cannot be represented as JSON.
    """
    try:
        try:
            return _dumps(fields, sort_keys=True)
        except TypeError:
            # Nested keys of mixed types cannot be sorted; keep insertion order
            return _dumps(fields, sort_keys=False)
    except (TypeError, ValueError, OverflowError, RecursionError) as exc:
        raise FormatError(
            f"cannot serialize log attributes: {exc}", key=_find_bad_key(fields)
        ) from exc


def _find_bad_key(fields: dict[str, Any]) -> str | None:
    # Serialize values one by one to name the offending attribute
    for key, value in fields.items():
        try:
            json.dumps(value, default=_json_default)
        except (TypeError, ValueError, OverflowError, RecursionError):
            return key
    return None


class PrettyFormatter(logging.Formatter):
    """
    Colored, single-line formatter with a JSON attribute blob.

    Construction:
      - add_source: resolve and print the call-site (function, file, line).
        When False those fields are printed empty ("" and 0).
      - color: wrap timestamp, level and function in ANSI colors. The decision
        of *whether* a sink supports color is made by the handler (see
        handlers.py); the formatter only obeys it.
      - datefmt: timestamp pattern, "%Y-%m-%d %H:%M:%S" by default.

    Usage example (programmatic):
      formatter = PrettyFormatter(add_source=True, color=True)
      handler.setFormatter(formatter)
    """

    def __init__(
        self,
        *,
        add_source: bool = True,
        color: bool = True,
        datefmt: str | None = DATE_FORMAT,
    ) -> None:
        super().__init__(datefmt=datefmt)
        self.add_source = add_source
        self.color = color

    def format(self, record: LogRecord) -> str:
        """Render `record` using the current ambient context."""
        return self.render(record)

    def format_level(self, levelno: int) -> str:
        """Return the level label, colored when it is one of the four known levels."""
        try:
            label, color = LEVEL_STYLES[Level(levelno)]
        except ValueError:
            return level_name(levelno)
        return colorize(label, color, self.color)

    def render(self, record: LogRecord, context: contextvars.Context | None = None) -> str:
        """
        Build the formatted line for `record`.

        Args:
            record: the record to render. It is only read.
            context: the ambient context holding the trace id. None means the
                     current context, which is the context of the logging call
                     because handlers run synchronously inside it.

        Raises:
            FormatError: when the attributes cannot be serialized.
        """
        level = self.format_level(record.levelno)

        fields = collect_attributes(record)

        site = resolve_call_site(record, self.add_source)
        func = colorize(site.function, CYAN, self.color)

        timestamp = colorize(self.formatTime(record, self.datefmt), GREEN, self.color)

        trace_id = get_trace_id(context)
        if trace_id is not None:
            fields[TRACE_ID_KEY] = trace_id

        blob = serialize_attributes(fields)

        line = (
            f"{timestamp} | {level} | {record.getMessage()} | "
            f"{func} | {site.file}:{site.line} {blob}"
        )

        # Tracebacks go on the lines below, inside the same write.
        if record.exc_info:
            line = line + "\n" + self.formatException(record.exc_info)
        elif record.exc_text:
            line = line + "\n" + record.exc_text
        if record.stack_info:
            line = line + "\n" + self.formatStack(record.stack_info)

        return line


__all__ = [
    "DATE_FORMAT",
    "PrettyFormatter",
    "collect_attributes",
    "serialize_attributes",
]
