# src/slogger/core/logging/handlers.py
"""
The pretty handler and its options.

PrettyHandler is a logging.StreamHandler that owns a PrettyFormatter. It writes
each record as one rendered line to its stream (the sink).

Pipeline reminder:

    Logger -> level check -> Handler.handle (lock) -> emit -> PrettyFormatter -> stream

- Level filtering happens before the handler is reached: the logger and the
  handler level both come from PrettyHandlerOptions.level, so records below the
  threshold never get rendered.
- logging.Handler.handle() holds the handler lock around emit(), and emit()
  issues one stream.write() per record, so lines from concurrent threads never
  interleave.
- A record that cannot be rendered raises FormatError. emit() hands it to
  handleError() (the stdlib prints a short report to stderr when
  logging.raiseExceptions is set) and nothing is written. It is never retried,
  and the caller's logging call never raises.
"""

import contextvars
import sys
from collections.abc import Mapping
from logging import LogRecord, StreamHandler
from typing import Any, TextIO

from pydantic import BaseModel, ConfigDict, field_validator

from .colors import ColorMode, should_use_color
from .formatters import PrettyFormatter
from .levels import Level, parse_level


class PrettyHandlerOptions(BaseModel):
    """
    Options for PrettyHandler, fixed once the handler is built.

    - level: minimum severity ("debug", "INFO", 30, Level.WARN, ...).
    - add_source: resolve and print the call-site of each record.
    - color: "auto" (TTY and no NO_COLOR), "always" or "never".
    """

    model_config = ConfigDict(frozen=True)

    level: Level = Level.DEBUG
    add_source: bool = True
    color: ColorMode = "auto"

    @field_validator("level", mode="before")
    def normalize_level(cls, v: Any) -> Any:
        if isinstance(v, (str, int)):
            return parse_level(v)
        return v


class PrettyHandler(StreamHandler):
    """
    StreamHandler rendering records with PrettyFormatter.

    Construction:
      - stream: the sink; defaults to sys.stdout (StreamHandler alone defaults to stderr).
      - options: PrettyHandlerOptions; defaults to DEBUG, source capture on, color auto.

    With color "auto" the TTY check runs against the current stream, at
    construction and again on every setStream().
    """

    def __init__(self, stream: TextIO | None = None, options: PrettyHandlerOptions | None = None):
        super().__init__(stream if stream is not None else sys.stdout)
        self.options = options or PrettyHandlerOptions()
        self.setLevel(int(self.options.level))
        self.setFormatter(
            PrettyFormatter(
                add_source=self.options.add_source,
                color=should_use_color(self.stream, self.options.color),
            )
        )

    def setStream(self, stream):
        """
        Swap the sink and re-decide coloring for it.

        Returns the old stream, or None if `stream` was already the current one.
        """
        previous = super().setStream(stream)
        if previous is not None and isinstance(self.formatter, PrettyFormatter):
            self.formatter.color = should_use_color(self.stream, self.options.color)
        return previous

    def render(self, record: LogRecord, context: contextvars.Context | None = None) -> str:
        """Render `record` without writing it. Raises FormatError."""
        formatter = self.formatter
        if isinstance(formatter, PrettyFormatter):
            return formatter.render(record, context)
        return self.format(record)

    def write_record(self, record: LogRecord, context: contextvars.Context | None = None) -> None:
        """
        Render `record` and write it to the sink as one line.

        Raises:
            FormatError: the record could not be rendered. Nothing was written.
        """
        line = self.render(record, context)
        self.stream.write(line + self.terminator)
        self.flush()

    def emit(self, record: LogRecord) -> None:
        """
        Write one record; failures are reported through handleError() and dropped.
        """
        try:
            self.write_record(record)
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)


def new_pretty_handler(
    out: TextIO | None = None,
    opts: PrettyHandlerOptions | Mapping[str, Any] | None = None,
) -> PrettyHandler:
    """
    Build a PrettyHandler writing to `out`.

    `opts` may be a PrettyHandlerOptions or a plain mapping of its fields, which
    is what logging.config.dictConfig passes (see builder.py).
    """
    if opts is not None and not isinstance(opts, PrettyHandlerOptions):
        opts = PrettyHandlerOptions.model_validate(dict(opts))
    return PrettyHandler(out, opts)


def get_console_handler(settings) -> dict:
    """
    Return a dictConfig handler entry for the pretty console handler.

    Args:
        settings: Settings-like object. Expected attributes:
                    - LOG_STREAM: "stdout" or "stderr"
                    - LOG_LEVEL: level name
                    - LOG_ADD_SOURCE: bool
                    - LOG_COLOR: "auto" | "always" | "never"

    The "()" key makes dictConfig call new_pretty_handler(out=..., opts=...).
    "ext://sys.stdout" is resolved by dictConfig at configuration time, so a
    stream swapped in later (e.g. by pytest's capsys) is only picked up by a
    fresh setup_logging() call.
    """
    return {
        "()": new_pretty_handler,
        "out": f"ext://sys.{settings.LOG_STREAM}",
        "opts": {
            "level": settings.LOG_LEVEL,
            "add_source": settings.LOG_ADD_SOURCE,
            "color": settings.LOG_COLOR,
        },
    }


__all__ = [
    "PrettyHandlerOptions",
    "PrettyHandler",
    "new_pretty_handler",
    "get_console_handler",
]
