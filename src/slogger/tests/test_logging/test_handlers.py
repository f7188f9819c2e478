# src/slogger/tests/test_logging/test_handlers.py
import io
import logging
import re
import threading

import pytest
from pydantic import ValidationError

from slogger.core.logging.colors import BLUE, MAGENTA, RED, RESET, YELLOW
from slogger.core.logging.formatters import PrettyFormatter
from slogger.core.logging.handlers import (
    PrettyHandler,
    PrettyHandlerOptions,
    get_console_handler,
    new_pretty_handler,
)
from slogger.core.logging.levels import Level
from slogger.exceptions import FormatError

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")
TIMESTAMP_RE = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} \| ")


def make_logger(handler: logging.Handler, name: str = "slogger.tests.handlers") -> logging.Logger:
    logger = logging.getLogger(name)
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger


def make_record(extra=None, level=logging.INFO):
    record = logging.LogRecord("app", level, __file__, 10, "hello", None, None, "fn")
    for key, value in (extra or {}).items():
        record.__dict__[key] = value
    return record


class CountingStream(io.StringIO):
    def __init__(self):
        super().__init__()
        self.writes = 0

    def write(self, s):
        self.writes += 1
        return super().write(s)


def test_options_defaults():
    opts = PrettyHandlerOptions()
    assert opts.level is Level.DEBUG
    assert opts.add_source is True
    assert opts.color == "auto"


def test_options_accept_level_names():
    assert PrettyHandlerOptions(level="warning").level is Level.WARN
    assert PrettyHandlerOptions(level=40).level is Level.ERROR
    with pytest.raises(ValidationError):
        PrettyHandlerOptions(level="chatty")


def test_options_are_frozen():
    opts = PrettyHandlerOptions()
    with pytest.raises(ValidationError):
        opts.add_source = False


def test_end_to_end_info_line(stream):
    handler = PrettyHandler(stream, PrettyHandlerOptions(color="never"))
    logger = make_logger(handler)

    logger.info("started", extra={"port": 8080})

    out = stream.getvalue()
    assert TIMESTAMP_RE.match(out)
    assert out.endswith("}\n")
    head = out.split(" {", 1)[0]
    parts = head.split(" | ")
    assert parts[1] == "INFO "
    assert parts[2] == "started"
    assert parts[3] == "test_end_to_end_info_line"
    assert re.fullmatch(r"test_handlers\.py:\d+", parts[4])
    assert '"port": 8080' in out


@pytest.mark.parametrize(
    "method, marker",
    [
        ("debug", f"{MAGENTA}DEBUG{RESET}"),
        ("info", f"{BLUE}INFO {RESET}"),
        ("warning", f"{YELLOW}WARN {RESET}"),
        ("error", f"{RED}ERROR{RESET}"),
    ],
)
def test_level_markers_reach_the_sink(pretty_handler, stream, method, marker):
    logger = make_logger(pretty_handler)
    getattr(logger, method)("msg")
    assert marker in stream.getvalue()


def test_records_below_threshold_never_reach_the_renderer(stream, monkeypatch):
    handler = PrettyHandler(stream, PrettyHandlerOptions(level="warn"))
    rendered = []
    monkeypatch.setattr(handler, "render", lambda record, context=None: rendered.append(record) or "x")
    logger = make_logger(handler)

    logger.debug("dropped")
    logger.info("dropped")
    logger.warning("kept")

    assert [r.getMessage() for r in rendered] == ["kept"]


def test_one_write_per_record():
    stream = CountingStream()
    handler = PrettyHandler(stream, PrettyHandlerOptions())
    handler.emit(make_record({"a": 1, "b": [1, 2, 3]}))
    assert stream.writes == 1
    assert stream.getvalue().endswith("\n")


def test_write_record_raises_format_error_and_writes_nothing(stream):
    handler = PrettyHandler(stream, PrettyHandlerOptions())
    with pytest.raises(FormatError):
        handler.write_record(make_record({"obj": object()}))
    assert stream.getvalue() == ""


def test_emit_reports_format_error_through_handle_error(stream, monkeypatch):
    handler = PrettyHandler(stream, PrettyHandlerOptions())
    reported = []
    monkeypatch.setattr(handler, "handleError", reported.append)
    cyclic = []
    cyclic.append(cyclic)
    record = make_record({"loop": cyclic})

    handler.emit(record)

    assert reported == [record]
    assert stream.getvalue() == ""


def test_logging_call_never_raises_on_format_error(stream, monkeypatch):
    monkeypatch.setattr(logging, "raiseExceptions", False)
    handler = PrettyHandler(stream, PrettyHandlerOptions())
    logger = make_logger(handler)

    logger.info("bad", extra={"obj": object()})
    logger.info("good")

    out = stream.getvalue()
    assert "bad" not in out
    assert " | good | " in out


def test_auto_color_is_off_for_non_tty(stream, monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    handler = PrettyHandler(stream, PrettyHandlerOptions(color="auto"))
    assert handler.formatter.color is False


def test_auto_color_is_on_for_tty(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)

    class FakeTTY(io.StringIO):
        def isatty(self):
            return True

    handler = PrettyHandler(FakeTTY(), PrettyHandlerOptions(color="auto"))
    assert handler.formatter.color is True


def test_no_color_env_disables_auto_color(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")

    class FakeTTY(io.StringIO):
        def isatty(self):
            return True

    handler = PrettyHandler(FakeTTY(), PrettyHandlerOptions(color="auto"))
    assert handler.formatter.color is False


def test_add_source_option_reaches_formatter(stream):
    handler = PrettyHandler(stream, PrettyHandlerOptions(add_source=False))
    assert isinstance(handler.formatter, PrettyFormatter)
    assert handler.formatter.add_source is False
    handler.emit(make_record())
    assert " |  | :0 {}" in ANSI_RE.sub("", stream.getvalue())


def test_new_pretty_handler_accepts_mapping(stream):
    handler = new_pretty_handler(stream, {"level": "error", "add_source": False, "color": "never"})
    assert handler.stream is stream
    assert handler.level == logging.ERROR
    assert handler.options.add_source is False


def test_default_sink_is_stdout(capsys):
    handler = new_pretty_handler()
    handler.emit(make_record())
    assert " | hello | " in capsys.readouterr().out


def test_concurrent_logging_keeps_lines_whole(stream):
    handler = PrettyHandler(stream, PrettyHandlerOptions(color="never"))
    logger = make_logger(handler, "slogger.tests.handlers.concurrent")

    def worker(n):
        for i in range(50):
            logger.info("worker %d msg %d", n, i)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    lines = stream.getvalue().splitlines()
    assert len(lines) == 8 * 50
    assert all(TIMESTAMP_RE.match(line) and line.endswith(" {}") for line in lines)


def test_get_console_handler_entry():
    class S:
        LOG_STREAM = "stderr"
        LOG_LEVEL = "INFO"
        LOG_ADD_SOURCE = False
        LOG_COLOR = "never"

    entry = get_console_handler(S())
    assert entry["()"] is new_pretty_handler
    assert entry["out"] == "ext://sys.stderr"
    assert entry["opts"] == {"level": "INFO", "add_source": False, "color": "never"}


def test_set_stream_redecides_auto_color(stream, monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)

    class FakeTTY(io.StringIO):
        def isatty(self):
            return True

    handler = PrettyHandler(stream, PrettyHandlerOptions(color="auto"))
    assert handler.formatter.color is False

    tty = FakeTTY()
    assert handler.setStream(tty) is stream
    assert handler.formatter.color is True

    handler.setStream(io.StringIO())
    assert handler.formatter.color is False


def test_set_stream_keeps_forced_color(stream):
    handler = PrettyHandler(stream, PrettyHandlerOptions(color="always"))
    handler.setStream(io.StringIO())
    assert handler.formatter.color is True
