"""Tests for the stdlib logging bridges."""

from __future__ import annotations

import io
import logging
import sys
import typing as typ

import pytest

from femtodebug import debugf, fdebug, set_stream
from femtodebug.adapter import DebugLineFormatter, LoggerStream

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@pytest.fixture
def stream() -> io.StringIO:
    """Return a fresh StringIO for capturing handler output."""
    return io.StringIO()


@pytest.fixture
def stdlib_logger(stream: io.StringIO) -> cabc.Iterator[logging.Logger]:
    """Return an isolated logger writing bare messages to *stream*."""
    logger = logging.getLogger(f"femtodebug.tests.{id(stream)}")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(levelname)s|%(message)s"))
    logger.addHandler(handler)
    try:
        yield logger
    finally:
        logger.removeHandler(handler)


def _make_record(msg: str, *args: object) -> logging.LogRecord:
    return logging.LogRecord(
        name="app",
        level=logging.INFO,
        pathname="src/app.py",
        lineno=17,
        msg=msg,
        args=args,
        exc_info=None,
        func="Service.start",
    )


def test_formatter_renders_diagnostic_shape() -> None:
    record = _make_record("count=%d", 7)
    assert DebugLineFormatter().format(record) == "src/app.py 17 Service.start: count=7"


def test_formatter_appends_exception_text() -> None:
    try:
        raise ValueError("bad")  # noqa: TRY301
    except ValueError:
        record = _make_record("failed")
        record.exc_info = sys.exc_info()
    text = DebugLineFormatter().format(record)
    first, *rest = text.splitlines()
    assert first == "src/app.py 17 Service.start: failed"
    assert rest[0] == "Traceback (most recent call last):"
    assert rest[-1] == "ValueError: bad"


def test_formatter_with_stdlib_handler(stream: io.StringIO) -> None:
    logger = logging.getLogger("femtodebug.tests.formatter")
    logger.propagate = False
    handler = logging.StreamHandler(stream)
    handler.setFormatter(DebugLineFormatter())
    logger.addHandler(handler)
    try:
        logger.warning("hello")
    finally:
        logger.removeHandler(handler)
    line = stream.getvalue()
    assert line.startswith(f"{__file__} ")
    assert line.endswith(" test_formatter_with_stdlib_handler: hello\n")


def test_logger_stream_forwards_complete_lines(
    stdlib_logger: logging.Logger, stream: io.StringIO
) -> None:
    target = LoggerStream(stdlib_logger)
    target.write("first\nsecond ")
    assert stream.getvalue() == "DEBUG|first\n"
    target.write("half\n")
    assert stream.getvalue() == "DEBUG|first\nDEBUG|second half\n"


def test_logger_stream_flush_forwards_partial_line(
    stdlib_logger: logging.Logger, stream: io.StringIO
) -> None:
    target = LoggerStream(stdlib_logger, logging.INFO)
    target.write("partial")
    target.flush()
    assert stream.getvalue() == "INFO|partial\n"
    target.flush()
    assert stream.getvalue() == "INFO|partial\n"


def test_logger_stream_as_default_destination(
    stdlib_logger: logging.Logger, stream: io.StringIO
) -> None:
    set_stream(LoggerStream(stdlib_logger))
    debugf("rows=%d", 3)
    assert stream.getvalue().startswith(f"DEBUG|{__file__} ")
    assert stream.getvalue().endswith(
        " test_logger_stream_as_default_destination: rows=3\n"
    )


def test_logger_stream_as_explicit_destination(
    stdlib_logger: logging.Logger, stream: io.StringIO
) -> None:
    fdebug(LoggerStream(stdlib_logger), "explicit")
    assert stream.getvalue().endswith(": explicit\n")
    assert stream.getvalue().count("\n") == 1


def test_logger_stream_rejects_non_logger() -> None:
    with pytest.raises(TypeError, match="expected a logging.Logger instance"):
        LoggerStream(io.StringIO())  # type: ignore[arg-type]


def test_logger_stream_write_after_close_fails(stdlib_logger: logging.Logger) -> None:
    target = LoggerStream(stdlib_logger)
    target.close()
    with pytest.raises(ValueError, match="closed LoggerStream"):
        target.write("late\n")


def test_logger_stream_close_warns_on_pending_line(
    stdlib_logger: logging.Logger, stream: io.StringIO
) -> None:
    target = LoggerStream(stdlib_logger)
    target.write("dangling")
    with pytest.warns(RuntimeWarning, match="unterminated line"):
        target.close()
    assert stream.getvalue() == "DEBUG|dangling\n"
