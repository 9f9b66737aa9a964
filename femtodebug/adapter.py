"""Bridges between femtodebug and the stdlib :mod:`logging` package.

``DebugLineFormatter`` renders ``logging.LogRecord`` objects in the
diagnostic line shape, so output from stdlib loggers can sit next to
femtodebug output and be parsed by the same tools.

``LoggerStream`` goes the other way: it is a write-only text stream that
can be installed as the femtodebug destination and hands every complete
line to a ``logging.Logger``. It is still a single destination; routing
beyond that is the logger's business.
"""

from __future__ import annotations

import io
import logging
import warnings

from .location import Location, render_prefix


class DebugLineFormatter(logging.Formatter):
    """Format records as ``<pathname> <lineno> <funcName>: <message>``.

    Examples
    --------
    >>> handler = logging.StreamHandler()
    >>> handler.setFormatter(DebugLineFormatter())

    """

    def format(self, record: logging.LogRecord) -> str:
        """Return the record as a single diagnostic line without newline.

        Exception and stack text, when present, follow on their own lines
        as :class:`logging.Formatter` would append them.
        """
        location = Location(record.pathname, record.lineno, record.funcName)
        text = f"{render_prefix(location)}: {record.getMessage()}"
        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            text = f"{text}\n{record.exc_text}"
        if record.stack_info:
            text = f"{text}\n{self.formatStack(record.stack_info)}"
        return text


class LoggerStream(io.TextIOBase):
    """Text stream that forwards each written line to a stdlib logger.

    Parameters
    ----------
    logger
        A :class:`logging.Logger` receiving one record per line.
    level
        Stdlib level for the records. Defaults to ``logging.DEBUG``.

    Raises
    ------
    TypeError
        If *logger* is not a :class:`logging.Logger`.

    """

    def __init__(self, logger: logging.Logger, level: int = logging.DEBUG) -> None:
        if not isinstance(logger, logging.Logger):
            msg = f"expected a logging.Logger instance, got {type(logger).__name__}"
            raise TypeError(msg)
        super().__init__()
        self._logger = logger
        self._level = level
        self._pending = ""

    @property
    def logger(self) -> logging.Logger:
        """The wrapped logger."""
        return self._logger

    def writable(self) -> bool:
        return True

    def write(self, s: str) -> int:
        """Buffer ``s`` and log every line it completes."""
        if self.closed:
            msg = "I/O operation on closed LoggerStream"
            raise ValueError(msg)
        *lines, self._pending = (self._pending + s).split("\n")
        for line in lines:
            self._logger.log(self._level, "%s", line)
        return len(s)

    def flush(self) -> None:
        """Log a pending partial line, if any."""
        if self._pending:
            line, self._pending = self._pending, ""
            self._logger.log(self._level, "%s", line)

    def close(self) -> None:
        if not self.closed and self._pending:
            warnings.warn(
                "LoggerStream closed with an unterminated line; "
                "it is logged as it stands",
                RuntimeWarning,
                stacklevel=2,
            )
            self.flush()
        super().close()


__all__ = ["DebugLineFormatter", "LoggerStream"]
