"""Process-wide diagnostic configuration.

Holds the verbosity threshold and the default destination. Both are global
so that a diagnostic statement can run at any call depth without a context
object being threaded through. Access goes through the accessor functions
below rather than the underlying dataclass; no locking is performed and a
reader may observe a value that another thread is about to replace.

The default destination is the process's standard error stream, looked up
on every read rather than captured at import, so replacing ``sys.stderr``
(as test harnesses do) is honoured until :func:`set_stream` installs a
specific stream.
"""

from __future__ import annotations

import dataclasses
import sys
import typing as typ

from .build import BUILD

TextIO = typ.TextIO


class _StandardError:
    """Marker for "whatever ``sys.stderr`` is at the time of the call"."""

    def __repr__(self) -> str:
        return "<sys.stderr>"


STDERR: typ.Final = _StandardError()


@dataclasses.dataclass(slots=True)
class DiagnosticConfig:
    """Mutable state shared by every diagnostic statement in the process."""

    level: int = BUILD.level
    stream: TextIO | _StandardError | None = STDERR
    max_length: int = BUILD.max_length


_config = DiagnosticConfig()


def get_level() -> int:
    """Return the current verbosity threshold."""
    return _config.level


def set_level(level: int) -> None:
    """Set the verbosity threshold.

    Parameters
    ----------
    level : int
        New threshold. ``0`` silences every diagnostic statement.

    Raises
    ------
    TypeError
        If ``level`` is not an ``int`` (``bool`` is rejected too).
    ValueError
        If ``level`` is negative.

    """
    if isinstance(level, bool) or not isinstance(level, int):
        msg = f"level must be an int, got {type(level).__name__}"
        raise TypeError(msg)
    if level < 0:
        msg = f"level must not be negative, got {level}"
        raise ValueError(msg)
    _config.level = level


def get_stream() -> TextIO | None:
    """Return the default destination, resolving standard error lazily."""
    stream = _config.stream
    if isinstance(stream, _StandardError):
        return sys.stderr
    return stream


def set_stream(stream: TextIO | None) -> None:
    """Replace the default destination.

    Passing ``None`` leaves the process without a usable default: any
    statement that relies on it will fail with
    :class:`~femtodebug.destination.DestinationError`. Establishing a valid
    default is the caller's responsibility.
    """
    _config.stream = stream


def get_max_length() -> int:
    """Return the preferred maximum literal length (never enforced)."""
    return _config.max_length


def reset_config() -> None:
    """Restore the threshold and destination captured at import."""
    _config.level = BUILD.level
    _config.stream = STDERR
    _config.max_length = BUILD.max_length


__all__ = [
    "STDERR",
    "DiagnosticConfig",
    "get_level",
    "get_max_length",
    "get_stream",
    "reset_config",
    "set_level",
    "set_stream",
]
