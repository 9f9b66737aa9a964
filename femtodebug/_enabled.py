"""Emitting implementation of the diagnostic call surface.

Bound to the public names of :mod:`femtodebug` when diagnostics are enabled.
Every entry point reduces to :func:`emit`, which checks the level gate
before doing anything else so that a suppressed statement neither resolves
a destination nor formats its message.

All entry points return ``True``. That lets a statement be written as
``assert debug("state=%r" % state)``, which the interpreter drops, argument
expressions included, under ``python -O``.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .config import get_level
from .destination import resolve_stream
from .gate import should_emit
from .location import caller_location
from .render import format_message, render_line, write_line

TextIO = typ.TextIO
Compose = cabc.Callable[[str, tuple[object, ...]], str]


def _join(sep: str, objects: tuple[object, ...]) -> str:
    return sep.join(map(str, objects))


def _emit(
    level: int,
    stream: TextIO | None,
    template: str,
    args: tuple[object, ...],
    stacklevel: int,
    compose: Compose = format_message,
) -> bool:
    if not should_emit(level, get_level()):
        return True
    target = resolve_stream(stream)
    location = caller_location(max(stacklevel, 1) + 1)
    write_line(target, render_line(location, compose(template, args)))
    return True


def emit(
    level: int,
    stream: TextIO | None,
    template: str,
    *args: object,
    stacklevel: int = 1,
) -> bool:
    """Emit one diagnostic line if ``level`` passes the gate.

    Parameters
    ----------
    level : int
        Message level; emitted iff ``0 < level <= get_level()``.
    stream : TextIO or None
        Destination. ``None`` selects the process default.
    template : str
        Literal message, or ``%``-style template when ``args`` are given.
    *args : object
        Values applied to ``template``.
    stacklevel : int, default 1
        Which frame to report: ``1`` is the caller of ``emit``; wrappers
        around ``emit`` pass ``2`` to report their own caller. Values below
        1 count as 1, and a value deeper than the stack reports the
        outermost frame.

    Returns
    -------
    bool
        Always ``True``.

    Raises
    ------
    DestinationError
        If ``stream`` is ``None`` and the default destination is unset.

    """
    return _emit(level, stream, template, args, stacklevel)


def debug(message: str) -> bool:
    """Emit ``message`` at level 1 to the default destination."""
    return _emit(1, None, message, (), 1)


def debugl(level: int, message: str) -> bool:
    """Emit ``message`` at ``level`` to the default destination."""
    return _emit(level, None, message, (), 1)


def fdebug(stream: TextIO | None, message: str) -> bool:
    """Emit ``message`` at level 1 to ``stream``."""
    return _emit(1, stream, message, (), 1)


def fdebugl(level: int, stream: TextIO | None, message: str) -> bool:
    """Emit ``message`` at ``level`` to ``stream``.

    A ``None`` stream falls back to the default destination.
    """
    return _emit(level, stream, message, (), 1)


def debugf(template: str, *args: object) -> bool:
    """Format ``template`` with ``args`` and emit it at level 1."""
    return _emit(1, None, template, args, 1)


def debuglf(level: int, template: str, *args: object) -> bool:
    """Format ``template`` with ``args`` and emit it at ``level``."""
    return _emit(level, None, template, args, 1)


def fdebugf(stream: TextIO | None, template: str, *args: object) -> bool:
    """Format ``template`` with ``args`` and emit it at level 1 to ``stream``."""
    return _emit(1, stream, template, args, 1)


def fdebuglf(level: int, stream: TextIO | None, template: str, *args: object) -> bool:
    """Format ``template`` with ``args`` and emit it at ``level`` to ``stream``.

    This is the most general form; the other entry points fix one or more
    of its arguments.
    """
    return _emit(level, stream, template, args, 1)


def debugp(*objects: object, sep: str = " ") -> bool:
    """Emit ``objects`` joined like :func:`print` at level 1.

    Each object is converted with :class:`str`, so values can be passed
    without building a template first::

        debugp("queue", queue_name, "holds", len(items), "items")

    """
    return _emit(1, None, sep, objects, 1, _join)


__all__ = [
    "debug",
    "debugf",
    "debugl",
    "debuglf",
    "debugp",
    "emit",
    "fdebug",
    "fdebugf",
    "fdebugl",
    "fdebuglf",
]
