"""Rendering and writing of diagnostic lines.

Every emitted line has the shape::

    <file> <line> <function>: <message>\\n

with single spaces, no timestamp and no level tag. Tools that grep existing
diagnostic output rely on this shape, so it must not change.

Messages are built with printf-style ``%`` formatting. A template with no
arguments is used verbatim, so a literal message and a ``"%s"`` template
given that same literal render identically. A single mapping argument
supplies ``%(key)s`` substitutions, as it does for :mod:`logging`.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .location import Location, render_prefix

Mapping = cabc.Mapping
TextIO = typ.TextIO


def format_message(template: str, args: tuple[object, ...]) -> str:
    """Apply ``args`` to ``template``.

    Examples
    --------
    >>> format_message("count=%d", (7,))
    'count=7'
    >>> format_message("100%", ())
    '100%'

    """
    if not args:
        return template
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        return template % args[0]
    return template % args


def render_line(location: Location, message: str) -> str:
    """Compose the full diagnostic line, trailing newline included."""
    return f"{render_prefix(location)}: {message}\n"


def write_line(stream: TextIO, line: str) -> None:
    """Write ``line`` in a single call and flush ``stream`` straight away.

    Failures raised by the stream propagate unchanged and are not retried.
    """
    stream.write(line)
    stream.flush()


__all__ = ["format_message", "render_line", "write_line"]
