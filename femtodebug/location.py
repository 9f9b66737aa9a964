"""Call-site location capture.

A :class:`Location` names the file, line and enclosing function of the
statement that invoked a diagnostic entry point. The function name uses the
qualified form (``Widget.draw``, ``outer.<locals>.inner``) when code objects
carry one and the bare name otherwise; which of the two is used is settled
once, when this module is imported.
"""

from __future__ import annotations

import sys
import types
import typing as typ

CodeType = types.CodeType


class Location(typ.NamedTuple):
    """File, line and function of a call site."""

    file: str
    line: int
    function: str


if hasattr(CodeType, "co_qualname"):

    def function_name(code: CodeType) -> str:
        """Return the qualified name recorded on ``code``."""
        return code.co_qualname

else:  # pragma: no cover - interpreters before 3.11

    def function_name(code: CodeType) -> str:
        """Return the bare name recorded on ``code``."""
        return code.co_name


def frame_location(frame: types.FrameType) -> Location:
    """Build a :class:`Location` for ``frame``'s current line."""
    code = frame.f_code
    return Location(code.co_filename, frame.f_lineno, function_name(code))


def caller_location(stacklevel: int = 1) -> Location:
    """Return the location of a caller further up the stack.

    Parameters
    ----------
    stacklevel : int, default 1
        ``1`` designates the function that called the function invoking
        ``caller_location``; each increment walks one more frame outwards,
        mirroring the ``stacklevel`` argument of :mod:`logging`. Values
        below 1 count as 1, and a value deeper than the stack stops at the
        outermost frame.

    """
    frame = sys._getframe(1)  # noqa: SLF001
    for _ in range(max(stacklevel, 1)):
        if frame.f_back is None:
            break
        frame = frame.f_back
    return frame_location(frame)


def render_prefix(location: Location) -> str:
    """Return ``"<file> <line> <function>"`` for ``location``."""
    return f"{location.file} {location.line:d} {location.function}"


__all__ = [
    "Location",
    "caller_location",
    "frame_location",
    "function_name",
    "render_prefix",
]
