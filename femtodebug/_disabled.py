"""No-op implementation of the diagnostic call surface.

Bound to the public names of :mod:`femtodebug` when diagnostics are
disabled. The functions accept the same arguments as their counterparts in
:mod:`femtodebug._enabled` and do nothing at all: no gate check, no
configuration read, no formatting, no write.

Python evaluates call arguments before the call, so a side-effecting
argument still runs here. Modules that must not pay for their diagnostic
arguments either load through :func:`femtodebug.strip.install` or wrap the
statements in ``assert`` and run under ``python -O``.
"""

from __future__ import annotations

import typing as typ

TextIO = typ.TextIO


def emit(
    level: int,
    stream: TextIO | None,
    template: str,
    *args: object,
    stacklevel: int = 1,
) -> bool:
    return True


def debug(message: str) -> bool:
    return True


def debugl(level: int, message: str) -> bool:
    return True


def fdebug(stream: TextIO | None, message: str) -> bool:
    return True


def fdebugl(level: int, stream: TextIO | None, message: str) -> bool:
    return True


def debugf(template: str, *args: object) -> bool:
    return True


def debuglf(level: int, template: str, *args: object) -> bool:
    return True


def fdebugf(stream: TextIO | None, template: str, *args: object) -> bool:
    return True


def fdebuglf(level: int, stream: TextIO | None, template: str, *args: object) -> bool:
    return True


def debugp(*objects: object, sep: str = " ") -> bool:
    return True


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
