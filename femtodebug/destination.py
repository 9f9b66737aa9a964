"""Destination resolution for diagnostic lines."""

from __future__ import annotations

import typing as typ

from .config import get_stream

TextIO = typ.TextIO


class DestinationError(RuntimeError):
    """Raised when no explicit stream is given and the default is unusable."""


def resolve_stream(explicit: TextIO | None = None) -> TextIO:
    """Return ``explicit`` or, when it is ``None``, the process default.

    Raises
    ------
    DestinationError
        If the fallback is needed and the default destination has been set
        to ``None``. A closed stream is not detected here; the subsequent
        write fails the way that stream fails.

    """
    if explicit is not None:
        return explicit
    stream = get_stream()
    if stream is None:
        msg = (
            "no default diagnostic destination: set_stream(None) was called "
            "and no explicit stream was passed"
        )
        raise DestinationError(msg)
    return stream


__all__ = ["DestinationError", "resolve_stream"]
