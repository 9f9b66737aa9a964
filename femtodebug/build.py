"""Import-time build switches for femtodebug.

The switches are read once, when the package is first imported, and decide
whether the diagnostic surface is bound to the emitting implementation or
to the no-op one. They are the only configuration surface besides the two
runtime accessors in :mod:`femtodebug.config`.

``FEMTODEBUG``
    Enables diagnostics when set to any value other than the disabling
    words. Unset, empty, ``0``, ``false``, ``no`` and ``off``
    (case-insensitive) leave them disabled. Running the interpreter with
    ``-O`` disables diagnostics whatever the variable says.
``FEMTODEBUG_LEVEL``
    Initial verbosity threshold, an unsigned decimal integer (default 1).
``FEMTODEBUG_MAX_LENGTH``
    Preferred maximum length of a literal message (default 60). It is
    guidance for authors and is never enforced.

Examples
--------
>>> read_build_options({"FEMTODEBUG": "1", "FEMTODEBUG_LEVEL": "3"})
BuildOptions(enabled=True, level=3, max_length=60)

"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses
import os
import typing as typ

Mapping = cabc.Mapping
Final = typ.Final

ENABLE_VAR: Final = "FEMTODEBUG"
LEVEL_VAR: Final = "FEMTODEBUG_LEVEL"
MAX_LENGTH_VAR: Final = "FEMTODEBUG_MAX_LENGTH"

DEFAULT_LEVEL: Final = 1
DEFAULT_MAX_LENGTH: Final = 60

_FALSY: Final = frozenset({"", "0", "false", "no", "off"})


class BuildOptionError(ValueError):
    """Raised when a build switch holds a value that cannot be parsed."""


@dataclasses.dataclass(frozen=True, slots=True)
class BuildOptions:
    """Switches captured when the package is imported."""

    enabled: bool = False
    level: int = DEFAULT_LEVEL
    max_length: int = DEFAULT_MAX_LENGTH


def _parse_flag(raw: str) -> bool:
    """Interpret the enable switch: set means on unless it names "off"."""
    return raw.strip().lower() not in _FALSY


def _parse_unsigned(raw: str, name: str, *, minimum: int) -> int:
    """Parse a decimal integer no smaller than ``minimum``."""
    text = raw.strip()
    if not text.isdecimal():
        msg = f"{name} must be a non-negative decimal integer, got {raw!r}"
        raise BuildOptionError(msg)
    value = int(text)
    if value < minimum:
        msg = f"{name} must be at least {minimum}, got {value}"
        raise BuildOptionError(msg)
    return value


def read_build_options(
    environ: Mapping[str, str] | None = None, *, debug: bool = __debug__
) -> BuildOptions:
    """Read the build switches from ``environ``.

    Parameters
    ----------
    environ : Mapping[str, str], optional
        Source of the switches. Defaults to :data:`os.environ`.
    debug : bool, default ``__debug__``
        Whether the interpreter runs without ``-O``. When ``False`` the
        diagnostics are disabled regardless of ``FEMTODEBUG``.

    Returns
    -------
    BuildOptions
        The parsed switches.

    Raises
    ------
    BuildOptionError
        If any switch is present but malformed.

    """
    env = os.environ if environ is None else environ

    enabled = _parse_flag(env.get(ENABLE_VAR, ""))
    level = DEFAULT_LEVEL
    if env.get(LEVEL_VAR) is not None:
        level = _parse_unsigned(env[LEVEL_VAR], LEVEL_VAR, minimum=0)
    max_length = DEFAULT_MAX_LENGTH
    if env.get(MAX_LENGTH_VAR) is not None:
        max_length = _parse_unsigned(env[MAX_LENGTH_VAR], MAX_LENGTH_VAR, minimum=1)

    return BuildOptions(enabled=enabled and debug, level=level, max_length=max_length)


BUILD: Final[BuildOptions] = read_build_options()

__all__ = [
    "BUILD",
    "DEFAULT_LEVEL",
    "DEFAULT_MAX_LENGTH",
    "ENABLE_VAR",
    "LEVEL_VAR",
    "MAX_LENGTH_VAR",
    "BuildOptionError",
    "BuildOptions",
    "read_build_options",
]
