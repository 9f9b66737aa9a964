"""femtodebug package.

Leveled, location-tagged diagnostic statements that vanish from disabled
builds. With ``FEMTODEBUG=1`` in the environment (and the interpreter not
running under ``-O``), each statement that passes the level gate writes one
line to the destination and flushes it::

    <file> <line> <function>: <message>

Otherwise every entry point below is bound to a no-op. See
:mod:`femtodebug.strip` for removing the statements, arguments included,
from the compiled code of selected modules.

Examples
--------
>>> from femtodebug import debug, debuglf
>>> debug("starting")
True
>>> debuglf(2, "loaded %d rows from %s", 12, "users.csv")
True

"""

from __future__ import annotations

from .build import BUILD, BuildOptionError, BuildOptions, read_build_options
from .config import (
    get_level,
    get_max_length,
    get_stream,
    reset_config,
    set_level,
    set_stream,
)
from .destination import DestinationError, resolve_stream
from .gate import should_emit
from .location import Location, caller_location, render_prefix

ENABLED: bool = BUILD.enabled

if ENABLED:
    from ._enabled import (
        debug,
        debugf,
        debugl,
        debuglf,
        debugp,
        emit,
        fdebug,
        fdebugf,
        fdebugl,
        fdebuglf,
    )
else:
    from ._disabled import (
        debug,
        debugf,
        debugl,
        debuglf,
        debugp,
        emit,
        fdebug,
        fdebugf,
        fdebugl,
        fdebuglf,
    )

__all__ = [
    "BUILD",
    "ENABLED",
    "BuildOptionError",
    "BuildOptions",
    "DestinationError",
    "Location",
    "caller_location",
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
    "get_level",
    "get_max_length",
    "get_stream",
    "read_build_options",
    "render_prefix",
    "reset_config",
    "resolve_stream",
    "set_level",
    "set_stream",
    "should_emit",
]
