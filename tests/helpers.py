"""Shared helpers for the test suite."""

from __future__ import annotations

import io
import typing as typ


class RecordingStream(io.StringIO):
    """``StringIO`` that records the order of ``write`` and ``flush`` calls."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[str, str]] = []

    def write(self, s: str) -> int:
        self.calls.append(("write", s))
        return super().write(s)

    def flush(self) -> None:
        self.calls.append(("flush", ""))
        super().flush()


def call_from(
    statement: str,
    namespace: dict[str, typ.Any],
    *,
    file: str,
    line: int,
    function: str,
) -> typ.Any:
    """Evaluate ``statement`` as if written at ``file:line`` inside ``function``.

    The statement is compiled into a function called ``function`` whose
    code object records ``file`` as its filename, with blank lines padding
    the body so that the expression sits on ``line``.

    Parameters
    ----------
    statement : str
        Expression to evaluate, e.g. ``'debug("hello")'``.
    namespace : dict[str, Any]
        Globals for the compiled function; must provide the names the
        expression uses.
    file, line, function
        The location the expression should report. ``line`` must be at
        least 2.

    Returns
    -------
    Any
        The value of the expression.

    Examples
    --------
    >>> from femtodebug import debug
    >>> call_from('debug("hello")', {"debug": debug}, file="main", line=42,
    ...           function="run")
    True

    """
    if line < 2:  # noqa: PLR2004
        msg = "line must be at least 2"
        raise ValueError(msg)
    source = f"def {function}():\n" + "\n" * (line - 2) + f"    return {statement}\n"
    exec(compile(source, file, "exec"), namespace)  # noqa: S102
    return namespace[function]()
