"""Level gate deciding whether a diagnostic statement emits."""

from __future__ import annotations


def should_emit(level: int, threshold: int) -> bool:
    """Return ``True`` when ``0 < level <= threshold``.

    A level of zero or below never emits, so a statement guarded by a
    boolean-like ``0`` stays silent whatever the threshold is.
    """
    return 0 < level <= threshold


__all__ = ["should_emit"]
