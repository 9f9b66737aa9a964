from __future__ import annotations

import typing as typ

import pytest

import femtodebug

from .helpers import RecordingStream

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@pytest.fixture(autouse=True)
def _clean_diagnostic_config() -> cabc.Iterator[None]:
    """Reset the global diagnostic configuration before and after each test."""
    femtodebug.reset_config()
    try:
        yield
    finally:
        femtodebug.reset_config()


@pytest.fixture
def recording_stream() -> RecordingStream:
    """Return a stream that records writes and flushes in order."""
    return RecordingStream()
