"""Test package for femtodebug.

Test Organisation
-----------------
- Unit tests (test_*.py): the build switches, configuration accessors,
  location capture, destination resolution, rendering, the public call
  surface, statement stripping and the stdlib bridge.
- BDD tests (features/): Gherkin feature files with step definitions in
  steps/.
- Shared fixtures (conftest.py): ``_clean_diagnostic_config`` resets the
  global configuration around every test and ``recording_stream`` records
  writes and flushes.
- Shared helpers (helpers.py): ``RecordingStream`` and ``call_from``, which
  runs a statement from a chosen file, line and function.

Running Tests
-------------
Run all tests::

    pytest tests/

Run BDD tests only::

    pytest tests/steps/

The enable switch is set by the repository's root ``conftest.py``.
"""
