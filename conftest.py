"""Root pytest configuration.

The diagnostic surface is bound once, when :mod:`femtodebug` is first
imported, so the enable switch has to be in the environment before any
test module imports the package.
"""

from __future__ import annotations

import os

os.environ.setdefault("FEMTODEBUG", "1")
