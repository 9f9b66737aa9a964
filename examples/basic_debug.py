#!/usr/bin/env python3
# /// script
# requires-python = ">=3.10"
# dependencies = [
#     "femtodebug @ {path = \"..\"}",
# ]
# ///
"""Demonstrate leveled diagnostics and explicit destinations.

Run with ``FEMTODEBUG=1`` to see the diagnostic lines on standard error;
without it, or under ``python -O``, the script prints only its result.
``FEMTODEBUG_LEVEL=2`` additionally shows the per-item lines.
"""

from __future__ import annotations

import sys

from femtodebug import debug, debuglf, debugp, fdebugf


class Inventory:
    """Tiny example type so the qualified function name shows up."""

    def __init__(self) -> None:
        self.items: dict[str, int] = {}

    def add(self, name: str, count: int) -> None:
        debuglf(2, "adding %d x %s", count, name)
        self.items[name] = self.items.get(name, 0) + count


def main() -> None:
    """Fill an inventory and report on it."""
    debug("starting")
    inventory = Inventory()
    for name, count in [("bolts", 12), ("nuts", 30), ("bolts", 3)]:
        inventory.add(name, count)
    assert debugp("inventory holds", len(inventory.items), "kinds")
    fdebugf(sys.stdout, "summary: %r", inventory.items)
    print(sum(inventory.items.values()))


if __name__ == "__main__":
    main()
