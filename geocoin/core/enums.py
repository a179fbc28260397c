"""Enumerations used throughout the game core."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class Direction(IntEnum):
    """Cardinal movement directions."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @classmethod
    def parse(cls, text: str) -> Direction:
        """Accept full names or single letters, case-insensitive."""
        name = text.strip().upper()
        for d in cls:
            if d.name == name or d.name[0] == name:
                return d
        raise ValueError(f"Unknown direction: {text!r}")


@unique
class TransferOutcome(IntEnum):
    """Result of a collect or deposit request."""

    OK = 0
    EMPTY_CACHE = 1     # collect on a cache with no coins
    NO_COIN_HELD = 2    # deposit without holding (that) coin
