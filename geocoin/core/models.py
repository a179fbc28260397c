"""Core data models: GridCell, Coin, CacheState."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from geocoin.core.enums import Direction


@dataclass(frozen=True, slots=True, order=True)
class GridCell:
    """Canonical integer address of one grid tile.

    Instances are handed out by :class:`GridLocator`, one per (i, j).
    Equality, hashing and ordering are by the (i, j) pair, so cells stay
    valid dict keys even if a stray duplicate were ever constructed.
    """

    i: int
    j: int

    @property
    def key(self) -> tuple[int, int]:
        return self.i, self.j

    def offset(self, di: int, dj: int) -> tuple[int, int]:
        return self.i + di, self.j + dj

    def __str__(self) -> str:
        return f"{self.i}:{self.j}"

    def __repr__(self) -> str:
        return f"GridCell({self.i}, {self.j})"


# Direction -> (di, dj): i follows latitude, j follows longitude
DIRECTION_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (-1, 0),
    Direction.WEST: (0, -1),
}


@dataclass(frozen=True, slots=True)
class Coin:
    """Identity token minted at *origin* with a per-cell *serial*.

    Coins are never mutated or destroyed, only relocated between
    inventories. The origin is a display back-reference, not ownership.
    """

    origin: GridCell
    serial: int

    @property
    def label(self) -> str:
        return f"{self.origin}#{self.serial}"

    def __str__(self) -> str:
        return self.label


_COIN_LABEL = re.compile(r"^\s*(-?\d+):(-?\d+)#(\d+)\s*$")


def parse_coin_label(label: str) -> tuple[int, int, int]:
    """Split ``"i:j#serial"`` into ``(i, j, serial)``."""
    m = _COIN_LABEL.match(label)
    if m is None:
        raise ValueError(f"Malformed coin label: {label!r}")
    return int(m.group(1)), int(m.group(2)), int(m.group(3))


@dataclass(slots=True)
class CacheState:
    """Memento of one cache's contents, retained across visits.

    Only the transfer actions mutate ``coins``: append on deposit,
    pop from the end on collect.
    """

    location: GridCell
    coins: list[Coin] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not self.coins

    def copy(self) -> CacheState:
        return CacheState(location=self.location, coins=list(self.coins))
