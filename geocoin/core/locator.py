"""Grid locator: continuous coordinates to canonical GridCell flyweights."""

from __future__ import annotations

import logging
import math

from geocoin.core.models import GridCell

logger = logging.getLogger(__name__)


class GridLocator:
    """Owns the arena of GridCell instances, one per (i, j).

    The arena is append-only: cells are created on first lookup and kept
    for the lifetime of the locator.
    """

    __slots__ = ("_scale", "_cells")

    def __init__(self, scale: int = 10_000) -> None:
        self._scale = scale
        self._cells: dict[tuple[int, int], GridCell] = {}

    @property
    def scale(self) -> int:
        return self._scale

    # -- lookup --

    def _index(self, value: float) -> int:
        # Round half up so ties resolve the same way regardless of sign parity
        return math.floor(value * self._scale + 0.5)

    def locate(self, lat: float, lng: float) -> GridCell:
        """Return the canonical cell containing (*lat*, *lng*)."""
        return self.cell(self._index(lat), self._index(lng))

    def cell(self, i: int, j: int) -> GridCell:
        """Return the canonical cell for the integer address (*i*, *j*)."""
        key = (i, j)
        found = self._cells.get(key)
        if found is None:
            found = GridCell(i, j)
            self._cells[key] = found
        return found

    def known(self, i: int, j: int) -> GridCell | None:
        """Return the cell for (*i*, *j*) only if it was already created."""
        return self._cells.get((i, j))

    # -- geometry --

    def center(self, cell: GridCell) -> tuple[float, float]:
        """(lat, lng) at the middle of *cell*."""
        return cell.i / self._scale, cell.j / self._scale

    def bounds(self, cell: GridCell) -> tuple[tuple[float, float], tuple[float, float]]:
        """((south, west), (north, east)) rectangle of coordinates that locate to *cell*."""
        half = 0.5 / self._scale
        lat, lng = self.center(cell)
        return (lat - half, lng - half), (lat + half, lng + half)

    # -- introspection --

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, GridCell):
            key = key.key
        return key in self._cells
