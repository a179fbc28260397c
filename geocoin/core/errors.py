"""Exceptions raised by the game core."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geocoin.core.models import GridCell


class UnknownCacheError(LookupError):
    """An operation referenced a cell the spawner never decided as a cache.

    This is a caller ordering bug (acting on a cell that was never scanned),
    so it is raised instead of being reported as a transfer outcome.
    """

    def __init__(self, cell: GridCell) -> None:
        super().__init__(f"No cache at cell {cell}")
        self.cell = cell
