"""Cache ledger: the single source of truth for every cache's contents."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from geocoin.core.errors import UnknownCacheError
from geocoin.core.models import CacheState, Coin, GridCell

logger = logging.getLogger(__name__)


class CacheLedger:
    """Maps a cell key to its CacheState memento.

    A key is present iff the spawner decided the cell holds a cache.
    Entries are never removed during a session.
    """

    __slots__ = ("_caches",)

    def __init__(self) -> None:
        self._caches: dict[tuple[int, int], CacheState] = {}

    # -- lookup --

    def get(self, cell: GridCell) -> CacheState | None:
        return self._caches.get(cell.key)

    def require(self, cell: GridCell) -> CacheState:
        """Return the cache at *cell* or raise :class:`UnknownCacheError`."""
        cache = self._caches.get(cell.key)
        if cache is None:
            raise UnknownCacheError(cell)
        return cache

    def has(self, cell: GridCell) -> bool:
        return cell.key in self._caches

    # -- creation --

    def create(self, cell: GridCell, coins: Iterable[Coin]) -> CacheState | None:
        """Insert a new cache at *cell*.

        Returns the new entry, or None when the cell already holds a cache
        (the existing contents are left untouched).
        """
        if cell.key in self._caches:
            return None
        cache = CacheState(location=cell, coins=list(coins))
        self._caches[cell.key] = cache
        logger.debug("Cache created at %s with %d coins", cell, len(cache.coins))
        return cache

    # -- mutation (transfer actions only) --

    def pop_coin(self, cell: GridCell) -> Coin | None:
        """Remove and return the last coin at *cell*, or None if empty."""
        cache = self.require(cell)
        if not cache.coins:
            return None
        return cache.coins.pop()

    def push_coin(self, cell: GridCell, coin: Coin) -> None:
        self.require(cell).coins.append(coin)

    # -- introspection --

    def total_coins(self) -> int:
        return sum(len(c.coins) for c in self._caches.values())

    def caches(self) -> list[CacheState]:
        return list(self._caches.values())

    def __iter__(self) -> Iterator[CacheState]:
        return iter(self._caches.values())

    def __len__(self) -> int:
        return len(self._caches)

    def __contains__(self, cell: object) -> bool:
        return isinstance(cell, GridCell) and cell.key in self._caches
