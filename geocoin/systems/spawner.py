"""Cache spawner — decides and stocks caches around the player."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from geocoin.core.models import CacheState, Coin, GridCell

if TYPE_CHECKING:
    from geocoin.config import GameConfig
    from geocoin.core.game_state import GameState
    from geocoin.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)

# Every cache starts with 1..MAX_INITIAL_COINS coins
MAX_INITIAL_COINS = 10


def spawn_key(oi: int, oj: int) -> str:
    """Spawn-decision key for the cell at offset (*oi*, *oj*) from the world origin."""
    return f"{oi},{oj}"


def coins_key(oi: int, oj: int) -> str:
    return spawn_key(oi, oj) + ":coins"


class CacheSpawner:
    """Scans square neighborhoods and registers each cache exactly once.

    Decisions depend only on the cell's offset from the fixed world
    origin, never on where the player stood when the cell was scanned.
    """

    __slots__ = ("_config", "_rng")

    def __init__(self, config: GameConfig, rng: DeterministicRNG) -> None:
        self._config = config
        self._rng = rng

    # -- decisions (pure) --

    def has_cache(self, oi: int, oj: int, probability: float | None = None) -> bool:
        if probability is None:
            probability = self._config.spawn_probability
        return self._rng.random(spawn_key(oi, oj)) < probability

    def initial_coin_count(self, oi: int, oj: int) -> int:
        """Starting stock for a cache, always within [1, MAX_INITIAL_COINS]."""
        roll = self._rng.random(coins_key(oi, oj))
        return math.floor(roll * MAX_INITIAL_COINS) + 1

    # -- registration --

    def spawn_at(self, state: GameState, cell: GridCell) -> CacheState | None:
        """Mint and register the cache at *cell* unless one already exists."""
        if state.ledger.has(cell):
            return None
        oi, oj = state.offset_of(cell)
        count = self.initial_coin_count(oi, oj)
        cache = state.ledger.create(cell, (Coin(cell, serial) for serial in range(count)))
        if cache is not None:
            state.minted += count
            logger.debug("Spawned cache at %s (offset %d,%d) with %d coins", cell, oi, oj, count)
        return cache

    def scan_neighborhood(
        self,
        state: GameState,
        center: GridCell,
        radius: int | None = None,
        spawn_probability: float | None = None,
    ) -> list[CacheState]:
        """Decide every cell within *radius* of *center*; return the new caches."""
        if radius is None:
            radius = self._config.neighborhood_radius
        if spawn_probability is None:
            spawn_probability = self._config.spawn_probability

        coi, coj = state.offset_of(center)
        spawned: list[CacheState] = []
        for di in range(-radius, radius + 1):
            for dj in range(-radius, radius + 1):
                oi, oj = coi + di, coj + dj
                if not self.has_cache(oi, oj, spawn_probability):
                    continue
                cell = state.cell_at_offset(oi, oj)
                cache = self.spawn_at(state, cell)
                if cache is not None:
                    spawned.append(cache)

        if spawned:
            logger.info(
                "Scan around %s (r=%d) spawned %d caches, ledger size %d",
                center, radius, len(spawned), len(state.ledger),
            )
        return spawned
