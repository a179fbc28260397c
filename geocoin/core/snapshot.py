"""Immutable snapshot of the game state for the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from geocoin.core.game_state import GameState
from geocoin.core.models import CacheState, Coin, GridCell


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only view of the game after one event.

    Caches are deep-copied and exposed through a MappingProxyType, so
    nothing a renderer does to a snapshot can reach the ledger.
    """

    turn: int
    seed: int
    position: tuple[float, float]
    player_cell: GridCell
    inventory: tuple[Coin, ...]
    caches: Mapping[tuple[int, int], CacheState]
    minted: int

    @classmethod
    def from_state(cls, state: GameState) -> Snapshot:
        copied = {c.location.key: c.copy() for c in state.ledger}
        return cls(
            turn=state.turn,
            seed=state.seed,
            position=state.player.position,
            player_cell=state.player_cell(),
            inventory=tuple(state.player.inventory),
            caches=MappingProxyType(copied),
            minted=state.minted,
        )

    def cache_at(self, cell: GridCell) -> CacheState | None:
        return self.caches.get(cell.key)

    def caches_near(self, center: GridCell, radius: int) -> list[CacheState]:
        """Caches inside the square of *radius* cells around *center*."""
        return [
            c for c in self.caches.values()
            if abs(c.location.i - center.i) <= radius and abs(c.location.j - center.j) <= radius
        ]

    @property
    def total_coins(self) -> int:
        return sum(len(c.coins) for c in self.caches.values()) + len(self.inventory)
