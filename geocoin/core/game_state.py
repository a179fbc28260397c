"""Mutable authoritative game state — only mutated through the actions."""

from __future__ import annotations

from geocoin.core.ledger import CacheLedger
from geocoin.core.locator import GridLocator
from geocoin.core.models import GridCell
from geocoin.core.player import PlayerState


class GameState:
    """The single source of truth for one session."""

    __slots__ = ("seed", "locator", "ledger", "player", "origin_cell", "minted", "turn")

    def __init__(
        self,
        seed: int,
        locator: GridLocator,
        ledger: CacheLedger,
        player: PlayerState,
    ) -> None:
        self.seed: int = seed
        self.locator: GridLocator = locator
        self.ledger: CacheLedger = ledger
        self.player: PlayerState = player
        self.origin_cell: GridCell = locator.locate(player.origin_lat, player.origin_lng)
        self.minted: int = 0
        self.turn: int = 0

    def cell_at_offset(self, oi: int, oj: int) -> GridCell:
        """Cell *oi* rows north and *oj* columns east of the world origin."""
        return self.locator.cell(self.origin_cell.i + oi, self.origin_cell.j + oj)

    def offset_of(self, cell: GridCell) -> tuple[int, int]:
        """Inverse of :meth:`cell_at_offset`."""
        return cell.i - self.origin_cell.i, cell.j - self.origin_cell.j

    def player_cell(self) -> GridCell:
        return self.cell_at_offset(*self.player.steps)

    def total_coins(self) -> int:
        """Coins across every cache plus the player's inventory."""
        return self.ledger.total_coins() + len(self.player.inventory)
