"""DepositAction — move a held coin into a cache.

Any coin may be dropped into any cache; coins carry no home cell.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geocoin.actions.base import TransferResult
from geocoin.core.enums import TransferOutcome

if TYPE_CHECKING:
    from geocoin.core.game_state import GameState
    from geocoin.core.models import Coin, GridCell

logger = logging.getLogger(__name__)


class DepositAction:
    """Stateless handler for deposit requests."""

    @staticmethod
    def validate(state: GameState, cell: GridCell, coin: Coin | None = None) -> bool:
        """True when the player holds *coin* (or any coin when None).

        Raises :class:`UnknownCacheError` for a cell without a cache.
        """
        state.ledger.require(cell)
        inventory = state.player.inventory
        if not inventory:
            return False
        return coin is None or coin in inventory

    @staticmethod
    def apply(state: GameState, cell: GridCell, coin: Coin | None = None) -> TransferResult:
        if not DepositAction.validate(state, cell, coin):
            logger.debug("Deposit at %s refused: %s not held", cell, coin or "no coin")
            return TransferResult(TransferOutcome.NO_COIN_HELD, cell, coin)

        inventory = state.player.inventory
        if coin is None:
            coin = inventory.pop()
        else:
            # The held instance carries the canonical origin cell
            coin = inventory.pop(inventory.index(coin))
        state.ledger.push_coin(cell, coin)
        logger.debug("Deposited %s into %s", coin, cell)
        return TransferResult(TransferOutcome.OK, cell, coin)
