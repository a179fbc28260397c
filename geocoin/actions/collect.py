"""CollectAction — take the top coin of a cache into the player's inventory."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geocoin.actions.base import TransferResult
from geocoin.core.enums import TransferOutcome

if TYPE_CHECKING:
    from geocoin.core.game_state import GameState
    from geocoin.core.models import GridCell

logger = logging.getLogger(__name__)


class CollectAction:
    """Stateless handler for collect requests (stack discipline: last in, first out)."""

    @staticmethod
    def validate(state: GameState, cell: GridCell) -> bool:
        """True when a collect at *cell* would move a coin.

        Raises :class:`UnknownCacheError` for a cell without a cache.
        """
        return not state.ledger.require(cell).empty

    @staticmethod
    def apply(state: GameState, cell: GridCell) -> TransferResult:
        coin = state.ledger.pop_coin(cell)
        if coin is None:
            logger.debug("Collect at %s refused: cache is empty", cell)
            return TransferResult(TransferOutcome.EMPTY_CACHE, cell)

        state.player.inventory.append(coin)
        logger.debug("Collected %s from %s", coin, cell)
        return TransferResult(TransferOutcome.OK, cell, coin)
