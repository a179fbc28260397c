"""MoveAction — steps the player one tile in a cardinal direction.

The grid is unbounded, so every move is valid. Rescanning the
neighborhood afterwards is the session's job.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geocoin.core.enums import Direction
from geocoin.core.models import DIRECTION_OFFSETS

if TYPE_CHECKING:
    from geocoin.core.game_state import GameState
    from geocoin.core.models import GridCell

logger = logging.getLogger(__name__)


class MoveAction:
    """Stateless handler for movement commands."""

    @staticmethod
    def apply(state: GameState, direction: Direction) -> GridCell:
        """Move the player and return the cell they now stand on."""
        di, dj = DIRECTION_OFFSETS[direction]
        player = state.player
        player.steps_lat += di
        player.steps_lng += dj
        cell = state.player_cell()
        logger.debug("Player moved %s to %s", direction.name.lower(), cell)
        return cell
