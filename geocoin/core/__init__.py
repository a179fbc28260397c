"""Core data models and game state representation."""

from geocoin.core.enums import Direction, TransferOutcome
from geocoin.core.errors import UnknownCacheError
from geocoin.core.models import CacheState, Coin, GridCell
from geocoin.core.locator import GridLocator
from geocoin.core.ledger import CacheLedger
from geocoin.core.player import PlayerState
from geocoin.core.game_state import GameState
from geocoin.core.snapshot import Snapshot

__all__ = [
    "CacheLedger",
    "CacheState",
    "Coin",
    "Direction",
    "GameState",
    "GridCell",
    "GridLocator",
    "PlayerState",
    "Snapshot",
    "TransferOutcome",
    "UnknownCacheError",
]
