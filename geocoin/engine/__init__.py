"""Session engine: serialized command handling over the game state."""

from geocoin.engine.session import GameSession, MoveResult

__all__ = ["GameSession", "MoveResult"]
