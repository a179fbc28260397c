"""FastAPI dependency injection — provides the GameSession singleton."""

from __future__ import annotations

from geocoin.engine.session import GameSession

_session: GameSession | None = None


def set_session(session: GameSession | None) -> None:
    global _session
    _session = session


def get_session() -> GameSession:
    if _session is None:
        raise RuntimeError("GameSession not initialized: server not started correctly.")
    return _session
