"""Thread-safe bounded feed of game events exposed via the API."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GameEvent:
    """A single entry of the status feed."""

    seq: int
    turn: int
    category: str                 # "spawn", "move", "collect", "deposit", "session"
    message: str
    cells: tuple[str, ...] = ()   # "i:j" labels of cells involved


class EventLog:
    """Ring buffer of the most recent events.

    Every event gets a monotonically increasing ``seq`` so pollers can
    ask for everything after the last one they saw.
    """

    __slots__ = ("_buffer", "_lock", "_next_seq")

    def __init__(self, limit: int = 200) -> None:
        self._buffer: deque[GameEvent] = deque(maxlen=limit)
        self._lock = threading.Lock()
        self._next_seq = 1

    def record(self, turn: int, category: str, message: str, cells: tuple[str, ...] = ()) -> GameEvent:
        with self._lock:
            event = GameEvent(self._next_seq, turn, category, message, cells)
            self._next_seq += 1
            self._buffer.append(event)
        return event

    def since(self, seq: int) -> list[GameEvent]:
        """Return buffered events with ``seq`` greater than *seq*."""
        with self._lock:
            return [e for e in self._buffer if e.seq > seq]

    def latest(self, count: int = 50) -> list[GameEvent]:
        """Return the *count* most recent events."""
        with self._lock:
            items = list(self._buffer)
        return items[-count:] if count > 0 else []

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)
