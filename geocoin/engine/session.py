"""GameSession — serializes user events against one authoritative GameState.

Every mutating call runs to completion under a single lock, so handlers
dispatched from a server threadpool still behave like the serialized
click events of a browser. Readers get an atomically-swapped immutable
Snapshot.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

from geocoin.actions.base import TransferResult
from geocoin.actions.collect import CollectAction
from geocoin.actions.deposit import DepositAction
from geocoin.actions.move import MoveAction
from geocoin.core.enums import Direction
from geocoin.core.errors import UnknownCacheError
from geocoin.core.game_state import GameState
from geocoin.core.ledger import CacheLedger
from geocoin.core.locator import GridLocator
from geocoin.core.models import CacheState, Coin, GridCell, parse_coin_label
from geocoin.core.player import PlayerState
from geocoin.core.snapshot import Snapshot
from geocoin.systems.rng import DeterministicRNG
from geocoin.systems.spawner import CacheSpawner
from geocoin.utils.event_log import EventLog

if TYPE_CHECKING:
    from geocoin.config import GameConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Where the player ended up and which caches the rescan revealed."""

    cell: GridCell
    position: tuple[float, float]
    spawned: tuple[CacheState, ...]


class GameSession:
    """Owns one GameState and the event feed for its lifetime.

    Provides thread-safe access to:
      - latest snapshot (atomic reference swap)
      - event log (lock-guarded ring buffer)
      - game commands (move / collect / deposit / scan / reset)
    """

    def __init__(self, config: GameConfig) -> None:
        self.config = config

        self._lock = threading.Lock()
        self._snapshot_lock = threading.Lock()
        self._latest_snapshot: Snapshot | None = None
        self._event_log = EventLog(config.event_log_limit)

        self._rng: DeterministicRNG | None = None
        self._spawner: CacheSpawner | None = None
        self._state: GameState | None = None

        with self._lock:
            self._build()

    # -- public properties --

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    @property
    def state(self) -> GameState:
        """Authoritative state. Mutate only through the session's commands."""
        assert self._state is not None
        return self._state

    @property
    def spawner(self) -> CacheSpawner:
        assert self._spawner is not None
        return self._spawner

    # -- snapshot access --

    def get_snapshot(self) -> Snapshot:
        with self._snapshot_lock:
            assert self._latest_snapshot is not None
            return self._latest_snapshot

    def _publish(self) -> Snapshot:
        snap = Snapshot.from_state(self.state)
        with self._snapshot_lock:
            self._latest_snapshot = snap
        return snap

    # -- lifecycle --

    def _build(self) -> None:
        cfg = self.config
        self._rng = DeterministicRNG(cfg.world_seed)
        self._spawner = CacheSpawner(cfg, self._rng)
        player = PlayerState(
            origin_lat=cfg.origin_lat,
            origin_lng=cfg.origin_lng,
            tile_size=cfg.tile_size,
        )
        self._state = GameState(
            seed=cfg.world_seed,
            locator=GridLocator(cfg.grid_scale),
            ledger=CacheLedger(),
            player=player,
        )
        spawned = self._spawner.scan_neighborhood(self._state, self._state.player_cell())
        self._event_log.record(
            0, "session",
            f"Session started at {self._state.origin_cell} with {len(spawned)} caches nearby",
            (str(self._state.origin_cell),),
        )
        self._publish()
        logger.info(
            "Session built: seed=%d origin=%s caches=%d coins=%d",
            cfg.world_seed, self._state.origin_cell, len(spawned), self._state.minted,
        )

    def reset(self) -> None:
        """Discard all state and start a fresh session from the same config."""
        with self._lock:
            self._event_log.clear()
            self._build()
        logger.info("Session reset.")

    # -- lookups --

    def find_cell(self, i: int, j: int) -> GridCell:
        """Canonical cell for (*i*, *j*) if the world already knows it.

        Never adds to the locator arena. Raises :class:`UnknownCacheError`
        for an address no scan or move has created.
        """
        with self._lock:
            cell = self.state.locator.known(i, j)
        if cell is None:
            raise UnknownCacheError(GridCell(i, j))
        return cell

    def resolve_coin(self, label: str) -> Coin:
        """Turn ``"i:j#serial"`` into a Coin value (raises ValueError if malformed)."""
        i, j, serial = parse_coin_label(label)
        return Coin(GridCell(i, j), serial)

    # -- commands --

    def scan(self, radius: int | None = None, spawn_probability: float | None = None) -> list[CacheState]:
        """Rescan around the player's current cell."""
        with self._lock:
            state = self.state
            spawned = self.spawner.scan_neighborhood(state, state.player_cell(), radius, spawn_probability)
            self._record_spawns(spawned)
            self._publish()
            return [c.copy() for c in spawned]

    def move(self, direction: Direction) -> MoveResult:
        with self._lock:
            state = self.state
            state.turn += 1
            cell = MoveAction.apply(state, direction)
            spawned = self.spawner.scan_neighborhood(state, cell)
            self._event_log.record(
                state.turn, "move", f"Moved {direction.name.lower()} to {cell}", (str(cell),),
            )
            self._record_spawns(spawned)
            self._publish()
            return MoveResult(
                cell=cell,
                position=state.player.position,
                spawned=tuple(c.copy() for c in spawned),
            )

    def collect(self, cell: GridCell) -> tuple[TransferResult, Snapshot]:
        """Take the top coin of the cache at *cell*.

        Returns the outcome together with the snapshot current when the
        command finished, so callers never pair it with a later world.
        """
        with self._lock:
            state = self.state
            result = CollectAction.apply(state, cell)
            if not result.ok:
                return result, self.get_snapshot()
            state.turn += 1
            self._event_log.record(
                state.turn, "collect", f"Collected {result.coin} from {cell}", (str(cell),),
            )
            return result, self._publish()

    def deposit(self, cell: GridCell, coin: Coin | None = None) -> tuple[TransferResult, Snapshot]:
        with self._lock:
            state = self.state
            result = DepositAction.apply(state, cell, coin)
            if not result.ok:
                return result, self.get_snapshot()
            state.turn += 1
            self._event_log.record(
                state.turn, "deposit", f"Deposited {result.coin} into {cell}", (str(cell),),
            )
            return result, self._publish()

    def _record_spawns(self, spawned: list[CacheState]) -> None:
        turn = self.state.turn
        for cache in spawned:
            self._event_log.record(
                turn, "spawn",
                f"Cache appeared at {cache.location} with {len(cache.coins)} coins",
                (str(cache.location),),
            )
