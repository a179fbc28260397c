"""Tests for GameSession: rescans on move, snapshots and the event feed."""

from __future__ import annotations

import pytest

from geocoin.config import GameConfig
from geocoin.core.enums import Direction, TransferOutcome
from geocoin.core.errors import UnknownCacheError
from geocoin.core.models import GridCell
from geocoin.engine.session import GameSession


def _dense_session(**overrides) -> GameSession:
    """Every cell holds a cache, so the player always stands on one."""
    params = {"neighborhood_radius": 1, "spawn_probability": 1.0}
    params.update(overrides)
    return GameSession(GameConfig(**params))


class TestBuild:
    def test_initial_scan_around_origin(self):
        session = _dense_session()
        snap = session.get_snapshot()
        assert len(snap.caches) == 9
        assert snap.player_cell is session.state.origin_cell
        assert snap.total_coins == snap.minted

    def test_same_config_same_world(self):
        a = GameSession(GameConfig()).get_snapshot()
        b = GameSession(GameConfig()).get_snapshot()
        assert {k: len(c.coins) for k, c in a.caches.items()} == {k: len(c.coins) for k, c in b.caches.items()}


class TestMove:
    def test_move_rescans_new_edge(self):
        session = _dense_session()
        result = session.move(Direction.NORTH)
        assert len(result.spawned) == 3
        assert len(session.get_snapshot().caches) == 12

    def test_move_back_reveals_nothing(self):
        session = _dense_session()
        session.move(Direction.EAST)
        result = session.move(Direction.WEST)
        assert result.spawned == ()
        assert result.position == (session.config.origin_lat, session.config.origin_lng)

    def test_move_preserves_visited_cache_contents(self):
        session = _dense_session()
        origin = session.state.origin_cell
        session.collect(origin)
        left = len(session.get_snapshot().cache_at(origin).coins)
        for d in (Direction.NORTH, Direction.NORTH, Direction.SOUTH, Direction.SOUTH):
            session.move(d)
        assert len(session.get_snapshot().cache_at(origin).coins) == left


class TestTransfers:
    def test_collect_then_deposit_round_trip(self):
        session = _dense_session()
        cell = session.state.origin_cell
        before = len(session.get_snapshot().cache_at(cell).coins)

        collected, _ = session.collect(cell)
        assert collected.ok
        assert session.get_snapshot().inventory == (collected.coin,)

        deposited, _ = session.deposit(cell)
        assert deposited.ok and deposited.coin == collected.coin
        assert len(session.get_snapshot().cache_at(cell).coins) == before

    def test_noop_does_not_advance_turn(self):
        session = _dense_session()
        turn = session.get_snapshot().turn
        result, snap = session.deposit(session.state.origin_cell)
        assert result.outcome == TransferOutcome.NO_COIN_HELD
        assert snap.turn == turn
        assert snap is session.get_snapshot()
        assert [e.category for e in session.event_log.latest(100)].count("deposit") == 0

    def test_unknown_cache_propagates(self):
        session = _dense_session()
        with pytest.raises(UnknownCacheError):
            session.collect(GridCell(0, 0))

    def test_transfer_returns_its_own_snapshot(self):
        session = _dense_session()
        cell = session.state.origin_cell
        result, snap = session.collect(cell)
        session.reset()
        assert snap.turn == 1
        assert snap.inventory == (result.coin,)
        assert snap is not session.get_snapshot()
        assert session.get_snapshot().inventory == ()

    def test_resolve_coin(self):
        session = _dense_session()
        coin = session.get_snapshot().cache_at(session.state.origin_cell).coins[0]
        assert session.resolve_coin(coin.label) == coin
        with pytest.raises(ValueError):
            session.resolve_coin("not-a-coin")

    def test_resolve_coin_does_not_grow_arena(self):
        session = _dense_session()
        arena = len(session.state.locator)
        coin = session.resolve_coin("123456:-654321#4")
        assert coin.origin == GridCell(123456, -654321)
        assert len(session.state.locator) == arena


class TestFindCell:
    def test_known_cell_is_canonical(self):
        session = _dense_session()
        origin = session.state.origin_cell
        assert session.find_cell(origin.i, origin.j) is origin

    def test_unknown_address_raises_without_creating(self):
        session = _dense_session()
        arena = len(session.state.locator)
        for k in range(100):
            with pytest.raises(UnknownCacheError):
                session.find_cell(10**6 + k, 10**6)
        assert len(session.state.locator) == arena


class TestSnapshot:
    def test_snapshot_is_isolated_from_ledger(self):
        session = _dense_session()
        cell = session.state.origin_cell
        snap = session.get_snapshot()
        snap.cache_at(cell).coins.clear()
        assert session.state.ledger.get(cell).coins

    def test_snapshot_mapping_is_read_only(self):
        snap = _dense_session().get_snapshot()
        with pytest.raises(TypeError):
            snap.caches[(0, 0)] = None  # type: ignore[index]

    def test_old_snapshot_unchanged_after_event(self):
        session = _dense_session()
        cell = session.state.origin_cell
        old = session.get_snapshot()
        session.collect(cell)
        new = session.get_snapshot()
        assert old is not new
        assert old.inventory == ()
        assert len(new.cache_at(cell).coins) == len(old.cache_at(cell).coins) - 1


class TestEvents:
    def test_event_sequence(self):
        session = _dense_session()
        session.move(Direction.SOUTH)
        session.collect(session.get_snapshot().player_cell)
        categories = [e.category for e in session.event_log.latest(100)]
        assert categories[0] == "session"
        assert categories.count("spawn") == 3
        assert categories[-1] == "collect"
        seqs = [e.seq for e in session.event_log.latest(100)]
        assert seqs == sorted(seqs)

    def test_since_filters_by_seq(self):
        session = _dense_session()
        last = session.event_log.latest(1)[0].seq
        session.move(Direction.EAST)
        assert all(e.seq > last for e in session.event_log.since(last))
        assert session.event_log.since(last)[0].category == "move"


class TestReset:
    def test_reset_restores_fresh_world(self):
        session = _dense_session()
        fresh = {k: len(c.coins) for k, c in session.get_snapshot().caches.items()}
        session.collect(session.state.origin_cell)
        session.move(Direction.NORTH)

        session.reset()

        snap = session.get_snapshot()
        assert snap.inventory == ()
        assert snap.turn == 0
        assert {k: len(c.coins) for k, c in snap.caches.items()} == fresh
        assert [e.category for e in session.event_log.latest(10)] == ["session"]
