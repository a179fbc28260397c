"""Tests for the REST routes, called directly as functions."""

from __future__ import annotations

import unittest

from fastapi import FastAPI, HTTPException

from geocoin.api.app import create_app
from geocoin.api.dependencies import get_session, set_session
from geocoin.api.routes.caches import _transfer_response, collect, deposit, get_cache, list_caches
from geocoin.api.routes.config import get_config
from geocoin.api.routes.control import ControlAction, control
from geocoin.api.routes.events import get_events
from geocoin.api.routes.player import MoveDirection, get_player, move
from geocoin.config import GameConfig
from geocoin.engine.session import GameSession


class _RouteCase(unittest.TestCase):

    def setUp(self):
        self.session = GameSession(GameConfig(neighborhood_radius=1, spawn_probability=1.0))
        self.origin = self.session.state.origin_cell

    def _cache_count(self) -> int:
        return get_cache(self.origin.i, self.origin.j, session=self.session).coin_count


class TestDependencies(unittest.TestCase):

    def tearDown(self):
        set_session(None)

    def test_missing_session_raises(self):
        set_session(None)
        with self.assertRaises(RuntimeError):
            get_session()

    def test_installed_session_returned(self):
        session = GameSession(GameConfig(spawn_probability=0.0))
        set_session(session)
        self.assertIs(get_session(), session)


class TestAppFactory(unittest.TestCase):

    def test_routes_registered(self):
        app = create_app(GameConfig())
        self.assertIsInstance(app, FastAPI)
        paths = {route.path for route in app.routes}
        for path in (
            "/api/v1/player",
            "/api/v1/move/{direction}",
            "/api/v1/caches",
            "/api/v1/caches/{i}/{j}",
            "/api/v1/caches/{i}/{j}/collect",
            "/api/v1/caches/{i}/{j}/deposit",
            "/api/v1/events",
            "/api/v1/control/{action}",
            "/api/v1/config",
        ):
            self.assertIn(path, paths)


class TestPlayerRoutes(_RouteCase):

    def test_get_player_at_origin(self):
        player = get_player(session=self.session)
        self.assertEqual(player.lat, self.session.config.origin_lat)
        self.assertEqual(player.cell.label, str(self.origin))
        self.assertEqual(player.inventory, [])

    def test_move_reports_spawned(self):
        resp = move(MoveDirection.north, session=self.session)
        self.assertEqual(resp.turn, 1)
        self.assertEqual(resp.player.cell.i, self.origin.i + 1)
        self.assertEqual(len(resp.spawned), 3)


class TestCacheRoutes(_RouteCase):

    def test_list_all_and_near(self):
        self.assertEqual(len(list_caches(radius=None, session=self.session).caches), 9)
        self.assertEqual(len(list_caches(radius=0, session=self.session).caches), 1)

    def test_get_unknown_cache_404(self):
        with self.assertRaises(HTTPException) as ctx:
            get_cache(0, 0, session=self.session)
        self.assertEqual(ctx.exception.status_code, 404)

    def test_collect_ok(self):
        before = self._cache_count()
        resp = collect(self.origin.i, self.origin.j, session=self.session)
        self.assertEqual(resp.status, "ok")
        self.assertEqual(resp.outcome, "ok")
        self.assertEqual(resp.cache.coin_count, before - 1)
        self.assertEqual([c.label for c in resp.player.inventory], [resp.coin.label])

    def test_collect_empty_is_noop(self):
        for _ in range(self._cache_count()):
            collect(self.origin.i, self.origin.j, session=self.session)
        resp = collect(self.origin.i, self.origin.j, session=self.session)
        self.assertEqual(resp.status, "noop")
        self.assertEqual(resp.outcome, "empty_cache")
        self.assertIsNone(resp.coin)

    def test_collect_unknown_404(self):
        with self.assertRaises(HTTPException) as ctx:
            collect(0, 0, session=self.session)
        self.assertEqual(ctx.exception.status_code, 404)

    def test_deposit_without_coins_is_noop(self):
        resp = deposit(self.origin.i, self.origin.j, coin=None, session=self.session)
        self.assertEqual(resp.status, "noop")
        self.assertEqual(resp.outcome, "no_coin_held")

    def test_deposit_named_coin_elsewhere(self):
        coin = collect(self.origin.i, self.origin.j, session=self.session).coin
        resp = deposit(self.origin.i + 1, self.origin.j + 1, coin=coin.label, session=self.session)
        self.assertEqual(resp.status, "ok")
        self.assertEqual(resp.cache.coins[-1].label, coin.label)
        self.assertEqual(resp.player.inventory, [])

    def test_deposit_malformed_coin_422(self):
        with self.assertRaises(HTTPException) as ctx:
            deposit(self.origin.i, self.origin.j, coin="garbage", session=self.session)
        self.assertEqual(ctx.exception.status_code, 422)

    def test_unknown_cell_requests_leave_arena_unchanged(self):
        arena = len(self.session.state.locator)
        for k in range(50):
            with self.assertRaises(HTTPException) as ctx:
                collect(10**6 + k, 10**6, session=self.session)
            self.assertEqual(ctx.exception.status_code, 404)
            with self.assertRaises(HTTPException):
                deposit(-(10**6), 10**6 + k, coin=None, session=self.session)
        self.assertEqual(len(self.session.state.locator), arena)

    def test_unheld_coin_label_leaves_arena_unchanged(self):
        arena = len(self.session.state.locator)
        resp = deposit(self.origin.i, self.origin.j, coin="777777:777777#0", session=self.session)
        self.assertEqual(resp.outcome, "no_coin_held")
        self.assertEqual(len(self.session.state.locator), arena)

    def test_visited_cell_without_cache_is_404(self):
        session = GameSession(GameConfig(spawn_probability=0.0))
        origin = session.state.origin_cell
        with self.assertRaises(HTTPException) as ctx:
            collect(origin.i, origin.j, session=session)
        self.assertEqual(ctx.exception.status_code, 404)

    def test_transfer_response_survives_reset(self):
        result, snap = self.session.collect(self.origin)
        self.session.reset()
        resp = _transfer_response(self.session, result, snap)
        self.assertEqual(resp.status, "ok")
        self.assertEqual([c.label for c in resp.player.inventory], [result.coin.label])
        self.assertEqual(get_player(session=self.session).inventory, [])


class TestEventAndControlRoutes(_RouteCase):

    def test_events_after_actions(self):
        move(MoveDirection.east, session=self.session)
        events = get_events(since=None, limit=50, session=self.session).events
        self.assertEqual(events[0].category, "session")
        self.assertIn("move", [e.category for e in events])

    def test_events_since(self):
        first = get_events(since=None, limit=50, session=self.session).events[-1].seq
        collect(self.origin.i, self.origin.j, session=self.session)
        events = get_events(since=first, limit=50, session=self.session).events
        self.assertEqual([e.category for e in events], ["collect"])

    def test_events_page_forward_from_since(self):
        first = get_events(since=None, limit=50, session=self.session).events[-1].seq
        move(MoveDirection.north, session=self.session)
        seen = []
        cursor = first
        while True:
            page = get_events(since=cursor, limit=1, session=self.session).events
            if not page:
                break
            self.assertEqual(len(page), 1)
            seen.append(page[0].category)
            cursor = page[0].seq
        self.assertEqual(seen, ["move", "spawn", "spawn", "spawn"])

    def test_reset(self):
        collect(self.origin.i, self.origin.j, session=self.session)
        resp = control(ControlAction.reset, session=self.session)
        self.assertEqual(resp.status, "ok")
        self.assertEqual(resp.turn, 0)
        self.assertEqual(get_player(session=self.session).inventory, [])

    def test_scan_without_new_cells_is_noop(self):
        resp = control(ControlAction.scan, session=self.session)
        self.assertEqual(resp.status, "noop")

    def test_config(self):
        cfg = get_config(session=self.session)
        self.assertEqual(cfg.grid_scale, 10_000)
        self.assertEqual(cfg.neighborhood_radius, 1)
        self.assertEqual(cfg.spawn_probability, 1.0)


if __name__ == "__main__":
    unittest.main()
