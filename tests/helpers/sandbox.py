"""Sandbox — builds bare game states for tests without a session.

Usage::

    state, spawner = build_state(GameConfig(spawn_probability=1.0))
    cache = stock_cache(state, 0, 0, coins=3)
"""

from __future__ import annotations

from geocoin.config import GameConfig
from geocoin.core.game_state import GameState
from geocoin.core.ledger import CacheLedger
from geocoin.core.locator import GridLocator
from geocoin.core.models import CacheState, Coin
from geocoin.core.player import PlayerState
from geocoin.systems.rng import DeterministicRNG
from geocoin.systems.spawner import CacheSpawner


def build_state(config: GameConfig | None = None) -> tuple[GameState, CacheSpawner]:
    """Fresh state with an empty ledger plus a spawner sharing its config."""
    cfg = config or GameConfig()
    player = PlayerState(origin_lat=cfg.origin_lat, origin_lng=cfg.origin_lng, tile_size=cfg.tile_size)
    state = GameState(
        seed=cfg.world_seed,
        locator=GridLocator(cfg.grid_scale),
        ledger=CacheLedger(),
        player=player,
    )
    return state, CacheSpawner(cfg, DeterministicRNG(cfg.world_seed))


def stock_cache(state: GameState, oi: int, oj: int, coins: int) -> CacheState:
    """Register a cache with exactly *coins* freshly minted coins."""
    cell = state.cell_at_offset(oi, oj)
    cache = state.ledger.create(cell, [Coin(cell, s) for s in range(coins)])
    assert cache is not None, f"cell {cell} already holds a cache"
    state.minted += coins
    return cache


def all_coins(state: GameState) -> list[Coin]:
    """Every coin in play: caches first, then the player's inventory."""
    coins: list[Coin] = []
    for cache in state.ledger:
        coins.extend(cache.coins)
    coins.extend(state.player.inventory)
    return coins
