"""Game systems: RNG and cache spawning."""

from geocoin.systems.rng import DeterministicRNG, luck
from geocoin.systems.spawner import MAX_INITIAL_COINS, CacheSpawner, coins_key, spawn_key

__all__ = ["MAX_INITIAL_COINS", "CacheSpawner", "DeterministicRNG", "coins_key", "luck", "spawn_key"]
