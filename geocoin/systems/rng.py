"""String-keyed deterministic RNG using xxhash.

Every value is a pure function of (WorldSeed, Key). Cache layout is never
stored: rescanning a cell with the same key always yields the same decision.

Formula: RNG_Value = (XXH64(Key, seed=WorldSeed) >> 11) / 2**53
"""

from __future__ import annotations

import xxhash


class DeterministicRNG:
    """Stateless pseudo-random number generator keyed by strings.

    Each call is a pure function of (seed, key) with no internal mutable
    state, so two instances built with the same seed are interchangeable.
    """

    __slots__ = ("_seed",)

    # Top 53 bits fill a double's mantissa exactly, so the result never rounds up to 1.0
    _MANTISSA_SHIFT = 64 - 53
    _INV_2_53 = 1.0 / (1 << 53)

    def __init__(self, seed: int = 0) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, key: str) -> int:
        return xxhash.xxh64(key.encode("utf-8"), seed=self._seed).intdigest()

    def random(self, key: str) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return (self._hash(key) >> self._MANTISSA_SHIFT) * self._INV_2_53

    def next_int(self, key: str, low: int, high: int) -> int:
        """Return a deterministic integer in [low, high] inclusive."""
        f = self.random(key)
        return low + int(f * (high - low + 1))

    def next_bool(self, key: str, probability: float = 0.5) -> bool:
        """Return True with the given probability."""
        return self.random(key) < probability


_DEFAULT = DeterministicRNG(0)


def luck(key: str) -> float:
    """Module-level shortcut for ``DeterministicRNG(0).random(key)``."""
    return _DEFAULT.random(key)
