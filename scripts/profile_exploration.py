#!/usr/bin/env python3
"""Exploration profiler.

Usage:
    python scripts/profile_exploration.py --moves 2000 --seed 0
    python scripts/profile_exploration.py --moves 5000 --radius 12 --cprofile walk.prof
    python scripts/profile_exploration.py --moves 2000 --memory

Reports:
    - Per-move timing statistics (min, max, mean, p50, p95, p99)
    - Growth of the cell arena and the cache ledger (neither is ever evicted)
    - Coins minted vs. coins in play (must match)
    - Optional: cProfile dump for flame graph generation
    - Optional: tracemalloc memory snapshot
"""

from __future__ import annotations

import argparse
import cProfile
import io
import pstats
import statistics
import time
import tracemalloc

from geocoin.config import GameConfig
from geocoin.core.enums import Direction
from geocoin.engine.session import GameSession
from geocoin.systems.rng import DeterministicRNG


def _walk(cfg: GameConfig, num_moves: int) -> dict:
    """Random walk with a collect/deposit on every cache stepped on."""
    session = GameSession(cfg)
    state = session.state
    chooser = DeterministicRNG(cfg.world_seed + 1)
    directions = list(Direction)

    move_times: list[float] = []
    arena_sizes: list[int] = []
    ledger_sizes: list[int] = []

    for n in range(num_moves):
        direction = directions[chooser.next_int(f"walk:{n}", 0, len(directions) - 1)]
        t0 = time.perf_counter()
        result = session.move(direction)
        if state.ledger.has(result.cell):
            if chooser.next_bool(f"trade:{n}"):
                session.collect(result.cell)
            else:
                session.deposit(result.cell)
        move_times.append(time.perf_counter() - t0)
        arena_sizes.append(len(state.locator))
        ledger_sizes.append(len(state.ledger))

    return {
        "move_times": move_times,
        "arena_sizes": arena_sizes,
        "ledger_sizes": ledger_sizes,
        "minted": state.minted,
        "in_play": state.total_coins(),
        "held": len(state.player.inventory),
    }


def _percentile(data: list[float], p: float) -> float:
    ordered = sorted(data)
    k = (len(ordered) - 1) * p / 100
    lo = int(k)
    hi = min(lo + 1, len(ordered) - 1)
    return ordered[lo] + (ordered[hi] - ordered[lo]) * (k - lo)


def _report(results: dict) -> None:
    times_ms = [t * 1000 for t in results["move_times"]]
    print("=" * 60)
    print("  EXPLORATION PROFILE")
    print("=" * 60)
    print(f"  Moves:            {len(times_ms)}")
    print(f"  Move time (ms):   min={min(times_ms):.3f}  mean={statistics.mean(times_ms):.3f}  max={max(times_ms):.3f}")
    print(f"                    p50={_percentile(times_ms, 50):.3f}  p95={_percentile(times_ms, 95):.3f}  p99={_percentile(times_ms, 99):.3f}")
    print(f"  Throughput:       {len(times_ms) / (sum(times_ms) / 1000):.0f} moves/sec")
    print("-" * 60)
    print(f"  Arena cells:      {results['arena_sizes'][0]} -> {results['arena_sizes'][-1]}")
    print(f"  Ledger caches:    {results['ledger_sizes'][0]} -> {results['ledger_sizes'][-1]}")
    print(f"  Coins minted:     {results['minted']}")
    print(f"  Coins in play:    {results['in_play']}  (held {results['held']})")
    if results["minted"] != results["in_play"]:
        print("  !! coin conservation violated")
    print("=" * 60)


def main() -> None:
    parser = argparse.ArgumentParser(description="Profile long exploration walks")
    parser.add_argument("--moves", type=int, default=2000)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--radius", type=int, default=8)
    parser.add_argument("--probability", type=float, default=0.1)
    parser.add_argument("--cprofile", type=str, default=None, help="Write cProfile stats to this file")
    parser.add_argument("--memory", action="store_true", help="Report top tracemalloc allocations")
    args = parser.parse_args()

    cfg = GameConfig(
        world_seed=args.seed,
        neighborhood_radius=args.radius,
        spawn_probability=args.probability,
        log_level="WARNING",
    )

    if args.memory:
        tracemalloc.start()

    if args.cprofile:
        profiler = cProfile.Profile()
        profiler.enable()
        results = _walk(cfg, args.moves)
        profiler.disable()
        profiler.dump_stats(args.cprofile)
        stream = io.StringIO()
        pstats.Stats(profiler, stream=stream).sort_stats("cumulative").print_stats(15)
        print(stream.getvalue())
    else:
        results = _walk(cfg, args.moves)

    _report(results)

    if args.memory:
        snapshot = tracemalloc.take_snapshot()
        print("Top allocations:")
        for stat in snapshot.statistics("lineno")[:10]:
            print(f"  {stat}")
        tracemalloc.stop()


if __name__ == "__main__":
    main()
