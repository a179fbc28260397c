"""Plain-text rendering of the neighborhood around the player."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geocoin.core.snapshot import Snapshot

PLAYER = "@"
EMPTY = "."
OVERFLOW = "+"


def cache_glyph(coin_count: int) -> str:
    """Digit for 0..9 coins, ``+`` beyond that."""
    return str(coin_count) if coin_count < 10 else OVERFLOW


def render_neighborhood(snapshot: Snapshot, radius: int) -> str:
    """Square map of ``2 * radius + 1`` rows, north at the top."""
    center = snapshot.player_cell
    rows: list[str] = []
    for i in range(center.i + radius, center.i - radius - 1, -1):
        row: list[str] = []
        for j in range(center.j - radius, center.j + radius + 1):
            if (i, j) == center.key:
                row.append(PLAYER)
                continue
            cache = snapshot.caches.get((i, j))
            row.append(EMPTY if cache is None else cache_glyph(len(cache.coins)))
        rows.append("".join(row))
    return "\n".join(rows)


def render_inventory(snapshot: Snapshot) -> str:
    if not snapshot.inventory:
        return "Coins collected: 0"
    return "Coins collected: " + ", ".join(c.label for c in snapshot.inventory)
