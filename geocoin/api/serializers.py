"""Conversion from core models to API schemas."""

from __future__ import annotations

from geocoin.api.schemas import CacheSchema, CellSchema, CoinSchema, PlayerSchema
from geocoin.core.locator import GridLocator
from geocoin.core.models import CacheState, Coin, GridCell
from geocoin.core.snapshot import Snapshot


def cell_schema(cell: GridCell, locator: GridLocator) -> CellSchema:
    (south, west), (north, east) = locator.bounds(cell)
    return CellSchema(i=cell.i, j=cell.j, label=str(cell), south=south, west=west, north=north, east=east)


def coin_schema(coin: Coin) -> CoinSchema:
    return CoinSchema(label=coin.label, origin_i=coin.origin.i, origin_j=coin.origin.j, serial=coin.serial)


def cache_schema(cache: CacheState, locator: GridLocator) -> CacheSchema:
    return CacheSchema(
        cell=cell_schema(cache.location, locator),
        coin_count=len(cache.coins),
        coins=[coin_schema(c) for c in cache.coins],
    )


def player_schema(snap: Snapshot, locator: GridLocator) -> PlayerSchema:
    lat, lng = snap.position
    return PlayerSchema(
        lat=lat,
        lng=lng,
        cell=cell_schema(snap.player_cell, locator),
        inventory=[coin_schema(c) for c in snap.inventory],
    )
