"""Cache markers and the collect / deposit buttons."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from geocoin.actions.base import TransferResult
from geocoin.api.dependencies import get_session
from geocoin.api.schemas import CacheSchema, CachesResponse, TransferResponse
from geocoin.api.serializers import cache_schema, coin_schema, player_schema
from geocoin.core.errors import UnknownCacheError
from geocoin.core.snapshot import Snapshot
from geocoin.engine.session import GameSession

logger = logging.getLogger(__name__)

router = APIRouter()


def _unknown(exc: UnknownCacheError) -> HTTPException:
    logger.warning("Rejected action on unscanned cell: %s", exc)
    return HTTPException(status_code=404, detail=str(exc))


def _transfer_response(session: GameSession, result: TransferResult, snap: Snapshot) -> TransferResponse:
    """Serialize from the snapshot the transfer itself produced."""
    locator = session.state.locator
    cache = snap.cache_at(result.cell)
    assert cache is not None
    return TransferResponse(
        status="ok" if result.ok else "noop",
        outcome=result.outcome.name.lower(),
        coin=coin_schema(result.coin) if result.coin is not None else None,
        cache=cache_schema(cache, locator),
        player=player_schema(snap, locator),
    )


@router.get("/caches", response_model=CachesResponse)
def list_caches(
    radius: int | None = Query(None, ge=0, description="Only caches this many cells around the player"),
    session: GameSession = Depends(get_session),
) -> CachesResponse:
    snap = session.get_snapshot()
    locator = session.state.locator
    if radius is None:
        caches = list(snap.caches.values())
    else:
        caches = snap.caches_near(snap.player_cell, radius)
    return CachesResponse(turn=snap.turn, caches=[cache_schema(c, locator) for c in caches])


@router.get("/caches/{i}/{j}", response_model=CacheSchema)
def get_cache(i: int, j: int, session: GameSession = Depends(get_session)) -> CacheSchema:
    cache = session.get_snapshot().caches.get((i, j))
    if cache is None:
        raise HTTPException(status_code=404, detail=f"No cache at cell {i}:{j}")
    return cache_schema(cache, session.state.locator)


@router.post("/caches/{i}/{j}/collect", response_model=TransferResponse)
def collect(i: int, j: int, session: GameSession = Depends(get_session)) -> TransferResponse:
    try:
        result, snap = session.collect(session.find_cell(i, j))
    except UnknownCacheError as exc:
        raise _unknown(exc) from exc
    return _transfer_response(session, result, snap)


@router.post("/caches/{i}/{j}/deposit", response_model=TransferResponse)
def deposit(
    i: int,
    j: int,
    coin: str | None = Query(None, description='Coin to deposit as "i:j#serial"; defaults to the last one collected'),
    session: GameSession = Depends(get_session),
) -> TransferResponse:
    try:
        target = session.resolve_coin(coin) if coin is not None else None
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    try:
        result, snap = session.deposit(session.find_cell(i, j), target)
    except UnknownCacheError as exc:
        raise _unknown(exc) from exc
    return _transfer_response(session, result, snap)
