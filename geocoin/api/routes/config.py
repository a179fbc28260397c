"""GET /api/v1/config — expose game configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from geocoin.api.dependencies import get_session
from geocoin.api.schemas import GameConfigResponse
from geocoin.engine.session import GameSession

router = APIRouter()


@router.get("/config", response_model=GameConfigResponse)
def get_config(session: GameSession = Depends(get_session)) -> GameConfigResponse:
    cfg = session.config
    return GameConfigResponse(
        origin_lat=cfg.origin_lat,
        origin_lng=cfg.origin_lng,
        tile_size=cfg.tile_size,
        grid_scale=cfg.grid_scale,
        world_seed=cfg.world_seed,
        neighborhood_radius=cfg.neighborhood_radius,
        spawn_probability=cfg.spawn_probability,
        zoom_level=cfg.zoom_level,
    )
