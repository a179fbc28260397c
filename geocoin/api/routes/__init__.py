"""Versioned API route modules."""

from fastapi import APIRouter

from geocoin.api.routes.caches import router as caches_router
from geocoin.api.routes.config import router as config_router
from geocoin.api.routes.control import router as control_router
from geocoin.api.routes.events import router as events_router
from geocoin.api.routes.player import router as player_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(player_router, tags=["Player"])
api_router.include_router(caches_router, tags=["Caches"])
api_router.include_router(events_router, tags=["Events"])
api_router.include_router(control_router, tags=["Control"])
api_router.include_router(config_router, tags=["Config"])

__all__ = ["api_router"]
