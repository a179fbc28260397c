"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from geocoin.api.dependencies import set_session
from geocoin.api.routes import api_router
from geocoin.config import GameConfig
from geocoin.engine.session import GameSession
from geocoin.utils.logging import setup_logging

logger = logging.getLogger(__name__)

FRONTEND_DIR = Path(__file__).resolve().parent.parent.parent / "frontend"
STATIC_DIR = FRONTEND_DIR / "dist"


def create_app(config: GameConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = GameConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        set_session(GameSession(_config))
        logger.info("API server started: session ready.")
        yield
        set_session(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Geocoin Carrier",
        description=(
            "Grid-based coin collecting game: state API for the map client.\n\n"
            "## API Groups\n\n"
            "- **Player**: Position, inventory and movement\n"
            "- **Caches**: Cache markers, collect and deposit\n"
            "- **Events**: Status feed\n"
            "- **Control**: Reset and rescan\n"
            "- **Config**: Read-only game configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Player", "description": "Player position and carried coins; one-tile moves that also reveal nearby caches."},
            {"name": "Caches", "description": "Every cache decided so far with its coins. Collect takes the top coin, deposit adds one."},
            {"name": "Events", "description": "Ordered feed of spawns, moves and transfers for the status panel."},
            {"name": "Control", "description": "Session lifecycle: reset to a fresh world, or rescan the current neighborhood."},
            {"name": "Config", "description": "Origin, tile size, scan radius and spawn probability of the running session."},
        ],
    )

    # CORS: allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    # Serve frontend static files
    if STATIC_DIR.exists():
        app.mount("/", StaticFiles(directory=str(STATIC_DIR), html=True), name="frontend")

    return app
