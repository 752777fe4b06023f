"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mazebot.api.dependencies import clear_engine_manager, set_engine_manager
from mazebot.api.engine_manager import EngineManager
from mazebot.api.routes import api_router
from mazebot.config import SimulationConfig
from mazebot.core.levels import Level
from mazebot.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    config: SimulationConfig | None = None,
    levels: dict[int, Level] | None = None,
) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = SimulationConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        manager = EngineManager(_config, levels=levels)
        set_engine_manager(manager)
        logger.info("API server started — level %d loaded, waiting for a script.", manager.level.id)
        yield
        manager.stop()
        clear_engine_manager()
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Mazebot",
        description=(
            "Turn-based maze sandbox: a scripted agent explores a grid level.\n\n"
            "## API Groups\n\n"
            "- **State** — Live run state: agent, monster, percept, events, effects, score\n"
            "- **Map** — Grid cells (re-fetch after gas pickups)\n"
            "- **Levels** — Built-in level catalog and level switching\n"
            "- **Script** — Upload the agent's turn logic\n"
            "- **Control** — Run lifecycle: start, stop, step, reset, speed\n"
            "- **Config** — Read-only simulation configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "State", "description": "Live run state polled by the frontend."},
            {"name": "Map", "description": "Grid cells. Changes only when a gas cell is consumed."},
            {"name": "Levels", "description": "Level catalog; loading a level stops the run and rebuilds the world."},
            {"name": "Script", "description": "Turn logic source; compiled on upload, runs once per tick."},
            {"name": "Control", "description": "Run lifecycle controls: start, stop, single-step, reset and tick speed."},
            {"name": "Config", "description": "Read-only simulation configuration parameters."},
        ],
    )

    # CORS — allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
