"""Versioned API route modules."""

from fastapi import APIRouter

from mazebot.api.routes.config import router as config_router
from mazebot.api.routes.control import router as control_router
from mazebot.api.routes.levels import router as levels_router
from mazebot.api.routes.map import router as map_router
from mazebot.api.routes.script import router as script_router
from mazebot.api.routes.state import router as state_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(map_router, tags=["Map"])
api_router.include_router(state_router, tags=["State"])
api_router.include_router(levels_router, tags=["Levels"])
api_router.include_router(script_router, tags=["Script"])
api_router.include_router(control_router, tags=["Control"])
api_router.include_router(config_router, tags=["Config"])

__all__ = ["api_router"]
