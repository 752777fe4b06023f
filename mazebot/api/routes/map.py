"""GET /api/v1/map — current grid cells (changes only on gas pickup)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from mazebot.api.dependencies import get_engine_manager
from mazebot.api.engine_manager import EngineManager
from mazebot.api.schemas import MapResponse

router = APIRouter()


@router.get("/map", response_model=MapResponse)
def get_map(manager: EngineManager = Depends(get_engine_manager)) -> MapResponse:
    snapshot = manager.get_snapshot()
    if snapshot is None:
        raise HTTPException(status_code=503, detail="Simulation not initialized yet.")
    return MapResponse(size=snapshot.grid.size, grid=snapshot.grid.to_rows())
