"""GET/POST /api/v1/levels — list built-in levels and switch between them."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from mazebot.api.dependencies import get_engine_manager
from mazebot.api.engine_manager import EngineManager
from mazebot.api.schemas import ControlResponse, LevelListResponse, LevelSummary

router = APIRouter()


@router.get("/levels", response_model=LevelListResponse)
def list_levels(manager: EngineManager = Depends(get_engine_manager)) -> LevelListResponse:
    levels = [
        LevelSummary(
            id=level.id,
            title=level.title,
            description=level.description,
            has_monster=level.monster_start is not None,
            static_monster=level.static_monster,
        )
        for level in sorted(manager.levels.values(), key=lambda lv: lv.id)
    ]
    return LevelListResponse(current=manager.level.id, levels=levels)


@router.post("/levels/{level_id}", response_model=ControlResponse)
def load_level(
    level_id: int,
    manager: EngineManager = Depends(get_engine_manager),
) -> ControlResponse:
    try:
        manager.load_level(level_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown level {level_id}.") from None
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return ControlResponse(status="ok", message=f"{manager.level.title} loaded.", tick=0)
