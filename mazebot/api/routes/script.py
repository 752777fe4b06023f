"""POST/GET /api/v1/script — install or inspect the agent's turn logic."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from mazebot.ai.script import ScriptError
from mazebot.api.dependencies import get_engine_manager
from mazebot.api.engine_manager import EngineManager
from mazebot.api.schemas import ControlResponse, ScriptRequest

router = APIRouter()


@router.post("/script", response_model=ControlResponse)
def upload_script(
    body: ScriptRequest,
    manager: EngineManager = Depends(get_engine_manager),
) -> ControlResponse:
    try:
        manager.set_script(body.source)
    except ScriptError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    snapshot = manager.get_snapshot()
    tick = snapshot.tick if snapshot else 0
    return ControlResponse(status="ok", message="Script loaded.", tick=tick)


@router.get("/script", response_model=ScriptRequest)
def get_script(manager: EngineManager = Depends(get_engine_manager)) -> ScriptRequest:
    return ScriptRequest(source=manager.script_source or "")
