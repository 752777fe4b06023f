"""POST /api/v1/control/{action} — run lifecycle controls."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends, Query

from mazebot.api.dependencies import get_engine_manager
from mazebot.api.engine_manager import EngineManager
from mazebot.api.schemas import ControlResponse

router = APIRouter()


class ControlAction(str, Enum):
    start = "start"
    stop = "stop"
    step = "step"
    reset = "reset"


class SpeedMode(str, Enum):
    normal = "normal"
    fast = "fast"


def _tick(manager: EngineManager) -> int:
    snapshot = manager.get_snapshot()
    return snapshot.tick if snapshot else 0


@router.post("/control/{action}", response_model=ControlResponse)
def control(
    action: ControlAction,
    manager: EngineManager = Depends(get_engine_manager),
) -> ControlResponse:
    match action:
        case ControlAction.start:
            if manager.running:
                return ControlResponse(status="noop", message="Already running.", tick=_tick(manager))
            if not manager.start():
                return ControlResponse(
                    status="error",
                    message="Cannot start: load a script or reset the finished run.",
                    tick=_tick(manager),
                )
            return ControlResponse(status="ok", message="Simulation started.", tick=_tick(manager))

        case ControlAction.stop:
            if not manager.running:
                return ControlResponse(status="noop", message="Not running.", tick=_tick(manager))
            manager.stop()
            return ControlResponse(status="ok", message="Simulation stopped.", tick=_tick(manager))

        case ControlAction.step:
            if manager.running:
                return ControlResponse(status="error", message="Stop the run before stepping.", tick=_tick(manager))
            if not manager.step():
                message = manager.last_error or "No tick executed."
                return ControlResponse(status="error", message=message, tick=_tick(manager))
            return ControlResponse(status="ok", message="Single tick executed.", tick=_tick(manager))

        case ControlAction.reset:
            manager.reset()
            return ControlResponse(status="ok", message="Simulation reset.", tick=_tick(manager))


@router.post("/speed", response_model=ControlResponse)
def set_speed(
    mode: SpeedMode = Query(SpeedMode.normal, description="Tick cadence"),
    manager: EngineManager = Depends(get_engine_manager),
) -> ControlResponse:
    manager.set_speed(mode == SpeedMode.fast)
    return ControlResponse(
        status="ok",
        message=f"Speed set to {mode.value} ({manager.tick_rate:.2f}s per tick).",
        tick=_tick(manager),
    )
