"""GET /api/v1/config — expose simulation configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from mazebot.api.dependencies import get_engine_manager
from mazebot.api.engine_manager import EngineManager
from mazebot.api.schemas import SimulationConfigResponse

router = APIRouter()


@router.get("/config", response_model=SimulationConfigResponse)
def get_config(
    manager: EngineManager = Depends(get_engine_manager),
) -> SimulationConfigResponse:
    cfg = manager.config
    return SimulationConfigResponse(
        grid_size=cfg.grid_size,
        max_ticks=cfg.max_ticks,
        max_fuel=cfg.max_fuel,
        move_cost=cfg.move_cost,
        turn_cost=cfg.turn_cost,
        collision_cost=cfg.collision_cost,
        shoot_cost=cfg.shoot_cost,
        gas_refuel=cfg.gas_refuel,
        shoot_range=cfg.shoot_range,
        on_hit=cfg.on_hit.value,
        stun_duration=cfg.stun_duration,
        monster_move_interval=cfg.monster_move_interval,
        extended_sensors=cfg.extended_sensors,
        vision_radius=cfg.vision_radius,
        log_capacity=cfg.log_capacity,
        tick_rate=manager.tick_rate,
    )
