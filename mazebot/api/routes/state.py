"""GET /api/v1/state — dynamic run data (polled by UI)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from mazebot.api.dependencies import get_engine_manager
from mazebot.api.engine_manager import EngineManager
from mazebot.api.schemas import (
    AgentSchema,
    EffectSchema,
    EventSchema,
    MonsterSchema,
    PerceptSchema,
    ScoreSchema,
    WorldStateResponse,
)
from mazebot.core.scoring import Score

router = APIRouter()


def _serialize_score(score: Score) -> ScoreSchema:
    return ScoreSchema(
        optimal=score.optimal,
        actual=score.actual,
        efficiency=score.efficiency,
        goal_reachable=score.goal_reachable,
    )


@router.get("/state", response_model=WorldStateResponse)
def get_state(
    since_tick: int = Query(0, ge=0, description="Only return events from this tick onward"),
    manager: EngineManager = Depends(get_engine_manager),
) -> WorldStateResponse:
    snapshot = manager.get_snapshot()
    if snapshot is None:
        raise HTTPException(status_code=503, detail="Simulation not initialized yet.")

    agent = snapshot.agent
    monster = snapshot.monster
    events = [
        EventSchema(tick=e.tick, category=e.category, message=e.message)
        for e in manager.event_log.since_tick(since_tick)
    ]
    effects = [
        EffectSchema(id=rec.id, kind=rec.kind.value, row=rec.row, col=rec.col, expires_at=rec.expires_at)
        for rec in manager.effects.active()
    ]

    percept = manager.loop.last_percept
    percept_schema = None
    if percept is not None:
        percept_schema = PerceptSchema(
            readings={name: reading.value for name, reading in percept.readings.items()},
            smell_gas=percept.smell_gas,
            feel_breeze=percept.feel_breeze,
        )

    return WorldStateResponse(
        tick=snapshot.tick,
        level_id=snapshot.level_id,
        status=snapshot.status.name.lower(),
        reason=snapshot.reason,
        agent=AgentSchema(
            row=agent.pos.row,
            col=agent.pos.col,
            orientation=int(agent.orientation),
            fuel=agent.fuel,
            alive=agent.alive,
            won=agent.won,
        ),
        monster=MonsterSchema(
            active=monster.active,
            row=monster.pos.row,
            col=monster.pos.col,
            stun=monster.stun,
            static=monster.static,
        ),
        visited=sorted(snapshot.visited),
        explored=sorted(snapshot.explored),
        events=events,
        effects=effects,
        percept=percept_schema,
        score=_serialize_score(manager.score()),
        running=manager.running,
        fast=manager.fast,
        last_error=manager.last_error,
    )


@router.get("/score", response_model=ScoreSchema)
def get_score(manager: EngineManager = Depends(get_engine_manager)) -> ScoreSchema:
    return _serialize_score(manager.score())
