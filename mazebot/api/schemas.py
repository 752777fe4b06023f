"""Pydantic response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


# --- Actors ---

class AgentSchema(BaseModel):
    row: int
    col: int
    orientation: int = Field(description="0=N, 1=E, 2=S, 3=W")
    fuel: int
    alive: bool
    won: bool


class MonsterSchema(BaseModel):
    active: bool
    row: int
    col: int
    stun: int = 0
    static: bool = False


# --- World State ---

class EventSchema(BaseModel):
    tick: int
    category: str
    message: str


class EffectSchema(BaseModel):
    id: int
    kind: str
    row: int
    col: int
    expires_at: float


class PerceptSchema(BaseModel):
    readings: dict[str, str]
    smell_gas: bool
    feel_breeze: bool


class ScoreSchema(BaseModel):
    optimal: int
    actual: int
    efficiency: int = Field(description="Percent, capped at 100")
    goal_reachable: bool


class WorldStateResponse(BaseModel):
    tick: int
    level_id: int
    status: str
    reason: str | None = None
    agent: AgentSchema
    monster: MonsterSchema
    visited: list[tuple[int, int]]
    explored: list[tuple[int, int]]
    events: list[EventSchema]
    effects: list[EffectSchema]
    percept: PerceptSchema | None = None
    score: ScoreSchema
    running: bool
    fast: bool
    last_error: str | None = None


# --- Map ---

class MapResponse(BaseModel):
    size: int
    grid: list[list[int]] = Field(description="2D array of CellKind values (0=Empty,1=Wall,2=Hole,3=Gas,4=Start,5=Goal)")


# --- Levels ---

class LevelSummary(BaseModel):
    id: int
    title: str
    description: str = ""
    has_monster: bool = False
    static_monster: bool = False


class LevelListResponse(BaseModel):
    current: int
    levels: list[LevelSummary]


# --- Script ---

class ScriptRequest(BaseModel):
    source: str = Field(description="Turn logic body; runs once per tick")


# --- Control ---

class ControlResponse(BaseModel):
    status: str
    message: str
    tick: int = 0


# --- Config ---

class SimulationConfigResponse(BaseModel):
    grid_size: int
    max_ticks: int
    max_fuel: int
    move_cost: int
    turn_cost: int
    collision_cost: int
    shoot_cost: int
    gas_refuel: int
    shoot_range: int
    on_hit: str
    stun_duration: int
    monster_move_interval: int
    extended_sensors: bool
    vision_radius: int
    log_capacity: int
    tick_rate: float
