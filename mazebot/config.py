"""Simulation configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass

from mazebot.core.enums import HitMode


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable configuration for a maze run."""

    # World
    grid_size: int = 15

    # Timing
    max_ticks: int = 1000
    tick_interval_normal: float = 0.5      # seconds between ticks at normal speed
    tick_interval_fast: float = 0.1        # seconds between ticks at fast speed

    # Fuel
    max_fuel: int = 100
    move_cost: int = 1
    turn_cost: int = 1
    wait_cost: int = 1
    collision_cost: int = 5
    shoot_cost: int = 5
    gas_refuel: int = 30

    # Shooting
    shoot_range: int = 3
    on_hit: HitMode = HitMode.REMOVE
    stun_duration: int = 3

    # Monster
    monster_move_interval: int = 2         # monster acts when (tick + 1) % interval == 0

    # Sensors / exploration
    extended_sensors: bool = False         # add the four diagonal readings
    vision_radius: int = 1                 # Chebyshev radius of the explored window

    # Transient effects (presentation only)
    pickup_effect_seconds: float = 1.0
    laser_effect_seconds: float = 0.3

    # Logging
    log_capacity: int = 20
    log_level: str = "INFO"
    replay_file: str = "replay.json"
