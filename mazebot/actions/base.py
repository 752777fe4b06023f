"""Action outcome — what a handler did, handed back to the resolver."""

from __future__ import annotations

from dataclasses import dataclass, field

from mazebot.core.enums import ActionType, EffectKind
from mazebot.core.models import Agent


@dataclass(slots=True)
class ActionOutcome:
    """Side products of applying one action.

    ``counted`` marks actions that count toward the score (successful
    moves and turns). Events and effects are collected here and
    published by the resolver.
    """

    action: ActionType
    counted: bool = False
    events: list[tuple[str, str]] = field(default_factory=list)
    effects: list[tuple[EffectKind, list[tuple[int, int]]]] = field(default_factory=list)

    def log(self, category: str, message: str) -> None:
        self.events.append((category, message))

    def effect(self, kind: EffectKind, cells: list[tuple[int, int]]) -> None:
        self.effects.append((kind, cells))

    def __repr__(self) -> str:
        return f"Outcome({self.action.name}, counted={self.counted}, events={len(self.events)})"


def spend_fuel(agent: Agent, amount: int) -> None:
    """Subtract fuel, never going below zero."""
    agent.fuel = max(0, agent.fuel - amount)
