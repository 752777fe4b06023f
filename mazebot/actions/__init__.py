"""Action handlers: one stateless applier per action type."""

from mazebot.actions.base import ActionOutcome
from mazebot.actions.move import MoveAction
from mazebot.actions.shoot import ShootAction
from mazebot.actions.turn import TurnAction
from mazebot.actions.wait import WaitAction

__all__ = ["ActionOutcome", "MoveAction", "ShootAction", "TurnAction", "WaitAction"]
