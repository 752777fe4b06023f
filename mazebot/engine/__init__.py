"""Engine layer: action resolution and the tick loop."""

from mazebot.engine.action_resolver import ActionResolver
from mazebot.engine.world_loop import WorldLoop

__all__ = ["ActionResolver", "WorldLoop"]
