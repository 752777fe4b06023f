"""Replay serialization — records tick-by-tick actions and agent state."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mazebot.core.enums import ActionType
    from mazebot.core.world_state import WorldState

logger = logging.getLogger(__name__)


class ReplayRecorder:
    """Accumulates per-tick frames and flushes them to a JSON replay file."""

    __slots__ = ("_path", "_ticks", "_level_id")

    def __init__(self, path: str | Path, level_id: int) -> None:
        self._path = Path(path)
        self._level_id = level_id
        self._ticks: list[dict[str, Any]] = []

    def record_tick(self, tick: int, action: ActionType, world: WorldState) -> None:
        agent = world.agent
        monster = world.monster
        self._ticks.append(
            {
                "tick": tick,
                "action": action.name,
                "agent": {
                    "pos": [agent.pos.row, agent.pos.col],
                    "orientation": agent.orientation.name,
                    "fuel": agent.fuel,
                },
                "monster": [monster.pos.row, monster.pos.col] if monster.active else None,
                "status": world.status.name,
            }
        )

    def flush(self) -> None:
        """Write accumulated data to disk."""
        replay = {
            "version": "1.0",
            "level": self._level_id,
            "total_ticks": len(self._ticks),
            "ticks": self._ticks,
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(replay, indent=2), encoding="utf-8")
        logger.info("Replay saved to %s (%d ticks)", self._path, len(self._ticks))
