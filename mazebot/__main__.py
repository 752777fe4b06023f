"""Entry point: ``python -m mazebot``.

Supports two modes:
  - ``python -m mazebot``          → Launch the FastAPI server
  - ``python -m mazebot run ...``  → Headless run of one script on one level
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from mazebot.core.enums import HitMode

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Turn-based maze sandbox")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--levels-file", type=str, default=None, help="JSON file with extra levels")
    srv.add_argument("--on-hit", type=str, default=HitMode.REMOVE.value, choices=[m.value for m in HitMode])
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Headless mode ---
    run = sub.add_parser("run", help="Run a script on a level without the server")
    run.add_argument("--level", type=int, default=1)
    run.add_argument("--script", type=str, required=True, help="Path to the turn logic source")
    run.add_argument("--levels-file", type=str, default=None, help="JSON file with extra levels")
    run.add_argument("--max-ticks", type=int, default=1000)
    run.add_argument("--replay", type=str, default=None, help="Write a JSON replay to this path")
    run.add_argument("--on-hit", type=str, default=HitMode.REMOVE.value, choices=[m.value for m in HitMode])
    run.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _collect_levels(levels_file: str | None) -> dict:
    from mazebot.core.levels import LEVELS, load_levels

    levels = dict(LEVELS)
    if levels_file:
        levels.update(load_levels(levels_file))
    return levels


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from mazebot.api.app import create_app
    from mazebot.config import SimulationConfig

    config = SimulationConfig(on_hit=HitMode(args.on_hit), log_level=args.log_level)
    app = create_app(config, levels=_collect_levels(args.levels_file))
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_headless(args: argparse.Namespace) -> int:
    from pathlib import Path

    from mazebot.ai.pathfinding import Planner
    from mazebot.ai.script import ScriptError, compile_script
    from mazebot.config import SimulationConfig
    from mazebot.core.scoring import Score
    from mazebot.core.world_state import WorldState
    from mazebot.engine.world_loop import WorldLoop
    from mazebot.utils.logging import setup_logging
    from mazebot.utils.replay import ReplayRecorder

    config = SimulationConfig(
        max_ticks=args.max_ticks,
        on_hit=HitMode(args.on_hit),
        log_level=args.log_level,
    )
    if args.replay:
        config = replace(config, replay_file=args.replay)

    setup_logging(config.log_level)

    levels = _collect_levels(args.levels_file)
    level = levels.get(args.level)
    if level is None:
        logger.error("Unknown level %d (available: %s)", args.level, sorted(levels))
        return 2

    source = Path(args.script).read_text(encoding="utf-8")
    try:
        logic = compile_script(source, filename=args.script)
    except ScriptError as exc:
        logger.error("Script rejected: %s", exc)
        return 2

    try:
        world = WorldState.from_level(level, config)
    except ValueError as exc:
        logger.error("Level rejected: %s", exc)
        return 2
    optimal = Planner(world.grid).find_optimal_actions(world.agent.pos, world.agent.orientation)
    recorder = ReplayRecorder(config.replay_file, level.id) if args.replay else None
    loop = WorldLoop(config, world, logic=logic, recorder=recorder)

    try:
        loop.run()
    except ScriptError as exc:
        logger.error("Script fault at tick %d: %s", world.tick, exc)
        return 1

    score = Score(
        optimal=0 if optimal is None else optimal,
        actual=world.actions_taken,
        goal_reachable=optimal is not None,
    )
    outcome = f"{world.status.name} after {world.tick} ticks"
    if world.reason:
        outcome += f" ({world.reason})"
    print(f"{level.title}: {outcome}")
    print(f"Fuel left: {world.agent.fuel}")
    print(f"Actions: {score.actual}  Optimal: {score.optimal}  Efficiency: {score.efficiency}%")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Default to serve mode if no subcommand given
    if args.command is None:
        args = parser.parse_args(["serve"])
    if args.command == "serve":
        _run_server(args)
        return 0
    return _run_headless(args)


if __name__ == "__main__":
    sys.exit(main())
