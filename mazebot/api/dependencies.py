"""Process-wide EngineManager handle for route injection.

The app lifespan installs the manager on startup and clears it on
shutdown; routes receive it through ``Depends(get_engine_manager)``.
"""

from __future__ import annotations

from mazebot.api.engine_manager import EngineManager

_engine_manager: EngineManager | None = None


def set_engine_manager(manager: EngineManager) -> None:
    global _engine_manager
    _engine_manager = manager


def clear_engine_manager() -> EngineManager | None:
    """Drop the installed manager and return it (None if there was none)."""
    global _engine_manager
    manager, _engine_manager = _engine_manager, None
    return manager


def get_engine_manager() -> EngineManager:
    if _engine_manager is None:
        raise RuntimeError("No EngineManager installed; create the app with create_app() and run its lifespan.")
    return _engine_manager
