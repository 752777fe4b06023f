"""Turn-logic contract between the engine and user scripts.

The engine calls the turn logic exactly once per tick with a ``Percept``
and receives exactly one ``ActionType``. Two shapes of logic are accepted:

  * return-value logic — ``decide(percept)`` (or any callable taking the
    percept) returns an ``ActionType``, an action name or ``None`` (wait);
  * capability logic — a callable ``(percept, actions)`` that requests its
    action through the ``Actions`` capability set. The first request wins;
    a second request in the same tick raises ``ActionAlreadyChosenError``.

``compile_script`` turns user source text into capability logic, with the
percept and the capabilities bound as plain names. This is a convenience
boundary, not a sandbox: scripts run with normal interpreter privileges
and are expected to return promptly.
"""

from __future__ import annotations

import logging
import textwrap
from typing import Any, Callable, Protocol, runtime_checkable

from mazebot.ai.perception import Percept
from mazebot.core.enums import ActionType

logger = logging.getLogger(__name__)


class ScriptError(RuntimeError):
    """User turn logic failed to compile or raised while deciding."""


class ActionAlreadyChosenError(RuntimeError):
    """A capability was invoked after another one in the same tick."""


ACTION_ALIASES: dict[str, ActionType] = {
    "wait": ActionType.WAIT,
    "move": ActionType.MOVE_FRONT,
    "move_front": ActionType.MOVE_FRONT,
    "moveFront": ActionType.MOVE_FRONT,
    "left": ActionType.TURN_LEFT,
    "turn_left": ActionType.TURN_LEFT,
    "turnLeft": ActionType.TURN_LEFT,
    "right": ActionType.TURN_RIGHT,
    "turn_right": ActionType.TURN_RIGHT,
    "turnRight": ActionType.TURN_RIGHT,
    "back": ActionType.TURN_BACK,
    "turn_back": ActionType.TURN_BACK,
    "turnBack": ActionType.TURN_BACK,
    "shoot": ActionType.SHOOT,
}

ActionLike = ActionType | str | None


def coerce_action(value: ActionLike) -> ActionType:
    """Normalise whatever the logic returned into an ``ActionType``."""
    if value is None:
        return ActionType.WAIT
    if isinstance(value, ActionType):
        return value
    if isinstance(value, str):
        action = ACTION_ALIASES.get(value) or ACTION_ALIASES.get(value.lower())
        if action is None:
            raise ValueError(f"unknown action {value!r}")
        return action
    raise TypeError(f"turn logic returned {type(value).__name__}, expected an action")


@runtime_checkable
class TurnLogic(Protocol):
    def decide(self, percept: Percept) -> ActionLike: ...


class Actions:
    """Capability set handed to capability-style logic for one tick."""

    __slots__ = ("_chosen",)

    def __init__(self) -> None:
        self._chosen: ActionType | None = None

    @property
    def chosen(self) -> ActionType:
        return self._chosen if self._chosen is not None else ActionType.WAIT

    def _request(self, action: ActionType) -> None:
        if self._chosen is not None:
            raise ActionAlreadyChosenError(
                f"{action.name.lower()} requested after {self._chosen.name.lower()}; "
                "only one action per tick"
            )
        self._chosen = action

    def move_front(self) -> None:
        self._request(ActionType.MOVE_FRONT)

    def turn_left(self) -> None:
        self._request(ActionType.TURN_LEFT)

    def turn_right(self) -> None:
        self._request(ActionType.TURN_RIGHT)

    def turn_back(self) -> None:
        self._request(ActionType.TURN_BACK)

    def shoot(self) -> None:
        self._request(ActionType.SHOOT)

    moveFront = move_front
    turnLeft = turn_left
    turnRight = turn_right
    turnBack = turn_back


class CapabilityLogic:
    """Adapts a ``(percept, actions)`` callable to the return-value contract."""

    __slots__ = ("_func", "source")

    def __init__(self, func: Callable[[Percept, Actions], Any], source: str | None = None) -> None:
        self._func = func
        self.source = source

    def decide(self, percept: Percept) -> ActionType:
        actions = Actions()
        self._func(percept, actions)
        return actions.chosen


_SCRIPT_PARAMS = (
    "sensor", "smell_gas", "feel_breeze", "smellGas", "feelBreeze",
    "move_front", "turn_left", "turn_right", "turn_back", "shoot",
    "moveFront", "turnLeft", "turnRight", "turnBack",
)
_SCRIPT_FUNC = "__turn__"


def compile_script(source: str, filename: str = "<script>") -> CapabilityLogic:
    """Compile user source text into capability logic.

    The text becomes the body of a function, so ``return`` ends the turn
    early. ``sensor`` is the percept (``sensor["front"]`` or
    ``sensor.front``); the capabilities are bound under both snake_case
    and camelCase names.
    """
    body = textwrap.indent(source, "    ") if source.strip() else ""
    wrapped = f"def {_SCRIPT_FUNC}({', '.join(_SCRIPT_PARAMS)}):\n{body}\n    pass\n"
    try:
        code = compile(wrapped, filename, "exec")
    except SyntaxError as exc:
        line = (exc.lineno or 1) - 1
        raise ScriptError(f"syntax error on line {line}: {exc.msg}") from exc

    namespace: dict[str, Any] = {"__name__": "mazebot_script"}
    exec(code, namespace)
    func = namespace[_SCRIPT_FUNC]

    def run(percept: Percept, actions: Actions) -> None:
        func(
            percept, percept.smell_gas, percept.feel_breeze,
            percept.smell_gas, percept.feel_breeze,
            actions.move_front, actions.turn_left, actions.turn_right,
            actions.turn_back, actions.shoot,
            actions.move_front, actions.turn_left, actions.turn_right,
            actions.turn_back,
        )

    return CapabilityLogic(run, source=source)


class ScriptExecutor:
    """Invokes turn logic once per tick and returns the single action."""

    __slots__ = ()

    @staticmethod
    def invoke(logic: TurnLogic | Callable[[Percept], ActionLike], percept: Percept) -> ActionType:
        try:
            if isinstance(logic, TurnLogic):
                result = logic.decide(percept)
            else:
                result = logic(percept)
            return coerce_action(result)
        except Exception as exc:
            logger.debug("Turn logic raised", exc_info=True)
            raise ScriptError(f"{type(exc).__name__}: {exc}") from exc
