"""Hero types and the keyboard-driven hero behaviour."""

from __future__ import annotations

from typing import Any, Callable, Optional

from ..action import Action
from ..util.vec import Vec
from .actions import CloseDoor, Move, Rest, Wander

_KEY_ACTIONS: dict[str, Callable[[], Action]] = {
    "Right": lambda: Move(Vec(1, 0)),
    "Left": lambda: Move(Vec(-1, 0)),
    "Up": lambda: Move(Vec(0, 1)),
    "Down": lambda: Move(Vec(0, -1)),
    "R": Rest,
    "C": CloseDoor,
    "Z": Wander,
}


def make_knight(hero: Any) -> None:
    """Turn an entity into a knight controlled from the keyboard."""
    hero.set_sprite("knight")
    hero.set_max_health(10)
    hero.behavior = default_behavior


def default_behavior(engine: Any, entity: Any) -> Optional[Action]:
    """The action for the last key pressed, or None to wait for input."""
    factory = _KEY_ACTIONS.get(engine.input.pop_last_keypress())
    return factory() if factory is not None else None