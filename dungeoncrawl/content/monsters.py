"""Monster types and their hunting behaviour."""

from __future__ import annotations

from typing import Any, Optional

from ..action import Action
from ..util.randomness import probability
from .actions import Move, Rest, Wander


def _make(monster: Any, sprite: str, health: int) -> None:
    monster.set_sprite(sprite)
    monster.set_max_health(health)
    monster.behavior = default_behavior


def make_demon(monster: Any) -> None:
    _make(monster, "demon_big", 40)


def make_skeleton(monster: Any) -> None:
    _make(monster, "skeleton", 15)


def make_muddy(monster: Any) -> None:
    _make(monster, "muddy", 25)


def default_behavior(engine: Any, entity: Any) -> Optional[Action]:
    """Chase the hero when visible, otherwise mostly wander and sometimes rest."""
    if entity.is_visible() and engine.hero is not None:
        path = engine.dungeon.calculate_path(entity.position, engine.hero.position)
        if len(path) > 1:
            return Move(path[1] - path[0])

    if probability(66):
        return Wander()
    return Rest()