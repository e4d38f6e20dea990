"""Actions available to heroes and monsters: resting, moving, doors, wandering."""

from __future__ import annotations

from typing import Any

from ..action import Action, Result, alternative, failure, success
from ..util.randomness import shuffle
from ..util.vec import Vec
from .updatefov import UpdateFOV


class Rest(Action):
    """Do nothing for a turn."""

    def perform(self, engine: Any, entity: Any) -> Result:
        return success()


class Move(Action):
    """Step one tile in a direction, opening closed doors on the way."""

    def __init__(self, direction: Vec) -> None:
        self.direction = direction

    def perform(self, engine: Any, entity: Any) -> Result:
        target = entity.position + self.direction
        tile = engine.dungeon.get_tile(target)

        if not tile.is_wall() and not tile.has_door() and not tile.has_entity():
            self._step(entity, target)
            return success()
        if tile.is_wall():
            return failure()
        if tile.has_entity():
            return alternative(Rest())
        if tile.has_door() and not tile.door.is_open():
            return alternative(OpenDoor(tile.door))
        if tile.has_door() and tile.door.is_open():
            self._step(entity, target)
            return success()
        return failure()

    def _step(self, entity: Any, target: Vec) -> None:
        entity.move_to(target)
        entity.change_direction(self.direction)


class OpenDoor(Action):
    """Open a door and refresh the hero's field of view."""

    def __init__(self, door: Any) -> None:
        self.door = door

    def perform(self, engine: Any, entity: Any) -> Result:
        self.door.open()
        engine.events.create_event(UpdateFOV)
        return success()


class CloseDoor(Action):
    """Close every open, unoccupied door next to the entity."""

    def perform(self, engine: Any, entity: Any) -> Result:
        closed_any = False
        for neighbor in engine.dungeon.neighbors(entity.position):
            tile = engine.dungeon.get_tile(neighbor)
            if tile.has_door() and tile.door.is_open() and not tile.has_entity():
                tile.door.close()
                closed_any = True

        if not closed_any:
            return failure()
        engine.events.create_event(UpdateFOV)
        return success()


class Wander(Action):
    """Move towards a random open neighbouring tile, or rest if there is none."""

    def perform(self, engine: Any, entity: Any) -> Result:
        position = entity.position
        neighbors = engine.dungeon.neighbors(position)
        shuffle(neighbors)

        for neighbor in neighbors:
            tile = engine.dungeon.get_tile(neighbor)
            if not tile.is_wall() and not tile.has_entity():
                return alternative(Move(neighbor - position))
        return alternative(Rest())