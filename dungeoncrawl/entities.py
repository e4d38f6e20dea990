"""The round-robin collection of entities and their turns."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator

from .entity import Entity

COST_OF_TURN = 8  # energy needed to take a turn


class Entities:
    """Entities in turn order; the one at the front acts next."""

    def __init__(self) -> None:
        self._entities: deque[Entity] = deque()

    def add(self, entity: Entity) -> None:
        self._entities.append(entity)

    def update(self) -> None:
        """Let every entity advance its animation."""
        for entity in self._entities:
            entity.update()

    def take_turn(self, engine: Any) -> bool:
        """Let the front entity act; False when no progress can be made yet."""
        self._remove_dead_entities()
        if not self._entities:
            return False

        entity = self._entities[0]
        if entity.energy < COST_OF_TURN:
            self.advance()
            return True

        action = entity.take_turn()
        if action is None:
            # wait for this entity without moving on
            return False

        while True:
            result = action.perform(engine, entity)
            if result.succeeded:
                entity.energy %= COST_OF_TURN
                self.advance()
                return True
            if result.next_action is None:
                return True
            action = result.next_action

    def advance(self) -> None:
        """Move the front entity to the back and give it energy."""
        if not self._entities:
            return
        entity = self._entities.popleft()
        self._entities.append(entity)
        entity.energy += entity.speed

    def _remove_dead_entities(self) -> None:
        self._entities = deque(entity for entity in self._entities if entity.alive)

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self._entities))

    def __len__(self) -> int:
        return len(self._entities)