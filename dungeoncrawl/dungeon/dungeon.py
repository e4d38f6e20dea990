"""The dungeon: its tiles, rooms, decorations and fog of war."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from ..graphics.animatedsprite import AnimatedSprite
from ..util.grid import Grid
from ..util.randomness import randint, random_choice
from ..util.vec import DIRECTIONS, Vec
from .fog import Fog
from .pathfinding import Path, breadth_first
from .room import Room
from .tile import Tile


class Dungeon:
    """Tiles addressed as ``tiles[x, y]`` or ``tiles[Vec(x, y)]``, plus rooms and decorations."""

    def __init__(
        self,
        tiles: Grid[Tile],
        rooms: Optional[Sequence[Room]] = None,
        decorations: Optional[Mapping[Vec, AnimatedSprite]] = None,
    ) -> None:
        self.tiles = tiles
        self.rooms: list[Room] = list(rooms or [])
        self.decorations: dict[Vec, AnimatedSprite] = dict(decorations or {})
        self.fog = Fog()
        # nothing is visible until the fog is first computed
        for position in self.tiles:
            self.tiles[position].visible = False

    def random_open_room_tile(self) -> Vec:
        """A random walkable, unoccupied, item-free tile inside some room."""
        while True:
            room = random_choice(self.rooms)
            x = randint(room.position.x, room.position.x + room.size.x - 1)
            y = randint(room.position.y, room.position.y + room.size.y - 1)
            tile = self.tiles[x, y]
            if tile.walkable and tile.entity is None and tile.item is None:
                return Vec(x, y)

    def update(self) -> None:
        """Advance the animation of decorations on visible tiles."""
        for position, animated_sprite in self.decorations.items():
            if self.tiles[position].visible:
                animated_sprite.update()

    def update_visibility(self, position: Vec) -> None:
        self.fog.update_visibility(self, position)

    def remove_entity(self, position: Vec) -> None:
        self.tiles[position].entity = None

    def get_tile(self, position: Vec) -> Tile:
        return self.tiles[position]

    def within_bounds(self, position: Vec) -> bool:
        return self.tiles.within_bounds(position)

    def neighbors(self, position: Vec) -> list[Vec]:
        """The four orthogonal neighbours that lie within the map."""
        return [
            position + direction
            for direction in DIRECTIONS
            if self.tiles.within_bounds(position + direction)
        ]

    def is_opaque(self, position: Vec) -> bool:
        """Whether the tile blocks sight: walls and closed doors do."""
        tile = self.tiles[position]
        if tile.is_wall():
            return True
        if tile.has_door():
            return not tile.door.is_open()
        return False

    def calculate_path(self, start: Vec, stop: Vec) -> Path:
        return breadth_first(self, start, stop)