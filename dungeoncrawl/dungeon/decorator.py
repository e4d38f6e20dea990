"""Turns a numeric layout into decorated dungeon tiles."""

from __future__ import annotations

from typing import Any, Sequence

from ..graphics.animatedsprite import AnimatedSprite
from ..util.grid import Grid
from ..util.randomness import probability, randint, random_choice
from ..util.vec import DIRECTIONS, Vec
from .door import Door
from .dungeon import Dungeon
from .room import Room
from .tile import Tile, TileType

_DIRECTION_NAMES = ("_right", "_up", "_left", "_down")


class Decorator:
    """Assigns tile types, sprites, doors and decorations to a layout."""

    def __init__(self, graphics: Any, layout: Grid[int], rooms: Sequence[Room]) -> None:
        self._graphics = graphics
        self._rooms = list(rooms)
        self._tiles: Grid[Tile] = Grid(layout.width, layout.height, Tile)
        self._decorations: dict[Vec, AnimatedSprite] = {}
        for position in layout:
            self._set_tile_type(self._tiles[position], layout[position])

    def create_dungeon(self) -> Dungeon:
        """Decorate the tiles and build the dungeon from them."""
        self._set_tile_sprites()
        self._place_torches()
        self._place_pillars()
        for _ in range(2):
            if probability(50):
                self._place_destroyed_wall()
        return Dungeon(self._tiles, self._rooms, self._decorations)

    @staticmethod
    def _set_tile_type(tile: Tile, value: int) -> None:
        if value == -1:
            tile.type = TileType.NONE
        elif value == 0:
            tile.type = TileType.WALL
        elif value == 1:
            tile.type = TileType.FLOOR
            tile.walkable = True
        elif value == 2:
            tile.type = TileType.DOOR

    def _set_tile_sprites(self) -> None:
        for position in self._tiles:
            tile_type = self._tiles[position].type
            if tile_type is TileType.WALL:
                self._choose_wall_sprite(position)
            elif tile_type is TileType.FLOOR:
                self._choose_floor_sprite(position)
            elif tile_type is TileType.DOOR:
                self._choose_door_sprite(position)

    def _choose_wall_sprite(self, position: Vec) -> None:
        # name the sprite after the neighbouring walls
        name = "".join(
            label
            for label, direction in zip(_DIRECTION_NAMES, DIRECTIONS)
            if self._tiles.within_bounds(position + direction)
            and self._tiles[position + direction].is_wall()
        )
        if not name:
            name = "_pillar"
        elif name in ("_right_left", "_up_down"):
            chance = randint(0, 99)
            if chance < 10:
                name += "_3"
            elif chance < 20:
                name += "_2"
            else:
                name += "_1"
        self._tiles[position].sprite = self._graphics.get_sprite("wall" + name)

    def _choose_floor_sprite(self, position: Vec) -> None:
        chance = randint(0, 99)
        if chance < 5:
            name = "floor_cracked_1"
        elif chance < 20:
            name = "floor_sunken"
        elif chance < 35:
            name = "floor_cracked_2"
        else:
            name = "floor_nice"
        self._tiles[position].sprite = self._graphics.get_sprite(name)

    def _choose_door_sprite(self, position: Vec) -> None:
        self._choose_floor_sprite(position)
        x, y = position
        is_horizontal = self._tiles[x - 1, y].is_wall() and self._tiles[x + 1, y].is_wall()
        tile = self._tiles[position]
        tile.door = Door(
            tile,
            is_horizontal,
            self._graphics.get_sprite("door_horizontal"),
            self._graphics.get_sprite("door_vertical"),
        )

    def _place_destroyed_wall(self) -> None:
        # horizontal runs of walls with walkable tiles above and below
        tiles = self._tiles
        positions = []
        for y in range(1, tiles.height - 1):
            walls = 0
            for x in range(tiles.width):
                walls = walls + 1 if tiles[x, y].is_wall() else 0
                if walls == 5 and all(
                    tiles[x + dx, y + 1].walkable and tiles[x + dx, y - 1].walkable
                    for dx in (-3, -2, -1)
                ):
                    positions.append(Vec(x - 2, y))

        if not positions:
            return

        x, y = random_choice(positions)
        x_names = ("_left", "_center", "_right")
        y_names = ("_bottom", "_center", "_top")
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                name = "floor_broken" + y_names[dy + 1] + x_names[dx + 1]
                tiles[x + dx, y + dy].sprite = self._graphics.get_sprite(name)
        tiles[x, y].type = TileType.FLOOR
        tiles[x, y].walkable = True

        self._decorations.pop(Vec(x - 1, y), None)
        self._decorations.pop(Vec(x + 1, y), None)
        self._decorations[Vec(x - 1, y)] = self._graphics.get_animated_sprite("wall_destroyed_left", 1)
        self._decorations[Vec(x, y)] = self._graphics.get_animated_sprite("wall_destroyed_center", 1)
        self._decorations[Vec(x + 1, y)] = self._graphics.get_animated_sprite("wall_destroyed_right", 1)

    def _place_torches(self) -> None:
        # runs of three walls with walkable tiles below them
        tiles = self._tiles
        positions = []
        for y in range(1, tiles.height):
            walls = 0
            for x in range(1, tiles.width - 1):
                if tiles[x, y].is_wall() and tiles[x, y - 1].walkable:
                    walls += 1
                else:
                    walls = 0
                if walls == 3:
                    positions.append(Vec(x - 1, y))
                    walls = 0

        for position in positions:
            if probability(50):
                self._decorations[position] = self._graphics.get_animated_sprite("torch", 2, True, True)

    def _place_pillars(self) -> None:
        spacing = 4
        for room in self._rooms:
            smaller = min(room.size.x, room.size.y)
            larger = max(room.size.x, room.size.y)
            if smaller < 5 or larger < 7:
                continue
            # pillars every four tiles, starting at 2 when half the size is even
            start_x = 2 if (room.size.x // 2) % 2 == 0 else 1
            start_y = 2 if (room.size.y // 2) % 2 == 0 else 1
            for y in range(start_y, room.size.y, spacing):
                for x in range(start_x, room.size.x - 1, spacing):
                    tile = self._tiles[room.position + Vec(x, y)]
                    tile.type = TileType.WALL
                    tile.walkable = False
                    tile.sprite = self._graphics.get_sprite("wall_pillar")