"""A single dungeon tile and what stands on it."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from ..graphics.sprite import Sprite


class TileType(Enum):
    NONE = auto()
    FLOOR = auto()
    WALL = auto()
    DOOR = auto()


@dataclass(eq=False)
class Tile:
    """One cell of the dungeon map."""

    type: TileType = TileType.NONE
    sprite: Sprite = field(default_factory=Sprite)
    visible: bool = False
    walkable: bool = False
    door: Any = None
    item: Any = None
    entity: Any = None

    def is_wall(self) -> bool:
        return self.type is TileType.WALL

    def has_door(self) -> bool:
        return self.type is TileType.DOOR

    def has_item(self) -> bool:
        return self.item is not None

    def has_entity(self) -> bool:
        return self.entity is not None