"""Doors that open and close, changing their tile's walkability."""

from __future__ import annotations

from ..graphics.sprite import Sprite
from ..util.vec import Vec
from .tile import Tile


class Door:
    """A door on a tile, drawn with a horizontal or vertical sprite."""

    def __init__(self, tile: Tile, is_horizontal: bool, horizontal: Sprite, vertical: Sprite) -> None:
        self.tile = tile
        self._is_open = False
        self.is_horizontal = is_horizontal
        self._horizontal = horizontal.copy()
        self._vertical = vertical.copy()

        # shift open door sprites by a few pixels so the tile looks walkable
        if is_horizontal:
            self._vertical.shift = self._vertical.shift + Vec(-6, 0)
        else:
            self._horizontal.shift = self._horizontal.shift + Vec(6, -12)

    def is_open(self) -> bool:
        return self._is_open

    def open(self) -> None:
        self._is_open = True
        self.tile.walkable = True

    def close(self) -> None:
        self._is_open = False
        self.tile.walkable = False

    def sprite(self) -> Sprite:
        """The sprite matching the door's orientation and state."""
        if self._is_open == self.is_horizontal:
            return self._vertical
        return self._horizontal