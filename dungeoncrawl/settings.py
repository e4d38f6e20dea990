"""Game settings read from a whitespace-separated key/value file."""

from __future__ import annotations

import re
from pathlib import Path

_INT_PREFIX = re.compile(r"[+-]?\d+")


class Settings:
    """Window, camera, dungeon and asset settings for the game."""

    title: str
    screen_width: int
    screen_height: int
    tile_size: int
    zoom: int
    tiles: str
    heroes: str
    monsters: str
    items: str
    effects: str
    sounds: str
    map_width: int
    map_height: int
    room_placement_attempts: int

    def __init__(self, filename: str | Path) -> None:
        self.path = Path(filename).absolute()
        try:
            text = self.path.read_text()
        except OSError as error:
            raise FileNotFoundError(f"Could not open settings file: {self.path}") from error

        tokens = text.split()
        self._parameters = dict(zip(tokens[::2], tokens[1::2]))

        self.title = self._text("title")
        self.screen_width = self._integer("screen_width")
        self.screen_height = self._integer("screen_height")
        self.tile_size = self._integer("tile_size")
        self.zoom = self._integer("zoom")
        self.tiles = self._text("tiles")
        self.heroes = self._text("heroes")
        self.monsters = self._text("monsters")
        self.items = self._text("items")
        self.effects = self._text("effects")
        self.sounds = self._text("sounds")
        self.map_width = self._integer("map_width")
        self.map_height = self._integer("map_height")
        self.room_placement_attempts = self._integer("room_placement_attempts")

    def _text(self, name: str) -> str:
        try:
            return self._parameters[name]
        except KeyError:
            raise KeyError(f"Parameter '{name}' not found in {self.path}") from None

    def _integer(self, name: str) -> int:
        value = self._text(name)
        match = _INT_PREFIX.match(value)
        if match is None:
            raise ValueError(f"Parameter '{name}' in {self.path} is not an integer: {value!r}")
        return int(match.group())