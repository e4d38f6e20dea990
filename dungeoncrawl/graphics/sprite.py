"""A region of a texture with drawing parameters."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from ..util.vec import Vec


@dataclass
class Sprite:
    """A 2D image in the game, drawn anchored by ``shift``."""

    texture_id: int = -1  # assigned when requested from the graphics engine
    location: Vec = Vec(0, 0)  # upper-left corner of the sprite in the image
    size: Vec = Vec(0, 0)  # width, height in the image
    shift: Vec = Vec(0, 0)  # pixels to shift by when displaying
    center: Vec = Vec(0, 0)  # point to rotate about
    angle: float = 0.0
    flip: bool = False  # flip horizontally

    def copy(self) -> Sprite:
        """An independent copy of this sprite."""
        return dataclasses.replace(self)