"""Rectangular rooms placed in the dungeon layout."""

from __future__ import annotations

from dataclasses import dataclass

from ..util.vec import Vec


@dataclass
class Room:
    """A room by its lower-left position and its size."""

    position: Vec = Vec()
    size: Vec = Vec()

    def __str__(self) -> str:
        return f"Room(pos={self.position}, size={self.size})"


def overlaps(a: Room, b: Room) -> bool:
    """Whether two rooms overlap or touch without a gap between them."""
    well_separated = (
        a.position.x + a.size.x < b.position.x
        or b.position.x + b.size.x < a.position.x
        or a.position.y + a.size.y < b.position.y
        or b.position.y + b.size.y < a.position.y
    )
    return not well_separated