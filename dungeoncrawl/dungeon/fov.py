"""Symmetric shadowcasting field of view."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable

from ..util.vec import Vec

# A slope stored as numerator (x) over denominator (y).
Fraction = Vec


def round_ties_up(n: float) -> int:
    return math.floor(n + 0.5)


def round_ties_down(n: float) -> int:
    return math.ceil(n - 0.5)


def _to_decimal(fraction: Fraction) -> float:
    return fraction.x / fraction.y


class Cardinal(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


@dataclass(frozen=True)
class Quadrant:
    """One of four 90-degree sectors around an origin."""

    direction: Cardinal
    origin: Vec

    def transform(self, tile: Vec) -> Vec:
        """Convert quadrant coordinates (row, col) to map coordinates (x, y)."""
        row, col = tile
        if self.direction is Cardinal.NORTH:
            return self.origin + Vec(col, -row)
        if self.direction is Cardinal.SOUTH:
            return self.origin + Vec(col, row)
        if self.direction is Cardinal.EAST:
            return self.origin + Vec(row, col)
        return self.origin + Vec(-row, col)


@dataclass
class Row:
    """A row of tiles at a given depth, bounded by two slopes."""

    depth: int
    start_slope: Fraction
    end_slope: Fraction

    def tiles(self) -> list[Vec]:
        """Tiles (row, col) spanned by this row's slopes."""
        min_col = round_ties_up(self.depth * _to_decimal(self.start_slope))
        max_col = round_ties_down(self.depth * _to_decimal(self.end_slope))
        return [Vec(self.depth, col) for col in range(min_col, max_col + 1)]

    def next(self) -> Row:
        return Row(self.depth + 1, self.start_slope, self.end_slope)


def slope(tile: Vec) -> Fraction:
    """Slope of the left edge of a tile."""
    row_depth, col = tile
    return Fraction(2 * col - 1, 2 * row_depth)


def is_symmetric(row: Row, tile: Vec) -> bool:
    """Whether a floor tile lies within the row's slopes, keeping visibility symmetric."""
    _, col = tile
    return (
        row.depth * _to_decimal(row.start_slope)
        <= col
        <= row.depth * _to_decimal(row.end_slope)
    )


class FieldOfView:
    """Computes the set of positions visible from a point."""

    def compute(self, position: Vec, is_opaque: Callable[[Vec], bool]) -> set[Vec]:
        visible = {position}
        for direction in Cardinal:
            quadrant = Quadrant(direction, position)
            self._scan(Row(1, Fraction(-1, 1), Fraction(1, 1)), quadrant, is_opaque, visible)
        return visible

    @staticmethod
    def _scan(
        first_row: Row,
        quadrant: Quadrant,
        is_opaque: Callable[[Vec], bool],
        visible: set[Vec],
    ) -> None:
        def is_wall(tile: Vec | None) -> bool:
            return tile is not None and is_opaque(quadrant.transform(tile))

        def is_floor(tile: Vec | None) -> bool:
            return tile is not None and not is_opaque(quadrant.transform(tile))

        pending = [first_row]
        while pending:
            row = pending.pop()
            prev_tile: Vec | None = None
            for tile in row.tiles():
                if is_wall(tile) or is_symmetric(row, tile):
                    visible.add(quadrant.transform(tile))
                if is_wall(prev_tile) and is_floor(tile):
                    row.start_slope = slope(tile)
                if is_floor(prev_tile) and is_wall(tile):
                    next_row = row.next()
                    next_row.end_slope = slope(tile)
                    pending.append(next_row)
                prev_tile = tile
            if is_floor(prev_tile):
                pending.append(row.next())