"""A fixed-size, bounds-checked 2D grid."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, TypeVar, Union

from .vec import Vec

T = TypeVar("T")

Key = Union[Vec, "tuple[int, int]"]


def _coords(x: Any, y: int | None = None) -> tuple[int, int]:
    if y is not None:
        return x, y
    if isinstance(x, Vec):
        return x.x, x.y
    px, py = x
    return px, py


class Grid(Generic[T]):
    """Width-by-height cells addressed by ``grid[x, y]`` or ``grid[Vec(x, y)]``.

    ``init_val`` fills every cell; if it is callable (a class or factory),
    it is called once per cell so each cell gets its own object.
    """

    def __init__(self, width: int, height: int, init_val: T | Callable[[], T] = 0) -> None:
        if width <= 0:
            raise ValueError(f"Value width = {width} must be greater than 0")
        if height <= 0:
            raise ValueError(f"Value height = {height} must be greater than 0")
        self.width = width
        self.height = height
        if callable(init_val):
            self._values: list[T] = [init_val() for _ in range(width * height)]
        else:
            self._values = [init_val] * (width * height)

    def _index(self, key: Key) -> int:
        x, y = _coords(key)
        self.check_bounds(x, y)
        return self.width * y + x

    def __getitem__(self, key: Key) -> T:
        return self._values[self._index(key)]

    def __setitem__(self, key: Key, value: T) -> None:
        self._values[self._index(key)] = value

    def within_bounds(self, x: Any, y: int | None = None) -> bool:
        """Whether (x, y), or the single Vec/tuple given as x, lies in the grid."""
        px, py = _coords(x, y)
        return 0 <= px < self.width and 0 <= py < self.height

    def check_bounds(self, x: Any, y: int | None = None) -> None:
        """Raise IndexError if the position lies outside the grid."""
        px, py = _coords(x, y)
        if not self.within_bounds(px, py):
            raise IndexError(
                f"({px}, {py}) is out of bounds for an array with size "
                f"({self.width}, {self.height})"
            )

    def __iter__(self) -> Iterator[Vec]:
        """Yield every position, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield Vec(x, y)

    def __str__(self) -> str:
        rows = (
            "".join(str(self._values[self.width * y + x]) for x in range(self.width))
            for y in range(self.height)
        )
        return "".join(row + "\n" for row in rows)