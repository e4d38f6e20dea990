"""Procedural dungeon layout: rooms, maze corridors and connecting doors.

Layout values after generation:
    -1  wall completely surrounded by walls (never drawn)
     0  wall
     1  walkable floor
     2  door (connector between regions)
"""

from __future__ import annotations

from typing import Optional

from ..util.grid import Grid
from ..util.randomness import probability, randint, random_choice, shuffle
from ..util.vec import DIRECTIONS, Vec, distance
from .room import Room, overlaps

Connector = tuple[Vec, int, int]


def format_layout(layout: Grid[int]) -> str:
    """Render a layout as framed text; surrounded walls (-1) show as spaces."""
    border = "+" + "-" * layout.width + "+\n"
    lines = [border]
    for y in range(layout.height):
        cells = "".join(
            " " if layout[x, y] == -1 else str(layout[x, y]) for x in range(layout.width)
        )
        lines.append(f"|{cells}|\n")
    lines.append(border)
    return "".join(lines)


class Builder:
    """Generates random dungeon layouts."""

    def __init__(self, room_placement_attempts: int) -> None:
        self.room_placement_attempts = room_placement_attempts
        self._id = 1
        self._rooms: list[Room] = []

    def generate(self, width: int, height: int) -> tuple[Grid[int], list[Room]]:
        """Build a layout of the given odd dimensions (each at least 19)."""
        if width % 2 == 0 or height % 2 == 0:
            raise ValueError(
                f"screen_width and screen_height must be odd numbers: ({width}, {height})"
            )
        if width < 19 or height < 19:
            raise ValueError(
                f"screen_width and screen_height must be at least 19: ({width}, {height})"
            )

        layout: Grid[int] = Grid(width, height, 0)
        self._rooms = []

        self._add_rooms(layout)
        self._create_corridors(layout)

        connectors = self._reduce_connectors(self._find_all_connectors(layout))

        # every carved tile becomes plain floor
        for y in range(1, layout.height):
            for x in range(1, layout.width):
                if layout[x, y] != 0:
                    layout[x, y] = 1

        for position in connectors:
            layout[position] = 2

        self._remove_dead_ends(layout)
        self._mark_surrounded_walls(layout)

        return layout, list(self._rooms)

    def generate_test_dungeon(self, width: int, height: int) -> tuple[Grid[int], list[Room]]:
        """A single open room bordered by walls, with one wall tile at (3, 2)."""
        layout: Grid[int] = Grid(width, height, 0)
        for position in layout:
            on_border = position.x in (0, width - 1) or position.y in (0, height - 1)
            layout[position] = 0 if on_border else 1
        layout[3, 2] = 0
        self._rooms.append(Room(Vec(1, 1), Vec(width - 2, height - 2)))
        return layout, list(self._rooms)

    # rooms

    def _add_rooms(self, layout: Grid[int]) -> None:
        for _ in range(self.room_placement_attempts):
            new_room = self._generate_room(layout)
            if new_room.position.x >= layout.width - 2 or new_room.position.y >= layout.height - 2:
                continue
            if any(overlaps(new_room, room) for room in self._rooms):
                continue
            self._rooms.append(new_room)
            self._imprint_room(layout, new_room)
            self._id += 1

    @staticmethod
    def _generate_room(layout: Grid[int]) -> Room:
        size = Vec(1, 1) * (1 + 2 * randint(1, 3))

        # vary the shape of rooms
        size_variation = 2 * randint(0, 1 + size.x // 2)
        if probability(50):
            size = Vec(size.x + size_variation, size.y)
        else:
            size = Vec(size.x, size.y + size_variation)

        x = randint(0, layout.width - 2 - size.x) // 2 * 2 + 1
        y = randint(0, layout.height - 2 - size.y) // 2 * 2 + 1
        return Room(Vec(x, y), size)

    def _imprint_room(self, layout: Grid[int], room: Room) -> None:
        for y in range(room.size.y):
            for x in range(room.size.x):
                layout[x + room.position.x, y + room.position.y] = self._id

    # corridors

    def _create_corridors(self, layout: Grid[int]) -> None:
        directions = list(DIRECTIONS)
        for y in range(1, layout.height, 2):
            for x in range(1, layout.width, 2):
                if layout[x, y] == 0:
                    shuffle(directions)
                    self._carve_corridor(layout, Vec(x, y), directions)
                    self._id += 1

    def _carve_corridor(self, layout: Grid[int], start: Vec, directions: list[Vec]) -> None:
        """Depth-first maze carving; each step works on its own copy of the directions."""
        if layout[start] != 0:
            return

        stack = []

        def enter(position: Vec, inherited: list[Vec]) -> None:
            dirs = list(inherited)
            layout[position] = self._id
            ahead = position + dirs[0] * 2
            if not layout.within_bounds(ahead) or layout[ahead] != 0 or probability(10):
                shuffle(dirs)
            stack.append((position, dirs, iter(dirs)))

        enter(start, directions)
        while stack:
            position, dirs, remaining = stack[-1]
            for direction in remaining:
                nxt = position + direction * 2
                if layout.within_bounds(nxt) and layout[nxt] == 0:
                    layout[position + direction] = self._id
                    enter(nxt, dirs)
                    break
            else:
                stack.pop()

    # connectors

    @staticmethod
    def _maybe_connector(layout: Grid[int], position: Vec) -> Optional[Connector]:
        if layout[position] != 0:
            return None
        regions = {layout[position + d] for d in DIRECTIONS if layout[position + d] > 0}
        if len(regions) == 2:
            first, second = sorted(regions)
            return position, first, second
        return None

    @classmethod
    def _find_all_connectors(cls, layout: Grid[int]) -> list[Connector]:
        connectors = []
        for y in range(1, layout.height - 1):
            for x in range(1, layout.width - 1):
                connector = cls._maybe_connector(layout, Vec(x, y))
                if connector is not None:
                    connectors.append(connector)
        return connectors

    @staticmethod
    def _reduce_connectors(connectors: list[Connector]) -> list[Vec]:
        """Merge all regions into one, keeping a sparse set of connectors."""
        if not connectors:
            return []

        # region -> neighbouring region -> connector positions between them
        graph: dict[int, dict[int, set[Vec]]] = {}
        for position, region_a, region_b in connectors:
            graph.setdefault(region_a, {}).setdefault(region_b, set()).add(position)
            graph.setdefault(region_b, {}).setdefault(region_a, set()).add(position)

        reduced: list[Vec] = []
        main = random_choice(graph)[0]

        while len(graph) > 1:
            other, shared = random_choice(graph[main])
            positions = set(shared)

            position = random_choice(positions)
            reduced.append(position)
            graph[main][other].discard(position)

            # occasionally keep a second connector so there are loops
            if positions and probability(25):
                additional = random_choice(positions)
                if distance(position, additional) > 1:
                    reduced.append(additional)

            # merge other into main
            other_links = graph[other]
            other_links.pop(main, None)
            graph[main].pop(other, None)
            for region, links in other_links.items():
                graph[main].setdefault(region, links)
            del graph[other]
            for links in graph.values():
                links.pop(other, None)

        return reduced

    # clean-up

    @staticmethod
    def _remove_dead_ends(layout: Grid[int]) -> None:
        """Fill open tiles with three or more wall neighbours until none remain."""
        removed = True
        while removed:
            removed = False
            for y in range(1, layout.height - 1):
                for x in range(1, layout.width - 1):
                    position = Vec(x, y)
                    if layout[position] == 0:
                        continue
                    walls = sum(1 for d in DIRECTIONS if layout[position + d] == 0)
                    if walls >= 3:
                        layout[position] = 0
                        removed = True

    @staticmethod
    def _mark_surrounded_walls(layout: Grid[int]) -> None:
        surrounded = []
        for position in layout:
            total = sum(
                layout[position.x + i, position.y + j]
                for j in (-1, 0, 1)
                for i in (-1, 0, 1)
                if layout.within_bounds(position.x + i, position.y + j)
            )
            if total == 0:
                surrounded.append(position)
        for position in surrounded:
            layout[position] = -1