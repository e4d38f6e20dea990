from dungeoncrawl.dungeon.pathfinding import breadth_first
from dungeoncrawl.dungeon.tile import Tile, TileType
from dungeoncrawl.util.grid import Grid
from dungeoncrawl.util.vec import DIRECTIONS, Vec

KINDS = {"#": TileType.WALL, ".": TileType.FLOOR, "+": TileType.DOOR}


class _Map:
    def __init__(self, lines):
        self.tiles = Grid(len(lines[0]), len(lines), Tile)
        for y, line in enumerate(lines):
            for x, ch in enumerate(line):
                self.tiles[x, y].type = KINDS[ch]

    def neighbors(self, position):
        return [position + d for d in DIRECTIONS if self.tiles.within_bounds(position + d)]


def _is_connected_path(path):
    return all((b - a) in DIRECTIONS for a, b in zip(path, path[1:]))


def test_start_equals_goal():
    world = _Map(["...", "...", "..."])
    assert breadth_first(world, Vec(1, 1), Vec(1, 1)) == [Vec(1, 1)]


def test_shortest_path_in_open_area():
    world = _Map(["#####", "#...#", "#...#", "#...#", "#####"])
    start, goal = Vec(1, 1), Vec(3, 3)
    path = breadth_first(world, start, goal)
    assert path[0] == start and path[-1] == goal
    assert len(path) == abs(goal.x - start.x) + abs(goal.y - start.y) + 1
    assert _is_connected_path(path)


def test_path_goes_around_walls():
    world = _Map(["#######", "#..#..#", "#..#..#", "#.....#", "#######"])
    path = breadth_first(world, Vec(1, 1), Vec(5, 1))
    assert path[0] == Vec(1, 1) and path[-1] == Vec(5, 1)
    assert _is_connected_path(path)
    assert not any(world.tiles[p].is_wall() for p in path)
    assert Vec(3, 3) in path


def test_doors_are_passable():
    world = _Map(["#####", "#.+.#", "#####"])
    path = breadth_first(world, Vec(1, 1), Vec(3, 1))
    assert path == [Vec(1, 1), Vec(2, 1), Vec(3, 1)]


def test_unreachable_goal_gives_empty_path():
    world = _Map(["#####", "#.#.#", "#####"])
    assert breadth_first(world, Vec(1, 1), Vec(3, 1)) == []


def test_wall_goal_is_unreachable():
    world = _Map(["#####", "#...#", "#####"])
    assert breadth_first(world, Vec(1, 1), Vec(0, 1)) == []