"""Breadth-first search over the dungeon's non-wall tiles."""

from __future__ import annotations

from collections import deque
from typing import Any

from ..util.vec import Vec

Path = list[Vec]


def breadth_first(dungeon: Any, start: Vec, goal: Vec) -> Path:
    """Shortest path from start to goal inclusive, or an empty list if unreachable."""
    frontier = deque([start])
    came_from: dict[Vec, Vec] = {start: start}

    while frontier:
        current = frontier.popleft()
        if current == goal:
            break
        for nxt in dungeon.neighbors(current):
            if not dungeon.tiles[nxt].is_wall() and nxt not in came_from:
                frontier.append(nxt)
                came_from[nxt] = current

    if goal not in came_from:
        return []

    path = [goal]
    current = goal
    while current != start:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path