"""A* search over a four-connected tile grid."""

from __future__ import annotations

import heapq
import itertools
from typing import Protocol

Point = tuple[int, int]

_DIRECTIONS: tuple[Point, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


class _Grid(Protocol):
    width: int
    height: int

    def is_walkable(self, x: int, y: int) -> bool: ...


def _manhattan(a: Point, b: Point) -> float:
    return float(abs(a[0] - b[0]) + abs(a[1] - b[1]))


def find_path(grid: _Grid, start: Point, goal: Point) -> list[Point]:
    """Return the steps from start to goal, excluding start and including goal.

    The goal itself need not be walkable. An empty list means the goal is
    unreachable or equal to start.
    """
    start = tuple(start)
    goal = tuple(goal)
    width, height = grid.width, grid.height

    def in_bounds(pos: Point) -> bool:
        return 0 <= pos[0] < width and 0 <= pos[1] < height

    order = itertools.count()
    open_set: list[tuple[float, int, Point, float]] = [
        (_manhattan(start, goal), next(order), start, 0.0)
    ]
    cost_so_far: dict[Point, float] = {start: 0.0}
    came_from: dict[Point, Point | None] = {start: None}

    while open_set:
        _, _, current, _ = heapq.heappop(open_set)
        if current == goal:
            break
        for dx, dy in _DIRECTIONS:
            nxt = (current[0] + dx, current[1] + dy)
            if not in_bounds(nxt):
                continue
            if nxt != goal and not grid.is_walkable(*nxt):
                continue
            new_cost = cost_so_far[current] + 1.0
            if nxt not in cost_so_far or new_cost < cost_so_far[nxt]:
                cost_so_far[nxt] = new_cost
                came_from[nxt] = current
                heapq.heappush(
                    open_set,
                    (new_cost + _manhattan(nxt, goal), next(order), nxt, new_cost),
                )

    if goal not in came_from:
        return []

    path: list[Point] = []
    node = goal
    while node != start:
        path.append(node)
        node = came_from[node]
    path.reverse()
    return path