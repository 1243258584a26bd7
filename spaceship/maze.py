"""Donut mazes whose lettered portals connect distant tiles."""

from __future__ import annotations

import copy
from itertools import product

from spaceship.gridmap import WALL, Map, MapPosition

OPEN = "."
PORTAL = "+"
_MAX_LEVEL = 30


def _is_label(c: str) -> bool:
    return c >= "A"


def _horizontal_portal(maze: Map, entry: MapPosition) -> MapPosition:
    x, y = entry.x, entry.y
    if x == 0:
        portal = MapPosition(x + 2, y)
    elif x == maze.width - 2:
        portal = MapPosition(x - 1, y)
    elif maze[MapPosition(x + 2, y)] == OPEN:
        portal = MapPosition(x + 2, y)
    else:
        portal = MapPosition(x - 1, y)
    maze[entry] = WALL
    maze[MapPosition(x + 1, y)] = WALL
    maze[portal] = PORTAL
    return portal


def _vertical_portal(maze: Map, entry: MapPosition) -> MapPosition:
    x, y = entry.x, entry.y
    if y == 0:
        portal = MapPosition(x, y + 2)
    elif y == maze.height - 2:
        portal = MapPosition(x, y - 1)
    elif maze[MapPosition(x, y + 2)] == OPEN:
        portal = MapPosition(x, y + 2)
    else:
        portal = MapPosition(x, y - 1)
    maze[entry] = WALL
    maze[MapPosition(x, y + 1)] = WALL
    maze[portal] = PORTAL
    return portal


def _find_portals(maze: Map):
    start = end = None
    portals: dict[MapPosition, MapPosition] = {}
    entries: dict[tuple[str, str], MapPosition] = {}

    for y, x in product(range(maze.height - 1), range(maze.width - 1)):
        entry = MapPosition(x, y)
        first = maze[entry]
        if not _is_label(first):
            continue
        second = maze[MapPosition(x + 1, y)]
        if _is_label(second):
            place = _horizontal_portal
        else:
            second = maze[MapPosition(x, y + 1)]
            place = _vertical_portal

        label = (first, second)
        if label == ("A", "A"):
            start = place(maze, entry)
        elif label == ("Z", "Z"):
            end = place(maze, entry)
        elif label in entries:
            exit_ = place(maze, entry)
            portals[exit_] = entries[label]
            portals[entries[label]] = exit_
        else:
            entries[label] = place(maze, entry)

    if start is None or end is None:
        raise ValueError("maze has no AA entrance or no ZZ exit")
    return start, end, portals


def _is_outer(portal: MapPosition, width: int, height: int) -> bool:
    return (portal.x in (2, width - 3)) or (portal.y in (2, height - 3))


class Maze:
    """A maze read from text, with AA as entrance and ZZ as exit."""

    def __init__(self, text: str) -> None:
        self.maze = Map.from_text(text)
        self.start, self.end, self.portals = _find_portals(self.maze)
        self._distances: dict[tuple[MapPosition, MapPosition], int] = {}

    def _distance(self, source: MapPosition, target: MapPosition) -> int:
        key = (source, target)
        if key not in self._distances:
            self._distances[key] = self.maze.shortest_path(source, target)
        return self._distances[key]

    def _find_exit(self, grid: Map, visited: set[MapPosition],
                   start: MapPosition) -> int:
        grid = copy.copy(grid)
        visited = set(visited)
        grid[start] = OPEN
        best = 100000
        for pos in grid.find({PORTAL}, start):
            if pos in visited:
                continue
            visited.add(pos)
            length = self._distance(start, pos)
            if pos != self.end:
                length += self._find_exit(grid, visited, self.portals[pos]) + 1
            best = min(best, length)
        return best

    def shortest_path(self) -> int:
        """Steps from AA to ZZ when portals lead across the same level."""
        return self._find_exit(self.maze, set(), self.start)

    def recursive_path(self) -> int:
        """Steps from AA to ZZ when inner portals descend and outer ones ascend."""
        grid = copy.copy(self.maze)
        reachable: dict[MapPosition, dict[MapPosition, str]] = {}

        def portals_from(current: MapPosition) -> dict[MapPosition, str]:
            if current not in reachable:
                grid[current] = OPEN
                reachable[current] = grid.find({PORTAL}, current)
                grid[current] = PORTAL
            return reachable[current]

        def search(visited: set[tuple[MapPosition, int]], current: MapPosition,
                   count: int, level: int) -> int:
            if level < 0 or level > _MAX_LEVEL:
                return 999999
            visited = set(visited)
            best = 11000
            for pos in portals_from(current):
                if (pos, level) in visited:
                    continue
                if pos == self.start or (pos == self.end and level != 0):
                    continue
                length = self._distance(current, pos)
                if count + length > best:
                    continue
                if pos != self.end:
                    visited.add((pos, level))
                    outer = _is_outer(pos, grid.width, grid.height)
                    length += 1 + search(visited, self.portals[pos],
                                         count + length,
                                         level - 1 if outer else level + 1)
                best = min(best, length)
            return best

        return search(set(), self.start, 0, 0)