"""Collecting every key in a vault of doors, with one or four robots."""

from __future__ import annotations

import copy
import string

from spaceship.gridmap import WALL, Map, MapPosition

OPEN = "."
ENTRANCE = "@"
_KEYS = frozenset(string.ascii_lowercase)


def _quadrant(pos: MapPosition, width: int, height: int) -> int:
    left = pos.x < width // 2
    top = pos.y < height // 2
    if left:
        return 0 if top else 2
    return 1 if top else 3


def _cells(grid: Map):
    for index, value in enumerate(grid.fields):
        yield MapPosition(index % grid.width, index // grid.width), value


def _find_entrances(grid: Map) -> list[MapPosition]:
    """Entrance positions in reading order; each is renamed to its robot digit."""
    entrances = [pos for pos, value in _cells(grid) if value == ENTRANCE]
    for robot, pos in enumerate(entrances):
        grid[pos] = chr(ord("0") + robot)
    return entrances


def _doors(grid: Map) -> dict[str, MapPosition]:
    return {value.lower(): pos for pos, value in _cells(grid)
            if "A" <= value <= "Z"}


class _KeySearch:
    def __init__(self, doors: dict[str, MapPosition], width: int,
                 height: int) -> None:
        self.doors = doors
        self.width = width
        self.height = height
        self.steps: dict[tuple[str, tuple[MapPosition, ...]], int] = {}
        self.reachable: dict[str, dict[MapPosition, str]] = {}
        self.distances: dict[tuple[MapPosition, MapPosition], int] = {}

    def _robot_for(self, pos: MapPosition, robots: list[MapPosition]) -> int:
        return _quadrant(pos, self.width, self.height) if len(robots) == 4 else 0

    def _distance(self, grid: Map, source: MapPosition,
                  target: MapPosition) -> int:
        if (source, target) not in self.distances:
            distance = grid.shortest_path(source, target)
            self.distances[(source, target)] = distance
            self.distances[(target, source)] = distance
        return self.distances[(source, target)]

    def collect(self, grid: Map, robots: list[MapPosition], start: MapPosition,
                path: str, count: int) -> int:
        grid = copy.copy(grid)
        robots = list(robots)
        key = grid[start]
        robots[self._robot_for(start, robots)] = start
        for robot in robots:
            grid[robot] = OPEN
        if key in self.doors:
            grid[self.doors[key]] = OPEN

        collected = "".join(sorted(path)) + key
        keys = self.reachable.get(collected)
        if keys is None:
            found: dict[MapPosition, str] = {}
            for robot in robots:
                for pos, value in grid.find(_KEYS, robot).items():
                    found.setdefault(pos, value)
            keys = dict(sorted(found.items()))
            self.reachable[collected] = keys

        path += key
        if not keys:
            return count

        state = (collected, tuple(robots))
        if state not in self.steps:
            best = 1000000
            for target in keys:
                robot = robots[self._robot_for(target, robots)]
                distance = self._distance(grid, robot, target)
                best = min(best,
                           self.collect(grid, robots, target, path, distance))
            self.steps[state] = best
        return self.steps[state] + count


class Vault:
    """A vault map with entrances '@', keys 'a'-'z' and doors 'A'-'Z'."""

    def __init__(self, text: str) -> None:
        self.vault = Map.from_text(text)

    def collect_keys(self) -> int:
        """Fewest steps the robots need to pick up every key."""
        grid = copy.copy(self.vault)
        entrances = _find_entrances(grid)
        if not entrances:
            raise ValueError("vault has no entrance")
        doors = _doors(grid)
        for pos in doors.values():
            grid[pos] = WALL
        search = _KeySearch(doors, grid.width, grid.height)
        return search.collect(grid, entrances, entrances[0], "", 0)

    def deploy_robots(self) -> None:
        """Split the first entrance into four, walled off from each other."""
        entrances = _find_entrances(self.vault)
        if not entrances:
            raise ValueError("vault has no entrance")
        centre = entrances[0]
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                corner = dx != 0 and dy != 0
                self.vault[centre + MapPosition(dx, dy)] = (
                    ENTRANCE if corner else WALL)