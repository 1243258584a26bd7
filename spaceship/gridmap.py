"""Character grids with flood-fill search and shortest walking paths."""

from __future__ import annotations

from collections import deque
from collections.abc import Collection, Iterable
from dataclasses import dataclass
from functools import total_ordering

WALL = "#"


@total_ordering
@dataclass(frozen=True)
class MapPosition:
    """A grid coordinate, ordered row by row."""

    x: int
    y: int

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MapPosition):
            return NotImplemented
        return (self.y, self.x) < (other.y, other.x)

    def __add__(self, other: MapPosition) -> MapPosition:
        return MapPosition(self.x + other.x, self.y + other.y)

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


_DIRECTIONS = (
    MapPosition(0, 1),
    MapPosition(1, 0),
    MapPosition(0, -1),
    MapPosition(-1, 0),
)


class Map:
    """A rectangular grid of characters; every cell but a wall is walkable."""

    def __init__(self, fields: Iterable[str], width: int, height: int) -> None:
        self.fields = list(fields)
        self.width = width
        self.height = height

    @classmethod
    def from_text(cls, text: str) -> Map:
        """Read a grid from lines of text; the last line sets the width."""
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        fields = [c for line in lines for c in line]
        width = len(lines[-1]) if lines else 0
        return cls(fields, width, len(lines))

    def __copy__(self) -> Map:
        return Map(self.fields, self.width, self.height)

    def _index(self, pos: MapPosition) -> int:
        index = pos.y * self.width + pos.x
        if not (0 <= pos.x < self.width and 0 <= pos.y < self.height
                and index < len(self.fields)):
            raise IndexError(f"position {pos} is outside the map")
        return index

    def __getitem__(self, pos: MapPosition) -> str:
        return self.fields[self._index(pos)]

    def __setitem__(self, pos: MapPosition, value: str) -> None:
        self.fields[self._index(pos)] = value

    def _passable(self, pos: MapPosition) -> bool:
        try:
            return self[pos] != WALL
        except IndexError:
            return False

    def shortest_path(self, start: MapPosition, end: MapPosition) -> int:
        """Number of steps on the shortest walk from start to end."""
        distances = {start: 0}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            if current == end:
                return distances[current]
            for step in _DIRECTIONS:
                following = current + step
                if following not in distances and self._passable(following):
                    distances[following] = distances[current] + 1
                    queue.append(following)
        raise ValueError(f"{end} cannot be reached from {start}")

    def find(self, items: Collection[str],
             start: MapPosition) -> dict[MapPosition, str]:
        """Item cells reachable from start without walking through another item."""
        found: dict[MapPosition, str] = {}
        seen = {start}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            value = self[current]
            if value in items:
                found[current] = value
                continue
            for step in _DIRECTIONS:
                following = current + step
                if following not in seen and self._passable(following):
                    seen.add(following)
                    queue.append(following)
        return dict(sorted(found.items()))

    def render(self) -> str:
        """The grid as text, one line per row."""
        return "".join(
            "".join(self.fields[row * self.width:(row + 1) * self.width]) + "\n"
            for row in range(self.height)
        )