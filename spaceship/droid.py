"""Repair droid that maps an unknown area through an Intcode remote control."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum

from spaceship.computer import Computer, Intcode
from spaceship.gridmap import MapPosition


class Field(Enum):
    """What the droid knows about a map position."""

    UNKNOWN = 0
    EMPTY = 1
    WALL = 2
    OXYGEN = 3


_ORIGIN = MapPosition(0, 0)
_MOVES = {
    1: MapPosition(0, -1),
    2: MapPosition(0, 1),
    3: MapPosition(-1, 0),
    4: MapPosition(1, 0),
}
_REVERSE = {1: 2, 2: 1, 3: 4, 4: 3}
_NEIGHBOURS = (
    MapPosition(0, 1),
    MapPosition(1, 0),
    MapPosition(0, -1),
    MapPosition(-1, 0),
)
_VIEW = 50
_SYMBOLS = {
    Field.WALL: "#",
    Field.EMPTY: ".",
    Field.OXYGEN: "O",
    Field.UNKNOWN: " ",
}


class Droid:
    """Explores the area on construction and then answers questions about it."""

    def __init__(self, program: Iterable[int]) -> None:
        self.computer = Computer(program)
        self.area: dict[MapPosition, Field] = {}
        self.position = _ORIGIN
        self.oxygen = _ORIGIN
        self.path: list[MapPosition] = []
        self._explore(3)

    def _field(self, pos: MapPosition) -> Field:
        return self.area.get(pos, Field.UNKNOWN)

    def _move(self, direction: int) -> bool:
        """Try one step; False if a wall blocked it or the program halted."""
        self.position = self.position + _MOVES[direction]
        self.computer.write_input([direction])
        while True:
            code = self.computer.run_instruction()
            if code is Intcode.HALT:
                return False
            if code is Intcode.OUTPUT:
                break

        status = self.computer.read_output()
        if status == 0:
            self.area[self.position] = Field.WALL
            self.position = self.position + _MOVES[_REVERSE[direction]]
            return False
        if status == 1:
            self.area[self.position] = Field.EMPTY
        elif status == 2:
            self.area[self.position] = Field.OXYGEN
        return True

    def _arrive(self) -> bool:
        """Note oxygen at the current cell; True once back at the origin."""
        if self._field(self.position) is Field.OXYGEN:
            self.oxygen = self.position
        return self.position == _ORIGIN

    def _explore(self, first: int) -> bool:
        """Depth-first exploration that stops on returning to the origin."""
        if not self._move(first):
            return False
        if self._arrive():
            return True

        stack = [[first, 1]]
        while stack:
            frame = stack[-1]
            came, candidate = frame
            if candidate > 4:
                stack.pop()
                self._move(_REVERSE[came])
                continue
            frame[1] += 1
            following = self.position + _MOVES[candidate]
            if self._field(following) is not Field.UNKNOWN:
                continue
            if not self._move(candidate):
                continue
            if self._arrive():
                return True
            stack.append([candidate, 1])
        return False

    def _passable(self, pos: MapPosition) -> bool:
        return self._field(pos) in (Field.EMPTY, Field.OXYGEN)

    def shortest_path(self) -> int:
        """Fewest steps from the starting point to the oxygen system."""
        parents: dict[MapPosition, MapPosition | None] = {_ORIGIN: None}
        queue = deque([_ORIGIN])
        while queue:
            current = queue.popleft()
            if current == self.oxygen:
                break
            for step in _NEIGHBOURS:
                following = current + step
                if following not in parents and self._passable(following):
                    parents[following] = current
                    queue.append(following)
        else:
            raise ValueError("the oxygen system cannot be reached")

        path: list[MapPosition] = []
        node: MapPosition | None = self.oxygen
        while node is not None:
            path.append(node)
            node = parents[node]
        self.path = path
        return len(path) - 1

    def fill_with_oxygen(self) -> int:
        """Minutes until oxygen has spread into every empty field."""
        frontier = [self.oxygen]
        minutes = 0
        while any(f is Field.EMPTY for f in self.area.values()):
            minutes += 1
            spread = []
            for cell in frontier:
                for step in _NEIGHBOURS:
                    neighbour = cell + step
                    if self._field(neighbour) is Field.EMPTY:
                        self.area[neighbour] = Field.OXYGEN
                        spread.append(neighbour)
            if not spread:
                raise ValueError("some empty fields cannot be reached by oxygen")
            frontier = spread
        self.path = []
        return minutes

    def render(self) -> str:
        """A 50 by 50 view centred on the start, with the last path marked X."""
        half = _VIEW // 2
        marked = set(self.path)
        rows = []
        for y in range(_VIEW):
            row = []
            for x in range(_VIEW):
                pos = MapPosition(x - half, y - half)
                if pos == self.position:
                    row.append("D")
                elif pos == self.oxygen:
                    row.append("O")
                elif pos in marked:
                    row.append("X")
                else:
                    row.append(_SYMBOLS[self._field(pos)])
            rows.append("".join(row) + "\n")
        return "".join(rows)