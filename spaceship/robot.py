"""The emergency hull painting robot driven by an Intcode program."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, IntEnum

from spaceship.computer import Computer, Intcode
from spaceship.spaceimage import SpaceImage


class Color(IntEnum):
    """Colour of a hull panel."""

    BLACK = 0
    WHITE = 1


class _Heading(Enum):
    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


_TURN_RIGHT = {
    _Heading.UP: _Heading.RIGHT,
    _Heading.DOWN: _Heading.LEFT,
    _Heading.RIGHT: _Heading.DOWN,
    _Heading.LEFT: _Heading.UP,
}
_TURN_LEFT = {
    _Heading.UP: _Heading.LEFT,
    _Heading.DOWN: _Heading.RIGHT,
    _Heading.RIGHT: _Heading.UP,
    _Heading.LEFT: _Heading.DOWN,
}


def _next_output(computer: Computer) -> int | None:
    while True:
        code = computer.run_instruction()
        if code is Intcode.HALT:
            return None
        if code is Intcode.OUTPUT:
            return computer.read_output()


class EmergencyHullPaintingRobot:
    """Paints hull panels as its program instructs."""

    def __init__(self, program: Iterable[int]) -> None:
        self.computer = Computer(program)

    def _fill(self, start_color: Color) -> dict[tuple[int, int], Color]:
        surface: dict[tuple[int, int], Color] = {}
        position = (0, 0)
        heading = _Heading.UP
        surface[position] = start_color
        while True:
            color = surface.get(position, Color.BLACK)
            self.computer.write_input([int(color is Color.WHITE)])

            paint = _next_output(self.computer)
            if paint is None:
                break
            surface[position] = Color.BLACK if paint == 0 else Color.WHITE

            turn = _next_output(self.computer)
            if turn is None:
                break
            heading = (_TURN_LEFT if turn == 0 else _TURN_RIGHT)[heading]
            dx, dy = heading.value
            position = (position[0] + dx, position[1] + dy)
        return surface

    def paint(self, start_color: Color) -> SpaceImage:
        """Run the program from a panel of start_color and image the hull."""
        surface = self._fill(start_color)
        xs = [x for x, _ in surface]
        ys = [y for _, y in surface]
        width = max(xs) - min(xs) + 1
        height = max(ys) - min(ys) + 1

        data = [0] * (width * height)
        for (x, y), color in surface.items():
            data[abs(y) * width + abs(x)] = int(color is Color.WHITE)
        return SpaceImage(width, height, data)