"""An arcade cabinet running a breakout game that plays itself."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import IntEnum

from spaceship.computer import Computer, Intcode

Position = tuple[int, int]


class Tile(IntEnum):
    """Tile ids drawn by the game."""

    EMPTY = 0
    WALL = 1
    BLOCK = 2
    PADDLE = 3
    BALL = 4


class ArcadeError(Exception):
    """Raised when the game program sends something the cabinet cannot show."""


_SYMBOLS = {
    Tile.EMPTY: " ",
    Tile.WALL: "W",
    Tile.BLOCK: "#",
    Tile.PADDLE: "-",
    Tile.BALL: "@",
}


@dataclass
class _GameState:
    paddle: Position = (0, 0)
    ball: Position = (0, 0)
    direction: Position = (0, -1)


def _tile(value: int) -> Tile:
    try:
        return Tile(value)
    except ValueError:
        raise ArcadeError(f"no known tile id {value}") from None


def _dimensions(screen: dict[Position, Tile]) -> tuple[int, int]:
    if not screen:
        return 0, 0
    xs = [x for x, _ in screen]
    ys = [y for _, y in screen]
    return max(xs) - min(xs) + 1, max(ys) - min(ys) + 1


def _render(screen: dict[Position, Tile], score: int) -> str:
    width, height = _dimensions(screen)
    rows = (
        "".join(_SYMBOLS[screen[(x, y)]] if (x, y) in screen else " "
                for x in range(width)) + "\n"
        for y in range(height)
    )
    return "".join(rows) + f"\n   SCORE   {score}\n"


def _predict_direction(screen: dict[Position, Tile], state: _GameState,
                       ball: Position) -> None:
    width, height = _dimensions(screen)

    def at(x: int, y: int) -> Tile:
        return screen.get((x, y), Tile.EMPTY)

    old_dx = state.direction[0]
    dx, dy = state.direction
    bx, by = ball
    if bx > state.ball[0]:
        dx = 1
    elif bx < state.ball[0]:
        dx = -1
    if by > state.ball[1]:
        dy = 1

    if bx == 1:
        dx = 1
    if bx == width - 2:
        dx = -1
    if by == 1:
        dy = 1
    if by == height - 3:
        dy = -1

    hit = at(bx + dx, by + dy)
    neighbour = at(bx + dx, by)
    above = at(bx, by + dy)
    if hit is Tile.BLOCK:
        if neighbour is Tile.EMPTY or above is Tile.BLOCK:
            dy = -dy
        if above is Tile.EMPTY or neighbour is Tile.BLOCK:
            dx = -old_dx
    elif neighbour is Tile.BLOCK:
        if above is Tile.BLOCK:
            dx = -old_dx
        elif at(bx - dx, by + dy) is Tile.BLOCK:
            if at(bx + dx, by - dy) is Tile.BLOCK:
                dx = -old_dx
        else:
            dx = -old_dx

    state.direction = (dx, dy)


def _show(text: str) -> None:
    print(text, end="")


class ArcadeCabinet:
    """Runs the game, steering the paddle towards where the ball is heading."""

    def __init__(self, program: Iterable[int],
                 display: Callable[[str], None] | None = None) -> None:
        self.computer = Computer(program)
        self.score = 0
        self.display = display if display is not None else _show

    def _next_output(self) -> int:
        while True:
            code = self.computer.run_instruction()
            if code is Intcode.HALT:
                raise ArcadeError("program halted in the middle of a message")
            if code is Intcode.OUTPUT:
                return self.computer.read_output()

    def _update_score(self) -> None:
        if self._next_output() != 0:
            raise ArcadeError("score segment must be at row zero")
        self.score = self._next_output()

    def _draw_tile(self, screen: dict[Position, Tile], state: _GameState,
                   x: int) -> None:
        y = self._next_output()
        tile = _tile(self._next_output())
        screen[(x, y)] = tile
        if tile is Tile.PADDLE:
            state.paddle = (x, y)
        elif tile is Tile.BALL:
            _predict_direction(screen, state, (x, y))
            state.ball = (x, y)

    def _move_joystick(self, state: _GameState) -> None:
        dx = state.direction[0]
        if state.paddle == state.ball:
            self.computer.write_input([dx])
        target = state.ball[0] + dx
        if state.paddle[0] < target:
            self.computer.write_input([1])
        elif state.paddle[0] > target:
            self.computer.write_input([-1])
        else:
            self.computer.write_input([dx])

    def play(self) -> int:
        """Play until the program halts and return the final score."""
        screen: dict[Position, Tile] = {}
        state = _GameState()
        self.computer.write_input([0])
        while True:
            code = self.computer.run_instruction()
            if code is Intcode.HALT:
                break
            if code is Intcode.INPUT:
                self._move_joystick(state)
                self.display(_render(screen, self.score))
            elif code is Intcode.OUTPUT:
                x = self.computer.read_output()
                if x == -1:
                    self._update_score()
                else:
                    self._draw_tile(screen, state, x)
        return self.score