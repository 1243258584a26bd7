"""Aft scaffolding control: reading the camera and steering the vacuum robot."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence

from spaceship.computer import Computer
from spaceship.gridmap import MapPosition

Segment = tuple[str, int]
Path = tuple[Segment, ...]
Image = dict[MapPosition, str]

SCAFFOLD = "#"
ROBOT = "^"

_LEFT = {
    MapPosition(0, 1): MapPosition(1, 0),
    MapPosition(1, 0): MapPosition(0, -1),
    MapPosition(0, -1): MapPosition(-1, 0),
    MapPosition(-1, 0): MapPosition(0, 1),
}
_RIGHT = {turned: original for original, turned in _LEFT.items()}
_NEIGHBOURS = (
    MapPosition(0, 0),
    MapPosition(-1, 0),
    MapPosition(0, -1),
    MapPosition(1, 0),
    MapPosition(0, 1),
)

_MAIN_ROUTINE = "A,A,B,C,A,C,B,C,A,B"
_FUNCTIONS = ("L,4,L,10,L,6", "L,6,L,4,R,8,R,8", "L,6,R,8,L,10,L,8,L,8")
_VIDEO_FEED = "n"


def _left(heading: MapPosition) -> MapPosition:
    return _LEFT.get(heading, heading)


def _right(heading: MapPosition) -> MapPosition:
    return _RIGHT.get(heading, heading)


def _reverse(heading: MapPosition) -> MapPosition:
    return MapPosition(-heading.x, -heading.y)


def _encode(lines: Iterable[str]) -> Iterator[int]:
    for line in lines:
        yield from (ord(c) for c in line)
        yield ord("\n")


def _camera_image(program: Sequence[int]) -> Image:
    """Pixels reported by the camera, newlines included, in reading order."""
    computer = Computer(program)
    computer.calculate()
    image: Image = {}
    x = y = 0
    while computer.has_output():
        pixel = chr(computer.read_output() & 0xFF)
        image[MapPosition(x, y)] = pixel
        x += 1
        if pixel == "\n":
            x = 0
            y += 1
    return image


def _is_scaffold(image: Mapping[MapPosition, str], pos: MapPosition) -> bool:
    return image.get(pos) == SCAFFOLD


def _crossings(image: Mapping[MapPosition, str]) -> list[MapPosition]:
    return [
        pos for pos in image
        if all(_is_scaffold(image, pos + step) for step in _NEIGHBOURS)
    ]


def _robot(image: Mapping[MapPosition, str]) -> MapPosition:
    for pos, pixel in image.items():
        if pixel == ROBOT:
            return pos
    raise ValueError("the camera image shows no robot")


def _explore(image: Mapping[MapPosition, str],
             crossings: frozenset[MapPosition],
             visited: frozenset[tuple[MapPosition, MapPosition]],
             start: MapPosition, offset: MapPosition, turn: str, count: int,
             path: Path) -> Iterator[Path]:
    """Every route along the scaffold that ends in a dead end."""
    current = start + offset
    heading, heading_turn = offset, turn
    while current not in crossings:
        if _is_scaffold(image, current + heading):
            count += 1
            current = current + heading
        elif _is_scaffold(image, current + _left(heading)):
            path = (*path, (heading_turn, count))
            count = 0
            heading, heading_turn = _left(heading), "L"
        elif _is_scaffold(image, current + _right(heading)):
            path = (*path, (heading_turn, count))
            count = 0
            heading, heading_turn = _right(heading), "R"
        else:
            yield (*path, (heading_turn, count + 1))
            return

    path = (*path, (heading_turn, count))
    visited = visited | {(start, offset), (start, _reverse(offset))}

    if (current, _left(heading)) not in visited:
        yield from _explore(image, crossings, visited, current,
                            _left(heading), "L", 1, path)
    if (current, _right(heading)) not in visited:
        yield from _explore(image, crossings, visited, current,
                            _right(heading), "R", 1, path)
    if (current, heading) not in visited:
        yield from _explore(image, crossings, visited, current, heading,
                            heading_turn, count + 1, path[:-1])


def _covers_scaffold(image: Mapping[MapPosition, str], start: MapPosition,
                     path: Path) -> bool:
    """Whether following path from start passes over every scaffold pixel."""
    marked = dict(image)
    position = start
    heading = MapPosition(0, -1)
    for turn, length in path:
        if turn == "L":
            heading = _left(heading)
        elif turn == "R":
            heading = _right(heading)
        else:
            raise ValueError(f"unknown turn {turn!r}")
        for _ in range(length):
            marked[position] = "T"
            position = position + heading
    return SCAFFOLD not in marked.values()


def _format(path: Path) -> str:
    return ",".join(f"{turn},{count}" for turn, count in path)


class Ascii:
    """The ASCII program that runs the camera and the vacuum robot."""

    def __init__(self, program: Iterable[int]) -> None:
        self.program = list(program)

    def find_intersections(self) -> int:
        """Sum of the alignment parameters of all scaffold crossings."""
        image = _camera_image(self.program)
        return sum(pos.x * pos.y for pos in _crossings(image))

    def shortest_path(self) -> str:
        """The shortest route covering the whole scaffold, as 'L,4,R,2'."""
        image = _camera_image(self.program)
        start = _robot(image)
        crossings = frozenset(_crossings(image))
        routes = _explore(image, crossings, frozenset(), start,
                          MapPosition(-1, 0), "L", 1, ())
        valid = sorted((p for p in routes if _covers_scaffold(image, start, p)),
                       key=len)
        if not valid:
            raise ValueError("no route covers the whole scaffold")
        return _format(valid[0])

    def search_robots(self) -> int:
        """Wake the robot, send it along its route and return the last output."""
        movement = list(self.program)
        movement[0] = 2
        computer = Computer(movement)
        computer.write_input(
            _encode([_MAIN_ROUTINE, *_FUNCTIONS, _VIDEO_FEED]))
        computer.calculate()
        output = computer.read_output()
        while computer.has_output():
            output = computer.read_output()
        return output