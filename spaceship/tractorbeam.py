"""Probing the tractor beam with drones."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from spaceship.computer import Computer

_SCAN_SIZE = 50
_SHIP = 100
_START_ROW = 1000


def _pulled(code: Sequence[int], x: int, y: int) -> int:
    computer = Computer(code)
    computer.write_input([x, y])
    computer.calculate()
    return computer.read_output()


def scan(program: Iterable[int]) -> int:
    """Number of points in the 50 by 50 area nearest the emitter in the beam."""
    code = list(program)
    return sum(_pulled(code, x, y)
               for x in range(_SCAN_SIZE) for y in range(_SCAN_SIZE))


def _beam_rows(code: Sequence[int]) -> list[tuple[int, int]]:
    """Start and end (exclusive) of the beam for every row from 1000 on."""
    rows = [(0, 0)] * _START_ROW
    first, last = 0, 100
    y = len(rows)
    while last - first < 200:
        line = [_pulled(code, x, y) for x in range(first, last + 10)]
        tail = line[::-1].index(1) if 1 in line else len(line)
        head = line.index(1) if 1 in line else len(line)
        last = first + len(line) - tail
        first = first + head
        rows.append((first, last))
        y += 1
    return rows


def minimum_distance(program: Iterable[int]) -> tuple[int, int]:
    """Top-left corner of the first 100 by 100 square inside the beam."""
    rows = _beam_rows(list(program))
    for row in range(len(rows) - _SHIP):
        first, last = rows[row]
        if last - first < _SHIP:
            continue
        if last - _SHIP == rows[row + _SHIP - 1][0]:
            return last - _SHIP, row
    return 0, 0