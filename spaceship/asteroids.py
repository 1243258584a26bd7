"""Asteroid fields: line of sight and the order of a rotating laser."""

from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Iterable

Coordinates = tuple[int, int]


def _polar(asteroids: Iterable[Coordinates],
           centre: Coordinates) -> dict[float, list[tuple[float, Coordinates]]]:
    """Asteroids grouped by clockwise angle from up, each group nearest first."""
    lines: dict[float, set[tuple[float, Coordinates]]] = defaultdict(set)
    for candidate in asteroids:
        if candidate == centre:
            continue
        dx = candidate[0] - centre[0]
        dy = candidate[1] - centre[1]
        phi = math.atan2(dx, -dy)
        if phi < 0.0:
            phi += 2.0 * math.pi
        lines[phi].add((math.sqrt(dx * dx + dy * dy), candidate))
    return {phi: sorted(lines[phi]) for phi in sorted(lines)}


class Asteroids:
    """A rectangular map holding asteroids at integer coordinates."""

    def __init__(self, asteroids: Iterable[Coordinates], width: int,
                 height: int) -> None:
        self.asteroids = set(asteroids)
        self.width = width
        self.height = height

    @classmethod
    def from_text(cls, text: str) -> Asteroids:
        """Read a map where '#' marks an asteroid."""
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        found = {(x, y) for y, line in enumerate(lines)
                 for x, c in enumerate(line) if c == "#"}
        width = len(lines[-1]) if lines else 0
        return cls(found, width, len(lines))

    def most_visible(self) -> tuple[int, Coordinates]:
        """The best station: how many asteroids it sees, and where it is."""
        if not self.asteroids:
            raise ValueError("map holds no asteroids")
        return max((len(_polar(self.asteroids, c)), c) for c in self.asteroids)

    def vaporized(self, station: Coordinates, shot: int) -> Coordinates:
        """Where the laser at station hits with its shot-th shot."""
        lines = list(_polar(self.asteroids, station).values())
        if not lines:
            raise ValueError("nothing to vaporize")
        index = 0
        for _ in range(shot - 1):
            if len(lines[index]) == 1:
                del lines[index]
            else:
                index += 1
            if index == len(lines):
                index = 0
        if not lines:
            raise ValueError("every asteroid was vaporized before that shot")
        return lines[index][0][1]

    def render(self) -> str:
        """The map as text with '#' for asteroids and '.' for empty space."""
        return "".join(
            "".join("#" if (x, y) in self.asteroids else "."
                    for x in range(self.width)) + "\n"
            for y in range(self.height)
        )