"""N-body simulation of moons under pairwise axis-aligned gravity."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import NamedTuple

_NUMBER = re.compile(r"-?\d+")


@dataclass(frozen=True)
class Vector:
    """A three-dimensional integer vector."""

    x: int
    y: int
    z: int

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __mul__(self, other: Vector) -> Vector:
        return Vector(self.x * other.x, self.y * other.y, self.z * other.z)

    def __iter__(self):
        return iter((self.x, self.y, self.z))


class _Moon(NamedTuple):
    position: Vector
    velocity: Vector


def _pull(left: int, right: int) -> int:
    return (left < right) - (left > right)


def _energy(vector: Vector) -> int:
    return sum(abs(component) for component in vector)


def _axis_period(positions: list[int], velocities: list[int]) -> int:
    start = (tuple(positions), tuple(velocities))
    pos = list(positions)
    vel = list(velocities)
    step = 0
    while True:
        vel = [v + sum(_pull(p, other) for other in pos)
               for p, v in zip(pos, vel)]
        pos = [p + v for p, v in zip(pos, vel)]
        step += 1
        if (tuple(pos), tuple(vel)) == start:
            return step


class Motion:
    """A system of moons that attract each other along every axis."""

    def __init__(self) -> None:
        self.moons: list[_Moon] = []

    def add_moon(self, moon: str) -> None:
        """Add a resting moon from text such as '<x=-1, y=0, z=2>'."""
        numbers = _NUMBER.findall(moon)
        if len(numbers) < 3:
            raise ValueError(f"cannot read a position from {moon!r}")
        x, y, z = (int(n) for n in numbers[:3])
        self.moons.append(_Moon(Vector(x, y, z), Vector(0, 0, 0)))

    def timestep(self) -> None:
        """Apply gravity to every velocity, then move every moon."""
        moved = []
        for moon in self.moons:
            p = moon.position
            pull = Vector(
                sum(_pull(p.x, o.position.x) for o in self.moons),
                sum(_pull(p.y, o.position.y) for o in self.moons),
                sum(_pull(p.z, o.position.z) for o in self.moons),
            )
            velocity = moon.velocity + pull
            moved.append(_Moon(p + velocity, velocity))
        self.moons = moved

    def total_energy(self) -> int:
        """Sum over moons of potential times kinetic energy."""
        return sum(_energy(m.position) * _energy(m.velocity) for m in self.moons)

    def repeating_time(self) -> int:
        """Steps until the system first returns to its current state.

        The simulation itself is left unchanged.
        """
        periods = []
        for axis in range(3):
            positions = [list(m.position)[axis] for m in self.moons]
            velocities = [list(m.velocity)[axis] for m in self.moons]
            periods.append(_axis_period(positions, velocities))
        return math.lcm(*periods)

    def render(self) -> str:
        """Positions and velocities of all moons, one line each."""
        return "".join(
            f"pos=<x={p.x:3d}, y={p.y:3d}, z={p.z:3d}>, "
            f"vel=<x={v.x:3d}, y={v.y:3d}, z={v.z:3d}>\n"
            for p, v in self.moons
        )