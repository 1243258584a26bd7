"""Orbit maps: counting direct and indirect orbits and orbital transfers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class _Body:
    name: str
    orbiters: list[_Body] = field(default_factory=list)


def _length(name: str, orbiters: Iterable[_Body]) -> int:
    """Steps from the centre of orbiters down to name, or 0 if unreachable."""
    for body in orbiters:
        if body.name == name:
            return 1
        depth = _length(name, body.orbiters)
        if depth > 0:
            return depth + 1
    return 0


class Orbit:
    """A map of which objects orbit which."""

    def __init__(self) -> None:
        self.objects: dict[str, _Body] = {}

    def add_object(self, name: str) -> None:
        """Register an object unless it is already known."""
        if name not in self.objects:
            self.objects[name] = _Body(name)

    def add_orbit(self, map_entry: str) -> None:
        """Add an entry such as 'COM)B'; empty entries are ignored."""
        if not map_entry:
            return
        parts = map_entry.split(")")
        if len(parts) < 2:
            raise ValueError(f"malformed orbit entry: {map_entry!r}")
        center, orbiter = parts[0], parts[1]
        self.add_object(center)
        self.add_object(orbiter)
        self.objects[center].orbiters.append(self.objects[orbiter])

    def _find_path(self, start: str, name: str) -> int:
        if start == name or name not in self.objects:
            return 0
        if start not in self.objects:
            raise KeyError(f"unknown object {start!r}")
        return _length(name, self.objects[start].orbiters)

    def checksum(self) -> int:
        """Total number of direct and indirect orbits below COM."""
        return sum(self._find_path("COM", name) for name in self.objects)

    def minimum_orbital_transfer(self, start: str, target: str) -> int:
        """Fewest transfers to move from start's centre to target's centre."""
        best: int | None = None
        for name in self.objects:
            to_start = self._find_path(name, start)
            if to_start == 0:
                continue
            to_target = self._find_path(name, target)
            if to_target == 0:
                continue
            total = to_start - 1 + to_target - 1
            if best is None or total < best:
                best = total
        if best is None:
            raise ValueError(f"{start!r} and {target!r} share no common centre")
        return best