"""Tracing wires on a grid and finding where they cross."""

from __future__ import annotations

from collections import Counter

Location = tuple[int, int]

_STEPS = {"R": (1, 0), "L": (-1, 0), "U": (0, 1), "D": (0, -1)}


def from_string(wire: str) -> list[Location]:
    """Every grid point a wire visits, starting at the origin."""
    path: list[Location] = [(0, 0)]
    for token in wire.split(","):
        if not token:
            continue
        length = int(token[1:])
        step = _STEPS.get(token[0])
        if step is None:
            continue
        x, y = path[-1]
        dx, dy = step
        path.extend((x + i * dx, y + i * dy) for i in range(1, length + 1))
    return path


def intersects(path1: list[Location], path2: list[Location]) -> list[Location]:
    """Sorted points common to both paths, repeated as often as in both."""
    common = Counter(path1) & Counter(path2)
    return sorted(common.elements())


def distances(crossings: list[Location]) -> list[int]:
    """Sorted non-zero Manhattan distances of the crossings from the origin."""
    return sorted(
        d for d in (abs(x) + abs(y) for x, y in crossings) if d > 0
    )


def minimal_signal_delay(
    path1: list[Location], path2: list[Location], crossings: list[Location]
) -> int:
    """Fewest combined steps along both wires to reach a crossing."""
    totals = [
        total
        for total in (path1.index(c) + path2.index(c) for c in crossings)
        if total > 0
    ]
    if not totals:
        raise ValueError("no crossing away from the origin")
    return min(totals)