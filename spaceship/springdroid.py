"""Springdroids programmed with springscript to survey the hull."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from spaceship.computer import Computer


def _encode(lines: Iterable[str]) -> Iterator[int]:
    for line in lines:
        yield from (ord(c) for c in line)
        yield ord("\n")


class SpringDroid:
    """Runs springscript programs and reports hull damage.

    The ASCII text the droid prints before any damage value is kept in
    ``report``.
    """

    def __init__(self, program: Iterable[int]) -> None:
        self.program = list(program)
        self.report = ""

    def _execute(self, script: Sequence[str], command: str) -> int:
        computer = Computer(self.program)
        computer.write_input(_encode([*script, command]))
        computer.calculate()

        text = []
        damage = 0
        while computer.has_output():
            value = computer.read_output()
            if value < 128:
                text.append(chr(value & 0xFF))
            else:
                damage = value
                break
        self.report = "".join(text)
        return damage

    def walk(self, script: Sequence[str]) -> int:
        """Run the script in WALK mode; 0 if no damage was reported."""
        return self._execute(script, "WALK")

    def run(self, script: Sequence[str]) -> int:
        """Run the script in RUN mode; 0 if no damage was reported."""
        return self._execute(script, "RUN")