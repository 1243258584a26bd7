"""Chains of Intcode amplifiers, in series and in a feedback loop."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import permutations

from spaceship.computer import Computer, Intcode


def _chain_signal(phases: Sequence[int], program: Sequence[int]) -> int:
    signal = 0
    for phase in phases:
        amplifier = Computer(program)
        amplifier.write_input([phase, signal])
        amplifier.calculate()
        signal = amplifier.read_output()
    return signal


def max_thruster_signal(program: Iterable[int]) -> int:
    """Highest signal over all orderings of the phase settings 0 to 4."""
    code = list(program)
    return max([0, *(_chain_signal(p, code) for p in permutations(range(5)))])


def _run_until_output(computer: Computer) -> Intcode:
    while True:
        code = computer.run_instruction()
        if code in (Intcode.OUTPUT, Intcode.HALT):
            return code


class FeedbackLoop:
    """Five amplifiers whose last output feeds back into the first."""

    def __init__(self, program: Iterable[int]) -> None:
        self.program = list(program)

    def _output_signal(self, phases: Sequence[int]) -> int:
        amplifiers = []
        for phase in phases:
            computer = Computer(self.program)
            computer.write_input([phase])
            amplifiers.append(computer)
        amplifiers[0].write_input([0])

        current = 0
        last_output = 0
        last_code = Intcode.INPUT
        while not (current == 0 and last_code is Intcode.HALT):
            last_code = _run_until_output(amplifiers[current])
            following = (current + 1) % len(amplifiers)
            if last_code is Intcode.OUTPUT:
                last_output = amplifiers[current].read_output()
                amplifiers[following].write_input([last_output])
            current = following
        return last_output

    def max_output_signal(self) -> int:
        """Highest signal over all orderings of the phase settings 5 to 9."""
        signals = (self._output_signal(p) for p in permutations(range(5, 10)))
        return max([0, *signals])