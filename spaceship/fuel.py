"""Fuel requirements and the nanofactory reaction solver."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass


def fuel_calculation(mass: int) -> int:
    """Fuel needed for a mass, ignoring the mass of the fuel itself."""
    return mass // 3 - 2


def fuel_for_module(mass: int) -> int:
    """Fuel for a module including the fuel needed to carry that fuel."""
    fuel = 0
    while (mass := fuel_calculation(mass)) > 0:
        fuel += mass
    return fuel


@dataclass(frozen=True)
class Reaction:
    """A reaction turning input chemicals into an amount of one output."""

    inputs: tuple[tuple[str, int], ...]
    output: tuple[str, int]


class NanoFactory:
    """Computes how much ORE reactions need to produce FUEL."""

    def __init__(self) -> None:
        self.reactions: dict[str, Reaction] = {}

    def add_reaction(self, reaction: str) -> None:
        """Parse a line such as '7 A, 1 B => 1 C' and register it."""
        tokens = reaction.split(" ")
        inputs = tuple(
            (name.replace(",", ""), int(quantity))
            for quantity, name in zip(tokens[0:len(tokens) - 3:2],
                                      tokens[1:len(tokens) - 3:2])
        )
        output = (tokens[-1], int(tokens[-2]))
        self.reactions[output[0]] = Reaction(inputs, output)

    def _produce(self, name: str, needed: int, storage: dict[str, int]) -> int:
        reaction = self.reactions[name]
        if needed <= storage[name]:
            storage[name] -= needed
            return 0

        needed -= storage[name]
        storage[name] = 0
        batch = reaction.output[1]
        runs = (needed + batch - 1) // batch

        ore = 0
        for input_name, amount in reaction.inputs:
            if input_name == "ORE":
                ore += runs * amount
            else:
                ore += self._produce(input_name, amount * runs, storage)

        storage[name] = runs * batch - needed
        return ore

    def necessary_ore(self) -> int:
        """ORE needed to produce one FUEL."""
        return self._produce("FUEL", 1, defaultdict(int))

    def maximum_fuel(self, ore: int) -> int:
        """How many FUEL can be made from the given ORE, reusing leftovers."""
        storage: dict[str, int] = defaultdict(int)
        produced = 0
        while ore > 0:
            ore -= self._produce("FUEL", 1, storage)
            produced += 1
        return produced - 1