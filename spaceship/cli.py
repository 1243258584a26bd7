"""Command line front end that solves one puzzle from its input file."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from itertools import product
from pathlib import Path

from spaceship.amplifier import FeedbackLoop, max_thruster_signal
from spaceship.arcade import ArcadeCabinet
from spaceship.ascii import Ascii
from spaceship.asteroids import Asteroids
from spaceship.computer import Computer
from spaceship.droid import Droid
from spaceship import fft
from spaceship.fuel import NanoFactory, fuel_for_module
from spaceship.maze import Maze
from spaceship.motion import Motion
from spaceship.orbit import Orbit
from spaceship.password import is_valid_password
from spaceship.robot import Color, EmergencyHullPaintingRobot
from spaceship.spaceimage import SpaceImage
from spaceship.springdroid import SpringDroid
from spaceship import tractorbeam
from spaceship.vault import Vault
from spaceship import wires

_GRAVITY_ASSIST = 19690720
_ORE_IN_CARGO = 1000000000000

_WALK_SCRIPT = (
    "NOT A J", "NOT B T", "AND T J", "NOT C T", "AND T J",
    "AND D J", "NOT J T", "OR B T", "OR T J", "NOT C T",
    "AND T J", "AND D J", "NOT A T", "OR T J",
)
# (((!H & E) | !F | (!G & H)) & !C & D) | (!B & D) | !A
_RUN_SCRIPT = (
    "NOT H T", "AND E T", "NOT F J", "OR J T", "NOT G J",
    "AND H J", "OR J T", "NOT C J", "AND J T", "AND D T",
    "NOT B J", "AND D J", "OR J T", "NOT A J", "OR T J",
)


def _program(text: str) -> list[int]:
    return [int(token) for token in text.split(",") if token.strip()]


def _lines(text: str) -> list[str]:
    return text.splitlines()


def _run(program: list[int], inputs: list[int]) -> Computer:
    computer = Computer(program)
    computer.write_input(inputs)
    computer.calculate()
    return computer


def _solve1(text: str) -> None:
    fuel = sum(fuel_for_module(int(line)) for line in _lines(text)
               if line.strip())
    print(f"Required fuel: {fuel}")


def _solve2(text: str) -> None:
    program = _program(text)
    program[1], program[2] = 12, 2
    computer = _run(program, [])
    print(f"Result of puzzle 2a: {computer.memory[0]}")

    for noun, verb in product(range(100), repeat=2):
        program[1], program[2] = noun, verb
        if _run(program, []).memory[0] == _GRAVITY_ASSIST:
            print(f"Result of puzzle 2b: {100 * noun + verb}")
            return


def _solve3(text: str) -> None:
    lines = [*_lines(text), "", ""]
    wire_1 = wires.from_string(lines[0])
    wire_2 = wires.from_string(lines[1])
    locations = wires.intersects(wire_1, wire_2)
    print(f"Shortest distance to crossing: {wires.distances(locations)[0]}")
    steps = wires.minimal_signal_delay(wire_1, wire_2, locations)
    print(f"Minimal signal delay steps: {steps}")


def _solve4(text: str) -> None:
    lower, upper = (int(part) for part in text.split("-")[:2])
    valid = sum(1 for p in range(lower, upper + 1) if is_valid_password(p))
    print(f"Number of valid passwords: {valid}")


def _solve5(text: str) -> None:
    program = _program(text)
    computer = _run(program, [1])
    output = computer.read_output()
    while output == 0:
        output = computer.read_output()
    print(f"Result of puzzle 5a: {output}")
    print(f"Result of puzzle 5b: {_run(program, [5]).read_output()}")


def _solve6(text: str) -> None:
    orbits = Orbit()
    for entry in _lines(text):
        orbits.add_orbit(entry)
    print(f"Checksum: {orbits.checksum()}")
    transfer = orbits.minimum_orbital_transfer("YOU", "SAN")
    print(f"Minimum orbital transfer: {transfer}")


def _solve7(text: str) -> None:
    program = _program(text)
    print(f"Maximum thruster signal: {max_thruster_signal(program)}")
    loop = FeedbackLoop(program)
    print(f"Maximum output signal: {loop.max_output_signal()}")


def _solve8(text: str) -> None:
    image = SpaceImage.from_digital_sending_network(25, 6, text)
    print(f"Image checksum: {image.checksum()}")
    print(image.render(), end="")


def _solve9(text: str) -> None:
    program = _program(text)
    print(f"BOOST keycode: {_run(program, [1]).read_output()}")
    print(f"Coordinates of distress signal: {_run(program, [2]).read_output()}")


def _solve10(text: str) -> None:
    asteroids = Asteroids.from_text(text)
    visible, station = asteroids.most_visible()
    print(f"Maximum visible asteroids: {visible}")
    print(f"Coordinate: {station[0]},{station[1]}")
    x, y = asteroids.vaporized(station, 200)
    print(f"The 200th asteroid to be vaporized is at {x},{y}")


def _solve11(text: str) -> None:
    robot = EmergencyHullPaintingRobot(_program(text))
    print(robot.paint(Color.WHITE).render(), end="")


def _solve12(text: str) -> None:
    simulation = Motion()
    for line in _lines(text):
        if line.strip():
            simulation.add_moon(line)
    print(f"Number of iterations after time repeats: "
          f"{simulation.repeating_time()}")
    for _ in range(1000):
        simulation.timestep()
    print(f"Total energy in system after 1000 steps: "
          f"{simulation.total_energy()}")


def _solve13(text: str) -> None:
    program = _program(text)
    program[0] = 2
    ArcadeCabinet(program).play()


def _solve14(text: str) -> None:
    factory = NanoFactory()
    for line in _lines(text):
        if line.strip():
            factory.add_reaction(line)
    print(f"Amount of ORE needed to produce 1 FUEL: {factory.necessary_ore()}")
    print(f"Amount of FUEL that can be produced: "
          f"{factory.maximum_fuel(_ORE_IN_CARGO)}")


def _solve15(text: str) -> None:
    program = _program(text)
    droid = Droid(program)
    length = droid.shortest_path()
    print(droid.render(), end="")
    print(f"Shortest path length: {length}")

    droid = Droid(program)
    minutes = droid.fill_with_oxygen()
    print(droid.render(), end="")
    print(f"Time to fill everything with oxygen: {minutes}")


def _solve16(text: str) -> None:
    line = (_lines(text) or [""])[0]
    signal = fft.from_string(line, 1)
    for _ in range(100):
        signal = fft.output_signal(signal)
    digits = "".join(str(d) for d in signal[:8])
    print(f"The first eight digits are: {digits}")

    offset = int(line[:7])
    message = fft.output_message(fft.from_string(line, 10000), 100, offset)
    digits = "".join(str(d) for d in message)
    print(f"The first eight digits at position '{offset}' are: {digits}")


def _solve17(text: str) -> None:
    ascii_ = Ascii(_program(text))
    print(f"The sum of all crossings is: {ascii_.find_intersections()}")
    print("The shortest path for vacuuming: ")
    print(ascii_.shortest_path())
    print(f"The collected amount of dust: {ascii_.search_robots()}")


def _solve18(text: str) -> None:
    vault = Vault(text)
    print(f"The shortest path to all keys has {vault.collect_keys()} steps.")
    vault.deploy_robots()
    print(f"After deploying 4 robots, the shortest path has "
          f"{vault.collect_keys()} steps.")


def _solve19(text: str) -> None:
    program = _program(text)
    print(f"The number of affected points is: {tractorbeam.scan(program)}")
    x, y = tractorbeam.minimum_distance(program)
    print(f"The closest point to the emitter is ({x},{y}) -> {x * 10000 + y}")


def _solve20(text: str) -> None:
    maze = Maze(text)
    print(f"The shortest path is {maze.shortest_path()} steps.")
    print(f"The shortest recursive path is {maze.recursive_path()} steps.")


def _solve21(text: str) -> None:
    program = _program(text)
    droid = SpringDroid(program)
    damage = droid.walk(_WALK_SCRIPT)
    print(droid.report, end="")
    print(f"Reported hull damage: {damage}")

    droid = SpringDroid(program)
    damage = droid.run(_RUN_SCRIPT)
    print(droid.report, end="")
    print(f"Reported hull damage: {damage}")


_SOLVERS: dict[int, Callable[[str], None]] = {
    1: _solve1, 2: _solve2, 3: _solve3, 4: _solve4, 5: _solve5,
    6: _solve6, 7: _solve7, 8: _solve8, 9: _solve9, 10: _solve10,
    11: _solve11, 12: _solve12, 13: _solve13, 14: _solve14, 15: _solve15,
    16: _solve16, 17: _solve17, 18: _solve18, 19: _solve19, 20: _solve20,
    21: _solve21,
}


def _read_input(puzzle_id: int, input_file: str | None) -> str:
    path = (Path(input_file) if input_file
            else Path("..", "..", "input", f"{puzzle_id}.txt"))
    try:
        return path.read_text()
    except FileNotFoundError:
        raise FileNotFoundError(f"Input file not found: {path}") from None


def solve(puzzle_id: int, input_file: str | None = None) -> None:
    """Solve one puzzle and print its answers; unknown ids do nothing."""
    solver = _SOLVERS.get(puzzle_id)
    if solver is None:
        return
    solver(_read_input(puzzle_id, input_file))


class _OptionError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise _OptionError(message)


def _parser() -> _Parser:
    parser = _Parser(prog="puzzles",
                     description="Solve all puzzles of the 2019 Advent of Code",
                     add_help=False)
    parser.add_argument("-p", "--puzzle", type=int,
                        help="Which puzzle should be solved?")
    parser.add_argument("-i", "--input", help="Alternative input file")
    parser.add_argument("-h", "--help", action="store_true",
                        help="Print this help message")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse the command line and solve the chosen puzzle."""
    parser = _parser()
    try:
        args = parser.parse_args(argv)
    except _OptionError as exc:
        print(exc)
        return 0
    if args.help or args.puzzle is None:
        print(parser.format_help())
        return -1
    solve(args.puzzle, args.input)
    return 0