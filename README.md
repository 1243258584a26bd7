# spaceship

Solvers for 21 spaceship-themed programming puzzles. Most of them run on a
small virtual machine, the Intcode computer. The rest deal with grid mazes,
orbit maps, wires, layered images, moons and chemical reactions. The package
uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
spaceship --puzzle 7
spaceship -p 16 -i path/to/input.txt
```

- `-p/--puzzle` chooses a puzzle from 1 to 21. Any other number does
  nothing.
- `-i/--input` names the input file. Without it, the command reads
  `../../input/<puzzle>.txt`, relative to the current directory.
- `-h/--help` prints the help.

If no puzzle is given, the command prints the help and exits with status -1.
If an option cannot be parsed, the command prints the error message. The
answers go to standard output. Puzzle 13 plays its game and prints every
frame of the screen. Puzzles 8 and 11 print the image they decode.

The same work can be done from Python with `spaceship.cli.solve(puzzle_id,
input_file=None)`. `spaceship.cli.main(argv=None)` is the function behind
the command.

## Library use

```python
from spaceship.computer import Computer

computer = Computer([3, 0, 4, 0, 99])
computer.write_input([42])
computer.calculate()
print(computer.read_output())  # 42
```

`Computer` has input and output queues (`write_input`, `read_input`,
`write_output`, `read_output`, `has_output`). `calculate` runs the program
until it halts. `run_instruction` runs one instruction and returns its
`Intcode` opcode. It raises `IntcodeError` when it meets an unknown opcode.
Reading an empty queue, or an address outside memory, raises `IndexError`.

Each of the other modules covers one puzzle:

| Module | What it offers |
| --- | --- |
| `spaceship.password` | `is_valid_password` |
| `spaceship.fuel` | `fuel_calculation`, `fuel_for_module`, `NanoFactory` (`add_reaction`, `necessary_ore`, `maximum_fuel`) |
| `spaceship.wires` | `from_string`, `intersects`, `distances`, `minimal_signal_delay` |
| `spaceship.orbit` | `Orbit` (`add_orbit`, `checksum`, `minimum_orbital_transfer`) |
| `spaceship.amplifier` | `max_thruster_signal`, `FeedbackLoop.max_output_signal` |
| `spaceship.spaceimage` | `SpaceImage` (`from_digital_sending_network`, `final_image`, `checksum`, `render`) |
| `spaceship.robot` | `EmergencyHullPaintingRobot.paint`, `Color` |
| `spaceship.fft` | `from_string`, `output_signal`, `output_message` |
| `spaceship.motion` | `Motion` (`add_moon`, `timestep`, `total_energy`, `repeating_time`, `render`), `Vector` |
| `spaceship.gridmap` | `Map` (`from_text`, `shortest_path`, `find`, `render`), `MapPosition` |
| `spaceship.maze` | `Maze` (`shortest_path`, `recursive_path`) |
| `spaceship.vault` | `Vault` (`collect_keys`, `deploy_robots`) |
| `spaceship.asteroids` | `Asteroids` (`from_text`, `most_visible`, `vaporized`, `render`) |
| `spaceship.droid` | `Droid` (`shortest_path`, `fill_with_oxygen`, `render`), `Field` |
| `spaceship.arcade` | `ArcadeCabinet.play`, which returns the final score |
| `spaceship.springdroid` | `SpringDroid` (`walk`, `run`, and the printed text in `report`) |
| `spaceship.tractorbeam` | `scan`, `minimum_distance` |
| `spaceship.ascii` | `Ascii` (`find_intersections`, `shortest_path`, `search_robots`) |

The `render` methods return text and print nothing. `ArcadeCabinet` takes an
optional `display` callable that receives each frame. When none is given, it
prints the frames.

This example does not need the Intcode computer:

```python
from spaceship.orbit import Orbit

orbit = Orbit()
for entry in ["COM)B", "B)C", "C)D"]:
    orbit.add_orbit(entry)
print(orbit.checksum())  # 6
```

## What the package does not do

- No puzzle inputs are included. Each puzzle needs its own input file.
- Some answers are fixed in the code:
  - `Ascii.search_robots` sends one fixed movement routine.
  - The springscript programs used by puzzle 21 live in the command line
    module.
- There is no interactive mode. The arcade game plays itself and does not
  read the keyboard.