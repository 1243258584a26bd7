import pytest

from spaceship.cli import main, solve
from spaceship.fuel import fuel_for_module
from spaceship.maze import Maze
from spaceship.motion import Motion
from spaceship.orbit import Orbit
from spaceship.password import is_valid_password
from spaceship.spaceimage import SpaceImage
from spaceship.vault import Vault


def _write(tmp_path, text):
    path = tmp_path / "input.txt"
    path.write_text(text)
    return str(path)


def _run(tmp_path, capsys, puzzle, text):
    solve(puzzle, _write(tmp_path, text))
    return capsys.readouterr().out


def test_puzzle_1(tmp_path, capsys):
    masses = [12, 14, 1969, 100756]
    out = _run(tmp_path, capsys, 1, "".join(f"{m}\n" for m in masses))
    expected = sum(fuel_for_module(m) for m in masses)
    assert out == f"Required fuel: {expected}\n"


def test_puzzle_2(tmp_path, capsys):
    out = _run(tmp_path, capsys, 2, "1,0,0,0,99,0,0,0,0,0,0,0,19690718\n")
    assert out == ("Result of puzzle 2a: 19690720\n"
                   "Result of puzzle 2b: 1202\n")


def test_puzzle_3(tmp_path, capsys):
    out = _run(tmp_path, capsys, 3, "R8,U5,L5,D3\nU7,R6,D4,L4\n")
    assert out == ("Shortest distance to crossing: 6\n"
                   "Minimal signal delay steps: 30\n")


def test_puzzle_4(tmp_path, capsys):
    out = _run(tmp_path, capsys, 4, "111110-111125\n")
    expected = sum(1 for p in range(111110, 111126) if is_valid_password(p))
    assert out == f"Number of valid passwords: {expected}\n"


def test_puzzle_5(tmp_path, capsys):
    out = _run(tmp_path, capsys, 5, "3,0,4,0,99\n")
    assert out == "Result of puzzle 5a: 1\nResult of puzzle 5b: 5\n"


def test_puzzle_6(tmp_path, capsys):
    entries = ["COM)B", "B)C", "C)D", "D)E", "E)F", "B)G", "G)H",
               "D)I", "E)J", "J)K", "K)L", "K)YOU", "I)SAN"]
    out = _run(tmp_path, capsys, 6, "\n".join(entries) + "\n")
    orbits = Orbit()
    for entry in entries:
        orbits.add_orbit(entry)
    assert out == (f"Checksum: {orbits.checksum()}\n"
                   "Minimum orbital transfer: 4\n")


def test_puzzle_8(tmp_path, capsys):
    data = "0" * 150 + "1" * 75 + "2" * 75
    out = _run(tmp_path, capsys, 8, data + "\n")
    image = SpaceImage.from_digital_sending_network(25, 6, data)
    assert out == f"Image checksum: {image.checksum()}\n" + image.render()


def test_puzzle_9(tmp_path, capsys):
    out = _run(tmp_path, capsys, 9, "3,0,4,0,99\n")
    assert out == "BOOST keycode: 1\nCoordinates of distress signal: 2\n"


BIG_FIELD = (
    ".#..##.###...#######\n"
    "##.############..##.\n"
    ".#.######.########.#\n"
    ".###.#######.####.#.\n"
    "#####.##.#.##.###.##\n"
    "..#####..#.#########\n"
    "####################\n"
    "#.####....###.#.#.##\n"
    "##.#################\n"
    "#####.##.###..####..\n"
    "..######..##.#######\n"
    "####.##.####...##..#\n"
    ".#####..#.######.###\n"
    "##...#.##########...\n"
    "#.##########.#######\n"
    ".####.#.###.###.#.##\n"
    "....##.##.###..#####\n"
    ".#.#.###########.###\n"
    "#.#.#.#####.####.###\n"
    "###.##.####.##.#..##\n"
)


def test_puzzle_10(tmp_path, capsys):
    out = _run(tmp_path, capsys, 10, BIG_FIELD)
    assert out == ("Maximum visible asteroids: 210\n"
                   "Coordinate: 11,13\n"
                   "The 200th asteroid to be vaporized is at 8,2\n")


def test_puzzle_12(tmp_path, capsys):
    moons = ["<x=-1, y=0, z=2>", "<x=2, y=-10, z=-7>",
             "<x=4, y=-8, z=8>", "<x=3, y=5, z=-1>"]
    out = _run(tmp_path, capsys, 12, "\n".join(moons) + "\n")
    simulation = Motion()
    for moon in moons:
        simulation.add_moon(moon)
    for _ in range(1000):
        simulation.timestep()
    assert out == ("Number of iterations after time repeats: 2772\n"
                   "Total energy in system after 1000 steps: "
                   f"{simulation.total_energy()}\n")


def test_puzzle_16_message(tmp_path, capsys):
    out = _run(tmp_path, capsys, 16, "03036732577212944063491565474664\n")
    lines = out.splitlines()
    assert lines[1] == "The first eight digits at position '303673' are: 84462026"
    assert lines[0].startswith("The first eight digits are: ")


def test_puzzle_18(tmp_path, capsys):
    text = ("#######\n"
            "#a.#Cd#\n"
            "##...##\n"
            "##.@.##\n"
            "##...##\n"
            "#cB#Ab#\n"
            "#######\n")
    out = _run(tmp_path, capsys, 18, text)
    single = Vault(text).collect_keys()
    assert out == (f"The shortest path to all keys has {single} steps.\n"
                   "After deploying 4 robots, the shortest path has 8 steps.\n")


MAZE = (
    "         A           \n"
    "         A           \n"
    "  #######.#########  \n"
    "  #######.........#  \n"
    "  #######.#######.#  \n"
    "  #######.#######.#  \n"
    "  #######.#######.#  \n"
    "  #####  B    ###.#  \n"
    "BC...##  C    ###.#  \n"
    "  ##.##       ###.#  \n"
    "  ##...DE  F  ###.#  \n"
    "  #####    G  ###.#  \n"
    "  #########.#####.#  \n"
    "DE..#######...###.#  \n"
    "  #.#########.###.#  \n"
    "FG..#########.....#  \n"
    "  ###########.#####  \n"
    "             Z       \n"
    "             Z       \n"
)


def test_puzzle_20(tmp_path, capsys):
    out = _run(tmp_path, capsys, 20, MAZE)
    recursive = Maze(MAZE).recursive_path()
    assert out == ("The shortest path is 23 steps.\n"
                   f"The shortest recursive path is {recursive} steps.\n")


def test_puzzle_19(tmp_path, capsys):
    out = _run(tmp_path, capsys, 19, "104,1,99\n")
    assert out.splitlines()[0] == "The number of affected points is: 2500"


def test_puzzle_21(tmp_path, capsys):
    out = _run(tmp_path, capsys, 21, "104,10,104,2000,99\n")
    assert out == ("\nReported hull damage: 2000\n"
                   "\nReported hull damage: 2000\n")


def test_unknown_puzzle_prints_nothing(tmp_path, capsys):
    solve(99, str(tmp_path / "missing.txt"))
    assert capsys.readouterr().out == ""


def test_missing_input_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        solve(1, str(tmp_path / "missing.txt"))


def test_main_without_puzzle_prints_help(capsys):
    assert main([]) == -1
    assert "--puzzle" in capsys.readouterr().out


def test_main_help_flag(capsys):
    assert main(["-p", "1", "-h"]) == -1
    assert "--input" in capsys.readouterr().out


def test_main_reports_bad_option(capsys):
    assert main(["-p", "x"]) == 0
    assert "puzzle" in capsys.readouterr().out


def test_main_solves_with_input_file(tmp_path, capsys):
    path = _write(tmp_path, "3,0,4,0,99\n")
    assert main(["--puzzle", "9", "--input", path]) == 0
    assert capsys.readouterr().out.startswith("BOOST keycode: 1\n")