from spaceship.computer import Computer
from spaceship.tractorbeam import minimum_distance, scan

# pulled when x <= y
LOWER = [3, 20, 3, 21, 1001, 21, 1, 21, 7, 20, 21, 22, 4, 22, 99]
# the same program with x and y swapped: pulled when y <= x
UPPER = [3, 21, 3, 20, 1001, 21, 1, 21, 7, 20, 21, 22, 4, 22, 99]

# pulled when (y - 1000) / 2 <= x <= y - 900
SLANTED = [
    3, 35, 3, 36,
    1002, 35, 2, 37,
    1001, 37, 1001, 37,
    7, 36, 37, 40,
    1001, 35, 900, 38,
    1001, 36, 1, 39,
    7, 38, 39, 41,
    2, 40, 41, 42,
    4, 42,
    99,
    0, 0, 0, 0, 0, 0, 0, 0,
]


def pulled(program, x, y):
    computer = Computer(program)
    computer.write_input([x, y])
    computer.calculate()
    return computer.read_output()


def test_scan_everywhere_pulled():
    assert scan([104, 1, 99]) == 50 * 50


def test_scan_nowhere_pulled():
    assert scan([104, 0, 99]) == 0


def test_scan_is_symmetric_for_mirrored_beams():
    lower = scan(LOWER)
    assert lower == scan(UPPER)
    assert 0 < lower < 50 * 50


def test_minimum_distance_without_fitting_row():
    assert minimum_distance([104, 1, 99]) == (0, 0)


def test_minimum_distance_square_fits_in_beam():
    x, y = minimum_distance(SLANTED)
    assert y >= 1000
    assert pulled(SLANTED, x, y) == 1
    assert pulled(SLANTED, x + 99, y) == 1
    assert pulled(SLANTED, x, y + 99) == 1
    assert pulled(SLANTED, x + 100, y) == 0