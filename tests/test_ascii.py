import pytest

from spaceship.ascii import Ascii


def _printing(text):
    program = []
    for c in text:
        program += [104, ord(c)]
    program.append(99)
    return program


EXAMPLE = (
    "..#..........\n"
    "..#..........\n"
    "#######...###\n"
    "#.#...#...#.#\n"
    "#############\n"
    "..#...#...#..\n"
    "..#####...^..\n"
)


def test_alignment_parameters_of_example():
    assert Ascii(_printing(EXAMPLE)).find_intersections() == 76


def test_no_crossings_gives_zero():
    assert Ascii(_printing("#....\n####^\n")).find_intersections() == 0


def test_robot_pixel_is_not_scaffold():
    assert Ascii(_printing(".#.\n#^#\n.#.\n")).find_intersections() == 0


def test_single_crossing_sum():
    assert Ascii(_printing(".#.\n###\n.#.\n")).find_intersections() == 1


def test_shortest_path_of_bent_scaffold():
    ascii_ = Ascii(_printing("#....\n####^\n"))
    assert ascii_.shortest_path() == "L,4,R,2"


def test_shortest_path_requires_full_coverage():
    ascii_ = Ascii(_printing("#....\n####^\n.....\n..#..\n"))
    with pytest.raises(ValueError):
        ascii_.shortest_path()


def test_shortest_path_requires_robot():
    with pytest.raises(ValueError):
        Ascii(_printing("###\n")).shortest_path()


def test_search_robots_returns_last_output():
    program = [1, 0, 0, 0, 104, 7, 104, 42, 99]
    assert Ascii(program).search_robots() == 42


def test_search_robots_sends_main_routine_first():
    program = [1, 0, 0, 0, 3, 20, 4, 20, 99]
    assert Ascii(program).search_robots() == ord("A")


def test_search_robots_leaves_program_untouched():
    program = [1, 0, 0, 0, 104, 7, 99]
    ascii_ = Ascii(program)
    ascii_.search_robots()
    assert ascii_.program == program


def test_search_robots_without_output():
    with pytest.raises(IndexError):
        Ascii([1, 0, 0, 0, 99]).search_robots()