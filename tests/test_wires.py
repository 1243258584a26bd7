import pytest

from spaceship.wires import distances, from_string, intersects, minimal_signal_delay


def test_wire_tracing():
    path_1 = from_string("R8,U5,L5,D3")
    path_2 = from_string("U7,R6,D4,L4")
    locations = intersects(path_1, path_2)
    assert len(locations) == 3
    assert distances(locations)[0] == 6
    assert minimal_signal_delay(path_1, path_2, locations) == 30


def test_wire_tracing_2():
    path_1 = from_string("R75,D30,R83,U83,L12,D49,R71,U7,L72")
    path_2 = from_string("U62,R66,U55,R34,D71,R55,D58,R83")
    locations = intersects(path_1, path_2)
    assert distances(locations)[0] == 159
    assert minimal_signal_delay(path_1, path_2, locations) == 610


def test_path_steps_one_point_at_a_time():
    path = from_string("R2,U1")
    assert path == [(0, 0), (1, 0), (2, 0), (2, 1)]


def test_path_length_matches_total_segment_length():
    path = from_string("R75,D30,R83,U83")
    assert len(path) == 1 + 75 + 30 + 83 + 83
    for (x1, y1), (x2, y2) in zip(path, path[1:]):
        assert abs(x1 - x2) + abs(y1 - y2) == 1


def test_intersections_are_sorted_and_include_origin():
    path_1 = from_string("R8,U5,L5,D3")
    path_2 = from_string("U7,R6,D4,L4")
    locations = intersects(path_1, path_2)
    assert locations == sorted(locations)
    assert (0, 0) in locations
    assert all(loc in path_1 and loc in path_2 for loc in locations)


def test_intersection_is_symmetric():
    path_1 = from_string("R8,U5,L5,D3")
    path_2 = from_string("U7,R6,D4,L4")
    assert intersects(path_1, path_2) == intersects(path_2, path_1)


def test_distances_skip_origin_and_sort():
    result = distances([(3, 3), (0, 0), (-1, 1)])
    assert result == sorted(result)
    assert len(result) == 2


def test_signal_delay_without_crossings_raises():
    path_1 = from_string("R3")
    path_2 = from_string("L3")
    with pytest.raises(ValueError):
        minimal_signal_delay(path_1, path_2, intersects(path_1, path_2))


def test_malformed_length_raises():
    with pytest.raises(ValueError):
        from_string("Rx")