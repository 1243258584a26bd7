import pytest

from spaceship.orbit import Orbit

SMALL = ["COM)B", "B)C", "C)D", "D)E", "E)F", "B)G",
         "G)H", "D)I", "E)J", "J)K", "K)L"]


def _build(entries):
    orbit = Orbit()
    for entry in entries:
        orbit.add_orbit(entry)
    return orbit


def test_small_map_checksum():
    assert _build(SMALL).checksum() == 42


def test_empty_entries_are_ignored():
    assert _build(SMALL + ["", ""]).checksum() == 42


def test_orbital_transfer():
    orbit = _build(SMALL + ["K)YOU", "I)SAN"])
    assert orbit.minimum_orbital_transfer("YOU", "SAN") == 4


def test_transfer_is_symmetric():
    orbit = _build(SMALL + ["K)YOU", "I)SAN"])
    assert orbit.minimum_orbital_transfer("SAN", "YOU") == \
        orbit.minimum_orbital_transfer("YOU", "SAN")


def test_only_center_has_no_orbits():
    orbit = Orbit()
    orbit.add_object("COM")
    orbit.add_object("COM")
    assert orbit.checksum() == 0


def test_unknown_target_raises():
    orbit = _build(SMALL + ["K)YOU"])
    with pytest.raises(ValueError):
        orbit.minimum_orbital_transfer("YOU", "SAN")


def test_malformed_entry_raises():
    with pytest.raises(ValueError):
        Orbit().add_orbit("COMB")