from irregular_dungeon.doors import door_is_supported, validate_doors
from irregular_dungeon.grid import Grid
from irregular_dungeon.tiles import DOOR, WALL


def test_supported_horizontally_and_vertically():
    g = Grid.from_lines(
        [
            "VVVVV",
            "VWDWV",
            "VFFFV",
            "VWFFV",
            "VDFFV",
        ]
    )
    assert door_is_supported(g, 2, 1)
    g2 = Grid.from_lines(
        [
            "VVVVV",
            "VVWVV",
            "VFDFV",
            "VVWVV",
            "VVVVV",
        ]
    )
    assert door_is_supported(g2, 2, 2)


def test_unsupported_door_demoted():
    g = Grid.from_lines(
        [
            "VVVVVV",
            "VWDWVV",
            "VFFFVV",
            "VFDWVV",
            "VFFFVV",
            "VVVVVV",
        ]
    )
    metrics = {}
    demoted = validate_doors(g, metrics)
    assert demoted == 1
    assert metrics["doors_demoted"] == 1
    assert g.get(2, 1) == DOOR
    assert g.get(2, 3) == WALL


def test_one_wall_per_axis_is_not_enough():
    g = Grid.from_lines(
        [
            "VVVVV",
            "VVWVV",
            "VWDFV",
            "VVFVV",
            "VVVVV",
        ]
    )
    assert not door_is_supported(g, 2, 2)
    assert validate_doors(g) == 1
    assert g.count(DOOR) == 0
