from irregular_dungeon.connectivity import count_walkable, flood_walkable, is_fully_connected, walkable_cells
from irregular_dungeon.grid import Grid


def test_empty_grid_is_not_connected():
    assert not is_fully_connected(Grid(4))
    assert count_walkable(Grid(4)) == 0


def test_single_region_through_door():
    g = Grid.from_lines(
        [
            "WWWWWWW",
            "WFFWFFW",
            "WFFDFFW",
            "WFFWFFW",
            "WWWWWWW",
            "VVVVVVV",
            "VVVVVVV",
        ]
    )
    assert count_walkable(g) == 13
    assert is_fully_connected(g)


def test_wall_split_is_detected():
    g = Grid.from_lines(
        [
            "WWWWWWW",
            "WFFWFFW",
            "WFFWFFW",
            "WFFWFFW",
            "WWWWWWW",
            "VVVVVVV",
            "VVVVVVV",
        ]
    )
    assert not is_fully_connected(g)
    cells = walkable_cells(g)
    assert len(flood_walkable(g, cells[0])) == 6


def test_diagonal_contact_does_not_connect():
    g = Grid.from_lines(
        [
            "WWWW",
            "WFWW",
            "WWFW",
            "WWWW",
        ]
    )
    assert not is_fully_connected(g)


def test_flood_from_non_walkable_is_empty():
    g = Grid.from_lines(["WF", "FF"])
    assert flood_walkable(g, (0, 0)) == set()
    assert flood_walkable(g, (1, 1)) == {(1, 0), (0, 1), (1, 1)}
