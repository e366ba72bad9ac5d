import random

from irregular_dungeon.grid import Grid, Rect
from irregular_dungeon.rooms import Door, Edge, Room
from irregular_dungeon.tiles import FLOOR
from irregular_dungeon.tunnels import CORRIDOR_STYLE, OPEN_STYLE, carve_corridor, connect_rooms


class FixedRandom(random.Random):
    def __init__(self, value):
        self.value = value
        super().__init__(0)

    def random(self):
        return self.value


def make_rooms():
    a = Room(Rect(2, 2, 5, 5), (Door(4, 2, Edge.TOP),))
    b = Room(Rect(10, 2, 5, 5))
    c = Room(Rect(2, 10, 5, 5), (Door(6, 12, Edge.RIGHT),))
    d = Room(Rect(10, 10, 5, 5), (Door(12, 10, Edge.TOP),))
    return [a, b, c, d]


def test_fewer_than_two_rooms_is_skipped():
    grid = Grid(20, fill=FLOOR)
    metrics = {}
    assert connect_rooms(grid, [], FixedRandom(0.0), metrics) == 0
    assert connect_rooms(grid, make_rooms()[:1], FixedRandom(0.0), metrics) == 0
    assert metrics == {}


def test_corridor_style_pairs_rooms_with_doors():
    grid = Grid(20, fill=FLOOR)
    before = grid.snapshot()
    metrics = {}
    pairs = connect_rooms(grid, make_rooms(), FixedRandom(0.1), metrics)
    # (a, b) and (b, c) are skipped because b has no door
    assert pairs == 1
    assert metrics == {"corridor_style": CORRIDOR_STYLE, "corridor_pairs": 1}
    assert grid.snapshot() == before


def test_open_style_skips_pairing():
    grid = Grid(20, fill=FLOOR)
    metrics = {}
    assert connect_rooms(grid, make_rooms(), FixedRandom(0.9), metrics) == 0
    assert metrics["corridor_style"] == OPEN_STYLE


def test_corridor_chance_respected():
    grid = Grid(20, fill=FLOOR)
    metrics = {}
    connect_rooms(grid, make_rooms(), FixedRandom(0.9), metrics, corridor_chance=1.0)
    assert metrics["corridor_style"] == CORRIDOR_STYLE


def test_carve_corridor_leaves_grid_alone():
    grid = Grid(10, fill=FLOOR)
    before = grid.snapshot()
    carve_corridor(grid, Door(1, 1, Edge.TOP), Door(8, 8, Edge.LEFT))
    assert grid.snapshot() == before
