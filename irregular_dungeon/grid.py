"""Grid canvas and rectangle helpers shared by every generation pass.

The grid is stored row-major (``rows[z][x]``) and owns no generation logic;
passes mutate it in place through ``set``. Out-of-range reads return ``None``
so neighbour probes never wrap around on negative indices.
"""
from __future__ import annotations

from typing import Iterator, List, NamedTuple, Optional, Tuple

from .tiles import CELL_STATES, VOID, WALKABLE

Coord2D = Tuple[int, int]

CARDINALS: Tuple[Coord2D, ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))
MOORE: Tuple[Coord2D, ...] = tuple((dx, dz) for dz in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dz) != (0, 0))


class Rect(NamedTuple):
    x: int
    z: int
    w: int
    h: int

    def contains(self, x: int, z: int) -> bool:
        return self.x <= x < self.x + self.w and self.z <= z < self.z + self.h

    def cells(self) -> Iterator[Coord2D]:
        for iz in range(self.z, self.z + self.h):
            for ix in range(self.x, self.x + self.w):
                yield ix, iz

    def inset(self, n: int = 1) -> "Rect":
        return Rect(self.x + n, self.z + n, self.w - 2 * n, self.h - 2 * n)

    def intersects(self, other: "Rect", margin: int = 0) -> bool:
        """True unless the rectangles are at least ``margin`` cells apart on some axis."""
        return (
            self.x < other.x + other.w + margin
            and self.x + self.w + margin > other.x
            and self.z < other.z + other.h + margin
            and self.z + self.h + margin > other.z
        )


class Bounds(NamedTuple):
    min_x: int
    max_x: int
    min_z: int
    max_z: int
    width: int
    height: int


EMPTY_BOUNDS = Bounds(0, -1, 0, -1, 0, 0)


class Grid:
    """Square cell canvas of side ``size`` initialised to VOID."""

    __slots__ = ("size", "rows")

    def __init__(self, size: int, fill: str = VOID):
        if size < 1:
            raise ValueError(f"grid size must be positive, got {size}")
        self.size = size
        self.rows: List[List[str]] = [[fill for _ in range(size)] for _ in range(size)]

    def in_bounds(self, x: int, z: int) -> bool:
        return 0 <= x < self.size and 0 <= z < self.size

    def is_edge(self, x: int, z: int) -> bool:
        return x == 0 or z == 0 or x == self.size - 1 or z == self.size - 1

    def get(self, x: int, z: int) -> Optional[str]:
        if not self.in_bounds(x, z):
            return None
        return self.rows[z][x]

    def set(self, x: int, z: int, state: str) -> None:
        if state not in CELL_STATES:
            raise ValueError(f"unknown cell state {state!r}")
        if not self.in_bounds(x, z):
            raise IndexError(f"({x}, {z}) outside {self.size}x{self.size} grid")
        self.rows[z][x] = state

    def is_walkable(self, x: int, z: int) -> bool:
        return self.get(x, z) in WALKABLE

    def neighbors4(self, x: int, z: int) -> Iterator[Coord2D]:
        for dx, dz in CARDINALS:
            nx, nz = x + dx, z + dz
            if self.in_bounds(nx, nz):
                yield nx, nz

    def neighbors8(self, x: int, z: int) -> Iterator[Coord2D]:
        for dx, dz in MOORE:
            nx, nz = x + dx, z + dz
            if self.in_bounds(nx, nz):
                yield nx, nz

    def cells(self) -> Iterator[Tuple[int, int, str]]:
        for z, row in enumerate(self.rows):
            for x, state in enumerate(row):
                yield x, z, state

    def count(self, *states: str) -> int:
        wanted = set(states)
        return sum(1 for row in self.rows for state in row if state in wanted)

    def bounds(self) -> Bounds:
        """Bounding box of every non-VOID cell (EMPTY_BOUNDS when the grid is all void)."""
        xs = [x for x, _z, state in self.cells() if state != VOID]
        if not xs:
            return EMPTY_BOUNDS
        zs = [z for _x, z, state in self.cells() if state != VOID]
        min_x, max_x, min_z, max_z = min(xs), max(xs), min(zs), max(zs)
        return Bounds(min_x, max_x, min_z, max_z, max_x - min_x + 1, max_z - min_z + 1)

    def snapshot(self) -> Tuple[Tuple[str, ...], ...]:
        return tuple(tuple(row) for row in self.rows)

    def to_ascii(self) -> str:
        return "\n".join("".join(row) for row in self.rows)

    @classmethod
    def from_lines(cls, lines: List[str]) -> "Grid":
        """Build a grid from equal-length rows of cell characters (used by tests)."""
        grid = cls(len(lines))
        for z, line in enumerate(lines):
            if len(line) != grid.size:
                raise ValueError(f"row {z} has width {len(line)}, expected {grid.size}")
            for x, ch in enumerate(line):
                grid.set(x, z, ch)
        return grid

    def __repr__(self) -> str:
        return f"Grid(size={self.size})"


__all__ = ["Coord2D", "CARDINALS", "MOORE", "Rect", "Bounds", "EMPTY_BOUNDS", "Grid"]
