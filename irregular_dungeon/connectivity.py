"""Connectivity gate: the walkable cells must form one 4-connected region."""
from __future__ import annotations

from collections import deque
from typing import List, Set

from .grid import Coord2D, Grid
from .tiles import WALKABLE


def walkable_cells(grid: Grid) -> List[Coord2D]:
    return [(x, z) for x, z, state in grid.cells() if state in WALKABLE]


def count_walkable(grid: Grid) -> int:
    return grid.count(*WALKABLE)


def flood_walkable(grid: Grid, start: Coord2D) -> Set[Coord2D]:
    """Breadth-first fill over FLOOR/DOOR from ``start`` (empty if start is not walkable)."""
    if not grid.is_walkable(*start):
        return set()
    q = deque([start])
    visited = {start}
    while q:
        cx, cz = q.popleft()
        for nx, nz in grid.neighbors4(cx, cz):
            if (nx, nz) not in visited and grid.rows[nz][nx] in WALKABLE:
                visited.add((nx, nz))
                q.append((nx, nz))
    return visited


def is_fully_connected(grid: Grid) -> bool:
    cells = walkable_cells(grid)
    if not cells:
        return False
    return len(flood_walkable(grid, cells[0])) == len(cells)


__all__ = ["walkable_cells", "count_walkable", "flood_walkable", "is_fully_connected"]
