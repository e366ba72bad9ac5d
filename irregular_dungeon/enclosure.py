"""Wall passes that keep walkable cells sealed off from the void.

``add_boundary_walls`` runs once right after the shape is painted so rooms and
pillars never sit directly against void. ``ensure_enclosure`` is the final
fixed-point repair run after every pass that may expose new edges.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from .grid import Grid
from .logging_utils import get_logger
from .tiles import FLOOR, VOID, WALKABLE, WALL

log = get_logger("irregular_dungeon.enclosure")


def add_boundary_walls(grid: Grid, metrics: Optional[Dict[str, Any]] = None) -> int:
    """Convert FLOOR cells with a cardinal VOID neighbour into WALL (single pass).

    Changes are collected first and applied afterwards so a new wall never
    shields a later cell in the same sweep. Off-grid neighbours are not void.
    """
    changes = [
        (x, z)
        for x, z, state in grid.cells()
        if state == FLOOR and any(grid.get(nx, nz) == VOID for nx, nz in grid.neighbors4(x, z))
    ]
    for x, z in changes:
        grid.set(x, z, WALL)
    if metrics is not None:
        metrics["boundary_walls"] = len(changes)
    return len(changes)


def ensure_enclosure(grid: Grid, metrics: Optional[Dict[str, Any]] = None) -> int:
    """Repeat sweeps until no FLOOR/DOOR cell touches the void or the grid edge.

    A walkable cell on the outer edge becomes WALL itself; otherwise each VOID
    cell in its 8-neighbourhood becomes WALL. Every change raises the wall
    count, so the loop is bounded by the number of cells.
    """
    converted = 0
    sweeps = 0
    changed = True
    while changed:
        changed = False
        sweeps += 1
        for z in range(grid.size):
            for x in range(grid.size):
                if grid.rows[z][x] not in WALKABLE:
                    continue
                if grid.is_edge(x, z):
                    grid.rows[z][x] = WALL
                    converted += 1
                    changed = True
                    continue
                for nx, nz in grid.neighbors8(x, z):
                    if grid.rows[nz][nx] == VOID:
                        grid.rows[nz][nx] = WALL
                        converted += 1
                        changed = True
    if metrics is not None:
        metrics["enclosure_walls"] = converted
        metrics["enclosure_sweeps"] = sweeps
    log.debug(event="enclosure_converged", sweeps=sweeps, converted=converted)
    return converted


__all__ = ["add_boundary_walls", "ensure_enclosure"]
