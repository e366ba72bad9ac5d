"""Door validation run after enclosure repair.

A door is only valid when walls support it on one axis: both left and right,
or both up and down. Unsupported doors are sealed back into wall.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from .grid import Grid
from .tiles import DOOR, WALL


def door_is_supported(grid: Grid, x: int, z: int) -> bool:
    """True when (x, z) has WALL on both horizontal sides or on both vertical sides."""
    horizontal = grid.get(x - 1, z) == WALL and grid.get(x + 1, z) == WALL
    vertical = grid.get(x, z - 1) == WALL and grid.get(x, z + 1) == WALL
    return horizontal or vertical


def validate_doors(grid: Grid, metrics: Optional[Dict[str, Any]] = None) -> int:
    """Demote every unsupported interior DOOR to WALL; returns the number demoted."""
    demoted = 0
    for z in range(1, grid.size - 1):
        for x in range(1, grid.size - 1):
            if grid.rows[z][x] == DOOR and not door_is_supported(grid, x, z):
                grid.rows[z][x] = WALL
                demoted += 1
    if metrics is not None:
        metrics["doors_demoted"] = demoted
    return demoted


__all__ = ["door_is_supported", "validate_doors"]
