"""Cosmetic features placed after the structural passes (pillars)."""
from __future__ import annotations

import random
from typing import Any, Dict, List, Optional

from .grid import Grid
from .rooms import Room
from .tiles import DOOR, FLOOR, WALL

MAX_PILLARS = 3  # exclusive upper bound of the drawn count
ATTEMPTS_PER_PILLAR = 20


def _near_door(grid: Grid, x: int, z: int) -> bool:
    return any(grid.get(x + dx, z + dz) == DOOR for dz in (-1, 0, 1) for dx in (-1, 0, 1))


def add_obstacles(
    grid: Grid, rooms: List[Room], rng: random.Random, metrics: Optional[Dict[str, Any]] = None
) -> int:
    """Scatter single-cell WALL pillars over open floor.

    Draws a count in 0..2 and makes ``20 * count`` random probes; every probe
    landing on FLOOR outside all room interiors and clear of doors (3x3)
    becomes a pillar. Returns the number of pillars placed.
    """
    count = int(rng.random() * MAX_PILLARS)
    span = grid.size - 4
    placed = 0
    for _ in range(count * ATTEMPTS_PER_PILLAR):
        x = 2 + (rng.randrange(span) if span > 0 else 0)
        z = 2 + (rng.randrange(span) if span > 0 else 0)
        if grid.get(x, z) != FLOOR:
            continue
        if any(room.interior.contains(x, z) for room in rooms):
            continue
        if _near_door(grid, x, z):
            continue
        grid.set(x, z, WALL)
        placed += 1
    if metrics is not None:
        metrics["pillars_placed"] = placed
    return placed


__all__ = ["add_obstacles"]
