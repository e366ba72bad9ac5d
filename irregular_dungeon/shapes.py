"""Shape mask synthesis: the footprint families a dungeon floor can take.

Each synthesizer returns a ``size`` x ``size`` boolean mask indexed
``mask[z][x]``. Masks are transient; the orchestrator paints them onto the
grid once at a centered offset and discards them.
"""
from __future__ import annotations

import math
import random
from enum import Enum
from typing import Callable, Dict, List, Union

from .grid import Grid
from .tiles import FLOOR

Mask = List[List[bool]]

CAVE_FILL_CHANCE = 0.55
CAVE_ROUNDS = 5
CAVE_THRESHOLD = 5  # of the 3x3 window, cell included


class ShapeKind(str, Enum):
    BLOB = "blob"
    L = "L"
    CROSS = "cross"
    DONUT = "donut"
    CAVES = "caves"

    @classmethod
    def coerce(cls, value: Union["ShapeKind", str]) -> "ShapeKind":
        try:
            return cls(value)
        except ValueError:
            known = ", ".join(k.value for k in cls)
            raise ValueError(f"unknown shape {value!r} (expected one of: {known})") from None


def empty_mask(size: int) -> Mask:
    return [[False for _ in range(size)] for _ in range(size)]


def _center_radius(size: int):
    c = size / 2
    return c, c, size / 2 - 2


def blob_mask(size: int, rng: random.Random) -> Mask:
    """Wavy circle: the radius is modulated by a per-call phase ``seed``."""
    mask = empty_mask(size)
    cx, cz, r = _center_radius(size)
    seed = rng.random() * 100
    for z in range(size):
        for x in range(size):
            dx, dz = x - cx, z - cz
            dist = math.sqrt(dx * dx + dz * dz)
            angle = math.atan2(dz, dx)
            wavy = r * (0.7 + 0.3 * math.sin(angle * 3 + seed) * math.cos(angle * 2 + seed * 0.7))
            if dist < wavy:
                mask[z][x] = True
    return mask


def l_mask(size: int, rng: random.Random) -> Mask:
    mask = empty_mask(size)
    arm = int(size * 0.5)
    rot = rng.randrange(4)
    for z in range(size):
        for x in range(size):
            if rot == 0:
                inside = x < arm or z >= size - arm
            elif rot == 1:
                inside = x >= size - arm or z >= size - arm
            elif rot == 2:
                inside = x >= size - arm or z < arm
            else:
                inside = x < arm or z < arm
            mask[z][x] = inside
    return mask


def cross_mask(size: int, rng: random.Random) -> Mask:
    mask = empty_mask(size)
    cx, cz, _r = _center_radius(size)
    half = int(size * 0.35) / 2
    for z in range(size):
        for x in range(size):
            in_v = cx - half <= x < cx + half
            in_h = cz - half <= z < cz + half
            mask[z][x] = in_v or in_h
    return mask


def donut_mask(size: int, rng: random.Random) -> Mask:
    mask = empty_mask(size)
    cx, cz, r = _center_radius(size)
    outer, inner = r + 2, r * 0.3
    for z in range(size):
        for x in range(size):
            d = math.sqrt((x - cx) ** 2 + (z - cz) ** 2)
            mask[z][x] = inner < d < outer
    return mask


def caves_mask(size: int, rng: random.Random) -> Mask:
    """Random fill inside a disc, then majority-rule smoothing into cave blobs."""
    mask = empty_mask(size)
    cx, cz, r = _center_radius(size)
    for z in range(1, size - 1):
        for x in range(1, size - 1):
            if math.sqrt((x - cx) ** 2 + (z - cz) ** 2) < r + 2:
                mask[z][x] = rng.random() < CAVE_FILL_CHANCE
    for _ in range(CAVE_ROUNDS):
        nxt = [row[:] for row in mask]
        for z in range(1, size - 1):
            for x in range(1, size - 1):
                n = 0
                for dz in (-1, 0, 1):
                    for dx in (-1, 0, 1):
                        nz, nx = z + dz, x + dx
                        if 0 <= nz < size and 0 <= nx < size and mask[nz][nx]:
                            n += 1
                nxt[z][x] = n >= CAVE_THRESHOLD
        mask = nxt
    return mask


SYNTHESIZERS: Dict[ShapeKind, Callable[[int, random.Random], Mask]] = {
    ShapeKind.BLOB: blob_mask,
    ShapeKind.L: l_mask,
    ShapeKind.CROSS: cross_mask,
    ShapeKind.DONUT: donut_mask,
    ShapeKind.CAVES: caves_mask,
}


def synthesize(kind: Union[ShapeKind, str], size: int, rng: random.Random) -> Mask:
    return SYNTHESIZERS[ShapeKind.coerce(kind)](size, rng)


def paint_mask(grid: Grid, mask: Mask, offset: int) -> int:
    """Write FLOOR for every true mask cell at ``offset``; returns cells painted."""
    painted = 0
    for z, row in enumerate(mask):
        for x, inside in enumerate(row):
            if inside and grid.in_bounds(x + offset, z + offset):
                grid.set(x + offset, z + offset, FLOOR)
                painted += 1
    return painted


__all__ = [
    "Mask",
    "ShapeKind",
    "SYNTHESIZERS",
    "synthesize",
    "paint_mask",
    "blob_mask",
    "l_mask",
    "cross_mask",
    "donut_mask",
    "caves_mask",
]
