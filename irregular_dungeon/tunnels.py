"""Room connector.

Rooms are carved out of one open floor region, so successive rooms are
normally already linked through the floor around them. Half of the layouts
use the "corridors" style, which walks consecutive room pairs by their first
door; carving is currently a no-op and only the pairing is recorded. The other
half keep the open-space style and skip the step entirely.
"""
from __future__ import annotations

import random
from typing import Any, Dict, List, Optional

from .grid import Grid
from .rooms import Door, Room

CORRIDOR_STYLE = "corridors"
OPEN_STYLE = "open"


def connect_rooms(
    grid: Grid,
    rooms: List[Room],
    rng: random.Random,
    metrics: Optional[Dict[str, Any]] = None,
    *,
    corridor_chance: float = 0.5,
) -> int:
    """Returns the number of room pairs handed to ``carve_corridor``."""
    if len(rooms) < 2:
        return 0
    pairs = 0
    style = OPEN_STYLE
    if rng.random() < corridor_chance:
        style = CORRIDOR_STYLE
        for room_a, room_b in zip(rooms, rooms[1:]):
            if not room_a.doors or not room_b.doors:
                continue
            carve_corridor(grid, room_a.doors[0], room_b.doors[0])
            pairs += 1
    if metrics is not None:
        metrics["corridor_style"] = style
        metrics["corridor_pairs"] = pairs
    return pairs


def carve_corridor(grid: Grid, door_a: Door, door_b: Door) -> None:
    # Intentionally carves nothing: both doors already open onto the shared floor
    # and the connectivity gate rejects any layout where they do not meet.
    return None


__all__ = ["connect_rooms", "carve_corridor", "CORRIDOR_STYLE", "OPEN_STYLE"]
