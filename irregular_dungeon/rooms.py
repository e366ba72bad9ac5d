import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .grid import Grid, Rect
from .shapes import Mask
from .tiles import DOOR, FLOOR, WALL

ROOM_MARGIN = 2  # interior-to-interior gap so rooms never share a wall
ATTEMPTS_PER_ROOM = 50


class Edge(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @property
    def normal(self) -> Tuple[int, int]:
        return _NORMALS[self]


_NORMALS = {
    Edge.TOP: (0, -1),
    Edge.BOTTOM: (0, 1),
    Edge.LEFT: (-1, 0),
    Edge.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class Door:
    x: int
    z: int
    edge: Edge


@dataclass(frozen=True)
class Room:
    outer: Rect
    doors: Tuple[Door, ...] = ()

    @property
    def interior(self) -> Rect:
        return self.outer.inset(1)

    @property
    def center(self) -> Tuple[int, int]:
        return (self.outer.x + self.outer.w // 2, self.outer.z + self.outer.h // 2)

    def perimeter(self):
        o = self.outer
        for x, z in o.cells():
            if x in (o.x, o.x + o.w - 1) or z in (o.z, o.z + o.h - 1):
                yield x, z


def generate_rooms(
    grid: Grid,
    offset: int,
    base_size: int,
    mask: Mask,
    depth: int,
    rng: random.Random,
    metrics: Optional[Dict] = None,
    *,
    min_size: int = 5,
    max_size: int = 8,
) -> List[Room]:
    """Carve walled rooms out of existing floor, best effort.

    Target is ``3 + depth // 2`` rooms with ``50`` attempts per target room.
    Falling short of the target is a normal outcome. ``mask`` is accepted for
    callers that want to constrain placement further; the fit check against
    the painted grid already respects the footprint.
    """
    target = 3 + depth // 2
    rooms: List[Room] = []
    attempts = 0
    while attempts < target * ATTEMPTS_PER_ROOM and len(rooms) < target:
        attempts += 1
        room = try_place_room(grid, offset, base_size, rooms, rng, metrics, min_size=min_size, max_size=max_size)
        if room is not None:
            rooms.append(room)
    if metrics is not None:
        metrics["rooms_target"] = target
        metrics["rooms_placed"] = len(rooms)
        metrics["room_attempts"] = attempts
    return rooms


def _random_origin(offset: int, base_size: int, outer: int, rng: random.Random) -> int:
    span = base_size - outer - 2
    return offset + 1 + (rng.randrange(span) if span > 0 else 0)


def try_place_room(
    grid: Grid,
    offset: int,
    base_size: int,
    existing: List[Room],
    rng: random.Random,
    metrics: Optional[Dict] = None,
    *,
    min_size: int = 5,
    max_size: int = 8,
) -> Optional[Room]:
    outer_w = rng.randint(min_size, max_size)
    outer_h = rng.randint(min_size, max_size)
    rx = _random_origin(offset, base_size, outer_w, rng)
    rz = _random_origin(offset, base_size, outer_h, rng)
    room = Room(Rect(rx, rz, outer_w, outer_h))

    # fit: every outer cell must still be floor (rejects void, shape walls and other rooms)
    if any(grid.get(x, z) != FLOOR for x, z in room.outer.cells()):
        return None
    if _room_overlaps(room, existing):
        return None

    for x, z in room.perimeter():
        grid.set(x, z, WALL)

    door_count = rng.randint(1, 2)
    edges = list(Edge)
    rng.shuffle(edges)
    doors = []
    for edge in edges[:door_count]:
        door = place_door(grid, room, edge, rng)
        if door is not None:
            doors.append(door)
    if metrics is not None:
        metrics["doors_placed"] = metrics.get("doors_placed", 0) + len(doors)
        metrics["doors_dropped"] = metrics.get("doors_dropped", 0) + door_count - len(doors)
    return Room(room.outer, tuple(doors))


def _room_overlaps(room: Room, existing: List[Room]) -> bool:
    return any(room.interior.intersects(r.interior, margin=ROOM_MARGIN) for r in existing)


def place_door(grid: Grid, room: Room, edge: Edge, rng: random.Random) -> Optional[Door]:
    """Open one door on ``edge``; returns None (grid untouched) when the spot is unsuitable.

    The door sits at least two cells from either corner, both cells beside it
    along the wall must be WALL, and the cell straight outside must be FLOOR.
    """
    o = room.outer
    if edge in (Edge.TOP, Edge.BOTTOM):
        x = o.x + 2 + rng.randrange(max(1, o.w - 4))
        z = o.z if edge is Edge.TOP else o.z + o.h - 1
        flanks = ((x - 1, z), (x + 1, z))
    else:
        x = o.x if edge is Edge.LEFT else o.x + o.w - 1
        z = o.z + 2 + rng.randrange(max(1, o.h - 4))
        flanks = ((x, z - 1), (x, z + 1))

    if any(grid.get(fx, fz) != WALL for fx, fz in flanks):
        return None
    dx, dz = edge.normal
    if grid.get(x + dx, z + dz) != FLOOR:
        return None
    grid.set(x, z, DOOR)
    return Door(x, z, edge)


__all__ = ["Edge", "Door", "Room", "generate_rooms", "try_place_room", "place_door", "ROOM_MARGIN"]
