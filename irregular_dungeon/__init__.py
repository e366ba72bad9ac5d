"""Public irregular dungeon package interface.

Generates a bounded dungeon floor (void / floor / wall / door cells) shaped as
a blob, L, cross, donut or cave system, with walled rooms, validated doors and
a connectivity guarantee enforced by generate-check-retry.
"""

from .config import GeneratorConfig
from .generator import FORCED_FALLBACK, SUCCESS, GenerationResult, MapGenerator, Rejected, generate
from .grid import Bounds, Grid, Rect
from .rooms import Door, Edge, Room
from .shapes import ShapeKind
from .tiles import DOOR, FLOOR, VOID, WALKABLE, WALL

__version__ = "0.1.0"

__all__ = [
    "MapGenerator",
    "GenerationResult",
    "Rejected",
    "GeneratorConfig",
    "generate",
    "SUCCESS",
    "FORCED_FALLBACK",
    "ShapeKind",
    "Grid",
    "Rect",
    "Bounds",
    "Room",
    "Door",
    "Edge",
    "VOID",
    "FLOOR",
    "WALL",
    "DOOR",
    "WALKABLE",
]
