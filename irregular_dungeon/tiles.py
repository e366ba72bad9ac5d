# Cell state constants centralized for modular imports
VOID = "V"  # outside the dungeon footprint
FLOOR = "F"
WALL = "W"
DOOR = "D"

CELL_STATES = frozenset({VOID, FLOOR, WALL, DOOR})
WALKABLE = frozenset({FLOOR, DOOR})

__all__ = ["VOID", "FLOOR", "WALL", "DOOR", "CELL_STATES", "WALKABLE"]
