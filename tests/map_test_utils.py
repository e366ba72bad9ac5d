from collections import deque

# Cell characters duplicated lightly for test independence.
VOID = "V"
FLOOR = "F"
WALL = "W"
DOOR = "D"
WALKABLE = {FLOOR, DOOR}


def cell(rows, x, z):
    """Row-major lookup returning None off the grid (no negative wraparound)."""
    if 0 <= z < len(rows) and 0 <= x < len(rows[z]):
        return rows[z][x]
    return None


def iter_cells(rows, *states):
    for z, row in enumerate(rows):
        for x, t in enumerate(row):
            if not states or t in states:
                yield x, z


def enclosure_violations(rows):
    """Walkable cells on the grid edge or with a VOID among their 8 neighbours."""
    n = len(rows)
    bad = []
    for x, z in iter_cells(rows, FLOOR, DOOR):
        if x in (0, n - 1) or z in (0, n - 1):
            bad.append((x, z))
            continue
        for dz in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if cell(rows, x + dx, z + dz) == VOID:
                    bad.append((x, z))
    return bad


def door_violations(rows):
    bad = []
    for x, z in iter_cells(rows, DOOR):
        horizontal = cell(rows, x - 1, z) == WALL and cell(rows, x + 1, z) == WALL
        vertical = cell(rows, x, z - 1) == WALL and cell(rows, x, z + 1) == WALL
        if not (horizontal or vertical):
            bad.append((x, z))
    return bad


def bfs_reachable(rows, start):
    """Return set of (x,z) walkable cells reachable from start over 4-connectivity."""
    if cell(rows, *start) not in WALKABLE:
        return set()
    q = deque([start])
    vis = {start}
    while q:
        x, z = q.popleft()
        for dx, dz in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nxt = (x + dx, z + dz)
            if nxt not in vis and cell(rows, *nxt) in WALKABLE:
                vis.add(nxt)
                q.append(nxt)
    return vis


def is_single_region(rows):
    walk = list(iter_cells(rows, FLOOR, DOOR))
    if not walk:
        return False
    return len(bfs_reachable(rows, walk[0])) == len(walk)
