"""Generation orchestrator for irregular dungeon layouts.

High-level phases of one attempt (each on a fresh grid):
    * Synthesize a shape mask and paint it as FLOOR at a centered offset.
    * Wall off floor that touches the void (single boundary pass).
    * Carve walled rooms with doors out of the floor.
    * Optionally pair rooms for corridors, then scatter pillars.
    * Repair enclosure to a fixed point, then demote unsupported doors.
    * Gate on full 4-connectivity of the walkable cells.

A rejected attempt is discarded and retried, up to ``max_attempts`` times.
If none passes, one last attempt runs with the gate disabled and is returned
regardless, so ``generate`` always produces a map; ``validated`` on the result
tells the caller whether that map is connected.

Public contract:
    MapGenerator(max_size=36, seed=None).generate(depth, force_shape=None)
    Result: map (row-major cells), bounds, shape, size, walkable, rooms,
    validated, attempts, seed, max_size, metrics
"""
from __future__ import annotations

import random
import time
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .config import GeneratorConfig
from .connectivity import count_walkable, is_fully_connected
from .doors import validate_doors
from .enclosure import add_boundary_walls, ensure_enclosure
from .features import add_obstacles
from .grid import Bounds, Grid
from .logging_utils import get_logger
from .metrics import init_metrics
from .rooms import Room, generate_rooms
from .shapes import ShapeKind, paint_mask, synthesize
from .tiles import DOOR, FLOOR, VOID, WALL
from .tunnels import connect_rooms

log = get_logger("irregular_dungeon.generator")

SUCCESS = "success"
FORCED_FALLBACK = "forced_fallback"


@dataclass(frozen=True)
class GenerationResult:
    map: Tuple[Tuple[str, ...], ...]
    bounds: Bounds
    shape: ShapeKind
    size: int
    walkable: int
    rooms: Tuple[Room, ...]
    validated: bool
    attempts: int
    seed: Optional[int]
    max_size: int
    metrics: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def cell(self, x: int, z: int) -> Optional[str]:
        if 0 <= x < self.max_size and 0 <= z < self.max_size:
            return self.map[z][x]
        return None

    def to_grid(self) -> Grid:
        """Mutable copy of the map, for callers that want the grid helpers."""
        return Grid.from_lines(["".join(row) for row in self.map])

    def to_ascii(self) -> str:
        return "\n".join("".join(row) for row in self.map)


@dataclass(frozen=True)
class Rejected:
    """One discarded attempt; the orchestrator retries on this outcome."""

    attempt: int
    shape: ShapeKind
    reason: str = "disconnected"


AttemptOutcome = Union[GenerationResult, Rejected]


def base_size_for(depth: int, max_size: int) -> int:
    return min(22 + 2 * depth, max_size)


class MapGenerator:
    def __init__(
        self,
        max_size: Optional[int] = None,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        config: Optional[GeneratorConfig] = None,
    ):
        # Accept either a config object or plain arguments; explicit arguments win
        if config is None:
            config = GeneratorConfig.from_env(max_size=max_size, seed=seed)
        else:
            config = replace(config)
            if max_size is not None:
                config.max_size = max_size
            if seed is not None:
                config.seed = seed
            config.validate()
        # An injected rng was not built from a seed, so there is none to report
        if config.seed is None and rng is None:
            config.seed = random.randint(0, 2**31 - 1)
        self.config = config
        self.seed = config.seed
        # Local RNG so external random usage does not affect generation
        self._rng = rng if rng is not None else random.Random(self.seed)

    @property
    def max_size(self) -> int:
        return self.config.max_size

    def generate(self, depth: int = 1, force_shape: Union[ShapeKind, str, None] = None) -> GenerationResult:
        if depth < 1:
            raise ValueError(f"depth must be at least 1, got {depth}")
        shape = ShapeKind.coerce(force_shape) if force_shape else None
        start = time.perf_counter()
        log.debug(event="generation_start", depth=depth, shape=shape and shape.value, seed=self.seed)

        rejected = 0
        for n in range(self.config.max_attempts):
            outcome = self._attempt(n, depth, shape)
            if isinstance(outcome, GenerationResult):
                return self._finish(outcome, SUCCESS, rejected, start)
            rejected += 1
            log.debug(event="attempt_rejected", attempt=n, shape=outcome.shape.value, reason=outcome.reason)

        outcome = self._attempt(self.config.max_attempts, depth, shape, force=True)
        log.warn(
            event="generation_fallback",
            attempts=self.config.max_attempts + 1,
            shape=outcome.shape.value,
            validated=outcome.validated,
        )
        return self._finish(outcome, FORCED_FALLBACK, rejected, start)

    def _finish(self, result: GenerationResult, state: str, rejected: int, start: float) -> GenerationResult:
        runtime_ms = int((time.perf_counter() - start) * 1000)
        metrics = dict(result.metrics)
        if self.config.enable_metrics:
            metrics.update(
                outcome=state,
                attempts=result.attempts,
                rejected_attempts=rejected,
                runtime_ms=runtime_ms,
            )
        result = replace(result, metrics=MappingProxyType(metrics))
        log.info(
            event="generation_complete",
            outcome=state,
            shape=result.shape.value,
            size=result.size,
            rooms=len(result.rooms),
            attempts=result.attempts,
            validated=result.validated,
            runtime_ms=runtime_ms,
        )
        return result

    def _attempt(self, n: int, depth: int, shape: Optional[ShapeKind], force: bool = False) -> AttemptOutcome:
        """Run the full pipeline once on a fresh grid."""
        rng = self._rng
        metrics: Dict[str, Any] = init_metrics() if self.config.enable_metrics else {}
        phase_times: Dict[str, int] = {}
        sink = metrics if self.config.enable_metrics else None

        def _phase(label, fn, *a, **k):
            ps = time.perf_counter()
            r = fn(*a, **k)
            phase_times[label] = int((time.perf_counter() - ps) * 1000)
            return r

        size = self.config.max_size
        base_size = base_size_for(depth, size)
        kind = shape if shape is not None else rng.choice(list(ShapeKind))
        grid = Grid(size)

        mask = _phase('synthesize', synthesize, kind, base_size, rng)
        offset = (size - base_size) // 2
        _phase('paint', paint_mask, grid, mask, offset)
        _phase('boundary_walls', add_boundary_walls, grid, sink)
        rooms = _phase(
            'rooms',
            generate_rooms,
            grid,
            offset,
            base_size,
            mask,
            depth,
            rng,
            sink,
            min_size=self.config.room_min_size,
            max_size=self.config.room_max_size,
        )
        log.debug(event="rooms_placed", attempt=n, rooms=len(rooms), target=3 + depth // 2)
        _phase('connect_rooms', connect_rooms, grid, rooms, rng, sink, corridor_chance=self.config.corridor_chance)
        _phase('obstacles', add_obstacles, grid, rooms, rng, sink)
        _phase('enclosure', ensure_enclosure, grid, sink)
        _phase('validate_doors', validate_doors, grid, sink)
        connected = _phase('connectivity', is_fully_connected, grid)

        if not connected and not force:
            return Rejected(attempt=n, shape=kind)

        if self.config.enable_metrics:
            metrics['phase_ms'] = MappingProxyType(phase_times)
            metrics['tiles_floor'] = grid.count(FLOOR)
            metrics['tiles_wall'] = grid.count(WALL)
            metrics['tiles_door'] = grid.count(DOOR)
            metrics['tiles_void'] = grid.count(VOID)
        return GenerationResult(
            map=grid.snapshot(),
            bounds=grid.bounds(),
            shape=kind,
            size=base_size,
            walkable=count_walkable(grid),
            rooms=tuple(rooms),
            validated=connected,
            attempts=n + 1,
            seed=self.seed,
            max_size=size,
            metrics=metrics,
        )


def generate(
    depth: int = 1,
    force_shape: Union[ShapeKind, str, None] = None,
    *,
    max_size: Optional[int] = None,
    seed: Optional[int] = None,
) -> GenerationResult:
    """One-shot convenience wrapper around ``MapGenerator(...).generate``."""
    return MapGenerator(max_size, seed=seed).generate(depth, force_shape)


__all__ = [
    "MapGenerator",
    "GenerationResult",
    "Rejected",
    "AttemptOutcome",
    "SUCCESS",
    "FORCED_FALLBACK",
    "base_size_for",
    "generate",
]
