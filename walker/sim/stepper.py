# walker/sim/stepper.py
from __future__ import annotations
import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Collection

from walker.core.coordinate import Coordinate
from walker.core.grid import Grid
from walker.world.pathing import unit_paths
from walker.world.woodland import EMPTY, FOREST, TARGET_TILES, UNIT_TARGETS, RouteMapping

logger = logging.getLogger(__name__)

class UnitState(Enum):
    IDLE = "idle"        # no path left
    MOVING = "moving"    # more than one tile left
    ARRIVED = "arrived"  # standing on the target, restored next tick

def can_move_to(grid: Grid, to: Coordinate, targets: Collection[Coordinate] = TARGET_TILES) -> bool:
    """A unit may step onto an empty tile or any target tile."""
    marker = grid[to]
    return marker == EMPTY or marker in targets

@dataclass
class Simulation:
    """
    Plays unit paths back one tile per tick on a working copy of the map.

    Within a tick, units move one after another in path-map order against the
    same snapshot, so a unit sees the moves of units processed before it in
    that tick. A unit whose next tile is taken waits and tries again next tick.
    """
    template: Grid
    routes: tuple[RouteMapping, ...] = UNIT_TARGETS
    blocking: Coordinate = FOREST
    grid: Grid = field(init=False)
    paths: dict[Coordinate, deque[Coordinate]] = field(init=False)
    paused: bool = field(default=False, init=False)
    ticks: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.routes = tuple(self.routes)
        self._targets = frozenset(r.target_tile for r in self.routes)
        self.reset()

    # ---- control ----
    def reset(self) -> None:
        """Back to the map template with freshly computed paths."""
        paths = unit_paths(self.template, self.routes, blocking=self.blocking)
        self.grid, self.paths = self.template.copy(), {u: deque(p) for u, p in paths.items()}
        self.ticks = 0
        logger.info("Simulation reset: %d unit path(s)", len(self.paths))

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        logger.info("Simulation %s", "paused" if self.paused else "resumed")
        return self.paused

    # ---- queries ----
    @property
    def finished(self) -> bool:
        return not any(self.paths.values())

    def unit_state(self, unit: Coordinate) -> UnitState:
        path = self.paths.get(unit)
        if not path:
            return UnitState.IDLE
        if len(path) == 1:
            return UnitState.ARRIVED
        return UnitState.MOVING

    # ---- stepping ----
    def tick(self) -> int:
        """Advance every unit by at most one tile. Returns how many units moved or arrived."""
        if self.paused:
            return 0

        changed = 0
        for unit, path in self.paths.items():
            if not path:
                continue

            here = path[0]
            if len(path) == 1:
                # arrived: put the target tile back where the unit stood
                self.grid[here] = self.template[here]
                path.clear()
                changed += 1
                logger.debug("Unit from %s arrived at %s", unit, here)
                continue

            to = path[1]
            if can_move_to(self.grid, to, self._targets):
                self.grid[to] = self.grid[here]
                self.grid[here] = EMPTY
                path.popleft()
                changed += 1

        self.ticks += 1
        return changed
