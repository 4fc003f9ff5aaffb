# walker/world/pathing.py
from __future__ import annotations
import logging
from typing import Iterable

from walker.core.coordinate import Coordinate, Marker
from walker.core.dijkstra import Edge, dijkstra
from walker.core.grid import Grid, OutOfBounds
from walker.world.woodland import FOREST, UNIT_TARGETS, RouteMapping

logger = logging.getLogger(__name__)

Path = list[Coordinate]
PathMap = dict[Coordinate, set[Coordinate]]

def find_path(grid: Grid, target: Coordinate, *, blocking: Marker = FOREST) -> PathMap:
    """
    Shortest-path predecessors toward `target` from every tile that can reach it.
    4-way moves, cost 1 per step; `blocking` tiles are never entered.
    Adjacency is symmetric, so following predecessors from any tile walks it to target.
    """
    def adjacent(at: Coordinate) -> list[Edge]:
        return [
            Edge(1, n) for n in at.neighbors_up_down_left_right()
            if grid.in_bounds(n) and grid.get(n, OutOfBounds.RAISE) != blocking
        ]

    _, previous = dijkstra(target, adjacent)
    return previous

def trace_path(previous: PathMap, unit: Coordinate, target: Coordinate) -> Path:
    """[unit .. target]. Stops early only if `unit` wasn't reachable."""
    path: Path = [unit]
    cur = unit
    while cur in previous and cur != target:
        # any equally short predecessor will do; which one is set-order dependent
        cur = next(iter(previous[cur]))
        path.append(cur)
    return path

def unit_paths(
    grid: Grid,
    routes: Iterable[RouteMapping] = UNIT_TARGETS,
    *,
    blocking: Marker = FOREST,
) -> dict[Coordinate, Path]:
    """One path per unit tile that can reach its route's target; others are left out."""
    paths: dict[Coordinate, Path] = {}
    for route in routes:
        target = grid.find(route.target_tile)
        if target is None:
            logger.debug("No target tile %s on map, skipping route", route.target_tile)
            continue

        previous = find_path(grid, target, blocking=blocking)

        for unit_start in grid.find_all(route.unit_tile):
            if unit_start not in previous:
                logger.debug("Unit at %s can't reach target at %s", unit_start, target)
                continue
            paths[unit_start] = trace_path(previous, unit_start, target)
            logger.debug("Unit at %s -> %s in %d steps", unit_start, target, len(paths[unit_start]) - 1)
    return paths
