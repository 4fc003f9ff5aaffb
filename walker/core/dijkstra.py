# walker/core/dijkstra.py
from __future__ import annotations
import heapq
import itertools
import math
from typing import Any, Callable, Hashable, Iterable, NamedTuple, TypeVar, Union

N = TypeVar("N", bound=Hashable)
D = TypeVar("D", int, float)

class Edge(NamedTuple):
    weight: Any   # int or float
    node: Any

Adjacent = Callable[[N], Iterable[Union[Edge, tuple]]]
DistanceMap = dict  # node -> distance, missing means unreachable (+inf)
PathMap = dict      # node -> set of equally short predecessors

def distance_or_inf(distances: DistanceMap, node) -> float:
    return distances.get(node, math.inf)

def dijkstra(
    start: N,
    adjacent: Adjacent,
    start_distance: D = 0,
) -> tuple[dict[N, D], dict[N, set[N]]]:
    """
    Single-source shortest paths over whatever graph `adjacent` describes.

    `adjacent(node)` yields (weight, neighbor) pairs. Returns (distances, previous)
    where previous[node] holds *every* neighbor that reaches node at its optimal
    distance, so ties between equally short routes are kept rather than broken.

    Nodes missing from `previous` (other than start) can't reach start.
    Stale heap entries are not removed; re-expanding one can't lower any
    distance or add a predecessor, it only costs a little work.
    """
    distances: dict[N, D] = {start: start_distance}
    previous: dict[N, set[N]] = {}

    # counter breaks distance ties so nodes never have to be comparable
    seq = itertools.count()
    queue: list[tuple[D, int, N]] = [(start_distance, next(seq), start)]

    while queue:
        distance, _, current = heapq.heappop(queue)

        for weight, other in adjacent(current):
            candidate = distance + weight
            if candidate < distance_or_inf(distances, other):
                distances[other] = candidate
                heapq.heappush(queue, (candidate, next(seq), other))
            if candidate <= distance_or_inf(distances, other):
                previous.setdefault(other, set()).add(current)

    return distances, previous
