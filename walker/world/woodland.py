# walker/world/woodland.py
from __future__ import annotations
from typing import NamedTuple

from walker.core.coordinate import Coordinate, Marker

# Tile markers of the "MapEditor Tileset_woodland.png" tileset, mapping colored
# units to their targets. Hard-coded for now.
#
# No yellow pair: the yellow unit sits at x=8, y=10, which the editor exports
# as 8.1 and therefore reads back as (8, 1), the red unit.

TARGET_RED: Marker = Coordinate(0, 5)
UNIT_RED: Marker = Coordinate(8, 1)
TARGET_BLUE: Marker = Coordinate(0, 6)
UNIT_BLUE: Marker = Coordinate(8, 4)
TARGET_GREEN: Marker = Coordinate(0, 7)
UNIT_GREEN: Marker = Coordinate(8, 7)
TARGET_PURPLE: Marker = Coordinate(0, 9)
UNIT_PURPLE: Marker = Coordinate(8, 13)

FOREST: Marker = Coordinate(3, 0)   # blocks movement
GRASS: Marker = Coordinate(1, 0)    # background
EMPTY: Marker = Coordinate()

class RouteMapping(NamedTuple):
    unit_tile: Marker
    target_tile: Marker

UNIT_TARGETS: tuple[RouteMapping, ...] = (
    RouteMapping(UNIT_RED, TARGET_RED),
    RouteMapping(UNIT_BLUE, TARGET_BLUE),
    RouteMapping(UNIT_GREEN, TARGET_GREEN),
    RouteMapping(UNIT_PURPLE, TARGET_PURPLE),
)

TARGET_TILES: frozenset[Marker] = frozenset(r.target_tile for r in UNIT_TARGETS)
