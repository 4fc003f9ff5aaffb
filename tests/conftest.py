"""Pytest fixtures: small editor-exported maps and a grid builder."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from walker.core.coordinate import Coordinate
from walker.core.grid import Grid
from walker.world import woodland as W

# 8.4 = blue unit, 0.6 = blue target, 3 = forest, -1 = empty
THREE_BY_ONE_MAP = """{"layers":[{"tileset":"MapEditor Tileset_woodland.png",
"data":[8.4,-1,0.6]}],"tilesets":[{"tilewidth":32,"tileheight":32}],
"canvas":{"width":96,"height":32}}"""

FIVE_BY_FIVE_MAP = """{"layers":[{"name":"world","tileset":"MapEditor Tileset_woodland.png",
"data":[8.4,3,-1,-1,-1,-1,3,-1,-1,-1,-1,3,-1,3,-1,-1,-1,
-1,3,-1,-1,-1,-1,3,0.6]}],
"tilesets":[{"name":"MapEditor Tileset_woodland.png","image":"MapEditor Tileset_woodland.png",
"imagewidth":512,"imageheight":512,"tilewidth":32,"tileheight":32}],
"canvas":{"width":160,"height":160}}"""

TWO_UNITS_MAP = """{"layers":[{"name":"world","tileset":"MapEditor Tileset_woodland.png",
"data":[8.4,-1,0.6,-1,-1,8.4]}],"tilesets":[{"tilewidth":32,"tileheight":32}],
"canvas":{"width":192,"height":32}}"""

TWO_BY_ONE_MAP = """
{
  "layers": [{
    "tileset": "MapEditor Tileset_woodland.png",
    "data": [ 8.4, 3 ]
  }],
  "tilesets": [{
    "tilewidth": 32,
    "tileheight": 32
  }],
  "canvas": { "width": 64, "height": 32 }
}
"""

# one character per tile for hand-drawn grids
LEGEND: dict[str, Coordinate] = {
    ".": W.EMPTY,
    "F": W.FOREST,
    "g": W.GRASS,
    "r": W.UNIT_RED, "R": W.TARGET_RED,
    "b": W.UNIT_BLUE, "B": W.TARGET_BLUE,
    "v": W.UNIT_GREEN, "V": W.TARGET_GREEN,
    "p": W.UNIT_PURPLE, "P": W.TARGET_PURPLE,
}


def grid_from_rows(*rows: str) -> Grid:
    width = len(rows[0])
    assert all(len(r) == width for r in rows), "ragged grid"
    return Grid(width, len(rows), [LEGEND[ch] for row in rows for ch in row])


@pytest.fixture
def make_grid():
    """Build a Grid from strings, e.g. make_grid("b.B", "F.F")."""
    return grid_from_rows


@pytest.fixture
def three_by_one_json() -> str:
    return THREE_BY_ONE_MAP


@pytest.fixture
def five_by_five_json() -> str:
    return FIVE_BY_FIVE_MAP


@pytest.fixture
def two_units_json() -> str:
    return TWO_UNITS_MAP


@pytest.fixture
def two_by_one_json() -> str:
    return TWO_BY_ONE_MAP


@pytest.fixture
def map_file(tmp_path):
    """Write JSON text to a temp file and return its path."""
    def _write(text: str, name: str = "map.json"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
