# walker/world/tilemap.py
"""
Decoding of RiskyLab tile-map editor exports.

Only layer 0 is read, and tilesets[0] is assumed to describe that layer's tile
size (tileset filenames are not cross-checked).
"""
from __future__ import annotations
import json
import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Any, Iterable, Optional

from walker.core.coordinate import Coordinate, Marker
from walker.core.grid import Grid, OutOfBounds

logger = logging.getLogger(__name__)

class DecodeError(ValueError):
    """The structured input is missing fields or has inconsistent sizing."""

@dataclass(frozen=True, slots=True)
class MapInfo:
    canvas_size: Coordinate
    tile_size: Coordinate
    texture_filename: str

    @property
    def tiles_per(self) -> Coordinate:
        return self.canvas_size // self.tile_size

@dataclass(slots=True)
class TileMap:
    info: MapInfo
    grid: Grid

# ---- Number -> coordinate ----
def _plain_decimal(number: float) -> str:
    text = repr(number)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text

def coordinate_from(number: Any) -> Marker:
    """
    The editor exports a tile's (x, y) texture cell as one number: the integer
    part is x and the fractional digits, read as a literal decimal string, are y.
    8.4 -> (8, 4), 8.13 -> (8, 13).

    The editor's own export loses trailing zeros, so 2.1 and 2.1000 (meant as
    y=1000) both come back as (2, 1). That quirk is kept as-is.
    Non-positive and non-numeric values are the empty marker.
    """
    if isinstance(number, bool) or not isinstance(number, (int, float)):
        return Coordinate()
    try:
        number = float(number)
    except OverflowError:
        return Coordinate()
    if not number > 0 or math.isinf(number):
        return Coordinate()
    whole, _, fraction = _plain_decimal(number).partition(".")
    return Coordinate(int(whole), int(fraction) if fraction else 0)

def coordinates_from_data(values: Iterable[Any]) -> list[Marker]:
    return [coordinate_from(v) for v in values]

# ---- Structured tree helpers ----
_MISSING = object()
_MAX_SIZE = 1 << 16   # pixels; larger than any canvas the editor exports

def _lookup(tree: Any, *path: Any) -> Any:
    node = tree
    for key in path:
        if isinstance(key, int):
            if not isinstance(node, list) or not 0 <= key < len(node):
                return _MISSING
            node = node[key]
        else:
            if not isinstance(node, dict) or key not in node:
                return _MISSING
            node = node[key]
    return node

def _positive_int(tree: Any, *path: Any) -> int:
    where = ".".join(f"[{p}]" if isinstance(p, int) else str(p) for p in path).replace(".[", "[")
    value = _lookup(tree, *path)
    if value is _MISSING:
        raise DecodeError(f"{where} is missing")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"{where} is not a number: {value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise DecodeError(f"{where} is not a number: {value!r}")
    as_int = int(value)
    if as_int > _MAX_SIZE:
        raise DecodeError(f"{where} is larger than {_MAX_SIZE}")
    if as_int <= 0:
        raise DecodeError(f"{where} must be positive, got {value!r}")
    return as_int

# ---- Decoding ----
def map_info_from(tree: Any) -> MapInfo:
    tile_size = Coordinate(
        _positive_int(tree, "tilesets", 0, "tilewidth"),
        _positive_int(tree, "tilesets", 0, "tileheight"),
    )
    canvas_size = Coordinate(
        _positive_int(tree, "canvas", "width"),
        _positive_int(tree, "canvas", "height"),
    )
    if canvas_size.x % tile_size.x or canvas_size.y % tile_size.y:
        raise DecodeError(
            f"canvas {canvas_size.x}x{canvas_size.y} is not a multiple of "
            f"tile size {tile_size.x}x{tile_size.y}"
        )

    filename = _lookup(tree, "layers", 0, "tileset")
    if filename is _MISSING or not isinstance(filename, str):
        raise DecodeError("layers[0].tileset is missing")

    return MapInfo(canvas_size=canvas_size, tile_size=tile_size, texture_filename=filename)

def decode_map(tree: Any) -> TileMap:
    """Build a TileMap from a parsed JSON tree or raise DecodeError."""
    info = map_info_from(tree)

    data = _lookup(tree, "layers", 0, "data")
    if data is _MISSING:
        data = []
    if not isinstance(data, list):
        raise DecodeError(f"layers[0].data is not an array: {type(data).__name__}")
    tiles = coordinates_from_data(data)

    per = info.tiles_per
    expected = per.x * per.y
    if len(tiles) != expected:
        raise DecodeError(f"layers[0].data has {len(tiles)} tiles, expected {per.x}x{per.y}={expected}")

    return TileMap(info=info, grid=Grid(per.x, per.y, tiles, policy=OutOfBounds.RAISE))

def parse_map(json_text: str) -> Optional[TileMap]:
    """JSON text -> TileMap, or None (with a logged reason) if it can't be decoded."""
    try:
        tree = json.loads(json_text)
    except ValueError as e:   # JSONDecodeError, or an int literal past the digit limit
        logger.warning("Tilemap is not valid JSON: %s", e)
        return None
    try:
        tilemap = decode_map(tree)
    except DecodeError as e:
        logger.warning("Invalid tilemap: %s", e)
        return None

    per = tilemap.info.tiles_per
    logger.info("Loaded %dx%d tilemap using %r", per.x, per.y, tilemap.info.texture_filename)
    return tilemap

def read_map_file(path: str | Path) -> str:
    """File contents, or "" if the file can't be read."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Unable to read %s: %s", path, e)
        return ""
