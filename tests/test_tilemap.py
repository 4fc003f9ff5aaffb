"""Decoding editor JSON exports into MapInfo + Grid."""

import json

import pytest

from walker.core.coordinate import Coordinate
from walker.core.grid import OutOfBounds
from walker.world.tilemap import (
    DecodeError,
    coordinate_from,
    coordinates_from_data,
    decode_map,
    parse_map,
    read_map_file,
)
from walker.world import woodland as W


# ---- coordinate_from ----
def test_number_decoding_basic():
    assert coordinate_from(0) == Coordinate()
    assert coordinate_from(0.0) == Coordinate()
    assert coordinate_from(1.2) == Coordinate(1, 2)
    assert coordinate_from(2.1) == Coordinate(2, 1)
    assert coordinate_from(10.3) == Coordinate(10, 3)
    assert coordinate_from(8.4) == W.UNIT_BLUE
    assert coordinate_from(0.6) == W.TARGET_BLUE
    assert coordinate_from(8.13) == W.UNIT_PURPLE


def test_integers_have_zero_y():
    assert coordinate_from(3) == W.FOREST
    assert coordinate_from(3.0) == W.FOREST
    assert coordinate_from(1) == W.GRASS


def test_fraction_digits_are_read_literally():
    assert coordinate_from(1.23456) == Coordinate(1, 23456)
    assert coordinate_from(8.05) == Coordinate(8, 5)
    assert coordinate_from(0.00001) == Coordinate(0, 1)


def test_trailing_zeros_are_lost():
    # the editor's own export quirk, kept on purpose
    assert coordinate_from(2.1) == coordinate_from(2.1000)
    assert coordinate_from(8.10) == W.UNIT_RED


def test_non_positive_and_non_numbers_are_empty():
    for value in (-1, -0.5, -8.4, None, "8.4", True, [1], float("nan"), float("inf"), 10**400, -10**400):
        assert coordinate_from(value) == Coordinate()


def test_decodes_json_data_array():
    data = json.loads('{"data": [0, 1.2, 2.1, 3]}')["data"]
    assert coordinates_from_data(data) == [
        Coordinate(0, 0), Coordinate(1, 2), Coordinate(2, 1), Coordinate(3, 0),
    ]


# ---- whole maps ----
def test_parses_minimal_asymmetrical_map(two_by_one_json):
    tilemap = parse_map(two_by_one_json)
    assert tilemap is not None
    info, grid = tilemap.info, tilemap.grid
    assert info.canvas_size == Coordinate(64, 32)
    assert info.tile_size == Coordinate(32, 32)
    assert info.texture_filename == "MapEditor Tileset_woodland.png"
    assert info.tiles_per == Coordinate(2, 1)
    assert (grid.width, grid.height) == (2, 1)
    assert grid.cells() == [W.UNIT_BLUE, W.FOREST]
    assert grid.policy is OutOfBounds.RAISE


def test_parses_5x5_map_in_row_major_order(five_by_five_json):
    tilemap = parse_map(five_by_five_json)
    assert tilemap is not None
    grid = tilemap.grid
    assert (grid.width, grid.height) == (5, 5)
    assert len(grid) == 25

    raw = json.loads(five_by_five_json)["layers"][0]["data"]
    assert grid.cells() == [coordinate_from(v) for v in raw]
    assert grid[0, 0] == W.UNIT_BLUE
    assert grid[4, 4] == W.TARGET_BLUE
    assert grid[1, 0] == W.FOREST
    assert grid[2, 0] == Coordinate()


def _tree(**overrides):
    tree = {
        "layers": [{"tileset": "woodland.png", "data": [8.4, -1, 0.6, 3]}],
        "tilesets": [{"tilewidth": 16, "tileheight": 16}],
        "canvas": {"width": 32, "height": 32},
    }
    for path, value in overrides.items():
        node = tree
        keys = path.split(".")
        for k in keys[:-1]:
            node = node[int(k)] if k.isdigit() else node[k]
        if value is _DROP:
            del node[keys[-1]]
        else:
            node[keys[-1]] = value
    return tree


_DROP = object()


def test_decode_map_accepts_valid_tree():
    tilemap = decode_map(_tree())
    assert tilemap.info.tiles_per == Coordinate(2, 2)
    assert tilemap.grid.find(W.TARGET_BLUE) == Coordinate(0, 1)


@pytest.mark.parametrize("overrides", [
    {"tilesets": []},
    {"tilesets.0.tilewidth": _DROP},
    {"tilesets.0.tileheight": 0},
    {"tilesets.0.tilewidth": "16"},
    {"canvas.width": _DROP},
    {"canvas.height": 0},
    {"canvas.width": -32},
    {"canvas": _DROP},
    {"canvas.width": 40},              # not a multiple of 16
    {"canvas.width": 10**400},
    {"canvas.height": float("inf")},
    {"tilesets.0.tilewidth": 1 << 17},
    {"layers.0.tileset": _DROP},
    {"layers.0.tileset": 7},
    {"layers": []},
    {"layers.0.data": [8.4, -1, 0.6]},  # 3 cells for a 2x2 canvas
    {"layers.0.data": _DROP},
    {"layers.0.data": {"0": 1}},
])
def test_decode_map_rejects_bad_trees(overrides):
    with pytest.raises(DecodeError):
        decode_map(_tree(**overrides))


def test_decode_map_rejects_non_objects():
    for tree in (None, [], "map", 3):
        with pytest.raises(DecodeError):
            decode_map(tree)


def test_parse_map_returns_none_on_failure(caplog):
    assert parse_map("{not json") is None
    assert parse_map(json.dumps(_tree(**{"canvas.width": 0}))) is None
    assert "canvas.width" in caplog.text


def test_parse_map_rejects_huge_integer_literals():
    huge = "9" * 400
    assert parse_map(json.dumps(_tree()).replace('"width": 32', f'"width": {huge}')) is None
    # a huge tile value decodes as empty, so only the cell count decides
    text = json.dumps(_tree()).replace("[8.4, -1, 0.6, 3]", f"[{huge}, -1, 0.6, 3]")
    tilemap = parse_map(text)
    assert tilemap is not None
    assert tilemap.grid.cells()[0] == Coordinate()
    # past the interpreter's int digit limit json itself refuses the literal
    assert parse_map(json.dumps(_tree()).replace('"width": 32', f'"width": {"9" * 5000}')) is None


def test_read_map_file(map_file, tmp_path, three_by_one_json):
    path = map_file(three_by_one_json)
    assert read_map_file(path) == three_by_one_json
    assert read_map_file(tmp_path / "missing.json") == ""
