# walker/world/trace.py
from __future__ import annotations
import json
from typing import Mapping, Sequence

from walker.core.coordinate import Coordinate

Record = dict[str, list]

def trace_records(paths: Mapping[Coordinate, Sequence[Coordinate]]) -> list[Record]:
    """One {"unit": [x, y], "path": [[x, y], ...]} record per unit, in mapping order."""
    return [
        {"unit": list(unit.as_tuple()), "path": [list(c.as_tuple()) for c in path]}
        for unit, path in paths.items()
    ]

def dump_records(paths: Mapping[Coordinate, Sequence[Coordinate]], indent: int | None = None) -> str:
    return json.dumps(trace_records(paths), indent=indent)
