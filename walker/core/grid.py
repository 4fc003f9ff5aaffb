# walker/core/grid.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Optional, Union

from walker.core.coordinate import Coordinate, Marker

Index = Union[Coordinate, tuple[int, int]]

class OutOfBounds(Enum):
    CLAMP_TO_DEFAULT = "clamp_to_default"  # reads return grid.default, writes are dropped
    UNDEFINED = "undefined"                # no check, caller guarantees validity
    RAISE = "raise"                        # OutOfBoundsError

class OutOfBoundsError(IndexError):
    def __init__(self, coord: Coordinate, width: int, height: int) -> None:
        super().__init__(f"Out of bounds grid access at {coord} (grid is {width}x{height})")
        self.coord = coord

def _as_coord(at: Index) -> Coordinate:
    if isinstance(at, Coordinate):
        return at
    x, y = at
    return Coordinate(x, y)

@dataclass(slots=True)
class Grid:
    """Dense row-major store of tile markers."""
    width: int
    height: int
    data: list[Marker] = field(default_factory=list)
    policy: OutOfBounds = OutOfBounds.RAISE
    default: Marker = Coordinate()

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Grid size must not be negative, got {self.width}x{self.height}")
        if len(self.data) != self.width * self.height:
            raise ValueError(
                f"Grid data has {len(self.data)} cells, expected {self.width}*{self.height}"
            )

    # --- construction ---
    @classmethod
    def filled(cls, width: int, height: int, value: Marker = Coordinate(), **kwargs) -> Grid:
        return cls(width, height, [value] * (width * height), **kwargs)

    @classmethod
    def from_rows(cls, width: int, data: Iterable[Marker], **kwargs) -> Grid:
        """Build a grid from a flat row-major sequence; height follows from its length."""
        cells = list(data)
        height = len(cells) // width if width else 0
        return cls(width, height, cells, **kwargs)

    def copy(self) -> Grid:
        return Grid(self.width, self.height, list(self.data), self.policy, self.default)

    # --- math ---
    def in_bounds(self, at: Index) -> bool:
        c = _as_coord(at)
        return 0 <= c.x < self.width and 0 <= c.y < self.height

    def _index(self, c: Coordinate) -> int:
        return c.y * self.width + c.x

    # --- access ---
    def get(self, at: Index, policy: Optional[OutOfBounds] = None) -> Marker:
        c = _as_coord(at)
        policy = self.policy if policy is None else policy
        if policy is not OutOfBounds.UNDEFINED and not self.in_bounds(c):
            if policy is OutOfBounds.RAISE:
                raise OutOfBoundsError(c, self.width, self.height)
            return self.default
        return self.data[self._index(c)]

    def set(self, at: Index, value: Marker, policy: Optional[OutOfBounds] = None) -> None:
        c = _as_coord(at)
        policy = self.policy if policy is None else policy
        if policy is not OutOfBounds.UNDEFINED and not self.in_bounds(c):
            if policy is OutOfBounds.RAISE:
                raise OutOfBoundsError(c, self.width, self.height)
            return
        self.data[self._index(c)] = value

    def __getitem__(self, at: Index) -> Marker:
        return self.get(at)

    def __setitem__(self, at: Index, value: Marker) -> None:
        self.set(at, value)

    def __len__(self) -> int:
        return len(self.data)

    def cells(self) -> list[Marker]:
        return list(self.data)

    def clear(self) -> None:
        """Reset every cell to this grid's default marker."""
        self.data[:] = [self.default] * len(self.data)

    # --- enumeration / search ---
    def coordinates(self) -> Iterator[Coordinate]:
        """Row-major; every call starts over."""
        for y in range(self.height):
            for x in range(self.width):
                yield Coordinate(x, y)

    def find(self, value: Marker) -> Optional[Coordinate]:
        for c in self.coordinates():
            if self.data[self._index(c)] == value:
                return c
        return None

    def find_all(self, value: Marker) -> list[Coordinate]:
        return [c for c in self.coordinates() if self.data[self._index(c)] == value]
