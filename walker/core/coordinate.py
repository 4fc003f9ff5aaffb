# walker/core/coordinate.py
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Union

@dataclass(frozen=True, slots=True, order=True)
class Coordinate:
    """Integer 2-D point. Used both as a grid position and as a tile marker."""
    x: int = 0
    y: int = 0

    # --- math ---
    def __add__(self, other: Operand) -> Coordinate:
        ox, oy = _split(other)
        return Coordinate(self.x + ox, self.y + oy)

    def __sub__(self, other: Operand) -> Coordinate:
        ox, oy = _split(other)
        return Coordinate(self.x - ox, self.y - oy)

    def __mul__(self, other: Operand) -> Coordinate:
        ox, oy = _split(other)
        return Coordinate(self.x * ox, self.y * oy)

    def __floordiv__(self, other: Operand) -> Coordinate:
        ox, oy = _split(other)
        return Coordinate(self.x // ox, self.y // oy)

    # --- transform ---
    def rotated_clockwise(self) -> Coordinate:
        return Coordinate(-self.y, self.x)

    def rotated_counter_clockwise(self) -> Coordinate:
        return Coordinate(self.y, -self.x)

    def flipped(self) -> Coordinate:
        return Coordinate(-self.x, -self.y)

    # --- info ---
    @property
    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def normalized(self) -> Coordinate:
        if self.is_zero:
            return Coordinate()
        m = max(abs(self.x), abs(self.y))
        return Coordinate(int(self.x / m), int(self.y / m))

    def neighbors(self) -> tuple[Coordinate, ...]:
        x, y = self.x, self.y
        return (
            Coordinate(x - 1, y - 1), Coordinate(x, y - 1), Coordinate(x + 1, y - 1),
            Coordinate(x - 1, y),                           Coordinate(x + 1, y),
            Coordinate(x - 1, y + 1), Coordinate(x, y + 1), Coordinate(x + 1, y + 1),
        )

    def neighbors_up_down_left_right(self) -> tuple[Coordinate, ...]:
        x, y = self.x, self.y
        return (
            Coordinate(x, y - 1),  # up
            Coordinate(x, y + 1),  # down
            Coordinate(x - 1, y),  # left
            Coordinate(x + 1, y),  # right
        )

    def neighbors_diagonal(self) -> tuple[Coordinate, ...]:
        x, y = self.x, self.y
        return (
            Coordinate(x - 1, y - 1), Coordinate(x + 1, y + 1),
            Coordinate(x + 1, y - 1), Coordinate(x - 1, y + 1),
        )

    def distance_from(self, other: Coordinate) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def manhattan_distance_from(self, other: Coordinate) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    # --- formatting ---
    def __format__(self, spec: str) -> str:
        """'' or 'r' -> "x/y" (0-based). 'e' -> "row:col" (1-based, editor order)."""
        if spec in ("", "r"):
            return f"{self.x}/{self.y}"
        if spec == "e":
            return f"{self.y + 1}:{self.x + 1}"
        raise ValueError(f"Invalid Coordinate format specifier '{spec}'")

    def __str__(self) -> str:
        return format(self)


Operand = Union[Coordinate, int]

# Tile markers share the coordinate representation (texture cell in the tileset).
Marker = Coordinate

def _split(other: Operand) -> tuple[int, int]:
    if isinstance(other, Coordinate):
        return other.x, other.y
    if isinstance(other, int):
        return other, other
    raise TypeError(f"unsupported operand for Coordinate: {type(other).__name__}")
