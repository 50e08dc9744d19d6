"""Three-dimensional point value type."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

__all__ = ["Coordinate"]


@dataclass(frozen=True)
class Coordinate:
    """A point in 3-D space.

    Ordering compares distance from the origin, while equality compares
    the components exactly.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dis_from_origin(self) -> float:
        """Euclidean distance from the origin."""
        return math.hypot(math.hypot(self.x, self.y), self.z)

    def __add__(self, other: Coordinate | float) -> Coordinate:
        if isinstance(other, Coordinate):
            return Coordinate(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, (int, float)):
            return Coordinate(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __sub__(self, other: Coordinate | float) -> Coordinate:
        if isinstance(other, Coordinate):
            return Coordinate(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, (int, float)):
            return Coordinate(self.x - other, self.y - other, self.z - other)
        return NotImplemented

    def __mul__(self, scale: float) -> Coordinate:
        if not isinstance(scale, (int, float)):
            return NotImplemented
        return Coordinate(self.x * scale, self.y * scale, self.z * scale)

    __rmul__ = __mul__

    def __truediv__(self, scale: float) -> Coordinate:
        if not isinstance(scale, (int, float)):
            return NotImplemented
        return Coordinate(self.x / scale, self.y / scale, self.z / scale)

    def __lt__(self, other: Coordinate) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.dis_from_origin() < other.dis_from_origin()

    def __le__(self, other: Coordinate) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.dis_from_origin() <= other.dis_from_origin()

    def __gt__(self, other: Coordinate) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return not (self == other or self < other)

    def __ge__(self, other: Coordinate) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self == other or self > other

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g})"