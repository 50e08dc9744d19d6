"""Rotated rectangles with optional rounded corners."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .angles import d2r, r2d
from .coordinate import Coordinate
from .line import Line
from .shape import Painter, Shape, View

__all__ = ["Rectangle"]

_DEFAULT_FILL = (0, 0, 0, 50)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _default_style(painter: Painter) -> None:
    painter.set_brush(_DEFAULT_FILL)


@dataclass
class Rectangle(Shape):
    """A rectangle anchored at a corner and rotated by ``angle`` radians."""

    left_top_corner: Coordinate = field(default_factory=Coordinate)
    width: int = 0
    height: int = 0
    angle: float = 0.0
    corner_radius: int = 0

    def __post_init__(self) -> None:
        self.width = int(self.width)
        self.height = int(self.height)

    @classmethod
    def from_line(cls, line: Line, height: int) -> Rectangle:
        """A rectangle of the given height lying along ``line``."""
        height = int(height)
        angle = line.angles()[0]
        half = int(height / 2)
        x = line.start.x + half * math.cos(angle - d2r(-90))
        y = line.start.y - half * math.sin(angle - d2r(-90))
        return cls(Coordinate(x, y, 0), int(line.length()), height, angle)

    def draw(self, painter: Painter, view: View) -> None:
        self._apply_style(painter, _default_style)
        painter.save()
        painter.translate(self.left_top_corner.x, self.left_top_corner.y)
        painter.rotate(_round_half_away(r2d(-self.angle)))
        painter.draw_rounded_rect(0, 0, self.width, self.height, self.corner_radius)
        painter.restore()