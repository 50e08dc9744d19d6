"""Isosceles triangle marker inscribed in a square around a centre."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable

from .coordinate import Coordinate
from .shape import Painter, Shape, View

__all__ = ["Triangle"]

Point = tuple[float, float]


def _default_style(painter: Painter) -> None:
    painter.set_pen(color=(0, 0, 0, 255), width=2, style="solid", cap="round")


@dataclass
class Triangle(Shape):
    """Triangle of side box ``size`` centred on ``center``, rotated by ``angle``."""

    center: Coordinate = field(default_factory=Coordinate)
    size: int = 0
    angle: float = 0.0

    def __post_init__(self) -> None:
        self.size = int(self.size)

    @property
    def corner(self) -> Coordinate:
        """Corner of the bounding square."""
        return self.center - int(self.size / 2)

    def _vertices(self, convert: Callable[[float], float]) -> tuple[Point, Point, Point]:
        corner = self.corner
        half = int(self.size / 2)
        cos_a, sin_a = math.cos(self.angle), math.sin(self.angle)
        top_center = (
            convert(corner.x + half * cos_a),
            convert(corner.y - half * sin_a),
        )
        left_bottom = (
            convert(corner.x + self.size * sin_a),
            convert(corner.y + self.size * cos_a),
        )
        right_bottom = (
            convert(left_bottom[0] + self.size * cos_a),
            convert(left_bottom[1] - self.size * sin_a),
        )
        return top_center, left_bottom, right_bottom

    def corners(self) -> tuple[Point, Point, Point]:
        """Top centre, bottom left and bottom right vertices."""
        return self._vertices(float)

    def path(self) -> list[Point]:
        """Closed outline: the three vertices followed by the first again."""
        top_center, left_bottom, right_bottom = self.corners()
        return [top_center, left_bottom, right_bottom, top_center]

    def draw(self, painter: Painter, view: View) -> None:
        top_center, left_bottom, right_bottom = self._vertices(int)
        painter.save()
        self._apply_style(painter, _default_style)
        for (x1, y1), (x2, y2) in (
            (top_center, left_bottom),
            (left_bottom, right_bottom),
            (right_bottom, top_center),
        ):
            painter.draw_line(x1, y1, x2, y2)
        painter.restore()