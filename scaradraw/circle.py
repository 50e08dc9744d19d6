"""Circles in the XY plane, with intersection and path sampling."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .coordinate import Coordinate
from .line import Direction, Line
from .shape import Painter, Shape, View

__all__ = ["Circle"]

_DEFAULT_FILL = (0, 0, 0, 50)


def _default_style(painter: Painter) -> None:
    painter.set_brush(_DEFAULT_FILL)


@dataclass
class Circle(Shape):
    """A circle given by its centre and radius."""

    center: Coordinate = field(default_factory=Coordinate)
    radius: float = 0.0

    @property
    def bottom_left(self) -> Coordinate:
        """Corner of the bounding box, offset by the radius on every axis."""
        return self.center - self.radius

    def closest_point_to_origin(self) -> Coordinate:
        """Point found by extending the origin-to-centre line by the radius."""
        line = Line(Coordinate(), self.center)
        return line.cut_or_extend(self.radius, Direction.END).end

    def circle_intersection(self, other: Circle) -> list[Coordinate] | None:
        """Intersection points with ``other`` in the XY plane.

        Returns ``None`` when the circles do not meet, an empty list when
        they coincide, one point when they touch and two otherwise.
        """
        x0, y0 = self.center.x, self.center.y
        x1, y1 = other.center.x, other.center.y
        r0, r1 = self.radius, other.radius

        dx = x1 - x0
        dy = y1 - y0
        d = math.hypot(dx, dy)

        if d > r0 + r1 or d < abs(r0 - r1):
            return None
        if d == 0 and r0 == r1:
            return []

        a = (r0 * r0 - r1 * r1 + d * d) / (2 * d)
        h = math.sqrt(max(r0 * r0 - a * a, 0.0))

        x2 = x0 + a * dx / d
        y2 = y0 + a * dy / d
        rx = -dy * (h / d)
        ry = dx * (h / d)

        p1 = Coordinate(x2 + rx, y2 + ry, 0)
        if h == 0:
            return [p1]
        return [p1, Coordinate(x2 - rx, y2 - ry, 0)]

    def path(self, max_chord: float) -> list[tuple[float, float]]:
        """Points around the circle so that no chord exceeds ``max_chord``."""
        if max_chord <= 0.0:
            max_chord = 1.0
        circumference = 2.0 * math.pi * self.radius
        segments = max(3, math.ceil(circumference / max_chord))
        cx, cy = self.center.x, self.center.y
        return [
            (
                cx + self.radius * math.cos(2.0 * math.pi * i / segments),
                cy + self.radius * math.sin(2.0 * math.pi * i / segments),
            )
            for i in range(segments)
        ]

    def draw(self, painter: Painter, view: View) -> None:
        self._apply_style(painter, _default_style)
        corner = self.bottom_left
        second = corner.y if view is View.SIDE_VIEW else corner.z
        diameter = int(self.radius * 2)
        painter.draw_ellipse(int(corner.x), int(second), diameter, diameter)