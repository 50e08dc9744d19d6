"""Circular arcs between two angles given in whole degrees."""

from __future__ import annotations

from dataclasses import dataclass

from .circle import Circle
from .shape import Painter, View

__all__ = ["Arc"]


@dataclass
class Arc(Circle):
    """Part of a circle running from ``start`` to ``end`` degrees."""

    start: int = 0
    end: int = 0
    clockwise: bool = True

    @classmethod
    def from_circle(
        cls, circle: Circle, start: int, end: int, clockwise: bool = True
    ) -> Arc:
        """Make an arc on ``circle``, keeping its painter style."""
        arc = cls(circle.center, circle.radius, start, end, clockwise)
        arc.painter_transform = circle.painter_transform
        return arc

    def sweep(self) -> int:
        """Signed span of the arc in degrees."""
        span = self.end - self.start
        if self.clockwise:
            return span
        return -(360 - span)

    def draw(self, painter: Painter, view: View) -> None:
        left = int(self.center.x - self.radius)
        top = int(self.center.y - self.radius)
        size = int(self.radius * 2)
        painter.draw_arc(left, top, size, size, self.start, self.sweep())