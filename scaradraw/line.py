"""Straight line segments in 3-D space."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field, replace

from .angles import d2r, r2d, wrap_angle_rad
from .coordinate import Coordinate
from .shape import Painter, Shape, View

__all__ = ["Direction", "Line"]


class Direction(enum.Enum):
    """Which point of a line is the anchor."""

    START = enum.auto()
    END = enum.auto()
    CENTER = enum.auto()


@dataclass
class Line(Shape):
    """A segment from ``start`` to ``end``."""

    start: Coordinate = field(default_factory=Coordinate)
    end: Coordinate = field(default_factory=Coordinate)

    @classmethod
    def from_angles(
        cls,
        anchor: Coordinate,
        anchor_type: Direction,
        x_angle_rad: float,
        z_angle_rad: float,
        length: float,
    ) -> Line:
        """Build a line of ``length`` at the given angles, anchored at one point."""
        dx = length * math.cos(x_angle_rad) * math.cos(z_angle_rad)
        dy = length * math.cos(z_angle_rad) * math.sin(x_angle_rad)
        dz = length * math.cos(x_angle_rad) * math.sin(z_angle_rad)
        offset = Coordinate(dx, dy, dz)

        if anchor_type is Direction.START:
            return cls(anchor, anchor + offset)
        if anchor_type is Direction.END:
            return cls(anchor - offset, anchor)
        half = offset / 2.0
        return cls(anchor - half, anchor + half)

    def _delta(self) -> Coordinate:
        return self.end - self.start

    def length(self) -> float:
        return self._delta().dis_from_origin()

    def center_point(self) -> Coordinate:
        return self.start + self._delta() / 2

    def angles(self) -> tuple[float, float]:
        """Angles (radians) of the line in the XY and XZ planes."""
        delta = self._delta()
        x_angle = math.atan2(delta.y, delta.x)
        z_angle = math.atan2(delta.z, delta.x)
        return wrap_angle_rad(x_angle), wrap_angle_rad(z_angle)

    def angles_deg(self) -> tuple[float, float]:
        x_angle, z_angle = self.angles()
        return r2d(x_angle), r2d(z_angle)

    def normal_angles(self) -> tuple[float, float]:
        """Angles of the line rotated by a quarter turn, in radians."""
        x_angle, z_angle = self.angles()
        quarter = d2r(90)
        return wrap_angle_rad(x_angle + quarter), wrap_angle_rad(z_angle + quarter)

    def normal_angles_deg(self) -> tuple[float, float]:
        x_angle, z_angle = self.normal_angles()
        return r2d(x_angle), r2d(z_angle)

    def cut_or_extend(self, by_length: float, from_where: Direction) -> Line:
        """Lengthen (or shorten, if negative) the line in place and return it."""
        length = self.length()
        if length == 0.0:
            return self
        offset = self._delta() * (by_length / length)

        if from_where is Direction.START:
            self.start = self.start - offset
        elif from_where is Direction.END:
            self.end = self.end + offset
        else:
            half = offset / 2.0
            self.start = self.start - half
            self.end = self.end + half
        return self

    def projection(self, view: View) -> Line:
        """Return a copy whose start point is flattened onto the view's plane.

        Only the start point is flattened; the end point is kept as it is.
        """
        if view is View.SIDE_VIEW:
            start = replace(self.start, z=0)
        else:
            start = replace(self.start, y=0)
        projected = Line(start, self.end)
        projected.painter_transform = self.painter_transform
        return projected

    def draw(self, painter: Painter, view: View) -> None:
        self._apply_style(
            painter,
            lambda p: p.set_pen(color=(0, 0, 0, 255), width=2, cap="round"),
        )
        if view is View.SIDE_VIEW:
            painter.draw_line(self.start.x, self.start.y, self.end.x, self.end.y)
        else:
            painter.draw_line(self.start.x, self.start.z, self.end.x, self.end.z)