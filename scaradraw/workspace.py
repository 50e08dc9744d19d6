"""Reachable workspace of a two-arm (five-bar) SCARA mechanism."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from .angles import make_angle_deg_positive
from .arc import Arc
from .circle import Circle
from .coordinate import Coordinate
from .line import Line
from .shape import Painter, Shape, View

__all__ = ["WorkSpace"]

_FAINT_BLACK = (0, 0, 0, 30)


def _dashed_style(painter: Painter) -> None:
    painter.set_pen(color=_FAINT_BLACK, style="dash")
    painter.set_brush(None)


@dataclass
class WorkSpace(Shape):
    """Workspace bounded by the reach circles of the left and right arms.

    ``d`` is the distance between the two motors, ``l1_*`` the active and
    ``l2_*`` the passive arm lengths. Each motor sits ``d / 2`` either side
    of ``system_center`` along the x axis.
    """

    system_center: Coordinate
    d: float
    l1_left: float
    l2_left: float
    l1_right: float
    l2_right: float
    circle_style: Callable[[Painter], None] | None = None

    @classmethod
    def symmetric(
        cls, system_center: Coordinate, d: float, l1: float, l2: float
    ) -> WorkSpace:
        """Workspace with equal arms on both sides, drawn with faint dashed circles."""
        return cls(system_center, d, l1, l2, l1, l2, circle_style=_dashed_style)

    def _circle(self, x_offset: float, radius: float) -> Circle:
        center = Coordinate(self.system_center.x + x_offset, self.system_center.y, 0)
        circle = Circle(center, radius)
        circle.set_painter_transform(self.circle_style)
        return circle

    @property
    def s_circle_left(self) -> Circle:
        """Inner reach limit of the left arm."""
        return self._circle(-self.d / 2, self.l2_left - self.l1_left)

    @property
    def l_circle_left(self) -> Circle:
        """Outer reach limit of the left arm."""
        return self._circle(-self.d / 2, self.l2_left + self.l1_left)

    @property
    def s_circle_right(self) -> Circle:
        """Inner reach limit of the right arm."""
        return self._circle(self.d / 2, self.l2_right - self.l1_right)

    @property
    def l_circle_right(self) -> Circle:
        """Outer reach limit of the right arm."""
        return self._circle(self.d / 2, self.l2_right + self.l1_right)

    @staticmethod
    def _arranged_angles(
        circle: Circle, points: Iterable[Coordinate] | None
    ) -> list[int]:
        """Sorted whole-degree angles of ``points`` seen from the circle's centre."""
        return sorted(
            int(make_angle_deg_positive(Line(circle.center, point).angles_deg()[0]))
            for point in points or ()
        )

    def boundary_arcs(self) -> list[Arc]:
        """Arcs outlining the region both arms can reach, in drawing order."""
        s_left, s_right = self.s_circle_left, self.s_circle_right
        l_left, l_right = self.l_circle_left, self.l_circle_right
        angles = self._arranged_angles

        points = l_right.circle_intersection(l_left)
        l2l_left = angles(l_left, points)
        l2l_right = angles(l_right, points)

        points = s_left.circle_intersection(s_right)
        s2s_left = angles(s_left, points)
        s2s_right = angles(s_right, points)

        points = l_right.circle_intersection(s_left)
        l2s_right_large = angles(l_right, points)
        l2s_left_small = angles(s_left, points)

        points = l_left.circle_intersection(s_right)
        l2s_left_large = angles(l_left, points)
        l2s_right_small = angles(s_right, points)

        arcs: list[Arc] = []

        if len(l2l_left) == 2:
            if len(l2s_right_large) == 2:
                arcs.append(Arc.from_circle(l_right, l2l_right[0], l2s_right_large[0]))
                arcs.append(Arc.from_circle(l_right, l2l_right[1], l2s_right_large[1]))
                if len(s2s_left) == 2:
                    arcs.append(Arc.from_circle(s_left, l2s_left_small[0], s2s_left[0]))
                    arcs.append(Arc.from_circle(s_left, l2s_left_small[1], s2s_left[1]))
                else:
                    arcs.append(
                        Arc.from_circle(
                            s_left, l2s_left_small[0], l2s_left_small[1], False
                        )
                    )
            else:
                arcs.append(Arc.from_circle(l_right, l2l_right[0], l2l_right[1]))
                if len(s2s_left) == 2:
                    arcs.append(Arc.from_circle(s_left, s2s_left[0], s2s_left[1]))
                else:
                    arcs.append(Arc.from_circle(s_left, 0, 360))

        if len(l2l_right) == 2:
            if len(l2s_left_large) == 2:
                arcs.append(Arc.from_circle(l_left, l2l_left[0], l2s_left_large[0]))
                arcs.append(Arc.from_circle(l_left, l2l_left[1], l2s_left_large[1]))
                if len(s2s_right) == 2:
                    arcs.append(
                        Arc.from_circle(s_right, l2s_right_small[0], s2s_right[0])
                    )
                    arcs.append(
                        Arc.from_circle(s_right, l2s_right_small[1], s2s_right[1])
                    )
                else:
                    arcs.append(
                        Arc.from_circle(s_right, l2s_right_small[0], l2s_right_small[1])
                    )
            else:
                arcs.append(Arc.from_circle(l_left, l2l_left[0], l2l_left[1], False))
                if len(s2s_right) == 2:
                    arcs.append(
                        Arc.from_circle(s_right, s2s_right[0], s2s_right[1], False)
                    )
                else:
                    arcs.append(Arc.from_circle(s_right, 0, 360, False))

        return arcs

    def draw(self, painter: Painter, view: View) -> None:
        """Draw the four reach circles, then the workspace boundary arcs."""
        painter.save()
        for circle in (
            self.s_circle_left,
            self.l_circle_right,
            self.s_circle_right,
            self.l_circle_left,
        ):
            circle.draw(painter, View.SIDE_VIEW)
        painter.restore()

        for arc in self.boundary_arcs():
            arc.draw(painter, View.SIDE_VIEW)