import math

import pytest

from scaradraw.angles import r2d, wrap_angle_rad
from scaradraw.coordinate import Coordinate
from scaradraw.line import Direction, Line
from scaradraw.shape import Painter, View


def _close(a, b):
    return tuple(a) == pytest.approx(tuple(b), abs=1e-9)


def test_length_of_simple_segment():
    assert Line(Coordinate(), Coordinate(3, 4, 0)).length() == pytest.approx(5.0)


def test_from_angles_start_anchor_along_x():
    anchor = Coordinate(1, 2, 3)
    line = Line.from_angles(anchor, Direction.START, 0.0, 0.0, 5)
    assert line.start == anchor
    assert _close(line.end, anchor + Coordinate(5, 0, 0))


def test_from_angles_end_anchor():
    anchor = Coordinate(-2, 7, 0)
    line = Line.from_angles(anchor, Direction.END, math.pi / 6, 0.0, 4)
    assert line.end == anchor
    assert line.length() == pytest.approx(4)


def test_from_angles_center_anchor():
    anchor = Coordinate(10, 10, 10)
    line = Line.from_angles(anchor, Direction.CENTER, 1.0, 0.0, 8)
    assert _close(line.center_point(), anchor)
    assert line.length() == pytest.approx(8)


@pytest.mark.parametrize("x_angle", [-2.5, -1.0, 0.3, 1.2, 3.0])
def test_from_angles_round_trips_x_angle(x_angle):
    line = Line.from_angles(Coordinate(), Direction.START, x_angle, 0.0, 6)
    assert line.angles()[0] == pytest.approx(x_angle)
    assert line.length() == pytest.approx(6)


def test_center_point_is_midpoint():
    mid = Line(Coordinate(2, 4, 6), Coordinate(-8, 0, 1)).center_point()
    assert mid.x == pytest.approx(-3.0)
    assert mid.y == pytest.approx(2.0)
    assert mid.z == pytest.approx(3.5)


def test_angles_deg_matches_radians():
    line = Line(Coordinate(1, 1, 1), Coordinate(4, -2, 5))
    rad = line.angles()
    assert line.angles_deg() == pytest.approx((r2d(rad[0]), r2d(rad[1])))


def test_normal_angles_are_quarter_turn():
    line = Line(Coordinate(), Coordinate(2, 3, 1))
    x_angle, z_angle = line.angles()
    normal = line.normal_angles()
    assert normal[0] == pytest.approx(wrap_angle_rad(x_angle + math.pi / 2))
    assert normal[1] == pytest.approx(wrap_angle_rad(z_angle + math.pi / 2))
    assert line.normal_angles_deg() == pytest.approx((r2d(normal[0]), r2d(normal[1])))


def test_cut_or_extend_end_returns_self_and_keeps_start():
    line = Line(Coordinate(1, 1, 0), Coordinate(4, 5, 0))
    before = line.length()
    result = line.cut_or_extend(2.5, Direction.END)
    assert result is line
    assert line.start == Coordinate(1, 1, 0)
    assert line.length() == pytest.approx(before + 2.5)


def test_cut_or_extend_start_keeps_end_and_direction():
    line = Line(Coordinate(0, 0, 0), Coordinate(0, 3, 4))
    angles = line.angles()
    line.cut_or_extend(1.5, Direction.START)
    assert line.end == Coordinate(0, 3, 4)
    assert line.length() == pytest.approx(5 + 1.5)
    assert line.angles() == pytest.approx(angles)


def test_cut_or_extend_center_keeps_midpoint():
    line = Line(Coordinate(2, 2, 2), Coordinate(6, 8, 2))
    mid = line.center_point()
    before = line.length()
    line.cut_or_extend(-1.0, Direction.CENTER)
    assert _close(line.center_point(), mid)
    assert line.length() == pytest.approx(before - 1.0)


def test_cut_or_extend_zero_length_is_unchanged():
    point = Coordinate(3, 3, 3)
    line = Line(point, point)
    line.cut_or_extend(10, Direction.END)
    assert line.start == point and line.end == point


def test_projection_side_view_flattens_start_only():
    line = Line(Coordinate(1, 2, 3), Coordinate(4, 5, 6))
    projected = line.projection(View.SIDE_VIEW)
    assert projected.start == Coordinate(1, 2, 0)
    assert projected.end == Coordinate(4, 5, 6)
    assert line.start == Coordinate(1, 2, 3)


def test_projection_top_view_flattens_start_y():
    line = Line(Coordinate(1, 2, 3), Coordinate(4, 5, 6))
    projected = line.projection(View.TOP_VIEW)
    assert projected.start == Coordinate(1, 0, 3)
    assert projected.end == Coordinate(4, 5, 6)


def test_draw_side_view_uses_xy_and_default_pen():
    painter = Painter()
    Line(Coordinate(1, 2, 3), Coordinate(4, 5, 6)).draw(painter, View.SIDE_VIEW)
    assert painter.commands == [("line", 1, 2, 4, 5)]
    assert painter.pen["width"] == 2
    assert painter.pen["cap"] == "round"


def test_draw_top_view_uses_xz():
    painter = Painter()
    Line(Coordinate(1, 2, 3), Coordinate(4, 5, 6)).draw(painter, View.TOP_VIEW)
    assert painter.commands == [("line", 1, 3, 4, 6)]


def test_draw_with_custom_transform():
    painter = Painter()
    line = Line(Coordinate(), Coordinate(1, 1, 1))
    line.set_painter_transform(lambda p: p.set_pen(width=5, style="dot"))
    line.draw(painter, View.SIDE_VIEW)
    assert painter.pen["width"] == 5
    assert painter.pen["style"] == "dot"