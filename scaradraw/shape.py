"""Drawing primitives: the view enum, a recording painter and the shape base."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Any, Callable

__all__ = ["View", "Painter", "Shape"]


class View(enum.Enum):
    """Which plane a shape is projected onto when drawn."""

    TOP_VIEW = enum.auto()
    SIDE_VIEW = enum.auto()


class Painter:
    """Painter that records drawing commands instead of rasterising them.

    Drawing calls append tuples such as ``("line", x1, y1, x2, y2)`` to
    :attr:`commands`. Pen, brush and transform state can be pushed with
    :meth:`save` and popped with :meth:`restore`.
    """

    def __init__(self) -> None:
        self.commands: list[tuple[Any, ...]] = []
        self.pen: dict[str, Any] = self._make_pen()
        self.brush: tuple[int, int, int, int] | None = None
        self.origin: tuple[float, float] = (0.0, 0.0)
        self.rotation: float = 0.0
        self._stack: list[tuple[Any, ...]] = []

    @staticmethod
    def _make_pen(
        color: tuple[int, int, int, int] = (0, 0, 0, 255),
        width: float = 1,
        style: str = "solid",
        cap: str = "square",
    ) -> dict[str, Any]:
        return {"color": color, "width": width, "style": style, "cap": cap}

    def save(self) -> None:
        """Push the current pen, brush and transform."""
        self._stack.append((self.pen, self.brush, self.origin, self.rotation))

    def restore(self) -> None:
        """Pop the state pushed by the matching :meth:`save`."""
        if not self._stack:
            raise RuntimeError("restore() called without a matching save()")
        self.pen, self.brush, self.origin, self.rotation = self._stack.pop()

    def set_pen(
        self,
        color: tuple[int, int, int, int] = (0, 0, 0, 255),
        width: float = 1,
        style: str = "solid",
        cap: str = "square",
    ) -> None:
        """Replace the current pen."""
        self.pen = self._make_pen(color, width, style, cap)

    def set_brush(self, color: tuple[int, int, int, int] | None) -> None:
        """Set the fill colour, or ``None`` for no fill."""
        self.brush = color

    def translate(self, dx: float, dy: float) -> None:
        self.origin = (self.origin[0] + dx, self.origin[1] + dy)
        self.commands.append(("translate", dx, dy))

    def rotate(self, degrees: float) -> None:
        self.rotation += degrees
        self.commands.append(("rotate", degrees))

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.commands.append(("line", x1, y1, x2, y2))

    def draw_ellipse(self, x: float, y: float, width: float, height: float) -> None:
        self.commands.append(("ellipse", x, y, width, height))

    def draw_arc(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        start_deg: float,
        sweep_deg: float,
    ) -> None:
        self.commands.append(("arc", x, y, width, height, start_deg, sweep_deg))

    def draw_rounded_rect(
        self, x: float, y: float, width: float, height: float, radius: float
    ) -> None:
        self.commands.append(("rounded_rect", x, y, width, height, radius))


class Shape(ABC):
    """Base for drawable shapes with an optional custom painter style."""

    painter_transform: Callable[[Painter], None] | None = None

    def set_painter_transform(self, transform: Callable[[Painter], None] | None) -> None:
        """Install a callable that styles the painter before drawing."""
        self.painter_transform = transform

    def _apply_style(
        self, painter: Painter, default: Callable[[Painter], None]
    ) -> None:
        if self.painter_transform is not None:
            self.painter_transform(painter)
        else:
            default(painter)

    @abstractmethod
    def draw(self, painter: Painter, view: View) -> None:
        """Draw the shape onto ``painter`` as seen from ``view``."""