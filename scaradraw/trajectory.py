"""Feeding a drawn path out point by point at a bounded speed."""

from __future__ import annotations

import math
import time
from typing import Callable

__all__ = ["TrajectorySpeedManipulator"]

Point = tuple[float, float]
TimedPoint = tuple[float, Point]


class TrajectorySpeedManipulator:
    """Consumes a shared, mutable list of points at a limited speed.

    The list is modified in place: points are advanced along their segment
    and removed once reached, so other code may keep appending to it.
    Times are reported in milliseconds.
    """

    def __init__(
        self,
        path: list[Point] | None,
        derivative_limit: float,
        length_step_size: float,
        starting_point: Point | None = None,
        *,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.path = path
        self.derivative_limit = derivative_limit
        self.length_step_size = length_step_size
        self.starting_point = starting_point
        self.last_time: float | None = None
        self._clock = clock
        self._sleep = sleep
        if starting_point is not None and path is not None:
            path.insert(0, (float(starting_point[0]), float(starting_point[1])))

    def _elapsed_ms(self, now: float) -> float:
        assert self.last_time is not None
        return int((now - self.last_time) * 1_000_000) / 1000.0

    def _head_segment(self) -> tuple[float, float, float]:
        assert self.path is not None
        (x0, y0), (x1, y1) = self.path[0], self.path[1]
        dx, dy = x1 - x0, y1 - y0
        return dx, dy, math.hypot(dx, dy)

    def next_point_timed(self) -> TimedPoint | None:
        """Advance by as much as the time since the last call allows.

        ``derivative_limit`` is read as distance per millisecond here.
        Returns ``(elapsed_ms, point)`` or ``None`` when nothing moved.
        """
        now = self._clock()
        path = self.path
        if path is None:
            self.last_time = now
            return None

        if self.last_time is None:
            self.last_time = now
            return (0.0, path[0]) if path else None

        elapsed = self._elapsed_ms(now)
        if elapsed <= 0 or self.derivative_limit <= 0.0 or len(path) < 2:
            self.last_time = now
            return None

        dx, dy, length = self._head_segment()
        required_ms = length / self.derivative_limit
        parts = required_ms / elapsed
        self.last_time = now

        if parts > 1.0:
            x0, y0 = path[0]
            new_point = (x0 + dx / parts, y0 + dy / parts)
            path[0] = new_point
            return elapsed, new_point

        path.pop(0)
        return (elapsed, path[0]) if path else None

    def _pause_ms(self, elapsed: float, length: float) -> int:
        required = (length / self.derivative_limit) * 1000
        return 0 if elapsed > required else int(required - elapsed)

    def next_point(self) -> TimedPoint | None:
        """Step along the path in chunks no longer than ``length_step_size``.

        ``derivative_limit`` is read as distance per second; the call sleeps
        as long as needed to respect it. Returns ``(time_ms, point)`` or
        ``None`` when no further point is available yet.
        """
        now = self._clock()
        path = self.path
        if path is None:
            return None

        if self.last_time is None and path:
            self.last_time = now
            return 0.0, path[0]

        if len(path) < 2 or self.last_time is None:
            return None
        if self.derivative_limit <= 0:
            raise ValueError("derivative_limit must be positive")

        dx, dy, length = self._head_segment()
        elapsed = self._elapsed_ms(now)

        if length <= self.length_step_size:
            pause = self._pause_ms(elapsed, length)
            self._sleep(pause / 1000.0)
            self.last_time = now
            path.pop(0)
            return elapsed + pause, path[0]

        if self.length_step_size <= 0:
            raise ValueError("length_step_size must be positive")
        inter_count = math.ceil(length / self.length_step_size)
        x0, y0 = path[0]
        path[0] = (x0 + dx / inter_count, y0 + dy / inter_count)
        pause = self._pause_ms(elapsed, length / inter_count)
        self._sleep(pause / 1000.0)
        self.last_time = now
        return elapsed + pause, path[0]