"""Angle conversion and normalisation helpers."""

from __future__ import annotations

import math

__all__ = [
    "d2r",
    "r2d",
    "limit",
    "wrap_angle_rad",
    "wrap_angle_deg",
    "make_angle_rad_positive",
    "make_angle_deg_positive",
]


def d2r(degree: float) -> float:
    """Convert degrees to radians."""
    return degree * (math.pi / 180)


def r2d(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * (180 / math.pi)


def wrap_angle_rad(angle: float) -> float:
    """Wrap an angle in radians into the interval (-pi, pi]."""
    angle = math.fmod(angle, math.tau)
    while angle > math.pi:
        angle -= math.tau
    while angle <= -math.pi:
        angle += math.tau
    return angle


def wrap_angle_deg(angle: float) -> float:
    """Wrap an angle in degrees into the interval (-180, 180]."""
    return r2d(wrap_angle_rad(d2r(angle)))


def limit(min_val: float, value: float, max_val: float) -> float:
    """Wrap ``value`` (radians) and clamp it between ``min_val`` and ``max_val``."""
    value = wrap_angle_rad(value)
    return max(min_val, min(value, max_val))


def make_angle_rad_positive(angle: float) -> float:
    """Return a strictly positive equivalent of ``angle``; zero maps to a full turn."""
    if angle > 0:
        return angle
    return angle + math.tau


def make_angle_deg_positive(angle: float) -> float:
    """Degree version of :func:`make_angle_rad_positive`."""
    return r2d(make_angle_rad_positive(d2r(angle)))