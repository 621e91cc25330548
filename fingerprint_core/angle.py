"""Angles in radians, kept in the range [0, 2*pi)."""

from __future__ import annotations

import math

from .geometry import Point, PointF

_TWO_PI = 2 * math.pi


def _atan(x: float, y: float) -> float:
    result = math.atan2(y, x)
    if result < 0:
        result += _TWO_PI
    return result


def from_fraction(fraction: float) -> float:
    """Convert a fraction of a full turn to radians."""
    return fraction * _TWO_PI


def to_fraction(radians: float) -> float:
    """Convert radians to a fraction of a full turn."""
    return radians / _TWO_PI


def by_bucket_center(bucket: int, resolution: int) -> float:
    """Angle at the center of a bucket when a full turn is split evenly."""
    return from_fraction((2 * bucket + 1) / (2 * resolution))


def to_vector(angle: float) -> PointF:
    """Unit vector pointing in the given direction."""
    return PointF(math.cos(angle), math.sin(angle))


def atan(point: Point | PointF) -> float:
    """Direction of a point from the origin, in [0, 2*pi)."""
    return _atan(point.x, point.y)


def to_orientation(direction: float) -> float:
    """Map a direction to an orientation, doubling the angle modulo pi."""
    if direction < math.pi:
        return 2 * direction
    return 2 * (direction - math.pi)


def add(angle1: float, angle2: float) -> float:
    """Sum of two angles wrapped once into [0, 2*pi)."""
    result = angle1 + angle2
    if result < _TWO_PI:
        return result
    return result - _TWO_PI