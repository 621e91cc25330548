"""Small arithmetic helpers used throughout the pipeline."""

from __future__ import annotations

from .geometry import Point, PointF, Size, SizeF


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


def div_round_up(value: int, divider: int) -> int:
    """Integer division rounding up for non-negative values."""
    return _trunc_div(value + divider - 1, divider)


def interpolate_int(index: int, count: int, range_: int) -> int:
    """Scale index out of count onto range_, rounding to nearest."""
    return _trunc_div(index * range_ + _trunc_div(count, 2), count)


def interpolate(value0: float, value1: float, fraction: float) -> float:
    """Linear interpolation between two values."""
    return value0 + fraction * (value1 - value0)


def interpolate_rect(
    top_left: float,
    top_right: float,
    bottom_left: float,
    bottom_right: float,
    fraction: PointF,
) -> float:
    """Bilinear interpolation of four corner values at a fractional position."""
    left = interpolate(bottom_left, top_left, fraction.y)
    right = interpolate(bottom_right, top_right, fraction.y)
    return interpolate(left, right, fraction.x)


def count_bits(value: int) -> int:
    """Number of set bits in a 32-bit word."""
    return bin(value & 0xFFFFFFFF).count("1")


def add_points(p1: Point, p2: Point) -> Point:
    return p1 + Size.from_point(p2)


def add_points_f(p1: PointF, p2: PointF) -> PointF:
    return p1 + SizeF.from_point(p2)


def scale(scalar: float, point: PointF) -> PointF:
    return PointF(scalar * point.x, scalar * point.y)