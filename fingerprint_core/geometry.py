"""Integer and floating point geometry primitives."""

from __future__ import annotations

from dataclasses import dataclass, replace


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


@dataclass(frozen=True)
class Size:
    """Integer extent."""

    width: int
    height: int

    @classmethod
    def from_point(cls, point: Point) -> Size:
        return cls(point.x, point.y)


@dataclass(frozen=True)
class Point:
    """Integer point."""

    x: int
    y: int

    def __add__(self, other: object) -> Point:
        if isinstance(other, Size):
            return Point(self.x + other.width, self.y + other.height)
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: object) -> Point:
        if isinstance(other, Size):
            return Point(self.x - other.width, self.y - other.height)
        return NotImplemented


@dataclass(frozen=True)
class SizeF:
    """Floating point extent."""

    width: float
    height: float

    @classmethod
    def from_point(cls, point: PointF) -> SizeF:
        return cls(point.x, point.y)


@dataclass(frozen=True)
class PointF:
    """Floating point point."""

    x: float
    y: float

    @classmethod
    def from_point(cls, point: Point) -> PointF:
        return cls(float(point.x), float(point.y))

    def __add__(self, other: object) -> PointF:
        if isinstance(other, SizeF):
            return PointF(self.x + other.width, self.y + other.height)
        if isinstance(other, PointF):
            return PointF(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __rmul__(self, factor: float) -> PointF:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return PointF(factor * self.x, factor * self.y)


@dataclass(frozen=True)
class Range:
    """Half-open integer interval [begin, end)."""

    begin: int
    end: int

    @classmethod
    def from_length(cls, length: int) -> Range:
        return cls(0, length)

    @property
    def length(self) -> int:
        return self.end - self.begin

    def interpolate(self, index: int, count: int) -> int:
        """Map index out of count linearly onto the range, rounding to nearest."""
        return _trunc_div(index * self.length + _trunc_div(count, 2), count) + self.begin


@dataclass(frozen=True)
class PolarPoint:
    """Distance with an angle stored as an 8-bit value."""

    distance: int
    angle: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "angle", self.angle & 0xFF)


@dataclass
class Rectangle:
    """Axis-aligned integer rectangle with its origin at the bottom left."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @classmethod
    def from_points(cls, begin: Point, end: Point) -> Rectangle:
        return cls(begin.x, begin.y, end.x - begin.x, end.y - begin.y)

    @classmethod
    def from_size(cls, size: Size) -> Rectangle:
        return cls(0, 0, size.width, size.height)

    @classmethod
    def from_point_size(cls, at: Point, size: Size) -> Rectangle:
        return cls(at.x, at.y, size.width, size.height)

    @property
    def left(self) -> int:
        return self.x

    @left.setter
    def left(self, value: int) -> None:
        self.width += self.x - value
        self.x = value

    @property
    def bottom(self) -> int:
        return self.y

    @bottom.setter
    def bottom(self, value: int) -> None:
        self.height += self.y - value
        self.y = value

    @property
    def right(self) -> int:
        return self.x + self.width

    @right.setter
    def right(self, value: int) -> None:
        self.width = value - self.x

    @property
    def top(self) -> int:
        return self.y + self.height

    @top.setter
    def top(self, value: int) -> None:
        self.height = value - self.y

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)

    @point.setter
    def point(self, value: Point) -> None:
        self.x = value.x
        self.y = value.y

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @size.setter
    def size(self, value: Size) -> None:
        self.width = value.width
        self.height = value.height

    @property
    def range_x(self) -> Range:
        return Range(self.left, self.right)

    @property
    def range_y(self) -> Range:
        return Range(self.bottom, self.top)

    @property
    def center(self) -> Point:
        return Point(
            _trunc_div(self.right + self.left, 2),
            _trunc_div(self.bottom + self.top, 2),
        )

    @property
    def total_area(self) -> int:
        return self.width * self.height

    def contains(self, point: Point) -> bool:
        return self.left <= point.x < self.right and self.bottom <= point.y < self.top

    def relative(self, absolute: Point) -> Point:
        return Point(absolute.x - self.x, absolute.y - self.y)

    def fraction(self, absolute: Point) -> PointF:
        rel = self.relative(absolute)
        return PointF(rel.x / self.width, rel.y / self.height)

    def shift(self, relative: Point) -> None:
        self.point = self.point + relative

    def shifted(self, relative: Point) -> Rectangle:
        result = self.copy()
        result.shift(relative)
        return result

    def clip(self, other: Rectangle) -> None:
        if self.left < other.left:
            self.left = other.left
        if self.right > other.right:
            self.right = other.right
        if self.bottom < other.bottom:
            self.bottom = other.bottom
        if self.top > other.top:
            self.top = other.top

    def include(self, point: Point) -> None:
        if self.left > point.x:
            self.left = point.x
        if self.right <= point.x:
            self.right = point.x + 1
        if self.bottom > point.y:
            self.bottom = point.y
        if self.top <= point.y:
            self.top = point.y + 1

    def copy(self) -> Rectangle:
        return replace(self)