"""Points, vectors, sizes, boxes and rectangles for screen and world space."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass


def _f32(value: float) -> float:
    """Round a float to single precision."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


@dataclass(frozen=True)
class Vector:
    """A 2D displacement."""

    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vector:
        """Unit vector in the same direction; NaN components for a zero vector."""
        length = self.length()
        if length == 0:
            return Vector(math.nan, math.nan)
        return Vector(self.x / length, self.y / length)

    def __add__(self, other: object) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: object) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, scale: object) -> Vector:
        if isinstance(scale, (int, float)):
            return Vector(self.x * scale, self.y * scale)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scale: object) -> Vector:
        if isinstance(scale, (int, float)):
            return Vector(self.x / scale, self.y / scale)
        return NotImplemented

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)


@dataclass(frozen=True)
class Point:
    """A 2D position."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def origin(cls) -> Point:
        """The point at (0, 0)."""
        return cls(0.0, 0.0)

    def __add__(self, other: object) -> Point:
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: object):
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        return NotImplemented


@dataclass(frozen=True)
class Size:
    """A 2D extent."""

    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class Box:
    """An axis-aligned box given by its minimum and maximum corners."""

    min: Point = Point()
    max: Point = Point()


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its origin and size."""

    origin: Point = Point()
    size: Size = Size()


@dataclass(frozen=True)
class FRect:
    """A single-precision rectangle as used by the renderer."""

    x: float
    y: float
    w: float
    h: float


def screen_rect_to_sdl(rect: Rect) -> FRect:
    """Convert a screen rect into a renderer rectangle."""
    return FRect(
        _f32(rect.origin.x),
        _f32(rect.origin.y),
        _f32(rect.size.width),
        _f32(rect.size.height),
    )


def screen_box_to_sdl(box: Box) -> FRect:
    """Convert a screen box into a renderer rectangle."""
    return FRect(
        _f32(box.min.x),
        _f32(box.min.y),
        _f32(box.max.x - box.min.x),
        _f32(box.max.y - box.min.y),
    )