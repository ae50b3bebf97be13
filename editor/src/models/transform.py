"""Geometry data structures shared by the drag engine and the editor canvas."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """2D vector for coordinate pairs.

    Used for any x/y pair across the editor's spaces:
    - Window pixels (top-left origin, Y-down)
    - World units (viewport-center origin, Y-up)
    - Offsets and sizes
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other):
        """Component-wise product with another Vec2, or scale by a number."""
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        return Vec2(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __neg__(self):
        return Vec2(-self.x, -self.y)

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its minimum corner and size.

    Bounds are inclusive on all four edges, so a point lying exactly on
    the right or bottom edge is contained.
    """
    min: Vec2
    size: Vec2

    @property
    def max(self) -> Vec2:
        return self.min + self.size

    def contains(self, point: Vec2) -> bool:
        lo, hi = self.min, self.max
        return lo.x <= point.x <= hi.x and lo.y <= point.y <= hi.y
