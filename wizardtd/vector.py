"""Two-dimensional vectors and simple collision tests."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector or point."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.magnitude()
        if length == 0:
            return Vec2(0.0, 0.0)
        return Vec2(self.x / length, self.y / length)

    def rotated(self, angle: float) -> Vec2:
        """The vector rotated by ``angle`` radians."""
        c, s = math.cos(angle), math.sin(angle)
        return Vec2(self.x * c - self.y * s, self.x * s + self.y * c)


def circles_overlap(p1: Vec2, r1: float, p2: Vec2, r2: float) -> bool:
    """True when two circles intersect (touching does not count)."""
    return (p1 - p2).magnitude() < r1 + r2


def rects_overlap(min1: Vec2, max1: Vec2, min2: Vec2, max2: Vec2) -> bool:
    """True when two axis-aligned rectangles share at least one point."""
    if max1.x < min2.x or max2.x < min1.x:
        return False
    if max1.y < min2.y or max2.y < min1.y:
        return False
    return True