"""Two-dimensional vectors and the collision tests used on the grid."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other) -> Vec2:
        o = _as_vec(other)
        return Vec2(self.x + o.x, self.y + o.y)

    __radd__ = __add__

    def __sub__(self, other) -> Vec2:
        o = _as_vec(other)
        return Vec2(self.x - o.x, self.y - o.y)

    def __rsub__(self, other) -> Vec2:
        return _as_vec(other) - self

    def __mul__(self, other) -> Vec2:
        o = _as_vec(other)
        return Vec2(self.x * o.x, self.y * o.y)

    __rmul__ = __mul__

    def __truediv__(self, other) -> Vec2:
        o = _as_vec(other)
        return Vec2(self.x / o.x, self.y / o.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0:
            return Vec2()
        return Vec2(self.x / length, self.y / length)

    def floor(self) -> Vec2:
        return Vec2(float(math.floor(self.x)), float(math.floor(self.y)))

    def ceil(self) -> Vec2:
        return Vec2(float(math.ceil(self.x)), float(math.ceil(self.y)))

    def dot(self, other) -> float:
        o = _as_vec(other)
        return self.x * o.x + self.y * o.y

    def distance(self, other) -> float:
        return (self - _as_vec(other)).length()


def _as_vec(value) -> Vec2:
    if isinstance(value, Vec2):
        return value
    if isinstance(value, (int, float)):
        return Vec2(float(value), float(value))
    x, y = value
    return Vec2(float(x), float(y))


def circle_circle_collision(a, radius_a: float, b, radius_b: float) -> bool:
    """True when two circles overlap (touching does not count)."""
    return _as_vec(a).distance(b) < radius_a + radius_b


def circle_box_resolution(position, radius: float, box_min, box_max) -> Vec2 | None:
    """Offset pushing a circle out of an axis-aligned box, or None if they do not overlap."""
    position = _as_vec(position)
    lo = _as_vec(box_min)
    hi = _as_vec(box_max)
    closest = Vec2(min(max(position.x, lo.x), hi.x), min(max(position.y, lo.y), hi.y))
    direction = position - closest
    distance = direction.length()
    if not distance < radius:
        return None
    inside = lo.x < position.x < hi.x and lo.y < position.y < hi.y
    if inside or distance == 0:
        normal = -direction
    else:
        normal = direction / distance
    return normal * ((radius - distance) / radius)


def circle_box_collision(position, radius: float, box_min, box_max) -> bool:
    """True when a circle overlaps an axis-aligned box."""
    return circle_box_resolution(position, radius, box_min, box_max) is not None