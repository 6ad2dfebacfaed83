"""Two-dimensional vector with tolerant equality."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from .utils import EPSILON, is_equal


@dataclass(frozen=True, eq=False)
class Vec2D:
    """An immutable 2D vector; equality allows for EPSILON of difference."""

    x: float = 0.0
    y: float = 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return is_equal(self.x, other.x) and is_equal(self.y, other.y)

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"X: {self.x:g} Y: {self.y:g}"

    def __neg__(self) -> Vec2D:
        return Vec2D(-self.x, -self.y)

    def __add__(self, other: Vec2D) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return Vec2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2D) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return Vec2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> Vec2D:
        if not isinstance(scale, (int, float)):
            return NotImplemented
        return Vec2D(scale * self.x, scale * self.y)

    __rmul__ = __mul__

    def __truediv__(self, scale: float) -> Vec2D:
        if not isinstance(scale, (int, float)):
            return NotImplemented
        if abs(scale) <= EPSILON:
            raise ZeroDivisionError("vector divided by a value too close to zero")
        return Vec2D(self.x / scale, self.y / scale)

    def magnitude2(self) -> float:
        return self.dot(self)

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude2())

    def unit_vec(self) -> Vec2D:
        """The unit vector in this direction, or zero for a near-zero vector."""
        magnitude = self.magnitude()
        if magnitude > EPSILON:
            return self / magnitude
        return ZERO

    def normalized(self) -> Vec2D:
        """This vector scaled to unit length; near-zero vectors are returned unchanged."""
        magnitude = self.magnitude()
        if magnitude > EPSILON:
            return self / magnitude
        return self

    def distance(self, other: Vec2D) -> float:
        return (other - self).magnitude()

    def dot(self, other: Vec2D) -> float:
        return self.x * other.x + self.y * other.y

    def project_onto(self, other: Vec2D) -> Vec2D:
        unit = other.unit_vec()
        return unit * self.dot(unit)

    def angle_between(self, other: Vec2D) -> float:
        cosine = self.unit_vec().dot(other.unit_vec())
        return math.acos(max(-1.0, min(1.0, cosine)))

    def reflect(self, normal: Vec2D) -> Vec2D:
        return self - 2 * self.project_onto(normal)

    def rotated(self, angle: float, around_point: Vec2D | None = None) -> Vec2D:
        """This vector rotated by ``angle`` radians around ``around_point``."""
        pivot = ZERO if around_point is None else around_point
        cosine = math.cos(angle)
        sine = math.sin(angle)
        rel = self - pivot
        return Vec2D(
            rel.x * cosine - rel.y * sine,
            rel.x * sine + rel.y * cosine,
        ) + pivot


ZERO = Vec2D(0.0, 0.0)