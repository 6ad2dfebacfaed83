"""Line segments in the plane."""

from __future__ import annotations

from dataclasses import dataclass, field

from .utils import EPSILON
from .vec2d import Vec2D


@dataclass(frozen=True)
class Line2D:
    """A segment from ``p0`` to ``p1``."""

    p0: Vec2D = field(default_factory=Vec2D)
    p1: Vec2D = field(default_factory=Vec2D)

    @classmethod
    def from_coords(cls, x0: float, y0: float, x1: float, y1: float) -> Line2D:
        return cls(Vec2D(x0, y0), Vec2D(x1, y1))

    def min_distance_from(self, p: Vec2D, limit_to_segment: bool = False) -> float:
        return p.distance(self.closest_point(p, limit_to_segment))

    def closest_point(self, p: Vec2D, limit_to_segment: bool = False) -> Vec2D:
        """Point on the line (or the segment, if limited) nearest to ``p``."""
        p0_to_p = p - self.p0
        p0_to_p1 = self.p1 - self.p0
        l2 = p0_to_p1.magnitude2()
        if l2 == 0.0:
            return self.p0
        t = p0_to_p.dot(p0_to_p1) / l2
        if limit_to_segment:
            t = max(0.0, min(1.0, t))
        return self.p0 + p0_to_p1 * t

    def mid_point(self) -> Vec2D:
        return Vec2D((self.p0.x + self.p1.x) / 2.0, (self.p0.y + self.p1.y) / 2.0)

    def slope(self) -> float:
        """Rise over run; a vertical segment gives 0."""
        dx = self.p1.x - self.p0.x
        if abs(dx) < EPSILON:
            return 0.0
        return (self.p1.y - self.p0.y) / dx

    def length(self) -> float:
        return self.p1.distance(self.p0)