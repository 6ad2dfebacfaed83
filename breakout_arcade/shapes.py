"""Shapes used for drawing and collision: rectangles, circles, triangles."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Iterable

from .utils import is_equal, is_less_than_or_equal
from .vec2d import ZERO, Vec2D


class Shape(ABC):
    """A shape defined by a list of points."""

    def __init__(self, points: Iterable[Vec2D]) -> None:
        self._points = list(points)

    @abstractmethod
    def center_point(self) -> Vec2D:
        """The centre of the shape."""

    def points(self) -> list[Vec2D]:
        return list(self._points)

    def move_by(self, delta: Vec2D) -> None:
        self._points = [p + delta for p in self._points]

    def __copy__(self):
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone._points = list(self._points)
        return clone

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.__dict__ == other.__dict__

    __hash__ = None  # type: ignore[assignment]


class AARectangle(Shape):
    """Axis-aligned rectangle whose corners are inclusive pixel positions."""

    def __init__(self, top_left: Vec2D = ZERO, bottom_right: Vec2D = ZERO) -> None:
        super().__init__([top_left, bottom_right])

    @classmethod
    def from_size(cls, top_left: Vec2D, width: float, height: float) -> AARectangle:
        """Rectangle at ``top_left`` covering ``width`` by ``height`` whole pixels."""
        width, height = int(width), int(height)
        if width < 0 or height < 0:
            raise ValueError("rectangle size cannot be negative")
        return cls(top_left, Vec2D(top_left.x + width - 1, top_left.y + height - 1))

    def __repr__(self) -> str:
        return f"AARectangle({self.top_left!r}, {self.bottom_right!r})"

    @property
    def top_left(self) -> Vec2D:
        return self._points[0]

    @top_left.setter
    def top_left(self, value: Vec2D) -> None:
        self._points[0] = value

    @property
    def bottom_right(self) -> Vec2D:
        return self._points[1]

    @bottom_right.setter
    def bottom_right(self, value: Vec2D) -> None:
        self._points[1] = value

    def width(self) -> float:
        return self.bottom_right.x - self.top_left.x + 1

    def height(self) -> float:
        return self.bottom_right.y - self.top_left.y + 1

    def move_to(self, position: Vec2D) -> None:
        width = self.width()
        height = self.height()
        self.top_left = position
        self.bottom_right = Vec2D(position.x + width - 1, position.y + height - 1)

    def center_point(self) -> Vec2D:
        return Vec2D(
            self.top_left.x + self.width() / 2.0,
            self.top_left.y + self.height() / 2.0,
        )

    def intersects(self, other: AARectangle) -> bool:
        return not (
            other.bottom_right.x < self.top_left.x
            or other.top_left.x > self.bottom_right.x
            or other.bottom_right.y < self.top_left.y
            or other.top_left.y > self.bottom_right.y
        )

    def contains_point(self, point: Vec2D) -> bool:
        within_x = self.top_left.x <= point.x <= self.bottom_right.x
        within_y = self.top_left.y <= point.y <= self.bottom_right.y
        return within_x and within_y

    @staticmethod
    def inset(rect: AARectangle, insets: Vec2D) -> AARectangle:
        """A copy of ``rect`` shrunk by ``insets`` on every side."""
        return AARectangle.from_size(
            rect.top_left + insets,
            rect.width() - 2 * insets.x,
            rect.height() - 2 * insets.y,
        )

    def corner_points(self) -> list[Vec2D]:
        """Corners clockwise from the top left."""
        tl, br = self.top_left, self.bottom_right
        return [tl, Vec2D(br.x, tl.y), br, Vec2D(tl.x, br.y)]

    def points(self) -> list[Vec2D]:
        return self.corner_points()


class Circle(Shape):
    def __init__(self, center: Vec2D = ZERO, radius: float = 0.0) -> None:
        super().__init__([center])
        self.radius = radius

    def __repr__(self) -> str:
        return f"Circle({self._points[0]!r}, {self.radius!r})"

    def center_point(self) -> Vec2D:
        return self._points[0]

    def move_to(self, position: Vec2D) -> None:
        self._points[0] = position

    def intersects(self, other: Circle) -> bool:
        return self.center_point().distance(other.center_point()) < self.radius + other.radius

    def contains_point(self, point: Vec2D) -> bool:
        return is_less_than_or_equal(self.center_point().distance(point), self.radius)


class Triangle(Shape):
    def __init__(self, p0: Vec2D = ZERO, p1: Vec2D = ZERO, p2: Vec2D = ZERO) -> None:
        super().__init__([p0, p1, p2])

    def __repr__(self) -> str:
        return f"Triangle({self.p0!r}, {self.p1!r}, {self.p2!r})"

    @property
    def p0(self) -> Vec2D:
        return self._points[0]

    @p0.setter
    def p0(self, value: Vec2D) -> None:
        self._points[0] = value

    @property
    def p1(self) -> Vec2D:
        return self._points[1]

    @p1.setter
    def p1(self, value: Vec2D) -> None:
        self._points[1] = value

    @property
    def p2(self) -> Vec2D:
        return self._points[2]

    @p2.setter
    def p2(self, value: Vec2D) -> None:
        self._points[2] = value

    def center_point(self) -> Vec2D:
        return Vec2D(
            (self.p0.x + self.p1.x + self.p2.x) / 3.0,
            (self.p0.y + self.p1.y + self.p2.y) / 3.0,
        )

    def area(self) -> float:
        return self._area(self.p0, self.p1, self.p2)

    def contains_point(self, p: Vec2D) -> bool:
        parts = (
            self._area(p, self.p1, self.p2)
            + self._area(self.p0, p, self.p2)
            + self._area(self.p0, self.p1, p)
        )
        return is_equal(self.area(), parts)

    @staticmethod
    def _area(p0: Vec2D, p1: Vec2D, p2: Vec2D) -> float:
        return math.fabs(
            (p0.x * (p1.y - p2.y) + p1.x * (p2.y - p0.y) + p2.x * (p0.y - p1.y)) / 2.0
        )