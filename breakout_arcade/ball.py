"""The ball: a small square box that moves, bounces and is drawn as a circle."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from .color import Color
from .excluder import DOWN_DIR, LEFT_DIR, RIGHT_DIR, UP_DIR, BoundaryEdge
from .shapes import AARectangle, Circle
from .utils import milliseconds_to_seconds
from .vec2d import ZERO, Vec2D

if TYPE_CHECKING:
    from .screen import Screen


class Ball:
    """A ball tracked by its bounding box, with a velocity and a speed multiplier."""

    RADIUS = 3.0

    def __init__(self, pos: Vec2D = ZERO, radius: float = RADIUS) -> None:
        self._bbox = AARectangle.from_size(
            pos - Vec2D(radius, radius), radius * 2.0, radius * 2.0
        )
        self.velocity: Vec2D = ZERO
        self.velocity_multiplier = 1.0

    @property
    def bounding_rect(self) -> AARectangle:
        """A copy of the ball's bounding box."""
        return copy.copy(self._bbox)

    def update(self, dt: int) -> None:
        """Advance the ball by ``dt`` milliseconds of movement."""
        self._bbox.move_by(
            (self.velocity * self.velocity_multiplier) * milliseconds_to_seconds(dt)
        )

    def draw(self, screen: Screen) -> None:
        circle = Circle(self._bbox.center_point(), self.radius())
        screen.draw_circle(circle, Color.red(), True, Color.red())

    def make_flush_with_edge(self, edge: BoundaryEdge, limit_to_edge: bool) -> Vec2D:
        """Move the ball against ``edge`` on its normal side.

        Returns the point on the edge nearest the ball's new centre.
        """
        top_left = self._bbox.top_left
        p0 = edge.edge.p0
        if edge.normal == DOWN_DIR:
            self._bbox.move_to(Vec2D(top_left.x, p0.y + edge.normal.y))
        elif edge.normal == UP_DIR:
            self._bbox.move_to(Vec2D(top_left.x, p0.y - self._bbox.height()))
        elif edge.normal == RIGHT_DIR:
            self._bbox.move_to(Vec2D(p0.x + edge.normal.x, top_left.y))
        elif edge.normal == LEFT_DIR:
            self._bbox.move_to(Vec2D(p0.x - self._bbox.width(), top_left.y))

        return edge.edge.closest_point(self._bbox.center_point(), limit_to_edge)

    def move_to(self, point: Vec2D) -> None:
        """Centre the ball on ``point``."""
        radius = self.radius()
        self._bbox.move_to(point - Vec2D(radius, radius))

    def bounce(self, edge: BoundaryEdge) -> None:
        """Push the ball against ``edge`` and reflect its velocity off the edge normal."""
        self.make_flush_with_edge(edge, False)
        self.velocity = self.velocity.reflect(edge.normal)

    def stop(self) -> None:
        self.velocity = ZERO

    def radius(self) -> float:
        return self._bbox.width() / 2.0

    def position(self) -> Vec2D:
        return self._bbox.center_point()

    def increase_velocity(self, amount: float) -> None:
        self.velocity_multiplier += amount

    def decrease_velocity(self, amount: float) -> None:
        self.velocity_multiplier -= amount

    def reset_velocity(self) -> None:
        self.velocity_multiplier = 1.0