"""The player's paddle."""

from __future__ import annotations

from enum import IntFlag
from typing import TYPE_CHECKING, Optional

from .ball import Ball
from .color import Color
from .excluder import LEFT_DIR, RIGHT_DIR, EdgeType, Excluder
from .shapes import AARectangle
from .utils import is_equal, is_greater_than_or_equal, milliseconds_to_seconds
from .vec2d import ZERO, Vec2D

if TYPE_CHECKING:
    from .screen import Screen


class PaddleDirection(IntFlag):
    LEFT = 1 << 0
    RIGHT = 1 << 1


class Paddle(Excluder):
    """A rectangle that moves sideways inside a boundary and bounces the ball."""

    PADDLE_WIDTH = 30
    PADDLE_HEIGHT = 4
    VELOCITY = 150.0
    CORNER_BOUNCE_AMT = 0.2

    def __init__(
        self,
        rect: Optional[AARectangle] = None,
        boundary: Optional[AARectangle] = None,
    ) -> None:
        super().__init__(rect)
        self.boundary = boundary if boundary is not None else AARectangle()
        self._direction = 0

    @property
    def direction(self) -> PaddleDirection:
        return PaddleDirection(self._direction)

    def update(self, dt: int, ball: Ball) -> None:
        """Push a ball lodged inside out of the bottom, then move and keep in bounds."""
        if self.rect.contains_point(ball.position()):
            ball.make_flush_with_edge(self.edge(EdgeType.BOTTOM), True)

        if not self._direction:
            return

        both = PaddleDirection.LEFT | PaddleDirection.RIGHT
        if self._direction & both == both:
            direction = ZERO
        elif self._direction == PaddleDirection.LEFT:
            direction = LEFT_DIR
        else:
            direction = RIGHT_DIR

        self.move_by(direction * self.VELOCITY * milliseconds_to_seconds(dt))

        rect = self.rect
        if is_greater_than_or_equal(self.boundary.top_left.x, rect.top_left.x):
            self.move_to(Vec2D(self.boundary.top_left.x, rect.top_left.y))
        elif is_greater_than_or_equal(rect.bottom_right.x, self.boundary.bottom_right.x):
            self.move_to(
                Vec2D(self.boundary.bottom_right.x - rect.width(), rect.top_left.y)
            )

    def draw(self, screen: Screen) -> None:
        screen.draw_rect(self.rect, Color.blue(), True, Color.blue())

    def bounce(self, ball: Ball) -> bool:
        """Bounce ``ball`` if it touches the paddle; True when it did.

        A ball hitting the top edge near the corner it is travelling towards
        is sent straight back the way it came.
        """
        edge = self.has_collided(ball.bounding_rect)
        if edge is None:
            return False

        point_on_edge = ball.make_flush_with_edge(edge, True)

        if edge.edge == self.edge(EdgeType.TOP).edge:
            edge_length = edge.edge.length()
            if is_equal(edge_length, 0.0):
                raise ValueError("paddle top edge has zero length")
            tx = (point_on_edge.x - edge.edge.p0.x) / edge_length
            vx = ball.velocity.x
            if (tx <= self.CORNER_BOUNCE_AMT and vx > 0) or (
                tx >= 1.0 - self.CORNER_BOUNCE_AMT and vx < 0
            ):
                ball.velocity = -ball.velocity
                return True

        ball.velocity = ball.velocity.reflect(edge.normal)
        return True

    def set_movement_direction(self, direction: PaddleDirection) -> None:
        self._direction |= int(direction)

    def unset_movement_direction(self, direction: PaddleDirection) -> None:
        self._direction &= ~int(direction)

    def stop_movement(self) -> None:
        self._direction = 0

    def is_moving_left(self) -> bool:
        return self._direction == PaddleDirection.LEFT

    def is_moving_right(self) -> bool:
        return self._direction == PaddleDirection.RIGHT