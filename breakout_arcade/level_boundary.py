"""The walls around the playing field."""

from __future__ import annotations

from typing import Optional

from .ball import Ball
from .excluder import BoundaryEdge, EdgeType, Excluder
from .shapes import AARectangle


class LevelBoundary:
    """A rectangle whose edges face inwards and keep the ball inside."""

    def __init__(self, boundary: Optional[AARectangle] = None) -> None:
        self._includer = Excluder(boundary, reverse_normals=True)

    def has_collided(self, ball: Ball) -> Optional[BoundaryEdge]:
        """The first wall the ball is closer to than its radius, or None."""
        position = ball.position()
        radius = ball.radius()
        for edge_type in EdgeType:
            edge = self._includer.edge(edge_type)
            if edge.edge.min_distance_from(position) < radius:
                return edge
        return None

    def rect(self) -> AARectangle:
        return self._includer.rect