"""Rectangles that other rectangles collide with and bounce off."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import IntEnum

from .line2d import Line2D
from .shapes import AARectangle
from .utils import is_equal
from .vec2d import ZERO, Vec2D


class EdgeType(IntEnum):
    BOTTOM = 0
    TOP = 1
    LEFT = 2
    RIGHT = 3


UP_DIR = Vec2D(0.0, -1.0)
DOWN_DIR = Vec2D(0.0, 1.0)
LEFT_DIR = Vec2D(-1.0, 0.0)
RIGHT_DIR = Vec2D(1.0, 0.0)


@dataclass(frozen=True)
class BoundaryEdge:
    """One side of a rectangle with its outward (or inward) normal."""

    normal: Vec2D = field(default_factory=Vec2D)
    edge: Line2D = field(default_factory=Line2D)


class Excluder:
    """A rectangle that reports which of its edges another rectangle hit."""

    def __init__(self, rect: AARectangle | None = None, reverse_normals: bool = False) -> None:
        self._rect = copy.copy(rect) if rect is not None else AARectangle()
        self.reverse_normals = reverse_normals
        self._edges: dict[EdgeType, BoundaryEdge] = {}
        self._setup_edges()

    @property
    def rect(self) -> AARectangle:
        return self._rect

    def _overlap(self, rect: AARectangle) -> tuple[float, float]:
        mine = self._rect
        y_size = min(mine.bottom_right.y, rect.bottom_right.y) - max(mine.top_left.y, rect.top_left.y)
        x_size = min(mine.bottom_right.x, rect.bottom_right.x) - max(mine.top_left.x, rect.top_left.x)
        return x_size, y_size

    def has_collided(self, rect: AARectangle) -> BoundaryEdge | None:
        """The edge ``rect`` collided with, or None if they do not overlap."""
        if not self._rect.intersects(rect):
            return None
        x_size, y_size = self._overlap(rect)
        other_center = rect.center_point()
        my_center = self._rect.center_point()
        if x_size > y_size:
            if other_center.y > my_center.y:
                return self._edges[EdgeType.BOTTOM]
            return self._edges[EdgeType.TOP]
        if other_center.x < my_center.x:
            return self._edges[EdgeType.LEFT]
        return self._edges[EdgeType.RIGHT]

    def collision_offset(self, rect: AARectangle) -> Vec2D:
        """How far ``rect`` must move along the hit edge's normal to stop overlapping."""
        edge = self.has_collided(rect)
        if edge is None:
            return ZERO
        x_size, y_size = self._overlap(rect)
        if not is_equal(edge.normal.y, 0.0):
            return (y_size + 1) * edge.normal
        return (x_size + 1) * edge.normal

    def move_by(self, delta: Vec2D) -> None:
        self._rect.move_by(delta)
        self._setup_edges()

    def move_to(self, point: Vec2D) -> None:
        self._rect.move_to(point)
        self._setup_edges()

    def edge(self, edge_type: EdgeType) -> BoundaryEdge:
        return self._edges[EdgeType(edge_type)]

    def _setup_edges(self) -> None:
        tl = self._rect.top_left
        br = self._rect.bottom_right
        edges = {
            EdgeType.TOP: BoundaryEdge(UP_DIR, Line2D.from_coords(tl.x, tl.y, br.x, tl.y)),
            EdgeType.LEFT: BoundaryEdge(LEFT_DIR, Line2D.from_coords(tl.x, tl.y, tl.x, br.y)),
            EdgeType.BOTTOM: BoundaryEdge(DOWN_DIR, Line2D.from_coords(tl.x, br.y, br.x, br.y)),
            EdgeType.RIGHT: BoundaryEdge(RIGHT_DIR, Line2D.from_coords(br.x, tl.y, br.x, br.y)),
        }
        if self.reverse_normals:
            edges = {k: BoundaryEdge(-e.normal, e.edge) for k, e in edges.items()}
        self._edges = edges