import pytest

from breakout_arcade.excluder import (
    DOWN_DIR,
    LEFT_DIR,
    RIGHT_DIR,
    UP_DIR,
    EdgeType,
    Excluder,
)
from breakout_arcade.line2d import Line2D
from breakout_arcade.shapes import AARectangle
from breakout_arcade.vec2d import ZERO, Vec2D


@pytest.fixture
def excluder():
    return Excluder(AARectangle.from_size(Vec2D(0.0, 0.0), 10, 10))


def test_edges_follow_rectangle(excluder):
    rect = excluder.rect
    top = excluder.edge(EdgeType.TOP)
    assert top.normal == UP_DIR
    assert top.edge == Line2D(rect.top_left, Vec2D(rect.bottom_right.x, rect.top_left.y))
    assert excluder.edge(EdgeType.BOTTOM).normal == DOWN_DIR
    assert excluder.edge(EdgeType.LEFT).normal == LEFT_DIR
    assert excluder.edge(EdgeType.RIGHT).normal == RIGHT_DIR


def test_reversed_normals_point_inward(excluder):
    inner = Excluder(excluder.rect, reverse_normals=True)
    for edge_type in EdgeType:
        assert inner.edge(edge_type).normal == -excluder.edge(edge_type).normal
        assert inner.edge(edge_type).edge == excluder.edge(edge_type).edge


def test_no_collision(excluder):
    far = AARectangle.from_size(Vec2D(50.0, 50.0), 4, 4)
    assert excluder.has_collided(far) is None
    assert excluder.collision_offset(far) == ZERO


@pytest.mark.parametrize(
    "top_left,edge_type",
    [
        (Vec2D(2.0, -3.0), EdgeType.TOP),
        (Vec2D(2.0, 9.0), EdgeType.BOTTOM),
        (Vec2D(-3.0, 2.0), EdgeType.LEFT),
        (Vec2D(9.0, 2.0), EdgeType.RIGHT),
    ],
)
def test_collision_edge_and_push_out(excluder, top_left, edge_type):
    other = AARectangle.from_size(top_left, 4, 4)
    edge = excluder.has_collided(other)
    assert edge == excluder.edge(edge_type)
    offset = excluder.collision_offset(other)
    assert offset.unit_vec() == edge.normal
    other.move_by(offset)
    assert not excluder.rect.intersects(other)


def test_move_by_updates_edges(excluder):
    excluder.move_by(Vec2D(5.0, 5.0))
    assert excluder.rect.top_left == Vec2D(5.0, 5.0)
    assert excluder.edge(EdgeType.TOP).edge.p0 == excluder.rect.top_left
    assert excluder.edge(EdgeType.BOTTOM).edge.p1 == excluder.rect.bottom_right


def test_move_to_updates_edges(excluder):
    excluder.move_to(Vec2D(20.0, 30.0))
    assert excluder.edge(EdgeType.LEFT).edge.p0 == Vec2D(20.0, 30.0)
    assert excluder.rect.width() == 10


def test_excluder_keeps_its_own_rectangle():
    rect = AARectangle.from_size(Vec2D(0.0, 0.0), 10, 10)
    excluder = Excluder(rect)
    rect.move_by(Vec2D(100.0, 100.0))
    assert excluder.rect.top_left == Vec2D(0.0, 0.0)