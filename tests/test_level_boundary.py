from breakout_arcade.ball import Ball
from breakout_arcade.excluder import DOWN_DIR, RIGHT_DIR, UP_DIR
from breakout_arcade.level_boundary import LevelBoundary
from breakout_arcade.shapes import AARectangle
from breakout_arcade.vec2d import Vec2D


def _boundary():
    return LevelBoundary(AARectangle.from_size(Vec2D(0, 0), 100, 100))


def test_ball_in_middle_has_no_collision():
    assert _boundary().has_collided(Ball(Vec2D(50, 50))) is None


def test_ball_near_top_hits_top_with_inward_normal():
    edge = _boundary().has_collided(Ball(Vec2D(50, 2)))
    assert edge is not None
    assert edge.normal == DOWN_DIR
    assert edge.edge.p0.y == 0


def test_ball_near_left_hits_left_with_inward_normal():
    edge = _boundary().has_collided(Ball(Vec2D(1, 50)))
    assert edge is not None
    assert edge.normal == RIGHT_DIR
    assert edge.edge.p0.x == 0


def test_ball_near_bottom_has_up_normal():
    boundary = _boundary()
    edge = boundary.has_collided(Ball(Vec2D(50, 98)))
    assert edge is not None
    assert edge.normal == UP_DIR
    assert edge.edge.p0.y == boundary.rect().bottom_right.y


def test_rect_keeps_size():
    rect = _boundary().rect()
    assert rect.width() == 100
    assert rect.height() == 100


def test_ball_bounces_back_inside():
    boundary = _boundary()
    ball = Ball(Vec2D(50, 2))
    ball.velocity = Vec2D(0, -50)
    ball.bounce(boundary.has_collided(ball))
    assert ball.velocity.y > 0
    assert boundary.rect().contains_point(ball.position())