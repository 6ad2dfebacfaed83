import copy

import pytest

from breakout_arcade.bitmap_font import BitmapFont
from breakout_arcade.color import Color
from breakout_arcade.line2d import Line2D
from breakout_arcade.screen import Screen, ScreenBuffer
from breakout_arcade.shapes import AARectangle, Circle, Triangle
from breakout_arcade.sprites import BMPImage, BMPImageSection, Sprite, SpriteSheet
from breakout_arcade.vec2d import Vec2D

BLACK = Color.black()
RED = Color.red()
GREEN = Color.green()
BLUE = Color.blue()
WHITE = Color.white()


def colored(screen):
    return {
        (x, y)
        for y in range(screen.height)
        for x in range(screen.width)
        if screen.buffer.pixel(x, y) != BLACK
    }


def test_buffer_clear_sets_every_pixel():
    buffer = ScreenBuffer(4, 3)
    buffer.clear(BLUE)
    assert all(buffer.pixel(x, y) == BLUE for x in range(4) for y in range(3))


def test_buffer_set_opaque_pixel():
    buffer = ScreenBuffer(5, 5)
    buffer.set_pixel(RED, 2, 3)
    assert buffer.pixel(2, 3) == RED
    assert buffer.pixel(3, 2) == BLACK


def test_buffer_translucent_pixel_blends():
    buffer = ScreenBuffer(5, 5, WHITE)
    source = Color(255, 0, 0, 128)
    buffer.set_pixel(source, 1, 1)
    assert buffer.pixel(1, 1) == Color.blend(source, WHITE)


def test_buffer_ignores_out_of_range_pixels():
    buffer = ScreenBuffer(4, 4)
    before = copy.copy(buffer)
    for x, y in [(-1, 2), (4, 2), (2, 4), (2, -1)]:
        buffer.set_pixel(RED, x, y)
    assert all(
        buffer.pixel(x, y) == before.pixel(x, y) for x in range(4) for y in range(4)
    )


def test_buffer_pixel_outside_raises():
    with pytest.raises(IndexError):
        ScreenBuffer(3, 3).pixel(3, 0)


def test_invalid_screen_size_raises():
    with pytest.raises(ValueError):
        Screen(0, 10)


def test_horizontal_line():
    screen = Screen(10, 10)
    screen.draw_line(Line2D(Vec2D(1, 2), Vec2D(5, 2)), RED)
    assert colored(screen) == {(x, 2) for x in range(1, 6)}


def test_diagonal_line():
    screen = Screen(10, 10)
    screen.draw_line(Line2D(Vec2D(1, 1), Vec2D(4, 4)), GREEN)
    assert colored(screen) == {(i, i) for i in range(1, 5)}


def test_line_is_same_in_both_directions():
    a = Screen(12, 12)
    b = Screen(12, 12)
    a.draw_line(Line2D(Vec2D(2, 3), Vec2D(9, 5)), RED)
    b.draw_line(Line2D(Vec2D(9, 5), Vec2D(2, 3)), RED)
    assert len(colored(a)) == len(colored(b)) == 8


def test_rect_outline_leaves_interior():
    screen = Screen(10, 10)
    rect = AARectangle.from_size(Vec2D(2, 2), 5, 4)
    screen.draw_rect(rect, RED)
    border = {(x, y) for x in range(2, 7) for y in (2, 5)} | {
        (x, y) for x in (2, 6) for y in range(2, 6)
    }
    assert colored(screen) == border
    assert all(screen.buffer.pixel(p[0], p[1]) == RED for p in border)


def test_rect_filled_interior():
    screen = Screen(10, 10)
    rect = AARectangle.from_size(Vec2D(2, 2), 5, 4)
    screen.draw_rect(rect, RED, True, BLUE)
    interior = [(x, y) for x in range(3, 6) for y in range(3, 5)]
    assert all(screen.buffer.pixel(x, y) == BLUE for x, y in interior)
    assert screen.buffer.pixel(2, 2) == RED


def test_fill_poly_stays_in_bounding_box():
    screen = Screen(20, 20)
    calls = []

    def func(x, y):
        calls.append((x, y))
        return GREEN

    points = [Vec2D(3, 4), Vec2D(12, 6), Vec2D(7, 15)]
    screen.fill_poly(points, func)
    assert calls
    assert all(3 <= x <= 12 and 4 <= y <= 15 for x, y in calls)
    assert colored(screen) == set(calls)


def test_fill_poly_with_no_points_draws_nothing():
    screen = Screen(5, 5)
    screen.fill_poly([], lambda x, y: RED)
    assert colored(screen) == set()


def test_circle_outline_near_radius():
    screen = Screen(20, 20)
    screen.draw_circle(Circle(Vec2D(10, 10), 4), RED)
    pixels = colored(screen)
    assert pixels
    assert all(3 <= Vec2D(x, y).distance(Vec2D(10, 10)) <= 5 for x, y in pixels)
    assert screen.buffer.pixel(10, 10) == BLACK


def test_filled_circle_centre():
    screen = Screen(20, 20)
    screen.draw_circle(Circle(Vec2D(10, 10), 4), RED, True, GREEN)
    assert screen.buffer.pixel(10, 10) == GREEN


def test_filled_triangle():
    screen = Screen(20, 20)
    triangle = Triangle(Vec2D(2, 2), Vec2D(12, 2), Vec2D(2, 12))
    screen.draw_triangle(triangle, RED, True, GREEN)
    assert screen.buffer.pixel(5, 5) == GREEN
    assert screen.buffer.pixel(2, 7) == RED
    assert screen.buffer.pixel(15, 15) == BLACK


def _image():
    pixels = [RED, GREEN, BLUE, WHITE]
    return BMPImage(2, 2, pixels)


def test_draw_image_copies_pixels():
    screen = Screen(10, 10)
    image = _image()
    screen.draw_image(image, Sprite(0, 0, 2, 2), Vec2D(3, 3))
    assert screen.buffer.pixel(3, 3) == RED
    assert screen.buffer.pixel(4, 3) == GREEN
    assert screen.buffer.pixel(3, 4) == BLUE
    assert screen.buffer.pixel(4, 4) == WHITE


def test_draw_image_overlay_removes_channels():
    screen = Screen(10, 10)
    screen.draw_image(_image(), Sprite(0, 0, 2, 2), Vec2D(3, 3), RED)
    assert screen.buffer.pixel(4, 4) == RED
    assert screen.buffer.pixel(4, 3) == BLACK


def test_draw_empty_sprite_draws_nothing():
    screen = Screen(10, 10)
    screen.draw_image(_image(), Sprite(0, 0, 0, 0), Vec2D(3, 3))
    assert colored(screen) == set()


def test_draw_sprite_by_name():
    screen = Screen(10, 10)
    sheet = SpriteSheet(_image(), [BMPImageSection("dot", Sprite(1, 1, 1, 1))])
    screen.draw_sprite(sheet, "DOT", Vec2D(5, 5))
    assert colored(screen) == {(5, 5)}
    assert screen.buffer.pixel(5, 5) == WHITE


def test_draw_text_places_glyphs():
    image = BMPImage(4, 1, [RED, RED, GREEN, GREEN])
    sheet = SpriteSheet(
        image,
        [
            BMPImageSection("a", Sprite(0, 0, 2, 1)),
            BMPImageSection("b", Sprite(2, 0, 2, 1)),
        ],
    )
    font = BitmapFont(sheet)
    screen = Screen(20, 10)
    screen.draw_text(font, "ab", Vec2D(1, 3))
    second = 1 + 2 + font.LETTER_SPACING
    assert colored(screen) == {(1, 3), (2, 3), (second, 3), (second + 1, 3)}
    assert screen.buffer.pixel(1, 3) == RED
    assert screen.buffer.pixel(second, 3) == GREEN


def test_swap_without_window_keeps_buffer():
    screen = Screen(6, 6)
    screen.draw_point(2, 2, RED)
    screen.swap_screen()
    assert not screen.is_open
    assert screen.buffer.pixel(2, 2) == RED


def test_open_rejects_bad_magnification():
    with pytest.raises(ValueError):
        Screen(6, 6).open(0, "x")