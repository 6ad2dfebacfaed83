"""Software back buffer and the window it is presented in."""

from __future__ import annotations

import math
import os
from typing import Callable, Optional, Sequence

from .bitmap_font import BitmapFont
from .color import Color
from .line2d import Line2D
from .shapes import AARectangle, Circle, Triangle
from .sprites import BMPImage, Sprite, SpriteSheet
from .utils import TWO_PI, clamp, get_index, is_equal
from .vec2d import Vec2D

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

FillPolyFunc = Callable[[int, int], Color]

NUM_CIRCLE_SEGMENTS = 30


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    magnitude = int(math.floor(abs(value) + 0.5))
    return magnitude if value >= 0 else -magnitude


class ScreenBuffer:
    """A width-by-height grid of colours that pixels are blended into."""

    def __init__(self, width: int, height: int, color: Optional[Color] = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"buffer size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = [color if color is not None else Color.black()] * (width * height)

    def __copy__(self) -> ScreenBuffer:
        clone = ScreenBuffer(self.width, self.height)
        clone._pixels = list(self._pixels)
        return clone

    def clear(self, color: Optional[Color] = None) -> None:
        """Set every pixel to ``color`` (black by default)."""
        fill = color if color is not None else Color.black()
        self._pixels = [fill] * (self.width * self.height)

    def set_pixel(self, color: Color, x: int, y: int) -> None:
        """Blend ``color`` over the pixel at (x, y); positions off the buffer are ignored.

        The top row (y == 0) is treated as outside the drawable area.
        """
        if 0 < y < self.height and 0 <= x < self.width:
            index = get_index(self.width, y, x)
            self._pixels[index] = Color.blend(color, self._pixels[index])

    def pixel(self, x: int, y: int) -> Color:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the {self.width}x{self.height} buffer")
        return self._pixels[get_index(self.width, y, x)]

    def _rgba_bytes(self) -> bytes:
        return bytes(
            channel
            for c in self._pixels
            for channel in (c.red, c.green, c.blue, c.alpha)
        )


class Screen:
    """Draws shapes, images and text into a back buffer and shows it in a window."""

    def __init__(self, width: int, height: int, clear_color: Optional[Color] = None) -> None:
        self.clear_color = clear_color if clear_color is not None else Color.black()
        self.buffer = ScreenBuffer(width, height, self.clear_color)
        self.width = width
        self.height = height
        self._window: Optional[pygame.Surface] = None

    @property
    def is_open(self) -> bool:
        return self._window is not None

    def __enter__(self) -> Screen:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def open(self, mag: int = 1, title: str = "Arcade") -> None:
        """Open a window ``mag`` times the buffer size; raises RuntimeError on failure."""
        if mag < 1:
            raise ValueError(f"magnification must be at least 1, got {mag}")
        pygame.display.init()
        try:
            window = pygame.display.set_mode((self.width * mag, self.height * mag))
        except pygame.error as exc:
            pygame.display.quit()
            raise RuntimeError(f"could not create the window: {exc}") from exc
        pygame.display.set_caption(title)
        self._window = window
        self.buffer.clear(self.clear_color)

    def set_title(self, title: str) -> None:
        if self._window is not None:
            pygame.display.set_caption(title)

    def close(self) -> None:
        if self._window is not None:
            pygame.display.quit()
            self._window = None

    def swap_screen(self) -> None:
        """Present the back buffer in the window, then clear the buffer."""
        if self._window is None:
            return
        c = self.clear_color
        self._window.fill((c.red, c.green, c.blue, c.alpha))
        frame = pygame.image.frombuffer(
            self.buffer._rgba_bytes(), (self.width, self.height), "RGBA"
        )
        self._window.blit(pygame.transform.scale(frame, self._window.get_size()), (0, 0))
        pygame.display.flip()
        self.buffer.clear(self.clear_color)

    def draw_point(self, x: float, y: float, color: Color) -> None:
        self.buffer.set_pixel(color, int(x), int(y))

    def draw_line(self, line: Line2D, color: Color) -> None:
        x0 = _round_half_away(line.p0.x)
        y0 = _round_half_away(line.p0.y)
        x1 = _round_half_away(line.p1.x)
        y1 = _round_half_away(line.p1.y)

        dx = x1 - x0
        dy = y1 - y0
        ix = (dx > 0) - (dx < 0)
        iy = (dy > 0) - (dy < 0)
        dx = abs(dx) * 2
        dy = abs(dy) * 2

        self.draw_point(x0, y0, color)

        if dx >= dy:
            d = dy - dx // 2
            while x0 != x1:
                if d >= 0:
                    d -= dx
                    y0 += iy
                d += dy
                x0 += ix
                self.draw_point(x0, y0, color)
        else:
            d = dx - dy // 2
            while y0 != y1:
                if d >= 0:
                    d -= dy
                    x0 += ix
                d += dx
                y0 += iy
                self.draw_point(x0, y0, color)

    def _draw_outline(self, points: Sequence[Vec2D], color: Color) -> None:
        for start, end in zip(points, [*points[1:], points[0]]):
            self.draw_line(Line2D(start, end), color)

    def draw_triangle(
        self,
        triangle: Triangle,
        color: Color,
        fill: bool = False,
        fill_color: Optional[Color] = None,
    ) -> None:
        points = [triangle.p0, triangle.p1, triangle.p2]
        if fill:
            self.fill_poly(points, self._solid(fill_color))
        self._draw_outline(points, color)

    def draw_rect(
        self,
        rect: AARectangle,
        color: Color,
        fill: bool = False,
        fill_color: Optional[Color] = None,
    ) -> None:
        points = rect.corner_points()
        if fill:
            self.fill_poly(points, self._solid(fill_color))
        self._draw_outline(points, color)

    def draw_circle(
        self,
        circle: Circle,
        color: Color,
        fill: bool = False,
        fill_color: Optional[Color] = None,
    ) -> None:
        center = circle.center_point()
        angle = TWO_PI / NUM_CIRCLE_SEGMENTS
        p0 = Vec2D(center.x + circle.radius, center.y)
        circle_points: list[Vec2D] = []
        lines: list[Line2D] = []
        for _ in range(NUM_CIRCLE_SEGMENTS):
            p1 = p0.rotated(angle, center)
            lines.append(Line2D(p0, p1))
            circle_points.append(p1)
            p0 = p1

        if fill:
            self.fill_poly(circle_points, self._solid(fill_color))
        for line in lines:
            self.draw_line(line, color)

    @staticmethod
    def _solid(fill_color: Optional[Color]) -> FillPolyFunc:
        color = fill_color if fill_color is not None else Color.white()
        return lambda x, y: color

    def fill_poly(self, points: Sequence[Vec2D], func: FillPolyFunc) -> None:
        """Scan-fill the polygon, asking ``func`` for the colour of each pixel."""
        if not points:
            return
        top = min(p.y for p in points)
        bottom = max(p.y for p in points)
        left = min(p.x for p in points)
        right = max(p.x for p in points)

        previous = [points[-1], *points[:-1]]
        for pixel_y in range(int(top), math.ceil(bottom)):
            nodes: list[float] = []
            for pi, pj in zip(points, previous):
                if (pi.y <= pixel_y < pj.y) or (pj.y <= pixel_y < pi.y):
                    denom = pj.y - pi.y
                    if is_equal(denom, 0.0):
                        continue
                    nodes.append(pi.x + (pixel_y - pi.y) / denom * (pj.x - pi.x))
            nodes.sort()

            for start, end in zip(nodes[0::2], nodes[1::2]):
                if start > right:
                    break
                if end > left:
                    start = max(start, left)
                    end = min(end, right)
                    pixel_x = int(start)
                    while pixel_x < end:
                        self.draw_point(pixel_x, pixel_y, func(pixel_x, pixel_y))
                        pixel_x += 1

    def draw_image(
        self,
        image: BMPImage,
        sprite: Sprite,
        pos: Vec2D,
        overlay_color: Optional[Color] = None,
    ) -> None:
        """Draw the ``sprite`` region of ``image`` at ``pos``, tinted by ``overlay_color``."""
        overlay = overlay_color if overlay_color is not None else Color.white()
        r_val = overlay.red / 255.0
        g_val = overlay.green / 255.0
        b_val = overlay.blue / 255.0
        a_val = overlay.alpha / 255.0

        width, height = sprite.width, sprite.height
        if width == 0 or height == 0:
            return
        pixels = image.pixels

        def tint(c: Color) -> Color:
            return Color(
                int(c.red * r_val),
                int(c.green * g_val),
                int(c.blue * b_val),
                int(c.alpha * a_val),
            )

        top_left = pos
        top_right = pos + Vec2D(width, 0)
        bottom_left = pos + Vec2D(0, height)
        bottom_right = pos + Vec2D(width, height)

        x_axis = top_right - top_left
        y_axis = bottom_left - top_left
        inv_x = 1.0 / x_axis.magnitude2()
        inv_y = 1.0 / y_axis.magnitude2()

        def sample(px: int, py: int) -> Color:
            d = Vec2D(float(px), float(py)) - top_left
            u = clamp(inv_x * d.dot(x_axis), 0.0, 1.0)
            v = clamp(inv_y * d.dot(y_axis), 0.0, 1.0)
            tx = min(_round_half_away(u * width), width - 1)
            ty = min(_round_half_away(v * height), height - 1)
            return tint(pixels[get_index(image.width, ty + sprite.y_pos, tx + sprite.x_pos)])

        self.fill_poly([top_left, bottom_left, bottom_right, top_right], sample)

        for r in range(height):
            for c in range(width):
                source = pixels[get_index(image.width, r + sprite.y_pos, c + sprite.x_pos)]
                self.draw_point(c + pos.x, r + pos.y, tint(source))

    def draw_sprite(
        self,
        sheet: SpriteSheet,
        sprite_name: str,
        pos: Vec2D,
        overlay_color: Optional[Color] = None,
    ) -> None:
        self.draw_image(sheet.image, sheet.sprite(sprite_name), pos, overlay_color)

    def draw_text(
        self,
        font: BitmapFont,
        text: str,
        pos: Vec2D,
        overlay_color: Optional[Color] = None,
    ) -> None:
        x_pos = int(pos.x)
        for char in text:
            if char == " ":
                x_pos += font.WORD_SPACING
                continue
            sprite = font.sheet.sprite(char)
            self.draw_image(font.sheet.image, sprite, Vec2D(float(x_pos), pos.y), overlay_color)
            x_pos += sprite.width + font.LETTER_SPACING