"""Text measurement and placement with a sprite-sheet font."""

from __future__ import annotations

import os
from enum import Enum

from .shapes import AARectangle
from .sprites import SpriteSheet
from .utils import Size
from .vec2d import Vec2D


class XAlignment(Enum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2


class YAlignment(Enum):
    TOP = 0
    CENTER = 1
    BOTTOM = 2


class BitmapFont:
    """A font whose glyphs are sprites keyed by their character."""

    LETTER_SPACING = 2
    WORD_SPACING = 5

    def __init__(self, sheet: SpriteSheet | None = None) -> None:
        self.sheet = sheet if sheet is not None else SpriteSheet()

    @classmethod
    def load(cls, name: str, base_dir: str | os.PathLike[str] | None = None) -> BitmapFont:
        return cls(SpriteSheet.load(name, base_dir))

    def size_of(self, text: str) -> Size:
        """Width and height the text takes when drawn."""
        size = Size()
        for i, char in enumerate(text):
            if char == " ":
                size.width += self.WORD_SPACING
                continue
            sprite = self.sheet.sprite(char)
            size.height = max(size.height, sprite.height)
            size.width += sprite.width
            if i + 1 < len(text):
                size.width += self.LETTER_SPACING
        return size

    def draw_position(
        self,
        text: str,
        box: AARectangle,
        x_align: XAlignment = XAlignment.LEFT,
        y_align: YAlignment = YAlignment.TOP,
    ) -> Vec2D:
        """Top-left position at which to draw ``text`` aligned inside ``box``."""
        size = self.size_of(text)

        x = 0
        if x_align is XAlignment.CENTER:
            x = int(box.width() / 2 - size.width // 2)
        elif x_align is XAlignment.RIGHT:
            x = int(box.width() - size.width)
        x = int(x + box.top_left.x)

        y = 0
        if y_align is YAlignment.CENTER:
            y = int(box.height() / 2 - size.height // 2)
        elif y_align is YAlignment.BOTTOM:
            y = int(box.height() - size.height)
        y = int(y + box.top_left.y)

        return Vec2D(float(x), float(y))