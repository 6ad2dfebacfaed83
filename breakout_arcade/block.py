"""Breakable (or unbreakable) blocks of a level."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .ball import Ball
from .color import Color
from .excluder import BoundaryEdge, Excluder
from .shapes import AARectangle

if TYPE_CHECKING:
    from .screen import Screen


class Block(Excluder):
    """A rectangle with hit points; an HP of UNBREAKABLE never goes down."""

    UNBREAKABLE = -1

    def __init__(
        self,
        rect: Optional[AARectangle] = None,
        hp: int = 1,
        outline_color: Optional[Color] = None,
        fill_color: Optional[Color] = None,
        points: int = 1,
    ) -> None:
        super().__init__(rect)
        self.hp = hp
        self.outline_color = outline_color if outline_color is not None else Color.white()
        self.fill_color = fill_color if fill_color is not None else Color.white()
        self.points = points

    def __repr__(self) -> str:
        return f"Block({self.rect!r}, hp={self.hp}, points={self.points})"

    def draw(self, screen: Screen) -> None:
        screen.draw_rect(self.rect, self.outline_color, True, self.fill_color)

    def bounce(self, ball: Ball, edge: BoundaryEdge) -> None:
        ball.bounce(edge)

    def reduce_hp(self) -> None:
        if self.hp > 0:
            self.hp -= 1

    def is_destroyed(self) -> bool:
        return self.hp == 0