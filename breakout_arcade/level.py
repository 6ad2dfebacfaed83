"""A level of blocks, and loading levels from a layout file."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Iterable, Optional

from .ball import Ball
from .block import Block
from .color import Color
from .command_loader import (
    Command,
    CommandType,
    FileCommandLoader,
    ParseFuncParams,
    read_char,
    read_color,
    read_int,
)
from .shapes import AARectangle
from .vec2d import Vec2D

if TYPE_CHECKING:
    from .screen import Screen

LEVEL_WIDTH = 244
LEVEL_HEIGHT = 288


@dataclass
class LayoutBlock:
    """A kind of block in a layout, keyed by the symbol used to place it."""

    symbol: str = "-"
    hp: int = 0
    color: Color = field(default_factory=Color.black)
    points: int = 0


def _find_layout_block(blocks: Iterable[LayoutBlock], symbol: str) -> LayoutBlock:
    for block in blocks:
        if block.symbol == symbol:
            return block
    return LayoutBlock()


class BreakoutGameLevel:
    """The blocks of one level and how the ball interacts with them."""

    BLOCK_WIDTH = 16
    BLOCK_HEIGHT = 8

    def __init__(self) -> None:
        self.on_block_destroyed: Optional[Callable[[Block], None]] = None
        self._blocks: list[Block] = []

    @property
    def blocks(self) -> list[Block]:
        return list(self._blocks)

    def init(self, boundary: AARectangle) -> None:
        """Fill the level with the default five coloured rows."""
        self._create_default_level(boundary)

    def load(self, blocks: Iterable[Block]) -> None:
        self._blocks = list(blocks)

    def update(self, dt: int, ball: Ball) -> None:
        """Bounce the ball off the block it hit and keep it out of every block it touches."""
        ball_rect = ball.bounding_rect
        collided: list[Block] = []
        target: Optional[Block] = None
        target_edge = None

        for block in self._blocks:
            if block.is_destroyed():
                continue
            edge = block.has_collided(ball_rect)
            if edge is not None:
                collided.append(block)
                # The last block hit is the one the ball bounces off.
                target, target_edge = block, edge

        if target is not None and target_edge is not None:
            target.bounce(ball, target_edge)
            target.reduce_hp()
            if target.is_destroyed() and self.on_block_destroyed is not None:
                self.on_block_destroyed(target)

        for block in collided:
            edge = block.has_collided(ball.bounding_rect)
            if edge is not None:
                ball.make_flush_with_edge(edge, True)

    def draw(self, screen: Screen) -> None:
        for block in self._blocks:
            if not block.is_destroyed():
                block.draw(screen)

    def is_level_complete(self) -> bool:
        """True when only destroyed or unbreakable blocks remain."""
        return all(
            block.is_destroyed() or block.hp == Block.UNBREAKABLE for block in self._blocks
        )

    def _create_default_level(self, boundary: AARectangle) -> None:
        width = int(boundary.width())
        num_across = width - 2 * self.BLOCK_WIDTH // self.BLOCK_WIDTH
        start_x = float(int((width - num_across * (self.BLOCK_WIDTH + 1)) / 2))
        colors = [Color.red(), Color.magenta(), Color.yellow(), Color.green(), Color.cyan()]

        blocks: list[Block] = []
        for row, color in enumerate(colors):
            rect = AARectangle.from_size(
                Vec2D(start_x, float(self.BLOCK_HEIGHT * (row + 1))),
                self.BLOCK_WIDTH,
                self.BLOCK_HEIGHT,
            )
            for _ in range(num_across):
                blocks.append(Block(rect, 1, Color.black(), color))
                rect.move_by(Vec2D(self.BLOCK_WIDTH, 0))
        self._blocks = blocks

    @classmethod
    def load_levels_from_file(
        cls, file_path: str | os.PathLike[str], screen_width: int
    ) -> list[BreakoutGameLevel]:
        """Read every ``:level`` from a layout file; raises OSError if it cannot be read."""
        levels: list[BreakoutGameLevel] = []
        layout_blocks: list[LayoutBlock] = []
        level_blocks: list[Block] = []
        x_position = float(screen_width // 2 - LEVEL_WIDTH // 2)

        def current() -> LayoutBlock:
            if not layout_blocks:
                raise ValueError("block attribute given before any :block command")
            return layout_blocks[-1]

        def start_level(params: ParseFuncParams) -> None:
            if levels:
                levels[-1].load(level_blocks)
            layout_blocks.clear()
            level_blocks.clear()
            level = cls()
            level.init(
                AARectangle.from_size(Vec2D(x_position, 0.0), LEVEL_WIDTH, LEVEL_HEIGHT)
            )
            levels.append(level)

        def start_block(params: ParseFuncParams) -> None:
            layout_blocks.append(LayoutBlock())

        def set_symbol(params: ParseFuncParams) -> None:
            current().symbol = read_char(params)

        def set_color(params: ParseFuncParams) -> None:
            current().color = read_color(params)

        def set_hp(params: ParseFuncParams) -> None:
            current().hp = read_int(params)

        def set_points(params: ParseFuncParams) -> None:
            current().points = read_int(params)

        def read_dimension(params: ParseFuncParams) -> None:
            # Level dimensions are accepted but the layout alone decides placement.
            read_int(params)

        def layout_row(params: ParseFuncParams) -> None:
            rect = AARectangle.from_size(
                Vec2D(x_position, float((params.line_num + 1) * cls.BLOCK_HEIGHT)),
                cls.BLOCK_WIDTH,
                cls.BLOCK_HEIGHT,
            )
            for symbol in params.line:
                if symbol != "-":
                    kind = _find_layout_block(layout_blocks, symbol)
                    level_blocks.append(
                        Block(rect, kind.hp, Color.black(), kind.color, kind.points)
                    )
                rect.move_by(Vec2D(cls.BLOCK_WIDTH, 0))

        loader = FileCommandLoader(
            [
                Command("level", start_level),
                Command("block", start_block),
                Command("symbol", set_symbol),
                Command("fillcolor", set_color),
                Command("hp", set_hp),
                Command("points", set_points),
                Command("width", read_dimension),
                Command("height", read_dimension),
                Command("layout", layout_row, CommandType.MULTI_LINE),
            ]
        )
        loader.load_file(file_path)

        if levels:
            levels[-1].load(level_blocks)
        return levels