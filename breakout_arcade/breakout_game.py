"""The Breakout game and the command that starts it."""

from __future__ import annotations

import argparse
import os
import sys
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence

from .app import App
from .ball import Ball
from .bitmap_font import BitmapFont
from .block import Block
from .color import Color
from .input import ButtonAction, GameController, is_pressed
from .level import LEVEL_HEIGHT, LEVEL_WIDTH, BreakoutGameLevel
from .level_boundary import LevelBoundary
from .paddle import Paddle, PaddleDirection
from .scene import Game, GameScene
from .shapes import AARectangle, Circle
from .sprites import base_path
from .vec2d import Vec2D

if TYPE_CHECKING:
    from .screen import Screen

SCREEN_WIDTH = 512
SCREEN_HEIGHT = 288
MAGNIFICATION = 3

_ORANGE = (193, 133, 10)
_RED = (163, 30, 10)


class GameState(Enum):
    IN_PLAY = 0
    IN_SERVE = 1
    IN_GAME_OVER = 2


class BreakOut(Game):
    """Paddle, ball and levels of blocks, with lives and a score."""

    NUM_LIVES = 3
    INITIAL_BALL_SPEED = 100.0
    SPEED_BOOST = 0.2

    def __init__(
        self,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        font: Optional[BitmapFont] = None,
        levels_path: str | os.PathLike[str] | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.font = font
        self.levels_path = (
            Path(levels_path)
            if levels_path is not None
            else base_path() / "assets" / "BreakoutLevels.txt"
        )
        self.ball = Ball()
        self.paddle = Paddle()
        self.level_boundary = LevelBoundary()
        self.levels: list[BreakoutGameLevel] = []
        self.level_index = 0
        self.state = GameState.IN_SERVE
        self.lives = self.NUM_LIVES
        self.points = 0
        self._y_cutoff = 0.0
        self._hits = 0
        self._orange_contact = False
        self._red_contact = False

    @property
    def current_level(self) -> BreakoutGameLevel:
        return self.levels[self.level_index]

    def init(self, controller: GameController) -> None:
        controller.clear_all()
        self.reset_game()
        controller.add_input_action_for_key(
            ButtonAction(GameController.ACTION_KEY, self._on_action_key)
        )
        controller.add_input_action_for_key(
            ButtonAction(GameController.LEFT_KEY, self._direction_handler(PaddleDirection.LEFT))
        )
        controller.add_input_action_for_key(
            ButtonAction(GameController.RIGHT_KEY, self._direction_handler(PaddleDirection.RIGHT))
        )

    def _on_action_key(self, dt: int, state: int) -> None:
        if not is_pressed(state):
            return
        if self.state is GameState.IN_SERVE:
            self.state = GameState.IN_PLAY
            speed = self.INITIAL_BALL_SPEED
            vx = -speed if self.paddle.is_moving_left() else speed
            self.ball.velocity = Vec2D(vx, -speed)
        elif self.state is GameState.IN_GAME_OVER:
            self.reset_game()

    def _direction_handler(self, direction: PaddleDirection):
        def handle(dt: int, state: int) -> None:
            if self.state in (GameState.IN_PLAY, GameState.IN_SERVE):
                if is_pressed(state):
                    self.paddle.set_movement_direction(direction)
                else:
                    self.paddle.unset_movement_direction(direction)

        return handle

    def update(self, dt: int) -> None:
        if self.state is GameState.IN_SERVE:
            self.paddle.update(dt, self.ball)
            self._set_to_serve_state()
        elif self.state is GameState.IN_PLAY:
            self.ball.update(dt)
            self.paddle.update(dt, self.ball)

            if self.paddle.bounce(self.ball):
                return

            edge = self.level_boundary.has_collided(self.ball)
            if edge is not None:
                self.ball.bounce(edge)
                return

            self.current_level.update(dt, self.ball)

            if self.ball.position().y > self._y_cutoff:
                if self.lives >= 0:
                    self.lives -= 1
                if self.lives < 0:
                    self.state = GameState.IN_GAME_OVER
                else:
                    self._set_to_serve_state()
            elif self.current_level.is_level_complete():
                self.reset_game((self.level_index + 1) % len(self.levels))

    def draw(self, screen: Screen) -> None:
        self.ball.draw(screen)
        self.paddle.draw(screen)
        self.current_level.draw(screen)
        screen.draw_rect(self.level_boundary.rect(), Color.white())

        life = Circle(Vec2D(7, self.height - 10), 5)
        for _ in range(self.lives):
            screen.draw_circle(life, Color.red(), True, Color.red())
            life.move_by(Vec2D(17, 0))

        if self.font is None:
            return

        top_left = self.level_boundary.rect().top_left
        screen.draw_text(
            self.font, str(self.points), Vec2D(top_left.x + 3, top_left.y + 3), Color.white()
        )

        if self.state is GameState.IN_GAME_OVER:
            text = "Game Over"
            size = self.font.size_of(text)
            pos = Vec2D(
                self.width // 2 - size.width // 2,
                self.height // 2 - (size.height - 2),
            )
            screen.draw_text(self.font, text, pos, Color.white())

    def name(self) -> str:
        return "BreakOut"

    def reset_game(self, to_level: int = 0) -> None:
        """Reload the levels and start ``to_level``; level 0 also resets score and lives."""
        if to_level == 0:
            self.points = 0
            self._hits = 0
            self._orange_contact = False
            self._red_contact = False
            self.ball.reset_velocity()
            self.lives = self.NUM_LIVES

        levels = BreakoutGameLevel.load_levels_from_file(self.levels_path, self.width)
        if not levels:
            raise ValueError(f"no levels found in {self.levels_path}")
        if not 0 <= to_level < len(levels):
            raise IndexError(f"level {to_level} does not exist")
        self.levels = levels
        self.level_index = to_level
        self.current_level.on_block_destroyed = self._on_block_destroyed

        self._y_cutoff = self.height - 2 * Paddle.PADDLE_HEIGHT

        paddle_rect = AARectangle.from_size(
            Vec2D(self.width // 2 - Paddle.PADDLE_WIDTH // 2, self.height - 30),
            Paddle.PADDLE_WIDTH,
            Paddle.PADDLE_HEIGHT,
        )
        boundary = AARectangle.from_size(
            Vec2D(self.width // 2 - LEVEL_WIDTH // 2, 0), LEVEL_WIDTH, LEVEL_HEIGHT
        )
        self.level_boundary = LevelBoundary(boundary)
        self.paddle = Paddle(paddle_rect, boundary)
        self.ball.move_to(Vec2D(self.width // 2, self.height * 0.75))

        self._set_to_serve_state()

    def _on_block_destroyed(self, block: Block) -> None:
        self._hits += 1
        if self._hits == 4:
            self.ball.increase_velocity(self.SPEED_BOOST)

        fill = (block.fill_color.red, block.fill_color.green, block.fill_color.blue)
        if not self._orange_contact and fill == _ORANGE:
            self.ball.increase_velocity(self.SPEED_BOOST)
            self._orange_contact = True
        if not self._red_contact and fill == _RED:
            self.ball.increase_velocity(self.SPEED_BOOST)
            self._red_contact = True

        self.points += block.points

    def _set_to_serve_state(self) -> None:
        self.state = GameState.IN_SERVE
        self.ball.stop()
        rect = self.paddle.rect
        self.ball.move_to(
            Vec2D(rect.center_point().x, rect.top_left.y - self.ball.radius())
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and play Breakout until it is closed."""
    parser = argparse.ArgumentParser(prog="breakout", description="Play Breakout.")
    parser.parse_args(argv)

    app = App()
    try:
        app.init(SCREEN_WIDTH, SCREEN_HEIGHT, MAGNIFICATION)
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        app.close()
        return 1

    with app:
        game = BreakOut(app.width(), app.height(), app.font)
        app.push_scene(GameScene(game))
        app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())