"""The application: a window, a font, input handling and a stack of scenes."""

from __future__ import annotations

import os
import time
from typing import Optional

from .bitmap_font import BitmapFont
from .input import InputController
from .scene import Scene
from .screen import Screen

FIXED_STEP_MS = 10
MAX_FRAME_MS = 300
FONT_NAME = "ArcadeFont"


def _now_ms() -> int:
    return int(time.monotonic() * 1000)


class App:
    """Runs the topmost scene with a fixed update step until the window is closed."""

    def __init__(self, base_dir: str | os.PathLike[str] | None = None) -> None:
        self._base_dir = base_dir
        self._screen: Optional[Screen] = None
        self._scenes: list[Scene] = []
        self._running = False
        self.input_controller = InputController()
        self.font: Optional[BitmapFont] = None

    def __enter__(self) -> App:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def init(self, width: int, height: int, mag: int) -> None:
        """Load the font and open the window; raises RuntimeError on failure."""
        try:
            self.font = BitmapFont.load(FONT_NAME, self._base_dir)
        except (OSError, ValueError) as exc:
            raise RuntimeError(f"could not load {FONT_NAME}") from exc
        screen = Screen(width, height)
        screen.open(mag, "Arcade")
        self._screen = screen
        top = self.top_scene()
        if top is not None:
            screen.set_title(top.scene_name())

    def close(self) -> None:
        if self._screen is not None:
            self._screen.close()
            self._screen = None

    def _require_screen(self) -> Screen:
        if self._screen is None:
            raise RuntimeError("the application has not been initialised")
        return self._screen

    def width(self) -> int:
        return self._require_screen().width

    def height(self) -> int:
        return self._require_screen().height

    def run(self) -> None:
        """Process input, update and draw until a quit event arrives."""
        screen = self._require_screen()
        self._running = True

        def quit_action(dt: int, state: int) -> None:
            self._running = False

        self.input_controller.quit_action = quit_action

        last_tick = _now_ms()
        accumulator = 0

        while self._running:
            current_tick = _now_ms()
            frame_time = min(current_tick - last_tick, MAX_FRAME_MS)
            last_tick = current_tick
            accumulator += frame_time

            self.input_controller.update(FIXED_STEP_MS)

            scene = self.top_scene()
            if scene is not None:
                while accumulator >= FIXED_STEP_MS:
                    scene.update(FIXED_STEP_MS)
                    accumulator -= FIXED_STEP_MS
                scene.draw(screen)
                screen.swap_screen()

    def push_scene(self, scene: Optional[Scene]) -> None:
        """Initialise ``scene`` and make it the active one."""
        if scene is None:
            return
        scene.init()
        self.input_controller.game_controller = scene.game_controller
        self._scenes.append(scene)
        if self._screen is not None:
            self._screen.set_title(scene.scene_name())

    def pop_scene(self) -> None:
        """Drop the active scene; the last remaining scene is never removed."""
        if len(self._scenes) > 1:
            self._scenes.pop()
        top = self.top_scene()
        if top is not None:
            self.input_controller.game_controller = top.game_controller
            if self._screen is not None:
                self._screen.set_title(top.scene_name())

    def top_scene(self) -> Optional[Scene]:
        return self._scenes[-1] if self._scenes else None