"""Keyboard and mouse bindings, and the dispatcher that feeds them events."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Callable, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

RELEASED = 0
PRESSED = 1

InputAction = Callable[[int, int], None]


@dataclass(frozen=True)
class MousePosition:
    x_pos: int = 0
    y_pos: int = 0


MouseMovedAction = Callable[[MousePosition], None]
MouseInputAction = Callable[[int, MousePosition], None]


@dataclass
class ButtonAction:
    """A key together with what to do when it changes state."""

    key: int
    action: InputAction


@dataclass
class MouseButtonAction:
    mouse_button: int
    mouse_input_action: MouseInputAction


def is_pressed(state: int) -> bool:
    return state == PRESSED


def is_released(state: int) -> bool:
    return state == RELEASED


class GameController:
    """The key and mouse bindings of one scene."""

    ACTION_KEY = pygame.K_a
    CANCEL_KEY = pygame.K_s
    LEFT_KEY = pygame.K_LEFT
    RIGHT_KEY = pygame.K_RIGHT
    UP_KEY = pygame.K_UP
    DOWN_KEY = pygame.K_DOWN

    LEFT_MOUSE_BUTTON = 1
    RIGHT_MOUSE_BUTTON = 3

    def __init__(self) -> None:
        self._button_actions: list[ButtonAction] = []
        self._mouse_button_actions: list[MouseButtonAction] = []
        self.mouse_moved_action: Optional[MouseMovedAction] = None

    def action_for_key(self, key: int) -> InputAction:
        """The first action bound to ``key``; one that ignores input if there is none."""
        for button_action in self._button_actions:
            if button_action.key == key:
                return button_action.action
        return lambda dt, state: None

    def add_input_action_for_key(self, button_action: ButtonAction) -> None:
        self._button_actions.append(button_action)

    def clear_all(self) -> None:
        """Remove every key binding."""
        self._button_actions.clear()

    def mouse_button_action_for(self, button: int) -> MouseInputAction:
        """The first action bound to mouse ``button``; one that ignores input if there is none."""
        for mouse_action in self._mouse_button_actions:
            if mouse_action.mouse_button == button:
                return mouse_action.mouse_input_action
        return lambda state, position: None

    def add_mouse_button_action(self, mouse_button_action: MouseButtonAction) -> None:
        self._mouse_button_actions.append(mouse_button_action)


class InputController:
    """Reads pending window events and routes them to the current controller."""

    def __init__(
        self,
        quit_action: Optional[InputAction] = None,
        game_controller: Optional[GameController] = None,
    ) -> None:
        self.quit_action = quit_action
        self.game_controller = game_controller

    def update(self, dt: int) -> None:
        """Dispatch every event waiting in the queue."""
        for event in pygame.event.get():
            self.handle_event(event, dt)

    def handle_event(self, event: Any, dt: int) -> None:
        """Route a single event to the quit action or the game controller."""
        event_type = event.type
        controller = self.game_controller

        if event_type == pygame.QUIT:
            if self.quit_action is not None:
                self.quit_action(dt, PRESSED)
        elif event_type == pygame.MOUSEMOTION:
            if controller is not None and controller.mouse_moved_action is not None:
                x, y = event.pos
                controller.mouse_moved_action(MousePosition(x, y))
        elif event_type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            if controller is not None:
                state = PRESSED if event_type == pygame.MOUSEBUTTONDOWN else RELEASED
                x, y = event.pos
                controller.mouse_button_action_for(event.button)(state, MousePosition(x, y))
        elif event_type in (pygame.KEYDOWN, pygame.KEYUP):
            if controller is not None:
                state = PRESSED if event_type == pygame.KEYDOWN else RELEASED
                controller.action_for_key(event.key)(dt, state)