"""Games, and the scenes that host them on the application's scene stack."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .input import GameController

if TYPE_CHECKING:
    from .screen import Screen


class Game(ABC):
    """A game that reacts to input, advances in fixed steps and draws itself."""

    @abstractmethod
    def init(self, controller: GameController) -> None:
        """Set up the game and register its input bindings on ``controller``."""

    @abstractmethod
    def update(self, dt: int) -> None:
        """Advance the game by ``dt`` milliseconds."""

    @abstractmethod
    def draw(self, screen: Screen) -> None:
        """Draw the current frame."""

    @abstractmethod
    def name(self) -> str:
        """The game's display name."""


class Scene(ABC):
    """Something the application shows, with its own input bindings."""

    def __init__(self) -> None:
        self.game_controller = GameController()

    @abstractmethod
    def init(self) -> None:
        """Prepare the scene when it is pushed."""

    @abstractmethod
    def update(self, dt: int) -> None:
        """Advance the scene by ``dt`` milliseconds."""

    @abstractmethod
    def draw(self, screen: Screen) -> None:
        """Draw the scene."""

    @abstractmethod
    def scene_name(self) -> str:
        """The name shown in the window title."""


class GameScene(Scene):
    """A scene that hands everything over to a single game."""

    def __init__(self, game: Game) -> None:
        super().__init__()
        self.game = game

    def init(self) -> None:
        self.game.init(self.game_controller)

    def update(self, dt: int) -> None:
        self.game.update(dt)

    def draw(self, screen: Screen) -> None:
        self.game.draw(screen)

    def scene_name(self) -> str:
        return self.game.name()