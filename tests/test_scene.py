import pytest

from breakout_arcade.input import GameController
from breakout_arcade.scene import Game, GameScene, Scene


class RecordingGame(Game):
    def __init__(self):
        self.controllers = []
        self.updates = []
        self.screens = []

    def init(self, controller):
        self.controllers.append(controller)

    def update(self, dt):
        self.updates.append(dt)

    def draw(self, screen):
        self.screens.append(screen)

    def name(self):
        return "Recorder"


def test_game_is_abstract():
    with pytest.raises(TypeError):
        Game()


def test_scene_is_abstract():
    with pytest.raises(TypeError):
        Scene()


def test_game_scene_init_passes_its_controller():
    game = RecordingGame()
    scene = GameScene(game)
    scene.init()
    assert game.controllers == [scene.game_controller]
    assert isinstance(scene.game_controller, GameController)


def test_game_scene_forwards_update_and_draw():
    game = RecordingGame()
    scene = GameScene(game)
    scene.update(10)
    scene.update(20)
    marker = object()
    scene.draw(marker)
    assert game.updates == [10, 20]
    assert game.screens == [marker]


def test_scene_name_comes_from_game():
    assert GameScene(RecordingGame()).scene_name() == "Recorder"


def test_each_scene_has_its_own_controller():
    first = GameScene(RecordingGame())
    second = GameScene(RecordingGame())
    assert first.game_controller is not second.game_controller
    assert first.game_controller.action_for_key(GameController.ACTION_KEY) is (
        second.game_controller.action_for_key(GameController.ACTION_KEY)
    )