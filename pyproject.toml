[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "breakout-arcade"
version = "0.1.0"
description = "A small Breakout arcade game with its own pixel-buffer 2D game framework."
requires-python = ">=3.10"
keywords = ["breakout", "arcade", "game", "pygame", "2d"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
breakout-arcade = "breakout_arcade.breakout_game:main"

[tool.hatch.build.targets.wheel]
packages = ["breakout_arcade"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
