"""Bitmap images and sprite sheets described by a sections file."""

from __future__ import annotations

import dataclasses
import functools
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from .color import Color
from .command_loader import (
    Command,
    FileCommandLoader,
    ParseFuncParams,
    read_int,
    read_string,
)
from .utils import string_compare

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402


@functools.lru_cache(maxsize=None)
def base_path() -> Path:
    """Directory holding the running program; assets are looked up beneath it."""
    script = sys.argv[0] if sys.argv else ""
    if script:
        return Path(script).resolve().parent
    return Path.cwd()


@dataclass
class BMPImage:
    """Pixels of an image in row-major order."""

    width: int = 0
    height: int = 0
    pixels: list[Color] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match image size")

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> BMPImage:
        """Read a BMP file."""
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"no such image: {path}")
        try:
            surface = pygame.image.load(str(path))
        except pygame.error as exc:
            raise ValueError(f"cannot load image {path}: {exc}") from exc
        width, height = surface.get_size()
        pixels = [
            Color(*tuple(surface.get_at((x, y))))
            for y in range(height)
            for x in range(width)
        ]
        return cls(width, height, pixels)


@dataclass
class Sprite:
    """A rectangular region of a sheet image."""

    x_pos: int = 0
    y_pos: int = 0
    width: int = 0
    height: int = 0


@dataclass
class BMPImageSection:
    key: str = ""
    sprite: Sprite = field(default_factory=Sprite)


def load_sprite_sections(path: str | os.PathLike[str]) -> list[BMPImageSection]:
    """Read the ``:sprite`` / ``:key`` / ``:xPos`` ... sections file."""
    sections: list[BMPImageSection] = []

    def current() -> BMPImageSection:
        if not sections:
            raise ValueError("sprite attribute given before any :sprite command")
        return sections[-1]

    def start_section(params: ParseFuncParams) -> None:
        sections.append(BMPImageSection())

    def set_key(params: ParseFuncParams) -> None:
        current().key = read_string(params)

    def sprite_field(name: str) -> Callable[[ParseFuncParams], None]:
        def parse(params: ParseFuncParams) -> None:
            setattr(current().sprite, name, read_int(params))

        return parse

    loader = FileCommandLoader([Command("sprite", start_section), Command("key", set_key)])
    for command, attribute in (
        ("xPos", "x_pos"),
        ("yPos", "y_pos"),
        ("width", "width"),
        ("height", "height"),
    ):
        loader.add_command(Command(command, sprite_field(attribute)))

    loader.load_file(path)
    return sections


@dataclass
class SpriteSheet:
    """An image together with named sprite regions."""

    image: BMPImage = field(default_factory=BMPImage)
    sections: list[BMPImageSection] = field(default_factory=list)

    @classmethod
    def load(cls, name: str, base_dir: str | os.PathLike[str] | None = None) -> SpriteSheet:
        """Load ``assets/<name>.bmp`` and ``assets/<name>.txt`` under ``base_dir``."""
        assets = Path(base_dir if base_dir is not None else base_path()) / "assets"
        image = BMPImage.load(assets / f"{name}.bmp")
        sections = load_sprite_sections(assets / f"{name}.txt")
        return cls(image, sections)

    def sprite(self, name: str) -> Sprite:
        """The sprite whose key matches ``name`` ignoring case; an empty sprite if none."""
        for section in self.sections:
            if string_compare(section.key, name):
                return dataclasses.replace(section.sprite)
        return Sprite()

    def sprite_names(self) -> list[str]:
        return [section.key for section in self.sections]

    def width(self) -> int:
        return self.image.width

    def height(self) -> int:
        return self.image.height