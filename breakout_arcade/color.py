"""RGBA colours and alpha blending."""

from __future__ import annotations

from dataclasses import dataclass

_CHANNELS = ("red", "green", "blue", "alpha")


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour.

    As a packed pixel value the channels are laid out as 0xRRGGBBAA.
    """

    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in _CHANNELS:
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"{name} channel must be an integer in 0..255, got {value!r}")

    @classmethod
    def from_pixel(cls, pixel: int) -> Color:
        """Unpack a 0xRRGGBBAA pixel value."""
        if not 0 <= pixel <= 0xFFFFFFFF:
            raise ValueError(f"pixel value out of range: {pixel!r}")
        return cls(
            (pixel >> 24) & 0xFF,
            (pixel >> 16) & 0xFF,
            (pixel >> 8) & 0xFF,
            pixel & 0xFF,
        )

    def pixel_color(self) -> int:
        """This colour packed as 0xRRGGBBAA."""
        return (self.red << 24) | (self.green << 16) | (self.blue << 8) | self.alpha

    @staticmethod
    def blend(source: Color, destination: Color) -> Color:
        """Draw ``source`` over ``destination`` with (1 - source alpha) blending.

        The result is always opaque.
        """
        source_alpha = source.alpha / 255.0
        dest_alpha = 1.0 - source_alpha

        def mix(src: int, dst: int) -> int:
            return min(255, max(0, int(src * source_alpha + dst * dest_alpha)))

        return Color(
            mix(source.red, destination.red),
            mix(source.green, destination.green),
            mix(source.blue, destination.blue),
            255,
        )

    @classmethod
    def black(cls) -> Color:
        return cls(0, 0, 0, 255)

    @classmethod
    def white(cls) -> Color:
        return cls(255, 255, 255, 255)

    @classmethod
    def blue(cls) -> Color:
        return cls(0, 0, 255, 255)

    @classmethod
    def red(cls) -> Color:
        return cls(255, 0, 0, 255)

    @classmethod
    def green(cls) -> Color:
        return cls(0, 255, 0, 255)

    @classmethod
    def yellow(cls) -> Color:
        return cls(255, 255, 0, 255)

    @classmethod
    def magenta(cls) -> Color:
        return cls(255, 0, 255, 255)

    @classmethod
    def cyan(cls) -> Color:
        return cls(37, 240, 217, 255)

    @classmethod
    def pink(cls) -> Color:
        return cls(252, 197, 224, 255)

    @classmethod
    def orange(cls) -> Color:
        return cls(245, 190, 100, 255)