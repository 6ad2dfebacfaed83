"""A Breakout arcade game built on a small pixel-buffer 2D game framework."""

__version__ = "0.1.0"