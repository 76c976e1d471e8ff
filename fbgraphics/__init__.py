"""Pixel-level 2D drawing on a Linux framebuffer or an in-memory canvas, with a small game and paint program."""

__version__ = "0.1.0"