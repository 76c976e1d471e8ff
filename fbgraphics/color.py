"""RGBA colours with 8-bit channels."""

from __future__ import annotations

from dataclasses import dataclass

SIMILARITY_OFFSET = 1


@dataclass(frozen=True)
class Color:
    """An RGBA colour whose channels wrap to the 0-255 range."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            object.__setattr__(self, name, getattr(self, name) & 0xFF)


def set_color(r: int, g: int, b: int) -> Color:
    """Return a fully opaque colour."""
    return Color(r, g, b)


def colors_similar(first: Color, second: Color) -> bool:
    """Tell whether the red, green and blue channels differ by at most one."""
    return all(
        abs(x - y) <= SIMILARITY_OFFSET
        for x, y in ((first.r, second.r), (first.g, second.g), (first.b, second.b))
    )