"""Integer points on the screen."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int
    y: int

    def translated(self, dx: int, dy: int) -> Point:
        """Return the point moved by the given offsets."""
        return Point(self.x + dx, self.y + dy)