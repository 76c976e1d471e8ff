"""A point that moves under gravity and horizontal drag."""

from __future__ import annotations

from dataclasses import dataclass

from .point import Point

GRAVITY = 8
DRAG = 4


def _div10(value: int) -> int:
    quotient = abs(value) // 10
    return quotient if value >= 0 else -quotient


@dataclass
class PhysicsPoint:
    """Position and velocity; velocity is in tenths of a pixel per step."""

    pos: Point
    vel: Point

    def update(self) -> None:
        """Advance one step: move, then apply gravity and drag."""
        self.pos = self.pos.translated(_div10(self.vel.x), _div10(self.vel.y))
        vx = self.vel.x
        if abs(vx) > DRAG:
            vx += -DRAG if vx > 0 else DRAG
        else:
            vx = 0
        self.vel = Point(vx, self.vel.y + GRAVITY)


def make_physics_point(x: int, y: int, xvel: int, yvel: int) -> PhysicsPoint:
    """Create a physics point at (x, y) with the given velocity."""
    return PhysicsPoint(Point(x, y), Point(xvel, yvel))