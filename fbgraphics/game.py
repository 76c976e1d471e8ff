"""Game sprites: plane, broken plane, parachute, tank and the cannon shot."""

from __future__ import annotations

import time
from dataclasses import dataclass

from .canvas import Canvas
from .color import Color, set_color
from .filling import flood_fill
from .geometry import draw_circle, draw_circle_half, draw_line, draw_polygon
from .point import Point
from .transform import rotate_point

BLACK = set_color(0, 0, 0)
WHITE = set_color(255, 255, 255)
PINK = set_color(255, 192, 203)
RED = set_color(255, 0, 0)
SKIN = set_color(255, 220, 177)
TANK_GREEN = set_color(75, 83, 32)
PROJECTILE_HEAD = set_color(125, 0, 125)
PROJECTILE_BODY = set_color(60, 0, 60)

_PLANE_OFFSET = Point(-1169, -75)


def _fill_at(canvas: Canvas, x: int, y: int, color: Color) -> None:
    """Flood the region around (x, y) with ``color``, replacing whatever is there."""
    flood_fill(canvas, x, y, color, canvas.get_xy(x, y))


def _offset_all(anchor: Point, offsets) -> list[Point]:
    return [anchor.translated(dx, dy) for dx, dy in offsets]


def draw_baling(canvas: Canvas, x: int, y: int, rotation: float) -> None:
    """Draw a four-bladed propeller whose hub is at (x + 20, y + 20)."""
    blade = [Point(x + 20, y + 20), Point(x + 23, y + 30), Point(x + 20, y + 40), Point(x + 17, y + 30)]
    hub = rotate_point(blade[0], blade[0], rotation)
    blade = [hub] + [rotate_point(p, hub, rotation) for p in blade[1:]]
    draw_polygon(canvas, blade, WHITE, 1)
    for angle in (180, 90, -90):
        draw_polygon(canvas, [rotate_point(p, hub, angle) for p in blade], WHITE, 1)


def draw_tire(canvas: Canvas, point: Point, rotation: float) -> None:
    """Draw a wheel with two crossed spokes turned by ``rotation`` degrees."""
    draw_circle(canvas, 10, point, 4, BLACK)
    centre = point.translated(1, 1)
    spokes = [
        rotate_point(p, centre, rotation)
        for p in (
            Point(point.x + 9, point.y + 1),
            Point(point.x - 7, point.y + 1),
            Point(point.x + 1, point.y + 9),
            Point(point.x + 1, point.y - 7),
        )
    ]
    draw_line(canvas, spokes[0], spokes[1], BLACK, 2)
    draw_line(canvas, spokes[2], spokes[3], BLACK, 2)


def draw_plane(canvas: Canvas, point: Point, direction: int, color: Color) -> None:
    """Draw the plane facing right for a positive direction, left otherwise."""
    mul = 1 if direction > 0 else -1
    ox, oy = _PLANE_OFFSET.x, _PLANE_OFFSET.y

    def at(dx: int, dy: int) -> Point:
        return Point(point.x + mul * (ox + dx), point.y + oy + dy)

    body = [at(1250, 50), at(1100, 50), at(1054, 90), at(1285, 90), at(1285, 25), at(1250, 50)]
    draw_polygon(canvas, body, color, 2)
    seed = at(1250, 55)
    _fill_at(canvas, seed.x, seed.y, color)

    wing = [at(1120, 80), at(1220, 115), at(1280, 120), at(1180, 80)]
    draw_polygon(canvas, wing, color, 2)
    seed = at(1220, 110)
    _fill_at(canvas, seed.x, seed.y, color)

    draw_baling(canvas, point.x - 40, point.y + 10, point.x - 120)
    draw_tire(canvas, Point(point.x - mul * 60, point.y + 20), point.x - 120)


def draw_broken_plane_cockpit(canvas: Canvas, point: Point) -> None:
    """Draw the cockpit fragment of the destroyed plane."""
    cockpit = _offset_all(point, ((-45, 15), (-15, -50), (0, 0)))
    draw_polygon(canvas, cockpit, BLACK, 2)
    _fill_at(canvas, point.x - 10, point.y, BLACK)


def draw_broken_plane_body(canvas: Canvas, point: Point) -> None:
    """Draw the front and back body fragments of the destroyed plane."""
    front = _offset_all(point, ((5, -7), (23, -45), (120, 0), (60, 18)))
    draw_polygon(canvas, front, BLACK, 2)
    _fill_at(canvas, point.x + 15, point.y - 15, BLACK)

    back = _offset_all(point, ((115, 30), (160, -10), (150, 33)))
    draw_polygon(canvas, back, BLACK, 2)
    _fill_at(canvas, point.x + 135, point.y + 20, BLACK)


def draw_broken_plane_wings(canvas: Canvas, point: Point) -> None:
    """Draw the wing and tail fragments of the destroyed plane."""
    wings = _offset_all(point, ((10, 70), (15, 100), (90, 95), (140, 60)))
    draw_polygon(canvas, wings, BLACK, 2)
    _fill_at(canvas, point.x + 80, point.y + 80, BLACK)

    tail = _offset_all(point, ((170, -20), (190, -60), (200, -30)))
    draw_polygon(canvas, tail, BLACK, 2)
    _fill_at(canvas, point.x + 180, point.y - 30, BLACK)


def draw_parachute(canvas: Canvas, anchor: Point) -> None:
    """Draw a parachutist hanging below a pink canopy."""
    ax, ay = anchor.x, anchor.y
    draw_circle_half(canvas, 100, Point(ax - 25, ay + 100), 2, BLACK)
    for dx in (-100, -50, 0, 50):
        draw_circle_half(canvas, 25, Point(ax + dx, ay + 100), 2, BLACK)
    _fill_at(canvas, ax - 25, ay + 50, PINK)

    knot = Point(ax - 25, ay + 200)
    for dx in (-125, -75, -25, 25, 75):
        draw_line(canvas, Point(ax + dx, ay + 100), knot, BLACK, 2)
    draw_line(canvas, Point(ax - 25, ay + 250), knot, BLACK, 2)

    draw_circle(canvas, 20, Point(ax - 25, ay + 272), 2, BLACK)
    _fill_at(canvas, ax - 40, ay + 275, SKIN)

    body = _offset_all(anchor, ((-45, 292), (-45, 350), (-5, 350), (-5, 292)))
    draw_polygon(canvas, body, BLACK, 2)
    _fill_at(canvas, ax - 40, ay + 294, RED)

    for start, end in (
        ((-45, 292), (-30, 330)),
        ((-5, 292), (10, 330)),
        ((-45, 350), (-55, 380)),
        ((-5, 350), (5, 380)),
    ):
        draw_line(canvas, anchor.translated(*start), anchor.translated(*end), BLACK, 2)


def draw_tank(canvas: Canvas, anchor: Point) -> None:
    """Draw a green tank whose tracks rest on ``anchor``."""
    ax, ay = anchor.x, anchor.y
    bottom = _offset_all(anchor, ((-95, 0), (105, 0), (125, -30), (125, -60), (-125, -60), (-125, -30)))
    draw_polygon(canvas, bottom, BLACK, 2)
    _fill_at(canvas, ax - 90, ay - 5, TANK_GREEN)

    body = _offset_all(anchor, ((-100, -60), (100, -60), (95, -95), (-75, -95)))
    draw_polygon(canvas, body, BLACK, 2)
    _fill_at(canvas, ax - 95, ay - 61, TANK_GREEN)

    draw_circle_half(canvas, 50, Point(ax + 15, ay - 95), 2, BLACK)
    _fill_at(canvas, ax + 15, ay - 99, TANK_GREEN)

    for dx, dy, radius in ((0, -29, 25), (-57, -29, 25), (57, -29, 25), (-102, -39, 15), (102, -39, 15)):
        draw_circle(canvas, radius, Point(ax + dx, ay + dy), 2, BLACK)
        _fill_at(canvas, ax + dx, ay + dy - 3, BLACK)


@dataclass
class Game:
    """Shared state of the plane-shooting game."""

    canvas: Canvas
    planeloc: int = 0
    end_sign: bool = False
    cannon_x: int = 0
    cannon_y: int = 0
    projectile_hit: bool = False

    def build_cannon(self, x: int, y: int, color: Color | None = None) -> None:
        """Place the cannon at (x, y) and draw the tank there."""
        self.cannon_x = x
        self.cannon_y = y
        draw_tank(self.canvas, Point(x, y))

    def shoot_cannon(self, delay: float = 0.005) -> bool:
        """Fly a projectile upwards from the cannon; return whether it hit the plane.

        A hit sets ``end_sign``. Once a projectile has hit, later shots do nothing.
        """
        x = self.cannon_x
        y = self.cannon_y - 12
        while y > 80 and not self.projectile_hit:
            head = [Point(x, y), Point(x - 10, y + 15), Point(x + 10, y + 15)]
            draw_polygon(self.canvas, head, BLACK, 2)
            _fill_at(self.canvas, x, y + 4, PROJECTILE_HEAD)

            body = [Point(x - 15, y + 16), Point(x - 15, y + 40), Point(x + 15, y + 40), Point(x + 15, y + 16)]
            draw_polygon(self.canvas, body, BLACK, 2)
            _fill_at(self.canvas, x, y + 18, PROJECTILE_BODY)

            if delay:
                time.sleep(delay)
            y -= 4
            if 120 < y < 240 and self.planeloc - 115 < x < self.planeloc + 115:
                self.projectile_hit = True
                self.end_sign = True
        return self.projectile_hit