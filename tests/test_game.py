import pytest

from fbgraphics.canvas import Canvas
from fbgraphics.color import Color, set_color
from fbgraphics.game import (
    Game,
    draw_baling,
    draw_broken_plane_wings,
    draw_parachute,
    draw_plane,
    draw_tank,
    draw_tire,
)
from fbgraphics.point import Point

BLUE = set_color(66, 134, 244)
BLACK = set_color(0, 0, 0)
WHITE = set_color(255, 255, 255)


def _canvas(width, height):
    canvas = Canvas(width, height)
    canvas.print_background(BLUE)
    return canvas


def test_tank_fills_hull_green_and_tires_black():
    canvas = _canvas(320, 300)
    draw_tank(canvas, Point(160, 260))
    assert canvas.get_xy(160 - 90, 260 - 5) == Color(75, 83, 32)
    assert canvas.get_xy(160, 260 - 32) == BLACK
    assert canvas.get_xy(5, 5) == BLUE


def test_build_cannon_records_position():
    canvas = _canvas(320, 300)
    game = Game(canvas)
    game.build_cannon(160, 260, WHITE)
    assert (game.cannon_x, game.cannon_y) == (160, 260)
    assert canvas.get_xy(160 - 90, 260 - 5) == Color(75, 83, 32)


def test_shoot_hits_plane_above_cannon():
    canvas = _canvas(320, 300)
    game = Game(canvas, planeloc=160)
    game.build_cannon(160, 260, WHITE)
    assert game.shoot_cannon(delay=0) is True
    assert game.end_sign is True
    assert game.projectile_hit is True


def test_shoot_misses_distant_plane():
    canvas = _canvas(320, 200)
    game = Game(canvas, planeloc=1000, cannon_x=160, cannon_y=130)
    assert game.shoot_cannon(delay=0) is False
    assert game.end_sign is False
    assert any(canvas.get_xy(160, y) == BLACK for y in range(80, 130))
    assert canvas.get_xy(20, 20) == BLUE


def test_no_shot_after_hit():
    canvas = _canvas(320, 200)
    game = Game(canvas, planeloc=1000, cannon_x=160, cannon_y=130, projectile_hit=True)
    assert game.shoot_cannon(delay=0) is True
    assert canvas.get_xy(160, 110) == BLUE


@pytest.mark.parametrize("direction", [1, -1])
def test_plane_body_filled_in_both_directions(direction):
    canvas = _canvas(400, 260)
    color = set_color(200, 30, 30)
    draw_plane(canvas, Point(200, 150), direction, color)
    mul = 1 if direction > 0 else -1
    assert canvas.get_xy(200 + mul * (-1169 + 1250), 150 - 75 + 55) == color
    assert canvas.get_xy(200 + mul * (-1169 + 1220), 150 - 75 + 110) == color


def test_plane_mirrors_with_direction():
    color = set_color(200, 30, 30)
    right = _canvas(400, 260)
    left = _canvas(400, 260)
    draw_plane(right, Point(200, 150), 1, color)
    draw_plane(left, Point(200, 150), -1, color)
    seed_right = (200 + 81, 130)
    seed_left = (200 - 81, 130)
    assert right.get_xy(*seed_right) == left.get_xy(*seed_left) == color
    assert left.get_xy(*seed_right) != color


def test_broken_wings_filled_black():
    canvas = _canvas(300, 240)
    anchor = Point(50, 100)
    draw_broken_plane_wings(canvas, anchor)
    assert canvas.get_xy(anchor.x + 80, anchor.y + 80) == BLACK
    assert canvas.get_xy(anchor.x + 180, anchor.y - 30) == BLACK
    assert canvas.get_xy(5, 5) == BLUE


def test_parachute_colours():
    canvas = _canvas(300, 420)
    anchor = Point(150, 10)
    draw_parachute(canvas, anchor)
    assert canvas.get_xy(anchor.x - 25, anchor.y + 50) == Color(255, 192, 203)
    assert canvas.get_xy(anchor.x - 40, anchor.y + 294) == Color(255, 0, 0)


def test_baling_unrotated_blade_vertices_are_white():
    canvas = _canvas(200, 200)
    draw_baling(canvas, 80, 80, 0)
    assert canvas.get_xy(80 + 20, 80 + 20) == WHITE
    assert canvas.get_xy(80 + 20, 80 + 40) == WHITE
    assert canvas.get_xy(5, 5) == BLUE


def test_tire_rim_is_black():
    canvas = _canvas(100, 100)
    centre = Point(50, 50)
    draw_tire(canvas, centre, 0)
    assert canvas.get_xy(centre.x + 10, centre.y) == BLACK
    assert canvas.get_xy(centre.x - 10, centre.y) == BLACK
    assert canvas.get_xy(5, 5) == BLUE