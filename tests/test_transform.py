import pytest

from fbgraphics.point import Point
from fbgraphics.transform import rotate_many, rotate_point, scale_line, translate_line


def test_rotation_by_zero_is_identity():
    p = Point(37, -12)
    assert rotate_point(p, Point(5, 5), 0) == p


def test_pivot_is_fixed_point():
    pivot = Point(20, 30)
    assert rotate_point(pivot, pivot, 73) == pivot


def test_quarter_turn_about_origin():
    assert rotate_point(Point(10, 0), Point(0, 0), 90) == Point(0, 10)


def test_half_turn_about_pivot_mirrors():
    pivot = Point(100, 100)
    result = rotate_point(Point(110, 120), pivot, 180)
    assert result == Point(90, 80)


def test_rotation_is_relative_to_pivot():
    moved = rotate_point(Point(110, 100), Point(100, 100), 90)
    base = rotate_point(Point(10, 0), Point(0, 0), 90)
    assert moved == base.translated(100, 100)


def test_rotate_many_matches_each_point():
    pivot = Point(3, 4)
    points = [Point(10, 0), Point(-5, 7), Point(3, 4)]
    assert rotate_many(pivot, points, 45) == [rotate_point(p, pivot, 45) for p in points]


def test_rotate_many_empty():
    assert rotate_many(Point(0, 0), [], 30) == []


def test_scale_by_one_is_identity():
    line = (Point(3, -4), Point(7, 9))
    assert scale_line(line, 1.0, 1.0) == line


def test_scale_rounds_half_away_from_zero():
    assert scale_line((Point(3, -3), Point(0, 0)), 0.5, 0.5) == (Point(2, -2), Point(0, 0))


def test_scale_axes_independent():
    result = scale_line((Point(2, 2), Point(4, 6)), 2.0, 1.0)
    assert [p.y for p in result] == [2, 6]
    assert [p.x for p in result] == [4, 8]


def test_translate_round_trip():
    line = (Point(1, 2), Point(-3, 4))
    assert translate_line(translate_line(line, 9, -6), -9, 6) == line


def test_line_needs_two_points():
    with pytest.raises(ValueError):
        translate_line([Point(0, 0)], 1, 1)
    with pytest.raises(ValueError):
        scale_line([Point(0, 0)] * 3, 1.0, 1.0)