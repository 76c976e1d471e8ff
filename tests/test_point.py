import pytest

from fbgraphics.point import Point


def test_translated_moves_point():
    assert Point(3, 4).translated(10, -2) == Point(13, 2)


def test_translated_round_trip():
    p = Point(-7, 12)
    assert p.translated(5, 9).translated(-5, -9) == p


def test_translated_leaves_original_unchanged():
    p = Point(1, 1)
    p.translated(2, 2)
    assert p == Point(1, 1)


def test_points_are_hashable_and_immutable():
    assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2
    with pytest.raises(AttributeError):
        Point(0, 0).x = 1