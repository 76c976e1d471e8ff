"""Rotation, scaling and translation of points and lines."""

from __future__ import annotations

import math
import struct
from typing import Iterable, Sequence

from .point import Point

_FLOAT32 = struct.Struct("f")


def _f32(value: float) -> float:
    return _FLOAT32.unpack(_FLOAT32.pack(value))[0]


def _round_half_away(value: float) -> int:
    whole = math.floor(abs(value))
    if abs(value) - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def rotate_point(point: Point, pivot: Point, angle: float) -> Point:
    """Rotate a point about a pivot by an angle in degrees, truncating to integers.

    The arithmetic is carried out in single precision.
    """
    radians = _f32(angle) * math.pi / 180.0
    s = _f32(math.sin(radians))
    c = _f32(math.cos(radians))
    dx = _f32(point.x - pivot.x)
    dy = _f32(point.y - pivot.y)
    x_new = int(_f32(_f32(dx * c) - _f32(dy * s)))
    y_new = int(_f32(_f32(dx * s) + _f32(dy * c)))
    return Point(x_new + pivot.x, y_new + pivot.y)


def rotate_many(pivot: Point, points: Iterable[Point], angle: float) -> list[Point]:
    """Rotate every point about the pivot."""
    return [rotate_point(p, pivot, angle) for p in points]


def _endpoints(line: Sequence[Point]) -> tuple[Point, Point]:
    if len(line) != 2:
        raise ValueError(f"a line has two end points, got {len(line)}")
    start, end = line
    return start, end


def scale_line(line: Sequence[Point], scale_x: float, scale_y: float) -> tuple[Point, Point]:
    """Scale both end points of a line about the origin, rounding half away from zero."""
    return tuple(
        Point(_round_half_away(p.x * scale_x), _round_half_away(p.y * scale_y))
        for p in _endpoints(line)
    )


def translate_line(line: Sequence[Point], dx: int, dy: int) -> tuple[Point, Point]:
    """Move both end points of a line."""
    return tuple(p.translated(dx, dy) for p in _endpoints(line))