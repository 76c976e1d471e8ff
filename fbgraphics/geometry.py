"""Line, polygon, circle and rectangle rasterisation onto a canvas."""

from __future__ import annotations

from typing import Iterable, Sequence

from .canvas import Canvas
from .color import Color
from .point import Point

EXPLOSION_COLOR = Color(218, 114, 53)

EXPLOSION_POINTS: tuple[Point, ...] = (
    Point(4, 9), Point(7, 12), Point(11, 10), Point(7, 14), Point(10, 16),
    Point(6, 16), Point(2, 18), Point(5, 15), Point(1, 14), Point(4, 12),
    Point(0, 0),
)


def _plot(canvas: Canvas, width: int, step: int, x: int, y: int, color: Color) -> None:
    # Thick lines are stamped only every width/2 steps along the driving axis.
    if width < 4 or step % (width // 2) == 0:
        canvas.set_xy(width, x, y, color)


def _plot_positive(canvas: Canvas, p1: Point, p2: Point, color: Color, width: int) -> None:
    dx = abs(p2.x - p1.x)
    dy = abs(p2.y - p1.y)
    i, j = p1.x, p1.y
    if dx >= dy:
        p = 2 * dy - dx
        for x in range(p1.x, p2.x + 1):
            _plot(canvas, width, x, x, j, color)
            if p >= 0:
                p += 2 * (dy - dx)
                j += 1
            else:
                p += 2 * dy
    else:
        p = 2 * dx - dy
        for y in range(p1.y, p2.y + 1):
            _plot(canvas, width, y, i, y, color)
            if p >= 0:
                p += 2 * (dx - dy)
                i += 1
            else:
                p += 2 * dx


def _plot_negative(canvas: Canvas, p1: Point, p2: Point, color: Color, width: int) -> None:
    dx = abs(p2.x - p1.x)
    dy = abs(p2.y - p1.y)
    if dx >= dy:
        j = p1.y
        p = 2 * dy - dx
        for x in range(p1.x, p2.x + 1):
            _plot(canvas, width, x, x, j, color)
            if p >= 0:
                p += 2 * (dy - dx)
                j -= 1
            else:
                p += 2 * dy
    else:
        i = p2.x
        p = 2 * dx - dy
        for y in range(p2.y, p1.y + 1):
            _plot(canvas, width, y, i, y, color)
            if p >= 0:
                p += 2 * (dx - dy)
                i -= 1
            else:
                p += 2 * dx


def _plot_vertical(canvas: Canvas, p1: Point, p2: Point, color: Color, width: int) -> None:
    top, bottom = sorted((p1.y, p2.y))
    for y in range(top, bottom + 1):
        canvas.set_xy(width, p1.x, y, color)


def draw_line(canvas: Canvas, p1: Point, p2: Point, color: Color, width: int) -> None:
    """Draw a Bresenham line including both end points.

    With a width of four or more, squares are stamped only at every
    ``width // 2`` step along the main axis.
    """
    if p1.x > p2.x:
        p1, p2 = p2, p1
    if p1.y > p2.y:
        _plot_negative(canvas, p1, p2, color, width)
    elif p1.x == p2.x:
        _plot_vertical(canvas, p1, p2, color, width)
    else:
        _plot_positive(canvas, p1, p2, color, width)


def draw_polyline(canvas: Canvas, points: Iterable[Point], color: Color, width: int) -> None:
    """Draw lines joining consecutive points."""
    vertices = list(points)
    for start, end in zip(vertices, vertices[1:]):
        draw_line(canvas, start, end, color, width)


def draw_polygon(canvas: Canvas, points: Iterable[Point], color: Color, width: int) -> None:
    """Draw a closed outline through the points."""
    vertices = list(points)
    if not vertices:
        raise ValueError("a polygon needs at least one vertex")
    draw_polyline(canvas, vertices, color, width)
    draw_line(canvas, vertices[-1], vertices[0], color, width)


def draw_explosion(
    canvas: Canvas, origin: Point, points: Sequence[Point], scale_factor: int
) -> list[Point]:
    """Draw an orange explosion outline and return its vertices on screen.

    The shape is scaled when ``scale_factor`` exceeds one, then moved to ``origin``.
    """
    factor = scale_factor if scale_factor > 1 else 1
    placed = [Point(p.x * factor + origin.x, p.y * factor + origin.y) for p in points]
    draw_polygon(canvas, placed, EXPLOSION_COLOR, 2)
    return placed


def _plot8(canvas: Canvas, c: Point, p: int, q: int, width: int, color: Color) -> None:
    for x, y in (
        (c.x + p, c.y + q), (c.x - p, c.y + q), (c.x + p, c.y - q), (c.x - p, c.y - q),
        (c.x + q, c.y + p), (c.x - q, c.y + p), (c.x + q, c.y - p), (c.x - q, c.y - p),
    ):
        canvas.set_xy(width, x, y, color)


def _plot4(canvas: Canvas, c: Point, p: int, q: int, width: int, color: Color) -> None:
    for x, y in (
        (c.x + p, c.y - q), (c.x - p, c.y - q), (c.x + q, c.y - p), (c.x - q, c.y - p),
    ):
        canvas.set_xy(width, x, y, color)


def _bresenham_circle(canvas, radius, center, width, color, plot) -> None:
    p, q = 0, radius
    d = 3 - 2 * radius
    plot(canvas, center, p, q, width, color)
    while p < q:
        p += 1
        if d < 0:
            d += 4 * p + 6
        else:
            q -= 1
            d += 4 * (p - q) + 10
        plot(canvas, center, p, q, width, color)


def draw_circle(canvas: Canvas, radius: int, center: Point, width: int, color: Color) -> None:
    """Draw a full circle outline."""
    _bresenham_circle(canvas, radius, center, width, color, _plot8)


def draw_circle_half(
    canvas: Canvas, radius: int, center: Point, width: int, color: Color
) -> None:
    """Draw the upper half of a circle outline."""
    _bresenham_circle(canvas, radius, center, width, color, _plot4)


def draw_rect(canvas: Canvas, x: int, y: int, w: int, h: int, color: Color) -> None:
    """Fill a w-by-h rectangle whose top-left corner is (x, y)."""
    for i in range(w):
        for j in range(h):
            canvas.set_xy(1, x + i, y + j, color)


def draw_line_simple(
    canvas: Canvas, start: Point, end: Point, color: Color, width: int
) -> None:
    """Draw a line with the symmetric Bresenham walk; the end point is not drawn."""
    dx = abs(end.x - start.x)
    dy = abs(end.y - start.y)
    x, y = start.x, start.y
    x_inc = 1 if start.x < end.x else -1
    y_inc = 1 if start.y < end.y else -1
    error = dx - dy
    while x != end.x or y != end.y:
        canvas.set_xy(width, x, y, color)
        error2 = 2 * error
        if error2 > -dy:
            error -= dy
            x += x_inc
        if error2 < dx:
            error += dx
            y += y_inc


def draw_circle_outline(
    canvas: Canvas, radius: int, center: Point, width: int, color: Color
) -> None:
    """Draw a circle outline with the midpoint algorithm."""
    x, y = 0, radius
    decision = 1 - radius
    cx, cy = center.x, center.y
    while x <= y:
        for px, py in (
            (cx + x, cy + y), (cx - x, cy + y), (cx + x, cy - y), (cx - x, cy - y),
            (cx + y, cy + x), (cx - y, cy + x), (cx + y, cy - x), (cx - y, cy - x),
        ):
            canvas.set_xy(width, px, py, color)
        if decision < 0:
            decision += 2 * x + 3
        else:
            decision += 2 * (x - y) + 5
            y -= 1
        x += 1