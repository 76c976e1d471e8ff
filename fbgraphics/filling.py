"""Area filling: queue-based and depth-first flood fills and a scanline fill."""

from __future__ import annotations

from collections import deque

from .canvas import Canvas
from .color import Color, colors_similar, set_color

WHITE = set_color(255, 255, 255)
BLACK = set_color(0, 0, 0)


def flood_fill(canvas: Canvas, x: int, y: int, color: Color, target: Color) -> None:
    """Replace the 4-connected region of ``target`` around (x, y) with ``color``.

    Points are expanded only while they lie at least one column from the right
    edge and seven rows from the bottom.
    """
    if colors_similar(color, target):
        return
    pending = deque([(x, y)])
    canvas.set_xy(1, x, y, color)
    while pending:
        px, py = pending.popleft()
        if not (0 <= px < canvas.width - 1 and 0 <= py < canvas.height - 7):
            continue
        for nx, ny in ((px, py - 1), (px + 1, py), (px, py + 1), (px - 1, py)):
            if colors_similar(target, canvas.get_xy(nx, ny)):
                canvas.set_xy(1, nx, ny, color)
                pending.append((nx, ny))


def flood(canvas: Canvas, x: int, y: int, new_color: Color, old_color: Color) -> None:
    """Depth-first fill of the region of ``old_color`` containing (x, y).

    Neighbours are visited right, left, down, up. Points off the canvas act as
    a boundary, and each point is painted at most once.
    """
    if colors_similar(new_color, old_color):
        return
    stack = [(x, y)]
    visited: set[tuple[int, int]] = set()
    while stack:
        px, py = stack.pop()
        if (px, py) in visited:
            continue
        if not (0 <= px < canvas.width and 0 <= py < canvas.height):
            continue
        if not colors_similar(canvas.get_xy(px, py), old_color):
            continue
        canvas.set_xy(1, px, py, new_color)
        visited.add((px, py))
        stack.extend(((px, py - 1), (px, py + 1), (px - 1, py), (px + 1, py)))


def raster_fill(canvas: Canvas, y_min: int, y_max: int, x_min: int, x_max: int) -> None:
    """Scan rows painting black runs that follow a white pixel with white.

    White pixels already marked as drawn are skipped. Each run painted records
    the availability map at (row, column).
    """
    for row in range(y_min, y_max):
        col = x_min
        while col < x_max:
            if not canvas.is_available(col, row) and colors_similar(
                canvas.get_xy(col, row), WHITE
            ):
                if colors_similar(canvas.get_xy(col + 1, row), WHITE):
                    while colors_similar(canvas.get_xy(col + 1, row), WHITE):
                        col += 1
                    col += 1
                elif colors_similar(canvas.get_xy(col + 1, row), BLACK):
                    while colors_similar(canvas.get_xy(col + 1, row), BLACK):
                        canvas.set_xy(1, col, row, WHITE)
                        if row >= 0 and col >= 0:
                            canvas.mark_available(row, col)
                        col += 1
                    col += 1
            col += 1