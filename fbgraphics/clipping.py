"""Cohen-Sutherland style line clipping against a rectangular window.

The window's y axis grows upwards: ``top`` is the larger y value and
``bottom`` the smaller one.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

from .canvas import Canvas
from .color import set_color
from .geometry import draw_polygon
from .point import Point

WHITE = set_color(255, 255, 255)


@dataclass(frozen=True)
class ClippingWindow:
    """Horizontal bounds ``left``..``right`` and vertical bounds ``bottom``..``top``."""

    left: int
    right: int
    top: int
    bottom: int


@dataclass(frozen=True)
class RegionCode:
    """Which sides of the window a point lies beyond."""

    left: bool = False
    right: bool = False
    top: bool = False
    bottom: bool = False

    def is_inside(self) -> bool:
        """Tell whether the point lies beyond no side."""
        return not (self.top or self.left or self.right or self.bottom)

    def __str__(self) -> str:
        return f"{int(self.top)} {int(self.bottom)} {int(self.right)} {int(self.left)}"


class BitState(enum.IntEnum):
    """How one region-code bit compares between the two end points."""

    BOTH_ZERO = 4
    BOTH_ONE = 5
    ONE_ZERO = 6


@dataclass(frozen=True)
class LineAnalysis:
    """The region codes of a line's end points and how they compare per side."""

    top: BitState
    bottom: BitState
    left: BitState
    right: BitState
    start_inside: bool
    end_inside: bool
    start: Point
    end: Point
    start_code: RegionCode = field(default_factory=RegionCode)
    end_code: RegionCode = field(default_factory=RegionCode)

    def _states(self) -> tuple[BitState, ...]:
        return (self.top, self.bottom, self.left, self.right)

    def is_completely_inside(self) -> bool:
        """Tell whether neither end point lies beyond any side."""
        return all(state is BitState.BOTH_ZERO for state in self._states())

    def is_completely_outside(self) -> bool:
        """Tell whether both end points lie beyond the same side."""
        return any(state is BitState.BOTH_ONE for state in self._states())


def check_region_code_bit(a: int, b: int) -> BitState:
    """Compare one region-code bit of two end points; ``a`` must be 0 or 1."""
    if a == 0:
        return BitState.BOTH_ZERO if b == 0 else BitState.ONE_ZERO
    if a == 1:
        return BitState.BOTH_ONE if b == 1 else BitState.ONE_ZERO
    raise ValueError(f"region code bit must be 0 or 1, got {a!r}")


def compute_region_code(point: Point, window: ClippingWindow) -> RegionCode:
    """Return the region code of a point relative to the window."""
    return RegionCode(
        left=point.x < window.left,
        right=point.x > window.right,
        top=point.y > window.top,
        bottom=point.y < window.bottom,
    )


def analyze_line(start: Point, end: Point, window: ClippingWindow) -> LineAnalysis:
    """Compute the region codes of both end points and compare them side by side."""
    start_code = compute_region_code(start, window)
    end_code = compute_region_code(end, window)
    return LineAnalysis(
        top=check_region_code_bit(start_code.top, end_code.top),
        bottom=check_region_code_bit(start_code.bottom, end_code.bottom),
        left=check_region_code_bit(start_code.left, end_code.left),
        right=check_region_code_bit(start_code.right, end_code.right),
        start_inside=start_code.is_inside(),
        end_inside=end_code.is_inside(),
        start=start,
        end=end,
        start_code=start_code,
        end_code=end_code,
    )


def _round(value: float) -> int:
    whole = math.floor(abs(value))
    if abs(value) - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def clip_line(
    analysis: LineAnalysis, window: ClippingWindow, canvas: Canvas | None = None
) -> tuple[Point, Point]:
    """Clip the analysed line to the window and return the new end points.

    A line wholly inside is returned unchanged and, if a canvas is given,
    drawn on it in white. A line wholly beyond one side yields two origin
    points. Otherwise the end points are moved onto the sides they cross,
    in the order top, bottom, left, right.
    """
    if analysis.is_completely_inside():
        if canvas is not None:
            draw_polygon(canvas, (analysis.start, analysis.end), WHITE, 1)
        return analysis.start, analysis.end
    if analysis.is_completely_outside():
        return Point(0, 0), Point(0, 0)

    sx, sy = analysis.start.x, analysis.start.y
    ex, ey = analysis.end.x, analysis.end.y
    start_code = analysis.start_code
    end_code = analysis.end_code

    def slope() -> float:
        return (sy - ey) / (sx - ex)

    def within_x(x: int) -> bool:
        return window.left <= x <= window.right

    if analysis.top is BitState.ONE_ZERO:
        if start_code.top:
            if sx == ex:
                sy = window.top
            else:
                sx = _round(sx + (window.top - sy) / slope())
                sy = window.top
            if within_x(sx):
                start_code = RegionCode()
        if end_code.top:
            if sx == ex:
                # A vertical line moves its start point here, as it always has.
                sy = window.top
            else:
                ex = _round(ex + (window.top - ey) / slope())
                ey = window.top
            if within_x(ex):
                end_code = RegionCode()

    if analysis.bottom is BitState.ONE_ZERO:
        if start_code.bottom:
            if sx == ex:
                sy = window.bottom
            else:
                sx = _round(sx + (window.bottom - sy) / slope())
                sy = window.bottom
            if within_x(sx):
                start_code = RegionCode()
        if end_code.bottom:
            if sx == ex:
                ey = window.bottom
            else:
                ex = _round(ex + (window.bottom - ey) / slope())
                ey = window.bottom
            if within_x(ex):
                end_code = RegionCode()

    if analysis.left is BitState.ONE_ZERO:
        if start_code.left:
            new_y = sy + slope() * (window.left - sx)
            sx = window.left
            sy = _round(new_y)
            if window.bottom <= sx <= window.top:
                start_code = RegionCode()
        if end_code.left:
            new_y = ey + slope() * (window.left - ex)
            ex = window.left
            ey = _round(new_y)
            if window.bottom <= ex <= window.top:
                end_code = RegionCode()

    if analysis.right is BitState.ONE_ZERO:
        if start_code.right:
            new_y = sy + slope() * (window.right - sx)
            sx = window.right
            sy = _round(new_y)
        if end_code.right:
            new_y = ey + slope() * (window.right - ex)
            ex = window.right
            ey = _round(new_y)

    return Point(sx, sy), Point(ex, ey)