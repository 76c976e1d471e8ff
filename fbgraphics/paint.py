"""A keyboard-driven drawing program on the framebuffer."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

from .canvas import Canvas, FramebufferError, open_framebuffer
from .color import Color, set_color
from .keypress import Key, getch

BLACK = set_color(0, 0, 0)
PALETTE: tuple[Color, ...] = (
    set_color(255, 255, 255),
    set_color(255, 0, 0),
    set_color(0, 255, 0),
    set_color(0, 0, 255),
)

MOVE_STEP = 20
SCALE_STEP = 0.1


@dataclass
class PaintState:
    """View position, zoom, drawing modes and the chosen colour."""

    left: float = 500
    up: float = 250
    scale_factor: float = 1.0
    rotation_degree: int = 0
    fill: bool = False
    draw_triangle: bool = False
    draw_rectangle: bool = False
    current_color: int = 0
    colors: tuple[Color, ...] = PALETTE

    @property
    def color(self) -> Color:
        """The colour currently selected."""
        return self.colors[self.current_color]

    def handle_key(self, key: int) -> bool:
        """Apply a key press; return whether the screen needs redrawing."""
        if key == Key.LEFT:
            self.left -= MOVE_STEP
        elif key == Key.RIGHT:
            self.left += MOVE_STEP
        elif key == Key.UP:
            self.up += MOVE_STEP
        elif key == Key.DOWN:
            self.up -= MOVE_STEP
        elif key == Key.ZOOMIN:
            self.scale_factor -= SCALE_STEP
        elif key == Key.ZOOMOUT:
            self.scale_factor += SCALE_STEP
        elif key == Key.Z:
            self.fill = not self.fill
        elif key == Key.X:
            self.draw_triangle = not self.draw_triangle
        elif key == Key.C:
            self.draw_rectangle = not self.draw_rectangle
        elif key == Key.LESSTHAN:
            self.current_color = (self.current_color - 1) % len(self.colors)
        elif key == Key.MORETHAN:
            self.current_color = (self.current_color + 1) % len(self.colors)
        else:
            return False
        return True

    def refresh(self, canvas: Canvas) -> None:
        """Clear the screen to black."""
        canvas.print_background(BLACK)


def main(argv=None) -> int:
    """Run the drawing program on a framebuffer device until input ends."""
    parser = argparse.ArgumentParser(
        prog="fbgraphics-paint", description="Keyboard-driven drawing on the framebuffer."
    )
    parser.add_argument("--device", default="/dev/fb0", help="framebuffer device")
    args = parser.parse_args(argv)

    try:
        canvas = open_framebuffer(args.device)
    except FramebufferError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return exc.code

    with canvas:
        state = PaintState()
        canvas.print_background(BLACK)
        state.refresh(canvas)
        while (key := getch()) != -1:
            if state.handle_key(key):
                state.refresh(canvas)
    return 0


if __name__ == "__main__":
    sys.exit(main())