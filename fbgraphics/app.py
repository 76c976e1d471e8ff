"""The plane-shooting game: fly the plane, shoot it down, watch it fall."""

from __future__ import annotations

import argparse
import sys
import threading
import time

from .canvas import FramebufferError, open_framebuffer
from .color import set_color
from .game import Game, draw_broken_plane_wings, draw_plane
from .geometry import draw_rect
from .keypress import Key, getch
from .physics import PhysicsPoint, make_physics_point
from .point import Point

FRAME_DELAY = 0.033
BACKGROUND = set_color(66, 134, 244)
PLANE_COLOR = set_color(0, 0, 0)
CANNON_COLOR = set_color(255, 255, 10)
CANNON_START = 100
CANNON_STEP = 50
PLANE_START = Point(120, 150)
PLANE_SPEED = 8


def _listen(game: Game, stream=None) -> None:
    """React to keys until the input ends: Enter fires, arrows move the cannon."""
    while True:
        key = getch(stream)
        if key == -1:
            return
        if key == Key.ENTER:
            game.shoot_cannon()
        elif key == Key.LEFT:
            game.cannon_x -= CANNON_STEP
        elif key == Key.RIGHT:
            game.cannon_x += CANNON_STEP


def fly_plane(game: Game, frame_delay: float = FRAME_DELAY) -> tuple[int, int, int]:
    """Animate the plane until it is hit; return its last x, y and horizontal sign.

    Every frame redraws the background, the plane and the cannon, which sits
    at ``game.cannon_x`` one hundred pixels above the bottom of the screen.
    """
    canvas = game.canvas
    x, y = PLANE_START.x, PLANE_START.y
    sign = ysign = 1
    while not game.end_sign:
        started = time.monotonic()

        x += PLANE_SPEED * sign
        y += PLANE_SPEED * ysign

        if x > canvas.width - 200:
            sign = -1
        elif x < 100:
            sign = 1

        # Passing y = 200 turns the plane horizontally, as the game always did.
        if y > 200:
            sign = -1
        elif y < 100:
            ysign = 1

        canvas.print_background(BACKGROUND)
        draw_plane(canvas, Point(x, y), -sign, PLANE_COLOR)
        game.planeloc = x
        game.build_cannon(game.cannon_x, canvas.height - 100, CANNON_COLOR)

        elapsed = time.monotonic() - started
        if elapsed < frame_delay:
            time.sleep(frame_delay - elapsed)
    return x, y, sign


def crash_sequence(
    game: Game, x: int, y: int, sign: int, frame_delay: float = FRAME_DELAY
) -> PhysicsPoint:
    """Let the wreck fall and bounce once on the ground; return the wing fragment.

    Everything outside a 200-pixel box below the crash point is blacked out.
    """
    canvas = game.canvas
    width, height = canvas.width, canvas.height
    ground = height - 100

    wings = make_physics_point(x, y, 0, -50)
    debris = [
        make_physics_point(x, y - 200, -100 * sign, -100),
        make_physics_point(x, y, 100 * sign, -50),
        make_physics_point(x, y, 100 * sign, 0),
        wings,
        make_physics_point(x - 40, y + 10, -100 * sign, 0),
    ]

    box_x, box_y, box_w, box_h = x - 60, y + 100, 200, 200
    bounced = False

    while wings.pos.y < ground or not bounced:
        canvas.print_background(BACKGROUND)
        for piece in debris:
            piece.update()

        if wings.pos.y > ground and not bounced:
            bounced = True
            wings.pos = Point(wings.pos.x, height - 150)
            wings.vel = Point(0, -200)

        draw_broken_plane_wings(canvas, wings.pos)

        draw_rect(canvas, 0, 0, width, box_y, PLANE_COLOR)
        draw_rect(canvas, 0, box_y, box_x, box_h, PLANE_COLOR)
        draw_rect(canvas, box_x + box_w, box_y, width - box_x - box_w, box_h, PLANE_COLOR)
        draw_rect(canvas, 0, box_y + box_h, width, height - box_y - box_h, PLANE_COLOR)

        if frame_delay:
            time.sleep(frame_delay)
    return wings


def main(argv=None) -> int:
    """Run the game on a framebuffer device."""
    parser = argparse.ArgumentParser(
        prog="fbgraphics", description="Shoot down the plane with the tank."
    )
    parser.add_argument("--device", default="/dev/fb0", help="framebuffer device")
    args = parser.parse_args(argv)

    try:
        canvas = open_framebuffer(args.device)
    except FramebufferError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return exc.code

    with canvas:
        game = Game(canvas, cannon_x=CANNON_START)
        canvas.print_background(BACKGROUND)
        listener = threading.Thread(target=_listen, args=(game,), daemon=True)
        listener.start()
        x, y, sign = fly_plane(game)
        crash_sequence(game, x, y, sign)
    return 0


if __name__ == "__main__":
    sys.exit(main())