from fbgraphics.app import (
    BACKGROUND,
    CANNON_START,
    PLANE_COLOR,
    crash_sequence,
    fly_plane,
    main,
)
from fbgraphics.canvas import Canvas
from fbgraphics.color import Color
from fbgraphics.game import Game


class _StopAfter(Canvas):
    """A canvas that ends the game after a number of background repaints."""

    def __init__(self, *args, frames, **kwargs):
        super().__init__(*args, **kwargs)
        self.frames = frames
        self.painted = 0
        self.game = None

    def print_background(self, color):
        super().print_background(color)
        self.painted += 1
        if self.painted >= self.frames and self.game is not None:
            self.game.end_sign = True


def _fly(frames):
    canvas = _StopAfter(640, 480, frames=frames)
    game = Game(canvas, cannon_x=CANNON_START)
    canvas.game = game
    result = fly_plane(game, 0)
    return game, result


def test_fly_plane_tracks_plane_and_places_cannon():
    game, (x, y, sign) = _fly(1)
    assert game.planeloc == x
    assert game.cannon_x == CANNON_START
    assert game.cannon_y == 480 - 100
    assert sign in (1, -1)


def test_fly_plane_moves_eight_pixels_per_frame():
    _, (x1, y1, _) = _fly(1)
    _, (x2, y2, _) = _fly(2)
    assert x2 - x1 == 8
    assert y2 - y1 == 8


def test_fly_plane_does_nothing_once_game_has_ended():
    canvas = Canvas(640, 480)
    game = Game(canvas, cannon_x=CANNON_START, end_sign=True)
    x, y, sign = fly_plane(game, 0)
    assert (x, y, sign) == (120, 150, 1)
    assert game.planeloc == 0


def test_crash_sequence_ends_on_ground_after_bounce():
    canvas = Canvas(64, 64)
    game = Game(canvas)
    wings = crash_sequence(game, 32, -90, 1, 0)
    assert wings.pos.y >= canvas.height - 100
    assert wings.vel.x == 0


def test_crash_sequence_blacks_out_outside_box():
    canvas = Canvas(64, 64)
    game = Game(canvas)
    crash_sequence(game, 32, -90, 1, 0)
    assert canvas.get_xy(0, 0) == PLANE_COLOR
    assert canvas.get_xy(5, 20) == BACKGROUND
    assert BACKGROUND == Color(66, 134, 244)


def test_main_reports_missing_device(tmp_path, capsys):
    code = main(["--device", str(tmp_path / "missing")])
    assert code == 1
    assert "Error" in capsys.readouterr().err