import pytest

from fbgraphics.canvas import Canvas
from fbgraphics.color import Color
from fbgraphics.keypress import Key
from fbgraphics.paint import BLACK, PaintState, main

WHITE = Color(255, 255, 255)


def test_defaults():
    state = PaintState()
    assert (state.left, state.up) == (500, 250)
    assert state.scale_factor == 1
    assert state.color == WHITE


@pytest.mark.parametrize(
    "key, attribute, expected",
    [
        (Key.LEFT, "left", 480),
        (Key.RIGHT, "left", 520),
        (Key.UP, "up", 270),
        (Key.DOWN, "up", 230),
    ],
)
def test_arrow_keys_move_view(key, attribute, expected):
    state = PaintState()
    assert state.handle_key(key) is True
    assert getattr(state, attribute) == expected


def test_zoom_keys_round_trip():
    state = PaintState()
    state.handle_key(Key.ZOOMIN)
    assert state.scale_factor == pytest.approx(0.9)
    state.handle_key(Key.ZOOMOUT)
    assert state.scale_factor == pytest.approx(1.0)


@pytest.mark.parametrize(
    "key, attribute",
    [(Key.Z, "fill"), (Key.X, "draw_triangle"), (Key.C, "draw_rectangle")],
)
def test_mode_keys_toggle(key, attribute):
    state = PaintState()
    state.handle_key(key)
    assert getattr(state, attribute) is True
    state.handle_key(key)
    assert getattr(state, attribute) is False


def test_colour_selection_wraps_both_ways():
    state = PaintState()
    state.handle_key(Key.LESSTHAN)
    assert state.current_color == 3
    assert state.color == Color(0, 0, 255)
    state.handle_key(Key.MORETHAN)
    assert state.current_color == 0
    for _ in range(len(state.colors)):
        state.handle_key(Key.MORETHAN)
    assert state.current_color == 0


def test_unknown_key_changes_nothing():
    state = PaintState()
    assert state.handle_key(Key.Q) is False
    assert state == PaintState()


def test_refresh_clears_to_black_except_margin():
    canvas = Canvas(20, 20)
    canvas.print_background(WHITE)
    canvas.set_xy(1, 18, 18, WHITE)
    PaintState().refresh(canvas)
    assert canvas.get_xy(0, 0) == BLACK
    assert canvas.get_xy(13, 13) == BLACK
    assert canvas.get_xy(18, 18) == WHITE


def test_main_reports_missing_device(tmp_path, capsys):
    code = main(["--device", str(tmp_path / "missing")])
    assert code == 1
    assert "Error" in capsys.readouterr().err