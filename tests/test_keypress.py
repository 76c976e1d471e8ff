import io

import pytest

from fbgraphics.keypress import Key, getch


def test_reads_character_code():
    assert getch(io.StringIO("a")) == Key.A


def test_reads_successive_characters():
    stream = io.StringIO("\nD ")
    assert [getch(stream) for _ in range(3)] == [Key.ENTER, Key.LEFT, Key.SPACE]


def test_end_of_input_is_minus_one():
    assert getch(io.StringIO("")) == -1


def test_binary_stream():
    stream = io.BytesIO(b"zC")
    assert getch(stream) == Key.Z
    assert getch(stream) == Key.RIGHT
    assert getch(stream) == -1


@pytest.mark.parametrize("char", list("abcdefghijklmnopqrstuvwxyz"))
def test_letter_keys_match_read_characters(char):
    assert getch(io.StringIO(char)) == Key[char.upper()]


@pytest.mark.parametrize(
    "char, name",
    list(zip("0123456789", [
        "ZERO", "ONE", "TWO", "THREE", "FOUR", "FIVE", "SIX", "SEVEN", "EIGHT", "NINE"
    ])),
)
def test_digit_keys_match_read_characters(char, name):
    assert getch(io.StringIO(char)) == Key[name]


def test_enter_and_left_codes():
    assert getch(io.StringIO("\n")) == 10
    assert getch(io.StringIO("D")) == 68