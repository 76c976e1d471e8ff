"""Key codes and unbuffered single-key reading."""

from __future__ import annotations

import enum
import os
import sys

try:
    import termios
except ImportError:
    termios = None


class Key(enum.IntEnum):
    """Character codes of the keys the programs react to."""

    ENTER = 10
    SPACE = 32
    LESSTHAN = 44
    ZOOMOUT = 45
    MORETHAN = 46
    ZERO = 48
    ONE = 49
    TWO = 50
    THREE = 51
    FOUR = 52
    FIVE = 53
    SIX = 54
    SEVEN = 55
    EIGHT = 56
    NINE = 57
    ZOOMIN = 61
    DOWN = 65
    UP = 66
    RIGHT = 67
    LEFT = 68
    A = 97
    B = 98
    C = 99
    D = 100
    E = 101
    F = 102
    G = 103
    H = 104
    I = 105  # noqa: E741
    J = 106
    K = 107
    L = 108
    M = 109
    N = 110
    O = 111  # noqa: E741
    P = 112
    Q = 113
    R = 114
    S = 115
    T = 116
    U = 117
    V = 118
    W = 119
    X = 120
    Y = 121
    Z = 122


def _tty_fileno(stream) -> int | None:
    if termios is None:
        return None
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None
    return fd if os.isatty(fd) else None


def _decode(chunk) -> int:
    if not chunk:
        return -1
    if isinstance(chunk, str):
        return ord(chunk)
    return chunk[0]


def getch(stream=None) -> int:
    """Read one character without echo or line buffering; -1 at end of input.

    ``stream`` defaults to standard input. Terminals are switched out of
    canonical mode for the read and restored afterwards.
    """
    if stream is None:
        stream = sys.stdin
    fd = _tty_fileno(stream)
    if fd is None:
        return _decode(stream.read(1))
    old = termios.tcgetattr(fd)
    new = list(old)
    new[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, new)
    try:
        return _decode(os.read(fd, 1))
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old)