"""A pixel surface backed by a Linux framebuffer or by memory."""

from __future__ import annotations

import mmap
import os
import struct
import sys

from .color import Color

AVAILABLE_WIDTH = 3840
AVAILABLE_HEIGHT = 2160

OUT_OF_RANGE = Color(-999, -999, -999)

FBIOGET_VSCREENINFO = 0x4600
FBIOGET_FSCREENINFO = 0x4602

_VAR_INFO = struct.Struct("=40I")
_FIX_INFO = struct.Struct("@16sL4I3HIL2I3H0L")


class FramebufferError(Exception):
    """The framebuffer device could not be set up; ``code`` tells which step failed."""

    def __init__(self, message: str, code: int) -> None:
        super().__init__(message)
        self.code = code


class Canvas:
    """Pixels laid out as in a framebuffer: 32 bpp as BGRX, anything else as 16-bit 5-6-5."""

    def __init__(
        self,
        width: int,
        height: int,
        bits_per_pixel: int = 32,
        *,
        line_length: int | None = None,
        xoffset: int = 0,
        yoffset: int = 0,
        buffer=None,
    ) -> None:
        self.width = width
        self.height = height
        self.bits_per_pixel = bits_per_pixel
        self.xoffset = xoffset
        self.yoffset = yoffset
        self._stride = bits_per_pixel // 8
        self.line_length = (
            (width + xoffset) * self._stride if line_length is None else line_length
        )
        self.buffer = (
            bytearray(self.line_length * (height + yoffset)) if buffer is None else buffer
        )
        self._available: set[tuple[int, int]] = set()
        self._fd: int | None = None

    def __enter__(self) -> Canvas:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _location(self, x: int, y: int) -> int:
        return (x + self.xoffset) * self._stride + (y + self.yoffset) * self.line_length

    def _pixel_bytes(self, color: Color) -> bytes:
        if self.bits_per_pixel == 32:
            return bytes((color.b, color.g, color.r, 0))
        value = (color.r << 11 | color.g << 5 | color.b) & 0xFFFF
        return value.to_bytes(2, sys.byteorder)

    def set_xy(self, size: int, x: int, y: int, color: Color) -> None:
        """Paint a size-by-size square with its top-left corner at (x, y).

        Nothing is drawn unless the whole square lies strictly inside the screen.
        """
        if not (0 <= x and x + size < self.width and 0 <= y and y + size < self.height):
            return
        pixel = self._pixel_bytes(color)
        for i in range(x, x + size):
            for j in range(y, y + size):
                loc = self._location(i, j)
                self.buffer[loc:loc + len(pixel)] = pixel
                if x < AVAILABLE_WIDTH and y < AVAILABLE_HEIGHT:
                    self._available.add((x, y))

    def get_xy(self, x: int, y: int) -> Color:
        """Return the colour at (x, y), or OUT_OF_RANGE outside the screen."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return OUT_OF_RANGE
        loc = self._location(x, y)
        if self.bits_per_pixel == 32:
            color = Color(self.buffer[loc + 2], self.buffer[loc + 1], self.buffer[loc])
            self.buffer[loc + 3] = 0
            return color
        value = int.from_bytes(self.buffer[loc:loc + 2], sys.byteorder)
        return Color((value & 63488) >> 11, (value & 2016) >> 5, value & 31)

    def print_background(self, color: Color) -> None:
        """Fill the screen, except a six-pixel margin on the right and bottom."""
        width = self.width - 6
        height = self.height - 6
        if width <= 0 or height <= 0:
            return
        pixel = self._pixel_bytes(color)
        if self._stride == len(pixel):
            row = pixel * width
            for j in range(height):
                start = self._location(0, j)
                self.buffer[start:start + len(row)] = row
            return
        for j in range(height):
            for i in range(width):
                loc = self._location(i, j)
                self.buffer[loc:loc + len(pixel)] = pixel

    def _check_available_index(self, x: int, y: int) -> None:
        if not (0 <= x < AVAILABLE_WIDTH and 0 <= y < AVAILABLE_HEIGHT):
            raise IndexError(f"({x}, {y}) is outside the availability map")

    def is_available(self, x: int, y: int) -> bool:
        """Tell whether (x, y) has been marked as drawn."""
        self._check_available_index(x, y)
        return (x, y) in self._available

    def mark_available(self, x: int, y: int) -> None:
        """Mark (x, y) as drawn."""
        self._check_available_index(x, y)
        self._available.add((x, y))

    def close(self) -> None:
        """Release the mapped device, if any."""
        if isinstance(self.buffer, mmap.mmap) and not self.buffer.closed:
            self.buffer.close()
        if self._fd is not None:
            os.close(self._fd)
            self._fd = None


def open_framebuffer(path: str = "/dev/fb0") -> Canvas:
    """Open and map a framebuffer device as a Canvas."""
    import fcntl

    try:
        fd = os.open(path, os.O_RDWR)
    except OSError as exc:
        raise FramebufferError(f"cannot open framebuffer device: {exc}", 1) from exc
    try:
        try:
            fix = _FIX_INFO.unpack(fcntl.ioctl(fd, FBIOGET_FSCREENINFO, bytes(_FIX_INFO.size)))
        except OSError as exc:
            raise FramebufferError(f"error reading fixed information: {exc}", 2) from exc
        try:
            var = _VAR_INFO.unpack(fcntl.ioctl(fd, FBIOGET_VSCREENINFO, bytes(_VAR_INFO.size)))
        except OSError as exc:
            raise FramebufferError(f"error reading variable information: {exc}", 3) from exc

        line_length = fix[9]
        xres, yres, _, _, xoffset, yoffset, bpp = var[:7]
        print(f"{xres}x{yres}, {bpp}bpp")
        if yres < 700:
            screensize = xres * line_length * bpp // 8
        else:
            screensize = xres * yres * bpp // 8
        try:
            mapped = mmap.mmap(
                fd, screensize, mmap.MAP_SHARED, mmap.PROT_READ | mmap.PROT_WRITE
            )
        except (OSError, ValueError) as exc:
            raise FramebufferError(
                f"failed to map framebuffer device to memory: {exc}", 4
            ) from exc
    except FramebufferError:
        os.close(fd)
        raise
    print("The framebuffer device was mapped to memory successfully.")
    canvas = Canvas(
        xres, yres, bpp,
        line_length=line_length, xoffset=xoffset, yoffset=yoffset, buffer=mapped,
    )
    canvas._fd = fd
    return canvas