# fbgraphics

Pixel-level 2D drawing onto a Linux framebuffer device (`/dev/fb0`) or onto
a canvas held in memory, with a small plane-shooting game and a minimal
keyboard-driven paint program built on top of it. It has no dependencies
beyond the standard library.

## Modules

- `fbgraphics.color`: `Color` (RGBA, channels wrap to 0–255), `set_color`,
  and `colors_similar`, which treats colours whose red, green and blue
  channels differ by at most one as the same.
- `fbgraphics.point`: the immutable `Point` with `translated(dx, dy)`.
- `fbgraphics.transform`: `rotate_point` and `rotate_many` (degrees,
  truncated to integers), `scale_line` and `translate_line` for two-point lines.
- `fbgraphics.physics`: `PhysicsPoint` and `make_physics_point`; `update()`
  moves by a tenth of the velocity, then applies gravity and horizontal drag.
- `fbgraphics.keypress`: the `Key` codes and `getch(stream=None)`, which
  reads one character without echo or line buffering and returns -1 at end
  of input.
- `fbgraphics.canvas`: `Canvas`, a pixel buffer laid out like a framebuffer
  (32 bpp as BGRX, otherwise 16-bit 5-6-5), with `set_xy`, `get_xy`,
  `print_background`, `is_available`, `mark_available` and `close`;
  `open_framebuffer(path)` maps a device and raises `FramebufferError`
  (with a `code` for the step that failed) when it cannot.
- `fbgraphics.geometry`: `draw_line`, `draw_polyline`, `draw_polygon`,
  `draw_explosion`, `draw_circle`, `draw_circle_half`, `draw_rect`,
  `draw_line_simple` and `draw_circle_outline`.
- `fbgraphics.filling`: `flood_fill` (queue-based), `flood` (depth-first)
  and `raster_fill` (scanline).
- `fbgraphics.clipping`: `ClippingWindow`, `RegionCode`, `BitState`,
  `LineAnalysis`, `compute_region_code`, `analyze_line`, `clip_line`.
  The window's y axis grows upwards: `top` is the larger y value.
- `fbgraphics.game`: sprite drawing (`draw_plane`, `draw_tank`,
  `draw_parachute`, the broken-plane fragments, `draw_baling`, `draw_tire`)
  and `Game`, which holds the cannon and fires with `shoot_cannon`.
- `fbgraphics.app` and `fbgraphics.paint`: the two commands below.

## Installing

```
pip install .
```

## Running

Both commands write straight to the framebuffer. Run them from a text
console, as a user who can write to the device. Each takes
`--device PATH` (default `/dev/fb0`) and exits with a non-zero code if the
device cannot be opened or mapped.

```
fbgraphics-game
```

The plane flies across the top of the screen. The left and right arrow keys
move the tank and Enter fires. When the shot hits, the plane's wing
fragment falls, bounces once on the ground, and the program ends.

```
fbgraphics-paint
```

The paint program clears the screen to black and reacts to keys until its
input ends: the arrow keys move the view position, `=` and `-` change the
zoom factor, `z` toggles fill, `x` and `c` toggle the triangle and
rectangle modes, and `,` and `.` step through a palette of white, red,
green and blue.

## Using the library

A `Canvas` needs no device, which makes it handy for testing and for
drawing into memory:

```python
from fbgraphics.canvas import Canvas
from fbgraphics.color import set_color
from fbgraphics.point import Point
from fbgraphics.geometry import draw_polygon
from fbgraphics.filling import flood_fill

canvas = Canvas(320, 240)
canvas.print_background(set_color(66, 134, 244))
triangle = [Point(100, 100), Point(200, 100), Point(150, 20)]
draw_polygon(canvas, triangle, set_color(0, 0, 0), 2)
flood_fill(canvas, 150, 80, set_color(255, 0, 0), canvas.get_xy(150, 80))
print(canvas.get_xy(150, 80))
```

On a real screen, use `open_framebuffer` as a context manager:

```python
from fbgraphics.canvas import open_framebuffer

with open_framebuffer("/dev/fb0") as canvas:
    ...
```

## What it does not do

- The paint program only keeps its view, zoom, mode and colour state and
  clears the screen on each change; it draws no shapes and cannot save or
  load a drawing.
- The game's crash sequence draws only the wing fragment; the other
  fragments move but are not drawn, and no explosion is shown.
- There is no window-system or terminal output: pixels go to a framebuffer
  device or to memory only.

## Tests

```
pip install .[test]
pytest
```