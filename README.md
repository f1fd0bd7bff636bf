# fdfview

A small viewer for `.fdf` height maps: plain-text grids of integers separated
by spaces, one row per line. Each number is the height (`z`) of a point on
the grid.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
fdfview path/to/map.fdf
```

The viewer first prints the grid of heights to standard output. It then opens
an 800×600 window titled `fdf` and draws one green pixel for each map point.
The points sit on a grid 20 pixels apart, and the grid is centred in the
window. Press Escape, or close the window, to quit.

The first line of the file sets the number of columns; extra values on later
lines are ignored. Every line in the file counts as a row. Each value is read
as the leading integer of its word, so `10,0xFF` is read as `10`.

The command needs exactly one argument. It prints an error message to
standard error and exits with status 1 when:

- the argument count is wrong,
- the file cannot be opened,
- the file is empty,
- a line has fewer values than the first line,
- the grid is too large for the window.

## What it does not do

The window shows only the grid points, one pixel each, all in the same colour.
Heights are printed but do not change the picture: there is no projection,
no lines between points, no zoom, panning or rotation, and no colouring by
height.

## Library use

```python
from fdfview.heightmap import load_map
from fdfview.render import FrameBuffer, compute_render, draw_map, points_to_pixels, rgb_to_color

heightmap = load_map("map.fdf")
print(heightmap.format_raw(), end="")

render = compute_render(heightmap, 800, 600)
pixels = points_to_pixels(heightmap, render)
frame = FrameBuffer(800, 600)
draw_map(pixels, frame, rgb_to_color(0, 255, 0))
print(hex(frame.pixel_at(pixels[0][0].x, pixels[0][0].y)))
```

`load_map` raises `fdfview.errors.FdfError`, which carries an `ErrorCode`,
when the file cannot be opened or is empty, and `ValueError` when a line has
too few values. `fdfview.errors.strerror` gives the message for a code.
`FrameBuffer.put_pixel` raises `IndexError` for a position outside the image.

The package also holds the helpers the loader is built on:

- `fdfview.lines.LineReader` reads lines from a text or binary file object
  through a fixed-size buffer (`next_line()` or iteration).
- `fdfview.strops` has `split`, `substr`, `strtrim`, `strnstr` and `strncmp`.
- `fdfview.chars` has character tests (`is_space`, `is_digit`, `is_alpha`,
  `is_alnum`, `is_ascii`, `is_print`), `to_upper`, `to_lower`, and the
  32-bit integer conversions `atoi` and `itoa`.
- `fdfview.printf` has `format_printf` and `printf` for the conversions
  `%c %s %p %d %i %u %x %X %%`.