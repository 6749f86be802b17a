# fdfview

`fdfview` draws a height map as a wireframe. A height map is a grid of
altitudes, and each altitude can have its own colour. The package rotates
every point of the grid about the z, x and y axes, then scales and shifts it
onto an in-memory pixel image. It joins neighbouring points with Bresenham
lines whose colour fades from one end to the other.

The package is pure Python. It needs nothing outside the standard library.

## Modules

| Module | Purpose |
| --- | --- |
| `fdfview.image` | `Image`: a fixed-size buffer of 32-bit colours. `put_pixel` ignores coordinates outside the image. `get_pixel` raises `IndexError` for them. `clear` resets every pixel to zero. |
| `fdfview.view` | `View`: rotation angles (`alpha`, `beta`, `gamma`), the spacing between points (`div`) and the translation (`x_trans`, `y_trans`). `View.for_grid` picks defaults that fit a grid into an image. `View.trig` returns the sines and cosines as a `Trig`. |
| `fdfview.render` | `Point`, `color_grade`, `draw_segment`, `project_grid`, `draw_lines` and `render`. |
| `fdfview.controls` | `action_for_key` maps a key code to an `Action` for a keyboard `Layout` (`Layout.LINUX` or `Layout.MACOS`). `translate`, `rotate`, `zoom` and `apply_action` change a `View`. `help_lines()` returns the help text for the key controls, one line per entry. |
| `fdfview.shapes` | Test patterns: `draw_ellipse`, `draw_sierpinski`, `draw_dot` and `draw_border`. |
| `fdfview.line_reader` | `LineReader`: reads a text or binary stream line by line, `buffer_size` characters at a time. It can be iterated. |
| `fdfview.printf` | `format_printf` and `printf` handle `%c %s %p %d %i %u %x %X %%`, with the `- + space # 0` flags, a width and a precision. `parse_spec` returns a single conversion as a `FormatSpec`. |
| `fdfview.textutil` | String helpers with C-string behaviour: `atoi`, `itoa`, `split`, `strtrim`, `substr`, `strnstr`, `strncmp`. |

## Rendering a grid

A grid is a list of rows, and each row is a list of `Point` objects. Each
point holds its height `z` and its `color`. The `x` and `y` fields hold the
image position, which `project_grid` fills in.

`render` clears the image, projects the points and draws the wireframe.
`draw_lines` joins each point to its right-hand neighbour and to the point
below it.

```python
from fdfview.image import Image
from fdfview.render import Point, render
from fdfview.view import View

grid = [[Point(z=0, color=0xFFFFFF) for _ in range(10)] for _ in range(10)]
grid[5][5].z = 3

width, height = 1500, 1000
image = Image(width, height)
view = View.for_grid(len(grid[0]), len(grid), width, height)
render(grid, view, image)

colour = image.get_pixel(750, 500)
```

The default view is isometric and centred on the image. The spacing between
points is the largest whole number that still fits the grid into half of the
image. It is never less than one pixel.

## Moving the view

```python
from fdfview.controls import Layout, action_for_key, apply_action

action = action_for_key(key, Layout.LINUX)
if action is not None and apply_action(view, action, width, height):
    render(grid, view, image)
```

- The arrow keys move the drawing by 20 pixels.
- `c` centres the drawing.
- `q`/`e`, `w`/`s` and `a`/`d` turn it by 10° about the z, x and y axes.
- `1` to `4` switch to the top, side, face and isometric views.
- `+` and `-` change the point spacing by 10% plus one pixel. The point under the centre of the image stays there, up to rounding.

`apply_action` returns `False` for `Action.QUIT`, `Action.STEP` and
`Action.RUN`, and leaves the view unchanged for them.

## Formatting output

```python
from fdfview.printf import format_printf

format_printf("%5d|%-4s|%#x", 42, "ab", 255)   # '   42|ab  |0xff'
```

## What the package does not do

- It has no command and opens no window. The image exists only in memory, and your own code has to show it or save it.
- It has no map-file parser. Build the grid of `Point` objects yourself, for example from lines read with `LineReader` and split with `textutil.split`.
- It has no wave animation. `action_for_key` recognises the step and run keys, but nothing in the package acts on them.