# wxanim

A small Tk image gallery viewer with animated slide transitions, together
with the parts it is built from: easing functions, a timer-driven animator,
and a line chart widget that chooses tidy axis ranges by itself.

The widgets use `tkinter`, so Python has to be built with Tk support.
Images are loaded with Pillow.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the viewer

```
wxanim
```

The window is titled "Hello World". Choose one or more PNG or JPEG files with
**File → Open...** (or Ctrl-O). The images sit side by side, each scaled to the
width of the window and centred vertically. To move between them:

- press the Left or Right arrow key while the gallery has focus (clicking the
  gallery gives it focus), or
- move the pointer into the strip at the left or right edge of the window and
  click the arrow that appears there.

Each move slides to the neighbouring image over 200 ms along an ease-in-out
cubic curve. While a slide is running, further moves are ignored. When there
is more than one image, a row of dots near the bottom marks the selected one.

## Using the parts

### Easing functions (`wxanim.easing`)

`linear`, `ease_in_quad`, `ease_out_quad`, `ease_in_out_quad`,
`ease_in_cubic`, `ease_out_cubic` and `ease_in_out_cubic` each take
`(start, end, t_norm)` and return the value at normalised time `t_norm`
(0 to 1):

```python
from wxanim.easing import ease_in_out_cubic

ease_in_out_cubic(0.0, 100.0, 0.5)   # 50.0
```

`AnimatedValue` is a dataclass with `start_value`, `end_value`, an optional
`on_value_changed(sender, t_norm, value)` callback, a `description` and an
`easing` function (`linear` by default). `value_at(t_norm)` returns the eased
value and `notify(t_norm, value)` passes it to the callback, if one is set.

### Animator (`wxanim.animator`)

`Animator(schedule=None, clock=time.monotonic)` moves its `animated_values`
from start to end over a duration. `schedule(delay_ms, callback)` arranges a
later call (Tk's `after` fits); with a schedule the animator ticks itself
every 10 ms, and without one you call `tick()` yourself. `clock` returns
monotonic time in seconds.

- `start(duration_ms)` begins the animation. It raises `RuntimeError` when
  there are no animated values and `ValueError` when the duration is not
  positive.
- `tick()` computes the elapsed time, passes each value its eased value, then
  calls `on_iteration`; once the duration has passed it stops instead. It
  returns whether the animation is still running.
- `stop()` stops the animation and calls `on_stop`.
- `reset()` reports every value at its start position.
- `is_running()` tells whether an animation is in progress.

### Chart (`wxanim.chart`)

`calculate_chart_segment_count_and_range(low, high)` returns
`(segments, range_low, range_high)`: a range covering both values with grid
lines on a round step (0.2, 0.25, 0.5, 1, 2, 2.5 or 5 times a power of ten),
using the first step that gives at most six segments. It raises `ValueError`
unless `high` is greater than `low`.

`Chart` holds `values` (a list of `(x, y)` points), a `title`, a
`highlighted_point` and the x range `min_x`/`max_x`.
`Chart.layout(width, height, title_height, label_margin)` returns a
`ChartLayout` with the chart area, the title position, the grid lines (each a
`GridLine` with its pixel row, value and two-decimal label), the border lines
and the data and highlight points in pixels. It raises `ValueError` when the
chart has no values or `min_x` equals `max_x`.

`ChartControl(master, **kwargs)` is a Tk canvas that draws its `chart`
attribute, and redraws when resized or when `redraw()` is called.

### Gallery (`wxanim.gallery`)

- `scaled_image_size(image_width, image_height, area_width, area_height, scaling)`
  returns the drawn size for a `BitmapScaling` mode: `CENTER` (unscaled),
  `FIT`, `FILL_WIDTH` or `FILL_HEIGHT`.
- `dots_layout(width, height, dot_count, dot_radius, dot_spacing)` returns the
  top-left corner of each page-indicator dot.
- `GalleryNavigator(animator)` keeps the selected index, the slide offset and
  the arrow visibility apart from any window, with `hover`, `leave`, `click`,
  `key`, `animate_to_previous` and `animate_to_next`.
- `BitmapGallery(master, **kwargs)` is the Tk canvas that puts these together;
  `set_images(images)` takes Pillow images and `scaling` selects the mode.

### Application (`wxanim.app`)

`load_images(paths)` loads image files in order, `MainWindow(root)` builds the
window on a Tk root, and `main()` runs it.

## Limitations

- Images can only be opened through the file dialog; `wxanim` takes no
  command-line arguments.
- The viewer shows only the gallery. The chart widget is a separate part and
  is not shown by the application.