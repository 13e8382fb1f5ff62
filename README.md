# stormkit

Building blocks for 2D games, in plain Python: bounding boxes, interpolation,
camera transforms, duration conversions, a throughput timer, images, PNG
decoding, a skyline rectangle packer, sprite and glyph instance data, window
settings and a bounded single-producer, single-consumer queue.

## Install

```
pip install .
```

## Modules

### `stormkit.math.aabb`

`AABB2D(min_x, min_y, max_x, max_y)` is a mutable axis-aligned box. Build one
with `AABB2D.from_min_max(min, max)` or `AABB2D.from_pos_size(pos, size)`.
It offers `intersects`, `contains`, `contains_point` and `slide(mov, others)`,
which moves the box by `mov`, vertically first and then horizontally, stopping
against the other boxes. `slide` returns `True` when a collision shortened the
move.

```python
from stormkit.math.aabb import AABB2D

walls = [AABB2D(2, 0, 3, 1), AABB2D(0, 1, 1, 2)]
box = AABB2D(0, 0, 1, 1)
box.slide((2, 0), walls)   # True; box now spans x from 1 to 2
```

### `stormkit.math.scalar`

- `lerp(a, b, t)`: linear interpolation.
- `perceptual(db)`: converts a level in decibels into a linear gain.

### `stormkit.math.interpolation`

`Interpolation(start, end)` tracks progress from 0 to 1. `advance` adds to the
progress and caps it at 1, `get` returns the current value, `set` replaces both
ends and `update` retargets from the current value. Both restart the progress.

```python
from stormkit.math.interpolation import Interpolation

fade = Interpolation(0.0, 10.0)
fade.advance(0.5)
fade.get()   # 5.0
```

### `stormkit.math.transform`

- `ortho(left, right, bottom, top, near, far)` and `ortho_from_bounds(bounds)`
  build 4x4 orthographic matrices as numpy arrays. `ortho_from_bounds` puts
  (0, 0) at the centre of the bounds.
- `Transform(logical_size)` combines the orthographic matrix with a scale, a
  translation and a rotation given in turns. Change them with
  `update(translation=..., scale=..., rotation=...)` and the viewport size with
  `set_size`. `generate()` returns the new matrix, or `None` when nothing has
  changed since the last call. `matrix()` always returns the current matrix.
  The current values are available as `parameters`, a `TransformParameters`.

### `stormkit.time.convert`

This module holds unit constants such as `NANOS_PER_SEC` and `SECS_PER_DAY`,
and the `timedelta` constants `SECOND`, `MILLISECOND` and `MICROSECOND`.
`as_days`, `as_hours`, `as_minutes`, `as_seconds`, `as_milliseconds`,
`as_microseconds` and `as_nanoseconds` convert a `timedelta`, rounding down.
A negative duration raises `ValueError`.

```python
from datetime import timedelta
from stormkit.time.convert import as_milliseconds

as_milliseconds(timedelta(seconds=1, microseconds=2500))   # 1002
```

### `stormkit.time.timer`

`now()` returns a monotonic clock reading in nanoseconds. `Timer(label)`
measures spans between `start()` and `stop()`. When more than a second has
passed since the last report, `stop()` returns a `TimerReport` and logs it at
debug level, then resets the counts. The report holds the label, the number of
invocations, the maximum ticks per second and the average span in
nanoseconds. Otherwise `stop()` returns `None`. You can pass another clock
with `Timer(label, clock=...)`.

### `stormkit.image.image`

`Image(pixels, width, height)` is a row-major pixel grid. Build one with
`Image.from_color(color, width, height)` or
`Image.from_pixels(pixels, width, height)`. Pixels are read and written by
flat index or by an `(x, y)` pair, and `index_for(x, y)` gives the flat
position. `set_subsection(offset_x, offset_y, other)` copies another image in.
Zero sizes, a pixel count that does not match the size, and subsections that
do not fit all raise `ValueError`.

```python
from stormkit.image.image import Image

img = Image.from_color((0, 0, 0, 255), 4, 4)
img[1, 2] = (255, 0, 0, 255)
img.index_for(1, 2)   # 9
```

### `stormkit.image.png`

`read_png(data)` decodes PNG bytes into an `Image` of `(r, g, b, a)` tuples.
It accepts RGB, RGBA, grayscale and grayscale-with-alpha images. Indexed-colour
PNGs and data that is not a readable PNG raise `ValueError`.

### `stormkit.image.packer`

`Packer(width, height)` places rectangles with the skyline algorithm.
`pack(width, height)` returns a `Rect(x, y, w, h)`, or `None` when the
rectangle does not fit. `clear()` starts over with an empty canvas.

```python
from stormkit.image.packer import Packer

packer = Packer(256, 256)
rect = packer.pack(16, 24)   # Rect(x=0, y=0, w=16, h=24)
```

### `stormkit.graphics.texture_section`

`TextureSection(left, right, top, bottom)` stores edges in units of 1/65536
of a texture. `TextureSection.full()` covers the whole texture.
`from_texture(texture, left, right, top, bottom)` converts texel edges for any
object that has `width` and `height`. `mirror_x` and `mirror_y` return flipped
copies.

### `stormkit.graphics.vertex`

- `AttributeType`, `VertexInputType` and `VertexOutputType` describe how
  attribute components are stored and how a shader reads them.
- `VertexAttribute(count, input, output)` describes one attribute.
- `configure_vertex(attributes, stride)` lays the attributes out one after
  another and returns one `AttributePointer` per attribute, with its index,
  byte offset, stride and divisor.

### `stormkit.graphics.sprite` and `stormkit.graphics.text`

`Sprite` and `TextSprite` are frozen per-instance records, and each lists its
vertex layout in `ATTRIBUTES`. `from_floats` takes a float size in pixels;
each component is truncated and wraps at 65536. `Sprite.from_floats` also
takes a rotation in turns and keeps only its fractional part.
`Sprite.to_aabb()` returns the box the sprite covers.

```python
from stormkit.graphics.sprite import Sprite
from stormkit.graphics.texture_section import TextureSection

sprite = Sprite.from_floats((10.0, 20.0, 0.0), (32.5, 16.0),
                            TextureSection.full(), (255, 255, 255, 255), 1.25)
sprite.size        # (32, 16)
sprite.rotation    # 16384
sprite.to_aabb()   # AABB2D(min_x=10.0, min_y=20.0, max_x=42.0, max_y=36.0)
```

### `stormkit.graphics.window`

The display modes are `Windowed(width, height, resizable)`,
`WindowedFullscreen()` and `Fullscreen()`. `Vsync` is either `ENABLED` or
`DISABLED`. `WindowSettings()` defaults to the title "Storm Engine", a
resizable 500x500 window and vsync disabled.

### `stormkit.sync.spsc`

`make(capacity)` returns a `(Producer, Consumer)` pair for a bounded queue.
`push` and `pop` block. `try_push` returns `False` when the queue is full, and
`try_pop` returns `None` when it is empty. The consumer's `skip_n(n)` discards
up to `n` values and returns how many it discarded. Both handles report
`capacity()` and `size()`, and the producer also reports `free_space()`.

```python
from stormkit.sync.spsc import make

producer, consumer = make(16)
producer.push(1)
assert consumer.pop() == 1
```

## What it does not do

stormkit does not open windows, create a graphics context, upload textures or
buffers, compile shaders or draw anything. The window settings, texture
sections, vertex descriptions and sprite records describe data only. It also
has no audio, no input or event loop, and no font layout or glyph
rasterisation.

## Tests

```
pip install .[test]
pytest
```