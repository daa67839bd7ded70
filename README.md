# cubicat

A small, dependency-free toolkit for embedded-style graphics and 2D geometry.

- `cubicat.physics.math_utils` — immutable `Vec2` and `Mat22` with the usual
  operators, plus `dot`, `cross`, `sign`, `clamp`, `random_unit` and
  `random_range`.
- `cubicat.physics.body` — `Body`, a box-shaped rigid body. `reset(width, mass)`
  clears its motion state and sets size and mass; `set_width` recomputes the
  inverse mass and inertia; a mass of `FLT_MAX` makes the body static.
- `cubicat.physics.collide` — box-versus-box contact generation. `collide(a, b)`
  returns up to two `Contact` objects (position, normal pointing from A to B,
  separation and a `FeaturePair` naming the edges involved).
  `clip_segment_to_line` and `compute_incident_edge` are the clipping steps it
  is built from.
- `cubicat.display` — `Display`, an in-memory RGB565 back buffer with lines,
  rectangles, rounded rectangles, circles and images, dirty-window tracking
  (`DirtyWindow`), the `Direction` enum and the `rgb565` colour helper.
- `cubicat.region` — `Region` rectangles that can be combined into their
  bounding box.
- `cubicat.ring_buffer` — `RingBuffer` and `ByteRingBuffer`, fixed-capacity
  buffers that drop the oldest items when full; `ByteRingBuffer.fill` tops up
  from a binary stream.
- `cubicat.config_manager` — `ConfigRegistry`, which loads comma-separated
  item tables and looks values up by item, level and attribute.

## Installation

```
pip install .
```

## Example: two overlapping boxes

```python
from cubicat.physics.body import Body
from cubicat.physics.collide import collide
from cubicat.physics.math_utils import Vec2

ground = Body()
ground.reset(Vec2(10.0, 1.0), 3.4028234663852886e38)  # static

box = Body()
box.reset(Vec2(1.0, 1.0), 5.0)
box.position = Vec2(0.0, 0.9)

for contact in collide(ground, box):
    print(contact.position, contact.normal, contact.separation)
```

## Example: drawing into a framebuffer

```python
from cubicat.display import Display, RED, WHITE

display = Display(64, 48)
display.fill_circle(32, 24, 10, RED)
display.draw_rect(2, 2, 60, 44, WHITE, 1)
print(hex(display.pixel(32, 24)))  # 0xf800
```

A `Display` may be given a panel: any object with
`push_pixels(x1, y1, x2, y2, pixels)` and `rotate(direction)`.
`swap_buffer()` sends the dirty rows, full width, to that panel and clears the
dirty window. A display wider than it is tall rotates its panel to
`Direction.DIRECTION270` when created.

## Example: ring buffer

```python
from cubicat.ring_buffer import RingBuffer

buf = RingBuffer()
buf.allocate(4)
buf.append([1, 2, 3, 4, 5, 6])
print(buf.data, len(buf))  # [3, 4, 5, 6] 4
```

## Example: config tables

The first line names the columns. A row with a name in its first cell starts
an item; a row whose first cell is empty adds the next level of that item.

```python
from cubicat.config_manager import ConfigRegistry

registry = ConfigRegistry()
registry.load_from_buffer("Items.csv", "Name,Hp,Speed\nsword,10,2\n,20\n")
print(registry.get_value("Items.csv", "sword", 2, "Hp"))     # 20
print(registry.get_value("Items.csv", "sword", 2, "Speed"))  # 2, from level 1
print(registry.get_item_level_count("Items.csv", "sword"))   # 2
```

`get_global_value(name)` reads the integer `Value` column of `name` in a table
loaded as `Globals.csv`, and raises `KeyError` when it is missing.

## What this package does not do

- The physics modules detect contacts only. There is no impulse solver, no
  joints and no world that steps bodies through time; moving bodies is left to
  the caller.
- `Display` draws into memory. It drives no screen or touch hardware itself
  and renders no text; output reaches a screen only through a panel object you
  supply.

## Running the tests

```
pip install .[test]
pytest
```