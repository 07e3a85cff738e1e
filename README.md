# crab2d

A small 2D toolkit built around an emulated block of video memory holding
240×160 bitmaps of 15-bit colours. It has no dependencies outside the
standard library.

## Modules

- `crab2d.vec2` — `Vec2`, an immutable 2D vector with `+` and `-` between
  vectors, `*` and `/` by a number (integer components divide with truncation
  toward zero), `dot`, `cross` and `Vec2.splat(n)`. Vectors unpack as
  `x, y = v`.
- `crab2d.input` — the `Key` flags and `InputState`, which keeps the current
  and previous raw keypad readings. Readings are active low: a cleared bit
  means the key is pressed. `poll(raw)` shifts the current reading into the
  previous one; `key_down`, `key_held`, `key_hit` and `key_released` answer
  questions about a key.
- `crab2d.graphics` — `Color` (a 15-bit value with `red`, `green`, `blue`,
  `Color.from_rgb(r, g, b)` for 5-bit channels, and constants such as
  `Color.BLACK`, `Color.WHITE`, `Color.YELLOW`, `Color.MAGENTA`),
  `DisplayControl` (video mode 0–5, `show_bg2`, `show_frame1`) and
  `Display`. A `Display` holds the video memory in `vram` and offers
  `set_display_mode`, `video_mode`, `flip_page`, `clear`, `pixel`, `point`,
  `rect`, `frame` and `line`. In video mode 5 rows are 160 pixels wide,
  otherwise 240. `rect` and `frame` include both edges, so a width of 40
  covers 41 pixels. Negative coordinates raise `ValueError`; points beyond
  the end of video memory raise `IndexError`.
- `crab2d.tilemap` — `Tile4` (8 words, 4 bits per pixel) and `Tile8`
  (16 words, 8 bits per pixel), each with `to_bytes()` and
  `from_bytes(raw)` in little-endian order, and `char_block4()` /
  `char_block8()`, which return lists of 512 and 256 empty tiles.
- `crab2d.pong` — `Paddle`, `Ball` and `Pong`. `Pong.step(raw_keys)` runs one
  frame: it clears the screen, moves the ball, moves the player paddle with
  Up/Down, moves the bot paddle toward a fixed height, and draws everything
  plus a centre line.
- `crab2d.basic` — `BasicDemo`, whose `step(raw_keys)` draws a magenta
  outline, or a filled yellow box on the frame in which A is released.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from crab2d.vec2 import Vec2
from crab2d.graphics import Color, Display
from crab2d.input import InputState, Key

display = Display()
display.rect(Vec2(20, 20), 40, 40, Color.from_rgb(31, 31, 0))
display.line(Vec2(120, 0), Vec2(120, 159), Color.WHITE)
assert display.pixel(Vec2(20, 20)) == Color.YELLOW

keys = InputState()
keys.poll(0x03FF)            # nothing pressed
keys.poll(0x03FF & ~Key.A)   # A pressed this frame
assert keys.key_hit(Key.A)
```

Running the Pong demo one frame at a time:

```python
from crab2d.pong import Pong
from crab2d.input import Key

game = Pong()
game.step(0x03FF & ~Key.UP)  # player paddle moves up
print(game.player.pos)
```

## What it does not do

The package only works on memory: it opens no window, shows nothing on a
screen and reads no keyboard or gamepad. Key states are passed in as raw
readings, frames are advanced by calling `step`, and there is no frame timing
or vertical sync. It installs no command to run; the demos are used from
Python code. In the Pong demo the ball starts with zero speed and there is no
scoring.