# pixeldemos

Small display demos built on a plain in-memory RGB565 frame buffer: a
seven-segment clock, bitmap-font text rendering and a snake game. Every
demo draws into a `FrameBuffer`, which you can inspect pixel by pixel or
copy to whatever output you have.

## What is inside

- `pixeldemos.graphics`: drawing basics. `Point`, `Size` and `Rectangle`
  for geometry (`Rectangle` has `rows`, `columns`, `points`, `center`,
  `translate` and `is_zero_sized`), `FrameBuffer` for pixels
  (`get_pixel`, `set_pixel`, `clear`, `fill_rect`, `stroke_rect` and
  `fill_contiguous`, all clipped to the buffer) and `rgb565(r, g, b)` for
  packing 5/6/5-bit channels into one 16-bit colour. `BLACK`, `WHITE`,
  `RED`, `GREEN` and `BLUE` are provided.
- `pixeldemos.seven_segment`: seven-segment digits with pointed hexagonal
  segments. `Segments.from_digit` maps 0-9 to the lit segments (and
  returns `None` for anything else), `SevenSegmentConfig` sets digit size,
  spacing and segment thickness (default 24 x 48, 8, 4), and
  `SevenSegmentDisplay` draws digits, colons or a whole `HH:MM:SS` time,
  drawing unlit segments in a dim colour when one is given.
  `SevenSegmentDisplay.time_display_width` gives the width of a full time.
- `pixeldemos.clock`: `ClockTime` counts seconds with rollover at 60
  seconds, 60 minutes and 24 hours and formats itself as `HH:MM:SS`;
  `render_clock` draws a time onto a fresh 240 x 240 buffer in green with
  dim unlit segments.
- `pixeldemos.bdf`: bitmap font rendering. `BdfFont` holds a glyph table
  of `BdfGlyph` entries and packed one-bit-per-pixel data (most
  significant bit first); characters it lacks fall back to the
  replacement glyph. `BdfTextStyle` draws and measures strings relative
  to a `Baseline` (`TOP`, `BOTTOM`, `MIDDLE`, `ALPHABETIC`), returning the
  next pen position or a `TextMetrics`.
- `pixeldemos.snake`: the snake game on a 24 x 24 grid. `Game` keeps the
  snake (head first), the food and the score, refuses 180-degree turns,
  grows when it eats and ends on hitting a wall or itself. Food placement
  uses a small 16-bit generator; call `set_random_seed` for repeatable
  games.
- `pixeldemos.snake_app`: `direction_from_joystick` turns two analogue
  stick readings (centre 3900, dead zone 100) into a `Direction`, the x
  axis winning on diagonals, and `draw_game` paints the board, food and
  border into a frame buffer.

## Installing

```
pip install .
```

## Commands

```
pixeldemos-clock [--start HH:MM:SS] [--ticks N] [--interval SECONDS]
```

Starts at 23:20:00 unless told otherwise, advances one second per tick,
prints `time: HH:MM:SS` after each tick and redraws the clock into its
frame buffer. Runs until interrupted or until `--ticks` ticks have passed.

```
pixeldemos-snake [--seed N] [--steps N] [--interval SECONDS]
                 [--restart-delay SECONDS] [--input FILE]
```

Plays snake one step per frame. Joystick readings come from `--input`, a
text file of `x y` (or `x,y`) integer pairs, one per step; once they run
out, or without a file, the stick stays centred. Prints the seed, each
game's final score and restarts after `--restart-delay` seconds. Without
`--seed` a random seed is used.

## What it does not do

Neither command shows anything on a screen or reads a real joystick: the
frames are drawn into in-memory `FrameBuffer` objects only, and the
commands report progress as text. No fonts are bundled; to render text
with `BdfTextStyle` you supply the glyph table and bitmap data yourself.

## Using the library

```python
from pixeldemos.graphics import FrameBuffer, Size, rgb565
from pixeldemos.seven_segment import SevenSegmentConfig, SevenSegmentDisplay

config = SevenSegmentConfig(digit_size=Size(25, 45), digit_spacing=4, segment_width=5)
display = SevenSegmentDisplay(config)

screen = FrameBuffer(240, 240)
fbuf = FrameBuffer(240, 80)
display.draw_time(screen, fbuf, 23, 20, 0, rgb565(0, 63, 0), rgb565(0, 4, 0))
```

```python
from pixeldemos.snake import Direction, Game, set_random_seed

set_random_seed(1234)
game = Game()
game.set_direction(Direction.DOWN)
game.update()
print(game.score, game.game_over)
```

## Running the tests

```
pip install ".[test]"
pytest
```