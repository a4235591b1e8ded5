# gp2040kit

Pure-Python building blocks for arcade-stick controller logic. The package has an
LED animation engine with a colour and pixel model, a CRC-32 checksum, a byte store
that emulates flash-backed EEPROM, typed option records, and presets for a number
of known boards. It has no dependencies outside the standard library.

## Installation

```
pip install gp2040kit
```

To run the tests:

```
pip install "gp2040kit[test]"
pytest
```

## Modules

### `gp2040kit.crc32`

`CRC32` is an incremental CRC-32 (IEEE, reflected). It has these methods:

- `update(data)` takes a single byte value (0-255) or any bytes-like object or iterable of bytes. A value out of range raises `ValueError`.
- `finalize()` returns the checksum of everything fed in so far.
- `reset()` starts again.

`calculate(data)` does the whole job in one call.

### `gp2040kit.color`

- `LEDFormat` has the members `GRB`, `RGB`, `GRBW` and `RGBW`.
- `ButtonLayout` has the members `ARCADE`, `HITBOX` and `WASD`.
- `RGB(r, g, b, w=0)` is a frozen colour. A channel outside 0-255 raises `ValueError`.
  - `RGB.wheel(pos)` gives a colour on a red-green-blue wheel.
  - `RGB.value(fmt, brightness=1.0)` packs the colour into a 32-bit LED word, with each channel scaled by `brightness`. In the W formats, a grey colour (r == g == b) packs as its scaled red channel alone.
- Named colours are provided, such as `BLACK`, `WHITE` and `RED`. `COLORS` is the 14-entry palette that `StaticColor` cycles through.

### `gp2040kit.pixel`

- `Pixel(index, mask=0, positions=[])` is a logical pixel. Two pixels compare equal when their indexes are equal. `NO_PIXEL` (index -1) marks an empty slot.
- `PixelMatrix` holds columns of pixels. It has these methods:
  - `setup(pixels, leds_per_pixel)` replaces the layout.
  - `led_count()` counts the LED positions used by real pixels.
  - `pixel_count()` counts all slots, empty ones included.

### `gp2040kit.animation`

- `AnimationOptions` holds the animation settings that are stored.
- `AnimationEffect` lists the base animations: `STATIC_COLOR`, `RAINBOW`, `CHASE` and `STATIC_THEME`.
- `AnimationHotkey` lists the actions that hotkeys can request.
- `Animation` is the abstract base class for effects. It supports a pixel filter through `update_pixels`, `clear_pixels` and `not_in_filter`.

### `gp2040kit.effects`

- `Chase` runs three lit pixels along the matrix. `parameter_up` and `parameter_down` change `options.chase_cycle_time` by 10 ms.
- `Rainbow` gives every pixel the same colour and sweeps it back and forth across the wheel. `parameter_up` and `parameter_down` change `options.rainbow_cycle_time` by 10 ms.
- `StaticColor` paints one palette colour. When it is given `pixels`, it is limited to those pixels and uses `button_color_index`. Otherwise it uses `static_color_index`.
- `StaticTheme` takes colours from a list of themes. Each theme is a mapping from button mask to `RGB`. Pixels whose mask is not in the theme are painted black.

`Chase` and `Rainbow` take an optional `clock` callable, which defaults to `time.monotonic`. This lets tests and simulations control timing.

### `gp2040kit.station`

`AnimationStation(matrix=None, led_format=LEDFormat.GRB, clock=time.monotonic)` drives a base animation and a button-press overlay. Both draw into a 100-entry `frame` of `RGB` values. Its methods are:

- `set_mode`, `change_animation` and `adjust_index` select the base animation. An index out of range wraps to 0.
- `handle_pressed(pixels)` and `clear_pressed()` manage the button-press overlay.
- `animate()` draws the next frame. `clear()` blanks it.
- `apply_brightness()` returns the frame as packed LED words in `led_format`, scaled by the current brightness.
- `configure_brightness(maximum, steps)`, `set_brightness`, `increase_brightness` and `decrease_brightness` control the brightness level.
- `handle_event(action)` carries out an `AnimationHotkey`. It acts at most once every 0.25 s.
- `set_options(options)` copies stored settings in.
- `add_theme(theme)` and `clear_themes()` manage the themes used by `StaticTheme`.
- The properties `mode` and `brightness` report the current state.

### `gp2040kit.eeprom`

`FlashPROM(path=None, write_wait=0.05)` is a 4096-byte store. Its methods are:

- `get(index, size)` and `set(index, data)` read and write the in-memory cache. A range outside the store raises `IndexError`.
- `start()` loads the cache from the flash image, read from `path` if that file exists. A fully erased (all `0xFF`) image is reset to zeros.
- `commit()` schedules a write to flash once `write_wait` seconds pass with no further commit. A burst of commits therefore ends in a single write.
- `flush()` writes a pending commit at once.
- `close()` does the same as `flush()`. The store also works as a context manager, which calls `close()` on exit.
- `reset()` zeros the store and commits.

The properties `flash_image` and `pending` show the stored bytes and whether a write is waiting. When `path` is given, each write also saves the image to that file.

### `gp2040kit.options`

- `BoardOptions` holds button pins, layout and I2C display settings.
- `LEDOptions` holds the LED chain settings and each button's chain index.
- `TurboOptions(shot_count=20)` holds the rapid-fire speed. `interval_ms()` returns the milliseconds between shots; a count of 0 or less raises `ValueError`.
- `PLEDType` has the members `NONE`, `PWM` and `RGB`.
- `clamp_shot_count(count)` limits a count to the range 1-60.
- Storage offsets and default values are available as module constants.

### `gp2040kit.boards`

`board_names()` lists the presets:

- CrushCounter
- DebugBoard
- DURAL
- Fightboard
- FlatboxRev4
- GeeekPiStick
- Hydra
- OSFRD
- Pico
- PicoAnn
- PicoFightingBoard

`get_board(name)` returns one preset. The name is matched case-insensitively, and an unknown name raises `KeyError`.

A `BoardConfig` holds the following settings:

- the pin of each button in `BUTTONS`
- the layout and the default SOCD mode
- the LED chain settings
- the player-LED type and pins
- the I2C display settings
- the turbo settings

`board_options()` and `led_options()` convert a preset into the option records.

## Example

```python
from gp2040kit.boards import board_names, get_board
from gp2040kit.crc32 import calculate
from gp2040kit.station import AnimationStation
from gp2040kit.pixel import Pixel, PixelMatrix
from gp2040kit.animation import AnimationEffect

print(board_names())
options = get_board("Pico").board_options()
print(options.pin_dpad_up)           # 2

print(hex(calculate(b"123456789")))  # 0xcbf43926

matrix = PixelMatrix([[Pixel(0, positions=[0]), Pixel(1, positions=[1])]])
station = AnimationStation(matrix)
station.set_mode(AnimationEffect.RAINBOW)
station.animate()
words = station.apply_brightness()
```

## What it does not do

The package models controller logic only. It has the following limits:

- It does not talk to hardware. It does not read buttons, send data to an LED chain, drive an I2C display or player LEDs, or write to a real flash chip; `FlashPROM` keeps its image in memory and, optionally, in a file.
- It has no gamepad state, no button-mask constants and no built-in colour themes. Supply themes to `AnimationStation.add_theme` keyed by masks of your own choosing.
- Turbo and player-LED support is limited to the settings records. The package has no rapid-fire or player-LED behaviour.
- It provides no command-line tool.