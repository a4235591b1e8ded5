"""The LED effects: chase, rainbow, static colour and static theme."""

from __future__ import annotations

import math
import time
from collections.abc import Callable, Iterable, Mapping

from .animation import Animation, AnimationOptions
from .color import BLACK, COLORS, RGB
from .pixel import NO_PIXEL, Pixel, PixelMatrix

Theme = Mapping[int, RGB]
Clock = Callable[[], float]


def _truncated_mod(a: int, b: int) -> int:
    """Remainder that keeps the sign of the dividend."""
    return int(math.fmod(a, b))


def _bounce(frame: int, reverse: bool) -> tuple[int, bool]:
    """Advance a wheel position that runs 0..255 and back again."""
    if reverse:
        frame -= 1
        if frame < 0:
            return 1, False
        return frame, True
    frame += 1
    if frame > 255:
        return 254, True
    return frame, False


def _real_pixels(matrix: PixelMatrix) -> Iterable[Pixel]:
    for column in matrix.pixels:
        for pixel in column:
            if pixel.index != NO_PIXEL.index:
                yield pixel


class Chase(Animation):
    """Three lit pixels running along the matrix, cycling through the colour wheel."""

    def __init__(
        self,
        matrix: PixelMatrix,
        options: AnimationOptions | None = None,
        clock: Clock = time.monotonic,
    ) -> None:
        super().__init__(matrix, options)
        self._clock = clock
        self.current_frame = 0
        self.current_pixel = 0
        self.reverse = False
        self.next_run_time = 0.0

    def animate(self, frame: list[RGB]) -> None:
        if self._clock() < self.next_run_time:
            return

        for pixel in _real_pixels(self.matrix):
            if self._is_chase_pixel(pixel.index):
                color = RGB.wheel(self._wheel_frame(pixel.index))
            else:
                color = BLACK
            for pos in pixel.positions:
                frame[pos] = color

        self.current_pixel += 1
        if self.current_pixel > self.matrix.pixel_count() - 1:
            self.current_pixel = 0

        self.current_frame, self.reverse = _bounce(self.current_frame, self.reverse)
        self.next_run_time = self._clock() + self.options.chase_cycle_time / 1000.0

    def _is_chase_pixel(self, index: int) -> bool:
        return index in (self.current_pixel, self.current_pixel - 1, self.current_pixel - 2)

    def _wheel_frame(self, index: int) -> int:
        frame = self.current_frame
        pixel_count = self.matrix.pixel_count()
        if index == _truncated_mod(self.current_pixel - 1, pixel_count):
            frame += 16 if self.reverse else -16
        if index == _truncated_mod(self.current_pixel - 2, pixel_count):
            frame += 32 if self.reverse else -32
        return max(frame, 0)

    def parameter_up(self) -> None:
        self.options.chase_cycle_time += 10

    def parameter_down(self) -> None:
        if self.options.chase_cycle_time > 0:
            self.options.chase_cycle_time -= 10


class Rainbow(Animation):
    """Every pixel the same colour, sweeping back and forth across the colour wheel."""

    def __init__(
        self,
        matrix: PixelMatrix,
        options: AnimationOptions | None = None,
        clock: Clock = time.monotonic,
    ) -> None:
        super().__init__(matrix, options)
        self._clock = clock
        self.current_frame = 0
        self.reverse = False
        self.next_run_time = 0.0

    def animate(self, frame: list[RGB]) -> None:
        if self._clock() < self.next_run_time:
            return

        color = RGB.wheel(self.current_frame)
        for pixel in _real_pixels(self.matrix):
            for pos in pixel.positions:
                frame[pos] = color

        self.current_frame, self.reverse = _bounce(self.current_frame, self.reverse)
        self.next_run_time = self._clock() + self.options.rainbow_cycle_time / 1000.0

    def parameter_up(self) -> None:
        self.options.rainbow_cycle_time += 10

    def parameter_down(self) -> None:
        if self.options.rainbow_cycle_time > 0:
            self.options.rainbow_cycle_time -= 10


class StaticColor(Animation):
    """A single colour from the palette.

    Given ``pixels``, the effect is filtered to them and uses the
    button colour setting instead of the static colour setting.
    """

    def __init__(
        self,
        matrix: PixelMatrix,
        options: AnimationOptions | None = None,
        pixels: Iterable[Pixel] | None = None,
    ) -> None:
        super().__init__(matrix, options)
        if pixels is not None:
            self.filtered = True
            self.update_pixels(pixels)

    def animate(self, frame: list[RGB]) -> None:
        color = COLORS[self.get_color()]
        for pixel in _real_pixels(self.matrix):
            if self.not_in_filter(pixel):
                continue
            for pos in pixel.positions:
                frame[pos] = color

    def get_color(self) -> int:
        """Index into the palette of the colour in use."""
        if self.filtered:
            return self.options.button_color_index
        return self.options.static_color_index

    def save_index_options(self, color_index: int) -> None:
        """Store ``color_index`` in the setting this effect uses."""
        if self.filtered:
            self.options.button_color_index = color_index
        else:
            self.options.static_color_index = color_index

    def parameter_up(self) -> None:
        index = self.get_color()
        index = index + 1 if index < len(COLORS) - 1 else 0
        self.save_index_options(index)

    def parameter_down(self) -> None:
        index = self.get_color()
        index = index - 1 if index > 0 else len(COLORS) - 1
        self.save_index_options(index)


class StaticTheme(Animation):
    """Per-button colours taken from one of a list of themes keyed by button mask."""

    default_color = BLACK

    def __init__(
        self,
        matrix: PixelMatrix,
        options: AnimationOptions | None = None,
        themes: list[Theme] | None = None,
    ) -> None:
        super().__init__(matrix, options)
        self.themes: list[Theme] = themes if themes is not None else []
        if self.options.theme_index >= len(self.themes):
            self.options.theme_index = 0

    def animate(self, frame: list[RGB]) -> None:
        if not self.themes:
            return
        theme = self.themes[self.options.theme_index]
        for pixel in _real_pixels(self.matrix):
            color = theme.get(pixel.mask, self.default_color)
            for pos in pixel.positions:
                frame[pos] = color

    def parameter_up(self) -> None:
        if not self.themes or self.options.theme_index < len(self.themes) - 1:
            self.options.theme_index = (self.options.theme_index + 1) & 0xFF
        else:
            self.options.theme_index = 0

    def parameter_down(self) -> None:
        if self.options.theme_index > 0:
            self.options.theme_index -= 1
        else:
            self.options.theme_index = (len(self.themes) - 1) & 0xFF