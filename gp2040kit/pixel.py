"""Logical pixels and the matrix that maps them onto an LED chain."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class Pixel:
    """A logical pixel: a button mask and the LED positions that light it.

    Two pixels are equal when their indexes are equal.
    """

    index: int
    mask: int = 0
    positions: list[int] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pixel):
            return NotImplemented
        return self.index == other.index

    def __hash__(self) -> int:
        return hash(self.index)


NO_PIXEL = Pixel(-1)


@dataclass
class PixelMatrix:
    """Columns of pixels making up a controller's LED layout."""

    pixels: list[list[Pixel]] = field(default_factory=list)
    leds_per_pixel: int = -1

    def setup(self, pixels: list[list[Pixel]], leds_per_pixel: int = -1) -> None:
        """Replace the layout."""
        self.pixels = [list(column) for column in pixels]
        self.leds_per_pixel = leds_per_pixel

    def led_count(self) -> int:
        """Number of physical LEDs used by real pixels."""
        return sum(
            len(pixel.positions)
            for column in self.pixels
            for pixel in column
            if pixel.index != NO_PIXEL.index
        )

    def pixel_count(self) -> int:
        """Number of pixel slots, placeholders included."""
        return sum(len(column) for column in self.pixels)