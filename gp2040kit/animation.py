"""Animation options, hotkeys and the base class for LED effects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

from .color import RGB
from .pixel import Pixel, PixelMatrix

FRAME_SIZE = 100


@dataclass
class AnimationOptions:
    """Persisted animation settings."""

    checksum: int = 0
    base_animation_index: int = 0
    brightness: int = 0
    static_color_index: int = 0
    button_color_index: int = 0
    chase_cycle_time: int = 0
    rainbow_cycle_time: int = 0
    theme_index: int = 0


class AnimationEffect(IntEnum):
    """Base animations, in the order they are cycled through."""

    STATIC_COLOR = 0
    RAINBOW = 1
    CHASE = 2
    STATIC_THEME = 3


TOTAL_EFFECTS = len(AnimationEffect)


class AnimationHotkey(IntEnum):
    """Actions the LED hotkeys can request."""

    NONE = 0
    ANIMATION_UP = 1
    ANIMATION_DOWN = 2
    PARAMETER_UP = 3
    PRESS_PARAMETER_UP = 4
    PRESS_PARAMETER_DOWN = 5
    PARAMETER_DOWN = 6
    BRIGHTNESS_UP = 7
    BRIGHTNESS_DOWN = 8


class Animation(ABC):
    """An effect that paints colours into a frame for the pixels of a matrix.

    When ``filtered`` is set, only the pixels given with ``update_pixels``
    are painted; this is how button-press effects are limited to the
    pressed buttons.
    """

    def __init__(self, matrix: PixelMatrix, options: AnimationOptions | None = None) -> None:
        self.matrix = matrix
        self.options = options if options is not None else AnimationOptions()
        self.pixels: list[Pixel] = []
        self.filtered = False

    def update_pixels(self, pixels: Iterable[Pixel]) -> None:
        """Set the pixels the filter lets through."""
        self.pixels = list(pixels)

    def clear_pixels(self) -> None:
        """Empty the filter."""
        self.pixels.clear()

    def not_in_filter(self, pixel: Pixel) -> bool:
        """Return True when filtering is on and ``pixel`` is not among the filter's pixels."""
        if not self.filtered:
            return False
        return pixel not in self.pixels

    @abstractmethod
    def animate(self, frame: list[RGB]) -> None:
        """Paint this effect's colours into ``frame`` in place."""

    @abstractmethod
    def parameter_up(self) -> None:
        """Step the effect's parameter up."""

    @abstractmethod
    def parameter_down(self) -> None:
        """Step the effect's parameter down."""