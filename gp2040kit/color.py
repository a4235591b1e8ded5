"""LED colours, colour formats and button layouts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class LEDFormat(IntEnum):
    """Byte order of the colour channels sent to an LED chain."""

    GRB = 0
    RGB = 1
    GRBW = 2
    RGBW = 3


class ButtonLayout(IntEnum):
    """Physical arrangement of the buttons on a controller."""

    ARCADE = 0
    HITBOX = 1
    WASD = 2


@dataclass(frozen=True)
class RGB:
    """An 8-bit-per-channel colour with an optional white channel."""

    r: int = 0
    g: int = 0
    b: int = 0
    w: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "w"):
            channel = getattr(self, name)
            if not 0 <= channel <= 0xFF:
                raise ValueError(f"channel {name} out of range: {channel}")

    @staticmethod
    def wheel(pos: int) -> RGB:
        """Return the colour at ``pos`` (0-255) on a red-green-blue colour wheel."""
        pos = 255 - (pos & 0xFF)
        if pos < 85:
            return RGB(255 - pos * 3, 0, pos * 3)
        if pos < 170:
            pos -= 85
            return RGB(0, pos * 3, 255 - pos * 3)
        pos -= 170
        return RGB(pos * 3, 255 - pos * 3, 0)

    def value(self, fmt: LEDFormat | int, brightness: float = 1.0) -> int:
        """Pack the colour into a 32-bit word in the given format, scaled by ``brightness``."""
        fmt = LEDFormat(fmt)
        r = int(self.r * brightness)
        g = int(self.g * brightness)
        b = int(self.b * brightness)
        w = int(self.w * brightness)
        if fmt is LEDFormat.GRB:
            return (g << 16) | (r << 8) | b
        if fmt is LEDFormat.RGB:
            return (r << 16) | (g << 8) | b
        if self.r == self.g == self.b:
            return r
        if fmt is LEDFormat.GRBW:
            return (g << 24) | (r << 16) | (b << 8) | w
        return (r << 24) | (g << 16) | (b << 8) | w


BLACK = RGB(0, 0, 0)
WHITE = RGB(255, 255, 255)
RED = RGB(255, 0, 0)
ORANGE = RGB(255, 128, 0)
YELLOW = RGB(255, 255, 0)
LIME_GREEN = RGB(128, 255, 0)
GREEN = RGB(0, 255, 0)
SEAFOAM = RGB(0, 255, 128)
AQUA = RGB(0, 255, 255)
SKY_BLUE = RGB(0, 128, 255)
BLUE = RGB(0, 0, 255)
PURPLE = RGB(128, 0, 255)
PINK = RGB(255, 0, 255)
MAGENTA = RGB(255, 0, 128)

COLORS: tuple[RGB, ...] = (
    BLACK, WHITE, RED, ORANGE, YELLOW,
    LIME_GREEN, GREEN, SEAFOAM, AQUA, SKY_BLUE,
    BLUE, PURPLE, PINK, MAGENTA,
)