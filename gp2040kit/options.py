"""Board, LED and turbo settings with the firmware's defaults."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .color import ButtonLayout, LEDFormat

GAMEPAD_STORAGE_INDEX = 0
BOARD_STORAGE_INDEX = 1024
LED_STORAGE_INDEX = 1536
TURBO_STORAGE_INDEX = 2048
ANIMATION_STORAGE_INDEX = 2112

DISPLAY_I2C_ADDR = 0x3C
I2C_SPEED = 400000

LEDS_BRIGHTNESS = 75
LEDS_BASE_ANIMATION_INDEX = 1
LEDS_STATIC_COLOR_INDEX = 2
LEDS_BUTTON_COLOR_INDEX = 1
LEDS_THEME_INDEX = 0
LEDS_RAINBOW_CYCLE_TIME = 40
LEDS_CHASE_CYCLE_TIME = 85
LED_BRIGHTNESS_MAXIMUM = 128
LED_BRIGHTNESS_STEPS = 5

PLED_REPORT_SIZE = 32

DEFAULT_SHOT_PER_SEC = 20
TURBO_LED_PIN = 25
TURBO_SHOT_MAX = 60
TURBO_SHOT_MIN = 1

UNASSIGNED_PIN = -1


class PLEDType(Enum):
    """How the player indicator LEDs are driven."""

    NONE = "none"
    PWM = "pwm"
    RGB = "rgb"


@dataclass
class BoardOptions:
    """Pin assignments, button layout and I2C display settings."""

    has_board_options: bool = False
    pin_dpad_up: int = UNASSIGNED_PIN
    pin_dpad_down: int = UNASSIGNED_PIN
    pin_dpad_left: int = UNASSIGNED_PIN
    pin_dpad_right: int = UNASSIGNED_PIN
    pin_button_b1: int = UNASSIGNED_PIN
    pin_button_b2: int = UNASSIGNED_PIN
    pin_button_b3: int = UNASSIGNED_PIN
    pin_button_b4: int = UNASSIGNED_PIN
    pin_button_l1: int = UNASSIGNED_PIN
    pin_button_r1: int = UNASSIGNED_PIN
    pin_button_l2: int = UNASSIGNED_PIN
    pin_button_r2: int = UNASSIGNED_PIN
    pin_button_s1: int = UNASSIGNED_PIN
    pin_button_s2: int = UNASSIGNED_PIN
    pin_button_l3: int = UNASSIGNED_PIN
    pin_button_r3: int = UNASSIGNED_PIN
    pin_button_a1: int = UNASSIGNED_PIN
    pin_button_a2: int = UNASSIGNED_PIN
    button_layout: ButtonLayout = ButtonLayout.ARCADE

    i2c_sda_pin: int = UNASSIGNED_PIN
    i2c_scl_pin: int = UNASSIGNED_PIN
    i2c_block: int = 0
    i2c_speed: int = I2C_SPEED

    has_i2c_display: bool = False
    display_i2c_address: int = DISPLAY_I2C_ADDR
    display_size: int = 0
    display_flip: bool = False
    display_invert: bool = False
    checksum: int = 0


@dataclass
class LEDOptions:
    """LED chain settings and the chain index of each button's LEDs."""

    use_user_defined_leds: bool = False
    data_pin: int = UNASSIGNED_PIN
    led_format: LEDFormat = LEDFormat.GRB
    led_layout: ButtonLayout = ButtonLayout.ARCADE
    leds_per_button: int = 1
    brightness_maximum: int = LED_BRIGHTNESS_MAXIMUM
    brightness_steps: int = LED_BRIGHTNESS_STEPS
    index_up: int = -1
    index_down: int = -1
    index_left: int = -1
    index_right: int = -1
    index_b1: int = -1
    index_b2: int = -1
    index_b3: int = -1
    index_b4: int = -1
    index_l1: int = -1
    index_r1: int = -1
    index_l2: int = -1
    index_r2: int = -1
    index_s1: int = -1
    index_s2: int = -1
    index_l3: int = -1
    index_r3: int = -1
    index_a1: int = -1
    index_a2: int = -1


@dataclass
class TurboOptions:
    """Rapid-fire speed in shots per second."""

    shot_count: int = DEFAULT_SHOT_PER_SEC

    def interval_ms(self) -> int:
        """Milliseconds between shots."""
        if self.shot_count <= 0:
            raise ValueError(f"shot count must be positive: {self.shot_count}")
        return 1000 // self.shot_count


def clamp_shot_count(count: int) -> int:
    """Limit a rapid-fire speed to the supported range."""
    return max(TURBO_SHOT_MIN, min(TURBO_SHOT_MAX, count))