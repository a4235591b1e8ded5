"""Preset pin, LED, player-LED and display settings for supported controller boards."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .color import ButtonLayout, LEDFormat
from .options import (
    DEFAULT_SHOT_PER_SEC,
    I2C_SPEED,
    LED_BRIGHTNESS_MAXIMUM,
    LED_BRIGHTNESS_STEPS,
    UNASSIGNED_PIN,
    BoardOptions,
    LEDOptions,
    PLEDType,
)

BUTTONS: tuple[str, ...] = (
    "up", "down", "left", "right",
    "b1", "b2", "b3", "b4",
    "l1", "r1", "l2", "r2",
    "s1", "s2", "l3", "r3",
    "a1", "a2",
)

_BOARD_PIN_FIELDS = {
    "up": "pin_dpad_up",
    "down": "pin_dpad_down",
    "left": "pin_dpad_left",
    "right": "pin_dpad_right",
    **{button: f"pin_button_{button}" for button in BUTTONS[4:]},
}

_LED_INDEX_FIELDS = {button: f"index_{button}" for button in BUTTONS}

SOCD_NEUTRAL = "neutral"
SOCD_UP_PRIORITY = "up_priority"


@dataclass(frozen=True)
class BoardConfig:
    """Compile-time settings of one board.

    ``pins`` maps every button name in ``BUTTONS`` to its GPIO pin;
    ``led_indexes`` maps buttons to their position on the LED chain,
    and a button that is left out has no LED.
    """

    name: str
    pins: Mapping[str, int]
    button_layout: ButtonLayout = ButtonLayout.ARCADE
    default_socd_mode: str = SOCD_NEUTRAL
    pin_settings: int | None = None

    board_leds_pin: int = UNASSIGNED_PIN
    led_format: LEDFormat = LEDFormat.GRB
    leds_per_pixel: int = 1
    led_brightness_maximum: int = LED_BRIGHTNESS_MAXIMUM
    led_brightness_steps: int = LED_BRIGHTNESS_STEPS
    led_indexes: Mapping[str, int] = field(default_factory=dict)

    pled_type: PLEDType = PLEDType.NONE
    pled_pins: tuple[int, int, int, int] = (
        UNASSIGNED_PIN, UNASSIGNED_PIN, UNASSIGNED_PIN, UNASSIGNED_PIN,
    )

    has_i2c_display: bool = False
    i2c_sda_pin: int = UNASSIGNED_PIN
    i2c_scl_pin: int = UNASSIGNED_PIN
    i2c_block: int = 0
    i2c_speed: int = I2C_SPEED

    has_turbo: bool = False
    pin_button_turbo: int = UNASSIGNED_PIN
    default_shot_per_sec: int = DEFAULT_SHOT_PER_SEC

    def __post_init__(self) -> None:
        missing = set(BUTTONS) - set(self.pins)
        extra = set(self.pins) - set(BUTTONS)
        if missing or extra:
            raise ValueError(
                f"board {self.name!r}: missing pins {sorted(missing)}, unknown pins {sorted(extra)}"
            )
        unknown_leds = set(self.led_indexes) - set(BUTTONS)
        if unknown_leds:
            raise ValueError(f"board {self.name!r}: unknown LED buttons {sorted(unknown_leds)}")
        if len(self.pled_pins) != 4:
            raise ValueError(f"board {self.name!r}: expected 4 player LED pins")
        object.__setattr__(self, "pins", MappingProxyType(dict(self.pins)))
        object.__setattr__(self, "led_indexes", MappingProxyType(dict(self.led_indexes)))

    def board_options(self) -> BoardOptions:
        """Pin, layout and I2C display settings as stored board options."""
        options = BoardOptions(
            button_layout=self.button_layout,
            i2c_sda_pin=self.i2c_sda_pin,
            i2c_scl_pin=self.i2c_scl_pin,
            i2c_block=self.i2c_block,
            i2c_speed=self.i2c_speed,
            has_i2c_display=self.has_i2c_display,
        )
        for button, attribute in _BOARD_PIN_FIELDS.items():
            setattr(options, attribute, self.pins[button])
        return options

    def led_options(self) -> LEDOptions:
        """LED chain settings as stored LED options."""
        options = LEDOptions(
            data_pin=self.board_leds_pin,
            led_format=self.led_format,
            led_layout=self.button_layout,
            leds_per_button=self.leds_per_pixel,
            brightness_maximum=self.led_brightness_maximum,
            brightness_steps=self.led_brightness_steps,
        )
        for button, attribute in _LED_INDEX_FIELDS.items():
            setattr(options, attribute, self.led_indexes.get(button, -1))
        return options


_LEDS_STANDARD = {
    "left": 0, "down": 1, "right": 2, "up": 3,
    "b3": 4, "b4": 5, "r1": 6, "l1": 7,
    "b1": 8, "b2": 9, "r2": 10, "l2": 11,
}

_LEDS_HITBOX_UP_FIRST = {
    "left": 11, "down": 10, "right": 9, "up": 0,
    "b3": 8, "b4": 7, "r1": 6, "l1": 5,
    "b1": 1, "b2": 2, "r2": 3, "l2": 4,
}

_LEDS_FIGHTBOARD = {
    "left": 10, "down": 9, "right": 8, "up": 11,
    "b3": 0, "b4": 1, "r1": 2, "l1": 3,
    "b1": 7, "b2": 6, "r2": 5, "l2": 4,
}

_PICO_FIGHTING_PINS = {
    "left": 0, "up": 1, "down": 2, "right": 3,
    "a1": 4, "s1": 5, "s2": 6, "b3": 7,
    "b4": 8, "r1": 9, "l1": 10, "b1": 11,
    "b2": 12, "r2": 13, "l2": 14, "a2": 20,
    "l3": 21, "r3": 22,
}

_PICO_FIGHTING_COMMON = dict(
    pins=_PICO_FIGHTING_PINS,
    button_layout=ButtonLayout.HITBOX,
    default_socd_mode=SOCD_NEUTRAL,
    board_leds_pin=15,
    led_brightness_maximum=150,
    led_brightness_steps=5,
    led_format=LEDFormat.GRB,
    leds_per_pixel=2,
    led_indexes=_LEDS_HITBOX_UP_FIRST,
    pled_type=PLEDType.PWM,
    pled_pins=(16, 17, 18, 19),
    has_i2c_display=True,
    i2c_sda_pin=26,
    i2c_scl_pin=27,
    i2c_block=1,
    i2c_speed=400000,
)

_BOARDS: tuple[BoardConfig, ...] = (
    BoardConfig(
        name="CrushCounter",
        pins={
            "up": 20, "down": 8, "left": 1, "right": 14,
            "b1": 18, "b2": 17, "b3": 13, "b4": 9,
            "l1": 12, "r1": 10, "l2": 19, "r2": 16,
            "s1": 3, "s2": 0, "l3": 6, "r3": 7,
            "a1": 4, "a2": 5,
        },
        pin_settings=11,
        default_socd_mode=SOCD_NEUTRAL,
        button_layout=ButtonLayout.HITBOX,
        board_leds_pin=2,
        led_brightness_maximum=100,
        led_brightness_steps=5,
        led_format=LEDFormat.GRB,
        leds_per_pixel=1,
        led_indexes=_LEDS_STANDARD,
        pled_type=PLEDType.RGB,
        pled_pins=(12, 13, 14, 15),
    ),
    BoardConfig(
        name="DURAL",
        pins={
            "up": 9, "down": 7, "left": 6, "right": 8,
            "b1": 21, "b2": 20, "b3": 23, "b4": 22,
            "l1": 27, "r1": 29, "l2": 26, "r2": 28,
            "s1": 5, "s2": 4, "l3": 1, "r3": 0,
            "a1": 3, "a2": 2,
        },
        default_socd_mode=SOCD_UP_PRIORITY,
        button_layout=ButtonLayout.HITBOX,
    ),
    BoardConfig(
        name="DebugBoard",
        pins={
            "up": 4, "down": 5, "left": 2, "right": 3,
            "b3": 10, "b4": 12, "r1": 14, "l1": 15,
            "b1": 22, "b2": 21, "r2": 19, "l2": 17,
            "s1": 28, "s2": 27, "l3": 6, "r3": 8,
            "a1": 26, "a2": 9,
        },
        default_socd_mode=SOCD_NEUTRAL,
        button_layout=ButtonLayout.WASD,
        board_leds_pin=7,
        led_brightness_maximum=50,
        led_brightness_steps=5,
        led_format=LEDFormat.GRB,
        leds_per_pixel=4,
        led_indexes=_LEDS_STANDARD,
        pled_type=PLEDType.PWM,
        pled_pins=(20, 11, 18, 13),
        has_i2c_display=True,
        i2c_sda_pin=0,
        i2c_scl_pin=1,
        i2c_block=0,
        i2c_speed=800000,
    ),
    BoardConfig(
        name="Fightboard",
        pins={
            "up": 10, "down": 8, "left": 9, "right": 7,
            "b1": 20, "b2": 19, "b3": 24, "b4": 29,
            "l1": 27, "r1": 28, "l2": 25, "r2": 18,
            "s1": 2, "s2": 1, "l3": 3, "r3": 4,
            "a1": 0, "a2": 5,
        },
        default_socd_mode=SOCD_NEUTRAL,
        button_layout=ButtonLayout.WASD,
        board_leds_pin=14,
        led_brightness_maximum=255,
        led_brightness_steps=5,
        led_format=LEDFormat.GRBW,
        leds_per_pixel=1,
        led_indexes=_LEDS_FIGHTBOARD,
    ),
    BoardConfig(
        name="FlatboxRev4",
        pins={
            "up": 16, "down": 10, "left": 9, "right": 11,
            "b1": 19, "b2": 24, "b3": 18, "b4": 25,
            "l1": 29, "r1": 27, "l2": 28, "r2": 26,
            "s1": 3, "s2": 1, "l3": 6, "r3": 4,
            "a1": 2, "a2": 5,
        },
        default_socd_mode=SOCD_UP_PRIORITY,
        button_layout=ButtonLayout.HITBOX,
    ),
    BoardConfig(
        name="GeeekPiStick",
        pins={
            "down": 4, "up": 5, "left": 6, "right": 7,
            "b1": 8, "b2": 9, "r2": 10, "l2": 11,
            "b3": 12, "b4": 13, "r1": 14, "l1": 15,
            "s1": 17, "s2": 18, "l3": 19, "r3": 20,
            "a1": 21, "a2": 22,
        },
        default_socd_mode=SOCD_NEUTRAL,
        button_layout=ButtonLayout.ARCADE,
    ),
    BoardConfig(
        name="Hydra",
        pins={
            "down": 0, "up": 1, "left": 2, "right": 3,
            "b3": 4, "b4": 5, "r1": 6, "l1": 7,
            "b1": 8, "b2": 9, "r2": 10, "l2": 11,
            "s2": 12, "s1": 13, "r3": 14, "a1": 15,
            "a2": 18, "l3": 19,
        },
        default_socd_mode=SOCD_UP_PRIORITY,
        button_layout=ButtonLayout.HITBOX,
        board_leds_pin=22,
        led_brightness_maximum=200,
        led_brightness_steps=5,
        led_format=LEDFormat.GRB,
        leds_per_pixel=2,
        led_indexes=_LEDS_HITBOX_UP_FIRST,
        has_i2c_display=True,
        i2c_sda_pin=20,
        i2c_scl_pin=21,
        i2c_block=0,
        i2c_speed=800000,
    ),
    BoardConfig(
        name="OSFRD",
        pins={
            "up": 13, "down": 11, "left": 10, "right": 12,
            "b1": 4, "b2": 5, "b3": 0, "b4": 1,
            "l1": 3, "r1": 2, "l2": 7, "r2": 6,
            "s1": 8, "s2": 9, "l3": 17, "r3": 16,
            "a1": 28, "a2": 18,
        },
        default_socd_mode=SOCD_NEUTRAL,
        button_layout=ButtonLayout.HITBOX,
        board_leds_pin=14,
        led_brightness_maximum=100,
        led_brightness_steps=5,
        led_format=LEDFormat.GRB,
        leds_per_pixel=1,
        led_indexes=_LEDS_STANDARD,
        pled_type=PLEDType.RGB,
        pled_pins=(12, 13, 14, 15),
    ),
    BoardConfig(
        name="Pico",
        pins={
            "up": 2, "down": 3, "right": 4, "left": 5,
            "b1": 6, "b2": 7, "r2": 8, "l2": 9,
            "b3": 10, "b4": 11, "r1": 12, "l1": 13,
            "s1": 16, "s2": 17, "l3": 18, "r3": 19,
            "a1": 20, "a2": 21,
        },
        default_socd_mode=SOCD_NEUTRAL,
        button_layout=ButtonLayout.ARCADE,
    ),
    BoardConfig(
        name="PicoAnn",
        has_turbo=True,
        pin_button_turbo=28,
        default_shot_per_sec=20,
        **_PICO_FIGHTING_COMMON,
    ),
    BoardConfig(name="PicoFightingBoard", **_PICO_FIGHTING_COMMON),
)

_BY_NAME = {board.name.lower(): board for board in _BOARDS}


def get_board(name: str) -> BoardConfig:
    """Return the preset for the board called ``name`` (case-insensitive)."""
    try:
        return _BY_NAME[name.lower()]
    except KeyError:
        raise KeyError(f"unknown board: {name!r}") from None


def board_names() -> list[str]:
    """Names of all preset boards, sorted."""
    return sorted(board.name for board in _BOARDS)