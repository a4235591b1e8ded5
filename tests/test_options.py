import pytest

from gp2040kit.color import ButtonLayout, LEDFormat
from gp2040kit.options import (
    TURBO_SHOT_MAX,
    TURBO_SHOT_MIN,
    BoardOptions,
    LEDOptions,
    PLEDType,
    TurboOptions,
    clamp_shot_count,
)


def test_board_defaults_from_display_header():
    options = BoardOptions()
    assert options.display_i2c_address == 0x3C
    assert options.i2c_speed == 400000
    assert options.i2c_sda_pin == -1
    assert options.button_layout is ButtonLayout.ARCADE
    assert options.has_i2c_display is False


def test_led_defaults_from_leds_header():
    options = LEDOptions()
    assert options.brightness_maximum == 128
    assert options.brightness_steps == 5
    assert options.led_format is LEDFormat.GRB
    assert options.leds_per_button == 1
    assert options.index_b1 == -1


def test_turbo_default_interval():
    turbo = TurboOptions()
    assert turbo.shot_count == 20
    assert turbo.interval_ms() == 1000 // turbo.shot_count


def test_turbo_interval_rejects_zero():
    with pytest.raises(ValueError):
        TurboOptions(shot_count=0).interval_ms()


@pytest.mark.parametrize("count", [TURBO_SHOT_MIN, 20, 30, TURBO_SHOT_MAX])
def test_clamp_keeps_values_in_range(count):
    assert clamp_shot_count(count) == count


def test_clamp_limits():
    assert clamp_shot_count(0) == 1
    assert clamp_shot_count(-5) == TURBO_SHOT_MIN
    assert clamp_shot_count(100) == 60
    assert clamp_shot_count(TURBO_SHOT_MAX + 1) == TURBO_SHOT_MAX


def test_options_are_independent_instances():
    first = BoardOptions()
    second = BoardOptions()
    first.pin_dpad_up = 2
    assert second.pin_dpad_up == -1
    assert first != second


def test_pled_types_distinct():
    assert len({PLEDType.NONE, PLEDType.PWM, PLEDType.RGB}) == 3
    assert PLEDType("pwm") is PLEDType.PWM