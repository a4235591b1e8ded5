import pytest

from gp2040kit.color import BLUE, COLORS, GREEN, RED, WHITE, BLACK, LEDFormat, RGB


def test_wheel_primary_points():
    assert RGB.wheel(0) == RED
    assert RGB.wheel(255) == RED
    assert RGB.wheel(85) == GREEN
    assert RGB.wheel(170) == BLUE


@pytest.mark.parametrize("pos", range(256))
def test_wheel_channels_sum_to_full_scale(pos):
    color = RGB.wheel(pos)
    assert color.r + color.g + color.b == 255
    assert 0 in (color.r, color.g, color.b)


def test_value_grb_byte_order():
    color = RGB(10, 20, 30)
    word = color.value(LEDFormat.GRB)
    assert (word >> 16) & 0xFF == color.g
    assert (word >> 8) & 0xFF == color.r
    assert word & 0xFF == color.b


def test_value_rgb_byte_order():
    color = RGB(10, 20, 30)
    word = color.value(LEDFormat.RGB)
    assert (word >> 16) & 0xFF == color.r
    assert (word >> 8) & 0xFF == color.g
    assert word & 0xFF == color.b


def test_value_rgbw_and_grbw_order():
    color = RGB(10, 20, 30, 40)
    rgbw = color.value(LEDFormat.RGBW)
    grbw = color.value(LEDFormat.GRBW)
    assert [(rgbw >> s) & 0xFF for s in (24, 16, 8, 0)] == [10, 20, 30, 40]
    assert [(grbw >> s) & 0xFF for s in (24, 16, 8, 0)] == [20, 10, 30, 40]


@pytest.mark.parametrize("fmt", [LEDFormat.GRBW, LEDFormat.RGBW])
def test_grey_uses_white_channel_only(fmt):
    assert WHITE.value(fmt) == 255
    assert RGB(7, 7, 7).value(fmt) == 7


@pytest.mark.parametrize("fmt", list(LEDFormat))
def test_zero_brightness_is_off(fmt):
    assert RGB(200, 100, 50, 25).value(fmt, 0.0) == 0
    assert BLACK.value(fmt) == 0


def test_brightness_scales_channels():
    word = RGB(10, 10, 100).value(LEDFormat.RGB, 0.5)
    assert word & 0xFF == 50
    assert (word >> 16) & 0xFF == 5


def test_value_accepts_plain_int_format():
    assert RED.value(1) == RED.value(LEDFormat.RGB)


def test_unknown_format_rejected():
    with pytest.raises(ValueError):
        RED.value(9)


def test_channel_range_checked():
    with pytest.raises(ValueError):
        RGB(256, 0, 0)
    with pytest.raises(ValueError):
        RGB(0, -1, 0)


def test_palette_has_unique_colors():
    words = {color.value(LEDFormat.RGB) for color in COLORS}
    assert len(words) == len(COLORS)
    assert COLORS[0].value(LEDFormat.RGB) == 0