import pytest

from gp2040kit.animation import FRAME_SIZE, AnimationOptions
from gp2040kit.color import BLACK, BLUE, COLORS, RED, RGB
from gp2040kit.effects import Chase, Rainbow, StaticColor, StaticTheme
from gp2040kit.pixel import Pixel, PixelMatrix


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def make_matrix(count=4):
    matrix = PixelMatrix()
    matrix.setup([[Pixel(i, mask=1 << i, positions=[i])] for i in range(count)])
    return matrix


def blank():
    return [BLACK] * FRAME_SIZE


def test_rainbow_paints_all_pixels_with_wheel_colour():
    clock = FakeClock()
    effect = Rainbow(make_matrix(), AnimationOptions(rainbow_cycle_time=40), clock)
    frame = blank()
    effect.animate(frame)
    assert frame[:4] == [RGB.wheel(0)] * 4
    assert frame[0] == RED
    assert frame[4] == BLACK


def test_rainbow_waits_for_cycle_time():
    clock = FakeClock()
    effect = Rainbow(make_matrix(), AnimationOptions(rainbow_cycle_time=40), clock)
    effect.animate(blank())
    frame = blank()
    effect.animate(frame)
    assert frame == blank()
    clock.now = 0.04
    effect.animate(frame)
    assert frame[0] == RGB.wheel(1)


def test_rainbow_skips_placeholder_pixels():
    matrix = PixelMatrix()
    matrix.setup([[Pixel(0, positions=[0]), Pixel(-1, positions=[5])]])
    effect = Rainbow(matrix, AnimationOptions(), FakeClock())
    frame = blank()
    effect.animate(frame)
    assert frame[0] == RGB.wheel(0)
    assert frame[5] == BLACK


def test_rainbow_reverses_at_end_of_wheel():
    effect = Rainbow(make_matrix(1), AnimationOptions(rainbow_cycle_time=0), FakeClock())
    frame = blank()
    for _ in range(257):
        effect.animate(frame)
    assert frame[0] == RGB.wheel(254)
    assert effect.reverse is True


def test_rainbow_parameters():
    options = AnimationOptions(rainbow_cycle_time=0)
    effect = Rainbow(make_matrix(), options, FakeClock())
    effect.parameter_up()
    assert options.rainbow_cycle_time == 10
    effect.parameter_down()
    effect.parameter_down()
    assert options.rainbow_cycle_time == 0


def test_chase_lights_current_pixel_first():
    effect = Chase(make_matrix(), AnimationOptions(chase_cycle_time=0), FakeClock())
    frame = blank()
    effect.animate(frame)
    assert frame[0] == RGB.wheel(0)
    assert frame[1:4] == [BLACK] * 3


def test_chase_trails_behind_current_pixel():
    effect = Chase(make_matrix(), AnimationOptions(chase_cycle_time=0), FakeClock())
    frame = blank()
    effect.animate(frame)
    effect.animate(frame)
    assert frame[0] == RGB.wheel(0)
    assert frame[1] == RGB.wheel(1)
    assert frame[2:4] == [BLACK] * 2


def test_chase_wraps_around_pixel_count():
    effect = Chase(make_matrix(), AnimationOptions(chase_cycle_time=0), FakeClock())
    frame = blank()
    for _ in range(4):
        effect.animate(frame)
    assert effect.current_pixel == 0
    effect.animate(frame)
    assert frame[0] == RGB.wheel(4)
    assert frame[1:4] == [BLACK] * 3


def test_chase_waits_for_cycle_time():
    clock = FakeClock()
    effect = Chase(make_matrix(), AnimationOptions(chase_cycle_time=85), clock)
    effect.animate(blank())
    frame = blank()
    effect.animate(frame)
    assert frame == blank()


def test_chase_parameters():
    options = AnimationOptions(chase_cycle_time=85)
    effect = Chase(make_matrix(), options, FakeClock())
    effect.parameter_up()
    assert options.chase_cycle_time == 95
    effect.parameter_down()
    assert options.chase_cycle_time == 85


def test_static_color_unfiltered_uses_static_index():
    options = AnimationOptions(static_color_index=2, button_color_index=10)
    effect = StaticColor(make_matrix(), options)
    frame = blank()
    effect.animate(frame)
    assert frame[:4] == [COLORS[2]] * 4
    assert effect.get_color() == 2


def test_static_color_filtered_paints_only_given_pixels():
    matrix = make_matrix()
    options = AnimationOptions(static_color_index=2, button_color_index=10)
    effect = StaticColor(matrix, options, [Pixel(1)])
    frame = blank()
    effect.animate(frame)
    assert frame[1] == BLUE
    assert frame[0] == BLACK and frame[2] == BLACK


def test_static_color_parameter_wraps():
    options = AnimationOptions(static_color_index=len(COLORS) - 1)
    effect = StaticColor(make_matrix(), options)
    effect.parameter_up()
    assert options.static_color_index == 0
    effect.parameter_down()
    assert options.static_color_index == len(COLORS) - 1


def test_filtered_static_color_changes_button_index():
    options = AnimationOptions(static_color_index=3, button_color_index=0)
    effect = StaticColor(make_matrix(), options, [])
    effect.parameter_up()
    assert options.button_color_index == 1
    assert options.static_color_index == 3


def test_static_theme_uses_mask_colours_with_black_default():
    themes = [{1 << 0: RED, 1 << 2: BLUE}]
    effect = StaticTheme(make_matrix(), AnimationOptions(), themes)
    frame = [RGB(1, 1, 1)] * FRAME_SIZE
    effect.animate(frame)
    assert frame[0] == RED
    assert frame[1] == BLACK
    assert frame[2] == BLUE


def test_static_theme_resets_out_of_range_index():
    options = AnimationOptions(theme_index=7)
    StaticTheme(make_matrix(), options, [{}, {}])
    assert options.theme_index == 0


def test_static_theme_parameter_wraps():
    options = AnimationOptions()
    effect = StaticTheme(make_matrix(), options, [{}, {}, {}])
    effect.parameter_down()
    assert options.theme_index == 2
    effect.parameter_up()
    assert options.theme_index == 0


def test_static_theme_without_themes_leaves_frame():
    effect = StaticTheme(make_matrix(), AnimationOptions(), [])
    frame = blank()
    frame[0] = RED
    effect.animate(frame)
    assert frame[0] == RED


def test_static_theme_bad_index_raises():
    options = AnimationOptions()
    effect = StaticTheme(make_matrix(), options, [{}])
    options.theme_index = 4
    with pytest.raises(IndexError):
        effect.animate(blank())