from gp2040kit.pixel import NO_PIXEL, Pixel, PixelMatrix


def _layout():
    return [
        [Pixel(0, 1, [0, 1]), NO_PIXEL],
        [Pixel(1, 2, [2, 3]), Pixel(2, 4, [4, 5])],
        [Pixel(3, 8, [6])],
    ]


def test_pixels_equal_by_index_only():
    assert Pixel(3, 1, [1]) == Pixel(3, 99, [7, 8])
    assert Pixel(3) != Pixel(4)


def test_pixel_hash_follows_index():
    assert len({Pixel(1, 1), Pixel(1, 2), Pixel(2)}) == 2


def test_pixel_not_equal_to_other_types():
    assert (Pixel(0) == 0) is False


def test_no_pixel_sentinel():
    assert NO_PIXEL == Pixel(-1)
    matrix = PixelMatrix([[NO_PIXEL]])
    assert matrix.pixel_count() == 1
    assert matrix.led_count() == 0


def test_positions_not_shared_between_pixels():
    a = Pixel(0)
    b = Pixel(1)
    a.positions.append(5)
    assert b.positions == []


def test_setup_and_counts():
    matrix = PixelMatrix()
    matrix.setup(_layout(), 2)
    assert matrix.leds_per_pixel == 2
    assert matrix.pixel_count() == 5
    assert matrix.led_count() == 7


def test_setup_default_leds_per_pixel():
    matrix = PixelMatrix()
    matrix.setup(_layout())
    assert matrix.leds_per_pixel == -1


def test_led_count_skips_placeholders():
    placeholder = Pixel(-1, 0, [10, 11, 12])
    matrix = PixelMatrix([[placeholder, Pixel(0, 1, [0])]])
    assert matrix.led_count() == 1
    assert matrix.pixel_count() == 2


def test_empty_matrix():
    matrix = PixelMatrix()
    assert matrix.pixel_count() == 0
    assert matrix.led_count() == 0


def test_setup_copies_columns():
    layout = _layout()
    matrix = PixelMatrix()
    matrix.setup(layout)
    layout[0].append(Pixel(9, 0, [9]))
    assert matrix.pixel_count() == 5