import pytest

from hexmatch.color import Color


def test_from_hex_int_splits_channels():
    assert Color.from_hex(0xFF0000FF) == Color(255, 0, 0, 255)


def test_from_hex_string_matches_int():
    assert Color.from_hex("ff8000ff") == Color.from_hex(0xFF8000FF)


@pytest.mark.parametrize("r,g,b,a", [(1, 2, 3, 4), (255, 128, 0, 255), (0, 0, 0, 0)])
def test_hex_round_trip(r, g, b, a):
    packed = (r << 24) | (g << 16) | (b << 8) | a
    assert Color.from_hex(packed) == Color(r, g, b, a)


def test_invalid_hex_string_raises():
    with pytest.raises(ValueError):
        Color.from_hex("zz")


@pytest.mark.parametrize("channels", [(256, 0, 0, 0), (0, -1, 0, 0), (0, 0, 0, 300)])
def test_from_rgb_out_of_range_raises(channels):
    with pytest.raises(ValueError):
        Color.from_rgb(*channels)


def test_from_rgb_keeps_channels():
    assert Color.from_rgb(10, 20, 30, 40) == Color(10, 20, 30, 40)


def test_from_hsl_achromatic_is_grey():
    colour = Color.from_hsl(0.3, 0, 0.5, 1.0)
    assert colour.r == colour.g == colour.b
    assert colour.a == 255


def test_from_hsl_pure_red():
    assert Color.from_hsl(0, 1, 0.5, 1.0) == Color(255, 0, 0, 255)


def test_from_hsv_red_and_full_hue_wraps():
    assert Color.from_hsv(0, 1, 1, 1.0) == Color(255, 0, 0, 255)
    assert Color.from_hsv(1, 1, 1, 1.0) == Color.from_hsv(0, 1, 1, 1.0)


def test_from_hsv_zero_saturation_keeps_alpha_unscaled():
    colour = Color.from_hsv(0.5, 0, 1, 1)
    assert colour == Color(255, 255, 255, 1)