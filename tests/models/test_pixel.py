"""
Unit tests for the Pixel model
"""

import pytest

from blinkt.models.errors import InvalidBrightnessLevel, InvalidColorValue
from blinkt.models.pixel import DEFAULT_BRIGHTNESS, Pixel


# ============================================================================
# Defaults and getters
# ============================================================================

class TestPixelDefaults:

    def test_new_pixel_is_dark_at_default_brightness(self):
        pixel = Pixel()
        assert pixel.as_tuple() == (0, 0, 0, DEFAULT_BRIGHTNESS)
        assert pixel.get_brightness() == 6  # floor(31 * 0.2)

    def test_constructor_validates(self):
        with pytest.raises(InvalidColorValue):
            Pixel(red=256)
        with pytest.raises(InvalidBrightnessLevel):
            Pixel(brightness=1.5)


@pytest.mark.parametrize("brightness, encoded", [
    (0.0, 0),
    (0.1, 3),
    (0.5, 15),
    (0.99, 30),
    (1.0, 31),
])
def test_brightness_is_encoded_to_five_bits(brightness, encoded):
    pixel = Pixel().set_brightness(brightness)
    assert pixel.get_brightness() == encoded
    assert pixel.get_brightness_value() == brightness


# ============================================================================
# Setters
# ============================================================================

class TestPixelSetters:

    def test_setters_chain(self):
        pixel = Pixel()
        result = pixel.set_red(10).set_green(20).set_blue(30).set_brightness(1.0)

        assert result is pixel
        assert (pixel.get_red(), pixel.get_green(), pixel.get_blue()) == (10, 20, 30)
        assert pixel.get_brightness() == 31

    @pytest.mark.parametrize("setter", ["set_red", "set_green", "set_blue"])
    @pytest.mark.parametrize("value", [-1, 256, 1000])
    def test_out_of_range_channel_is_rejected(self, setter, value):
        pixel = Pixel(1, 2, 3)

        with pytest.raises(InvalidColorValue):
            getattr(pixel, setter)(value)

        assert pixel.as_tuple() == (1, 2, 3, DEFAULT_BRIGHTNESS)

    @pytest.mark.parametrize("value", [12.5, "12", None, True])
    def test_non_integer_channel_is_rejected(self, value):
        with pytest.raises(InvalidColorValue):
            Pixel().set_red(value)

    @pytest.mark.parametrize("value", [-0.01, 1.01, 2, True, "0.5"])
    def test_invalid_brightness_is_rejected(self, value):
        pixel = Pixel(brightness=0.4)

        with pytest.raises(InvalidBrightnessLevel):
            pixel.set_brightness(value)

        assert pixel.get_brightness_value() == 0.4

    def test_integer_brightness_bounds_are_accepted(self):
        assert Pixel().set_brightness(1).get_brightness_value() == 1.0
        assert Pixel().set_brightness(0).get_brightness_value() == 0.0

    def test_channel_bounds_are_accepted(self):
        pixel = Pixel().set_red(0).set_green(255).set_blue(255)
        assert pixel.as_tuple()[:3] == (0, 255, 255)


# ============================================================================
# set_rgbb / clear
# ============================================================================

class TestPixelSetRGBB:

    def test_sets_all_four_values(self):
        pixel = Pixel().set_rgbb(255, 128, 1, 1.0)
        assert pixel.as_tuple() == (255, 128, 1, 1.0)

    @pytest.mark.parametrize("args, error", [
        ((255, 0, 0, 1.5), InvalidBrightnessLevel),
        ((255, 0, 300, 1.0), InvalidColorValue),
        ((-1, 0, 0, 0.5), InvalidColorValue),
    ])
    def test_is_all_or_nothing(self, args, error):
        pixel = Pixel(7, 8, 9, 0.3)

        with pytest.raises(error):
            pixel.set_rgbb(*args)

        assert pixel.as_tuple() == (7, 8, 9, 0.3)

    def test_clear_keeps_brightness(self):
        pixel = Pixel(100, 150, 200, 0.8)

        pixel.clear()

        assert pixel.as_tuple() == (0, 0, 0, 0.8)


def test_repr_shows_all_fields():
    assert repr(Pixel(1, 2, 3, 0.5)) == "Pixel(r=1, g=2, b=3, brightness=0.5)"
