"""
Unit tests for APA102 pixel encoding
"""

import pytest

from blinkt.hardware.led.apa102_encoder import BYTES_PER_PIXEL, byte_to_bits, encode_pixel
from blinkt.models.pixel import Pixel


def test_default_pixel_encodes_header_and_black():
    assert encode_pixel(Pixel()) == bytes([0xE0 | 6, 0, 0, 0])


def test_full_red_is_sent_as_header_blue_green_red():
    assert encode_pixel(Pixel(255, 0, 0, 1.0)) == bytes([0xFF, 0x00, 0x00, 0xFF])


def test_channels_are_reversed_on_the_wire():
    record = encode_pixel(Pixel(0x11, 0x22, 0x33, 0.0))

    assert len(record) == BYTES_PER_PIXEL
    assert list(record) == [0xE0, 0x33, 0x22, 0x11]


@pytest.mark.parametrize("brightness", [0.0, 0.2, 0.5, 0.75, 1.0])
def test_header_always_has_top_three_bits_set(brightness):
    header = encode_pixel(Pixel(brightness=brightness))[0]

    assert header & 0xE0 == 0xE0
    assert header & 0x1F == int(31 * brightness)


@pytest.mark.parametrize("value, bits", [
    (0xFF, [1, 1, 1, 1, 1, 1, 1, 1]),
    (0x00, [0, 0, 0, 0, 0, 0, 0, 0]),
    (0x80, [1, 0, 0, 0, 0, 0, 0, 0]),
    (0x01, [0, 0, 0, 0, 0, 0, 0, 1]),
    (0xE6, [1, 1, 1, 0, 0, 1, 1, 0]),
])
def test_byte_to_bits_is_msb_first(value, bits):
    assert byte_to_bits(value) == bits
