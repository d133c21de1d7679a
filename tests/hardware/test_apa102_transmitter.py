"""
Unit tests for APA102Transmitter frame generation
"""

from unittest.mock import patch

import pytest

from blinkt.hardware.led.apa102_encoder import byte_to_bits, encode_pixel
from blinkt.hardware.led.apa102_transmitter import APA102Transmitter, END_FRAME_PULSES, START_FRAME_PULSES
from blinkt.models.enums import TransmitterState
from blinkt.models.strip import Strip

from frame_helpers import CLK, DAT, frame_pixel_bytes

PIXEL_PULSES = 8 * 32


@pytest.fixture
def lines(gpio):
    return gpio.acquire_output(DAT, "test DAT"), gpio.acquire_output(CLK, "test CLK")


@pytest.fixture
def transmitter(lines):
    return APA102Transmitter(*lines)


def test_fresh_strip_frame_pulse_counts(gpio, transmitter):
    transmitter.transmit(Strip())

    clock = gpio.get_history(CLK)
    data = gpio.get_history(DAT)

    assert START_FRAME_PULSES == 32 and END_FRAME_PULSES == 36
    assert len(clock) == 648
    assert clock == [1, 0] * (32 + PIXEL_PULSES + 36)
    assert len(data) == 1 + PIXEL_PULSES + 1


def test_start_and_end_markers_hold_data_low(gpio, transmitter):
    strip = Strip()
    strip.set_pixels(255, 255, 255, 1.0)

    transmitter.transmit(strip)

    data = gpio.get_history(DAT)
    assert data[0] == 0
    assert data[-1] == 0
    # Every pixel bit is 1 for full white at full brightness
    assert data[1:-1] == [1] * PIXEL_PULSES


def test_frame_carries_encoded_pixels_in_order(gpio, transmitter):
    strip = Strip()
    strip.set_pixel(0, 255, 0, 0, 1.0)
    strip.set_pixel(7, 0x12, 0x34, 0x56, 0.5)

    transmitter.transmit(strip)

    sent = frame_pixel_bytes(gpio.get_history(DAT))
    assert sent[0:4] == [0xFF, 0x00, 0x00, 0xFF]
    assert sent[4:28] == [0xE6, 0, 0, 0] * 6
    assert sent[28:32] == [0xEF, 0x56, 0x34, 0x12]


def test_first_pixel_header_bits_are_sent_msb_first(gpio, transmitter):
    strip = Strip()
    strip.set_pixel(0, 255, 0, 0, 1.0)

    transmitter.transmit(strip)

    data = gpio.get_history(DAT)
    assert data[1:9] == byte_to_bits(0xFF)
    assert data[9:25] == [0] * 16
    assert data[25:33] == [1] * 8


def test_data_is_stable_across_each_clock_pulse(gpio, lines):
    """Record (data, clock) pairs: data must not change between rising and falling edge"""
    data_pin, clock_pin = lines
    events = []
    original_write = gpio.write

    def recording_write(pin, value):
        events.append((pin, value))
        original_write(pin, value)

    with patch.object(gpio, "write", side_effect=recording_write):
        APA102Transmitter(data_pin, clock_pin).transmit(Strip())

    for i, (pin, value) in enumerate(events):
        if pin == CLK and value == 1:
            assert events[i + 1] == (CLK, 0)


def test_state_machine_walks_frame_stages(gpio, lines):
    data_pin, clock_pin = lines
    transmitter = APA102Transmitter(data_pin, clock_pin)
    seen = []
    original_write = gpio.write

    def observe(pin, value):
        stage = (transmitter.state, transmitter.pixel_index)
        if not seen or seen[-1] != stage:
            seen.append(stage)
        original_write(pin, value)

    with patch.object(gpio, "write", side_effect=observe):
        transmitter.transmit(Strip())

    assert seen == (
        [(TransmitterState.START_FRAME, None)]
        + [(TransmitterState.PIXEL, i) for i in range(8)]
        + [(TransmitterState.END_FRAME, None)]
    )
    assert transmitter.state is TransmitterState.IDLE
    assert transmitter.frames_sent == 1


def test_write_failure_propagates_and_returns_to_idle(gpio, lines):
    transmitter = APA102Transmitter(*lines)

    with patch.object(gpio, "write", side_effect=OSError("line stuck")):
        with pytest.raises(OSError, match="line stuck"):
            transmitter.transmit(Strip())

    assert transmitter.state is TransmitterState.IDLE
    assert transmitter.pixel_index is None
    assert transmitter.frames_sent == 0


def test_every_transmit_resends_whole_buffer(gpio, transmitter):
    strip = Strip()

    transmitter.transmit(strip)
    transmitter.transmit(strip)

    assert len(gpio.get_history(CLK)) == 2 * 648
    assert transmitter.frames_sent == 2


def test_data_line_carries_bits_of_every_encoded_byte(gpio, transmitter):
    strip = Strip()
    strip.set_pixel(2, 0xA5, 0x3C, 0x01, 0.75)

    transmitter.transmit(strip)

    expected = [bit for pixel in strip for byte in encode_pixel(pixel) for bit in byte_to_bits(byte)]
    assert gpio.get_history(DAT)[1:-1] == expected
