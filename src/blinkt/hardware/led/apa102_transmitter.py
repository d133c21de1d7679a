"""
APA102 Transmitter
==================
Bit-bangs a full frame over a data line and a clock line.

Frame layout:
    START_FRAME   data LOW, 32 clock pulses
    PIXEL[0..n]   4 bytes per pixel, MSB first, one clock pulse per bit
    END_FRAME     data LOW, 36 clock pulses

A clock pulse is one write of 1 followed by one write of 0. There is no
delay between writes; the pulse width is whatever the host's GPIO write
latency is.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from blinkt.hardware.gpio.output_pin import OutputPin
from blinkt.hardware.led.apa102_encoder import byte_to_bits, encode_pixel
from blinkt.models.enums import LogCategory, TransmitterState
from blinkt.models.pixel import Pixel
from blinkt.utils.logger import get_logger

log = get_logger().for_category(LogCategory.PROTOCOL)

START_FRAME_PULSES = 32
# More than one pulse per LED in the chain, so the latch reaches the last one
END_FRAME_PULSES = 36


class APA102Transmitter:
    """
    Drives one frame per transmit() call.

    State walks IDLE -> START_FRAME -> PIXEL (once per pixel) -> END_FRAME -> IDLE.
    A write error propagates unchanged; the state still returns to IDLE.
    """

    def __init__(
        self,
        data_pin: OutputPin,
        clock_pin: OutputPin,
        encoder: Callable[[Pixel], bytes] = encode_pixel
    ):
        self._data = data_pin
        self._clock = clock_pin
        self._encode = encoder
        self._state = TransmitterState.IDLE
        self._pixel_index: Optional[int] = None
        self._frames_sent = 0

    @property
    def state(self) -> TransmitterState:
        return self._state

    @property
    def pixel_index(self) -> Optional[int]:
        """Index of the pixel being written while in PIXEL state, else None"""
        return self._pixel_index

    @property
    def frames_sent(self) -> int:
        return self._frames_sent

    def transmit(self, pixels: Iterable[Pixel]) -> None:
        """Send every pixel, framed by start and end markers"""
        count = 0
        try:
            self._state = TransmitterState.START_FRAME
            self._write_marker(START_FRAME_PULSES)

            self._state = TransmitterState.PIXEL
            for index, pixel in enumerate(pixels):
                self._pixel_index = index
                for byte in self._encode(pixel):
                    self._write_byte(byte)
                count += 1
            self._pixel_index = None

            self._state = TransmitterState.END_FRAME
            self._write_marker(END_FRAME_PULSES)
        finally:
            self._state = TransmitterState.IDLE
            self._pixel_index = None

        self._frames_sent += 1
        log.debug("Frame sent", pixels=count, frame=self._frames_sent)

    # -------------------------------
    # Line level
    # -------------------------------

    def _pulse_clock(self) -> None:
        self._clock.set_value(1)
        self._clock.set_value(0)

    def _write_marker(self, pulses: int) -> None:
        self._data.set_value(0)
        for _ in range(pulses):
            self._pulse_clock()

    def _write_byte(self, byte: int) -> None:
        for bit in byte_to_bits(byte):
            self._data.set_value(bit)
            self._pulse_clock()
