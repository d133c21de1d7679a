from .apa102_encoder import encode_pixel, byte_to_bits
from .apa102_transmitter import APA102Transmitter, START_FRAME_PULSES, END_FRAME_PULSES
from .blinkt import Blinkt

__all__ = [
    "encode_pixel",
    "byte_to_bits",
    "APA102Transmitter",
    "START_FRAME_PULSES",
    "END_FRAME_PULSES",
    "Blinkt",
]
