"""
APA102 pixel encoding

Each LED takes a 4-byte record:

    [ 111 + 5-bit brightness ][ blue ][ green ][ red ]

Note the color order on the wire is B, G, R, the reverse of the usual
R, G, B. Bytes are clocked out most-significant bit first.
"""

from typing import List

from blinkt.models.pixel import Pixel

HEADER_MASK = 0xE0  # 0b11100000
BIT_MASK = 0x80     # 0b10000000
BITS_PER_BYTE = 8
BYTES_PER_PIXEL = 4


def encode_pixel(pixel: Pixel) -> bytes:
    """Wire record for one pixel: header, blue, green, red"""
    return bytes((
        HEADER_MASK | pixel.get_brightness(),
        pixel.get_blue(),
        pixel.get_green(),
        pixel.get_red(),
    ))


def byte_to_bits(value: int) -> List[int]:
    """Bits of one byte in transmission order (MSB first)"""
    bits = []
    for _ in range(BITS_PER_BYTE):
        bits.append(1 if value & BIT_MASK else 0)
        value <<= 1
    return bits
