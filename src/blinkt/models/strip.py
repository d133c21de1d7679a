"""
Strip model - the fixed buffer of 8 pixels
"""

from typing import Iterator, List, Optional

from .pixel import Pixel
from .validation import validate_brightness, validate_pixel_index

NUM_PIXELS = 8


class Strip:
    """
    Fixed, ordered buffer of NUM_PIXELS pixels.

    Pixels are created once and only ever mutated in place, so handles
    returned by get_pixel() stay live.

    Iterating a strip walks the pixels in index order. Every iter() call
    starts a fresh pass.
    """

    def __init__(self):
        self._pixels: List[Pixel] = [Pixel() for _ in range(NUM_PIXELS)]

    def get_pixel(self, index: int) -> Pixel:
        """
        Raises:
            InvalidPixelIndex: If index is outside 0..7
        """
        return self._pixels[validate_pixel_index(index, NUM_PIXELS)]

    def set_pixel(self, index: int, red: int, green: int, blue: int, brightness: Optional[float] = None) -> None:
        """
        Set one pixel. Without brightness the pixel keeps its current one.

        Raises:
            InvalidPixelIndex: If index is outside 0..7
            InvalidColorValue: If a channel is outside 0..255
            InvalidBrightnessLevel: If brightness is outside 0.0..1.0
        """
        pixel = self.get_pixel(index)
        if brightness is None:
            brightness = pixel.get_brightness_value()
        pixel.set_rgbb(red, green, blue, brightness)

    def set_pixels(self, red: int, green: int, blue: int, brightness: Optional[float] = None) -> None:
        """
        Set every pixel, index 0 first.

        Not atomic across pixels: a failure leaves the pixels before the
        failing index already updated.
        """
        for index in range(NUM_PIXELS):
            self.set_pixel(index, red, green, blue, brightness)

    def set_brightness(self, brightness: float) -> None:
        validate_brightness(brightness)
        for pixel in self._pixels:
            pixel.set_brightness(brightness)

    def clear(self) -> None:
        for pixel in self._pixels:
            pixel.clear()

    def __len__(self) -> int:
        return NUM_PIXELS

    def __iter__(self) -> Iterator[Pixel]:
        for pixel in self._pixels:
            yield pixel

    def __repr__(self) -> str:
        return f"Strip({self._pixels!r})"
