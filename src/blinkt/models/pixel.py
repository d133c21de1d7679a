"""
Pixel model - single APA102 LED state

Holds 8-bit RGB channels plus a fractional brightness. The brightness is
sent to the LED as a 5-bit global level in the pixel's header byte.
"""

from typing import Tuple

from .validation import validate_brightness, validate_color

DEFAULT_BRIGHTNESS = 0.2

COLOR_MASK = 0xFF
BRIGHTNESS_MASK = 0x1F
BRIGHTNESS_LEVELS = 31


class Pixel:
    """
    One LED of the strip.

    All setters validate before storing and return the pixel, so calls chain:

        pixel.set_red(255).set_green(64).set_blue(0)

    set_rgbb() validates all four values before touching any of them.
    """

    __slots__ = ("_red", "_green", "_blue", "_brightness")

    def __init__(self, red: int = 0, green: int = 0, blue: int = 0, brightness: float = DEFAULT_BRIGHTNESS):
        self._red = validate_color(red, "Red")
        self._green = validate_color(green, "Green")
        self._blue = validate_color(blue, "Blue")
        self._brightness = validate_brightness(brightness)

    # === SETTERS ===

    def set_red(self, red: int) -> 'Pixel':
        self._red = validate_color(red, "Red")
        return self

    def set_green(self, green: int) -> 'Pixel':
        self._green = validate_color(green, "Green")
        return self

    def set_blue(self, blue: int) -> 'Pixel':
        self._blue = validate_color(blue, "Blue")
        return self

    def set_brightness(self, brightness: float) -> 'Pixel':
        self._brightness = validate_brightness(brightness)
        return self

    def set_rgbb(self, red: int, green: int, blue: int, brightness: float) -> 'Pixel':
        """
        Set all four values at once.

        Raises:
            InvalidColorValue: If any channel is outside 0..255
            InvalidBrightnessLevel: If brightness is outside 0.0..1.0

        Nothing is changed when any value is invalid.
        """
        red = validate_color(red, "Red")
        green = validate_color(green, "Green")
        blue = validate_color(blue, "Blue")
        brightness = validate_brightness(brightness)

        self._red, self._green, self._blue = red, green, blue
        self._brightness = brightness
        return self

    def clear(self) -> 'Pixel':
        """Turn the color off. Brightness is kept."""
        self._red = 0
        self._green = 0
        self._blue = 0
        return self

    # === GETTERS ===

    def get_red(self) -> int:
        return self._red & COLOR_MASK

    def get_green(self) -> int:
        return self._green & COLOR_MASK

    def get_blue(self) -> int:
        return self._blue & COLOR_MASK

    def get_brightness(self) -> int:
        """Brightness as the 5-bit level sent on the wire (0..31)"""
        return int(BRIGHTNESS_LEVELS * self._brightness) & BRIGHTNESS_MASK

    def get_brightness_value(self) -> float:
        """Brightness as set (0.0..1.0)"""
        return self._brightness

    def as_tuple(self) -> Tuple[int, int, int, float]:
        return self.get_red(), self.get_green(), self.get_blue(), self._brightness

    def __repr__(self) -> str:
        return f"Pixel(r={self._red}, g={self._green}, b={self._blue}, brightness={self._brightness})"
