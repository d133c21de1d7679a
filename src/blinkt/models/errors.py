"""
Validation errors raised by the Blinkt! driver.

Every error is a ValueError, so callers that only care about "bad input"
can catch that, while tests and the CLI can tell the kinds apart.
"""


class BlinktError(ValueError):
    """Base class for Blinkt validation errors"""


class InvalidColorValue(BlinktError):
    """Color channel outside 0..255"""


class InvalidBrightnessLevel(BlinktError):
    """Brightness outside 0.0..1.0"""


class InvalidPixelIndex(BlinktError):
    """Pixel index outside 0..7"""


class InvalidGpioPin(BlinktError):
    """GPIO pin outside 1..27, or data pin equal to clock pin"""
