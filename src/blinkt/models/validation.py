"""
Range checks shared by Pixel, Strip, the driver and the config loader.

Each check raises the matching error from models.errors and returns the
value unchanged when it is valid.
"""

from numbers import Real

from .errors import InvalidBrightnessLevel, InvalidColorValue, InvalidGpioPin, InvalidPixelIndex

COLOR_MIN = 0
COLOR_MAX = 255

BRIGHTNESS_MIN = 0.0
BRIGHTNESS_MAX = 1.0

GPIO_PIN_MIN = 1
GPIO_PIN_MAX = 27


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_color(value: int, channel: str = "Color") -> int:
    if not _is_int(value) or not COLOR_MIN <= value <= COLOR_MAX:
        raise InvalidColorValue(f"{channel} should be between {COLOR_MIN} and {COLOR_MAX}, got {value!r}")
    return value


def validate_brightness(value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, Real) or not BRIGHTNESS_MIN <= value <= BRIGHTNESS_MAX:
        raise InvalidBrightnessLevel(
            f"Brightness should be between {BRIGHTNESS_MIN} and {BRIGHTNESS_MAX}, got {value!r}"
        )
    return float(value)


def validate_pixel_index(index: int, count: int) -> int:
    if not _is_int(index) or not 0 <= index < count:
        raise InvalidPixelIndex(f"Pixel should be between 0 and {count - 1}, got {index!r}")
    return index


def validate_gpio_pin(pin: int, name: str, default: int) -> int:
    if not _is_int(pin) or not GPIO_PIN_MIN <= pin <= GPIO_PIN_MAX:
        raise InvalidGpioPin(
            f"{name} pin must be between {GPIO_PIN_MIN} and {GPIO_PIN_MAX} (default is {default}), got {pin!r}"
        )
    return pin


def validate_pin_pair(data_pin: int, clock_pin: int, data_default: int, clock_default: int) -> None:
    validate_gpio_pin(data_pin, "DAT", data_default)
    validate_gpio_pin(clock_pin, "CLK", clock_default)
    if data_pin == clock_pin:
        raise InvalidGpioPin(f"DAT pin and CLK pin cannot be the same (both {data_pin})")
