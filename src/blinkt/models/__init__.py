from .enums import DriverState, TransmitterState, LogLevel, LogCategory, GPIOInitialState
from .errors import (
    BlinktError,
    InvalidColorValue,
    InvalidBrightnessLevel,
    InvalidPixelIndex,
    InvalidGpioPin,
)
from .pixel import Pixel, DEFAULT_BRIGHTNESS
from .strip import Strip, NUM_PIXELS
from .config import AppConfig, BlinktConfig, LoggingConfig, DEFAULT_DATA_PIN, DEFAULT_CLOCK_PIN

__all__ = [
    "DriverState",
    "TransmitterState",
    "LogLevel",
    "LogCategory",
    "GPIOInitialState",
    "BlinktError",
    "InvalidColorValue",
    "InvalidBrightnessLevel",
    "InvalidPixelIndex",
    "InvalidGpioPin",
    "Pixel",
    "DEFAULT_BRIGHTNESS",
    "Strip",
    "NUM_PIXELS",
    "AppConfig",
    "BlinktConfig",
    "LoggingConfig",
    "DEFAULT_DATA_PIN",
    "DEFAULT_CLOCK_PIN",
]
