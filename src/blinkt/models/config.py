"""
Configuration Models

Typed containers filled by ConfigManager from YAML. Values are range
checked on construction with the same errors the driver raises.
"""

from __future__ import annotations
from dataclasses import dataclass

from .enums import LogLevel
from .pixel import DEFAULT_BRIGHTNESS
from .validation import validate_brightness, validate_pin_pair

DEFAULT_DATA_PIN = 23
DEFAULT_CLOCK_PIN = 24


@dataclass(frozen=True)
class BlinktConfig:
    """Pin assignment and startup state of the strip"""
    data_pin: int = DEFAULT_DATA_PIN
    clock_pin: int = DEFAULT_CLOCK_PIN
    brightness: float = DEFAULT_BRIGHTNESS
    clear_on_exit: bool = False

    def __post_init__(self):
        validate_pin_pair(self.data_pin, self.clock_pin, DEFAULT_DATA_PIN, DEFAULT_CLOCK_PIN)
        validate_brightness(self.brightness)


@dataclass(frozen=True)
class LoggingConfig:
    level: LogLevel = LogLevel.INFO
    colors: bool = True


@dataclass(frozen=True)
class AppConfig:
    blinkt: BlinktConfig
    logging: LoggingConfig
