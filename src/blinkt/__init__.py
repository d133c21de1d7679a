"""
Blinkt - APA102 driver for the 8-pixel Blinkt! strip

Drives the strip over two plain GPIO lines (data + clock) by bit-banging
the APA102 protocol. The main components are:

- Pixel / Strip: validated in-memory pixel buffer
- APA102Transmitter: frames the buffer into clock/data pulses
- Blinkt: lifecycle facade (pin setup, lazy init, clear-on-exit)
- IGPIOManager: GPIO collaborator, with RPi.GPIO and mock implementations

Usage:
    from blinkt import Blinkt, create_gpio_manager

    with Blinkt(create_gpio_manager(), clear_on_exit=True) as blinkt:
        blinkt.set_pixel(0, 255, 0, 0, brightness=0.5)
        blinkt.show()
"""

from .models import (
    BlinktError,
    DriverState,
    InvalidBrightnessLevel,
    InvalidColorValue,
    InvalidGpioPin,
    InvalidPixelIndex,
    NUM_PIXELS,
    Pixel,
    Strip,
)
from .hardware.gpio import IGPIOManager, MockGPIOManager, OutputPin, create_gpio_manager
from .hardware.led import APA102Transmitter, Blinkt, encode_pixel

__all__ = [
    'Blinkt',
    'Pixel',
    'Strip',
    'NUM_PIXELS',
    'DriverState',
    'APA102Transmitter',
    'encode_pixel',
    'IGPIOManager',
    'MockGPIOManager',
    'OutputPin',
    'create_gpio_manager',
    'BlinktError',
    'InvalidColorValue',
    'InvalidBrightnessLevel',
    'InvalidPixelIndex',
    'InvalidGpioPin',
]

__version__ = '1.0.0'
