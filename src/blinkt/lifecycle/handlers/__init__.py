from .blinkt_shutdown_handler import BlinktShutdownHandler
from .gpio_shutdown_handler import GPIOShutdownHandler

__all__ = [
    "BlinktShutdownHandler",
    "GPIOShutdownHandler",
]
