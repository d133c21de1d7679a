from __future__ import annotations

from blinkt.hardware.gpio.gpio_manager_interface import IGPIOManager
from blinkt.lifecycle.shutdown_protocol import IShutdownHandler
from blinkt.models.enums import LogCategory
from blinkt.utils.logger import get_logger

log = get_logger().for_category(LogCategory.SHUTDOWN)


class GPIOShutdownHandler(IShutdownHandler):
    """
    Shutdown handler for GPIO hardware.

    Cleans up GPIO pins and resets hardware state.
    This should be one of the last shutdown steps.

    Priority: 10 (shutdown last)
    """

    def __init__(self, gpio_manager: IGPIOManager):
        self.gpio_manager = gpio_manager

    @property
    def shutdown_priority(self) -> int:
        """GPIO cleanup has low priority (happens last)."""
        return 10

    async def shutdown(self) -> None:
        log.info("Cleaning up GPIO...")
        self.gpio_manager.cleanup()
        log.debug("GPIO cleaned up")
