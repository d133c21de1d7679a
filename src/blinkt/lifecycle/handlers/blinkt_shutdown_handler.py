from __future__ import annotations

from blinkt.hardware.led.blinkt import Blinkt
from blinkt.lifecycle.shutdown_protocol import IShutdownHandler
from blinkt.models.enums import LogCategory
from blinkt.utils.logger import get_logger

log = get_logger().for_category(LogCategory.SHUTDOWN)


class BlinktShutdownHandler(IShutdownHandler):
    """
    Shutdown handler for the Blinkt driver.

    Closes the driver, which sends the final dark frame when clear-on-exit
    is set and releases the data/clock lines.

    Priority: 100 (runs before GPIO cleanup)
    """

    def __init__(self, blinkt: Blinkt):
        self.blinkt = blinkt

    @property
    def shutdown_priority(self) -> int:
        return 100

    async def shutdown(self) -> None:
        log.info("Closing Blinkt driver...", clear_on_exit=self.blinkt.clear_on_exit)
        self.blinkt.close()
