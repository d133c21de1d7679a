"""
GPIO Manager - RPi.GPIO backed implementation

Centralized GPIO pin allocation and lifecycle management.
Provides conflict detection and resource tracking for the Blinkt lines.

- Sits between the Blinkt driver and the RPi.GPIO hardware driver
- Manages pin registry and prevents conflicts
- Centralizes GPIO.setup() and cleanup() operations
"""

from typing import Dict
from blinkt.hardware.gpio.gpio_manager_interface import IGPIOManager
from blinkt.hardware.gpio.output_pin import OutputPin
from blinkt.models.enums import GPIOInitialState, LogCategory
from blinkt.utils.logger import get_logger

log = get_logger().for_category(LogCategory.GPIO)


class HardwareGPIOManager(IGPIOManager):
    """
    GPIO manager driving real pins through RPi.GPIO (BCM numbering).

    Responsibilities:
    - Initialize RPi.GPIO library (BCM mode, disable warnings)
    - Track registered pins (prevent conflicts)
    - Hand out OutputPin handles for registered pins
    - Release single pins, or clean up all of them on shutdown
    """

    def __init__(self):
        """Initialize GPIO library and empty pin registry"""
        try:
            import RPi.GPIO as GPIO
        except ImportError as e:
            raise RuntimeError("RPi.GPIO not available") from e

        self._gpio = GPIO
        self._registry: Dict[int, str] = {}  # pin -> component_name

        self._gpio.setmode(self._gpio.BCM)
        self._gpio.setwarnings(False)

        log.info("GPIO manager initialized (BCM mode)")

    # -------------------------------
    # Registration
    # -------------------------------

    def register_output(
        self,
        pin: int,
        component: str,
        initial: GPIOInitialState = GPIOInitialState.LOW
    ) -> None:
        """
        Register and setup output pin

        Args:
            pin: BCM GPIO pin number
            component: Component name for tracking (e.g., "Blinkt DAT")
            initial: Initial state (default: LOW)

        Raises:
            ValueError: If pin already registered by another component
        """
        self._check_available(pin, component)

        gpio_initial = {
            GPIOInitialState.LOW: self._gpio.LOW,
            GPIOInitialState.HIGH: self._gpio.HIGH
        }[initial]

        self._gpio.setup(pin, self._gpio.OUT, initial=gpio_initial)
        self._registry[pin] = component

        log.info(
            "GPIO pin registered (OUTPUT)",
            pin=pin,
            component=component,
            initial=initial.name
        )

    def acquire_output(
        self,
        pin: int,
        component: str,
        initial: GPIOInitialState = GPIOInitialState.LOW
    ) -> OutputPin:
        self.register_output(pin, component, initial)
        return OutputPin(self, pin, component)

    def release(self, pin: int) -> None:
        """Reset a single pin to input and drop it from the registry"""
        component = self._registry.pop(pin, None)
        if component is None:
            return
        self._gpio.cleanup(pin)
        log.info("GPIO pin released", pin=pin, component=component)

    # -------------------------------
    # IO
    # -------------------------------

    def write(self, pin: int, value: int) -> None:
        self._gpio.output(pin, value)

    # -------------------------------
    # Lifecycle
    # -------------------------------

    def cleanup(self) -> None:
        """
        Cleanup all registered GPIO pins

        Called on application shutdown to release GPIO resources.
        """
        pin_count = len(self._registry)
        log.info(f"Cleaning up {pin_count} GPIO pins")

        self._gpio.cleanup()
        self._registry.clear()

        log.info("GPIO cleanup complete")

    def get_registry(self) -> Dict[int, str]:
        """
        Get current pin allocations (for debugging)

        Returns:
            Dict mapping pin number to component name
        """
        return self._registry.copy()

    def _check_available(self, pin: int, component: str) -> None:
        """
        Raises:
            ValueError: If pin already registered
        """
        if pin in self._registry:
            existing_owner = self._registry[pin]
            error_msg = (
                f"GPIO pin conflict detected: Pin {pin} requested by '{component}' "
                f"is already registered to '{existing_owner}'"
            )
            log.error(error_msg)
            raise ValueError(error_msg)
