from typing import Dict, List
from blinkt.hardware.gpio.gpio_manager_interface import IGPIOManager
from blinkt.hardware.gpio.output_pin import OutputPin
from blinkt.models.enums import GPIOInitialState, LogCategory
from blinkt.utils.logger import get_logger

log = get_logger().for_category(LogCategory.GPIO)


class MockGPIOManager(IGPIOManager):
    """
    In-memory GPIO manager for machines without RPi.GPIO.

    Every write is appended to a per-pin history, so the exact pulse
    sequence of a frame can be inspected after the fact.
    """

    def __init__(self):
        self._registry: Dict[int, str] = {}  # pin -> component_name
        self._values: Dict[int, int] = {}
        self._history: Dict[int, List[int]] = {}
        log.info("Mock GPIO manager initialized")

    # -------------------------------
    # Registration
    # -------------------------------

    def register_output(
        self,
        pin: int,
        component: str,
        initial: GPIOInitialState = GPIOInitialState.LOW
    ) -> None:
        self._check_available(pin, component)
        self._registry[pin] = component
        self._values[pin] = int(initial == GPIOInitialState.HIGH)
        self._history.setdefault(pin, [])

    def acquire_output(
        self,
        pin: int,
        component: str,
        initial: GPIOInitialState = GPIOInitialState.LOW
    ) -> OutputPin:
        self.register_output(pin, component, initial)
        return OutputPin(self, pin, component)

    def release(self, pin: int) -> None:
        self._registry.pop(pin, None)

    # -------------------------------
    # IO
    # -------------------------------

    def read(self, pin: int) -> int:
        return self._values.get(pin, 0)

    def write(self, pin: int, value: int) -> None:
        self._values[pin] = int(value)
        self._history.setdefault(pin, []).append(int(value))

    def get_history(self, pin: int) -> List[int]:
        """All values written to pin, oldest first"""
        return list(self._history.get(pin, []))

    def reset_history(self) -> None:
        for writes in self._history.values():
            writes.clear()

    # -------------------------------
    # Lifecycle
    # -------------------------------

    def cleanup(self) -> None:
        pin_count = len(self._registry)
        self._registry.clear()
        self._values.clear()
        log.info(f"Mock GPIO Manager cleanup finished ({pin_count} pins)")

    def get_registry(self) -> Dict[int, str]:
        return self._registry.copy()

    # -------------------------------
    # Internals
    # -------------------------------

    def _check_available(self, pin: int, component: str) -> None:
        if pin in self._registry:
            raise ValueError(
                f"GPIO {pin} already registered by {self._registry[pin]}"
            )
