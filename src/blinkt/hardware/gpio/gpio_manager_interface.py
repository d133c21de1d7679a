from typing import Protocol, Dict, TYPE_CHECKING
from blinkt.models.enums import GPIOInitialState

if TYPE_CHECKING:
    from blinkt.hardware.gpio.output_pin import OutputPin


class IGPIOManager(Protocol):

    # -------------------------------
    # Registration
    # -------------------------------

    def register_output(
        self,
        pin: int,
        component: str,
        initial: GPIOInitialState = GPIOInitialState.LOW
    ) -> None:
        ...

    def acquire_output(
        self,
        pin: int,
        component: str,
        initial: GPIOInitialState = GPIOInitialState.LOW
    ) -> 'OutputPin':
        """Register pin as output and return a write handle for it"""
        ...

    def release(self, pin: int) -> None:
        """Return a single pin to the pool"""
        ...

    # -------------------------------
    # IO
    # -------------------------------

    def write(self, pin: int, value: int) -> None:
        """Write value to GPIO pin (0 or 1)"""
        ...

    # -------------------------------
    # Lifecycle / Debug
    # -------------------------------

    def cleanup(self) -> None:
        ...

    def get_registry(self) -> Dict[int, str]:
        ...
