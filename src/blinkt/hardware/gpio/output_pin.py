from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from blinkt.hardware.gpio.gpio_manager_interface import IGPIOManager


class OutputPin:
    """
    Write handle for one registered output pin.

    set_value() is synchronous and idempotent. Any truthy value drives the
    line HIGH, so callers can pass masked bits such as ``byte & 0x80``.
    """

    __slots__ = ("_manager", "_pin", "_component")

    def __init__(self, manager: IGPIOManager, pin: int, component: str):
        self._manager = manager
        self._pin = pin
        self._component = component

    @property
    def number(self) -> int:
        return self._pin

    @property
    def component(self) -> str:
        return self._component

    def set_value(self, value) -> None:
        self._manager.write(self._pin, 1 if value else 0)

    def release(self) -> None:
        self._manager.release(self._pin)

    def __repr__(self) -> str:
        return f"OutputPin({self._pin}, {self._component!r})"
