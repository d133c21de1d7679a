"""
Tests for ShutdownCoordinator sequencing and the Blinkt/GPIO handlers.
"""

import asyncio

import pytest

from blinkt.hardware.led import Blinkt
from blinkt.lifecycle import ShutdownCoordinator
from blinkt.lifecycle.handlers import BlinktShutdownHandler, GPIOShutdownHandler
from blinkt.models.enums import DriverState


class RecordingHandler:
    def __init__(self, name, priority, calls, error=None, delay=0.0):
        self.name = name
        self._priority = priority
        self._calls = calls
        self._error = error
        self._delay = delay

    @property
    def shutdown_priority(self) -> int:
        return self._priority

    async def shutdown(self) -> None:
        if self._delay:
            await asyncio.sleep(self._delay)
        self._calls.append(self.name)
        if self._error:
            raise self._error


@pytest.mark.asyncio
async def test_handlers_run_highest_priority_first():
    calls = []
    coordinator = ShutdownCoordinator()
    coordinator.register(RecordingHandler("gpio", 10, calls))
    coordinator.register(RecordingHandler("blinkt", 100, calls))
    coordinator.register(RecordingHandler("middle", 50, calls))

    await coordinator.shutdown_all()

    assert calls == ["blinkt", "middle", "gpio"]


@pytest.mark.asyncio
async def test_failing_handler_does_not_stop_the_sequence(log_output):
    calls = []
    coordinator = ShutdownCoordinator()
    coordinator.register(RecordingHandler("first", 100, calls, error=OSError("bus error")))
    coordinator.register(RecordingHandler("second", 10, calls))

    await coordinator.shutdown_all()

    assert calls == ["first", "second"]
    assert "bus error" in log_output.getvalue()


@pytest.mark.asyncio
async def test_hanging_handler_times_out(log_output):
    calls = []
    coordinator = ShutdownCoordinator(timeout_per_handler=0.05)
    coordinator.register(RecordingHandler("slow", 100, calls, delay=1.0))
    coordinator.register(RecordingHandler("fast", 10, calls))

    await coordinator.shutdown_all()

    assert calls == ["fast"]
    assert "shutdown timeout" in log_output.getvalue()


@pytest.mark.asyncio
async def test_request_shutdown_releases_waiter():
    coordinator = ShutdownCoordinator()
    coordinator.request_shutdown("test")

    await asyncio.wait_for(coordinator.wait_for_shutdown(), timeout=1.0)

    assert coordinator.shutdown_reason == "test"


@pytest.mark.asyncio
async def test_wait_without_setup_raises():
    with pytest.raises(RuntimeError, match="setup_signal_handlers"):
        await ShutdownCoordinator().wait_for_shutdown()


def test_register_rejects_objects_without_protocol():
    coordinator = ShutdownCoordinator()

    with pytest.raises(ValueError, match="shutdown_priority"):
        coordinator.register(object())


def test_get_handler_by_type(gpio):
    coordinator = ShutdownCoordinator()
    handler = GPIOShutdownHandler(gpio)
    coordinator.register(handler)

    assert coordinator.get_handler(GPIOShutdownHandler) is handler
    assert coordinator.get_handler(BlinktShutdownHandler) is None


@pytest.mark.asyncio
async def test_blinkt_then_gpio_handlers_darken_and_release(gpio):
    blinkt = Blinkt(gpio, clear_on_exit=True)
    blinkt.set_pixels(255, 0, 0)
    blinkt.show()
    gpio.register_output(4, "unrelated")
    gpio.reset_history()

    coordinator = ShutdownCoordinator()
    coordinator.register(GPIOShutdownHandler(gpio))
    coordinator.register(BlinktShutdownHandler(blinkt))

    await coordinator.shutdown_all()

    assert blinkt.state is DriverState.CLOSED
    assert len(gpio.get_history(24)) == 648
    assert gpio.get_registry() == {}
