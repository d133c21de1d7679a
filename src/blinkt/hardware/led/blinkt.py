"""
Blinkt driver
=============
Lifecycle facade for an 8-pixel APA102 strip on two GPIO lines.

    with Blinkt(create_gpio_manager()) as blinkt:
        blinkt.set_clear_on_exit()
        blinkt.set_pixel(0, 255, 0, 0, brightness=0.5)
        blinkt.show()

Setup is lazy: the first show() on an unready driver calls setup() with the
default pins (DAT 23, CLK 24 unless overridden in the constructor) and logs
that it did so. close() (or leaving the with-block) is the teardown; with
clear-on-exit set it sends one final all-dark frame before releasing the
lines.
"""

from __future__ import annotations

from typing import Iterable, Optional

from blinkt.hardware.gpio.gpio_manager_interface import IGPIOManager
from blinkt.hardware.gpio.output_pin import OutputPin
from blinkt.hardware.led.apa102_transmitter import APA102Transmitter
from blinkt.models.config import BlinktConfig, DEFAULT_CLOCK_PIN, DEFAULT_DATA_PIN
from blinkt.models.enums import DriverState, LogCategory
from blinkt.models.pixel import Pixel
from blinkt.models.strip import Strip
from blinkt.models.validation import validate_pin_pair
from blinkt.utils.logger import get_logger

log = get_logger().for_category(LogCategory.HARDWARE)


class Blinkt:
    """
    Owns the pixel buffer and, once set up, the data and clock lines.

    Not thread safe: one writer per driver.
    """

    def __init__(
        self,
        gpio: IGPIOManager,
        clear_on_exit: bool = False,
        data_pin: int = DEFAULT_DATA_PIN,
        clock_pin: int = DEFAULT_CLOCK_PIN
    ):
        """
        Args:
            gpio: GPIO manager that hands out the output lines
            clear_on_exit: Darken the LEDs on close()
            data_pin: DAT pin used by setup() when called without arguments
            clock_pin: CLK pin used by setup() when called without arguments
        """
        self._gpio = gpio
        self._strip = Strip()
        self._clear_on_exit = clear_on_exit
        self._default_pins = (data_pin, clock_pin)

        self._data_pin: Optional[OutputPin] = None
        self._clock_pin: Optional[OutputPin] = None
        self._transmitter: Optional[APA102Transmitter] = None
        self._state = DriverState.UNREADY

    @classmethod
    def from_config(cls, gpio: IGPIOManager, config: BlinktConfig) -> 'Blinkt':
        blinkt = cls(gpio, config.clear_on_exit, config.data_pin, config.clock_pin)
        blinkt.set_brightness(config.brightness)
        return blinkt

    # -------------------------------
    # State
    # -------------------------------

    @property
    def state(self) -> DriverState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is DriverState.READY

    @property
    def data_pin(self) -> Optional[int]:
        return self._data_pin.number if self._data_pin else None

    @property
    def clock_pin(self) -> Optional[int]:
        return self._clock_pin.number if self._clock_pin else None

    @property
    def clear_on_exit(self) -> bool:
        return self._clear_on_exit

    @property
    def transmitter(self) -> Optional[APA102Transmitter]:
        return self._transmitter

    # -------------------------------
    # Lifecycle
    # -------------------------------

    def setup(self, data_pin: Optional[int] = None, clock_pin: Optional[int] = None) -> None:
        """
        Acquire the data and clock lines.

        Calling it again re-acquires the lines, releasing the previous pair
        first. If the new pair cannot be acquired, the previous pair is
        acquired again and the driver stays ready on it.

        Raises:
            InvalidGpioPin: If a pin is outside 1..27 or both pins are equal
            RuntimeError: If the driver is closed
            ValueError: If the GPIO manager refuses a pin (already in use)
        """
        self._ensure_open()

        default_dat, default_clk = self._default_pins
        dat = default_dat if data_pin is None else data_pin
        clk = default_clk if clock_pin is None else clock_pin
        validate_pin_pair(dat, clk, DEFAULT_DATA_PIN, DEFAULT_CLOCK_PIN)

        previous = None
        if self._state is DriverState.READY:
            previous = (self.data_pin, self.clock_pin)
            log.info("Re-running setup, releasing previous pins",
                     data_pin=previous[0], clock_pin=previous[1])
            self._release_pins()

        self._state = DriverState.UNREADY
        try:
            self._acquire_pins(dat, clk)
        except Exception as e:
            if previous is not None:
                log.warn("Setup failed, restoring previous pins",
                         data_pin=previous[0], clock_pin=previous[1], error=str(e))
                self._acquire_pins(*previous)
            raise

        log.info("Blinkt ready", data_pin=dat, clock_pin=clk)

    def show(self) -> None:
        """
        Send the whole buffer to the LEDs.

        Runs setup() with the default pins first if the driver is not ready.
        """
        self._ensure_open()
        if self._state is DriverState.UNREADY:
            log.info("show() before setup(), running setup with default pins",
                     data_pin=self._default_pins[0], clock_pin=self._default_pins[1])
            self.setup()

        self._transmitter.transmit(self._strip)

    def set_clear_on_exit(self, value: bool = True) -> None:
        self._clear_on_exit = value

    def close(self) -> None:
        """
        Tear down the driver. Safe to call more than once.

        With clear-on-exit set, clears the buffer and sends it once more
        before the lines are released.
        """
        if self._state is DriverState.CLOSED:
            return

        try:
            if self._clear_on_exit:
                log.with_category(LogCategory.LIFECYCLE).info("Clearing LEDs on exit")
                self._strip.clear()
                self.show()
        finally:
            self._release_pins()
            self._state = DriverState.CLOSED
            log.with_category(LogCategory.LIFECYCLE).info("Blinkt closed")

    def __enter__(self) -> 'Blinkt':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # -------------------------------
    # Buffer
    # -------------------------------

    def set_brightness(self, brightness: float) -> None:
        """Set the brightness of all pixels (0.0 to 1.0)"""
        self._strip.set_brightness(brightness)

    def set_pixel(self, index: int, red: int, green: int, blue: int, brightness: Optional[float] = None) -> None:
        self._strip.set_pixel(index, red, green, blue, brightness)

    def set_pixels(self, red: int, green: int, blue: int, brightness: Optional[float] = None) -> None:
        self._strip.set_pixels(red, green, blue, brightness)

    def get_pixel(self, index: int) -> Pixel:
        return self._strip.get_pixel(index)

    def get_pixels(self) -> Iterable[Pixel]:
        """Pixels in index order; iterate as many times as needed"""
        return self._strip

    def clear(self) -> None:
        """Clear the pixel buffer. Call show() to update the LEDs."""
        self._strip.clear()

    # -------------------------------
    # Internals
    # -------------------------------

    def _ensure_open(self) -> None:
        if self._state is DriverState.CLOSED:
            raise RuntimeError("Blinkt driver is closed")

    def _acquire_pins(self, data_pin: int, clock_pin: int) -> None:
        """Acquire both lines and become READY, or hold neither on failure"""
        self._data_pin = self._gpio.acquire_output(data_pin, "Blinkt DAT")
        try:
            self._clock_pin = self._gpio.acquire_output(clock_pin, "Blinkt CLK")
        except Exception:
            self._release_pins()
            raise

        self._transmitter = APA102Transmitter(self._data_pin, self._clock_pin)
        self._state = DriverState.READY

    def _release_pins(self) -> None:
        for pin in (self._data_pin, self._clock_pin):
            if pin is not None:
                pin.release()
        self._data_pin = None
        self._clock_pin = None
        self._transmitter = None
