import io

import pytest

from blinkt.hardware.gpio import MockGPIOManager
from blinkt.hardware.led import Blinkt
from blinkt.models.enums import LogLevel
from blinkt.utils.logger import configure_logger


@pytest.fixture(autouse=True)
def log_output():
    """Send log output to a buffer and restore defaults afterwards"""
    buffer = io.StringIO()
    configure_logger(LogLevel.DEBUG, use_colors=False, stream=buffer)
    yield buffer
    configure_logger()


@pytest.fixture
def gpio():
    return MockGPIOManager()


@pytest.fixture
def blinkt(gpio):
    driver = Blinkt(gpio)
    yield driver
    driver.close()
