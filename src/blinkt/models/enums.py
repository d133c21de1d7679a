"""
Enums for the Blinkt! driver
"""

from enum import Enum, auto


class DriverState(Enum):
    """
    Blinkt driver lifecycle

    UNREADY: Constructed, no GPIO lines acquired yet (show() sets up lazily)
    READY: Data and clock lines acquired
    CLOSED: Torn down, lines released
    """
    UNREADY = auto()
    READY = auto()
    CLOSED = auto()


class TransmitterState(Enum):
    """APA102 frame transmission stages"""
    IDLE = auto()
    START_FRAME = auto()
    PIXEL = auto()
    END_FRAME = auto()


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class GPIOInitialState(Enum):
    """GPIO output pin initial state"""
    LOW = auto()         # Start LOW (0V)
    HIGH = auto()        # Start HIGH (3.3V)


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    HARDWARE = auto()    # Driver setup, pin assignment
    GPIO = auto()        # Pin registration, release, cleanup
    PROTOCOL = auto()    # APA102 frame transmission
    LIFECYCLE = auto()   # Driver teardown
    SHUTDOWN = auto()    # Shutdown coordinator and handlers
    SYSTEM = auto()      # Startup, CLI, errors
