"""
Utility functions for the Blinkt! driver
"""

from .logger import (
    Logger,
    BoundLogger,
    get_logger,
    get_category_logger,
    configure_logger,
)

__all__ = [
    'Logger',
    'BoundLogger',
    'get_logger',
    'get_category_logger',
    'configure_logger',
]
