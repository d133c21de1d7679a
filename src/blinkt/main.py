"""
main.py: command line entry point for the Blinkt driver
-------------------------------------------------------

Responsible for:
- loading configuration and configuring the logger
- picking the GPIO manager (RPi.GPIO or mock)
- applying one buffer command and showing it
- optionally holding until Ctrl+C, then shutting down gracefully

Examples:
    blinkt set 0 255 0 0 --brightness 0.5
    blinkt fill 0 0 64
    blinkt --config blinkt.yaml clear
    blinkt fill 255 80 0 --hold
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from blinkt.hardware.gpio import IGPIOManager, create_gpio_manager
from blinkt.hardware.led import Blinkt
from blinkt.lifecycle import ShutdownCoordinator
from blinkt.lifecycle.handlers import BlinktShutdownHandler, GPIOShutdownHandler
from blinkt.managers import ConfigManager
from blinkt.models.enums import LogCategory, LogLevel
from blinkt.models.errors import BlinktError
from blinkt.utils.logger import configure_logger, get_logger

log = get_logger().for_category(LogCategory.SYSTEM)

EXIT_OK = 0
EXIT_HARDWARE_ERROR = 1
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blinkt",
        description="Drive an 8-pixel APA102 (Blinkt!) strip over two GPIO lines",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        '--config',
        default=None,
        help='Path to YAML config (default: packaged factory defaults)'
    )
    parser.add_argument(
        '--mock',
        action='store_true',
        help='Use the in-memory GPIO manager even if RPi.GPIO is available'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Log at DEBUG level (one line per transmitted frame)'
    )

    # Shared by every command
    hold = argparse.ArgumentParser(add_help=False)
    hold.add_argument(
        '--hold',
        action='store_true',
        help='Keep running until SIGINT/SIGTERM, then shut down (clear-on-exit applies)'
    )

    commands = parser.add_subparsers(dest='command', required=True)

    set_cmd = commands.add_parser('set', parents=[hold], help='Set one pixel and show')
    set_cmd.add_argument('index', type=int, help='Pixel index 0-7')
    _add_color_args(set_cmd)

    fill_cmd = commands.add_parser('fill', parents=[hold], help='Set every pixel and show')
    _add_color_args(fill_cmd)

    brightness_cmd = commands.add_parser('brightness', parents=[hold], help='Set brightness of every pixel and show')
    brightness_cmd.add_argument('value', type=float, help='Brightness 0.0-1.0')

    commands.add_parser('clear', parents=[hold], help='Turn every pixel off and show')

    return parser


def _add_color_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('red', type=int, help='Red 0-255')
    parser.add_argument('green', type=int, help='Green 0-255')
    parser.add_argument('blue', type=int, help='Blue 0-255')
    parser.add_argument('--brightness', type=float, default=None, help='Brightness 0.0-1.0 (default: keep)')


def apply_command(blinkt: Blinkt, args: argparse.Namespace) -> None:
    """Update the buffer for one parsed command and show it"""
    if args.command == 'set':
        blinkt.set_pixel(args.index, args.red, args.green, args.blue, args.brightness)
    elif args.command == 'fill':
        blinkt.set_pixels(args.red, args.green, args.blue, args.brightness)
    elif args.command == 'brightness':
        blinkt.set_brightness(args.value)
    elif args.command == 'clear':
        blinkt.clear()
    blinkt.show()


async def hold_until_shutdown(blinkt: Blinkt, gpio: IGPIOManager) -> None:
    coordinator = ShutdownCoordinator()
    coordinator.register(BlinktShutdownHandler(blinkt))
    coordinator.register(GPIOShutdownHandler(gpio))

    coordinator.setup_signal_handlers(asyncio.get_running_loop())
    log.info("Holding, press Ctrl+C to exit")

    await coordinator.wait_for_shutdown()
    await coordinator.shutdown_all()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = ConfigManager(args.config).load()
    except ValueError as e:
        log.error("Invalid configuration", error=str(e), error_type=type(e).__name__)
        return EXIT_INVALID_INPUT

    configure_logger(
        LogLevel.DEBUG if args.debug else config.logging.level,
        config.logging.colors
    )

    gpio = None
    blinkt = None
    try:
        gpio = create_gpio_manager(force_mock=args.mock)
        blinkt = Blinkt.from_config(gpio, config.blinkt)
        blinkt.setup()
        apply_command(blinkt, args)

        if args.hold:
            asyncio.run(hold_until_shutdown(blinkt, gpio))
        return EXIT_OK

    except BlinktError as e:
        log.error("Invalid input", error=str(e), error_type=type(e).__name__)
        return EXIT_INVALID_INPUT
    except (RuntimeError, ValueError, OSError) as e:
        log.error("GPIO failure", error=str(e), error_type=type(e).__name__)
        return EXIT_HARDWARE_ERROR
    finally:
        teardown(blinkt, gpio)


def teardown(blinkt: Optional[Blinkt], gpio: Optional[IGPIOManager]) -> None:
    """Close the driver (idempotent) and release every GPIO pin"""
    try:
        if blinkt is not None:
            blinkt.close()
    except (RuntimeError, ValueError, OSError) as e:
        log.error("Failed to close Blinkt", error=str(e), error_type=type(e).__name__)
    finally:
        if gpio is not None:
            gpio.cleanup()


if __name__ == "__main__":
    sys.exit(main())
