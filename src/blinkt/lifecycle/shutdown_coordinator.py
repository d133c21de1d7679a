"""
Shutdown coordinator that orchestrates graceful shutdown of all components.

Manages signal handlers, shutdown sequencing, and error handling across
multiple shutdown handlers in priority order.
"""

import asyncio
import signal
from typing import List, Optional, Dict
from blinkt.models.enums import LogCategory
from blinkt.utils.logger import get_logger

log = get_logger().for_category(LogCategory.SHUTDOWN)


class ShutdownCoordinator:
    """
    Coordinates graceful shutdown of multiple components.

    Maintains a list of shutdown handlers and executes them in priority order
    when shutdown is triggered. Handles signal registration, timeout management,
    and error logging.

    Example:
        coordinator = ShutdownCoordinator()
        coordinator.register(BlinktShutdownHandler(blinkt))
        coordinator.register(GPIOShutdownHandler(gpio_manager))

        coordinator.setup_signal_handlers(loop)
        await coordinator.wait_for_shutdown()
        await coordinator.shutdown_all()
    """

    def __init__(self, timeout_per_handler: float = 5.0, total_timeout: float = 15.0):
        """
        Args:
            timeout_per_handler: Timeout for each individual handler (seconds)
            total_timeout: Total timeout for entire shutdown sequence (seconds)
        """
        self._handlers: List = []
        self._shutdown_event: Optional[asyncio.Event] = None
        self._timeout_per_handler = timeout_per_handler
        self._total_timeout = total_timeout
        self._shutdown_trigger: Dict[str, Optional[str]] = {"reason": None}

    @property
    def shutdown_reason(self) -> Optional[str]:
        return self._shutdown_trigger["reason"]

    def register(self, handler) -> None:
        """
        Register a shutdown handler.

        Handler must have:
        - shutdown_priority property (int)
        - async shutdown() method

        Raises:
            ValueError: If handler does not implement the protocol
        """
        if not hasattr(handler, "shutdown_priority"):
            raise ValueError(f"Handler {handler} missing shutdown_priority property")
        if not hasattr(handler, "shutdown"):
            raise ValueError(f"Handler {handler} missing shutdown() method")

        self._handlers.append(handler)
        log.debug(f"Registered shutdown handler: {handler.__class__.__name__}")

    def setup_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        """
        Install OS signal handlers for graceful shutdown (SIGINT, SIGTERM).
        """
        self._ensure_event()

        def signal_handler(sig: signal.Signals) -> None:
            log.info(f"Signal {sig.name} received → triggering shutdown")
            self.request_shutdown(sig.name)

        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, lambda s=sig: signal_handler(s))

        log.info("Signal handlers installed (SIGINT, SIGTERM)")

    def request_shutdown(self, reason: str) -> None:
        """Trigger shutdown without a signal"""
        self._shutdown_trigger["reason"] = reason
        self._ensure_event().set()

    async def wait_for_shutdown(self) -> None:
        """
        Block until a signal arrives or request_shutdown() is called.

        Raises:
            RuntimeError: If neither setup_signal_handlers() nor
                request_shutdown() was called first
        """
        if self._shutdown_event is None:
            raise RuntimeError("Call setup_signal_handlers() first")
        await self._shutdown_event.wait()
        log.debug("Shutdown triggered")

    async def shutdown_all(self) -> None:
        """
        Execute graceful shutdown of all handlers in priority order.

        Handlers are called in descending priority order (highest first).
        A failing or hanging handler is logged and skipped; the rest still run.
        """
        log.info("🛑 Initiating graceful shutdown sequence...")
        log.info(f"   Reason: {self._shutdown_trigger.get('reason') or 'UNKNOWN'}")

        sorted_handlers = sorted(
            self._handlers, key=lambda h: h.shutdown_priority, reverse=True
        )

        loop = asyncio.get_running_loop()
        start_time = loop.time()

        for handler in sorted_handlers:
            handler_name = handler.__class__.__name__
            priority = handler.shutdown_priority

            elapsed = loop.time() - start_time
            if elapsed > self._total_timeout:
                log.error(
                    f"⚠️  Total shutdown timeout exceeded ({elapsed:.1f}s > {self._total_timeout}s)"
                )
                break

            try:
                log.debug(f"Shutting down {handler_name} (priority={priority})...")

                await asyncio.wait_for(
                    handler.shutdown(), timeout=self._timeout_per_handler
                )

                log.debug(f"✓ {handler_name} shutdown complete")

            except asyncio.TimeoutError:
                log.error(
                    f"⚠️  {handler_name} shutdown timeout "
                    f"({self._timeout_per_handler}s)"
                )

            except Exception as e:
                log.error(f"❌ Error shutting down {handler_name}: {e}",
                          error_type=type(e).__name__)

        log.info("✓ Shutdown sequence complete")

    def get_handler(self, handler_type: type):
        """
        Get a registered handler by type, or None.
        """
        for handler in self._handlers:
            if isinstance(handler, handler_type):
                return handler
        return None

    def _ensure_event(self) -> asyncio.Event:
        if self._shutdown_event is None:
            self._shutdown_event = asyncio.Event()
        return self._shutdown_event
