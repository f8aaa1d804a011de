"""
Trailing-edge debouncing on an asyncio event loop.
"""

import asyncio
import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class Debouncer:
    """
    Collapses rapid triggers into one deferred call.

    Every trigger cancels the pending call, if any, and schedules a new one
    ``delay`` seconds later, so only the arguments of the last trigger are used.
    Once closed, the debouncer never runs its callback again.

    The event loop is fixed at construction: the one passed in, else the running
    loop. Constructing a debouncer outside a running loop without passing one
    raises RuntimeError.
    """

    def __init__(
        self,
        delay: float,
        callback: Callable[..., Any],
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self.delay = delay
        self.callback = callback
        self._loop = loop or asyncio.get_running_loop()
        self._handle: Optional[asyncio.TimerHandle] = None
        self._args: tuple[Any, ...] = ()
        self._closed = False

    @property
    def pending(self) -> bool:
        """Whether a call is currently scheduled."""
        return self._handle is not None

    @property
    def closed(self) -> bool:
        """Whether close() has been called."""
        return self._closed

    def trigger(self, *args: Any) -> None:
        """(Re)schedule the callback with the given arguments."""
        if self._closed:
            logger.debug("Ignoring trigger on closed debouncer")
            return
        handle = self._loop.call_later(self.delay, self._fire)
        self.cancel()
        self._args = args
        self._handle = handle
        logger.debug("Scheduled debounced call in %.3fs", self.delay)

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            logger.debug("Cancelled pending debounced call")

    def flush(self) -> None:
        """Run the pending call now instead of waiting for the delay."""
        if self._handle is None:
            return
        self._handle.cancel()
        self._fire()

    def close(self) -> None:
        """Cancel the pending call and refuse further triggers."""
        self.cancel()
        self._closed = True

    def _fire(self) -> None:
        self._handle = None
        args, self._args = self._args, ()
        self.callback(*args)
