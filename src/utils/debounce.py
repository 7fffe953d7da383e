"""
Debounce utility.

Collapses bursts of calls (e.g. keystrokes in the search box) into one
call after a quiet period.
"""

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Debouncer:
    """
    Cancel-then-schedule wrapper around an asyncio timer.

    At most one call is pending at any time: each schedule() cancels the
    previous pending call before arming a new one. Runs on the event loop
    thread, so the callback never overlaps with other loop work.
    """

    def __init__(
        self,
        func: Callable[[], None],
        delay: float,
        loop: Optional[asyncio.AbstractEventLoop] = None
    ):
        """
        Args:
            func: Callback to run once the delay passes without new calls
            delay: Quiet period in seconds
            loop: Event loop to schedule on (defaults to the running loop)
        """
        self.func = func
        self.delay = delay
        self._loop = loop
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self) -> None:
        """Cancel any pending call and arm a new one."""
        loop = self._loop or asyncio.get_running_loop()
        self.cancel()
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def flush(self) -> None:
        """Run the pending call now instead of waiting for the timer."""
        if self._handle is not None:
            self.cancel()
            self.func()

    def _fire(self) -> None:
        self._handle = None
        logger.debug("Debounce period elapsed, running callback")
        self.func()
