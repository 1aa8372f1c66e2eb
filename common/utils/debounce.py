"""
Keyed debounce timers on the running asyncio loop.

Each key owns at most one pending timer. Scheduling again under the same
key cancels the waiting timer and starts a new one (last write wins).
Once a timer fires, its action runs as a separate task that later
schedule() or cancel() calls do not touch, so in-flight requests always
complete.

Example:
    debouncer = Debouncer(delay=0.8)

    def on_keystroke(value: str):
        debouncer.schedule("zip-lookup", lambda: lookup(value))
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Hashable, Optional, Set

logger = logging.getLogger(__name__)

Action = Callable[[], Awaitable[Any]]


class Debouncer:
    """Cancel-and-replace timers keyed by trigger identity."""

    def __init__(self, delay: float):
        """
        Args:
            delay: Default quiet interval in seconds before an action runs
        """
        self._delay = delay
        self._timers: Dict[Hashable, asyncio.Task] = {}
        self._running: Set[asyncio.Task] = set()

    @property
    def delay(self) -> float:
        return self._delay

    def schedule(self, key: Hashable, action: Action, delay: Optional[float] = None) -> None:
        """
        Run action after the quiet interval, replacing any timer under key.

        Must be called from inside the event loop.
        """
        self.cancel(key)
        loop = asyncio.get_running_loop()
        wait = self._delay if delay is None else delay
        self._timers[key] = loop.create_task(self._fire_after(key, action, wait))

    def cancel(self, key: Hashable) -> bool:
        """Cancel the waiting timer under key. Returns True if one was pending."""
        timer = self._timers.pop(key, None)
        if timer is None or timer.done():
            return False
        timer.cancel()
        return True

    def is_pending(self, key: Hashable) -> bool:
        timer = self._timers.get(key)
        return timer is not None and not timer.done()

    @property
    def in_flight(self) -> int:
        """Number of fired actions that have not finished yet."""
        return len(self._running)

    async def drain(self) -> None:
        """Wait until every pending timer has fired and every action finished."""
        while True:
            waiting = [t for t in self._timers.values() if not t.done()] + list(self._running)
            if not waiting:
                return
            await asyncio.gather(*waiting, return_exceptions=True)

    async def close(self) -> None:
        """Cancel pending timers and wait for in-flight actions."""
        for key in list(self._timers):
            self.cancel(key)
        if self._running:
            await asyncio.gather(*list(self._running), return_exceptions=True)

    async def _fire_after(self, key: Hashable, action: Action, wait: float) -> None:
        await asyncio.sleep(wait)

        if self._timers.get(key) is asyncio.current_task():
            del self._timers[key]

        task = asyncio.get_running_loop().create_task(self._run(key, action))
        self._running.add(task)
        task.add_done_callback(self._running.discard)

    @staticmethod
    async def _run(key: Hashable, action: Action) -> None:
        try:
            await action()
        except Exception:
            logger.exception(f"Debounced action for {key!r} failed")
