"""
Timer Scheduling

The runtime is single-threaded and event-driven; its only suspension
points are delayed callbacks. Components take a ``Scheduler`` so the host
decides where timers live: an asyncio event loop in applications, or the
virtual clock of ``ManualScheduler`` in tests and headless tools.
"""

import asyncio
import heapq
import itertools
from typing import Callable, Optional, Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything with ``call_later(delay_seconds, callback) -> TimerHandle``"""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class AsyncioScheduler:
    """
    Scheduler backed by an asyncio event loop.

    Args:
        loop: Event loop to schedule on; defaults to the running loop at
              the time each timer is created
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


class ManualTimer:
    """Handle returned by ``ManualScheduler``"""

    def __init__(self, when: float, callback: Callable[[], None]):
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """
    Deterministic virtual-clock scheduler.

    Nothing fires until ``advance`` is called. Timers due at the same
    instant fire in the order they were scheduled.

    Example:
        scheduler = ManualScheduler()
        announcer = StatusAnnouncer(scheduler)
        announcer.announce("Saved")
        scheduler.advance(1.0)
        assert announcer.message == ""
    """

    def __init__(self):
        self.now = 0.0
        self._queue: list[tuple[float, int, ManualTimer]] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(self.now + max(0.0, delay), callback)
        heapq.heappush(self._queue, (timer.when, next(self._counter), timer))
        return timer

    @property
    def pending(self) -> int:
        """Number of scheduled timers that have not fired or been cancelled"""
        return sum(1 for _, _, timer in self._queue if not timer.cancelled)

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward, firing every timer that becomes due.

        Returns:
            Number of callbacks fired
        """
        target = self.now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            when, _, timer = heapq.heappop(self._queue)
            self.now = when
            if timer.cancelled:
                continue
            timer.callback()
            fired += 1
        self.now = target
        return fired
