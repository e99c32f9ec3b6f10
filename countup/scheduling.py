"""Repeating interval timers for driving animations.

Anything with ``set_interval(seconds, callback)`` returning a handle with
``stop()`` works as a scheduler; a Textual App or Widget already has that
shape. Two standalone schedulers are provided here:

    AsyncioScheduler  -- ticks on an asyncio event loop
    ManualScheduler   -- ticks only when the host advances its clock
"""

import asyncio
import heapq
import itertools
from typing import Callable, Optional, Protocol

TickCallback = Callable[[], None]


class TimerHandle(Protocol):
    def stop(self) -> None: ...


class Scheduler(Protocol):
    def set_interval(self, interval: float, callback: TickCallback) -> TimerHandle: ...


class AsyncioTimer:
    """Repeating timer re-armed with ``loop.call_at`` after each tick."""

    def __init__(self, loop: asyncio.AbstractEventLoop, interval: float, callback: TickCallback):
        self._loop = loop
        self._interval = interval
        self._callback = callback
        self._origin = loop.time()
        self._count = 0
        self._handle: Optional[asyncio.TimerHandle] = None
        self._active = True
        self._arm()

    @property
    def active(self) -> bool:
        return self._active

    def _arm(self) -> None:
        self._count += 1
        # Deadlines come from the arm time so slow ticks don't accumulate drift
        deadline = self._origin + self._count * self._interval
        self._handle = self._loop.call_at(deadline, self._fire)

    def _fire(self) -> None:
        if not self._active:
            return
        self._callback()
        # The callback may have stopped us
        if self._active:
            self._arm()

    def stop(self) -> None:
        self._active = False
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None


class AsyncioScheduler:
    """Scheduler backed by an asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def set_interval(self, interval: float, callback: TickCallback) -> AsyncioTimer:
        loop = self._loop or asyncio.get_running_loop()
        return AsyncioTimer(loop, interval, callback)


class ManualTimer:
    """Timer owned by a ManualScheduler."""

    def __init__(self, scheduler: "ManualScheduler", interval: float, callback: TickCallback):
        self._scheduler = scheduler
        self.interval = interval
        self.callback = callback
        self.active = True

    def stop(self) -> None:
        if self.active:
            self.active = False
            self._scheduler._discard(self)


class ManualScheduler:
    """Host-driven clock. Nothing fires until ``advance()`` is called.

    Usage:
        scheduler = ManualScheduler()
        animator = StepwiseAnimator(0, sink, scheduler)
        animator.notify_target_changed(100)
        scheduler.advance(0.017)   # one tick
        scheduler.run_until_idle() # the rest
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: list[tuple[float, int, ManualTimer]] = []
        self._timers: set[ManualTimer] = set()
        self._seq = itertools.count()

    @property
    def active_timers(self) -> int:
        return len(self._timers)

    def set_interval(self, interval: float, callback: TickCallback) -> ManualTimer:
        if interval <= 0:
            raise ValueError("interval must be positive")
        timer = ManualTimer(self, interval, callback)
        self._timers.add(timer)
        self._push(timer, self.now + interval)
        return timer

    def _push(self, timer: ManualTimer, deadline: float) -> None:
        heapq.heappush(self._queue, (deadline, next(self._seq), timer))

    def _discard(self, timer: ManualTimer) -> None:
        self._timers.discard(timer)

    def _fire_next(self, until: Optional[float]) -> bool:
        """Fire the earliest due timer. Returns False when nothing is due."""
        while self._queue:
            deadline, _, timer = self._queue[0]
            if not timer.active:
                heapq.heappop(self._queue)
                continue
            if until is not None and deadline > until:
                return False
            heapq.heappop(self._queue)
            self.now = max(self.now, deadline)
            timer.callback()
            if timer.active:
                self._push(timer, deadline + timer.interval)
            return True
        return False

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing every tick that falls due.

        Returns the number of callbacks fired.
        """
        until = self.now + seconds
        fired = 0
        while self._fire_next(until):
            fired += 1
        self.now = until
        return fired

    def run_until_idle(self, max_ticks: int = 10_000) -> int:
        """Fire ticks until no timer is left. Returns the number fired."""
        fired = 0
        while fired < max_ticks and self._fire_next(None):
            fired += 1
        return fired
