"""Single-threaded cooperative timer scheduler.

Callbacks never overlap: each one runs to completion before the next
due callback starts, so engine state needs no locking. Time comes from
an injectable clock. The default VirtualClock only moves when
``advance`` is called, which makes periodic behaviour testable without
sleeping.
"""

import heapq
import itertools
import logging
import time
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

# Bound here because Scheduler defines its own ``time`` method.
_sleep = time.sleep


class VirtualClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 0.0):
        self._now = start

    def __call__(self) -> float:
        return self._now

    def advance_to(self, moment: float) -> None:
        if moment < self._now:
            raise ValueError("Virtual clock cannot move backwards")
        self._now = moment


class TimerHandle:
    """Cancellable handle for a scheduled callback."""

    def __init__(
        self,
        due: float,
        callback: Callable[..., Any],
        args: tuple,
        period: Optional[float] = None,
        name: str = "",
    ):
        self.due = due
        self.period = period
        self.name = name or getattr(callback, "__name__", "timer")
        self._callback = callback
        self._args = args
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Prevent any future run of this callback."""
        self._cancelled = True

    def _run(self) -> None:
        self._callback(*self._args)

    def __repr__(self) -> str:
        state = "cancelled" if self._cancelled else f"due={self.due:.3f}"
        return f"<TimerHandle {self.name} {state}>"


class Scheduler:
    """Timer wheel driving periodic generators and deferred actions."""

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        """Initialize the scheduler.

        Args:
            clock: Monotonic clock returning seconds. Defaults to a
                VirtualClock; pass ``time.monotonic`` for real time.
        """
        self._clock = clock if clock is not None else VirtualClock()
        self._queue: list[tuple[float, int, TimerHandle]] = []
        self._counter = itertools.count()
        self._handles: list[TimerHandle] = []
        self._closed = False

    @property
    def is_virtual(self) -> bool:
        return isinstance(self._clock, VirtualClock)

    @property
    def closed(self) -> bool:
        return self._closed

    def time(self) -> float:
        """Current scheduler time in seconds."""
        return self._clock()

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle:
        """Run ``callback(*args)`` once, ``delay`` seconds from now."""
        return self._schedule(TimerHandle(self.time() + max(0.0, delay), callback, args))

    def call_every(self, period: float, callback: Callable[..., Any], *args: Any) -> TimerHandle:
        """Run ``callback(*args)`` every ``period`` seconds, first after one period.

        Raises:
            ValueError: If period is not positive.
        """
        if period <= 0:
            raise ValueError("Period must be positive")
        return self._schedule(TimerHandle(self.time() + period, callback, args, period=period))

    def _schedule(self, handle: TimerHandle) -> TimerHandle:
        if self._closed:
            raise RuntimeError("Scheduler is closed")
        heapq.heappush(self._queue, (handle.due, next(self._counter), handle))
        self._handles.append(handle)
        logger.debug("Scheduled %r", handle)
        return handle

    def next_due(self) -> Optional[float]:
        """Due time of the earliest live timer, or None if nothing is pending."""
        while self._queue and self._queue[0][2].cancelled:
            _, _, handle = heapq.heappop(self._queue)
            if handle in self._handles:
                self._handles.remove(handle)
        return self._queue[0][0] if self._queue else None

    @property
    def pending(self) -> int:
        """Number of live timers."""
        return sum(1 for _, _, h in self._queue if not h.cancelled)

    def run_pending(self) -> int:
        """Run every callback due at the current time.

        Returns:
            Number of callbacks executed.
        """
        return self._run_until(self.time())

    def _run_until(self, moment: float) -> int:
        executed = 0
        while True:
            due = self.next_due()
            if due is None or due > moment:
                break
            _, _, handle = heapq.heappop(self._queue)
            if self.is_virtual:
                self._clock.advance_to(max(due, self.time()))
            if handle.period is not None:
                handle.due = due + handle.period
                heapq.heappush(self._queue, (handle.due, next(self._counter), handle))
            else:
                self._handles.remove(handle)
            handle._run()
            executed += 1
        return executed

    def advance(self, seconds: float) -> int:
        """Move the virtual clock forward, running callbacks as they fall due.

        Args:
            seconds: Amount of virtual time to elapse.

        Returns:
            Number of callbacks executed.

        Raises:
            TypeError: If the scheduler runs on a real clock.
        """
        if not self.is_virtual:
            raise TypeError("advance() requires a VirtualClock")
        target = self.time() + seconds
        executed = self._run_until(target)
        self._clock.advance_to(target)
        return executed

    def run_for(self, duration: float, sleep: Callable[[float], None] = _sleep) -> int:
        """Drive the scheduler for ``duration`` seconds.

        On a virtual clock this is equivalent to ``advance``.

        Returns:
            Number of callbacks executed.
        """
        if self.is_virtual:
            return self.advance(duration)

        end = self.time() + duration
        executed = 0
        while not self._closed:
            executed += self.run_pending()
            now = self.time()
            if now >= end:
                break
            due = self.next_due()
            wake = end if due is None else min(due, end)
            sleep(max(0.0, wake - now))
        return executed

    def close(self) -> None:
        """Cancel every timer. Nothing scheduled before close will run."""
        for handle in self._handles:
            handle.cancel()
        self._handles.clear()
        self._queue.clear()
        self._closed = True
        logger.debug("Scheduler closed")
