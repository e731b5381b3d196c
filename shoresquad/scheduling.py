# ABOUTME: Clock and timer abstractions plus the throttle/debounce rate limiters.
# ABOUTME: AsyncioScheduler drives the live page; VirtualScheduler lets tests advance time by hand.

import asyncio
import heapq
import itertools
from collections.abc import Callable
from datetime import datetime
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Scheduler(Protocol):
    """What components need from a timer source: a monotonic clock and delayed callbacks."""

    def now(self) -> float: ...

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> Any: ...

    def cancel(self, handle: Any) -> None: ...


class AsyncioScheduler:
    """Scheduler backed by the running asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop or asyncio.get_running_loop()

    def now(self) -> float:
        return self.loop.time()

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> asyncio.TimerHandle:
        return self.loop.call_later(delay, callback, *args)

    def cancel(self, handle: asyncio.TimerHandle | None) -> None:
        if handle is not None:
            handle.cancel()


class VirtualScheduler:
    """Deterministic scheduler whose clock only moves when advance() is called.

    Callbacks due at the same instant run in the order they were scheduled.
    """

    def __init__(self, start: float = 0.0):
        self._now = start
        self._queue: list[tuple[float, int, Callable[..., Any], tuple]] = []
        self._counter = itertools.count()
        self._cancelled: set[int] = set()

    def now(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> int:
        handle = next(self._counter)
        heapq.heappush(self._queue, (self._now + max(delay, 0.0), handle, callback, args))
        return handle

    def cancel(self, handle: int | None) -> None:
        if handle is not None:
            self._cancelled.add(handle)

    @property
    def pending(self) -> int:
        return sum(1 for _, h, _, _ in self._queue if h not in self._cancelled)

    def advance(self, seconds: float) -> None:
        """Move the clock forward, running every callback that falls due on the way."""
        target = self._now + seconds
        while self._queue and self._queue[0][0] <= target:
            due, handle, callback, args = heapq.heappop(self._queue)
            if handle in self._cancelled:
                self._cancelled.discard(handle)
                continue
            self._now = due
            callback(*args)
        self._now = target


def throttle(func: Callable[..., Any], interval: float, clock: Scheduler) -> Callable[..., None]:
    """Run func at most once per interval; calls inside the window are dropped, not queued."""
    last_call: float | None = None

    def throttled(*args: Any, **kwargs: Any) -> None:
        nonlocal last_call
        now = clock.now()
        if last_call is None or now - last_call >= interval:
            last_call = now
            func(*args, **kwargs)

    return throttled


def debounce(func: Callable[..., Any], delay: float, scheduler: Scheduler) -> Callable[..., None]:
    """Run func once, delay seconds after the most recent call."""
    handle = None

    def debounced(*args: Any, **kwargs: Any) -> None:
        nonlocal handle
        scheduler.cancel(handle)
        handle = scheduler.call_later(delay, lambda: func(*args, **kwargs))

    return debounced


def format_date(value: datetime) -> str:
    """Format a datetime for display, e.g. 'Oct 19, 2026, 06:28 AM'."""
    return f"{value.strftime('%b')} {value.day}, {value.year}, {value.strftime('%I:%M %p')}"
