"""Timer primitives the solve replay runs on.

The replay never sleeps.  It asks a :class:`Scheduler` to call it back
after a delay, so the host loop (a Pygame frame loop, a terminal key poll,
a Qt event loop) stays in charge of time.
"""

from __future__ import annotations

import heapq
import itertools
import time
from collections.abc import Callable
from typing import Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle: ...


class _FrameTimer:
    __slots__ = ("due", "callback", "cancelled")

    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FrameScheduler:
    """Timer queue pumped by the host loop via :meth:`run_due`.

    *clock* returns the current time in seconds (``time.monotonic`` by
    default); tests inject a fake one.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._queue: list[tuple[float, int, _FrameTimer]] = []
        self._counter = itertools.count()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> _FrameTimer:
        timer = _FrameTimer(self._clock() + delay_ms / 1000, callback)
        heapq.heappush(self._queue, (timer.due, next(self._counter), timer))
        return timer

    def run_due(self) -> int:
        """Fire every timer whose deadline has passed.  Returns how many fired.

        Timers scheduled by a callback are picked up in the same pass when
        they are already due (e.g. a zero delay).
        """
        fired = 0
        while self._queue and self._queue[0][0] <= self._clock():
            _, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            timer.callback()
            fired += 1
        return fired

    @property
    def pending(self) -> int:
        return sum(1 for _, _, t in self._queue if not t.cancelled)
