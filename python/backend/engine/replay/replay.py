"""Timed, cancellable replay of a solver's swap sequence."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from backend.engine.replay.scheduler import Scheduler, TimerHandle

logger = logging.getLogger(__name__)


class SolveReplay:
    """Issues the swaps of a cycle decomposition one at a time.

    Every swap is followed by *swap_delay_ms*; the last swap of a cycle
    waits *cycle_delay_ms* on top of that.  Singleton cycles need no swap
    and, unlike a per-cycle timer, add no delay either: a board with a few
    stray tiles starts moving at once.  Swaps fire strictly in cycle order.

    Applying a swap may cancel the replay (a listener sending Reset, say);
    no further step is scheduled after that.

    *is_current* is checked before each swap; once it returns False the
    replay cancels itself instead of touching a board it was not computed
    for.
    """

    def __init__(
        self,
        cycles: Sequence[Sequence[int]],
        scheduler: Scheduler,
        apply_swap: Callable[[int, int], None],
        *,
        swap_delay_ms: int,
        cycle_delay_ms: int,
        is_current: Callable[[], bool] = lambda: True,
    ) -> None:
        self._scheduler = scheduler
        self._apply_swap = apply_swap
        self._is_current = is_current
        self._steps: list[tuple[int, int, int]] = []
        for cycle in cycles:
            last = len(cycle) - 2
            for i in range(len(cycle) - 1):
                delay = swap_delay_ms + (cycle_delay_ms if i == last else 0)
                self._steps.append((cycle[i], cycle[i + 1], delay))

        self._cursor = 0
        self._handle: TimerHandle | None = None
        self._cancelled = False

    # -- control --------------------------------------------------------------

    def start(self) -> None:
        """Schedule the first swap.  Returns without mutating anything."""
        if self._steps:
            self._handle = self._scheduler.call_later(0, self._step)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        if not self._cancelled and not self.done:
            logger.debug(
                "Replay cancelled with %d of %d swaps left",
                self.remaining,
                self.total,
            )
        self._cancelled = True

    # -- queries --------------------------------------------------------------

    @property
    def total(self) -> int:
        return len(self._steps)

    @property
    def remaining(self) -> int:
        return len(self._steps) - self._cursor

    @property
    def done(self) -> bool:
        return self._cursor >= len(self._steps)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def active(self) -> bool:
        return not self._cancelled and not self.done

    # -- stepping -------------------------------------------------------------

    def _step(self) -> None:
        self._handle = None
        if self._cancelled:
            return
        if not self._is_current():
            self.cancel()
            return

        a, b, delay = self._steps[self._cursor]
        self._cursor += 1
        self._apply_swap(a, b)

        if self._cancelled:
            return
        if self.done:
            logger.debug("Replay finished after %d swaps", self.total)
            return
        self._handle = self._scheduler.call_later(delay, self._step)
