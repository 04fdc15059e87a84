"""FrameScheduler tests."""

from __future__ import annotations

from backend.engine.replay import FrameScheduler


def test_fires_only_when_due(clock, scheduler: FrameScheduler) -> None:
    fired: list[str] = []
    scheduler.call_later(500, lambda: fired.append("a"))

    assert scheduler.run_due() == 0
    clock.advance(499)
    assert scheduler.run_due() == 0
    clock.advance(2)
    assert scheduler.run_due() == 1
    assert fired == ["a"]
    assert scheduler.pending == 0


def test_fires_in_deadline_order(clock, scheduler: FrameScheduler) -> None:
    fired: list[str] = []
    scheduler.call_later(300, lambda: fired.append("late"))
    scheduler.call_later(100, lambda: fired.append("early"))
    scheduler.call_later(100, lambda: fired.append("early-2"))

    clock.advance(1000)
    assert scheduler.run_due() == 3
    assert fired == ["early", "early-2", "late"]


def test_cancelled_timer_never_fires(clock, scheduler: FrameScheduler) -> None:
    fired: list[str] = []
    handle = scheduler.call_later(10, lambda: fired.append("x"))
    scheduler.call_later(10, lambda: fired.append("y"))
    handle.cancel()

    assert scheduler.pending == 1
    clock.advance(20)
    assert scheduler.run_due() == 1
    assert fired == ["y"]


def test_zero_delay_chain_runs_in_one_pass(scheduler: FrameScheduler) -> None:
    fired: list[int] = []

    def _step(n: int) -> None:
        fired.append(n)
        if n < 3:
            scheduler.call_later(0, lambda: _step(n + 1))

    scheduler.call_later(0, lambda: _step(0))
    assert scheduler.run_due() == 4
    assert fired == [0, 1, 2, 3]


def test_default_clock_is_monotonic() -> None:
    scheduler = FrameScheduler()
    fired: list[bool] = []
    scheduler.call_later(0, lambda: fired.append(True))
    assert scheduler.run_due() == 1
    assert fired == [True]
