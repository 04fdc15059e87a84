"""Solve replay tests: swap timing and cancellation.

Time is driven by the ``clock`` fixture; nothing here sleeps.  Checks
sit one millisecond either side of a deadline so float rounding in the
clock never decides a result.
"""

from __future__ import annotations

import pytest

from backend.engine.cyclesolver import CycleSolver
from backend.engine.replay import FrameScheduler, SolveReplay
from backend.models.messages import Click, Reset, Resize, Shuffle, Solve

IDENTITY_16 = list(range(16))
SWAP_MS = 400
CYCLE_MS = 1200


# -- helpers ------------------------------------------------------------------


def _tick(clock, scheduler: FrameScheduler, ms: float) -> int:
    clock.advance(ms)
    return scheduler.run_due()


def _drain(controller, clock, scheduler: FrameScheduler, limit: int = 10_000) -> None:
    """Advance time until the replay finishes."""
    for _ in range(limit):
        if not controller.is_solving:
            return
        _tick(clock, scheduler, SWAP_MS + CYCLE_MS + 1)
    pytest.fail("replay did not finish")


# -- controller-level ---------------------------------------------------------


def test_two_transpositions_fire_one_cycle_apart(make_controller, clock, scheduler) -> None:
    controller = make_controller([3, 2, 1, 0] + IDENTITY_16[4:])
    controller.apply(Solve())

    assert scheduler.run_due() == 1
    assert controller.snapshot.arrangement[:4] == (0, 2, 1, 3)

    assert _tick(clock, scheduler, SWAP_MS + CYCLE_MS - 1) == 0
    assert controller.snapshot.arrangement[:4] == (0, 2, 1, 3)

    assert _tick(clock, scheduler, 2) == 1
    snap = controller.snapshot
    assert snap.is_solved
    assert not snap.solving


def test_three_cycle_swaps_are_swap_delay_apart(make_controller, clock, scheduler) -> None:
    controller = make_controller([1, 2, 0] + IDENTITY_16[3:])
    controller.apply(Solve())

    scheduler.run_due()
    assert controller.snapshot.arrangement[:3] == (2, 1, 0)

    assert _tick(clock, scheduler, SWAP_MS - 1) == 0
    assert _tick(clock, scheduler, 2) == 1
    assert controller.snapshot.arrangement[:3] == (0, 1, 2)
    assert controller.state.moves == 2


def test_solved_board_schedules_nothing(make_controller, scheduler) -> None:
    controller = make_controller()
    snap = controller.apply(Solve())
    assert not snap.solving
    assert scheduler.pending == 0
    assert scheduler.run_due() == 0
    assert controller.snapshot.arrangement == tuple(IDENTITY_16)


@pytest.mark.parametrize("seed", range(5))
def test_shuffled_board_ends_solved(make_controller, clock, scheduler, seed: int) -> None:
    controller = make_controller(seed=seed)
    controller.apply(Shuffle())
    expected = CycleSolver.swap_count(controller.snapshot.arrangement)

    controller.apply(Solve())
    scheduler.run_due()
    _drain(controller, clock, scheduler)

    assert controller.is_won
    assert controller.state.moves == expected


@pytest.mark.parametrize("interrupt", [Reset(), Resize(3), Shuffle()])
def test_interrupting_message_cancels_replay(make_controller, clock, scheduler, interrupt) -> None:
    controller = make_controller(seed=4)
    controller.apply(Shuffle())
    controller.apply(Solve())
    scheduler.run_due()

    after = controller.apply(interrupt)
    assert not after.solving
    assert scheduler.pending == 0

    for _ in range(20):
        _tick(clock, scheduler, SWAP_MS + CYCLE_MS + 1)
    assert controller.snapshot == after


def test_second_solve_supersedes_first(make_controller, clock, scheduler) -> None:
    controller = make_controller(seed=6)
    controller.apply(Shuffle())
    expected = CycleSolver.swap_count(controller.snapshot.arrangement)

    controller.apply(Solve())
    controller.apply(Solve())
    scheduler.run_due()
    _drain(controller, clock, scheduler)

    assert controller.is_won
    assert controller.state.moves == expected


def test_reset_from_listener_leaves_no_pending_step(make_controller, clock, scheduler) -> None:
    controller = make_controller([3, 2, 1, 0] + IDENTITY_16[4:])

    def _reset_on_first_swap(snap) -> None:
        if snap.moves == 1:
            controller.apply(Reset())

    controller.subscribe(_reset_on_first_swap)
    controller.apply(Solve())
    scheduler.run_due()

    assert scheduler.pending == 0
    assert not controller.is_solving
    assert controller.snapshot.arrangement == tuple(IDENTITY_16)

    _tick(clock, scheduler, SWAP_MS + CYCLE_MS + 1)
    assert controller.snapshot.arrangement == tuple(IDENTITY_16)


def test_clicks_still_work_during_replay(make_controller, clock, scheduler) -> None:
    controller = make_controller([3, 2, 1, 0] + IDENTITY_16[4:])
    controller.apply(Solve())
    scheduler.run_due()

    assert controller.apply(Click(10)).selection == 10
    assert controller.is_solving


# -- SolveReplay on its own ---------------------------------------------------


def test_swaps_fire_in_cycle_order(clock, scheduler) -> None:
    perm = [4, 0, 1, 2, 3, 6, 5, 7]
    cycles = CycleSolver.decompose(perm)
    fired: list[tuple[int, int]] = []

    replay = SolveReplay(
        cycles,
        scheduler,
        lambda a, b: fired.append((a, b)),
        swap_delay_ms=SWAP_MS,
        cycle_delay_ms=CYCLE_MS,
    )
    replay.start()
    assert fired == []
    assert replay.total == 5

    scheduler.run_due()
    for _ in range(50):
        if replay.done:
            break
        _tick(clock, scheduler, 100)

    assert fired == CycleSolver.swaps(cycles)
    assert replay.done
    assert not replay.active


def test_stale_generation_drops_swaps(scheduler) -> None:
    fired: list[tuple[int, int]] = []
    replay = SolveReplay(
        [[0, 1]],
        scheduler,
        lambda a, b: fired.append((a, b)),
        swap_delay_ms=SWAP_MS,
        cycle_delay_ms=CYCLE_MS,
        is_current=lambda: False,
    )
    replay.start()
    scheduler.run_due()

    assert fired == []
    assert replay.cancelled
    assert replay.remaining == 1


def test_cancel_before_first_swap(scheduler) -> None:
    fired: list[tuple[int, int]] = []
    replay = SolveReplay(
        [[2, 0, 1]],
        scheduler,
        lambda a, b: fired.append((a, b)),
        swap_delay_ms=SWAP_MS,
        cycle_delay_ms=CYCLE_MS,
    )
    replay.start()
    replay.cancel()

    assert scheduler.run_due() == 0
    assert fired == []
    assert not replay.active
