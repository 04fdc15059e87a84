"""Shared fixtures: a fake clock and a scheduler driven by it."""

from __future__ import annotations

import random

import pytest

from backend.config import PuzzleConfig
from backend.engine.controller import PuzzleController
from backend.engine.replay import FrameScheduler
from backend.models.board import Board


class FakeClock:
    """Stands in for ``time.monotonic``; only moves when told to."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms / 1000


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def scheduler(clock: FakeClock) -> FrameScheduler:
    return FrameScheduler(clock)


@pytest.fixture
def config() -> PuzzleConfig:
    return PuzzleConfig(default_size=4, swap_delay_ms=400, cycle_delay_ms=1200)


@pytest.fixture
def make_controller(scheduler: FrameScheduler, config: PuzzleConfig):
    """Build a controller around a flat tile list (identity 4×4 by default)."""

    def _make(tiles: list[int] | None = None, seed: int = 0) -> PuzzleController:
        rng = random.Random(seed)
        if tiles is None:
            return PuzzleController(scheduler, config, rng=rng)
        size = int(len(tiles) ** 0.5)
        board = Board.from_flat(size, tiles)
        return PuzzleController.from_board(board, scheduler, config, rng=rng)

    return _make
