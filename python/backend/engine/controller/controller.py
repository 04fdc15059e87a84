"""Core puzzle logic: applies View messages to the puzzle state."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

from backend.config import PuzzleConfig
from backend.engine.cyclesolver import CycleSolver
from backend.engine.generator import BoardGenerator
from backend.engine.puzzlestate import PuzzleSnapshot, PuzzleState
from backend.engine.replay import Scheduler, SolveReplay
from backend.models.board import Board
from backend.models.messages import (
    Click,
    Message,
    Reset,
    Resize,
    Shuffle,
    Solve,
    Swap,
)

logger = logging.getLogger(__name__)


def parse_size(raw: str, current: int) -> int:
    """Parse a size typed into a View, falling back to *current*.

    Non-numeric and non-positive input means "no change".
    """
    try:
        size = int(raw.strip())
    except ValueError:
        logger.debug("Ignoring non-numeric size input %r", raw)
        return current
    if size < 1:
        logger.debug("Ignoring non-positive size input %r", raw)
        return current
    return size


class PuzzleController:
    """Owns the puzzle state and is the only thing that mutates it.

    Views call :meth:`apply` with a message and re-render from the
    returned snapshot.  ``Solve`` hands the swap sequence to a
    :class:`SolveReplay` running on *scheduler*; its swaps come back
    through :meth:`apply` like any other message.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        config: PuzzleConfig | None = None,
        *,
        size: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or PuzzleConfig()
        self.scheduler = scheduler
        self.rng = rng or random.Random(self.config.seed)
        board = BoardGenerator.solved(size or self.config.default_size)
        self.state = PuzzleState(board)
        self._replay: SolveReplay | None = None
        self._listeners: list[Callable[[PuzzleSnapshot], None]] = []

    @classmethod
    def from_board(
        cls,
        board: Board,
        scheduler: Scheduler,
        config: PuzzleConfig | None = None,
        *,
        rng: random.Random | None = None,
    ) -> "PuzzleController":
        """Create a controller around an existing board (e.g. in tests)."""
        obj = cls(scheduler, config, size=board.size, rng=rng)
        obj.state = PuzzleState(board)
        return obj

    # -- entry point ----------------------------------------------------------

    def apply(self, message: Message) -> PuzzleSnapshot:
        if isinstance(message, Swap):
            self._swap(message.a, message.b)
        elif isinstance(message, Click):
            self._click(message.position)
        elif isinstance(message, Shuffle):
            self._shuffle()
        elif isinstance(message, Reset):
            self._reset()
        elif isinstance(message, Resize):
            self._resize(message.size)
        elif isinstance(message, Solve):
            self._solve()
        else:
            raise TypeError(f"Unknown message: {message!r}")

        snap = self.snapshot
        for listener in self._listeners:
            listener(snap)
        return snap

    def subscribe(self, listener: Callable[[PuzzleSnapshot], None]) -> None:
        """Call *listener* with the new snapshot after every message.

        Replay swaps arrive from timers, so event-driven Views use this to
        learn about them.
        """
        self._listeners.append(listener)

    # -- queries --------------------------------------------------------------

    @property
    def snapshot(self) -> PuzzleSnapshot:
        return self.state.snapshot(solving=self.is_solving)

    @property
    def size(self) -> int:
        return self.state.size

    @property
    def is_solving(self) -> bool:
        return self._replay is not None and self._replay.active

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    # -- transitions ----------------------------------------------------------

    def _swap(self, a: int, b: int) -> None:
        self.state.board.swap(a, b)
        if a != b:
            self.state.increment_moves()
        logger.debug("Swapped positions %d and %d", a, b)

    def _click(self, position: int) -> None:
        if not 0 <= position < len(self.state.board):
            raise IndexError(
                f"Click at {position} out of range for a board of "
                f"{len(self.state.board)} tiles."
            )
        selection = self.state.selection
        if selection is None:
            self.state.selection = position
            return
        self._swap(selection, position)
        self.state.selection = None

    def _shuffle(self) -> None:
        self._cancel_replay()
        BoardGenerator.shuffle(self.state.board, self.rng)
        self.state.moves = 0
        self.state.bump()
        logger.debug("Shuffled %d×%d board", self.size, self.size)

    def _reset(self) -> None:
        self._cancel_replay()
        self.state.replace_board(BoardGenerator.solved(self.size))
        logger.debug("Reset %d×%d board", self.size, self.size)

    def _resize(self, size: int) -> None:
        if size < 1:
            logger.debug("Ignoring resize to %d, keeping %d", size, self.size)
            size = self.size
        self._cancel_replay()
        self.state.replace_board(BoardGenerator.solved(size))
        logger.debug("Resized board to %d×%d", size, size)

    def _solve(self) -> None:
        self._cancel_replay()
        generation = self.state.bump()
        cycles = CycleSolver.decompose(self.state.board.tiles)

        replay = SolveReplay(
            cycles,
            self.scheduler,
            lambda a, b: self.apply(Swap(a, b)),
            swap_delay_ms=self.config.swap_delay_ms,
            cycle_delay_ms=self.config.cycle_delay_ms,
            is_current=lambda: self.state.generation == generation,
        )
        logger.info(
            "Solving %d×%d board: %d cycles, %d swaps",
            self.size,
            self.size,
            len(cycles),
            replay.total,
        )
        self._replay = replay
        replay.start()

    def _cancel_replay(self) -> None:
        if self._replay is not None:
            self._replay.cancel()
            self._replay = None
