"""Tracks the mutable state of the puzzle and its read-only snapshots."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.board import Board


@dataclass(frozen=True)
class PuzzleSnapshot:
    """What a View gets to render after every transition."""

    arrangement: tuple[int, ...]
    size: int
    selection: int | None
    moves: int
    solving: bool

    @property
    def is_solved(self) -> bool:
        return all(tile == pos for pos, tile in enumerate(self.arrangement))

    def tile_at(self, row: int, col: int) -> int:
        return self.arrangement[row * self.size + col]

    def is_tile_home(self, position: int) -> bool:
        return self.arrangement[position] == position


class PuzzleState:
    """Holds the current board, selection, swap counter and generation.

    The generation changes whenever the board is replaced wholesale or a
    new solve starts, so work computed against an older board can tell it
    is stale.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.selection: int | None = None
        self.moves: int = 0
        self.generation: int = 0

    @property
    def size(self) -> int:
        return self.board.size

    # -- transitions ----------------------------------------------------------

    def replace_board(self, board: Board) -> None:
        self.board = board
        self.selection = None
        self.moves = 0
        self.bump()

    def bump(self) -> int:
        self.generation += 1
        return self.generation

    def increment_moves(self) -> None:
        self.moves += 1

    # -- queries --------------------------------------------------------------

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()

    def snapshot(self, solving: bool = False) -> PuzzleSnapshot:
        return PuzzleSnapshot(
            arrangement=tuple(self.board.tiles),
            size=self.board.size,
            selection=self.selection,
            moves=self.moves,
            solving=solving,
        )
