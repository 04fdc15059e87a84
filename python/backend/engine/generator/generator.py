"""Generates solved and shuffled puzzle boards."""

from __future__ import annotations

import random

from backend.models.board import Board


class BoardGenerator:
    """Creates boards from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (tile ``p`` in slot ``p``)."""
        return Board.identity(size)

    @staticmethod
    def shuffle(board: Board, rng: random.Random | None = None) -> None:
        """Replace *board*'s tiles in-place with a uniform random permutation.

        Any permutation is reachable because tiles swap freely, so a plain
        Fisher-Yates shuffle is enough.  Pass a seeded *rng* for
        reproducible boards.
        """
        (rng or random).shuffle(board.tiles)

    @staticmethod
    def generate(size: int, rng: random.Random | None = None) -> Board:
        """Return a shuffled board of the given size."""
        board = BoardGenerator.solved(size)
        BoardGenerator.shuffle(board, rng)
        return board
