"""Tile swap puzzle solver: permutation cycle decomposition."""

from __future__ import annotations

from collections.abc import Sequence


class CycleSolver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def decompose(arrangement: Sequence[int]) -> list[list[int]]:
        """Split *arrangement* into its permutation cycles.

        Each cycle is a list of positions ordered so that swapping every
        consecutive pair, left to right, puts each member of the cycle at
        home.  Tiles already home come back as singleton cycles.

        Starting at an unvisited position, the walk records the position,
        then jumps to the slot named by the tile sitting there, and stops
        once it lands on a visited position.  The recorded walk is reversed
        before it is emitted: the last swap then settles the walk's start.

        The input must be a permutation of ``range(len(arrangement))``;
        anything else is not checked.
        """
        tiles = list(arrangement)
        unvisited = [True] * len(tiles)
        cycles: list[list[int]] = []

        for start in reversed(range(len(tiles))):
            if not unvisited[start]:
                continue
            unvisited[start] = False

            cycle: list[int] = []
            pos = start
            while True:
                cycle.append(pos)
                pos = tiles[pos]
                if not unvisited[pos]:
                    break
                unvisited[pos] = False

            cycle.reverse()
            cycles.append(cycle)

        return cycles

    @staticmethod
    def swaps(cycles: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
        """Flatten *cycles* into the pairwise swaps they imply, in order."""
        return [
            (cycle[i], cycle[i + 1])
            for cycle in cycles
            for i in range(len(cycle) - 1)
        ]

    @staticmethod
    def swap_count(arrangement: Sequence[int]) -> int:
        """Minimum number of swaps needed to sort *arrangement*."""
        return len(arrangement) - len(CycleSolver.decompose(arrangement))

    @staticmethod
    def hint(arrangement: Sequence[int]) -> tuple[int, int] | None:
        """Return the first swap of the solution, or ``None`` if solved."""
        for cycle in CycleSolver.decompose(arrangement):
            if len(cycle) > 1:
                return cycle[0], cycle[1]
        return None
