"""Board model for the tile swap puzzle."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Board:
    """Represents the puzzle grid.

    Tiles are stored as a flat row-major list.  ``tiles[p]`` is the tile
    currently sitting in slot ``p``; a tile's value is the slot it
    occupies when the puzzle is solved.
    """

    size: int
    tiles: list[int]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def identity(cls, size: int) -> Board:
        """Return the solved board (every tile at home)."""
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}.")
        return cls(size=size, tiles=list(range(size * size)))

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(2, [3, 2, 1, 0])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{size * size - 1}."
            )
        return cls(size=size, tiles=list(flat))

    # -- queries --------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.tiles)

    def position(self, row: int, col: int) -> int:
        return row * self.size + col

    def coords(self, position: int) -> tuple[int, int]:
        return divmod(position, self.size)

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[self.position(row, col)]

    def is_solved(self) -> bool:
        """Check if all tiles are in their home slots."""
        return all(tile == pos for pos, tile in enumerate(self.tiles))

    def is_tile_home(self, position: int) -> bool:
        return self.tiles[position] == position

    # -- mutation -------------------------------------------------------------

    def swap(self, a: int, b: int) -> None:
        """Exchange the tiles in slots *a* and *b*."""
        n = len(self.tiles)
        if not (0 <= a < n and 0 <= b < n):
            raise IndexError(
                f"Swap ({a}, {b}) out of range for a board of {n} tiles."
            )
        self.tiles[a], self.tiles[b] = self.tiles[b], self.tiles[a]
