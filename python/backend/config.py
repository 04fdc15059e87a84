"""Runtime settings shared by the controller and every frontend."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SIZE = 20
MIN_SIZE = 1
MAX_SIZE = 100

SWAP_DELAY_MS = 400
CYCLE_DELAY_MS = 1200


@dataclass
class PuzzleConfig:
    default_size: int = DEFAULT_SIZE
    min_size: int = MIN_SIZE
    max_size: int = MAX_SIZE
    swap_delay_ms: int = SWAP_DELAY_MS
    cycle_delay_ms: int = CYCLE_DELAY_MS
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.default_size < self.min_size:
            raise ValueError(
                f"default_size must be at least {self.min_size}, "
                f"got {self.default_size}."
            )
        if self.swap_delay_ms < 0 or self.cycle_delay_ms < 0:
            raise ValueError("Replay delays must not be negative.")
