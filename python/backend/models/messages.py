"""Messages a View may send to the puzzle controller."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Swap:
    a: int
    b: int


@dataclass(frozen=True)
class Shuffle:
    pass


@dataclass(frozen=True)
class Click:
    position: int


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class Resize:
    size: int


@dataclass(frozen=True)
class Solve:
    pass


Message = Union[Swap, Shuffle, Click, Reset, Resize, Solve]
