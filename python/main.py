#!/usr/bin/env python3
"""Tile Swap Puzzle.

Usage::

    python main.py                 # interactive menu
    python main.py -f rich -s 4    # Rich terminal, 4×4
    python main.py -f pygame       # Pygame GUI, 20×20
    python main.py -f pyqt --seed 7 --swap-delay 200
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
ASSETS_DIR = PROJECT_ROOT / "assets"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import (  # noqa: E402
    CYCLE_DELAY_MS,
    MAX_SIZE,
    MIN_SIZE,
    SWAP_DELAY_MS,
    PuzzleConfig,
)
from backend.engine.controller import parse_size  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


_RUNNERS = {
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
}

_GUI = {Frontend.pygame, Frontend.pyqt}


# -- helpers ------------------------------------------------------------------


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def _launch(frontend: Frontend, config: PuzzleConfig, size: Optional[int]) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    if frontend in _GUI:
        mod.run(config, size=size, assets_dir=ASSETS_DIR)
    else:
        mod.run(config, size=size)


def _ask_size(default: int) -> int:
    raw = input(f"  Grid size ({MIN_SIZE}-{MAX_SIZE}, default {default}): ").strip()
    if not raw:
        return default
    size = parse_size(raw, default)
    if size > MAX_SIZE:
        print(f"  Too large, using {default}.")
        return default
    return size


def _menu_loop(config: PuzzleConfig) -> None:
    choices = {"1": Frontend.rich, "2": Frontend.pygame, "3": Frontend.pyqt}
    while True:
        print()
        print("  ====================================")
        print("        T I L E   S W A P            ")
        print("  ====================================")
        print()
        print("  1.  Play  (Rich Terminal)")
        print("  2.  Play  (Pygame GUI)")
        print("  3.  Play  (PyQt GUI)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        frontend = choices.get(choice)
        if frontend is None:
            print("  Unknown option.")
            continue
        default = 4 if frontend is Frontend.rich else config.default_size
        _launch(frontend, config, _ask_size(default))


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    size: Optional[int] = typer.Option(
        None, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        help="Grid size (tiles per side).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the shuffle for reproducible boards.",
    ),
    swap_delay: int = typer.Option(
        SWAP_DELAY_MS, "--swap-delay",
        min=0,
        help="Milliseconds between solve swaps.",
    ),
    cycle_delay: int = typer.Option(
        CYCLE_DELAY_MS, "--cycle-delay",
        min=0,
        help="Extra milliseconds after each solved cycle.",
    ),
    log_level: str = typer.Option(
        "warning", "--log-level",
        help="Logging level (debug, info, warning, error).",
    ),
) -> None:
    """Tile Swap Puzzle."""
    _setup_logging(log_level)
    config = PuzzleConfig(
        swap_delay_ms=swap_delay,
        cycle_delay_ms=cycle_delay,
        seed=seed,
    )

    if frontend is None:
        _menu_loop(config)
        return

    _launch(frontend, config, size)


if __name__ == "__main__":
    app()
