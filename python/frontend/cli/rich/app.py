"""Rich terminal frontend with coloured tables and panels.

Renders the puzzle as a numbered grid with a keyboard cursor.  The solve
replay is driven by a :class:`FrameScheduler` pumped between key polls,
so the board animates while the terminal stays responsive.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.config import PuzzleConfig
from backend.engine.controller import PuzzleController
from backend.engine.cyclesolver import CycleSolver
from backend.engine.puzzlestate import PuzzleSnapshot
from backend.engine.replay import FrameScheduler
from backend.models.messages import Click, Reset, Resize, Shuffle, Solve, Swap
from frontend.cli.input_handler import get_key_timeout

console = Console()

_POLL_SECONDS = 0.03

_CURSOR_STEPS: dict[str, tuple[int, int]] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}


# -- board rendering ----------------------------------------------------------


def _render_board(snap: PuzzleSnapshot, cursor: int) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(snap.size * snap.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(snap.size):
        table.add_column(width=width + 1, justify="center")

    for r in range(snap.size):
        cells: list[str] = []
        for c in range(snap.size):
            pos = r * snap.size + c
            val = snap.arrangement[pos]
            if pos == snap.selection:
                style = "bold black on magenta"
            elif snap.is_tile_home(pos):
                style = "bold green"
            else:
                style = "bold white"
            if pos == cursor:
                style += " reverse"
            cells.append(f"[{style}]{val:>{width}}[/]")
        table.add_row(*cells)

    return table


def _draw(snap: PuzzleSnapshot, cursor: int, status: str) -> None:
    console.clear()

    stats = Text()
    stats.append("  Swaps: ", style="dim")
    stats.append(str(snap.moves), style="bold yellow")
    if snap.solving:
        stats.append("    Solving…", style="bold cyan")
    elif snap.is_solved:
        stats.append("    Solved", style="bold green")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  cursor   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  pick   ", style="dim")
    controls.append("X", style="bold yellow")
    controls.append("  shuffle   ", style="dim")
    controls.append("V", style="bold cyan")
    controls.append("  solve   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  reset   ", style="dim")
    controls.append("+/-", style="bold cyan")
    controls.append("  size   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    panel = Panel(
        Align.center(_render_board(snap, cursor)),
        title=f"[bold cyan]Tile Swap  {snap.size}×{snap.size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


# -- actions ------------------------------------------------------------------


def _apply_hint(controller: PuzzleController) -> str:
    snap = controller.snapshot
    hint = CycleSolver.hint(snap.arrangement)
    if hint is None:
        return "[green]Already solved![/green]"
    a, b = hint
    controller.apply(Swap(a, b))
    return f"[cyan]Hint:[/cyan] swapped [bold]{a}[/bold] ↔ [bold]{b}[/bold]"


def _move_cursor(cursor: int, size: int, step: tuple[int, int]) -> int:
    r, c = divmod(cursor, size)
    r = min(size - 1, max(0, r + step[0]))
    c = min(size - 1, max(0, c + step[1]))
    return r * size + c


# -- game loop ----------------------------------------------------------------


def _play(controller: PuzzleController, scheduler: FrameScheduler) -> None:
    config = controller.config
    cursor = 0
    status = ""
    dirty = True

    while True:
        if dirty:
            _draw(controller.snapshot, cursor, status)
            status = ""
            dirty = False

        key = get_key_timeout(_POLL_SECONDS)
        if scheduler.run_due():
            dirty = True
        if key is None:
            continue
        dirty = True

        size = controller.size
        if key in _CURSOR_STEPS:
            cursor = _move_cursor(cursor, size, _CURSOR_STEPS[key])
        elif key == "select":
            controller.apply(Click(cursor))
        elif key == "shuffle":
            controller.apply(Shuffle())
            status = "[yellow]Shuffled![/yellow]"
        elif key == "solve":
            total = CycleSolver.swap_count(controller.snapshot.arrangement)
            controller.apply(Solve())
            if total:
                status = f"[cyan]Solving in {total} swaps…[/cyan]"
            else:
                status = "[green]Already solved![/green]"
        elif key == "hint":
            status = _apply_hint(controller)
        elif key == "reset":
            controller.apply(Reset())
        elif key == "grow" and size < config.max_size:
            controller.apply(Resize(size + 1))
            cursor = 0
        elif key == "shrink" and size > config.min_size:
            controller.apply(Resize(size - 1))
            cursor = 0
        elif key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        else:
            dirty = False


# -- public entry point -------------------------------------------------------


def run(config: PuzzleConfig, size: int | None = None) -> None:
    """Launch the Rich terminal frontend."""
    scheduler = FrameScheduler()
    controller = PuzzleController(scheduler, config, size=size or 4)
    _play(controller, scheduler)
