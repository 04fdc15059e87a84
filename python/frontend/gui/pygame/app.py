"""Pygame GUI frontend.

Shows the puzzle image cut into an N×N grid.  Click two tiles to swap
them; the toolbar shuffles, solves, resets and resizes.  The solve replay
runs on a :class:`FrameScheduler` pumped once per frame.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from backend.config import PuzzleConfig
from backend.engine.controller import PuzzleController
from backend.engine.cyclesolver import CycleSolver
from backend.engine.puzzlestate import PuzzleSnapshot
from backend.engine.replay import FrameScheduler
from backend.models.messages import Click, Message, Reset, Resize, Shuffle, Solve, Swap
from frontend.assets import find_image

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_BLUE = (137, 180, 250)
COL_LAVENDER = (180, 190, 254)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)
COL_YELLOW = (249, 226, 175)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 640, 760
MARGIN = 20
BOARD_TOP = 60
BOARD_PX = WIN_W - 2 * MARGIN
TOOLBAR_Y = BOARD_TOP + BOARD_PX + 16
SELECTED_SCALE = 0.8


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        pygame.draw.rect(surf, self.hover if self._hot else self.bg, self.rect, border_radius=8)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(lbl, lbl.get_rect(center=self.rect.center))

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, config: PuzzleConfig, size: int, assets_dir: Path) -> None:
        self._scheduler = FrameScheduler()
        self._controller = PuzzleController(self._scheduler, config, size=size)
        self._snap = self._controller.snapshot
        self._status = ""

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Tile Swap Puzzle")
        self._clock = pygame.time.Clock()

        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_btn = pygame.font.SysFont("Helvetica", 15, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._image: pygame.Surface | None = None
        image_path = find_image(assets_dir)
        if image_path is not None:
            self._image = pygame.image.load(str(image_path)).convert()
        else:
            logger.info("No puzzle image under %s, using numbered tiles", assets_dir)
        self._tiles: dict[int, pygame.Surface] = {}
        self._f_tile: pygame.font.Font | None = None
        self._sliced_for = 0

        self._build_toolbar()

    # ── toolbar ─────────────────────────────────────────────────────────────

    def _build_toolbar(self) -> None:
        y, h = TOOLBAR_Y, 40
        self._minus_btn = _Btn((MARGIN, y, 40, h), "−", self._f_btn)
        self._plus_btn = _Btn((MARGIN + 110, y, 40, h), "+", self._f_btn)
        x = MARGIN + 170
        self._shuffle_btn = _Btn(
            (x, y, 140, h), "SHUFFLE (X)", self._f_btn,
            bg=COL_PINK, hover=(245, 210, 227), fg=COL_BASE,
        )
        self._solve_btn = _Btn(
            (x + 150, y, 120, h), "SOLVE (V)", self._f_btn,
            bg=COL_GREEN, hover=(190, 240, 190), fg=COL_BASE,
        )
        self._reset_btn = _Btn(
            (x + 280, y, 110, h), "RESET (R)", self._f_btn,
            bg=COL_BLUE, hover=COL_LAVENDER, fg=COL_BASE,
        )
        self._toolbar = [
            self._minus_btn,
            self._plus_btn,
            self._shuffle_btn,
            self._solve_btn,
            self._reset_btn,
        ]

    # ── helpers ─────────────────────────────────────────────────────────────

    def _send(self, message: Message) -> None:
        self._snap = self._controller.apply(message)

    def _tile_px(self) -> int:
        return BOARD_PX // self._snap.size

    def _slot_rect(self, pos: int) -> pygame.Rect:
        tpx = self._tile_px()
        r, c = divmod(pos, self._snap.size)
        return pygame.Rect(MARGIN + c * tpx, BOARD_TOP + r * tpx, tpx, tpx)

    def _slot_at(self, xy: tuple[int, int]) -> int | None:
        tpx = self._tile_px()
        size = self._snap.size
        c = (xy[0] - MARGIN) // tpx
        r = (xy[1] - BOARD_TOP) // tpx
        if 0 <= r < size and 0 <= c < size:
            return r * size + c
        return None

    def _slice_image(self) -> None:
        """Cut the image into one surface per tile, keyed by home slot.

        Also rebuilds the tile-number font, which scales with the tile.
        """
        size = self._snap.size
        if self._sliced_for == size:
            return
        self._sliced_for = size
        tpx = self._tile_px()
        self._f_tile = pygame.font.SysFont("Helvetica", max(8, tpx // 3), bold=True)
        self._tiles = {}
        if self._image is None:
            return
        full = pygame.transform.smoothscale(self._image, (tpx * size, tpx * size))
        for tile in range(size * size):
            r, c = divmod(tile, size)
            self._tiles[tile] = full.subsurface(
                pygame.Rect(c * tpx, r * tpx, tpx, tpx)
            ).copy()

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw(self) -> None:
        snap: PuzzleSnapshot = self._snap
        self._slice_image()
        self._surf.fill(COL_BASE)

        title = self._f_title.render(
            f"Tile Swap  {snap.size}×{snap.size}    Swaps: {snap.moves}",
            True,
            COL_TEXT,
        )
        self._surf.blit(title, ((WIN_W - title.get_width()) // 2, 18))

        pygame.draw.rect(
            self._surf,
            COL_MANTLE,
            pygame.Rect(MARGIN, BOARD_TOP, BOARD_PX, BOARD_PX),
        )
        tpx = self._tile_px()

        for pos, tile in enumerate(snap.arrangement):
            rect = self._slot_rect(pos)
            if pos == snap.selection:
                rect = rect.inflate(
                    -int(tpx * (1 - SELECTED_SCALE)), -int(tpx * (1 - SELECTED_SCALE))
                )
            if tile in self._tiles:
                piece = self._tiles[tile]
                if rect.width != tpx:
                    piece = pygame.transform.smoothscale(piece, rect.size)
                self._surf.blit(piece, rect.topleft)
            else:
                col = COL_GREEN if snap.is_tile_home(pos) else COL_BLUE
                pygame.draw.rect(self._surf, col, rect.inflate(-2, -2), border_radius=4)
                if tpx >= 18:
                    lbl = self._f_tile.render(str(tile), True, COL_BASE)
                    self._surf.blit(lbl, lbl.get_rect(center=rect.center))

        for btn in self._toolbar:
            btn.draw(self._surf)
        size_lbl = self._f_btn.render(str(snap.size), True, COL_YELLOW)
        self._surf.blit(
            size_lbl,
            size_lbl.get_rect(center=(MARGIN + 75, TOOLBAR_Y + 20)),
        )

        status = self._status
        if snap.solving:
            status = "Solving…"
        elif snap.is_solved and not status:
            status = "Solved"
        if status:
            lbl = self._f_small.render(status, True, COL_YELLOW)
            self._surf.blit(lbl, ((WIN_W - lbl.get_width()) // 2, TOOLBAR_Y + 52))

        hint = self._f_small.render(
            "Click two tiles to swap     N  hint     +/−  size     Esc  quit",
            True,
            COL_OVERLAY0,
        )
        self._surf.blit(hint, ((WIN_W - hint.get_width()) // 2, WIN_H - 28))

    # ── actions ─────────────────────────────────────────────────────────────

    def _resize(self, delta: int) -> None:
        cfg = self._controller.config
        size = self._snap.size + delta
        if cfg.min_size <= size <= cfg.max_size:
            self._send(Resize(size))
            self._status = ""

    def _do_solve(self) -> None:
        total = CycleSolver.swap_count(self._snap.arrangement)
        self._send(Solve())
        self._status = f"{total} swaps" if total else "Already solved!"

    def _do_hint(self) -> None:
        hint = CycleSolver.hint(self._snap.arrangement)
        if hint is None:
            self._status = "Already solved!"
            return
        self._send(Swap(*hint))
        self._status = f"Hint: {hint[0]} ↔ {hint[1]}"

    # ── event handling ──────────────────────────────────────────────────────

    def _handle(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            for btn in self._toolbar:
                btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._minus_btn.hit(ev.pos):
                self._resize(-1)
            elif self._plus_btn.hit(ev.pos):
                self._resize(1)
            elif self._shuffle_btn.hit(ev.pos):
                self._send(Shuffle())
                self._status = "Shuffled!"
            elif self._solve_btn.hit(ev.pos):
                self._do_solve()
            elif self._reset_btn.hit(ev.pos):
                self._send(Reset())
                self._status = ""
            else:
                pos = self._slot_at(ev.pos)
                if pos is not None:
                    self._send(Click(pos))
                    self._status = ""
        elif ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
            if ev.key == pygame.K_x:
                self._send(Shuffle())
                self._status = "Shuffled!"
            elif ev.key == pygame.K_v:
                self._do_solve()
            elif ev.key == pygame.K_r:
                self._send(Reset())
                self._status = ""
            elif ev.key == pygame.K_n:
                self._do_hint()
            elif ev.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                self._resize(1)
            elif ev.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                self._resize(-1)
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT or not self._handle(ev):
                    running = False
                    break

            if self._scheduler.run_due():
                self._snap = self._controller.snapshot

            self._draw()
            pygame.display.flip()
            self._clock.tick(60)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(config: PuzzleConfig, size: int | None = None, assets_dir: Path = Path("assets")) -> None:
    """Launch the Pygame GUI."""
    app = PygameApp(config, size or config.default_size, assets_dir)
    app.run_loop()
