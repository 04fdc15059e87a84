"""PyQt6 GUI frontend.

One window: a size field and Shuffle / Solve / Reset buttons above a grid
of tile buttons.  Each tile shows its piece of the puzzle image (or its
number when no image is available).  Click two tiles to swap them.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from PyQt6.QtCore import QSize, Qt
from PyQt6.QtGui import QFont, QIcon, QKeyEvent, QPixmap
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from backend.config import PuzzleConfig
from backend.engine.controller import PuzzleController, parse_size
from backend.engine.puzzlestate import PuzzleSnapshot
from backend.models.messages import Click, Message, Reset, Resize, Shuffle, Solve
from frontend.assets import find_image
from frontend.gui.pyqt.scheduler import QtScheduler

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_SURFACE0 = "#313244"
_SURFACE1 = "#45475a"
_OVERLAY0 = "#6c7086"
_TEXT = "#cdd6f4"
_BLUE = "#89b4fa"
_GREEN = "#a6e3a1"
_PINK = "#f5c2e7"
_YELLOW = "#f9e2af"
_LAVENDER = "#b4befe"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
    QLineEdit {{ background: {_SURFACE0}; color: {_TEXT};
                 border: none; border-radius: 6px; padding: 4px 8px; }}
"""

_BOARD_PX = 560
_SELECTED_SCALE = 0.8


def _styled_btn(text: str, *, bg: str = _SURFACE0, hover: str = _SURFACE1, fg: str = _TEXT) -> QPushButton:
    btn = QPushButton(text)
    btn.setFont(QFont("Helvetica", 13, QFont.Weight.Bold))
    btn.setMinimumHeight(38)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setStyleSheet(
        f"QPushButton {{ background:{bg}; color:{fg};"
        f" border:none; border-radius:8px; padding:6px 18px; }}"
        f" QPushButton:hover {{ background:{hover}; }}"
    )
    return btn


class _MainWindow(QMainWindow):
    def __init__(self, config: PuzzleConfig, size: int, assets_dir: Path) -> None:
        super().__init__()
        self._scheduler = QtScheduler(self)
        self._controller = PuzzleController(self._scheduler, config, size=size)

        image_path = find_image(assets_dir)
        self._image = QPixmap(str(image_path)) if image_path is not None else None
        if self._image is None:
            logger.info("No puzzle image under %s, using numbered tiles", assets_dir)
        self._pieces: dict[int, QPixmap] = {}
        self._btns: list[QPushButton] = []
        self._built_for = 0

        self.setWindowTitle("Tile Swap Puzzle")
        self.setStyleSheet(_GLOBAL_CSS)

        page = QWidget()
        page.setObjectName("page")
        root = QVBoxLayout(page)
        root.setSpacing(8)
        root.setContentsMargins(16, 12, 16, 12)
        self.setCentralWidget(page)

        # toolbar
        bar = QHBoxLayout()
        bar.setSpacing(8)
        lbl = QLabel("Size")
        lbl.setFont(QFont("Helvetica", 13, QFont.Weight.Bold))
        bar.addWidget(lbl)
        self._size_edit = QLineEdit(str(size))
        self._size_edit.setFixedWidth(64)
        self._size_edit.editingFinished.connect(self._on_size_edited)
        bar.addWidget(self._size_edit)
        bar.addStretch(1)
        for text, bg, msg in (
            ("Shuffle", _PINK, Shuffle()),
            ("Solve", _GREEN, Solve()),
            ("Reset", _BLUE, Reset()),
        ):
            btn = _styled_btn(text, bg=bg, hover=_LAVENDER, fg=_BASE)
            btn.clicked.connect(lambda _, m=msg: self._send(m))
            bar.addWidget(btn)
        root.addLayout(bar)

        # status
        self._stats = QLabel()
        self._stats.setFont(QFont("Helvetica", 13))
        self._stats.setStyleSheet(f"color:{_PINK};")
        self._stats.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._stats)

        # board
        self._frame = QFrame()
        self._frame.setStyleSheet(f"background:{_MANTLE}; border-radius:10px;")
        self._frame.setFixedSize(_BOARD_PX + 16, _BOARD_PX + 16)
        self._grid = QGridLayout(self._frame)
        self._grid.setSpacing(0)
        self._grid.setContentsMargins(8, 8, 8, 8)
        root.addWidget(self._frame, alignment=Qt.AlignmentFlag.AlignCenter)

        hint = QLabel("Click two tiles to swap     X  shuffle     V  solve     R  reset     Esc  quit")
        hint.setFont(QFont("Helvetica", 11))
        hint.setStyleSheet(f"color:{_OVERLAY0};")
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(hint)

        self._controller.subscribe(self._render)
        self._render(self._controller.snapshot)

    # -- messages --

    def _send(self, message: Message) -> None:
        self._controller.apply(message)

    def _on_size_edited(self) -> None:
        current = self._controller.size
        size = parse_size(self._size_edit.text(), current)
        size = min(size, self._controller.config.max_size)
        self._size_edit.setText(str(size))
        if size != current:
            self._send(Resize(size))

    # -- rendering --

    def _tile_px(self, size: int) -> int:
        return _BOARD_PX // size

    def _build_grid(self, size: int) -> None:
        for btn in self._btns:
            self._grid.removeWidget(btn)
            btn.deleteLater()
        self._btns = []

        tpx = self._tile_px(size)
        self._pieces = {}
        if self._image is not None:
            full = self._image.scaled(
                tpx * size,
                tpx * size,
                Qt.AspectRatioMode.IgnoreAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
            for tile in range(size * size):
                r, c = divmod(tile, size)
                self._pieces[tile] = full.copy(c * tpx, r * tpx, tpx, tpx)

        f_sz = max(6, tpx // 3)
        for pos in range(size * size):
            b = QPushButton()
            b.setFixedSize(tpx, tpx)
            b.setFont(QFont("Helvetica", f_sz, QFont.Weight.Bold))
            b.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            b.clicked.connect(lambda _, p=pos: self._send(Click(p)))
            self._grid.addWidget(b, *divmod(pos, size))
            self._btns.append(b)
        self._built_for = size

    def _render(self, snap: PuzzleSnapshot) -> None:
        if snap.size != self._built_for:
            self._build_grid(snap.size)
            self._size_edit.setText(str(snap.size))

        tpx = self._tile_px(snap.size)
        for pos, tile in enumerate(snap.arrangement):
            b = self._btns[pos]
            selected = pos == snap.selection
            side = int(tpx * _SELECTED_SCALE) if selected else tpx
            border = f"border:2px solid {_YELLOW};" if selected else "border:none;"
            if tile in self._pieces:
                b.setText("")
                b.setIcon(QIcon(self._pieces[tile]))
                b.setIconSize(QSize(side, side))
                b.setStyleSheet(f"QPushButton{{background:{_MANTLE};{border}}}")
            else:
                b.setText(str(tile))
                bg = _GREEN if snap.is_tile_home(pos) else _BLUE
                b.setStyleSheet(
                    f"QPushButton{{background:{bg};color:{_BASE};{border}"
                    f"border-radius:4px;font-weight:bold;}}"
                )

        if snap.solving:
            state = "Solving…"
        elif snap.is_solved:
            state = "Solved"
        else:
            state = ""
        self._stats.setText(f"Swaps: {snap.moves}    {state}".rstrip())

    # -- keyboard --

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        if key == Qt.Key.Key_X:
            self._send(Shuffle())
        elif key == Qt.Key.Key_V:
            self._send(Solve())
        elif key == Qt.Key.Key_R:
            self._send(Reset())
        elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
            self.close()
        else:
            super().keyPressEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(config: PuzzleConfig, size: int | None = None, assets_dir: Path = Path("assets")) -> None:
    """Launch the PyQt6 GUI."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(config, size or config.default_size, assets_dir)
    window.show()
    qapp.exec()
