"""Solve replay timers backed by Qt's event loop."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer


class _QtTimer:
    def __init__(self, timer: QTimer) -> None:
        self._timer = timer
        self._live = True
        timer.timeout.connect(self._finish)

    def _finish(self) -> None:
        self._live = False
        self._timer.deleteLater()

    def cancel(self) -> None:
        if self._live:
            self._live = False
            self._timer.stop()
            self._timer.deleteLater()


class QtScheduler:
    """Runs callbacks through single-shot ``QTimer`` objects owned by *parent*."""

    def __init__(self, parent: QObject) -> None:
        self._parent = parent

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> _QtTimer:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.timeout.connect(callback)
        handle = _QtTimer(timer)
        timer.start(delay_ms)
        return handle
