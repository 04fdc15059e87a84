"""Single-keypress reader for the terminal frontend.

Maps arrow keys, WASD and the puzzle's command keys to action strings
without requiring Enter.  Works on macOS / Linux (tty+termios) and
Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys

# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    " ": "select",
    "\r": "select",
    "\n": "select",
    "x": "shuffle",
    "v": "solve",
    "n": "hint",
    "r": "reset",
    "+": "grow",
    "=": "grow",
    "-": "shrink",
    "_": "shrink",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def _resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    action = _KEY_MAP.get(ch) or _KEY_MAP.get(ch.lower())
    if action:
        return action
    return ch if ch.isprintable() else ""


# -- public API ----------------------------------------------------------------


def get_key_timeout(timeout: float) -> str | None:
    """Read a single keypress, waiting at most *timeout* seconds.

    Returns ``None`` when no key arrived in time, otherwise one of:

        "up", "down", "left", "right"  — move the cursor
        "select"                       — Space / Enter (click the tile)
        "shuffle", "solve", "hint"     — X / V / N
        "reset"                        — R
        "grow", "shrink"               — + / -
        "quit"                         — Q / Ctrl-C / Escape
        "<char>"                       — unmapped printable char
        ""                             — unrecognised key
    """
    if os.name == "nt":
        return _read_windows(timeout)
    return _read_unix(timeout)


def _read_windows(timeout: float) -> str | None:
    import msvcrt  # type: ignore[import-not-found]
    import time

    end = time.monotonic() + timeout
    while time.monotonic() < end:
        if msvcrt.kbhit():
            ch = msvcrt.getwch()
            if ch in ("\x00", "\xe0"):
                code = msvcrt.getwch()
                return {"H": "up", "P": "down", "K": "left", "M": "right"}.get(code, "")
            if ch == "\x1b":
                return "quit"
            return _resolve(ch)
        time.sleep(0.01)
    return None


def _read_unix(timeout: float) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)

    def _next(wait: float) -> str | None:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        # os.read is unbuffered, so select() still sees the rest of a
        # multi-byte escape sequence.
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    try:
        tty.setraw(fd)
        ch = _next(timeout)
        if ch is None:
            return None
        if ch != "\x1b":
            return _resolve(ch)

        # ESC [ A/B/C/D, or a bare Escape
        if _next(0.05) != "[":
            return "quit"
        code = _next(0.05)
        return _ARROW_MAP.get(code or "", "")
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
