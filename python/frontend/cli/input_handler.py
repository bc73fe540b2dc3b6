"""Single-key input for the Rich terminal frontend.

Keys are turned into action strings the app dispatches on:

    "up" / "down" / "left" / "right"   slide a tile (arrows, WASD)
    "cell:0" .. "cell:8"               digits 1-9, the cell in reading order
    "new"                              n / r
    "solve"                            v
    "cancel"                           x
    "quit"                             q / Escape / Ctrl-C
    ""                                 anything else

POSIX terminals are read raw through termios; Windows uses msvcrt.
"""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Callable

_BINDINGS: tuple[tuple[str, str], ...] = (
    ("wW", "up"),
    ("sS", "down"),
    ("aA", "left"),
    ("dD", "right"),
    ("nNrR", "new"),
    ("vV", "solve"),
    ("xX", "cancel"),
    ("qQ\x03", "quit"),
)

_ACTIONS: dict[str, str] = {ch: action for chars, action in _BINDINGS for ch in chars}
_ACTIONS.update({str(cell + 1): f"cell:{cell}" for cell in range(9)})

# Final byte of an ``ESC [ x`` cursor sequence.
_CURSOR = {"A": "up", "B": "down", "C": "right", "D": "left"}

_ESC = "\x1b"
_SEQ_WAIT = 0.1  # seconds to wait for the rest of an escape sequence


def cell_of(action: str) -> int | None:
    """Return the cell index of a ``cell:<i>`` action, else None."""
    prefix, _, index = action.partition(":")
    if prefix != "cell" or not index.isdigit():
        return None
    return int(index)


def _decode(first: str, read_more: Callable[[], str | None]) -> str:
    """Turn one keypress into an action; *read_more* yields follow-up bytes."""
    if first != _ESC:
        return _ACTIONS.get(first, "")
    if read_more() != "[":
        return "quit"  # lone Escape
    return _CURSOR.get(read_more() or "", "")


# -- POSIX --------------------------------------------------------------------


def _read_posix(timeout: float) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()

    def read_byte(wait: float) -> str | None:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        # os.read bypasses Python's buffer so select sees every pending byte
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        first = read_byte(timeout)
        if first is None:
            return None
        return _decode(first, lambda: read_byte(_SEQ_WAIT))
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


# -- Windows ------------------------------------------------------------------


def _read_windows(timeout: float) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    deadline = time.monotonic() + timeout
    while not msvcrt.kbhit():
        if time.monotonic() >= deadline:
            return None
        time.sleep(0.02)
    first = msvcrt.getwch()
    if first in ("\x00", "\xe0"):
        # extended key: arrows arrive as a second code
        return {"H": "up", "P": "down", "M": "right", "K": "left"}.get(msvcrt.getwch(), "")
    return _decode(first, lambda: None)


def get_key_timeout(timeout: float) -> str | None:
    """Wait up to *timeout* seconds for a key.

    Returns the action string, or ``None`` if nothing was pressed.
    """
    if os.name == "nt":
        return _read_windows(timeout)
    return _read_posix(timeout)
