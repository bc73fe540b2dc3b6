"""PyQt6 GUI frontend — tile buttons, Solve and New Game.

A ``QTimer`` pumps the game session; the board is repainted whenever
the pump reports a change.
"""

from __future__ import annotations

import sys

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from backend.config import Settings
from backend.engine.gameplay import GameSession
from backend.engine.gamestate import Phase
from backend.models.board import Direction

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
_BLUE_H = "#a4c4fc"
_GREEN = "#a6e3a1"
_YELLOW = "#f9e2af"
_RED = "#f38ba8"
_RED_H = "#f5a0b8"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
"""

_PUMP_MS = 30
_TILE_PX = 96


def _styled_btn(
    text: str,
    *,
    bg: str = _SURFACE0,
    hover: str = _SURFACE1,
    fg: str = _TEXT,
    min_w: int = 140,
) -> QPushButton:
    btn = QPushButton(text)
    btn.setFont(QFont("Helvetica", 14, QFont.Weight.Bold))
    btn.setMinimumHeight(44)
    btn.setMinimumWidth(min_w)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setStyleSheet(
        f"QPushButton {{ background:{bg}; color:{fg};"
        f" border:none; border-radius:8px; padding:6px 18px; }}"
        f" QPushButton:hover {{ background:{hover}; }}"
        f" QPushButton:disabled {{ background:{_SURFACE0}; color:{_OVERLAY0}; }}"
    )
    return btn


class _MainWindow(QMainWindow):
    _KEYS = {
        Qt.Key.Key_Up: Direction.UP,
        Qt.Key.Key_W: Direction.UP,
        Qt.Key.Key_Down: Direction.DOWN,
        Qt.Key.Key_S: Direction.DOWN,
        Qt.Key.Key_Left: Direction.LEFT,
        Qt.Key.Key_A: Direction.LEFT,
        Qt.Key.Key_Right: Direction.RIGHT,
        Qt.Key.Key_D: Direction.RIGHT,
    }

    def __init__(self, session: GameSession) -> None:
        super().__init__()
        self._session = session

        self.setWindowTitle("8-Puzzle")
        self.setStyleSheet(_GLOBAL_CSS)
        self.setMinimumSize(420, 520)

        page = QWidget()
        page.setObjectName("page")
        self.setCentralWidget(page)
        root = QVBoxLayout(page)
        root.setSpacing(10)
        root.setContentsMargins(20, 16, 20, 16)

        self._title = QLabel()
        self._title.setFont(QFont("Helvetica", 18, QFont.Weight.Bold))
        self._title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._title)

        frame = QFrame()
        frame.setStyleSheet(f"background:{_MANTLE}; border-radius:10px;")
        grid = QGridLayout(frame)
        grid.setSpacing(6)
        grid.setContentsMargins(8, 8, 8, 8)
        root.addWidget(frame, alignment=Qt.AlignmentFlag.AlignCenter)

        self._tiles: list[QPushButton] = []
        for pos in range(9):
            b = QPushButton()
            b.setFixedSize(_TILE_PX, _TILE_PX)
            b.setFont(QFont("Helvetica", 28, QFont.Weight.Bold))
            b.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            b.clicked.connect(lambda _, p=pos: self._click(p))
            grid.addWidget(b, pos // 3, pos % 3)
            self._tiles.append(b)

        row = QHBoxLayout()
        row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._solve_btn = _styled_btn("Solve it", bg=_RED, hover=_RED_H, fg=_BASE)
        self._solve_btn.clicked.connect(self._solve)
        self._new_btn = _styled_btn("New Game")
        self._new_btn.clicked.connect(self._new_game)
        row.addWidget(self._solve_btn)
        row.addWidget(self._new_btn)
        root.addLayout(row)

        self._status = QLabel()
        self._status.setFont(QFont("Helvetica", 12))
        self._status.setStyleSheet(f"color:{_YELLOW};")
        self._status.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._status)

        hint = QLabel("Arrows / WASD / 1-9  move     V  solve     N  new     X  cancel     Esc  quit")
        hint.setFont(QFont("Helvetica", 11))
        hint.setStyleSheet(f"color:{_OVERLAY0};")
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(hint)

        self._timer = QTimer(self)
        self._timer.timeout.connect(self._tick)
        self._timer.start(_PUMP_MS)

        self._sync()

    # -- helpers --

    def _sync(self) -> None:
        game = self._session.game
        for pos, val in enumerate(game.board.tiles):
            b = self._tiles[pos]
            if val == 0:
                b.setText("")
                b.setStyleSheet(
                    f"QPushButton{{background:{_MANTLE};border:none;border-radius:8px;}}"
                )
            else:
                bg = _GREEN if game.is_won else _BLUE
                b.setText(str(val))
                b.setStyleSheet(
                    f"QPushButton{{background:{bg};color:{_BASE};"
                    f"border:none;border-radius:8px;font-weight:bold;}}"
                    f"QPushButton:hover{{background:{_BLUE_H if not game.is_won else bg};}}"
                )

        phase = game.phase_name
        if phase in (Phase.SOLVING, Phase.ANIMATING):
            self._solve_btn.setText("Solving...")
        elif phase == Phase.SOLVED:
            self._solve_btn.setText("Solved!")
        else:
            self._solve_btn.setText("Solve it")
        self._solve_btn.setEnabled(game.can_solve)

        if game.is_won:
            self._title.setText("Congratulations!")
            self._title.setStyleSheet(f"color:{_GREEN};")
        else:
            self._title.setText(f"Click a tile to move it.   Moves: {game.moves}")
            self._title.setStyleSheet(f"color:{_TEXT};")

    def _tick(self) -> None:
        changed = self._session.pump()
        notice = self._session.game.pop_notice()
        if notice:
            self._status.setText(notice)
        if changed or notice:
            self._sync()

    def _click(self, pos: int) -> None:
        if self._session.move_tile(pos):
            self._sync()

    def _solve(self) -> None:
        if self._session.solve():
            self._status.setText("")
            self._sync()

    def _new_game(self) -> None:
        self._session.new_game()
        self._status.setText("")
        self._sync()

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        if key in self._KEYS:
            self._session.move(self._KEYS[key])
        elif Qt.Key.Key_1.value <= key <= Qt.Key.Key_9.value:
            self._session.move_tile(key - Qt.Key.Key_1.value)
        elif key in (Qt.Key.Key_N, Qt.Key.Key_R):
            self._new_game()
        elif key == Qt.Key.Key_V:
            self._solve()
        elif key == Qt.Key.Key_X:
            if self._session.cancel():
                self._status.setText("Stopped.")
        elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
            self.close()
            return
        else:
            super().keyPressEvent(event)
            return
        self._sync()

    def closeEvent(self, event) -> None:  # noqa: N802
        self._timer.stop()
        super().closeEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(settings: Settings) -> None:
    """Launch the PyQt6 GUI."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    with settings.make_session() as session:
        window = _MainWindow(session)
        window.show()
        qapp.exec()
