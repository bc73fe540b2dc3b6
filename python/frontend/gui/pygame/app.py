"""Pygame GUI frontend — click tiles, solve, start over.

The frame loop pumps the game session every tick, so animation steps
land on schedule regardless of the frame rate.
"""

from __future__ import annotations

import pygame

from backend.config import Settings
from backend.engine.gameplay import GameSession
from backend.engine.gamestate import Phase
from backend.models.board import Direction

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
COL_GREEN = (166, 227, 161)
COL_RED = (243, 139, 168)
COL_YELLOW = (249, 226, 175)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 420, 560
TILE_GAP = 6
BOARD_TOP = 80
BOARD_PX = 360
TILE_PX = (BOARD_PX - 4 * TILE_GAP) // 3
FPS = 30


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "enabled", "_hot")

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
        self.enabled = True
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        if not self.enabled:
            c = COL_SURFACE0
        else:
            c = self.hover if self._hot else self.bg
        pygame.draw.rect(surf, c, self.rect, border_radius=8)
        lbl = self.font.render(self.text, True, self.fg if self.enabled else COL_OVERLAY0)
        surf.blit(
            lbl,
            (
                self.rect.centerx - lbl.get_width() // 2,
                self.rect.centery - lbl.get_height() // 2,
            ),
        )

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.enabled and self.rect.collidepoint(pos)


def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


def _tile_rect(pos: int) -> pygame.Rect:
    r, c = divmod(pos, 3)
    ox = _cx(BOARD_PX) + TILE_GAP
    oy = BOARD_TOP + TILE_GAP
    return pygame.Rect(
        ox + c * (TILE_PX + TILE_GAP), oy + r * (TILE_PX + TILE_GAP), TILE_PX, TILE_PX
    )


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    _KEYS = {
        pygame.K_UP: Direction.UP,
        pygame.K_w: Direction.UP,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_s: Direction.DOWN,
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_a: Direction.LEFT,
        pygame.K_RIGHT: Direction.RIGHT,
        pygame.K_d: Direction.RIGHT,
    }

    def __init__(self, session: GameSession) -> None:
        self._session = session
        self._status_msg = ""

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("8-Puzzle")
        self._clock = pygame.time.Clock()

        self._f_title = pygame.font.SysFont("Helvetica", 26, bold=True)
        self._f_tile = pygame.font.SysFont("Helvetica", 48, bold=True)
        self._f_btn = pygame.font.SysFont("Helvetica", 16, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        bw, gap = 150, 16
        sx = _cx(2 * bw + gap)
        by = BOARD_TOP + BOARD_PX + 20
        self._solve_btn = _Btn(
            (sx, by, bw, 44), "Solve it", self._f_btn,
            bg=COL_RED, hover=(255, 170, 185), fg=COL_BASE,
        )
        self._new_btn = _Btn((sx + bw + gap, by, bw, 44), "New Game", self._f_btn)

    # ── drawing ─────────────────────────────────────────────────────────────

    def _solve_label(self) -> str:
        phase = self._session.game.phase_name
        if phase in (Phase.SOLVING, Phase.ANIMATING):
            return "Solving..."
        if phase == Phase.SOLVED:
            return "Solved!"
        return "Solve it"

    def _draw(self) -> None:
        game = self._session.game
        board = game.board
        self._surf.fill(COL_BASE)

        title = "Congratulations!" if game.is_won else "Click a tile to move it."
        _blit_center(
            self._surf,
            self._f_title.render(title, True, COL_GREEN if game.is_won else COL_TEXT),
            24,
        )

        pygame.draw.rect(
            self._surf,
            COL_MANTLE,
            pygame.Rect(_cx(BOARD_PX), BOARD_TOP, BOARD_PX, BOARD_PX),
            border_radius=10,
        )
        for pos, val in enumerate(board.tiles):
            if val == 0:
                continue
            rect = _tile_rect(pos)
            col = COL_GREEN if game.is_won else COL_BLUE
            pygame.draw.rect(self._surf, col, rect, border_radius=6)
            lbl = self._f_tile.render(str(val), True, COL_BASE)
            self._surf.blit(
                lbl,
                (rect.centerx - lbl.get_width() // 2, rect.centery - lbl.get_height() // 2),
            )

        self._solve_btn.text = self._solve_label()
        self._solve_btn.enabled = game.can_solve
        self._solve_btn.draw(self._surf)
        self._new_btn.draw(self._surf)

        y = self._solve_btn.rect.bottom + 14
        if self._status_msg:
            _blit_center(self._surf, self._f_small.render(self._status_msg, True, COL_YELLOW), y)
        _blit_center(
            self._surf,
            self._f_small.render(
                f"Moves: {game.moves}     Arrows / WASD / 1-9  move     X  cancel     Esc  quit",
                True,
                COL_OVERLAY0,
            ),
            WIN_H - 28,
        )

    # ── event handling ──────────────────────────────────────────────────────

    def _on_event(self, ev: pygame.event.Event) -> bool:
        session = self._session
        if ev.type == pygame.MOUSEMOTION:
            self._solve_btn.motion(ev.pos)
            self._new_btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._solve_btn.hit(ev.pos):
                session.solve()
                self._status_msg = ""
            elif self._new_btn.hit(ev.pos):
                session.new_game()
                self._status_msg = ""
            else:
                for pos in range(9):
                    if _tile_rect(pos).collidepoint(ev.pos):
                        session.move_tile(pos)
                        break
        elif ev.type == pygame.KEYDOWN:
            if ev.key in self._KEYS:
                session.move(self._KEYS[ev.key])
            elif pygame.K_1 <= ev.key <= pygame.K_9:
                session.move_tile(ev.key - pygame.K_1)
            elif ev.key in (pygame.K_n, pygame.K_r):
                session.new_game()
                self._status_msg = ""
            elif ev.key == pygame.K_v:
                session.solve()
            elif ev.key == pygame.K_x:
                if session.cancel():
                    self._status_msg = "Stopped."
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT or not self._on_event(ev):
                    running = False
                    break

            self._session.pump()
            notice = self._session.game.pop_notice()
            if notice:
                self._status_msg = notice

            self._draw()
            pygame.display.flip()
            self._clock.tick(FPS)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(settings: Settings) -> None:
    """Launch the Pygame GUI."""
    with settings.make_session() as session:
        PygameApp(session).run_loop()
