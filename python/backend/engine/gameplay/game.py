"""Core gameplay logic — the phase machine that gates every board change."""

from __future__ import annotations

import logging
import random

from backend.engine.gameanimator.player import STEP_DELAY, SolutionPlayer
from backend.engine.gamegenerator import SHUFFLE_MOVES, GameGenerator
from backend.engine.gamestate import (
    Animating,
    GamePhase,
    Idle,
    Phase,
    Shuffling,
    Solved,
    SolveTicket,
    Solving,
)
from backend.models.board import Board, Direction, is_adjacent

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session.

    The board and the phase always change together.  Requests that the
    current phase does not allow return ``False``/``None`` and change
    nothing.  Every new game or cancellation bumps ``generation`` so
    solver responses and playback ticks issued earlier are ignored.
    """

    def __init__(
        self,
        *,
        rng: random.Random | None = None,
        step_delay: float = STEP_DELAY,
        shuffle_moves: int = SHUFFLE_MOVES,
    ) -> None:
        self._rng = rng or random.Random()
        self.step_delay = step_delay
        self.shuffle_moves = shuffle_moves
        self.generation = 0
        self.moves = 0
        self._board = GameGenerator.solved()
        self._phase: GamePhase = Idle()
        self._notice: str | None = None
        self.new_game()

    @classmethod
    def from_board(cls, board: Board, **kwargs) -> GamePlay:
        """Create a game session from an existing board (e.g. loaded from file)."""
        obj = cls(**kwargs)
        obj._board = board
        obj._phase = Solved() if board.is_solved() else Idle()
        return obj

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self._board

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def phase_name(self) -> Phase:
        return self._phase.name

    @property
    def is_won(self) -> bool:
        """Authoritative solved signal."""
        return isinstance(self._phase, Solved)

    @property
    def is_solved(self) -> bool:
        """Observable goal check on the current board."""
        return self._board.is_solved()

    @property
    def can_solve(self) -> bool:
        return isinstance(self._phase, (Idle, Solved)) and not self._board.is_solved()

    @property
    def is_busy(self) -> bool:
        return isinstance(self._phase, (Solving, Animating))

    def pop_notice(self) -> str | None:
        """Return the pending user-visible notice once, then clear it."""
        notice, self._notice = self._notice, None
        return notice

    # -- transitions ----------------------------------------------------------

    def _set(self, phase: GamePhase, board: Board | None = None) -> None:
        if board is not None:
            self._board = board
        if phase.name != self._phase.name:
            logger.debug("phase %s -> %s", self._phase.name, phase.name)
        self._phase = phase

    def new_game(self) -> Board:
        """Start over from a fresh shuffle.  Accepted in every phase."""
        self.generation += 1
        self._set(Shuffling())
        board = GameGenerator.generate(self._rng, self.shuffle_moves)
        self.moves = 0
        self._notice = None
        self._set(Idle(), board)
        logger.info("new game (generation %d)", self.generation)
        return board

    def cancel(self) -> bool:
        """Abandon an in-flight solve or playback, keeping the current board."""
        if not self.is_busy:
            return False
        self.generation += 1
        self._set(Solved() if self._board.is_solved() else Idle())
        logger.info("solve cancelled")
        return True

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        target = self._board.target_for(direction)
        if target is None:
            return False
        return self.move_tile(target)

    def move_tile(self, pos: int) -> bool:
        """Move the tile at *pos* into the adjacent blank.

        Returns True if the game was idle, the tile was adjacent to the
        blank and the move was applied.
        """
        if not isinstance(self._phase, Idle):
            return False
        blank = self._board.blank_pos
        if not is_adjacent(blank, pos):
            return False

        board = self._board.swap(blank, pos)
        self.moves += 1
        self._set(Solved() if board.is_solved() else Idle(), board)
        return True

    # -- solving --------------------------------------------------------------

    def request_solve(self) -> SolveTicket | None:
        """Enter ``Solving`` and return the ticket the gateway reply must carry."""
        if not self.can_solve:
            return None
        self.generation += 1
        ticket = SolveTicket(self.generation, self._board)
        self._set(Solving(ticket))
        return ticket

    def _is_current(self, ticket: SolveTicket) -> bool:
        phase = self._phase
        return isinstance(phase, Solving) and phase.ticket == ticket

    def accept_solution(self, ticket: SolveTicket, path: list[Board], now: float) -> bool:
        """Adopt *path* for playback starting at *now*; step 0 is applied at once."""
        if not self._is_current(ticket):
            logger.debug("dropping stale solution for generation %d", ticket.generation)
            return False
        if not path:
            return self.reject_solution(ticket, "Solver returned an empty path.")

        player = SolutionPlayer(
            path, self.step_delay, started_at=now, generation=ticket.generation
        )
        self._set(Animating(player))
        self.advance(now)
        return True

    def reject_solution(self, ticket: SolveTicket, error: BaseException | str) -> bool:
        """Fall back to ``Idle`` after a failed solve, leaving one notice."""
        if not self._is_current(ticket):
            logger.debug("dropping stale failure for generation %d", ticket.generation)
            return False
        logger.warning("solve failed: %s", error)
        self._notice = f"Could not solve: {error}"
        self._set(Idle())
        return True

    def advance(self, now: float) -> int:
        """Apply every playback step due at *now*; return how many were applied."""
        phase = self._phase
        if not isinstance(phase, Animating):
            return 0
        player = phase.player
        if player.generation != self.generation:
            return 0

        applied = 0
        for _ in range(player.due(now)):
            self._set(phase, player.step())
            applied += 1

        if player.finished:
            self._set(Solved())
            logger.info("solution played back in %d steps", len(player))
        return applied
