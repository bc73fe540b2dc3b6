"""Front-end facing session: one game, one solver, one clock.

Front ends call ``pump`` from their event loop.  Solver replies are
computed on a worker thread but only ever applied to the game from the
thread that calls ``pump``.
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable
from concurrent.futures import Executor, Future, ThreadPoolExecutor

from backend.engine.gameanimator.player import STEP_DELAY
from backend.engine.gameplay.game import GamePlay
from backend.engine.gamesolver.gateway import SolverGateway
from backend.engine.gamestate import SolveTicket
from backend.models.board import Board, Direction

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(
        self,
        gateway: SolverGateway,
        *,
        step_delay: float = STEP_DELAY,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
        executor: Executor | None = None,
    ) -> None:
        self.gateway = gateway
        self.clock = clock
        self.game = GamePlay(rng=rng, step_delay=step_delay)
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="solver"
        )
        self._owns_executor = executor is None
        self._pending: tuple[SolveTicket, Future] | None = None

    # -- user commands --------------------------------------------------------

    def new_game(self) -> Board:
        self._drop_pending()
        return self.game.new_game()

    def cancel(self) -> bool:
        self._drop_pending()
        return self.game.cancel()

    def move(self, direction: Direction) -> bool:
        return self.game.move(direction)

    def move_tile(self, pos: int) -> bool:
        return self.game.move_tile(pos)

    def solve(self) -> bool:
        """Send the current board to the solver.  Returns False if not allowed."""
        ticket = self.game.request_solve()
        if ticket is None:
            return False
        logger.info("requesting solution for %s", ticket.board.to_list())
        future = self._executor.submit(self.gateway.solve, ticket.board)
        self._pending = (ticket, future)
        return True

    # -- event loop -----------------------------------------------------------

    def pump(self) -> bool:
        """Deliver a finished solver reply and apply due playback steps.

        Returns True if the board or phase changed.
        """
        changed = False
        if self._pending is not None:
            ticket, future = self._pending
            if future.done():
                self._pending = None
                changed = self._deliver(ticket, future)
        return self.game.advance(self.clock()) > 0 or changed

    def _deliver(self, ticket: SolveTicket, future: Future) -> bool:
        try:
            path = future.result()
        except Exception as exc:  # any gateway failure is a single failed solve
            return self.game.reject_solution(ticket, exc)
        return self.game.accept_solution(ticket, path, self.clock())

    def _drop_pending(self) -> None:
        if self._pending is not None:
            ticket, future = self._pending
            future.cancel()
            logger.debug("discarding pending solve (generation %d)", ticket.generation)
            self._pending = None

    def close(self) -> None:
        self._drop_pending()
        if self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)

    def __enter__(self) -> GameSession:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
