"""Replays a solution path at a fixed cadence."""

from __future__ import annotations

from backend.models.board import Board

STEP_DELAY = 0.5  # seconds between animation frames


class SolutionPlayer:
    """Schedules the boards of a solution path against a clock.

    Step ``k`` is due at ``started_at + k * delay``.  The player never
    reads the clock itself: the owner asks how many steps are ``due`` at
    a given time and pulls them with ``step``, so a slow frame catches up
    in order instead of skipping boards.
    """

    def __init__(
        self,
        path: list[Board],
        delay: float = STEP_DELAY,
        started_at: float = 0.0,
        generation: int = 0,
    ) -> None:
        if not path:
            raise ValueError("Cannot play back an empty solution path.")
        if delay < 0:
            raise ValueError(f"Step delay must be non-negative, got {delay}.")
        self.path: tuple[Board, ...] = tuple(path)
        self.delay = delay
        self.started_at = started_at
        self.generation = generation
        self.index = 0

    # -- queries --------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.path)

    @property
    def finished(self) -> bool:
        return self.index >= len(self.path)

    @property
    def remaining(self) -> int:
        return len(self.path) - self.index

    def due_at(self, index: int) -> float:
        return self.started_at + index * self.delay

    def due(self, now: float) -> int:
        """Number of not-yet-applied steps whose time has come at *now*."""
        owed = 0
        # epsilon keeps a tick landing exactly on a boundary from missing it
        while owed < self.remaining and self.due_at(self.index + owed) <= now + 1e-9:
            owed += 1
        return owed

    # -- playback -------------------------------------------------------------

    def step(self) -> Board:
        """Return the next board and advance the index."""
        if self.finished:
            raise IndexError("Solution path already fully played.")
        board = self.path[self.index]
        self.index += 1
        return board
