"""Generates solvable 8-puzzle boards."""

from __future__ import annotations

import random
from collections.abc import Iterator

from backend.models.board import Board, neighbors

SHUFFLE_MOVES = 100


class GameGenerator:
    """Creates solvable puzzles by walking random legal moves from the goal."""

    @staticmethod
    def solved() -> Board:
        """Return the goal-state board (tiles in order, blank bottom-right)."""
        return Board.goal()

    @staticmethod
    def walk(
        rng: random.Random | None = None, iterations: int = SHUFFLE_MOVES
    ) -> Iterator[Board]:
        """Yield the board after each random move, starting from the goal.

        Immediate back-moves are allowed; they only shorten the effective
        shuffle distance.
        """
        rng = rng or random.Random()
        board = GameGenerator.solved()
        for _ in range(iterations):
            blank = board.blank_pos
            # Every cell of a 3×3 grid has at least two neighbours.
            target = rng.choice(neighbors(blank))
            board = board.swap(blank, target)
            yield board

    @staticmethod
    def generate(
        rng: random.Random | None = None, iterations: int = SHUFFLE_MOVES
    ) -> Board:
        """Return a random *solvable* board."""
        board = GameGenerator.solved()
        for board in GameGenerator.walk(rng, iterations):
            pass
        return board
