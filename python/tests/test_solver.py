"""Local solver test suite.

Boards come from seeded shuffles.  The returned path is replayed through
the real game engine to verify correctness.
"""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay.game import GamePlay
from backend.engine.gamesolver.solver import Solver, manhattan
from backend.models.board import GOAL, Board, differs_by_one_move

from tests.conftest import TWO_AWAY

_SEEDS = list(range(12))


# -- helpers ------------------------------------------------------------------


def _assert_solve(board: Board) -> None:
    """Solve the board and verify the returned path reaches the goal state."""
    path = Solver.solve(board)

    # ---- path sanity --------------------------------------------------------
    assert isinstance(path, list), "solve() must return a list of Board"
    assert path[0] == board
    assert path[-1].is_solved()
    for before, after in zip(path, path[1:]):
        assert differs_by_one_move(before, after)

    # ---- replay the path as user moves and check win -----------------------
    game = GamePlay.from_board(board)
    for i, nxt in enumerate(path[1:]):
        ok = game.move_tile(nxt.blank_pos)
        assert ok, f"Step {i} was invalid at blank {game.board.blank_pos}"
        assert game.board == nxt

    assert game.is_won, f"Board not solved after {len(path) - 1} moves"


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize("seed", _SEEDS)
def test_solve_shuffled(seed: int) -> None:
    _assert_solve(GameGenerator.generate(random.Random(seed)))


def test_solve_is_optimal_for_short_case() -> None:
    path = Solver.solve(TWO_AWAY)
    assert len(path) == 3


def test_solved_board_path_is_just_itself() -> None:
    assert Solver.solve(Board.goal()) == [Board.goal()]


def test_unsolvable_board_returns_empty() -> None:
    swapped = Board.from_flat([2, 1, 3, 4, 5, 6, 7, 8, 0])
    assert not Solver.is_solvable(swapped)
    assert Solver.solve(swapped) == []


def test_manhattan() -> None:
    assert manhattan(GOAL) == 0
    assert manhattan(TWO_AWAY.tiles) == 2
