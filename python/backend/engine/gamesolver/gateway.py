"""Solver gateways — the boundary between the game and whatever computes a path.

Every gateway returns a path whose first element is the request board
and whose last element is the goal.  A service that starts its path at
the first successor gets the request board prepended, so playback of a
``d``-move solution always makes ``d + 1`` board updates.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import requests

from backend.engine.gamesolver.solver import Solver
from backend.models.board import CELLS, Board, differs_by_one_move

logger = logging.getLogger(__name__)

DEFAULT_SOLVER_URL = "http://127.0.0.1:8000/solve"
DEFAULT_TIMEOUT = 10.0


class SolverError(RuntimeError):
    """Any transport or application-level failure to obtain a solution."""


def validate_path(path: list[Board]) -> None:
    """Raise ``SolverError`` unless each consecutive pair is one legal move."""
    for i, (before, after) in enumerate(zip(path, path[1:])):
        if not differs_by_one_move(before, after):
            raise SolverError(f"Solution step {i + 1} is not a single legal move.")


def parse_snapshot(raw: object) -> Board:
    """Build a board from one JSON snapshot of exactly nine integers."""
    if not isinstance(raw, list) or len(raw) != CELLS:
        raise SolverError(f"Solver returned a malformed board: {raw!r}")
    # JSON true/false decode to bool, which is an int subclass
    if not all(type(v) is int for v in raw):
        raise SolverError(f"Solver returned non-integer tiles: {raw!r}")
    try:
        return Board.from_flat(raw)
    except ValueError as exc:
        raise SolverError(f"Solver returned a malformed board: {exc}") from exc


def normalise_path(board: Board, path: list[Board], strict: bool = False) -> list[Board]:
    """Shape-check *path* for *board* and make it start at *board*."""
    if not path:
        raise SolverError("Solver returned an empty solution.")
    if not path[-1].is_solved():
        raise SolverError("Solution does not end at the goal board.")
    if path[0] != board:
        if not differs_by_one_move(board, path[0]):
            raise SolverError("Solution does not start at the requested board.")
        path = [board, *path]
    if strict:
        validate_path(path)
    return path


class SolverGateway(ABC):
    """Computes a solution path for a board.  Subclasses implement ``_fetch``."""

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict

    def solve(self, board: Board) -> list[Board]:
        path = self._fetch(board)
        return normalise_path(board, path, self.strict)

    @abstractmethod
    def _fetch(self, board: Board) -> list[Board]:
        """Return the raw path for *board* or raise ``SolverError``."""


class LocalSolverGateway(SolverGateway):
    """Solves in-process; useful offline and in tests."""

    def _fetch(self, board: Board) -> list[Board]:
        path = Solver.solve(board)
        if not path:
            raise SolverError("Board is unsolvable.")
        logger.debug("local solver found %d-move solution", len(path) - 1)
        return path


class HttpSolverGateway(SolverGateway):
    """POSTs ``{"state": [...]}`` and reads ``{"solution": [[...], ...]}``."""

    def __init__(
        self,
        url: str = DEFAULT_SOLVER_URL,
        timeout: float = DEFAULT_TIMEOUT,
        *,
        strict: bool = False,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(strict=strict)
        self.url = url
        self.timeout = timeout
        self._http = session or requests

    def _fetch(self, board: Board) -> list[Board]:
        try:
            response = self._http.post(
                self.url, json={"state": board.to_list()}, timeout=self.timeout
            )
        except requests.RequestException as exc:
            raise SolverError(f"Could not reach solver at {self.url}: {exc}") from exc

        if not response.ok:
            raise SolverError(
                f"Solver at {self.url} answered {response.status_code} {response.reason}"
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise SolverError("Solver returned invalid JSON.") from exc

        raw = data.get("solution") if isinstance(data, dict) else None
        if not isinstance(raw, list):
            raise SolverError("Solver response has no 'solution' list.")

        return [parse_snapshot(step) for step in raw]
