"""Shared fixtures: a hand-driven clock and a hand-driven executor."""

from __future__ import annotations

import random
from concurrent.futures import Executor, Future

import pytest

from backend.engine.gamesolver import LocalSolverGateway
from backend.models.board import Board


class ManualClock:
    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ManualExecutor(Executor):
    """Queues submitted calls; tests decide when (and whether) they run."""

    def __init__(self) -> None:
        self.jobs: list[tuple[Future, object, tuple]] = []

    def submit(self, fn, /, *args, **kwargs) -> Future:
        future: Future = Future()
        self.jobs.append((future, fn, args))
        return future

    def run_all(self) -> None:
        jobs, self.jobs = self.jobs, []
        for future, fn, args in jobs:
            if not future.set_running_or_notify_cancel():
                continue
            try:
                future.set_result(fn(*args))
            except Exception as exc:
                future.set_exception(exc)


class RecordingGateway(LocalSolverGateway):
    """Local solver that remembers every board it was asked about."""

    def __init__(self) -> None:
        super().__init__(strict=True)
        self.calls: list[Board] = []

    def solve(self, board: Board) -> list[Board]:
        self.calls.append(board)
        return super().solve(board)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def executor() -> ManualExecutor:
    return ManualExecutor()


@pytest.fixture
def gateway() -> RecordingGateway:
    return RecordingGateway()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


# Two moves from the goal: blank at 6.
TWO_AWAY = Board.from_flat([1, 2, 3, 4, 5, 6, 0, 7, 8])
# One move from the goal: blank at 7.
ONE_AWAY = Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
