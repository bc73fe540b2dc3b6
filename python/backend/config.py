"""Runtime settings shared by every front end."""

from __future__ import annotations

import random
from dataclasses import dataclass

from backend.engine.gameanimator.player import STEP_DELAY
from backend.engine.gameplay.session import GameSession
from backend.engine.gamesolver.gateway import (
    DEFAULT_SOLVER_URL,
    DEFAULT_TIMEOUT,
    HttpSolverGateway,
    LocalSolverGateway,
    SolverGateway,
)


@dataclass(frozen=True)
class Settings:
    solver_url: str = DEFAULT_SOLVER_URL
    use_local_solver: bool = False
    step_delay: float = STEP_DELAY
    request_timeout: float = DEFAULT_TIMEOUT
    seed: int | None = None
    strict_paths: bool = False
    log_level: str = "WARNING"

    def make_gateway(self) -> SolverGateway:
        if self.use_local_solver:
            return LocalSolverGateway(strict=self.strict_paths)
        return HttpSolverGateway(
            self.solver_url, self.request_timeout, strict=self.strict_paths
        )

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)

    def make_session(self) -> GameSession:
        return GameSession(
            self.make_gateway(), step_delay=self.step_delay, rng=self.make_rng()
        )
