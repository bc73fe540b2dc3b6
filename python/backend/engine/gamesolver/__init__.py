from backend.engine.gamesolver.gateway import (
    DEFAULT_SOLVER_URL,
    HttpSolverGateway,
    LocalSolverGateway,
    SolverError,
    SolverGateway,
    validate_path,
)
from backend.engine.gamesolver.solver import Solver

__all__ = [
    "DEFAULT_SOLVER_URL",
    "HttpSolverGateway",
    "LocalSolverGateway",
    "Solver",
    "SolverError",
    "SolverGateway",
    "validate_path",
]
