#!/usr/bin/env python3
"""8-Puzzle.

Usage::

    python main.py                    # interactive menu
    python main.py -f rich --local    # Rich terminal, in-process solver
    python main.py -f pygame          # Pygame GUI, HTTP solver
    python main.py -f pyqt --solver-url http://host:8000/solve
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import Settings  # noqa: E402
from backend.engine.gameanimator import STEP_DELAY  # noqa: E402
from backend.engine.gamesolver import DEFAULT_SOLVER_URL  # noqa: E402
from backend.engine.gamesolver.gateway import DEFAULT_TIMEOUT  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


_RUNNERS = {
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
}


# -- helpers ------------------------------------------------------------------


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _launch(frontend: Frontend, settings: Settings) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(settings)


def _menu_loop(settings: Settings) -> None:
    choices = {"1": Frontend.rich, "2": Frontend.pygame, "3": Frontend.pyqt}
    while True:
        print()
        print("  ====================================")
        print("            8 - P U Z Z L E           ")
        print("  ====================================")
        print()
        print("  1.  Play  (Rich Terminal)")
        print("  2.  Play  (Pygame GUI)")
        print("  3.  Play  (PyQt GUI)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return
        if choice in choices:
            _launch(choices[choice], settings)
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    solver_url: str = typer.Option(
        DEFAULT_SOLVER_URL, "--solver-url",
        envvar="PUZZLE_SOLVER_URL",
        help="Endpoint of the remote solver service.",
    ),
    local: bool = typer.Option(
        False, "--local",
        envvar="PUZZLE_LOCAL_SOLVER",
        help="Solve in-process instead of calling the solver service.",
    ),
    delay: float = typer.Option(
        STEP_DELAY, "--delay",
        min=0.0,
        envvar="PUZZLE_STEP_DELAY",
        help="Seconds between animation steps.",
    ),
    timeout: float = typer.Option(
        DEFAULT_TIMEOUT, "--timeout",
        min=0.1,
        envvar="PUZZLE_SOLVER_TIMEOUT",
        help="Solver request timeout in seconds.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="PUZZLE_SEED",
        help="Seed for reproducible shuffles.",
    ),
    strict: bool = typer.Option(
        False, "--strict",
        help="Check that every solution step is a single legal move.",
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level",
        envvar="PUZZLE_LOG_LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    ),
) -> None:
    """8-Puzzle."""
    settings = Settings(
        solver_url=solver_url,
        use_local_solver=local,
        step_delay=delay,
        request_timeout=timeout,
        seed=seed,
        strict_paths=strict,
        log_level=log_level,
    )
    _setup_logging(settings.log_level)

    if frontend is None:
        _menu_loop(settings)
        return

    _launch(frontend, settings)


if __name__ == "__main__":
    app()
