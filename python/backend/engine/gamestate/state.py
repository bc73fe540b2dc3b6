"""Game phases.

Each phase is its own small frozen dataclass so that only the phases
that need data carry it: a ``Solving`` phase always has a ticket and an
``Animating`` phase always has a player.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from backend.engine.gameanimator.player import SolutionPlayer
from backend.models.board import Board


class Phase(StrEnum):
    IDLE = "idle"
    SHUFFLING = "shuffling"
    SOLVING = "solving"
    ANIMATING = "animating"
    SOLVED = "solved"


@dataclass(frozen=True)
class SolveTicket:
    """Identifies one solve request; stale tickets are ignored."""

    generation: int
    board: Board


@dataclass(frozen=True)
class Idle:
    name = Phase.IDLE


@dataclass(frozen=True)
class Shuffling:
    name = Phase.SHUFFLING


@dataclass(frozen=True)
class Solving:
    ticket: SolveTicket
    name = Phase.SOLVING


@dataclass(frozen=True)
class Animating:
    player: SolutionPlayer
    name = Phase.ANIMATING


@dataclass(frozen=True)
class Solved:
    name = Phase.SOLVED


GamePhase = Idle | Shuffling | Solving | Animating | Solved
