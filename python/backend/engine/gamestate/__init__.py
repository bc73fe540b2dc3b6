from backend.engine.gamestate.state import (
    Animating,
    GamePhase,
    Idle,
    Phase,
    Shuffling,
    Solved,
    SolveTicket,
    Solving,
)

__all__ = [
    "Animating",
    "GamePhase",
    "Idle",
    "Phase",
    "Shuffling",
    "Solved",
    "SolveTicket",
    "Solving",
]
