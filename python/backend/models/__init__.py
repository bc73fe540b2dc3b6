from backend.models.board import (
    GOAL,
    Board,
    Direction,
    IllegalMoveError,
    apply_move,
    is_adjacent,
    is_goal,
)

__all__ = [
    "GOAL",
    "Board",
    "Direction",
    "IllegalMoveError",
    "apply_move",
    "is_adjacent",
    "is_goal",
]
