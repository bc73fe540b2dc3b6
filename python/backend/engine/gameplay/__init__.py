from backend.engine.gameplay.game import GamePlay
from backend.engine.gameplay.session import GameSession

__all__ = ["GamePlay", "GameSession"]
