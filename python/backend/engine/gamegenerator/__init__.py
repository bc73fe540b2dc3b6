from backend.engine.gamegenerator.generator import SHUFFLE_MOVES, GameGenerator

__all__ = ["SHUFFLE_MOVES", "GameGenerator"]
