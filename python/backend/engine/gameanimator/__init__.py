from backend.engine.gameanimator.player import STEP_DELAY, SolutionPlayer

__all__ = ["STEP_DELAY", "SolutionPlayer"]
