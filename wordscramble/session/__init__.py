from .core import GameSession, SessionState, SessionStateError, Puzzle, RoundOutcome

__all__ = ["GameSession", "SessionState", "SessionStateError", "Puzzle", "RoundOutcome"]
