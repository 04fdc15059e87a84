from backend.engine.puzzlestate.state import PuzzleSnapshot, PuzzleState

__all__ = ["PuzzleSnapshot", "PuzzleState"]
