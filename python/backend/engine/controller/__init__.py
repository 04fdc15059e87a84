from backend.engine.controller.controller import PuzzleController, parse_size

__all__ = ["PuzzleController", "parse_size"]
