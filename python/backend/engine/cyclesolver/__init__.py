from backend.engine.cyclesolver.solver import CycleSolver

__all__ = ["CycleSolver"]
