from backend.engine.solver.solver import Search, Solver

__all__ = ["Search", "Solver"]
