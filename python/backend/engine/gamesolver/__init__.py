from backend.engine.gamesolver.node import SearchNode
from backend.engine.gamesolver.solver import SearchBudgetExceeded, Solver

__all__ = ["SearchBudgetExceeded", "SearchNode", "Solver"]
