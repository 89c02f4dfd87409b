from npuzzle.engine.solver.search_queue import SearchQueue
from npuzzle.engine.solver.solver import Solver

__all__ = ["SearchQueue", "Solver"]
