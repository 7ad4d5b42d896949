from ballsort.engine.gamesolver.analyzer import (
    BoardStats,
    board_stats,
    forward_moves,
    has_forward_move,
)
from ballsort.engine.gamesolver.solver import Solver

__all__ = ["BoardStats", "Solver", "board_stats", "forward_moves", "has_forward_move"]
