"""Core gameplay logic: applies player moves, undo, hints, win detection."""

from __future__ import annotations

from ballsort.engine.gamegenerator import LevelCache
from ballsort.engine.gamesolver import Solver
from ballsort.engine.gamestate import GameState
from ballsort.models.board import Board, Move


class GamePlay:
    """Orchestrates a single game session.

    The session owns its board; the level cache only ever hands out copies.
    """

    def __init__(self, level: int, cache: LevelCache | None = None) -> None:
        self.level: int | None = level
        self.cache = cache if cache is not None else LevelCache()
        board = self.cache.get(level)
        self._initial = board.copy()
        self.state = GameState(board)

    @classmethod
    def from_board(cls, board: Board, level: int | None = None) -> GamePlay:
        """Create a session from an existing board (e.g. loaded from file)."""
        obj = object.__new__(cls)
        obj.level = level
        obj.cache = None
        obj._initial = board.copy()
        obj.state = GameState(board)
        return obj

    # -- movement -------------------------------------------------------------

    def move(self, source: int, dest: int) -> bool:
        """Move one unit.  Returns True if the move was legal and applied."""
        if not self.state.board.apply_move(source, dest):
            return False
        self.state.record(Move(source, dest))
        return True

    def pour(self, source: int, dest: int) -> int:
        """Move the whole top run of *source*.

        Each unit is recorded separately, so ``undo`` steps back one unit.
        Returns the number of units moved.
        """
        moved = self.state.board.pour(source, dest)
        for _ in range(moved):
            self.state.record(Move(source, dest))
        return moved

    def undo(self) -> bool:
        """Revert the latest move.  Returns False if there is nothing to undo."""
        last = self.state.pop_move()
        if last is None:
            return False
        self.state.board.transfer(last.dest, last.source)
        return True

    def restart(self) -> None:
        self.state = GameState(self._initial.copy())

    # -- queries --------------------------------------------------------------

    def hint(self) -> Move | None:
        return Solver.hint(self.state.board)

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
