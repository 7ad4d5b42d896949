"""Ball sort solver."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ballsort.engine.gamesolver.analyzer import forward_moves
from ballsort.models.board import Board, Move, is_tube_complete, is_tube_uniform

logger = logging.getLogger(__name__)

DEFAULT_MAX_STATES = 20_000


def _state_key(board: Board) -> tuple[tuple[str, ...], ...]:
    # Tube order is irrelevant to solvability.
    return tuple(sorted(tuple(tube) for tube in board.tubes))


class Solver:
    """Stateless solver: depth-first search with a state budget.

    Solutions are valid but not optimal.
    """

    @staticmethod
    def solve(board: Board, max_states: int = DEFAULT_MAX_STATES) -> list[Move] | None:
        """Return a move list that solves *board*.

        ``[]`` if already solved, ``None`` if no solution was found within
        *max_states* distinct positions (or the search space ran out).
        """
        if board.is_solved():
            return []

        work = board.copy()
        seen = {_state_key(work)}
        path: list[Move] = []
        frames: list[Iterator[Move]] = [iter(Solver._useful_moves(work))]

        while frames:
            move = next(frames[-1], None)
            if move is None:
                frames.pop()
                if path:
                    last = path.pop()
                    work.transfer(last.dest, last.source)
                continue

            work.transfer(move.source, move.dest)
            key = _state_key(work)
            if key in seen:
                work.transfer(move.dest, move.source)
                continue

            path.append(move)
            if work.is_solved():
                logger.debug("Solved in %d moves after %d states", len(path), len(seen))
                return path
            seen.add(key)
            if len(seen) >= max_states:
                logger.debug("Search budget of %d states exhausted", max_states)
                return None
            frames.append(iter(Solver._useful_moves(work)))

        return None

    @staticmethod
    def hint(board: Board, max_states: int = DEFAULT_MAX_STATES) -> Move | None:
        """Return a suggested next move, or ``None`` if solved / stuck.

        Prefers the first step of a found solution and falls back to the
        first legal move.
        """
        if board.is_solved():
            return None

        moves = Solver.solve(board, max_states)
        if moves:
            return moves[0]

        legal = forward_moves(board)
        return legal[0] if legal else None

    @staticmethod
    def is_solvable(board: Board, max_states: int = DEFAULT_MAX_STATES) -> bool:
        """True if a solution is found within the search budget."""
        return Solver.solve(board, max_states) is not None

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _useful_moves(board: Board) -> list[Move]:
        moves: list[Move] = []
        for move in forward_moves(board):
            src = board.tubes[move.source]
            if is_tube_complete(src):
                continue
            # Splitting a single-colour tube into an empty one gains nothing.
            if not board.tubes[move.dest] and is_tube_uniform(src):
                continue
            moves.append(move)
        return moves
