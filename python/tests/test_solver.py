"""Forward-move analysis and solver tests.

Small hand-built boards are solved and the returned move list is replayed
through the real game session to verify correctness.
"""

from __future__ import annotations

import random

import pytest

from ballsort.engine.gamegenerator import GameGenerator, config_for
from ballsort.engine.gameplay.game import GamePlay
from ballsort.engine.gamesolver import Solver, board_stats, forward_moves, has_forward_move
from ballsort.models.board import Board, Move

A, B, C = "red", "blue", "green"


# -- helpers ------------------------------------------------------------------


def _assert_solve(tubes: list[list[str]]) -> None:
    """Solve the board and verify the returned moves reach the goal state."""
    board = Board.from_tubes(tubes)

    moves = Solver.solve(board)

    assert moves is not None, f"No solution found for {tubes}"
    assert all(isinstance(m, Move) for m in moves)

    game = GamePlay.from_board(board)
    for i, move in enumerate(moves):
        ok = game.move(move.source, move.dest)
        assert ok, f"Move {i} ({move}) was illegal on {game.state.board.tubes}"

    assert game.is_won, f"Board not solved after {len(moves)} moves"


# -- forward moves ------------------------------------------------------------


def test_forward_moves_in_index_order() -> None:
    board = Board.from_tubes([[A], [A, A, A], [], []])
    assert forward_moves(board) == [
        Move(0, 1), Move(0, 2), Move(0, 3),
        Move(1, 0), Move(1, 2), Move(1, 3),
    ]


def test_dead_end_has_no_forward_moves() -> None:
    board = Board.from_tubes([[A, B, A, B], [B, A, B, A]])
    assert forward_moves(board) == []
    assert not has_forward_move(board)


def test_forward_moves_are_all_legal() -> None:
    board = GameGenerator.solved(config_for(300))
    GameGenerator.scramble(board, 40, random.Random(3))
    moves = forward_moves(board)
    assert all(board.is_move_legal(m.source, m.dest) for m in moves)
    assert has_forward_move(board) == bool(moves)


def test_board_stats() -> None:
    board = Board.from_tubes([[A, B, A, A], [B, B, B, A], [], []])
    stats = board_stats(board)
    assert stats.total_tubes == 4
    assert stats.empty_tubes == 2
    assert stats.full_tubes == 2
    assert stats.total_units == 8
    assert stats.colors == 2
    assert stats.forward_moves == 4


# -- solver -------------------------------------------------------------------


def test_solved_board_needs_no_moves() -> None:
    board = Board.from_tubes([[A] * 4, [], []])
    assert Solver.solve(board) == []
    assert Solver.hint(board) is None


@pytest.mark.parametrize(
    "tubes",
    [
        [[A], [A, A, A], [], []],
        [[A, B, A, B], [B, A, B, A], [], []],
        [[A, A, B, B], [B, B, A, A], []],
        [[A, B, C, A], [C, B, A, B], [C, C, B, A], [], []],
    ],
    ids=["one-move", "two-colour-alternating", "one-spare", "three-colour"],
)
def test_solve_small_boards(tubes: list[list[str]]) -> None:
    _assert_solve(tubes)


def test_solve_generated_level() -> None:
    board = GameGenerator.generate(config_for(10), random.Random(11))
    _assert_solve(board.to_tubes())


def test_unsolvable_board_returns_none() -> None:
    board = Board.from_tubes([[A, B, A, B], [B, A, B, A]])
    assert Solver.solve(board) is None
    assert not Solver.is_solvable(board)
    assert Solver.hint(board) is None


def test_hint_is_legal() -> None:
    board = Board.from_tubes([[A, B, A, B], [B, A, B, A], [], []])
    hint = Solver.hint(board)
    assert hint is not None
    assert board.is_move_legal(hint.source, hint.dest)
