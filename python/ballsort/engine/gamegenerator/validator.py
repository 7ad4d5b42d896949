"""Quality checks for generated boards."""

from __future__ import annotations

from ballsort.engine.gamesolver.analyzer import has_forward_move
from ballsort.models.board import TUBE_CAPACITY, Board
from ballsort.models.level import LevelConfig


def validation_failures(board: Board, config: LevelConfig) -> list[str]:
    """Return a human-readable reason for every failed check (empty if valid)."""
    failures: list[str] = []

    complete = board.complete_tube_count()
    if complete:
        failures.append(f"{complete} tube(s) already sorted")

    if not has_forward_move(board):
        failures.append("no legal forward move")

    miscounted = sorted(
        color for color, count in board.color_counts().items()
        if count != TUBE_CAPACITY
    )
    if miscounted:
        failures.append(f"wrong unit count for {', '.join(miscounted)}")

    empty = board.empty_tube_count()
    if empty > config.num_empty_tubes:
        failures.append(
            f"{empty} empty tubes, expected at most {config.num_empty_tubes}"
        )

    return failures


def is_valid(board: Board, config: LevelConfig) -> bool:
    """True if *board* is an acceptable puzzle for *config*."""
    return not validation_failures(board, config)
