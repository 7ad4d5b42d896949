"""Forward-move analysis shared by validation, hints, and the solver."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from ballsort.models.board import TUBE_CAPACITY, Board, Move


def forward_moves(board: Board) -> list[Move]:
    """Return every legal single-unit move, ordered by source then dest."""
    n = len(board)
    return [
        Move(source, dest)
        for source in range(n)
        if board.tubes[source]
        for dest in range(n)
        if board.is_move_legal(source, dest)
    ]


def has_forward_move(board: Board) -> bool:
    """True unless *board* is a dead end."""
    n = len(board)
    return any(
        board.is_move_legal(source, dest)
        for source in range(n)
        for dest in range(n)
    )


@dataclass(frozen=True)
class BoardStats:
    total_tubes: int
    empty_tubes: int
    full_tubes: int
    total_units: int
    colors: int
    forward_moves: int

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


def board_stats(board: Board) -> BoardStats:
    return BoardStats(
        total_tubes=len(board),
        empty_tubes=board.empty_tube_count(),
        full_tubes=sum(1 for t in board.tubes if len(t) == TUBE_CAPACITY),
        total_units=sum(len(t) for t in board.tubes),
        colors=len(board.color_counts()),
        forward_moves=len(forward_moves(board)),
    )
