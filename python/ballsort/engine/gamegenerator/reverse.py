"""Reverse-move candidates for scrambling a solved board.

A reverse move ignores the colour rule: any unit may go onto any tube
with room.  Candidates carry a heuristic score used as a sampling weight,
biasing the scramble towards breaking up sorted stacks and away from
dumping units into empty tubes.
"""

from __future__ import annotations

import itertools
import random
from dataclasses import dataclass

from ballsort.models.board import TUBE_CAPACITY, Board, Move, is_tube_complete

EMPTY_DEST_FACTOR = 0.3
BREAK_SORTED_FACTOR = 2.0
MATCHING_TOP_FACTOR = 0.7


@dataclass(frozen=True)
class ScoredMove:
    source: int
    dest: int
    score: float

    @property
    def move(self) -> Move:
        return Move(self.source, self.dest)


def candidate_reverse_moves(
    board: Board,
    exclude_source: int | None = None,
    exclude_dest: int | None = None,
) -> list[ScoredMove]:
    """Enumerate scored reverse moves, skipping the excluded source tube.

    *exclude_source* / *exclude_dest* describe the move that would undo the
    previous scramble step.  ``None`` means no exclusion.
    """
    tubes = board.tubes
    n = len(tubes)
    candidates: list[ScoredMove] = []

    for source in range(n):
        src = tubes[source]
        if not src or source == exclude_source:
            continue
        unit = src[-1]
        breaks_sorted = is_tube_complete(src)

        for dest in range(n):
            dst = tubes[dest]
            if dest == source or len(dst) >= TUBE_CAPACITY:
                continue
            if source == exclude_source and dest == exclude_dest:
                continue

            score = 1.0
            if not dst and _has_partial_alternative(tubes, source, dest):
                score *= EMPTY_DEST_FACTOR
            if breaks_sorted:
                score *= BREAK_SORTED_FACTOR
            if dst and dst[-1] == unit:
                score *= MATCHING_TOP_FACTOR
            candidates.append(ScoredMove(source, dest, score))

    return candidates


def pick_weighted(
    candidates: list[ScoredMove],
    rng: random.Random | None = None,
) -> ScoredMove | None:
    """Pick one candidate with probability proportional to its score."""
    if not candidates:
        return None
    rng = rng or random
    cumulative = list(itertools.accumulate(c.score for c in candidates))
    r = rng.random() * cumulative[-1]
    for candidate, bound in zip(candidates, cumulative):
        if r < bound:
            return candidate
    return candidates[-1]


def _has_partial_alternative(tubes: list[list[str]], source: int, dest: int) -> bool:
    """True if some other tube is non-empty with room to spare."""
    return any(
        0 < len(t) < TUBE_CAPACITY
        for i, t in enumerate(tubes)
        if i != source and i != dest
    )
