"""Board model for the ball sort game."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from ballsort.errors import MalformedBoardError

TUBE_CAPACITY = 4

PALETTE: tuple[str, ...] = (
    "red", "blue", "green", "yellow", "purple", "orange",
    "pink", "cyan", "lime", "indigo",
    "teal", "magenta", "navy", "maroon", "olive", "coral",
)


@dataclass(frozen=True)
class Move:
    """Move one unit from the top of ``source`` onto ``dest``."""

    source: int
    dest: int

    def reversed(self) -> Move:
        return Move(self.dest, self.source)


def is_tube_uniform(tube: Sequence[str]) -> bool:
    """True if every unit in *tube* is the same colour (empty counts)."""
    return all(unit == tube[0] for unit in tube)


def is_tube_complete(tube: Sequence[str]) -> bool:
    """True if *tube* is full and single-coloured."""
    return len(tube) == TUBE_CAPACITY and is_tube_uniform(tube)


@dataclass
class Board:
    """Represents the tubes of one puzzle.

    Each tube is a list of colour labels, bottom first; the last element
    is the top.  The number of tubes is fixed once the board is built.
    """

    tubes: list[list[str]]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_tubes(cls, tubes: Sequence[Sequence[str]]) -> Board:
        """Create a board from a nested tube structure (deep-copied).

        Example::

            Board.from_tubes([["red", "blue"], ["blue", "red"], [], []])
        """
        copied: list[list[str]] = []
        for i, tube in enumerate(tubes):
            if isinstance(tube, str):
                raise MalformedBoardError(
                    "Tube must be a sequence of colour labels, got a string.",
                    context={"tube": i},
                )
            if len(tube) > TUBE_CAPACITY:
                raise MalformedBoardError(
                    f"Tube holds {len(tube)} units, capacity is {TUBE_CAPACITY}.",
                    context={"tube": i},
                )
            copied.append([str(unit) for unit in tube])
        return cls(tubes=copied)

    def to_tubes(self) -> list[list[str]]:
        """Return the nested list form used for JSON transport."""
        return [tube[:] for tube in self.tubes]

    # -- queries --------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.tubes)

    def top(self, index: int) -> str | None:
        tube = self.tubes[index]
        return tube[-1] if tube else None

    def is_move_legal(self, source: int, dest: int) -> bool:
        """Check whether one unit may move from *source* onto *dest*.

        Never raises: bad indices and self-moves are simply illegal.
        """
        n = len(self.tubes)
        if source == dest or not (0 <= source < n and 0 <= dest < n):
            return False
        src, dst = self.tubes[source], self.tubes[dest]
        if not src or len(dst) >= TUBE_CAPACITY:
            return False
        if not dst:
            return True
        return src[-1] == dst[-1]

    def is_solved(self) -> bool:
        """Check if every tube is either empty or full of one colour."""
        return all(not tube or is_tube_complete(tube) for tube in self.tubes)

    def empty_tube_count(self) -> int:
        return sum(1 for tube in self.tubes if not tube)

    def complete_tube_count(self) -> int:
        return sum(1 for tube in self.tubes if is_tube_complete(tube))

    def color_counts(self) -> Counter[str]:
        return Counter(unit for tube in self.tubes for unit in tube)

    # -- mutation -------------------------------------------------------------

    def apply_move(self, source: int, dest: int) -> bool:
        """Move a single unit.  Returns False (board untouched) if illegal."""
        if not self.is_move_legal(source, dest):
            return False
        self.tubes[dest].append(self.tubes[source].pop())
        return True

    def transfer(self, source: int, dest: int) -> None:
        """Pop the top unit of *source* and push it onto *dest*.

        Ignores the colour rule; only capacity is enforced.  Used for
        reverse moves while scrambling and for undo.
        """
        if not self.tubes[source]:
            raise IndexError(f"Tube {source} is empty.")
        if len(self.tubes[dest]) >= TUBE_CAPACITY:
            raise IndexError(f"Tube {dest} is full.")
        self.tubes[dest].append(self.tubes[source].pop())

    def pour(self, source: int, dest: int) -> int:
        """Move the whole top run of *source* as far as *dest* has room.

        Returns the number of units moved (0 when the first move is illegal).
        """
        if not self.is_move_legal(source, dest):
            return 0
        color = self.tubes[source][-1]
        moved = 0
        while self.top(source) == color and self.apply_move(source, dest):
            moved += 1
        return moved

    def copy(self) -> Board:
        return Board(tubes=self.to_tubes())
