"""Level generation parameters."""

from __future__ import annotations

from dataclasses import dataclass

from ballsort.errors import MalformedConfigError
from ballsort.models.board import PALETTE


@dataclass(frozen=True)
class LevelConfig:
    """Parameters for generating one level.  Validated on construction."""

    level_index: int
    num_colors: int
    num_empty_tubes: int
    shuffle_moves: int

    def __post_init__(self) -> None:
        if self.level_index < 1:
            raise MalformedConfigError(
                "Level index must be at least 1.",
                context={"level_index": self.level_index},
            )
        if not 1 <= self.num_colors <= len(PALETTE):
            raise MalformedConfigError(
                f"Colour count must be between 1 and {len(PALETTE)}.",
                context={"num_colors": self.num_colors},
            )
        if self.num_empty_tubes < 1:
            raise MalformedConfigError(
                "At least one empty tube is required.",
                context={"num_empty_tubes": self.num_empty_tubes},
            )
        if self.shuffle_moves < 0:
            raise MalformedConfigError(
                "Shuffle move target cannot be negative.",
                context={"shuffle_moves": self.shuffle_moves},
            )

    @property
    def total_tubes(self) -> int:
        return self.num_colors + self.num_empty_tubes

    def to_dict(self) -> dict[str, int]:
        return {
            "level_index": self.level_index,
            "num_colors": self.num_colors,
            "num_empty_tubes": self.num_empty_tubes,
            "shuffle_moves": self.shuffle_moves,
        }
