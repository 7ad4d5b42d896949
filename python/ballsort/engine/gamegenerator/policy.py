"""Maps a level index to generation parameters (progressive difficulty)."""

from __future__ import annotations

import random
from dataclasses import dataclass

from ballsort.errors import MalformedConfigError
from ballsort.models.level import LevelConfig

MAX_COLORS = 14
MAX_SHUFFLE_MOVES = 250
MIN_EMPTY_TUBES = 1
DEFAULT_EMPTY_TUBES = 2


@dataclass(frozen=True)
class Band:
    """A range of levels sharing one growth formula.

    Colours grow by one every ``color_step`` levels into the band and the
    shuffle target by one every ``shuffle_step`` levels.
    """

    first: int
    last: int | None
    color_base: int
    color_step: int
    shuffle_base: int
    shuffle_step: int
    single_empty_chance: float = 0.0

    def contains(self, level: int) -> bool:
        return level >= self.first and (self.last is None or level <= self.last)

    def colors(self, level: int) -> int:
        return self.color_base + (level - self.first + 1) // self.color_step

    def shuffle_moves(self, level: int) -> int:
        return self.shuffle_base + (level - self.first + 1) // self.shuffle_step


BANDS: tuple[Band, ...] = (
    Band(1, 50, 2, 25, 5, 3),
    Band(51, 200, 3, 40, 15, 5),
    Band(201, 500, 5, 60, 30, 6),
    Band(501, 1000, 7, 100, 50, 8),
    Band(1001, 2000, 9, 200, 80, 10, single_empty_chance=0.3),
    Band(2001, None, 11, 500, 120, 15, single_empty_chance=0.6),
)


def config_for(level_index: int, rng: random.Random | None = None) -> LevelConfig:
    """Return the generation parameters for a 1-based *level_index*.

    Each band's values never fall below where the previous band ended, so
    colours and shuffle target are non-decreasing in the level index.  The
    empty-tube count is random in the last two bands; pass a seeded *rng*
    to pin it.  Nothing else is random.

    Raises:
        MalformedConfigError: if *level_index* is not an int >= 1.
    """
    if isinstance(level_index, bool) or not isinstance(level_index, int):
        raise MalformedConfigError(
            "Level index must be an integer.",
            context={"level_index": level_index},
        )
    if level_index < 1:
        raise MalformedConfigError(
            "Level index must be at least 1.",
            context={"level_index": level_index},
        )

    floor_colors = 0
    floor_shuffle = 0
    for band in BANDS:
        if not band.contains(level_index):
            # Bands are ordered, so every skipped band lies below the level.
            floor_colors = max(floor_colors, band.colors(band.last))
            floor_shuffle = max(floor_shuffle, band.shuffle_moves(band.last))
            continue

        num_colors = max(band.colors(level_index), floor_colors)
        shuffle_moves = max(band.shuffle_moves(level_index), floor_shuffle)
        num_empty = DEFAULT_EMPTY_TUBES
        if band.single_empty_chance:
            draw = rng.random() if rng is not None else random.random()
            if draw < band.single_empty_chance:
                num_empty = 1
        break

    return LevelConfig(
        level_index=level_index,
        num_colors=min(num_colors, MAX_COLORS),
        num_empty_tubes=max(MIN_EMPTY_TUBES, num_empty),
        shuffle_moves=min(shuffle_moves, MAX_SHUFFLE_MOVES),
    )
