from ballsort.models.board import (
    PALETTE,
    TUBE_CAPACITY,
    Board,
    Move,
    is_tube_complete,
    is_tube_uniform,
)
from ballsort.models.level import LevelConfig
from ballsort.models.progress import Progress, ProgressManager

__all__ = [
    "PALETTE",
    "TUBE_CAPACITY",
    "Board",
    "LevelConfig",
    "Move",
    "Progress",
    "ProgressManager",
    "is_tube_complete",
    "is_tube_uniform",
]
