from ballsort.engine.gamegenerator.cache import LevelCache
from ballsort.engine.gamegenerator.generator import GameGenerator
from ballsort.engine.gamegenerator.policy import config_for
from ballsort.engine.gamegenerator.reverse import (
    ScoredMove,
    candidate_reverse_moves,
    pick_weighted,
)
from ballsort.engine.gamegenerator.validator import is_valid, validation_failures

__all__ = [
    "GameGenerator",
    "LevelCache",
    "ScoredMove",
    "candidate_reverse_moves",
    "config_for",
    "is_valid",
    "pick_weighted",
    "validation_failures",
]
