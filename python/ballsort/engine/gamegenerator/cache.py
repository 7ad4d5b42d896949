"""Per-level board cache with on-demand generation and JSON export."""

from __future__ import annotations

import json
import logging
import random
import threading
from pathlib import Path

from ballsort.engine.gamegenerator.generator import GameGenerator
from ballsort.errors import MalformedBoardError
from ballsort.models.board import Board

logger = logging.getLogger(__name__)


class LevelCache:
    """Generated boards keyed by level index.

    Each level is stored at most once; later inserts for the same key keep
    the first board.  Callers always receive copies, so playing a level
    never changes the cached puzzle.
    """

    def __init__(self, rng: random.Random | None = None, strict: bool = False) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.strict = strict
        self._levels: dict[int, Board] = {}
        self._lock = threading.Lock()

    # -- access ---------------------------------------------------------------

    def get(self, level: int) -> Board:
        """Return the board for *level*, generating it on first request."""
        with self._lock:
            cached = self._levels.get(level)
        if cached is None:
            logger.debug("Generating level %d on demand", level)
            cached = self.put(
                level, GameGenerator.generate_level(level, self.rng, self.strict)
            )
        return cached.copy()

    def put(self, level: int, board: Board) -> Board:
        """Insert *board* unless *level* is already cached; return the stored board."""
        with self._lock:
            return self._levels.setdefault(level, board.copy())

    def pre_generate(self, start: int, count: int) -> None:
        for level in range(start, start + count):
            self.get(level)
        logger.info("Pre-generated levels %d-%d", start, start + count - 1)

    def clear(self) -> None:
        with self._lock:
            self._levels.clear()
        logger.debug("Level cache cleared")

    def levels(self) -> list[int]:
        with self._lock:
            return sorted(self._levels)

    def __contains__(self, level: object) -> bool:
        with self._lock:
            return level in self._levels

    def __len__(self) -> int:
        with self._lock:
            return len(self._levels)

    # -- persistence ----------------------------------------------------------

    def to_dict(self) -> dict[str, dict[str, list[list[str]]]]:
        with self._lock:
            return {
                str(level): {"tubes": board.to_tubes()}
                for level, board in sorted(self._levels.items())
            }

    def export_json(self, filepath: Path) -> None:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        filepath.write_text(json.dumps(self.to_dict(), indent=2) + "\n")
        logger.info("Exported %d levels to %s", len(self), filepath)

    @classmethod
    def load_json(cls, filepath: Path, rng: random.Random | None = None) -> LevelCache:
        """Build a cache from a file written by ``export_json``."""
        try:
            data = json.loads(filepath.read_text())
        except json.JSONDecodeError as e:
            raise MalformedBoardError(
                f"Level file is not valid JSON: {e.msg}",
                context={"path": str(filepath), "line": e.lineno},
            ) from e
        if not isinstance(data, dict):
            raise MalformedBoardError(
                "Level file must map level numbers to boards.",
                context={"path": str(filepath)},
            )
        cache = cls(rng=rng)
        for key, entry in data.items():
            try:
                level = int(key)
                board = Board.from_tubes(entry["tubes"])
            except MalformedBoardError as e:
                e.context.update(path=str(filepath), level=key)
                raise
            except (ValueError, KeyError, TypeError) as e:
                raise MalformedBoardError(
                    f"Bad level entry: {e!r}",
                    context={"path": str(filepath), "level": key},
                ) from e
            cache.put(level, board)
        return cache
