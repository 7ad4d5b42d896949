"""Player progress persistence."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class Progress:
    current_level: int = 1
    completed_levels: list[int] = field(default_factory=list)
    total_moves: int = 0
    best_moves: dict[int, int] = field(default_factory=dict)


class ProgressManager:
    """Loads, saves, and updates player progress in a JSON file."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self.progress = Progress()
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if not self.filepath.exists():
            return
        data = json.loads(self.filepath.read_text())
        self.progress = Progress(
            current_level=int(data.get("current_level", 1)),
            completed_levels=sorted(int(v) for v in data.get("completed_levels", [])),
            total_moves=int(data.get("total_moves", 0)),
            best_moves={
                int(k): int(v) for k, v in data.get("best_moves", {}).items()
            },
        )

    def save(self) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        p = self.progress
        data = {
            "current_level": p.current_level,
            "completed_levels": p.completed_levels,
            "total_moves": p.total_moves,
            "best_moves": {str(k): v for k, v in sorted(p.best_moves.items())},
        }
        self.filepath.write_text(json.dumps(data, indent=2) + "\n")

    # -- updates --------------------------------------------------------------

    def mark_completed(self, level: int, moves: int) -> None:
        """Record a finished level and advance if it was the current one."""
        p = self.progress
        if level not in p.completed_levels:
            p.completed_levels.append(level)
            p.completed_levels.sort()
        if level == p.current_level:
            p.current_level = level + 1
        p.total_moves += moves
        best = p.best_moves.get(level)
        if best is None or moves < best:
            p.best_moves[level] = moves
        logger.debug("Level %d completed in %d moves", level, moves)
        self.save()

    def set_current_level(self, level: int) -> None:
        self.progress.current_level = level
        self.save()

    def reset(self) -> None:
        self.progress = Progress()
        self.save()

    # -- queries --------------------------------------------------------------

    def is_completed(self, level: int) -> bool:
        return level in self.progress.completed_levels

    def best_moves(self, level: int) -> int | None:
        return self.progress.best_moves.get(level)
