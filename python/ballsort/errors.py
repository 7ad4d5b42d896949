"""Exception hierarchy for the ball sort engine.

Illegal moves are never exceptions: ``Board.is_move_legal`` and
``Board.apply_move`` answer with booleans.  Exceptions are reserved for
malformed input and for callers that ask generation to fail loudly.

Usage::

    from ballsort.errors import MalformedConfigError

    try:
        config = config_for(level)
    except MalformedConfigError as e:
        logger.warning("bad level: %s", e.message)
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "BallSortError",
    "GenerationExhaustedError",
    "MalformedBoardError",
    "MalformedConfigError",
]


class BallSortError(Exception):
    """Base exception for all ball sort errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable description
        context: Extra values for debugging
    """
    code: str = "BALLSORT_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


class MalformedConfigError(BallSortError, ValueError):
    """Level index or generation parameters out of range."""
    code: str = "MALFORMED_CONFIG"


class MalformedBoardError(BallSortError, ValueError):
    """Nested tube data that cannot form a board (e.g. an overfull tube)."""
    code: str = "MALFORMED_BOARD"


class GenerationExhaustedError(BallSortError, RuntimeError):
    """Every generation attempt produced an invalid board.

    Only raised when the caller asks for strict generation; the default
    policy degrades to an easier level instead.
    """
    code: str = "GENERATION_EXHAUSTED"
