"""Generates ball sort levels by scrambling a solved board backwards."""

from __future__ import annotations

import logging
import random

from ballsort.engine.gamegenerator.policy import config_for
from ballsort.engine.gamegenerator.reverse import candidate_reverse_moves, pick_weighted
from ballsort.engine.gamegenerator.validator import validation_failures
from ballsort.errors import GenerationExhaustedError
from ballsort.models.board import PALETTE, TUBE_CAPACITY, Board
from ballsort.models.level import LevelConfig

logger = logging.getLogger(__name__)

MAX_RETRIES = 3
ATTEMPTS_PER_MOVE = 3
EXCLUSION_RESET_EVERY = 10
MIN_SCRAMBLE_RATIO = 0.7
TOP_UP_RATIO = 0.3
FALLBACK_LEVEL_STEP = 10


class GameGenerator:
    """Creates puzzles by applying weighted reverse moves to a solved board.

    Every call draws from the ``random.Random`` it is given, so a seeded
    generator reproduces the same levels.
    """

    @staticmethod
    def solved(config: LevelConfig) -> Board:
        """Return the goal-state board: one full tube per colour, then empties."""
        tubes = [[PALETTE[i]] * TUBE_CAPACITY for i in range(config.num_colors)]
        tubes.extend([] for _ in range(config.num_empty_tubes))
        return Board(tubes=tubes)

    @staticmethod
    def scramble(board: Board, shuffle_moves: int, rng: random.Random) -> int:
        """Scramble *board* in-place.  Returns the number of moves applied."""
        exclude_source: int | None = None
        exclude_dest: int | None = None
        applied = 0
        attempts = 0
        max_attempts = shuffle_moves * ATTEMPTS_PER_MOVE

        while applied < shuffle_moves and attempts < max_attempts:
            attempts += 1
            candidates = candidate_reverse_moves(board, exclude_source, exclude_dest)
            if not candidates:
                if attempts % EXCLUSION_RESET_EVERY == 0:
                    exclude_source = exclude_dest = None
                continue

            choice = pick_weighted(candidates, rng)
            board.transfer(choice.source, choice.dest)
            # Block the exact undo of this move on the next step.
            exclude_source, exclude_dest = choice.dest, choice.source
            applied += 1

        if applied < shuffle_moves * MIN_SCRAMBLE_RATIO:
            logger.debug(
                "Only %d/%d scramble moves, topping up", applied, shuffle_moves
            )
            for _ in range(int(shuffle_moves * TOP_UP_RATIO)):
                choice = pick_weighted(candidate_reverse_moves(board), rng)
                if choice is not None:
                    board.transfer(choice.source, choice.dest)
                    applied += 1

        return applied

    @staticmethod
    def generate(
        config: LevelConfig,
        rng: random.Random | None = None,
        strict: bool = False,
    ) -> Board:
        """Return a validated scrambled board for *config*.

        After ``MAX_RETRIES`` invalid boards, either raise
        ``GenerationExhaustedError`` (*strict*) or return an unvalidated
        board built from an earlier level's parameters.
        """
        rng = rng if rng is not None else random.Random()

        for attempt in range(1, MAX_RETRIES + 1):
            board = GameGenerator.solved(config)
            GameGenerator.scramble(board, config.shuffle_moves, rng)
            failures = validation_failures(board, config)
            if not failures:
                return board
            logger.debug(
                "Level %d attempt %d rejected: %s",
                config.level_index, attempt, "; ".join(failures),
            )

        if strict:
            raise GenerationExhaustedError(
                f"No valid board after {MAX_RETRIES} attempts.",
                context=config.to_dict(),
            )
        return GameGenerator._fallback(config, rng)

    @staticmethod
    def generate_level(
        level_index: int,
        rng: random.Random | None = None,
        strict: bool = False,
    ) -> Board:
        """Shortcut for ``generate(config_for(level_index))``."""
        rng = rng if rng is not None else random.Random()
        return GameGenerator.generate(config_for(level_index, rng), rng, strict)

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _fallback(config: LevelConfig, rng: random.Random) -> Board:
        easier = config_for(max(1, config.level_index - FALLBACK_LEVEL_STEP), rng)
        board = GameGenerator.solved(easier)
        # Half the easier target, rounded up so the board is never left solved.
        GameGenerator.scramble(board, -(-easier.shuffle_moves // 2), rng)
        logger.warning(
            "Level %d fell back to level %d parameters (unvalidated board)",
            config.level_index, easier.level_index,
        )
        return board
