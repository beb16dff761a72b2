"""Board setup strategies — the only code that puts entities on a Board."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable

from snakes_ladders.board import (
    STANDARD_LADDERS,
    STANDARD_SIDE,
    STANDARD_SNAKES,
    Board,
    BoardEntity,
    InvalidEntityError,
)

log = logging.getLogger(__name__)

PLACEMENT_ATTEMPTS = 50  # per entity slot in RandomizedSetup

# Lowest snake start, and the gap left above the highest ladder start
MIN_SNAKE_START = 10


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


SNAKE_PROBABILITY: dict[Difficulty, float] = {
    Difficulty.EASY: 0.3,
    Difficulty.MEDIUM: 0.5,
    Difficulty.HARD: 0.7,
}


@runtime_checkable
class BoardSetup(Protocol):
    """Anything that can populate a board in place."""

    def populate(self, board: Board) -> None: ...


# ── Random candidates ───────────────────────────────────────────────

def _has_random_range(cells: int) -> bool:
    return cells > MIN_SNAKE_START


def _snake_candidate(rng: random.Random, cells: int) -> tuple[int, int]:
    start = rng.randint(MIN_SNAKE_START, cells - 1)
    return start, rng.randint(1, start - 1)


def _ladder_candidate(rng: random.Random, cells: int) -> tuple[int, int]:
    start = rng.randint(1, cells - MIN_SNAKE_START)
    return start, rng.randint(start + 1, cells)


def _try_snake(board: Board, rng: random.Random) -> bool:
    start, end = _snake_candidate(rng, board.size())
    if not board.can_place(start):
        return False
    return board.place(BoardEntity.snake(start, end))


def _try_ladder(board: Board, rng: random.Random) -> bool:
    cells = board.size()
    start, end = _ladder_candidate(rng, cells)
    # Ladders never end on the final cell
    if not board.can_place(start) or end >= cells:
        return False
    return board.place(BoardEntity.ladder(start, end))


def _free_cells(board: Board, low: int, high: int) -> int:
    return sum(1 for cell in range(low, high + 1) if board.can_place(cell))


# ── Strategies ───────────────────────────────────────────────────────

@dataclass
class StandardSetup:
    """The classic 10×10 layout. Refuses (with a warning) any other size."""

    def populate(self, board: Board) -> None:
        expected = STANDARD_SIDE * STANDARD_SIDE
        if board.size() != expected:
            log.warning(
                "Standard configuration supports only a %dx%d board (%d cells), got %d cells.",
                STANDARD_SIDE, STANDARD_SIDE, expected, board.size(),
            )
            return

        for start, end in STANDARD_SNAKES:
            board.place(BoardEntity.snake(start, end))
        for start, end in STANDARD_LADDERS:
            board.place(BoardEntity.ladder(start, end))


@dataclass
class RandomizedSetup:
    """Roughly one entity per ten cells; *difficulty* skews toward snakes.

    A slot that can't find a free cell within PLACEMENT_ATTEMPTS is
    dropped, so the board may end up with fewer entities than planned.
    """

    difficulty: Difficulty = Difficulty.MEDIUM
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def populate(self, board: Board) -> None:
        cells = board.size()
        if not _has_random_range(cells):
            log.warning("Board of %d cells is too small for random placement.", cells)
            return

        p_snake = SNAKE_PROBABILITY[self.difficulty]
        for slot in range(cells // 10):
            attempt = _try_snake if self.rng.random() < p_snake else _try_ladder
            for _ in range(PLACEMENT_ATTEMPTS):
                if attempt(board, self.rng):
                    break
            else:
                log.debug("Gave up on entity slot %d after %d attempts.", slot, PLACEMENT_ATTEMPTS)


@dataclass
class CustomCountSetup:
    """Exact snake/ladder counts, placed randomly or at given positions.

    In random mode every requested entity is placed; there is no retry cap.
    In fixed mode, positions come from add_snake()/add_ladder() and any
    whose start cell is taken are skipped.
    """

    snake_count: int = 0
    ladder_count: int = 0
    random_placement: bool = True
    rng: random.Random = field(default_factory=random.Random, repr=False)
    snake_positions: list[tuple[int, int]] = field(default_factory=list)
    ladder_positions: list[tuple[int, int]] = field(default_factory=list)

    def add_snake(self, start: int, end: int) -> None:
        self.snake_positions.append((start, end))

    def add_ladder(self, start: int, end: int) -> None:
        self.ladder_positions.append((start, end))

    def populate(self, board: Board) -> None:
        if self.random_placement:
            self._populate_random(board)
        else:
            self._populate_fixed(board)

    def _populate_random(self, board: Board) -> None:
        cells = board.size()
        if not _has_random_range(cells):
            log.warning("Board of %d cells is too small for random placement.", cells)
            return

        free = _free_cells(board, MIN_SNAKE_START, cells - 1)
        if free < self.snake_count:
            log.warning("Only %d free cells for %d snakes; no snakes placed.", free, self.snake_count)
        else:
            placed = 0
            while placed < self.snake_count:
                if _try_snake(board, self.rng):
                    placed += 1

        free = _free_cells(board, 1, cells - MIN_SNAKE_START)
        if free < self.ladder_count:
            log.warning("Only %d free cells for %d ladders; no ladders placed.", free, self.ladder_count)
            return
        placed = 0
        while placed < self.ladder_count:
            if _try_ladder(board, self.rng):
                placed += 1

    def _populate_fixed(self, board: Board) -> None:
        for make, positions in (
            (BoardEntity.snake, self.snake_positions),
            (BoardEntity.ladder, self.ladder_positions),
        ):
            for start, end in positions:
                try:
                    entity = make(start, end)
                except InvalidEntityError as exc:
                    log.warning("%s Skipping it.", exc)
                    continue
                if not board.place(entity):
                    log.debug("Cell %d already holds an entity; skipping %s.", start, entity)
