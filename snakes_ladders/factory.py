"""Ready-made games: standard, random, or with a caller-supplied setup."""

from __future__ import annotations

import random

from snakes_ladders.board import STANDARD_SIDE, Board
from snakes_ladders.dice import Dice, Roller
from snakes_ladders.game import Game
from snakes_ladders.layouts import BoardSetup, Difficulty, RandomizedSetup, StandardSetup


def build_board(side: int, setup: BoardSetup) -> Board:
    board = Board(side)
    setup.populate(board)
    return board


def new_standard_game(dice: Roller | None = None, max_turns: int | None = None) -> Game:
    board = build_board(STANDARD_SIDE, StandardSetup())
    return Game(board, dice=dice or Dice(), max_turns=max_turns)


def new_random_game(
    side: int,
    difficulty: Difficulty = Difficulty.MEDIUM,
    rng: random.Random | None = None,
    max_turns: int | None = None,
) -> Game:
    """Random layout and dice. Both share *rng*, so a seeded rng replays the game."""
    rng = rng or random.Random()
    board = build_board(side, RandomizedSetup(difficulty, rng=rng))
    return Game(board, dice=Dice(rng=rng), max_turns=max_turns)


def new_custom_game(
    side: int,
    setup: BoardSetup,
    dice: Roller | None = None,
    max_turns: int | None = None,
) -> Game:
    board = build_board(side, setup)
    return Game(board, dice=dice or Dice(), max_turns=max_turns)
