"""Repeated games between the same players, with a running win tally."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from snakes_ladders.board import Board
from snakes_ladders.dice import Dice, Roller
from snakes_ladders.game import Game, GameResult
from snakes_ladders.notify import Notifier
from snakes_ladders.players import Player

log = logging.getLogger(__name__)


@dataclass
class SeriesResult:
    games: list[GameResult] = field(default_factory=list)
    tallies: dict[str, int] = field(default_factory=dict)


def play_series(
    players: list[Player],
    board: Board,
    games: int,
    dice: Roller | None = None,
    max_turns: int | None = None,
    notifiers: Iterable[Notifier] = (),
) -> SeriesResult:
    """Play *games* games in a row on *board*.

    Positions reset before every game; wins accumulate on each Player.
    The opening player rotates so nobody always moves first.
    """
    dice = dice or Dice()
    notifiers = list(notifiers)
    result = SeriesResult()

    for i in range(games):
        game = Game(board, dice=dice, max_turns=max_turns)
        offset = i % len(players) if players else 0
        for player in players[offset:] + players[:offset]:
            player.reset()
            game.add_player(player)
        for notifier in notifiers:
            game.add_notifier(notifier)

        outcome = game.play()
        result.games.append(outcome)
        log.info("Game %d/%d: %s → %s", i + 1, games, outcome.reason, outcome.winner or "no winner")

        if outcome.reason == "insufficient_players":
            break

    result.tallies = {p.name: p.wins for p in players}
    return result
