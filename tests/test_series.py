"""Tests for snakes_ladders.series."""

import random

from snakes_ladders.board import Board
from snakes_ladders.dice import Dice
from snakes_ladders.layouts import StandardSetup
from snakes_ladders.notify import ListNotifier
from snakes_ladders.players import Player
from snakes_ladders.series import play_series

from fakes import ScriptedDice


def _standard_board() -> Board:
    b = Board(10)
    StandardSetup().populate(b)
    return b


def test_tallies_add_up_to_games_played():
    players = [Player("Alice"), Player("Bob"), Player("Carol")]
    result = play_series(players, _standard_board(), games=6, dice=Dice(rng=random.Random(3)))

    assert len(result.games) == 6
    assert all(g.reason == "win" for g in result.games)
    assert sum(result.tallies.values()) == 6
    assert result.tallies == {p.name: p.wins for p in players}


def test_opening_player_rotates():
    players = [Player("Alice"), Player("Bob")]
    result = play_series(players, _standard_board(), games=4, dice=Dice(rng=random.Random(11)))
    openers = [g.log[0].player for g in result.games]
    assert openers == ["Alice", "Bob", "Alice", "Bob"]


def test_positions_reset_between_games():
    """Tiny 2×2 board: a roll of 4 from the start wins outright."""
    players = [Player("Alice"), Player("Bob")]
    notifier = ListNotifier()
    result = play_series(
        players, Board(2), games=2, dice=ScriptedDice([4, 4]), notifiers=[notifier],
    )
    assert [g.winner for g in result.games] == ["Alice", "Bob"]
    assert result.tallies == {"Alice": 1, "Bob": 1}
    assert notifier.messages.count("Game initiated.") == 2


def test_series_needs_two_players():
    result = play_series([Player("Solo")], Board(10), games=3, dice=ScriptedDice([]))
    assert len(result.games) == 1
    assert result.games[0].reason == "insufficient_players"
    assert result.tallies == {"Solo": 0}
