"""Game engine — owns the turn queue and drives the play loop."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field

from snakes_ladders.board import Board, BoardEntity, EntityKind
from snakes_ladders.dice import Dice, Roller
from snakes_ladders.notify import Notifier
from snakes_ladders.players import Player
from snakes_ladders.rules import Rules, StandardRules

log = logging.getLogger(__name__)

MIN_PLAYERS = 2


# ── Structured types ────────────────────────────────────────────────

@dataclass
class TurnRecord:
    """What happened during a single turn."""

    turn_number: int
    player: str
    roll: int
    start: int
    end: int
    landed: int | None = None  # None when the roll overshot
    entity: BoardEntity | None = None
    outcome: str = "moved"  # "moved" | "forfeited" | "won"


@dataclass
class GameResult:
    winner: str | None
    reason: str  # "win" | "insufficient_players" | "max_turns"
    turns: int = 0
    log: list[TurnRecord] = field(default_factory=list)


# ── Engine ───────────────────────────────────────────────────────────

class Game:
    """One game on a fully populated board.

    Players take turns from the front of ``turn_queue``; after a turn
    that doesn't win, the active player goes to the back. ``game_over``
    flips once, on the winning move, and stays set.
    """

    def __init__(
        self,
        board: Board,
        dice: Roller | None = None,
        rules: Rules | None = None,
        max_turns: int | None = None,
    ):
        self.board = board
        self.dice = dice or Dice()
        self.rules = rules or StandardRules()
        self.max_turns = max_turns
        self.turn_queue: deque[Player] = deque()
        self.notifiers: list[Notifier] = []
        self.game_over = False
        self.winner: Player | None = None
        self.turn_number = 0
        self.log: list[TurnRecord] = []
        self._started = False

    def add_player(self, player: Player) -> None:
        self.turn_queue.append(player)

    def add_notifier(self, notifier: Notifier) -> None:
        self.notifiers.append(notifier)

    def notify(self, message: str) -> None:
        for notifier in self.notifiers:
            notifier.receive(message)

    def positions(self) -> dict[str, int]:
        return {p.name: p.position for p in self.turn_queue}

    def play(self) -> GameResult:
        """Run turns until someone wins (or ``max_turns`` is reached)."""
        if len(self.turn_queue) < MIN_PLAYERS:
            log.warning(
                "A minimum of %d players is required to start the game (have %d).",
                MIN_PLAYERS, len(self.turn_queue),
            )
            return GameResult(winner=None, reason="insufficient_players")

        if not self._started:
            self._started = True
            self.notify("Game initiated.")

        while not self.game_over:
            if self.max_turns is not None and self.turn_number >= self.max_turns:
                return GameResult(
                    winner=None, reason="max_turns",
                    turns=self.turn_number, log=list(self.log),
                )
            self.play_turn()

        return GameResult(
            winner=self.winner.name, reason="win",
            turns=self.turn_number, log=list(self.log),
        )

    def play_turn(self) -> TurnRecord | None:
        """Run one player's turn. Returns None if no turn could be played."""
        if self.game_over or len(self.turn_queue) < MIN_PLAYERS:
            return None

        player = self.turn_queue[0]
        roll = self.dice.roll()
        start = player.position
        size = self.board.size()
        self.turn_number += 1
        log.debug("Turn %d: %s on %d rolled %d", self.turn_number, player.name, start, roll)

        if not self.rules.is_legal_move(start, roll, size):
            self.notify(f"{player.name} rolled {roll}. Exact roll required to reach cell {size}.")
            self._rotate()
            return self._record(TurnRecord(
                turn_number=self.turn_number, player=player.name, roll=roll,
                start=start, end=start, outcome="forfeited",
            ))

        landed = start + roll
        new_pos = self.rules.resolve_move(start, roll, self.board)
        player.position = new_pos

        entity = self.board.entity_at(landed)
        if entity is not None:
            if entity.kind is EntityKind.SNAKE:
                self.notify(
                    f"{player.name} encountered a snake at {landed} and moved down to {new_pos}"
                )
            else:
                self.notify(
                    f"{player.name} encountered a ladder at {landed} and moved up to {new_pos}"
                )

        self.notify(f"{player.name} completed a move. Current position: {new_pos}")

        record = TurnRecord(
            turn_number=self.turn_number, player=player.name, roll=roll,
            start=start, end=new_pos, landed=landed, entity=entity,
        )

        if self.rules.is_win(new_pos, size):
            player.wins += 1
            self.winner = player
            self.notify(f"Game concluded. Winner: {player.name}")
            self.game_over = True
            record.outcome = "won"
        else:
            self._rotate()

        return self._record(record)

    def _rotate(self) -> None:
        self.turn_queue.append(self.turn_queue.popleft())

    def _record(self, record: TurnRecord) -> TurnRecord:
        self.log.append(record)
        return record
