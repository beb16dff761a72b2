"""Move legality, jump resolution and win detection."""

from __future__ import annotations

from typing import Protocol

from snakes_ladders.board import Board


class Rules(Protocol):
    def is_legal_move(self, current: int, roll: int, board_size: int) -> bool: ...

    def resolve_move(self, current: int, roll: int, board: Board) -> int: ...

    def is_win(self, position: int, board_size: int) -> bool: ...


class StandardRules:
    """Exact roll to finish, one jump per move."""

    def is_legal_move(self, current: int, roll: int, board_size: int) -> bool:
        # Overshoot forfeits the turn
        return current + roll <= board_size

    def resolve_move(self, current: int, roll: int, board: Board) -> int:
        """Where the token ends up after landing on current + roll.

        A jump's destination is not checked for another entity — jumps
        never chain.
        """
        landed = current + roll
        entity = board.entity_at(landed)
        if entity is not None:
            return entity.end
        return landed

    def is_win(self, position: int, board_size: int) -> bool:
        return position == board_size
