"""Player identity, position and win tally."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Player:
    name: str
    position: int = 0  # 0 = not yet on the board
    wins: int = 0

    def reset(self) -> None:
        """Back to the start for a fresh game. Wins are kept."""
        self.position = 0
